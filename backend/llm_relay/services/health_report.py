"""Health Report — which provider keys are configured, without revealing them."""

from collections.abc import Iterable

from llm_relay.config import Settings
from llm_relay.core.domain_types import KeyStatus
from llm_relay.core.provider_registry import ProviderSpec


def report_key_status(
    settings: Settings, specs: Iterable[ProviderSpec],
) -> dict[str, KeyStatus]:
    """Map each spec's key env var to present/missing."""
    return {
        spec.key_env_var: (
            KeyStatus.PRESENT if getattr(settings, spec.key_setting)
            else KeyStatus.MISSING
        )
        for spec in specs
    }
