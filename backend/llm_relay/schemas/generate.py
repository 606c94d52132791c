"""Generate Schemas — the prompt-in / text-out shapes shared by every provider.

Invariants:
    - GenerateRequest accepts systemInstruction (wire name) or system_instruction
    - Unknown request fields ignored; non-string prompt values rejected
    - GenerateResponse.raw only present when the provider returned no text
"""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class GenerateRequest(BaseModel):
    """Inbound prompt. Both fields optional here; at least one is required downstream."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    prompt: str | None = None
    system_instruction: str | None = Field(
        None,
        validation_alias=AliasChoices("systemInstruction", "system_instruction"),
    )

    @property
    def is_empty(self) -> bool:
        return not self.prompt and not self.system_instruction


class GenerateResponse(BaseModel):
    """Generated text, or empty text plus the raw provider body."""
    text: str
    raw: Any | None = None

    def to_response(self) -> dict:
        """Wire body; `raw` passed through verbatim (nulls inside it kept)."""
        if self.raw is None:
            return {"text": self.text}
        return {"text": self.text, "raw": self.raw}
