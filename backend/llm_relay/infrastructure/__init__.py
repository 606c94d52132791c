"""Infrastructure Layer — outbound provider calls and logging setup.

Invariants:
    - Infrastructure imports core/ types only, never services/ or api/
    - Transport failures mapped to ProviderTransportError (core/errors.py)
"""
