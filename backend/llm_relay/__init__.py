"""LLM Relay — stateless prompt forwarding to hosted LLM providers.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
