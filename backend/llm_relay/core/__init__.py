"""Core Layer — pure provider logic: payload shapes, response reading, errors.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - All functions are pure and deterministic (no IO, no async)
"""
