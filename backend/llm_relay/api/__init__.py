"""API Layer — routes and global error handlers.

Invariants:
    - Routes delegate to services/ (no provider logic in handlers)
"""
