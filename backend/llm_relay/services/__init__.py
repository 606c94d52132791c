"""Services Layer — the single request flow shared by every provider."""
