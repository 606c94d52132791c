"""Schemas — Pydantic models for the REST boundary."""
