"""Pydantic models and pipeline records."""
