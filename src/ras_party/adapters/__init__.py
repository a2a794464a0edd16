"""Adapters – HTTP client and FastAPI integration."""
