"""HTTP adapter – async HTTP client wrapper."""
from ras_party.adapters.http.client import HttpClient, HttpxHttpClient

__all__ = ["HttpClient", "HttpxHttpClient"]
