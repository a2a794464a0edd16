"""Observability – structured logging helpers."""
from ras_party.observability.logging.factory import JsonLoggerFactory
from ras_party.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
