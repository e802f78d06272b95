"""Observability – structured logging helpers."""
from trackable_entities.observability.logging.factory import JsonLoggerFactory
from trackable_entities.observability.logging.processors import get_logger

__all__ = [
    "JsonLoggerFactory",
    "get_logger",
]
