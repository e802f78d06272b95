"""Observability – structured logging."""
from trackable_entities.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
