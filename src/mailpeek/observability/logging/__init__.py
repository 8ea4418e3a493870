"""Observability – structured logging helpers."""
from mailpeek.observability.logging.factory import JsonLoggerFactory
from mailpeek.observability.logging.processors import add_package_version, get_logger

__all__ = [
    "JsonLoggerFactory",
    "add_package_version",
    "get_logger",
]
