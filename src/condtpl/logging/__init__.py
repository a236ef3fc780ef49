"""Logging helpers for condtpl (namespaced stdlib loggers)."""
from condtpl.logging.factory import DefaultLoggerFactory
from condtpl.logging.helpers import JsonLogFormatter, get_logger, setup_base_logger, trace

__all__ = [
    "DefaultLoggerFactory",
    "JsonLogFormatter",
    "get_logger",
    "setup_base_logger",
    "trace",
]
