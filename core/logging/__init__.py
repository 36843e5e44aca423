"""Logging utilities for the network service."""

from core.logging.config import setup_logging, setup_test_logging
from core.logging.context import clear_request_id, get_request_id, set_request_id

__all__ = [
    "clear_request_id",
    "get_request_id",
    "set_request_id",
    "setup_logging",
    "setup_test_logging",
]
