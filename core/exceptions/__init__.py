"""Exception handling utilities for the network service."""

from core.exceptions.follow_exceptions import (
    FollowGraphError,
    FollowStorageError,
    InvalidFollowOperationError,
    UserNotFoundError,
)
from core.exceptions.handlers import custom_exception_handler

__all__ = [
    "FollowGraphError",
    "FollowStorageError",
    "InvalidFollowOperationError",
    "UserNotFoundError",
    "custom_exception_handler",
]
