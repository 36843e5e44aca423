"""Enumerations for the core app."""

from core.enums.follow_result import FollowResult
from core.enums.health_status import HealthStatus
from core.enums.network_relationship import NetworkRelationship
from core.enums.user_type import UserType

__all__ = ["FollowResult", "HealthStatus", "NetworkRelationship", "UserType"]
