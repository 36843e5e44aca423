"""Factories for test data generation."""

from tests.factories.user_factory import (
    UserFactory,
    UserFollowFactory,
    create_follow_edge,
    create_user,
    fake,
)

__all__ = [
    "UserFactory",
    "UserFollowFactory",
    "create_follow_edge",
    "create_user",
    "fake",
]
