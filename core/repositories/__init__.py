"""Repositories for the user directory and follow edge store."""

from core.repositories.follow_repository import FollowRepository
from core.repositories.user_repository import UserRepository

__all__ = ["FollowRepository", "UserRepository"]
