"""User model."""

import uuid
from typing import ClassVar

from django.db import models

from core.enums import UserType


class User(models.Model):
    """User model matching the athlinked users table.

    This model is unmanaged as the database schema is owned by the account
    service. The network service only writes the followers and following
    counters, and only through the follow graph service.
    """

    user_id = models.UUIDField(
        primary_key=True, default=uuid.uuid4, editable=False, db_column="id"
    )
    user_type = models.CharField(
        max_length=20,
        choices=[(user_type.value, user_type.value) for user_type in UserType],
        default=UserType.ATHLETE.value,
        null=True,
    )
    username = models.CharField(max_length=50, unique=True, null=True, blank=True)
    email = models.EmailField(max_length=255, unique=True, null=True, blank=True)
    full_name = models.CharField(max_length=255, default="", blank=True)
    profile_url = models.CharField(max_length=500, null=True, blank=True)
    followers = models.PositiveIntegerField(default=0)
    following = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "users"
        managed = False  # Schema is managed by the account service
        ordering: ClassVar[list[str]] = ["-created_at"]

    @property
    def display_name(self) -> str:
        """Name shown for this user, preferring the username."""
        return self.username or self.full_name or "User"

    def __str__(self) -> str:
        """Return string representation of user."""
        return self.display_name

    def __repr__(self) -> str:
        """Return detailed representation of user."""
        return (
            f"<User(user_id={self.user_id}, username='{self.username}', "
            f"followers={self.followers}, following={self.following})>"
        )
