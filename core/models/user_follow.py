"""UserFollow model."""

import uuid
from typing import ClassVar

from django.db import models
from django.utils import timezone


class UserFollow(models.Model):
    """Directed follow edge between two users, stored in user_follows.

    The username columns are a snapshot taken when the edge is created and
    are not refreshed when either user is renamed. Edges are never updated:
    they are inserted by a follow and physically deleted by an unfollow.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    follower = models.ForeignKey(
        "core.User",
        on_delete=models.CASCADE,
        related_name="outgoing_follows",
        db_column="follower_id",
    )
    followee = models.ForeignKey(
        "core.User",
        on_delete=models.CASCADE,
        related_name="incoming_follows",
        db_column="following_id",
    )
    follower_username = models.CharField(max_length=255)
    followee_username = models.CharField(max_length=255, db_column="following_username")
    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        """Django model metadata."""

        db_table = "user_follows"
        ordering: ClassVar[list[str]] = ["-created_at"]
        constraints: ClassVar[list[models.BaseConstraint]] = [
            models.UniqueConstraint(
                fields=["follower", "followee"], name="unique_user_follow"
            ),
            models.CheckConstraint(
                condition=~models.Q(follower=models.F("followee")),
                name="prevent_self_follow",
            ),
        ]

    def __str__(self) -> str:
        """Return string representation of follow relationship."""
        return f"{self.follower_username} follows {self.followee_username}"

    def __repr__(self) -> str:
        """Return detailed representation of follow relationship."""
        return (
            f"<UserFollow(follower_id={self.follower_id}, "
            f"followee_id={self.followee_id})>"
        )
