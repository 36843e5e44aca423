"""Repository for user-related database queries."""

from collections.abc import Iterable
from uuid import UUID

from django.db.models import Count, F, QuerySet, Value
from django.db.models.functions import Greatest

from core.models import User


class UserRepository:
    """Repository for encapsulating user directory queries.

    The follow graph service reads users through this class and is the only
    caller of the counter update methods.
    """

    @staticmethod
    def lock_users(user_ids: Iterable[UUID]) -> dict[UUID, User]:
        """Lock user rows for the rest of the current transaction.

        Rows are locked in primary key order so that two transactions touching
        the same pair of users always acquire their locks in the same order.
        Must be called inside ``transaction.atomic()``.

        Args:
            user_ids: IDs of the users to lock; duplicates are ignored

        Returns:
            Mapping of user ID to locked User for every ID that exists
        """
        users = (
            User.objects.select_for_update()
            .filter(user_id__in=set(user_ids))
            .order_by("user_id")
        )
        return {user.user_id: user for user in users}

    @staticmethod
    def get_counts(user_id: UUID) -> tuple[int, int] | None:
        """Read the stored follower and following counters.

        Args:
            user_id: UUID of the user

        Returns:
            (followers, following) tuple, or None if the user does not exist
        """
        return (
            User.objects.filter(user_id=user_id)
            .values_list("followers", "following")
            .first()
        )

    @staticmethod
    def increment_following(user_id: UUID) -> int:
        """Add one to a user's following counter in a single UPDATE."""
        return User.objects.filter(user_id=user_id).update(
            following=F("following") + 1
        )

    @staticmethod
    def increment_followers(user_id: UUID) -> int:
        """Add one to a user's followers counter in a single UPDATE."""
        return User.objects.filter(user_id=user_id).update(
            followers=F("followers") + 1
        )

    @staticmethod
    def decrement_following(user_id: UUID) -> int:
        """Subtract one from a user's following counter, never below zero."""
        return User.objects.filter(user_id=user_id).update(
            following=Greatest(F("following") - 1, Value(0))
        )

    @staticmethod
    def decrement_followers(user_id: UUID) -> int:
        """Subtract one from a user's followers counter, never below zero."""
        return User.objects.filter(user_id=user_id).update(
            followers=Greatest(F("followers") - 1, Value(0))
        )

    @staticmethod
    def set_counts(user_id: UUID, followers: int, following: int) -> int:
        """Overwrite both counters with the given values.

        Args:
            user_id: UUID of the user
            followers: New followers counter value
            following: New following counter value

        Returns:
            Number of rows updated (0 if the user does not exist)
        """
        return User.objects.filter(user_id=user_id).update(
            followers=followers, following=following
        )

    @staticmethod
    def with_live_counts(user_ids: list[UUID] | None = None) -> QuerySet[User]:
        """Users annotated with their edge counts from user_follows.

        Adds ``live_followers`` and ``live_following`` annotations next to
        the stored counters so callers can compare the two.

        Args:
            user_ids: Restrict to these users; all users when None

        Returns:
            Annotated QuerySet ordered by user ID
        """
        queryset = User.objects.all()
        if user_ids is not None:
            queryset = queryset.filter(user_id__in=user_ids)
        return queryset.annotate(
            live_followers=Count("incoming_follows", distinct=True),
            live_following=Count("outgoing_follows", distinct=True),
        ).order_by("user_id")
