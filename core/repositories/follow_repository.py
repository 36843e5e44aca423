"""Repository for follow edge queries."""

from uuid import UUID

from django.db.models import Q, QuerySet
from django.utils import timezone

from core.models import User, UserFollow


class FollowRepository:
    """Repository for the user_follows edge store.

    Writes are only issued by the follow graph service, inside its
    transaction. Reads return edges with the connected user preloaded so
    list endpoints run as a single joined query.
    """

    @staticmethod
    def edge_exists(follower_id: UUID, followee_id: UUID) -> bool:
        """Check whether follower_id follows followee_id.

        Args:
            follower_id: UUID of the user who might be following
            followee_id: UUID of the user who might be followed

        Returns:
            True if the edge exists, False otherwise
        """
        return UserFollow.objects.filter(
            follower_id=follower_id, followee_id=followee_id
        ).exists()

    @staticmethod
    def create_edge(
        follower: User,
        followee: User,
        follower_username: str,
        followee_username: str,
    ) -> UserFollow:
        """Insert a new follow edge.

        Raises:
            IntegrityError: If the edge already exists or would be a self-follow
        """
        return UserFollow.objects.create(
            follower=follower,
            followee=followee,
            follower_username=follower_username,
            followee_username=followee_username,
            created_at=timezone.now(),
        )

    @staticmethod
    def delete_edge(follower_id: UUID, followee_id: UUID) -> int:
        """Delete the edge between two users.

        Returns:
            Number of edges removed (0 or 1)
        """
        deleted, _ = UserFollow.objects.filter(
            follower_id=follower_id, followee_id=followee_id
        ).delete()
        return deleted

    @staticmethod
    def edges_to(user_id: UUID) -> QuerySet[UserFollow]:
        """Edges pointing at user_id, newest first, with the follower loaded."""
        return (
            UserFollow.objects.filter(followee_id=user_id)
            .select_related("follower")
            .order_by("-created_at", "-id")
        )

    @staticmethod
    def edges_from(user_id: UUID) -> QuerySet[UserFollow]:
        """Edges leaving user_id, newest first, with the followee loaded."""
        return (
            UserFollow.objects.filter(follower_id=user_id)
            .select_related("followee")
            .order_by("-created_at", "-id")
        )

    @staticmethod
    def search_following(user_id: UUID, query: str) -> QuerySet[User]:
        """Users followed by user_id whose username or full name contains query."""
        return (
            User.objects.filter(incoming_follows__follower_id=user_id)
            .filter(Q(username__icontains=query) | Q(full_name__icontains=query))
            .exclude(user_id=user_id)
            .distinct()
        )

    @staticmethod
    def search_followers(user_id: UUID, query: str) -> QuerySet[User]:
        """Users following user_id whose username or full name contains query."""
        return (
            User.objects.filter(outgoing_follows__followee_id=user_id)
            .filter(Q(username__icontains=query) | Q(full_name__icontains=query))
            .exclude(user_id=user_id)
            .distinct()
        )

    @staticmethod
    def count_followers(user_id: UUID) -> int:
        """Number of edges pointing at user_id."""
        return UserFollow.objects.filter(followee_id=user_id).count()

    @staticmethod
    def count_following(user_id: UUID) -> int:
        """Number of edges leaving user_id."""
        return UserFollow.objects.filter(follower_id=user_id).count()
