"""Service that owns the follow graph and its denormalized counters."""

from uuid import UUID

from django.conf import settings
from django.db import DatabaseError, IntegrityError, transaction

import structlog

from core.enums import FollowResult, NetworkRelationship
from core.exceptions import (
    FollowStorageError,
    InvalidFollowOperationError,
    UserNotFoundError,
)
from core.repositories import FollowRepository, UserRepository
from core.schemas.network import CountDrift, FollowCounts, NetworkSearchResult
from core.schemas.user import UserSummary

logger = structlog.get_logger(__name__)

DEFAULT_NETWORK_SEARCH_LIMIT = 20


class FollowGraphService:
    """Service for follow graph mutations and reads.

    This is the only writer of the user_follows table and of the followers
    and following counters on users. Each mutation runs as one atomic unit:
    the edge change and both counter updates commit together or not at all.
    """

    def follow(self, follower_id: UUID, followee_id: UUID) -> FollowResult:
        """Create the edge follower_id -> followee_id and bump both counters.

        Args:
            follower_id: UUID of the user who follows.
            followee_id: UUID of the user being followed.

        Returns:
            FollowResult.CREATED, or FollowResult.ALREADY_EXISTS when the edge
            was already present (no counters change).

        Raises:
            InvalidFollowOperationError: If follower_id equals followee_id.
            UserNotFoundError: If either user does not exist.
            FollowStorageError: If the transaction could not commit.
        """
        log = logger.bind(follower_id=str(follower_id), followee_id=str(followee_id))
        log.info("Processing follow request")

        try:
            with transaction.atomic():
                result = self._follow(follower_id, followee_id)
        except DatabaseError as e:
            log.error(
                "Follow transaction rolled back",
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            raise FollowStorageError("Failed to follow user") from e

        log.info("Follow request completed", result=result.value)
        return result

    def _follow(self, follower_id: UUID, followee_id: UUID) -> FollowResult:
        if FollowRepository.edge_exists(follower_id, followee_id):
            return FollowResult.ALREADY_EXISTS

        if follower_id == followee_id:
            raise InvalidFollowOperationError("Cannot follow yourself")

        users = UserRepository.lock_users([follower_id, followee_id])
        follower = users.get(follower_id)
        followee = users.get(followee_id)
        if follower is None:
            raise UserNotFoundError(follower_id)
        if followee is None:
            raise UserNotFoundError(followee_id)

        try:
            # Savepoint, so a lost insert race leaves the outer transaction usable
            with transaction.atomic():
                FollowRepository.create_edge(
                    follower,
                    followee,
                    follower_username=follower.display_name,
                    followee_username=followee.display_name,
                )
        except IntegrityError:
            if FollowRepository.edge_exists(follower_id, followee_id):
                logger.info(
                    "Concurrent follow committed first, treating as no-op",
                    follower_id=str(follower_id),
                    followee_id=str(followee_id),
                )
                return FollowResult.ALREADY_EXISTS
            raise

        UserRepository.increment_following(follower_id)
        UserRepository.increment_followers(followee_id)
        return FollowResult.CREATED

    def unfollow(self, follower_id: UUID, followee_id: UUID) -> FollowResult:
        """Remove the edge follower_id -> followee_id and decrement both counters.

        Counters are clamped at zero, so an unfollow never drives them
        negative even if they were already out of step with the edges.

        Args:
            follower_id: UUID of the user who follows.
            followee_id: UUID of the user being unfollowed.

        Returns:
            FollowResult.REMOVED, or FollowResult.NOT_FOLLOWING when there
            was no edge to remove (no counters change).

        Raises:
            FollowStorageError: If the transaction could not commit.
        """
        log = logger.bind(follower_id=str(follower_id), followee_id=str(followee_id))
        log.info("Processing unfollow request")

        try:
            with transaction.atomic():
                result = self._unfollow(follower_id, followee_id)
        except DatabaseError as e:
            log.error(
                "Unfollow transaction rolled back",
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            raise FollowStorageError("Failed to unfollow user") from e

        log.info("Unfollow request completed", result=result.value)
        return result

    def _unfollow(self, follower_id: UUID, followee_id: UUID) -> FollowResult:
        if not FollowRepository.edge_exists(follower_id, followee_id):
            return FollowResult.NOT_FOLLOWING

        UserRepository.lock_users([follower_id, followee_id])

        # A concurrent unfollow may have removed the edge while we waited
        if FollowRepository.delete_edge(follower_id, followee_id) == 0:
            return FollowResult.NOT_FOLLOWING

        UserRepository.decrement_following(follower_id)
        UserRepository.decrement_followers(followee_id)
        return FollowResult.REMOVED

    def is_following(self, follower_id: UUID, followee_id: UUID) -> bool:
        """Return True if follower_id currently follows followee_id."""
        return FollowRepository.edge_exists(follower_id, followee_id)

    def list_followers(self, user_id: UUID) -> list[UserSummary]:
        """Users following user_id, most recent follower first."""
        return [
            UserSummary.model_validate(edge.follower)
            for edge in FollowRepository.edges_to(user_id)
        ]

    def list_following(self, user_id: UUID) -> list[UserSummary]:
        """Users followed by user_id, most recently followed first."""
        return [
            UserSummary.model_validate(edge.followee)
            for edge in FollowRepository.edges_from(user_id)
        ]

    def get_counts(self, user_id: UUID) -> FollowCounts:
        """Read the stored counters of a user.

        An unknown user is reported as having no relationships rather than
        raising, so profile widgets can render without special cases.
        """
        counts = UserRepository.get_counts(user_id)
        if counts is None:
            return FollowCounts(followers=0, following=0)

        followers, following = counts
        return FollowCounts(followers=followers or 0, following=following or 0)

    def search_network(self, user_id: UUID, query: str) -> list[NetworkSearchResult]:
        """Search the users user_id follows or is followed by, by name.

        Matches are case-insensitive substrings of the username or full name.
        A user connected in both directions appears once, as 'following'.
        Results list followed users first, then followers, each group sorted
        by name, and are capped at NETWORK_SEARCH_LIMIT.

        Args:
            user_id: UUID of the searching user.
            query: Name fragment; blank queries return no results.

        Returns:
            List of NetworkSearchResult.
        """
        query = (query or "").strip()
        if not query:
            return []

        matches: dict[UUID, NetworkSearchResult] = {}
        for relationship, users in (
            (
                NetworkRelationship.FOLLOWING,
                FollowRepository.search_following(user_id, query),
            ),
            (
                NetworkRelationship.FOLLOWER,
                FollowRepository.search_followers(user_id, query),
            ),
        ):
            for user in users:
                if user.user_id in matches:
                    continue
                summary = UserSummary.model_validate(user)
                matches[user.user_id] = NetworkSearchResult(
                    **summary.model_dump(), relationship=relationship
                )

        ordered = sorted(
            matches.values(),
            key=lambda result: (
                result.relationship != NetworkRelationship.FOLLOWING.value,
                (result.full_name or result.username or "").lower(),
            ),
        )
        limit = getattr(settings, "NETWORK_SEARCH_LIMIT", DEFAULT_NETWORK_SEARCH_LIMIT)
        return ordered[:limit]

    def audit_counts(self, user_ids: list[UUID] | None = None) -> list[CountDrift]:
        """Report users whose stored counters differ from their edge counts.

        Args:
            user_ids: Users to check; every user when None.

        Returns:
            One CountDrift per drifting user, ordered by user ID.
        """
        drifts = [
            CountDrift(
                user_id=user.user_id,
                stored_followers=user.followers,
                stored_following=user.following,
                actual_followers=user.live_followers,
                actual_following=user.live_following,
            )
            for user in UserRepository.with_live_counts(user_ids)
            if user.followers != user.live_followers
            or user.following != user.live_following
        ]

        logger.info(
            "Follow counter audit completed",
            checked_scope="all" if user_ids is None else len(user_ids),
            drift_count=len(drifts),
        )
        return drifts

    def repair_counts(self, user_ids: list[UUID] | None = None) -> list[CountDrift]:
        """Rewrite drifting counters to match the edge table.

        Each user is recounted under a row lock inside one transaction, so
        concurrent follows cannot slip between the count and the write.

        Args:
            user_ids: Users to repair; every user when None.

        Returns:
            The drifts that were fixed, with the counts written.

        Raises:
            FollowStorageError: If the transaction could not commit.
        """
        candidates = [drift.user_id for drift in self.audit_counts(user_ids)]
        if not candidates:
            return []

        repaired: list[CountDrift] = []
        try:
            with transaction.atomic():
                locked = UserRepository.lock_users(candidates)
                for user_id, user in locked.items():
                    actual_followers = FollowRepository.count_followers(user_id)
                    actual_following = FollowRepository.count_following(user_id)
                    if (
                        user.followers == actual_followers
                        and user.following == actual_following
                    ):
                        continue

                    UserRepository.set_counts(
                        user_id, followers=actual_followers, following=actual_following
                    )
                    repaired.append(
                        CountDrift(
                            user_id=user_id,
                            stored_followers=user.followers,
                            stored_following=user.following,
                            actual_followers=actual_followers,
                            actual_following=actual_following,
                        )
                    )
        except DatabaseError as e:
            logger.error(
                "Follow counter repair rolled back", error=str(e), exc_info=True
            )
            raise FollowStorageError("Failed to repair follow counters") from e

        logger.warning("Follow counters repaired", repaired_count=len(repaired))
        return sorted(repaired, key=lambda drift: str(drift.user_id))


# Global follow graph service instance
follow_graph_service = FollowGraphService()
