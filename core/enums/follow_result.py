"""Outcome of a follow graph mutation."""

from enum import Enum


class FollowResult(str, Enum):
    """Tagged result of follow and unfollow calls.

    ALREADY_EXISTS and NOT_FOLLOWING are successful no-ops: the graph already
    satisfied the request and nothing was written.
    """

    CREATED = "created"
    ALREADY_EXISTS = "already_exists"
    REMOVED = "removed"
    NOT_FOLLOWING = "not_following"

    @property
    def changed(self) -> bool:
        """Whether the mutation changed the edge set."""
        return self in (FollowResult.CREATED, FollowResult.REMOVED)
