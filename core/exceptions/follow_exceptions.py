"""Exceptions raised by the follow graph service."""

from uuid import UUID


class FollowGraphError(Exception):
    """Base exception for follow graph failures."""

    status_code = 500


class InvalidFollowOperationError(FollowGraphError):
    """Request breaks a follow graph rule, such as following yourself (400)."""

    status_code = 400


class UserNotFoundError(FollowGraphError):
    """Referenced user does not exist in the user directory (404)."""

    status_code = 404

    def __init__(self, user_id: UUID | str):
        """Initialize user not found error.

        Args:
            user_id: ID of the user that was not found
        """
        self.user_id = user_id
        super().__init__(f"User with ID {user_id} not found")


class FollowStorageError(FollowGraphError):
    """The follow graph transaction could not commit and was rolled back (500).

    The underlying database error is chained as ``__cause__``. Retrying the
    whole operation is safe: a follow that did commit resolves to a no-op.
    """

    status_code = 500
