"""API views for core application."""

import structlog
from pydantic import ValidationError
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from core.schemas.network import (
    FollowActionRequest,
    FollowActionResponse,
    FollowCountsResponse,
    FollowerListResponse,
    FollowingListResponse,
    FollowStatusQuery,
    FollowStatusResponse,
    NetworkSearchQuery,
    NetworkSearchResponse,
    UserPathParams,
)
from core.services import health_service
from core.services.follow_graph_service import follow_graph_service

logger = structlog.get_logger(__name__)


def _bad_request(e: ValidationError, message: str) -> Response:
    """Build the 400 response for a pydantic validation failure."""
    return Response(
        {
            "success": False,
            "error": "bad_request",
            "message": message,
            "errors": e.errors(include_url=False, include_context=False),
        },
        status=status.HTTP_400_BAD_REQUEST,
    )


class LivenessCheckView(APIView):
    """Liveness probe endpoint for Kubernetes.

    Returns 200 if the service is alive and running.
    This should not check external dependencies.
    """

    permission_classes = (AllowAny,)

    def get(self, _request):
        """Handle GET request for liveness check."""
        liveness = health_service.get_liveness_status()
        return Response(liveness.model_dump(), status=status.HTTP_200_OK)


class ReadinessCheckView(APIView):
    """Readiness probe endpoint for Kubernetes.

    Returns 200 with a degraded status when the database is unavailable,
    allowing the service to stay up while background reconnection continues.
    """

    permission_classes = (AllowAny,)

    def get(self, _request):
        """Handle GET request for readiness check."""
        readiness = health_service.get_readiness_status()
        return Response(readiness.model_dump(), status=status.HTTP_200_OK)


class FollowActionView(APIView):
    """Shared request handling for follow and unfollow.

    The target user comes from the URL, the acting user from the JSON body
    ``{"user_id": ...}``. Both no-op outcomes answer 200 with changed=False.
    """

    permission_classes = (AllowAny,)
    action_name = ""

    def perform(self, follower_id, followee_id):
        """Run the graph mutation and return its FollowResult."""
        raise NotImplementedError

    def post(self, request, target_id):
        """Handle POST request for a follow graph mutation.

        Args:
            request: HTTP request whose body carries the acting user_id
            target_id: ID of the user to follow or unfollow

        Returns:
            200 OK with FollowActionResponse (including no-op outcomes)
            400 Bad Request if an ID is malformed or the user targets themself
            404 Not Found if either user does not exist
            500 Internal Server Error if the transaction could not commit
        """
        try:
            target = UserPathParams(user_id=target_id)
        except ValidationError as e:
            return _bad_request(e, "Invalid target user ID")

        try:
            action_request = FollowActionRequest.model_validate(request.data)
        except ValidationError as e:
            logger.warning(
                f"Invalid request body for {self.action_name}",
                validation_errors=e.errors(include_url=False, include_context=False),
            )
            return _bad_request(e, "Invalid request parameters")

        logger.info(
            f"{self.action_name.capitalize()} request received",
            follower_id=str(action_request.user_id),
            followee_id=str(target.user_id),
        )

        result = self.perform(action_request.user_id, target.user_id)

        response = FollowActionResponse.from_result(
            result, follower_id=action_request.user_id, followee_id=target.user_id
        )
        return Response(response.model_dump(), status=status.HTTP_200_OK)


class FollowView(FollowActionView):
    """API endpoint for following a user."""

    action_name = "follow"

    def perform(self, follower_id, followee_id):
        """Create the follow edge."""
        return follow_graph_service.follow(follower_id, followee_id)


class UnfollowView(FollowActionView):
    """API endpoint for unfollowing a user."""

    action_name = "unfollow"

    def perform(self, follower_id, followee_id):
        """Remove the follow edge."""
        return follow_graph_service.unfollow(follower_id, followee_id)


class FollowersListView(APIView):
    """API endpoint listing the users who follow a user."""

    permission_classes = (AllowAny,)

    def get(self, _request, user_id):
        """Return followers, most recent first.

        Unknown users simply have no followers, so this never answers 404.
        """
        try:
            params = UserPathParams(user_id=user_id)
        except ValidationError as e:
            return _bad_request(e, "Invalid user ID")

        followers = follow_graph_service.list_followers(params.user_id)
        response = FollowerListResponse(
            user_id=params.user_id, count=len(followers), followers=followers
        )
        return Response(response.model_dump(), status=status.HTTP_200_OK)


class FollowingListView(APIView):
    """API endpoint listing the users a user follows."""

    permission_classes = (AllowAny,)

    def get(self, _request, user_id):
        """Return followed users, most recently followed first."""
        try:
            params = UserPathParams(user_id=user_id)
        except ValidationError as e:
            return _bad_request(e, "Invalid user ID")

        following = follow_graph_service.list_following(params.user_id)
        response = FollowingListResponse(
            user_id=params.user_id, count=len(following), following=following
        )
        return Response(response.model_dump(), status=status.HTTP_200_OK)


class FollowCountsView(APIView):
    """API endpoint returning a user's follower and following counters."""

    permission_classes = (AllowAny,)

    def get(self, _request, user_id):
        """Return the stored counters; unknown users report zeros."""
        try:
            params = UserPathParams(user_id=user_id)
        except ValidationError as e:
            return _bad_request(e, "Invalid user ID")

        counts = follow_graph_service.get_counts(params.user_id)
        response = FollowCountsResponse(
            user_id=params.user_id,
            followers=counts.followers,
            following=counts.following,
        )
        return Response(response.model_dump(), status=status.HTTP_200_OK)


class FollowStatusView(APIView):
    """API endpoint checking whether ``follower_id`` follows the URL user."""

    permission_classes = (AllowAny,)

    def get(self, request, user_id):
        """Handle GET is-following/<user_id>?follower_id=<uuid>."""
        try:
            params = UserPathParams(user_id=user_id)
            query = FollowStatusQuery.model_validate(request.query_params.dict())
        except ValidationError as e:
            return _bad_request(e, "Invalid request parameters")

        is_following = follow_graph_service.is_following(
            query.follower_id, params.user_id
        )
        response = FollowStatusResponse(
            follower_id=query.follower_id,
            followee_id=params.user_id,
            is_following=is_following,
        )
        return Response(response.model_dump(), status=status.HTTP_200_OK)


class NetworkSearchView(APIView):
    """API endpoint searching a user's followers and following by name."""

    permission_classes = (AllowAny,)

    def get(self, request, user_id):
        """Handle GET search/<user_id>?q=<name fragment>."""
        try:
            params = UserPathParams(user_id=user_id)
            query = NetworkSearchQuery.model_validate(request.query_params.dict())
        except ValidationError as e:
            return _bad_request(e, "Invalid request parameters")

        users = follow_graph_service.search_network(params.user_id, query.q)

        logger.info(
            "Network search completed",
            user_id=str(params.user_id),
            result_count=len(users),
        )

        response = NetworkSearchResponse(
            user_id=params.user_id, query=query.q, count=len(users), users=users
        )
        return Response(response.model_dump(), status=status.HTTP_200_OK)
