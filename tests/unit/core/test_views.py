"""Unit tests for core views with the follow graph service mocked out."""

import unittest
from unittest.mock import patch
from uuid import uuid4

from rest_framework.test import APIRequestFactory

from core.enums import FollowResult, NetworkRelationship, UserType
from core.exceptions import UserNotFoundError
from core.schemas.network import FollowCounts, NetworkSearchResult
from core.schemas.user import UserSummary
from core.views import (
    FollowCountsView,
    FollowersListView,
    FollowStatusView,
    FollowView,
    NetworkSearchView,
    UnfollowView,
)


def make_summary(**overrides):
    """Build a UserSummary with fixed display fields."""
    fields = {
        "user_id": uuid4(),
        "username": "runner",
        "full_name": "Riley Runner",
        "user_type": UserType.ATHLETE.value,
        "profile_url": None,
    }
    fields.update(overrides)
    return UserSummary(**fields)


class TestFollowActionViews(unittest.TestCase):
    """Tests for FollowView and UnfollowView."""

    def setUp(self):
        """Set up test fixtures."""
        self.factory = APIRequestFactory()
        self.actor_id = uuid4()
        self.target_id = uuid4()

    def post(self, view_class, target_id, body):
        request = self.factory.post("/", body, format="json")
        return view_class.as_view()(request, target_id=str(target_id))

    @patch("core.views.follow_graph_service")
    def test_follow_passes_body_user_as_follower(self, mock_service):
        """Test that the body user follows the URL user."""
        mock_service.follow.return_value = FollowResult.CREATED

        response = self.post(FollowView, self.target_id, {"user_id": str(self.actor_id)})

        mock_service.follow.assert_called_once_with(self.actor_id, self.target_id)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["result"], "created")
        self.assertTrue(response.data["changed"])

    @patch("core.views.follow_graph_service")
    def test_unfollow_no_op_is_200(self, mock_service):
        """Test that NOT_FOLLOWING is reported as a neutral success."""
        mock_service.unfollow.return_value = FollowResult.NOT_FOLLOWING

        response = self.post(
            UnfollowView, self.target_id, {"user_id": str(self.actor_id)}
        )

        mock_service.unfollow.assert_called_once_with(self.actor_id, self.target_id)
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.data["success"])
        self.assertFalse(response.data["changed"])
        self.assertFalse(response.data["is_following"])

    @patch("core.views.follow_graph_service")
    def test_service_errors_use_exception_handler(self, mock_service):
        """Test that service exceptions become handled error responses."""
        mock_service.follow.side_effect = UserNotFoundError(self.target_id)

        response = self.post(FollowView, self.target_id, {"user_id": str(self.actor_id)})

        self.assertEqual(response.status_code, 404)
        self.assertFalse(response.data["success"])

    @patch("core.views.follow_graph_service")
    def test_invalid_target_never_reaches_service(self, mock_service):
        """Test that malformed IDs are rejected before the service is called."""
        response = self.post(FollowView, "bad-id", {"user_id": str(self.actor_id)})

        self.assertEqual(response.status_code, 400)
        mock_service.follow.assert_not_called()


class TestReadViews(unittest.TestCase):
    """Tests for the read-only follow graph views."""

    def setUp(self):
        """Set up test fixtures."""
        self.factory = APIRequestFactory()
        self.user_id = uuid4()

    @patch("core.views.follow_graph_service")
    def test_followers_list_counts_entries(self, mock_service):
        """Test that the followers view wraps the service list."""
        mock_service.list_followers.return_value = [make_summary(), make_summary()]

        request = self.factory.get("/")
        response = FollowersListView.as_view()(request, user_id=str(self.user_id))

        mock_service.list_followers.assert_called_once_with(self.user_id)
        self.assertEqual(response.data["count"], 2)
        self.assertEqual(len(response.data["followers"]), 2)

    @patch("core.views.follow_graph_service")
    def test_counts_view(self, mock_service):
        """Test that the counts view reports both counters."""
        mock_service.get_counts.return_value = FollowCounts(followers=5, following=2)

        request = self.factory.get("/")
        response = FollowCountsView.as_view()(request, user_id=str(self.user_id))

        self.assertEqual(response.data["followers"], 5)
        self.assertEqual(response.data["following"], 2)
        self.assertEqual(response.data["user_id"], self.user_id)

    @patch("core.views.follow_graph_service")
    def test_status_view_reads_follower_from_query(self, mock_service):
        """Test that follower_id comes from the query string."""
        follower_id = uuid4()
        mock_service.is_following.return_value = True

        request = self.factory.get("/", {"follower_id": str(follower_id)})
        response = FollowStatusView.as_view()(request, user_id=str(self.user_id))

        mock_service.is_following.assert_called_once_with(follower_id, self.user_id)
        self.assertTrue(response.data["is_following"])

    @patch("core.views.follow_graph_service")
    def test_search_view_passes_query(self, mock_service):
        """Test that the search view forwards q and echoes it back."""
        mock_service.search_network.return_value = [
            NetworkSearchResult(
                **make_summary().model_dump(),
                relationship=NetworkRelationship.FOLLOWER,
            )
        ]

        request = self.factory.get("/", {"q": "riley"})
        response = NetworkSearchView.as_view()(request, user_id=str(self.user_id))

        mock_service.search_network.assert_called_once_with(self.user_id, "riley")
        self.assertEqual(response.data["query"], "riley")
        self.assertEqual(response.data["users"][0]["relationship"], "follower")


if __name__ == "__main__":
    unittest.main()
