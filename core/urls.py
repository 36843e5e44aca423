"""URL routing configuration for core application."""

from django.urls import path

from .views import (
    FollowCountsView,
    FollowersListView,
    FollowingListView,
    FollowStatusView,
    FollowView,
    LivenessCheckView,
    NetworkSearchView,
    ReadinessCheckView,
    UnfollowView,
)

urlpatterns = [
    # Health check endpoints
    path("health/live", LivenessCheckView.as_view(), name="health-live"),
    path("health/ready", ReadinessCheckView.as_view(), name="health-ready"),
    # Follow graph mutations
    path("follow/<str:target_id>", FollowView.as_view(), name="follow"),
    path("unfollow/<str:target_id>", UnfollowView.as_view(), name="unfollow"),
    # Follow graph reads
    path("followers/<str:user_id>", FollowersListView.as_view(), name="followers"),
    path("following/<str:user_id>", FollowingListView.as_view(), name="following"),
    path("counts/<str:user_id>", FollowCountsView.as_view(), name="follow-counts"),
    path(
        "is-following/<str:user_id>",
        FollowStatusView.as_view(),
        name="is-following",
    ),
    path("search/<str:user_id>", NetworkSearchView.as_view(), name="network-search"),
]
