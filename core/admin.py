"""Read-only admin views of users and follow edges."""

from django.contrib import admin

from core.models import User, UserFollow


class ReadOnlyAdmin(admin.ModelAdmin):
    """Counters and edges are only written by the follow graph service."""

    def has_add_permission(self, request):
        """Users and edges are never created from the admin."""
        return False

    def has_change_permission(self, request, obj=None):
        """Counters and name snapshots are never edited by hand."""
        return False

    def has_delete_permission(self, request, obj=None):
        """Edges are only removed by an unfollow."""
        return False


@admin.register(User)
class UserAdmin(ReadOnlyAdmin):
    """Users with their stored follow counters."""

    list_display = ("user_id", "username", "full_name", "followers", "following")
    search_fields = ("username", "full_name")


@admin.register(UserFollow)
class UserFollowAdmin(ReadOnlyAdmin):
    """Follow edges, newest first."""

    list_display = ("follower_username", "followee_username", "created_at")
    list_select_related = ("follower", "followee")
    ordering = ("-created_at", "-id")
