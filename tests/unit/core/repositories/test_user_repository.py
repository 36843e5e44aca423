"""Unit tests for core.repositories.user_repository module."""

import unittest
import uuid
from unittest.mock import MagicMock, patch

from core.repositories import UserRepository


class TestUserRepository(unittest.TestCase):
    """Tests for UserRepository."""

    @patch("core.repositories.user_repository.User")
    def test_lock_users_locks_in_id_order_and_deduplicates(self, mock_user_model):
        """Test that lock_users uses FOR UPDATE ordered by user_id."""
        user_id = uuid.uuid4()
        locked_user = MagicMock(user_id=user_id)
        locked_qs = mock_user_model.objects.select_for_update.return_value
        locked_qs.filter.return_value.order_by.return_value = [locked_user]

        result = UserRepository.lock_users([user_id, user_id])

        locked_qs.filter.assert_called_once_with(user_id__in={user_id})
        locked_qs.filter.return_value.order_by.assert_called_once_with("user_id")
        self.assertEqual(result, {user_id: locked_user})

    @patch("core.repositories.user_repository.User")
    def test_get_counts_returns_first_row(self, mock_user_model):
        """Test that get_counts reads followers and following together."""
        user_id = uuid.uuid4()
        values = mock_user_model.objects.filter.return_value.values_list.return_value
        values.first.return_value = (4, 7)

        result = UserRepository.get_counts(user_id)

        mock_user_model.objects.filter.assert_called_once_with(user_id=user_id)
        mock_user_model.objects.filter.return_value.values_list.assert_called_once_with(
            "followers", "following"
        )
        self.assertEqual(result, (4, 7))

    @patch("core.repositories.user_repository.User")
    def test_get_counts_returns_none_for_unknown_user(self, mock_user_model):
        """Test that get_counts returns None when no row matches."""
        values = mock_user_model.objects.filter.return_value.values_list.return_value
        values.first.return_value = None

        self.assertIsNone(UserRepository.get_counts(uuid.uuid4()))

    @patch("core.repositories.user_repository.User")
    def test_set_counts_updates_both_columns(self, mock_user_model):
        """Test that set_counts writes the given values."""
        user_id = uuid.uuid4()
        mock_user_model.objects.filter.return_value.update.return_value = 1

        result = UserRepository.set_counts(user_id, followers=3, following=9)

        mock_user_model.objects.filter.return_value.update.assert_called_once_with(
            followers=3, following=9
        )
        self.assertEqual(result, 1)

    @patch("core.repositories.user_repository.User")
    def test_with_live_counts_without_ids_uses_all_users(self, mock_user_model):
        """Test that with_live_counts does not filter when user_ids is None."""
        UserRepository.with_live_counts()

        mock_user_model.objects.all.assert_called_once()
        mock_user_model.objects.all.return_value.filter.assert_not_called()

    @patch("core.repositories.user_repository.User")
    def test_with_live_counts_filters_requested_ids(self, mock_user_model):
        """Test that with_live_counts restricts the queryset to user_ids."""
        user_ids = [uuid.uuid4()]

        UserRepository.with_live_counts(user_ids)

        mock_user_model.objects.all.return_value.filter.assert_called_once_with(
            user_id__in=user_ids
        )


if __name__ == "__main__":
    unittest.main()
