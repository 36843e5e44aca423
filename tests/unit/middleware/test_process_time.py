"""Unit tests for ProcessTimeMiddleware."""

import unittest
from unittest.mock import patch

from django.http import HttpRequest, HttpResponse

from core.constants import PROCESS_TIME_HEADER, SLOW_REQUEST_THRESHOLD
from core.middleware.process_time import ProcessTimeMiddleware


class TestProcessTimeMiddleware(unittest.TestCase):
    """Test cases for ProcessTimeMiddleware."""

    def setUp(self):
        """Set up test fixtures."""

        def mock_get_response(request):
            return HttpResponse("OK")

        self.middleware = ProcessTimeMiddleware(mock_get_response)

    def _create_request(self):
        """Helper to create a test request."""
        request = HttpRequest()
        request.method = "POST"
        request.path = "/api/v1/network/follow/123"
        return request

    def test_adds_process_time_header(self):
        """Test that process time header is added to response."""
        response = self.middleware(self._create_request())

        self.assertIn(PROCESS_TIME_HEADER, response)

    def test_process_time_is_non_negative_number(self):
        """Test that process time value is a valid, non-negative number."""
        response = self.middleware(self._create_request())

        self.assertGreaterEqual(float(response[PROCESS_TIME_HEADER]), 0)

    @patch("core.middleware.process_time.logger")
    @patch("core.middleware.process_time.time.perf_counter")
    def test_logs_warning_for_slow_requests(self, mock_perf_counter, mock_logger):
        """Test that a request slower than the threshold is logged."""
        mock_perf_counter.side_effect = [10.0, 10.0 + SLOW_REQUEST_THRESHOLD + 0.5]

        response = self.middleware(self._create_request())

        self.assertEqual(response[PROCESS_TIME_HEADER], "1.500000")
        mock_logger.warning.assert_called_once()
        args = mock_logger.warning.call_args[0]
        self.assertIn("POST", args)
        self.assertIn("/api/v1/network/follow/123", args)

    @patch("core.middleware.process_time.logger")
    def test_fast_request_not_logged(self, mock_logger):
        """Test that fast requests produce no warning."""
        self.middleware(self._create_request())

        mock_logger.warning.assert_not_called()


if __name__ == "__main__":
    unittest.main()
