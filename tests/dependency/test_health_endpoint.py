"""Dependency tests for health check endpoints.

These tests start a live server and issue real HTTP requests.
"""

from django.test import LiveServerTestCase

import requests


class TestHealthCheckEndpointDependency(LiveServerTestCase):
    """Dependency tests for health check endpoints with real HTTP requests."""

    def test_liveness_endpoint_responds_to_http_request(self):
        """Test that liveness endpoint responds to actual HTTP request."""
        response = requests.get(
            f"{self.live_server_url}/api/v1/network/health/live", timeout=5
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "alive")
        self.assertIn("X-Request-ID", response.headers)

    def test_readiness_endpoint_responds_to_http_request(self):
        """Test that readiness endpoint responds to actual HTTP request."""
        response = requests.get(
            f"{self.live_server_url}/api/v1/network/health/ready", timeout=5
        )

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertIn(data["status"], ["ready", "degraded"])
        self.assertTrue(data["ready"])
        self.assertIn("tables", data["follow_store"])
