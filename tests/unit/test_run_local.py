"""Unit tests for run_local module."""

import unittest
from unittest.mock import patch

import run_local


class TestRunLocal(unittest.TestCase):
    """Tests for run_local script."""

    @patch("run_local.execute_from_command_line")
    def test_main_calls_runlocal(self, mock_execute):
        """Test that main() runs the runlocal command."""
        with patch("sys.argv", ["run_local.py"]):
            run_local.main()

        mock_execute.assert_called_once_with(["run_local.py", "runlocal"])

    @patch("run_local.execute_from_command_line")
    def test_main_forwards_extra_arguments(self, mock_execute):
        """Test that address and flags are passed through to runlocal."""
        with patch("sys.argv", ["run_local.py", "0.0.0.0:8001", "--noreload"]):
            run_local.main()

        args = mock_execute.call_args[0][0]
        self.assertEqual(args[1:], ["runlocal", "0.0.0.0:8001", "--noreload"])


if __name__ == "__main__":
    unittest.main()
