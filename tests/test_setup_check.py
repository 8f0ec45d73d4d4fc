"""Tests for the connectivity check script"""

from unittest.mock import MagicMock, patch

from scripts import setup_check
from service_bootstrap.lifecycle import (
    BROKER,
    CACHE,
    DATABASE,
    BootstrapError,
    ResourceBundle,
    ResourceCloseError,
)


class TestSetupCheck:
    """Test suite for scripts/setup_check.py."""

    @patch('scripts.setup_check.bootstrap')
    def test_success_exit_code(self, mock_bootstrap, capsys):
        """Test that a full bootstrap reports every kind and releases."""
        release = MagicMock()
        release.errors = []
        mock_bootstrap.return_value = (
            ResourceBundle([(DATABASE, object()), (CACHE, object()), (BROKER, object())]),
            release,
        )

        assert setup_check.main() == 0

        output = capsys.readouterr().out
        assert "✓ database connected and verified" in output
        assert "✓ broker connected and verified" in output
        assert "test_password" not in output
        release.assert_called_once()

    @patch('scripts.setup_check.bootstrap')
    def test_failure_exit_code(self, mock_bootstrap, capsys):
        """Test that a bootstrap failure is reported with its rollback."""
        mock_bootstrap.side_effect = BootstrapError(
            BROKER,
            TimeoutError("timed out"),
            "connect",
            [ResourceCloseError(CACHE, RuntimeError("already closed"))],
        )

        assert setup_check.main() == 1

        output = capsys.readouterr().out
        assert "✗ broker failed during connect" in output
        assert "database was connected and has been rolled back" in output
        assert "Failed to close cache" in output

    @patch('scripts.setup_check.bootstrap')
    def test_release_errors_reported(self, mock_bootstrap, capsys):
        """Test that release errors are shown but do not fail the check."""
        release = MagicMock()
        release.errors = [ResourceCloseError(DATABASE, OSError("broken pipe"))]
        mock_bootstrap.return_value = (ResourceBundle([(DATABASE, object())]), release)

        assert setup_check.main() == 0
        assert "broken pipe" in capsys.readouterr().out

    @patch('scripts.setup_check.bootstrap')
    def test_verify_failure_lists_failed_kind_as_rolled_back(self, mock_bootstrap, capsys):
        """Test that a kind failing its liveness check is reported as closed too."""
        mock_bootstrap.side_effect = BootstrapError(CACHE, TimeoutError("no PONG"), "verify")

        assert setup_check.main() == 1

        output = capsys.readouterr().out
        assert "✗ cache failed during verify" in output
        assert "database was connected and has been rolled back" in output
        assert "cache was connected and has been rolled back" in output
        assert "broker was connected" not in output

    @patch('scripts.setup_check.bootstrap')
    def test_config_failure_lists_nothing_rolled_back(self, mock_bootstrap, capsys):
        """Test that a missing config reports no rollback, since nothing connected."""
        mock_bootstrap.side_effect = BootstrapError(
            BROKER, KeyError("No configuration for 'broker'"), "config"
        )

        assert setup_check.main() == 1

        output = capsys.readouterr().out
        assert "✗ broker failed during config" in output
        assert "rolled back" not in output

    def test_rolled_back_kinds(self):
        """Test which kinds count as rolled back for each failure stage."""
        assert setup_check.rolled_back_kinds(
            BootstrapError(DATABASE, OSError("down"), "connect")
        ) == []
        assert setup_check.rolled_back_kinds(
            BootstrapError(DATABASE, OSError("down"), "verify")
        ) == [DATABASE]
        assert setup_check.rolled_back_kinds(
            BootstrapError(BROKER, OSError("down"), "verify")
        ) == [DATABASE, CACHE, BROKER]
        assert setup_check.rolled_back_kinds(
            BootstrapError(CACHE, KeyError("cache"), "config")
        ) == []
