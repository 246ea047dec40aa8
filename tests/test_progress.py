"""test suite for progress manager."""
import pytest
from pathlib import Path
import sys
from unittest.mock import Mock, patch

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from gemdiff.ui.progress import ProgressManager


class TestProgressManager:
    """test progress manager functionality."""

    def test_initialization_default(self):
        """test progress manager initializes with default console."""
        pm = ProgressManager()
        assert pm.console is not None

    def test_initialization_custom_console(self):
        """test progress manager accepts custom console."""
        from rich.console import Console
        custom_console = Console()
        pm = ProgressManager(console=custom_console)
        assert pm.console is custom_console

    def test_tty_detection_interactive(self):
        """test progress is enabled in interactive terminal."""
        with patch('sys.stdout.isatty', return_value=True):
            pm = ProgressManager()
            assert pm._enabled is True

    def test_tty_detection_non_interactive(self):
        """test progress is disabled in non-interactive environment."""
        with patch('sys.stdout.isatty', return_value=False):
            pm = ProgressManager()
            assert pm._enabled is False

    def test_spinner_context_interactive(self):
        """test spinner context in interactive mode."""
        with patch('sys.stdout.isatty', return_value=True):
            pm = ProgressManager()

            with pm.spinner("Fetching versions of rack") as task_id:
                assert task_id is not None

    def test_spinner_context_non_interactive(self):
        """test spinner context in non-interactive mode prints message."""
        with patch('sys.stdout.isatty', return_value=False):
            from rich.console import Console
            mock_console = Mock(spec=Console)
            pm = ProgressManager(console=mock_console)

            with pm.spinner("Fetching versions of rack") as task_id:
                assert task_id is None

            mock_console.print.assert_called_once_with("Fetching versions of rack...")

    def test_spinner_with_exceptions(self):
        """test the spinner lets errors through."""
        with patch('sys.stdout.isatty', return_value=True):
            pm = ProgressManager()

            with pytest.raises(ValueError):
                with pm.spinner("failing task"):
                    raise ValueError("test error")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
