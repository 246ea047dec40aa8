"""test suite for the console logger."""
import pytest
import sys
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from gemdiff.ui.logger import Logger, plain

FIXED = datetime(2026, 10, 19, 9, 30, 15, 250000)


class TestLogger:
    @pytest.fixture
    def logger(self, console):
        return Logger(console, clock=lambda: FIXED)

    @pytest.mark.parametrize("level", ["info", "success", "warn", "error", "fatal"])
    def test_levels(self, logger, console, level):
        getattr(logger, level)("something happened")

        line = console.file.getvalue()
        assert level in line
        assert line.rstrip().endswith("something happened")

    def test_metadata_prefix(self, logger, console):
        logger.info("hello")
        assert console.file.getvalue().startswith("[2026-10-19 09:30:15.250]")

    def test_without_metadata(self, console):
        Logger(console, metadata=()).success("done")
        assert console.file.getvalue().startswith("✔ success")

    def test_plain_escapes_markup(self, logger, console):
        logger.info(f"gem {plain('[red]x[/red]')}")
        assert "[red]x[/red]" in console.file.getvalue()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
