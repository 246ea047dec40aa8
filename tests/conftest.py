import io
import sys
from pathlib import Path
from unittest.mock import Mock

import pytest
from rich.console import Console

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from gemdiff.session import Session
from gemdiff.utils.command import CommandRunner


@pytest.fixture
def console():
    """console writing to a buffer, wide enough to keep lines intact."""
    return Console(file=io.StringIO(), width=240, color_system=None)


@pytest.fixture
def session(console):
    """session whose command runner is a mock."""
    session = Session.create(console)
    session.runner = Mock(spec=CommandRunner)
    return session
