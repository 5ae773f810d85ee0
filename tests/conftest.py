from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from gitcore.logging import clear_context, configure_logging


@pytest.fixture(autouse=True)
def configure_test_logging() -> Iterator[None]:
    """Send gitcore logs to stderr at WARNING and drop bound context after."""
    configure_logging(level=logging.WARNING)
    yield
    clear_context()


@pytest.fixture
def temp_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A resolved scratch directory; the cwd is restored if a test changes it."""
    monkeypatch.chdir(Path.cwd())
    return tmp_path.resolve()


@pytest.fixture
def clean_env() -> Iterator[None]:
    """Run without any GITCORE_* variables.

    Tests may set ``os.environ`` directly; the full environment is restored
    afterwards.
    """
    saved = dict(os.environ)
    for key in [k for k in os.environ if k.startswith("GITCORE_")]:
        del os.environ[key]
    yield
    os.environ.clear()
    os.environ.update(saved)
