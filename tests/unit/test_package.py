"""Tests for voice-tasks package structure and imports."""

from __future__ import annotations

import os
import re
import subprocess
import sys
from pathlib import Path

_SRC = Path(__file__).resolve().parents[2] / "src"


def test_package_is_importable() -> None:
    import voice_tasks  # noqa: F401


def test_package_version_is_semver() -> None:
    import voice_tasks

    assert re.match(r"^\d+\.\d+\.\d+$", voice_tasks.__version__)


def test_public_entry_points() -> None:
    from voice_tasks import fallback_extract, parse  # noqa: F401


def test_main_module_runs_offline() -> None:
    """``python -m voice_tasks --offline ...`` must run and exit cleanly."""
    env = {**os.environ, "PYTHONPATH": os.pathsep.join(filter(None, [str(_SRC), os.environ.get("PYTHONPATH")]))}
    result = subprocess.run(
        [sys.executable, "-m", "voice_tasks", "--offline", "buy milk tomorrow"],
        capture_output=True,
        text=True,
        timeout=30,
        env=env,
    )

    assert result.returncode == 0
    assert "Buy milk" in result.stdout
    assert "Traceback" not in result.stderr
