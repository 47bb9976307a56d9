# backend/tests/conftest.py
"""
Pytest configuration for Postboard backend tests.

- Ensures that the project root (backend/) is added to sys.path
  so that `import postboard.*` works correctly in tests.
- Ensures notification channels are disabled by default so that
  tests never call real external APIs.
- Resets shared store / service / dispatcher state between tests.
"""

import os
import sys
from pathlib import Path

import pytest


def _ensure_project_root_in_sys_path() -> None:
    # This file is located at: backend/tests/conftest.py
    # parents[1] -> backend/
    project_root = Path(__file__).resolve().parents[1]
    project_root_str = str(project_root)

    if project_root_str not in sys.path:
        # Insert at the beginning so it has priority over site-packages, etc.
        sys.path.insert(0, project_root_str)


def _ensure_test_env_vars() -> None:
    """
    Set safe environment defaults for tests.

    External notification channels are off unless a test enables them
    explicitly via monkeypatch.
    """
    os.environ.setdefault("NOTIFY_EMAIL_ENABLED", "false")
    os.environ.setdefault("NOTIFY_LINE_ENABLED", "false")
    os.environ.setdefault("LOG_LEVEL", "INFO")


_ensure_project_root_in_sys_path()
_ensure_test_env_vars()


@pytest.fixture(autouse=True)
def _reset_shared_state():
    from postboard.posts.state import reset_state

    reset_state()
    yield
    reset_state()
