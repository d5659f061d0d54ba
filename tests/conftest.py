"""Global pytest fixtures for deterministic test environment."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolate_runtime_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear threshold overrides that can leak into tests on developer machines."""
    for key in (
        "RESUME_BULLETS_WARNING_LENGTH",
        "RESUME_BULLETS_MAX_LENGTH",
    ):
        monkeypatch.delenv(key, raising=False)
