"""Shared pytest fixtures and configuration for the minish test suite.

Guidelines
----------
* No test spawns a real process — ``subprocess`` is mocked at the infra
  boundary.
* Core tests must be pure — no side effects.
* Directory changes happen only inside ``tmp_path`` with ``monkeypatch``.
"""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory) -> None:
    """Keep host ``MINISH_*`` variables and stray ``.env`` files out of tests."""
    for key in list(os.environ):
        if key.upper().startswith("MINISH_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))
