"""Shared test fixtures."""

import pytest


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep developer environment settings out of the storage configuration."""
    for name in (
        "STATEFULSTORAGE_LOCALFS__ROOT_PATH",
        "STATEFULSTORAGE_LOCALFS__MAX_CHECKPOINTS",
        "STATEFULSTORAGE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
