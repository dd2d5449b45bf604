"""Tests for storage configuration."""

from pathlib import Path

import pytest

from statefulstorage.config import (
    DEFAULT_MAX_CHECKPOINTS,
    MAX_CHECKPOINTS_KEY,
    ROOT_PATH_KEY,
    LocalFileSystemStorageConfig,
    expand_home,
)
from statefulstorage.errors import InitializationError


class TestExpandHome:
    def test_leading_tilde_is_replaced(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert expand_home("~/checkpoints") == f"{tmp_path}/checkpoints"

    def test_only_first_character_is_considered(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert expand_home("~other/ckpt") == f"{tmp_path}other/ckpt"

    def test_other_paths_are_untouched(self):
        assert expand_home("/data/~/ckpt") == "/data/~/ckpt"


class TestLocalFileSystemStorageConfig:
    def test_defaults(self):
        config = LocalFileSystemStorageConfig()

        assert config.root_path is None
        assert config.max_checkpoints == DEFAULT_MAX_CHECKPOINTS == 10

    def test_from_conf_reads_runtime_keys(self):
        config = LocalFileSystemStorageConfig.from_conf(
            {ROOT_PATH_KEY: "/data/ckpt", MAX_CHECKPOINTS_KEY: 3, "unrelated.key": True}
        )

        assert config.root_path == "/data/ckpt"
        assert config.max_checkpoints == 3

    def test_from_conf_coerces_string_max_checkpoints(self):
        config = LocalFileSystemStorageConfig.from_conf({MAX_CHECKPOINTS_KEY: "4"})
        assert config.max_checkpoints == 4

    def test_root_path_home_expansion(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))

        config = LocalFileSystemStorageConfig.from_conf({ROOT_PATH_KEY: "~/ckpt"})

        assert config.root_path == str(Path(tmp_path) / "ckpt")

    def test_environment_fills_missing_keys(self, monkeypatch):
        monkeypatch.setenv("STATEFULSTORAGE_LOCALFS__ROOT_PATH", "/env/ckpt")
        monkeypatch.setenv("STATEFULSTORAGE_LOCALFS__MAX_CHECKPOINTS", "7")

        config = LocalFileSystemStorageConfig.from_conf({})

        assert config.root_path == "/env/ckpt"
        assert config.max_checkpoints == 7

    def test_conf_wins_over_environment(self, monkeypatch):
        monkeypatch.setenv("STATEFULSTORAGE_LOCALFS__ROOT_PATH", "/env/ckpt")

        config = LocalFileSystemStorageConfig.from_conf({ROOT_PATH_KEY: "/conf/ckpt"})

        assert config.root_path == "/conf/ckpt"

    def test_require_root_path(self):
        assert LocalFileSystemStorageConfig(root_path="/x").require_root_path() == "/x"

        with pytest.raises(InitializationError):
            LocalFileSystemStorageConfig().require_root_path()

    def test_from_conf_accepts_path_root(self, tmp_path):
        config = LocalFileSystemStorageConfig.from_conf({ROOT_PATH_KEY: tmp_path / "ckpt"})

        assert config.root_path == str(tmp_path / "ckpt")
        assert isinstance(config.root_path, str)

    def test_path_root_home_expansion(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))

        config = LocalFileSystemStorageConfig.from_conf({ROOT_PATH_KEY: Path("~/ckpt")})

        assert config.root_path == str(tmp_path / "ckpt")

    def test_from_conf_rejects_invalid_max_checkpoints(self):
        with pytest.raises(InitializationError, match="Invalid stateful storage configuration"):
            LocalFileSystemStorageConfig.from_conf({MAX_CHECKPOINTS_KEY: "ten"})

    def test_from_conf_rejects_invalid_root_path(self):
        with pytest.raises(InitializationError):
            LocalFileSystemStorageConfig.from_conf({ROOT_PATH_KEY: 42})

    def test_invalid_environment_value_raises_initialization_error(self, monkeypatch):
        monkeypatch.setenv("STATEFULSTORAGE_LOCALFS__MAX_CHECKPOINTS", "ten")

        with pytest.raises(InitializationError):
            LocalFileSystemStorageConfig.from_conf({})
