# Copyright 2025 nurion team
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Configuration for the local filesystem stateful storage."""

import os
from pathlib import Path
from typing import Any, Mapping

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from statefulstorage.errors import InitializationError

CLASSNAME_KEY = "statefulstorage.classname"
ROOT_PATH_KEY = "statefulstorage.localfs.root.path"
MAX_CHECKPOINTS_KEY = "statefulstorage.localfs.max.checkpoints"

DEFAULT_MAX_CHECKPOINTS = 10


def expand_home(path: str) -> str:
    """Replace a leading ``~`` with the invoking user's home directory.

    Only the first character is considered: ``~other`` becomes
    ``<home>other``, it is not resolved as another user's home.
    """
    if path.startswith("~"):
        return str(Path.home()) + path[1:]
    return path


class LocalFileSystemStorageConfig(BaseSettings):
    """Root path and retention for ``LocalFileSystemStorage``.

    Values come from constructor arguments, then ``STATEFULSTORAGE_LOCALFS__*``
    environment variables, then ``.env``.
    """

    model_config = SettingsConfigDict(
        env_prefix="STATEFULSTORAGE_LOCALFS__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    root_path: str | None = Field(default=None, description="Checkpoint root directory")
    max_checkpoints: int = Field(
        default=DEFAULT_MAX_CHECKPOINTS,
        description="Checkpoint ids kept per topology when storing",
    )

    @field_validator("root_path", mode="before")
    @classmethod
    def _expand_root_path(cls, value: Any) -> Any:
        if isinstance(value, os.PathLike):
            value = os.fspath(value)
        if isinstance(value, str):
            return expand_home(value)
        return value

    @classmethod
    def from_conf(cls, conf: Mapping[str, Any]) -> "LocalFileSystemStorageConfig":
        """Build a config from the runtime's flat configuration mapping.

        Keys that are absent fall back to the environment and defaults.

        Raises:
            InitializationError: If a value cannot be validated.
        """
        values: dict[str, Any] = {}
        if conf.get(ROOT_PATH_KEY) is not None:
            values["root_path"] = conf[ROOT_PATH_KEY]
        if conf.get(MAX_CHECKPOINTS_KEY) is not None:
            values["max_checkpoints"] = conf[MAX_CHECKPOINTS_KEY]
        try:
            return cls(**values)
        except ValidationError as exc:
            raise InitializationError(f"Invalid stateful storage configuration: {exc}") from exc

    def require_root_path(self) -> str:
        """Return the root path, failing if none was configured."""
        if not self.root_path:
            raise InitializationError(
                f"Checkpoint root path is not configured (set {ROOT_PATH_KEY} "
                f"or STATEFULSTORAGE_LOCALFS__ROOT_PATH)"
            )
        return self.root_path


__all__ = [
    "CLASSNAME_KEY",
    "ROOT_PATH_KEY",
    "MAX_CHECKPOINTS_KEY",
    "DEFAULT_MAX_CHECKPOINTS",
    "LocalFileSystemStorageConfig",
    "expand_home",
]
