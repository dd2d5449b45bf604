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

"""Filesystem primitives backed by fsspec.

Primitives report failure through their return values instead of raising,
and log the underlying error. Callers are expected to re-check the state of
the filesystem after a mutation rather than trust these return values.
"""

import logging
import posixpath
from typing import List, Optional

import fsspec


class FileSystemOps:
    """Directory and byte-level file operations on one fsspec filesystem."""

    def __init__(self, protocol: str = "file", **storage_options):
        """
        Args:
            protocol: fsspec protocol name. Must be a filesystem with real
                directories (``file`` or a locally mounted equivalent).
            **storage_options: Additional options passed to fsspec.filesystem.
        """
        self.protocol = protocol
        self.fs = fsspec.filesystem(protocol, **storage_options)
        self.logger = logging.getLogger(self.__class__.__name__)

    def create_directory(self, path: str) -> bool:
        """Create ``path`` and its parents. An existing directory is success."""
        try:
            self.fs.makedirs(path, exist_ok=True)
            return True
        except OSError as exc:
            self.logger.warning(f"Failed to create directory {path}: {exc}")
            return False

    def is_directory_exists(self, path: str) -> bool:
        return self.fs.isdir(path)

    def has_children(self, path: str) -> bool:
        children = self.list_children(path)
        return bool(children)

    def list_children(self, path: str) -> Optional[List[str]]:
        """Return the names of the immediate children of ``path``.

        Returns None when ``path`` is not an existing directory. Names are
        returned in listing order, not sorted.
        """
        if not self.fs.isdir(path):
            return None
        try:
            entries = self.fs.ls(path, detail=False)
        except FileNotFoundError:
            return None
        return [posixpath.basename(entry.rstrip("/")) for entry in entries]

    def write_to_file(self, path: str, data: bytes, overwrite: bool) -> bool:
        """Write ``data`` to ``path``.

        Returns False if the file exists and ``overwrite`` is not set, or if
        the write fails.
        """
        if not overwrite and self.fs.exists(path):
            self.logger.warning(f"Refusing to overwrite existing file {path}")
            return False
        try:
            with self.fs.open(path, "wb") as f:
                f.write(data)
        except OSError as exc:
            self.logger.warning(f"Failed to write {len(data)} bytes to {path}: {exc}")
            return False
        return True

    def read_from_file(self, path: str) -> bytes:
        """Return the content of ``path``, or empty bytes if it cannot be read."""
        try:
            return self.fs.cat_file(path)
        except FileNotFoundError:
            self.logger.debug(f"File not found: {path}")
            return b""
        except OSError as exc:
            self.logger.warning(f"Failed to read {path}: {exc}")
            return b""

    def delete_dir(self, path: str, check_exists: bool = True) -> bool:
        """Recursively delete ``path``.

        With ``check_exists`` an absent path counts as already deleted.
        """
        if check_exists and not self.fs.exists(path):
            return True
        try:
            self.fs.rm(path, recursive=True)
        except FileNotFoundError:
            return False
        except OSError as exc:
            self.logger.warning(f"Failed to delete {path}: {exc}")
            return False
        return True


__all__ = ["FileSystemOps"]
