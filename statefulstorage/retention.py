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

"""Retention policies for checkpoint-id directories under a topology root.

Checkpoint ids are compared as plain strings and never parsed. Callers must
assign ids whose lexical order is their temporal order (zero-padded counters,
sortable timestamps); otherwise "oldest" below means "lexically smallest".

Every deletion is verified by looking at the filesystem again afterwards.
"""

import logging
from typing import List, Optional

from statefulstorage.errors import DisposeError, PruneError
from statefulstorage.fileutils import FileSystemOps


class RetentionPruner:
    """Deletes checkpoint-id subdirectories of a topology root."""

    def __init__(self, fs: FileSystemOps):
        self.fs = fs
        self.logger = logging.getLogger(self.__class__.__name__)

    def prune_by_count(self, topology_root: str, keep: int) -> List[str]:
        """Keep the ``keep`` lexically greatest checkpoint ids, delete the rest.

        A missing or empty topology root is a no-op. ``keep <= 0`` deletes
        every checkpoint id.

        Returns:
            Deleted checkpoint ids, oldest first.

        Raises:
            PruneError: If a deleted checkpoint directory still exists.
        """
        if not (self.fs.is_directory_exists(topology_root) and self.fs.has_children(topology_root)):
            return []

        children = sorted(self.fs.list_children(topology_root) or [])
        to_delete = children[: max(len(children) - keep, 0)]

        for name in to_delete:
            path = f"{topology_root}/{name}"
            self.fs.delete_dir(path, check_exists=True)

            if self.fs.is_directory_exists(path):
                raise PruneError(f"Failed to delete {path}")

        if to_delete:
            self.logger.info(
                f"Pruned {len(to_delete)} checkpoint(s) under {topology_root}, "
                f"keeping {len(children) - len(to_delete)}"
            )
        return to_delete

    def prune_before(self, topology_root: str, oldest_preserved: str) -> Optional[List[str]]:
        """Delete every checkpoint id lexically smaller than ``oldest_preserved``.

        Returns:
            Deleted checkpoint ids, or None if the topology root does not exist.

        Raises:
            DisposeError: If a checkpoint id older than the watermark survives.
        """
        names = self.fs.list_children(topology_root)
        if names is None:
            self.logger.warning(f"There is no such checkpoint root path: {topology_root}")
            return None

        deleted = []
        for name in names:
            if name < oldest_preserved:
                self.fs.delete_dir(f"{topology_root}/{name}", check_exists=True)
                deleted.append(name)

        # Everything older than the watermark must be gone now
        for name in self.fs.list_children(topology_root) or []:
            if name < oldest_preserved:
                raise DisposeError(f"Failed to delete {topology_root}/{name}")

        if deleted:
            self.logger.info(
                f"Disposed {len(deleted)} checkpoint(s) older than {oldest_preserved} "
                f"under {topology_root}"
            )
        return sorted(deleted)

    def delete_all(self, topology_root: str) -> None:
        """Delete the whole topology root.

        Raises:
            DisposeError: If the topology root still exists afterwards.
        """
        self.fs.delete_dir(topology_root, check_exists=True)
        if self.fs.is_directory_exists(topology_root):
            raise DisposeError(f"Failed to delete {topology_root}")
        self.logger.info(f"Deleted all checkpoints under {topology_root}")


__all__ = ["RetentionPruner"]
