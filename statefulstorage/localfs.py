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

"""Local filesystem stateful storage.

Checkpoints are laid out as

    {root}/{topology_name}/{checkpoint_id}/{component}/{task_id}

where each ``{task_id}`` file holds the encoded instance state. Writes are
best effort: no temp-file rename and no fsync. The runtime falls back to an
older checkpoint if the newest one is lost.

The runtime does not garbage-collect checkpoints on local disk by itself, so
``store`` prunes the topology down to ``max_checkpoints`` ids before each
write.
"""

import logging
from typing import Any, List, Mapping, Optional

from statefulstorage.codec import CheckpointCodec, CodecError, InstanceStateCodec
from statefulstorage.config import DEFAULT_MAX_CHECKPOINTS, LocalFileSystemStorageConfig
from statefulstorage.errors import (
    CheckpointNotFoundError,
    RestoreDecodeError,
    StorageWriteError,
)
from statefulstorage.fileutils import FileSystemOps
from statefulstorage.models import Checkpoint, Instance
from statefulstorage.paths import CheckpointPaths
from statefulstorage.retention import RetentionPruner
from statefulstorage.storage import StatefulStorage


class LocalFileSystemStorage(StatefulStorage):
    """Stateful storage on a local or locally mounted filesystem."""

    def __init__(
        self,
        config: Optional[LocalFileSystemStorageConfig] = None,
        fs: Optional[FileSystemOps] = None,
        codec: Optional[CheckpointCodec] = None,
    ):
        self.config = config
        self.fs = fs or FileSystemOps()
        self.codec = codec or InstanceStateCodec()
        self.pruner = RetentionPruner(self.fs)
        self.logger = logging.getLogger(self.__class__.__name__)

        if config is not None:
            self._log_config()

    def init(self, conf: Mapping[str, Any]) -> None:
        # A missing root path is reported on first use, not here
        self.config = LocalFileSystemStorageConfig.from_conf(conf)
        self._log_config()

    def _log_config(self) -> None:
        self.logger.info(
            f"Initializing LocalFileSystemStorage with checkpoint root path: "
            f"{self.config.root_path} Max checkpoints: {self.config.max_checkpoints}"
        )

    @property
    def paths(self) -> CheckpointPaths:
        if self.config is None:
            self.config = LocalFileSystemStorageConfig.from_conf({})
        return CheckpointPaths(self.config.require_root_path())

    @property
    def max_checkpoints(self) -> int:
        return self.config.max_checkpoints if self.config is not None else DEFAULT_MAX_CHECKPOINTS

    def store(self, checkpoint: Checkpoint) -> None:
        paths = self.paths
        topology_root = paths.topology_root(checkpoint.topology_name)
        self.pruner.prune_by_count(topology_root, self.max_checkpoints)

        checkpoint_dir = paths.checkpoint_dir(
            checkpoint.topology_name, checkpoint.checkpoint_id, checkpoint.component
        )
        path = paths.checkpoint_file(
            checkpoint.topology_name,
            checkpoint.checkpoint_id,
            checkpoint.component,
            checkpoint.task_id,
        )

        # Another task of the same component may have created it already
        self.fs.create_directory(checkpoint_dir)
        if not self.fs.is_directory_exists(checkpoint_dir):
            raise StorageWriteError(f"Failed to create dir: {checkpoint_dir}")

        contents = self.codec.encode(checkpoint.payload)
        if not self.fs.write_to_file(path, contents, overwrite=True):
            raise StorageWriteError(f"Failed to persist checkpoint to: {path}")

        self.logger.debug(f"Stored checkpoint {path} ({len(contents)} bytes)")

    def restore(self, topology_name: str, checkpoint_id: str, instance: Instance) -> Checkpoint:
        path = self.paths.checkpoint_file(
            topology_name,
            checkpoint_id,
            instance.info.component_name,
            instance.info.task_id,
        )

        data = self.fs.read_from_file(path)
        if not data:
            raise CheckpointNotFoundError(f"Failed to parse the data: no checkpoint at {path}")

        try:
            payload = self.codec.decode(data)
        except CodecError as exc:
            raise RestoreDecodeError(f"Failed to parse the data at {path}") from exc

        return Checkpoint.from_instance(topology_name, instance, payload, checkpoint_id=checkpoint_id)

    def dispose(self, topology_name: str, oldest_checkpoint_preserved: str, delete_all: bool) -> None:
        topology_root = self.paths.topology_root(topology_name)

        if delete_all:
            self.pruner.delete_all(topology_root)
        else:
            self.pruner.prune_before(topology_root, oldest_checkpoint_preserved)

    def prune(self, topology_name: str, keep: Optional[int] = None) -> List[str]:
        """Run store-time retention without storing. Defaults to ``max_checkpoints``."""
        topology_root = self.paths.topology_root(topology_name)
        return self.pruner.prune_by_count(
            topology_root, self.max_checkpoints if keep is None else keep
        )

    def list_checkpoint_ids(self, topology_name: str) -> List[str]:
        """Checkpoint ids currently retained for a topology, oldest first."""
        names = self.fs.list_children(self.paths.topology_root(topology_name))
        return sorted(names or [])


__all__ = ["LocalFileSystemStorage"]
