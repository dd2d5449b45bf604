"""
Stateful storage - checkpoint persistence for stream processing topologies

Features:
- Pluggable storage interface (init/close/store/restore/dispose)
- Local filesystem backend with per-topology checkpoint namespaces
- Retention by checkpoint count on store and by checkpoint-id watermark on dispose
- Every deletion verified against the filesystem
"""

from statefulstorage.codec import CodecError, InstanceStateCodec
from statefulstorage.config import LocalFileSystemStorageConfig
from statefulstorage.errors import (
    CheckpointNotFoundError,
    DisposeError,
    InitializationError,
    PruneError,
    RestoreDecodeError,
    StatefulStorageError,
    StorageWriteError,
)
from statefulstorage.factory import create_stateful_storage, register_storage
from statefulstorage.localfs import LocalFileSystemStorage
from statefulstorage.models import Checkpoint, Instance, InstanceInfo, InstanceStateCheckpoint
from statefulstorage.storage import StatefulStorage

__version__ = "0.1.0"
__all__ = [
    # Interface and backends
    "StatefulStorage",
    "LocalFileSystemStorage",
    "LocalFileSystemStorageConfig",
    "create_stateful_storage",
    "register_storage",
    # Data structures
    "Checkpoint",
    "Instance",
    "InstanceInfo",
    "InstanceStateCheckpoint",
    "InstanceStateCodec",
    # Errors
    "StatefulStorageError",
    "InitializationError",
    "StorageWriteError",
    "RestoreDecodeError",
    "CheckpointNotFoundError",
    "PruneError",
    "DisposeError",
    "CodecError",
]
