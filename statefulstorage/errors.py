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

"""Errors raised by stateful storage backends."""


class StatefulStorageError(RuntimeError):
    """Base class for every failure surfaced by a stateful storage backend."""


class InitializationError(StatefulStorageError):
    """Raised when the backend is used without a usable configuration."""


class StorageWriteError(StatefulStorageError):
    """Raised when a checkpoint directory or file could not be written."""


class RestoreDecodeError(StatefulStorageError):
    """Raised when a checkpoint could not be read back or decoded."""


class CheckpointNotFoundError(RestoreDecodeError):
    """Raised when a checkpoint file is absent or empty.

    Absent and empty files are not told apart. Callers that only care about
    a failed restore should catch ``RestoreDecodeError``.
    """


class PruneError(StatefulStorageError):
    """Raised when a pruned checkpoint directory survives its deletion."""


class DisposeError(StatefulStorageError):
    """Raised when disposed checkpoints survive their deletion."""


__all__ = [
    "StatefulStorageError",
    "InitializationError",
    "StorageWriteError",
    "RestoreDecodeError",
    "CheckpointNotFoundError",
    "PruneError",
    "DisposeError",
]
