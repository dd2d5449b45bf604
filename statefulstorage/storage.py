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

"""Stateful storage interface.

A checkpoint manager talks to exactly one implementation of this interface.
Implementations are interchangeable and are selected by configuration.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping

from statefulstorage.models import Checkpoint, Instance


class StatefulStorage(ABC):
    """Abstract interface for checkpoint storage backends."""

    @abstractmethod
    def init(self, conf: Mapping[str, Any]) -> None:
        """Configure the backend from the runtime's configuration mapping."""
        pass

    def close(self) -> None:
        """Release resources held by the backend."""
        pass

    @abstractmethod
    def store(self, checkpoint: Checkpoint) -> None:
        """Persist one task's checkpoint."""
        pass

    @abstractmethod
    def restore(self, topology_name: str, checkpoint_id: str, instance: Instance) -> Checkpoint:
        """Load the checkpoint stored for ``instance`` at ``checkpoint_id``."""
        pass

    @abstractmethod
    def dispose(self, topology_name: str, oldest_checkpoint_preserved: str, delete_all: bool) -> None:
        """Delete checkpoints older than ``oldest_checkpoint_preserved``, or all of them."""
        pass

    def __enter__(self) -> "StatefulStorage":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["StatefulStorage"]
