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

"""Checkpoint data structures exchanged with the runtime."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class InstanceInfo:
    """Static description of one task instance of a component."""

    task_id: int
    component_name: str
    component_index: int = 0


@dataclass
class Instance:
    """Identity of a running task instance.

    Only ``info.component_name`` and ``info.task_id`` take part in locating
    a checkpoint; the rest is carried for the runtime.
    """

    info: InstanceInfo
    instance_id: str = ""
    stmgr_id: str = ""

    @classmethod
    def of(cls, component_name: str, task_id: int, component_index: int = 0) -> "Instance":
        return cls(
            info=InstanceInfo(
                task_id=task_id,
                component_name=component_name,
                component_index=component_index,
            ),
            instance_id=f"{component_name}-{task_id}",
        )


@dataclass
class InstanceStateCheckpoint:
    """Serialized processing state of one task at one checkpoint."""

    checkpoint_id: str
    state: bytes = b""


@dataclass
class Checkpoint:
    """One task's state snapshot at one checkpoint instant.

    ``(topology_name, checkpoint_id, component, task_id)`` is the storage key;
    storing the same key twice keeps the later payload.
    """

    topology_name: str
    checkpoint_id: str
    component: str
    task_id: int
    payload: InstanceStateCheckpoint = field(repr=False)

    @classmethod
    def from_instance(
        cls,
        topology_name: str,
        instance: Instance,
        payload: InstanceStateCheckpoint,
        checkpoint_id: Optional[str] = None,
    ) -> "Checkpoint":
        """Bind a payload to the identity of the instance that produced it.

        The checkpoint id defaults to the one recorded in the payload.
        """
        return cls(
            topology_name=topology_name,
            checkpoint_id=checkpoint_id if checkpoint_id is not None else payload.checkpoint_id,
            component=instance.info.component_name,
            task_id=instance.info.task_id,
            payload=payload,
        )


__all__ = ["InstanceInfo", "Instance", "InstanceStateCheckpoint", "Checkpoint"]
