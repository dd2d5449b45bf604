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

"""Checkpoint namespace layout.

    {root}/{topology_name}/{checkpoint_id}/{component}/{task_id}

The children of a topology root are exactly the checkpoint ids retained for
that topology.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CheckpointPaths:
    root: str

    def topology_root(self, topology_name: str) -> str:
        return f"{self.root}/{topology_name}"

    def checkpoint_root(self, topology_name: str, checkpoint_id: str) -> str:
        return f"{self.topology_root(topology_name)}/{checkpoint_id}"

    def checkpoint_dir(self, topology_name: str, checkpoint_id: str, component: str) -> str:
        return f"{self.checkpoint_root(topology_name, checkpoint_id)}/{component}"

    def checkpoint_file(
        self, topology_name: str, checkpoint_id: str, component: str, task_id: int
    ) -> str:
        return f"{self.checkpoint_dir(topology_name, checkpoint_id, component)}/{task_id}"


__all__ = ["CheckpointPaths"]
