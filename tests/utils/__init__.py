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

"""Common test utilities for stateful storage tests."""

from typing import Optional

from statefulstorage.models import Checkpoint, Instance, InstanceStateCheckpoint


def make_checkpoint(
    checkpoint_id: str,
    topology: str = "topoA",
    component: str = "word_count",
    task_id: int = 1,
    state: Optional[bytes] = None,
) -> Checkpoint:
    """Build a checkpoint whose state identifies where it came from."""
    if state is None:
        state = f"{topology}/{checkpoint_id}/{component}/{task_id}".encode()
    return Checkpoint.from_instance(
        topology,
        Instance.of(component, task_id),
        InstanceStateCheckpoint(checkpoint_id=checkpoint_id, state=state),
    )
