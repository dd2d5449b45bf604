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

"""Wire encoding of instance state checkpoints.

The default codec writes a small JSON document with the raw state bytes
base64-encoded. Storage backends accept any object exposing the same
``encode``/``decode`` pair.
"""

import base64
import binascii
import json
from typing import Protocol, runtime_checkable

from statefulstorage.models import InstanceStateCheckpoint


class CodecError(ValueError):
    """Raised when bytes cannot be decoded into an instance state checkpoint."""


@runtime_checkable
class CheckpointCodec(Protocol):
    """Protocol for payload codecs."""

    def encode(self, payload: InstanceStateCheckpoint) -> bytes: ...

    def decode(self, data: bytes) -> InstanceStateCheckpoint: ...


class InstanceStateCodec:
    """JSON codec for ``InstanceStateCheckpoint``."""

    def encode(self, payload: InstanceStateCheckpoint) -> bytes:
        document = {
            "checkpoint_id": payload.checkpoint_id,
            "state": base64.b64encode(payload.state).decode("ascii"),
        }
        return json.dumps(document).encode("utf-8")

    def decode(self, data: bytes) -> InstanceStateCheckpoint:
        try:
            document = json.loads(data.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise CodecError(f"Malformed checkpoint payload: {exc}") from exc

        if not isinstance(document, dict):
            raise CodecError("Malformed checkpoint payload: expected a JSON object")

        checkpoint_id = document.get("checkpoint_id")
        state = document.get("state")
        if not isinstance(checkpoint_id, str) or not isinstance(state, str):
            raise CodecError("Malformed checkpoint payload: missing checkpoint_id or state")

        try:
            raw_state = base64.b64decode(state, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise CodecError(f"Malformed checkpoint state: {exc}") from exc

        return InstanceStateCheckpoint(checkpoint_id=checkpoint_id, state=raw_state)


__all__ = ["CodecError", "CheckpointCodec", "InstanceStateCodec"]
