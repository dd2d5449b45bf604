"""Tests for the instance state codec."""

import json

import pytest

from statefulstorage.codec import CheckpointCodec, CodecError, InstanceStateCodec
from statefulstorage.models import InstanceStateCheckpoint


class TestInstanceStateCodec:
    def setup_method(self):
        self.codec = InstanceStateCodec()

    def test_binary_state_survives_encoding(self):
        payload = InstanceStateCheckpoint(checkpoint_id="0000000003", state=bytes(range(256)))

        decoded = self.codec.decode(self.codec.encode(payload))

        assert decoded == payload

    def test_encoded_form_is_json(self):
        encoded = self.codec.encode(InstanceStateCheckpoint(checkpoint_id="c1", state=b"abc"))

        document = json.loads(encoded)
        assert document == {"checkpoint_id": "c1", "state": "YWJj"}

    def test_satisfies_codec_protocol(self):
        assert isinstance(self.codec, CheckpointCodec)

    @pytest.mark.parametrize(
        "data",
        [
            b"\xff\xfe\x00",
            b"not json",
            b"[1, 2, 3]",
            b'{"checkpoint_id": "c1"}',
            b'{"checkpoint_id": 5, "state": ""}',
            b'{"checkpoint_id": "c1", "state": "!!not base64!!"}',
        ],
    )
    def test_malformed_input_raises_codec_error(self, data):
        with pytest.raises(CodecError):
            self.codec.decode(data)
