"""Tests for columnar batch decoding."""

import numpy as np
import pytest

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from mavlink_codec.protocol.batch import decode_batch, message_dtype
from mavlink_codec.protocol.errors import TruncatedPayloadError
from mavlink_codec.dialects import get_dialect
from mavlink_codec.dialects.common.messages import AttitudeQuaternionCov, Heartbeat, ParamValue, Ping


class TestMessageDtype:
    """Test structured dtypes built from message layouts."""

    @pytest.mark.parametrize(
        "message_cls",
        list(get_dialect("ardupilotmega").messages.values()),
        ids=lambda cls: cls.NAME,
    )
    def test_itemsize_matches_payload_length(self, message_cls):
        """Test that the dtype has no padding."""
        assert message_dtype(message_cls).itemsize == message_cls.payload_length

    def test_field_order(self):
        """Test that dtype fields follow wire order."""
        dtype = message_dtype(Heartbeat)
        assert list(dtype.names) == [f.name for f in Heartbeat.WIRE_FIELDS]
        assert dtype.fields["custom_mode"][1] == 0
        assert dtype.fields["type"][1] == 4

    def test_array_and_text_fields(self):
        """Test subarray and byte-string fields."""
        assert message_dtype(AttitudeQuaternionCov)["covariance"].shape == (9,)
        assert message_dtype(ParamValue)["param_id"] == np.dtype("S16")


class TestDecodeBatch:
    """Test decoding many payloads at once."""

    @pytest.fixture
    def pings(self):
        """Create encoded PING payloads."""
        return [Ping(time_usec=i * 1000, seq=i, target_system=1).pack() for i in range(10)]

    def test_values(self, pings):
        """Test that columns hold the decoded values."""
        arr = decode_batch(Ping, pings)
        assert arr.shape == (10,)
        np.testing.assert_array_equal(arr["seq"], np.arange(10))
        np.testing.assert_array_equal(arr["time_usec"], np.arange(10) * 1000)
        assert (arr["target_system"] == 1).all()

    def test_matches_single_decode(self):
        """Test agreement with per-message decoding."""
        msgs = [AttitudeQuaternionCov(time_usec=i, q=[1.0, 0.0, 0.5, float(i)]) for i in range(3)]
        arr = decode_batch(AttitudeQuaternionCov, [m.pack() for m in msgs])
        for row, msg in zip(arr, msgs):
            decoded = AttitudeQuaternionCov.unpack(msg.pack())
            assert row["time_usec"] == decoded.time_usec
            np.testing.assert_array_equal(row["q"], np.array(decoded.q, dtype=np.float32))

    def test_text(self):
        """Test that text columns keep their bytes."""
        arr = decode_batch(ParamValue, [ParamValue(param_id="SYSID_THISMAV").pack()])
        assert arr["param_id"][0] == b"SYSID_THISMAV"

    def test_trailing_bytes_ignored(self, pings):
        """Test that payloads longer than the layout are cut."""
        arr = decode_batch(Ping, [p + b"\xff\xff" for p in pings])
        np.testing.assert_array_equal(arr["seq"], np.arange(10))

    def test_truncated(self, pings):
        """Test that a short payload raises."""
        with pytest.raises(TruncatedPayloadError) as exc_info:
            decode_batch(Ping, pings[:3] + [pings[3][:10]])
        assert exc_info.value.needed == 14
        assert exc_info.value.available == 10
        assert exc_info.value.message_name == "PING"

    def test_empty(self):
        """Test that no payloads give an empty array."""
        arr = decode_batch(Ping, [])
        assert arr.shape == (0,)
        assert arr.dtype == message_dtype(Ping)

    def test_generator_input(self, pings):
        """Test that any iterable of payloads is accepted."""
        arr = decode_batch(Ping, (p for p in pings))
        assert len(arr) == 10


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
