"""Tests for typed message records."""

import math

import numpy as np
import pytest

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from mavlink_codec.config import CodecConfig
from mavlink_codec.dialects import get_dialect
from mavlink_codec.dialects.common.enums import MavAutopilot, MavCmd, MavModeFlag, MavState, MavType
from mavlink_codec.dialects.common.messages import (
    Attitude,
    AttitudeQuaternionCov,
    CommandLong,
    Heartbeat,
    ParamValue,
    Ping,
    SetMode,
    Statustext,
)
from mavlink_codec.protocol.binary_codec import PayloadReader, PayloadWriter
from mavlink_codec.protocol.errors import FieldValueError, OutOfRangeEnumValueError, TruncatedPayloadError
from mavlink_codec.protocol.fields import INTEGER_RANGES
from mavlink_codec.protocol.messages import MavlinkMessage


HEARTBEAT_PAYLOAD = bytes.fromhex("000000000203510403")


class TestMessageClass:
    """Test generated record classes."""

    def test_class_attributes(self):
        """Test identity attributes of HEARTBEAT."""
        assert issubclass(Heartbeat, MavlinkMessage)
        assert Heartbeat.ID == 0
        assert Heartbeat.NAME == "HEARTBEAT"
        assert Heartbeat.CRC_EXTRA == 50
        assert Heartbeat.DIALECT == "common"
        assert Heartbeat.payload_length == 9

    def test_payload_lengths(self):
        """Test fixed payload sizes."""
        assert Ping.payload_length == 14
        assert CommandLong.payload_length == 33
        assert Statustext.payload_length == 51

    def test_defaults(self):
        """Test default field values of a fresh record."""
        msg = Heartbeat()
        assert msg.custom_mode == 0
        assert msg.type == MavType.GENERIC
        assert msg.autopilot == MavAutopilot.GENERIC
        assert msg.mavlink_version == 3
        assert msg.unrecognized_enum_fields() == {}

    def test_enum_defaults_are_members(self):
        """Test that zero defaults of enum fields become enum members."""
        msg = Heartbeat()
        assert isinstance(msg.type, MavType)
        assert isinstance(msg.system_status, MavState)

    def test_keyword_construction(self):
        """Test dataclass keyword construction."""
        msg = Ping(time_usec=1, seq=2, target_system=3, target_component=4)
        assert msg.to_dict() == {
            "time_usec": 1,
            "seq": 2,
            "target_system": 3,
            "target_component": 4,
        }

    def test_equality(self):
        """Test value equality between records."""
        assert Ping(seq=1) == Ping(seq=1)
        assert Ping(seq=1) != Ping(seq=2)

    def test_array_defaults_independent(self):
        """Test that array fields are not shared between instances."""
        x = AttitudeQuaternionCov()
        y = AttitudeQuaternionCov()
        x.q[0] = 1.0
        assert y.q == [0.0, 0.0, 0.0, 0.0]
        assert len(y.covariance) == 9


class TestEncodeDecode:
    """Test wire round trips."""

    def test_heartbeat_encode(self):
        """Test the HEARTBEAT wire bytes."""
        msg = Heartbeat(
            type=MavType.QUADROTOR,
            autopilot=MavAutopilot.ARDUPILOTMEGA,
            base_mode=MavModeFlag.MANUAL_INPUT_ENABLED | MavModeFlag.STABILIZE_ENABLED | MavModeFlag.CUSTOM_MODE_ENABLED,
            custom_mode=0,
            system_status=MavState.ACTIVE,
        )
        assert msg.pack() == HEARTBEAT_PAYLOAD
        assert len(msg.pack()) == 9

    def test_heartbeat_decode(self):
        """Test that decoded enum fields are enum members."""
        msg = Heartbeat.unpack(HEARTBEAT_PAYLOAD)
        assert msg.type is MavType.QUADROTOR
        assert msg.autopilot is MavAutopilot.ARDUPILOTMEGA
        assert msg.system_status is MavState.ACTIVE
        assert msg.base_mode & MavModeFlag.STABILIZE_ENABLED
        assert msg.mavlink_version == 3

    def test_ping_layout(self):
        """Test the PING payload layout."""
        msg = Ping(time_usec=1, seq=2, target_system=3, target_component=4)
        payload = msg.pack()
        assert len(payload) == 14
        assert payload == bytes.fromhex("0100000000000000020000000304")
        assert Ping.unpack(payload) == msg

    def test_command_long(self):
        """Test that COMMAND_LONG carries the command as uint16."""
        msg = CommandLong(
            target_system=1,
            target_component=1,
            command=MavCmd.COMPONENT_ARM_DISARM,
            param1=1.0,
        )
        payload = msg.pack()
        assert len(payload) == 33
        # Seven float params come first, then the command
        assert payload[28:30] == (400).to_bytes(2, "little")
        decoded = CommandLong.unpack(payload)
        assert decoded.command is MavCmd.COMPONENT_ARM_DISARM
        assert decoded.param1 == 1.0

    def test_text_round_trip(self):
        """Test text fields through encode and decode."""
        msg = Statustext(severity=6, text="PreArm: Check fence")
        decoded = Statustext.unpack(msg.pack())
        assert decoded.text == "PreArm: Check fence"

    def test_text_truncated_on_encode(self):
        """Test that over-long text is cut to the field length."""
        msg = ParamValue(param_id="A_VERY_LONG_PARAMETER_NAME")
        assert ParamValue.unpack(msg.pack()).param_id == "A_VERY_LONG_PARA"

    def test_truncated_payload_leaves_record_unchanged(self):
        """Test that a short payload raises and keeps previous values."""
        msg = Heartbeat(custom_mode=7, system_status=MavState.STANDBY)
        before = msg.to_dict()
        reader = PayloadReader(HEARTBEAT_PAYLOAD[:5], message_name=msg.NAME)
        with pytest.raises(TruncatedPayloadError) as exc_info:
            msg.decode(reader)
        assert exc_info.value.available == 5
        assert msg.to_dict() == before

    def test_unknown_enum_value_permissive(self):
        """Test that unknown enum values decode as plain integers."""
        payload = bytearray(HEARTBEAT_PAYLOAD)
        payload[4] = 200  # type
        msg = Heartbeat.unpack(bytes(payload))
        assert msg.type == 200
        assert not isinstance(msg.type, MavType)
        assert msg.unrecognized_enum_fields() == {"type": 200}

    def test_unknown_enum_value_strict(self):
        """Test that strict mode rejects unknown enum values."""
        payload = bytearray(HEARTBEAT_PAYLOAD)
        payload[7] = 99  # system_status
        with pytest.raises(OutOfRangeEnumValueError) as exc_info:
            Heartbeat.unpack(bytes(payload), CodecConfig(strict_enums=True))
        assert exc_info.value.field_name == "system_status"
        assert exc_info.value.enum_name == "MAV_STATE"
        assert exc_info.value.value == 99

    def test_encode_into_writer(self):
        """Test encoding several messages into one writer."""
        writer = PayloadWriter()
        Heartbeat().encode(writer)
        Ping().encode(writer)
        assert len(writer) == 9 + 14

    def test_numpy_values(self):
        """Test that numpy scalars are accepted."""
        msg = Ping(time_usec=np.uint64(5), seq=np.int32(6))
        assert Ping.unpack(msg.pack()).seq == 6


def _boundary_value(field, mode):
    if field.is_text:
        return "z" * field.array_length if mode == "high" else ""
    if field.is_float:
        value = {"low": -1.5, "high": float(np.float32(3.25e38)), "inf": float("-inf")}[mode]
    else:
        low_bound, high_bound = INTEGER_RANGES[field.base_type]
        value = low_bound if mode == "low" else high_bound
    if field.is_array:
        return [value] * field.array_length
    return value


def _random_value(field, rng):
    if field.is_text:
        return "".join(rng.choice(list("abcdefgh"), size=rng.integers(0, field.array_length + 1)))
    if field.is_float:
        values = [float(np.float32(v)) for v in rng.standard_normal(field.cardinality) * 1000]
    else:
        low_bound, high_bound = INTEGER_RANGES[field.base_type]
        values = [int(v) for v in rng.integers(low_bound, high_bound, size=field.cardinality, endpoint=True, dtype=np.uint64 if low_bound == 0 else np.int64)]
    return values if field.is_array else values[0]


def _all_messages():
    return list(get_dialect("ardupilotmega").messages.values())


class TestAllMessagesRoundTrip:
    """Round trip every bundled message at its value bounds."""

    @pytest.mark.parametrize("message_cls", _all_messages(), ids=lambda cls: cls.NAME)
    @pytest.mark.parametrize("mode", ["low", "high", "inf"])
    def test_round_trip(self, message_cls, mode):
        """Test that encode then decode reproduces every field."""
        msg = message_cls(**{f.name: _boundary_value(f, mode) for f in message_cls.FIELDS})
        payload = msg.pack()
        assert len(payload) == message_cls.payload_length
        assert message_cls.unpack(payload) == msg

    @pytest.mark.parametrize("message_cls", _all_messages(), ids=lambda cls: cls.NAME)
    def test_random_values(self, message_cls):
        """Test fixed size and round trip under random assignments."""
        rng = np.random.default_rng(message_cls.ID)
        for _ in range(5):
            msg = message_cls(**{f.name: _random_value(f, rng) for f in message_cls.FIELDS})
            payload = msg.pack()
            assert len(payload) == message_cls.payload_length
            assert message_cls.unpack(payload) == msg

    def test_nan_preserved(self):
        """Test that NaN survives the round trip."""
        msg = Attitude(roll=float("nan"), pitch=float("inf"), yaw=float("-inf"))
        decoded = Attitude.unpack(msg.pack())
        assert math.isnan(decoded.roll)
        assert decoded.pitch == float("inf")
        assert decoded.yaw == float("-inf")

    def test_float32_precision(self):
        """Test that float fields carry single precision."""
        msg = Attitude(roll=0.1)
        decoded = Attitude.unpack(msg.pack())
        assert decoded.roll == float(np.float32(0.1))
        assert decoded.roll != 0.1


class TestEnumWidth:
    """Test that enum fields keep their declared width."""

    def test_command_long_command_is_two_bytes(self):
        """Test COMMAND_LONG.command as uint16."""
        f = {f.name: f for f in CommandLong.FIELDS}["command"]
        assert f.type == "uint16_t"
        assert f.size == 2
        msg = CommandLong(command=MavCmd.COMPONENT_ARM_DISARM)
        assert CommandLong.unpack(msg.pack()).command == 400

    def test_set_mode_base_mode_is_one_byte(self):
        """Test SET_MODE.base_mode as uint8."""
        f = {f.name: f for f in SetMode.FIELDS}["base_mode"]
        assert f.size == 1
        assert SetMode.payload_length == 6
        with pytest.raises(FieldValueError):
            SetMode(base_mode=256).pack()


class TestMutationHook:
    """Test field change notification."""

    @pytest.fixture
    def msg(self):
        """Create a fresh HEARTBEAT."""
        return Heartbeat()

    def test_listener_called_after_assignment(self, msg):
        """Test that listeners see the new value already assigned."""
        seen = []

        def listener(message, name, old, new):
            seen.append((name, old, new, getattr(message, name)))

        msg.subscribe(listener)
        msg.custom_mode = 4
        assert seen == [("custom_mode", 0, 4, 4)]

    def test_not_called_during_construction(self):
        """Test that construction does not notify."""
        seen = []
        msg = Heartbeat(custom_mode=1)
        msg.subscribe(lambda *args: seen.append(args))
        assert seen == []

    def test_unsubscribe(self, msg):
        """Test that removed listeners are not called."""
        seen = []
        listener = msg.subscribe(lambda m, name, old, new: seen.append(name))
        msg.unsubscribe(listener)
        msg.custom_mode = 4
        assert seen == []

    def test_listener_error_isolated(self, msg):
        """Test that a failing listener does not stop the others."""
        seen = []

        def bad_listener(message, name, old, new):
            raise RuntimeError("boom")

        msg.subscribe(bad_listener)
        msg.subscribe(lambda m, name, old, new: seen.append(name))
        msg.custom_mode = 4
        assert msg.custom_mode == 4
        assert seen == ["custom_mode"]

    def test_decode_notifies(self, msg):
        """Test that decoding into a record notifies per field."""
        seen = []
        msg.subscribe(lambda m, name, old, new: seen.append(name))
        msg.decode(PayloadReader(HEARTBEAT_PAYLOAD))
        assert "type" in seen
        assert "custom_mode" in seen

    def test_listeners_per_instance(self):
        """Test that listeners are not shared between instances."""
        seen = []
        a = Heartbeat()
        b = Heartbeat()
        a.subscribe(lambda m, name, old, new: seen.append(name))
        b.custom_mode = 9
        assert seen == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
