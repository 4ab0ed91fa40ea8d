"""Tests for MAVLink enums and their metadata."""

import enum

import pytest

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from mavlink_codec.protocol.enums import (
    EnumMetadata,
    build_enum,
    class_name_for,
    coerce_enum,
    is_bitmask,
    member_names,
)
from mavlink_codec.protocol.errors import OutOfRangeEnumValueError
from mavlink_codec.dialects.common.enums import GpsFixType, MavCmd, MavModeFlag, MavType
from mavlink_codec.dialects.ardupilotmega.enums import CopterMode, EkfStatusFlags


class TestNaming:
    """Test enum class and member naming."""

    def test_class_name(self):
        """Test MAVLink name to class name conversion."""
        assert class_name_for("MAV_TYPE") == "MavType"
        assert class_name_for("HEARTBEAT") == "Heartbeat"
        assert class_name_for("GLOBAL_POSITION_INT") == "GlobalPositionInt"

    def test_common_prefix_dropped(self):
        """Test that the shared entry prefix is removed."""
        assert member_names(["MAV_TYPE_GENERIC", "MAV_TYPE_QUADROTOR"]) == ["GENERIC", "QUADROTOR"]

    def test_prefix_cut_at_word_boundary(self):
        """Test that the prefix ends at an underscore."""
        names = ["MAV_STATE_STANDBY", "MAV_STATE_SHUTDOWN"]
        assert member_names(names) == ["STANDBY", "SHUTDOWN"]

    def test_invalid_identifier_keeps_full_names(self):
        """Test that names starting with a digit keep their prefix."""
        names = ["GPS_FIX_TYPE_NO_GPS", "GPS_FIX_TYPE_3D_FIX"]
        assert member_names(names) == names

    def test_single_entry(self):
        """Test a one-entry enum."""
        assert member_names(["FOO_BAR"]) == ["BAR"]

    def test_bundled_members(self):
        """Test member access on bundled enums."""
        assert MavType.QUADROTOR == 2
        assert MavCmd.COMPONENT_ARM_DISARM == 400
        assert GpsFixType.GPS_FIX_TYPE_3D_FIX == 3
        assert CopterMode.GUIDED == 4
        assert EkfStatusFlags.ATTITUDE == 1


class TestBuildEnum:
    """Test enum construction from entry tables."""

    @pytest.fixture
    def color(self):
        """Create a small test enum."""
        return build_enum(
            "TEST_COLOR",
            "Test colors",
            [
                ("TEST_COLOR_RED", 1, "Red"),
                ("TEST_COLOR_GREEN", 2, "Green"),
                ("TEST_COLOR_BLUE", 4, "Blue", ["hue", "", "", "", "", "", ""]),
            ],
        )

    def test_int_enum(self, color):
        """Test that plain enums are IntEnums."""
        assert issubclass(color, enum.IntEnum)
        assert not is_bitmask(color)
        assert color.RED == 1
        assert color(2) is color.GREEN

    def test_metadata(self, color):
        """Test the attached metadata."""
        metadata = color.metadata
        assert isinstance(metadata, EnumMetadata)
        assert metadata.name == "TEST_COLOR"
        assert [e.name for e in metadata.entries] == [
            "TEST_COLOR_RED",
            "TEST_COLOR_GREEN",
            "TEST_COLOR_BLUE",
        ]
        assert metadata.entry("TEST_COLOR_BLUE").params[0] == "hue"
        assert metadata.entry("TEST_COLOR_RED").params == ()

    def test_entry_missing(self, color):
        """Test lookup of an unknown entry."""
        with pytest.raises(KeyError):
            color.metadata.entry("TEST_COLOR_PINK")

    def test_bitmask(self):
        """Test that bitmask enums are IntFlags."""
        flags = build_enum(
            "TEST_FLAG",
            "",
            [("TEST_FLAG_A", 1, ""), ("TEST_FLAG_B", 2, "")],
            bitmask=True,
        )
        assert issubclass(flags, enum.IntFlag)
        assert is_bitmask(flags)
        assert flags.metadata.bitmask
        assert int(flags.A | flags.B) == 3

    def test_duplicate_values(self):
        """Test that repeated values stay addressable and are reported."""
        dup = build_enum(
            "TEST_DUP",
            "",
            [("TEST_DUP_X", 1, ""), ("TEST_DUP_Y", 1, ""), ("TEST_DUP_Z", 2, "")],
        )
        assert dup.X == dup.Y == 1
        assert dup.metadata.duplicate_values() == {1: ["TEST_DUP_X", "TEST_DUP_Y"]}
        assert [e.name for e in dup.metadata.entries_for_value(1)] == ["TEST_DUP_X", "TEST_DUP_Y"]

    def test_too_many_params(self):
        """Test that command params are limited to seven."""
        with pytest.raises(ValueError):
            build_enum("TEST_CMD", "", [("TEST_CMD_A", 1, "", ["p"] * 8)])

    def test_command_params(self):
        """Test that MAV_CMD entries carry parameter descriptions."""
        entry = MavCmd.metadata.entry("MAV_CMD_COMPONENT_ARM_DISARM")
        assert entry.value == 400
        assert len(entry.params) <= 7
        assert entry.params[0]


class TestCoerceEnum:
    """Test conversion of decoded integers."""

    def test_known_value(self):
        """Test that known values become members."""
        value = coerce_enum(MavType, 2, "type")
        assert value is MavType.QUADROTOR

    def test_unknown_value_permissive(self):
        """Test that unknown values pass through as integers."""
        value = coerce_enum(MavType, 250, "type")
        assert value == 250
        assert not isinstance(value, MavType)

    def test_unknown_value_strict(self):
        """Test that strict mode raises for unknown values."""
        with pytest.raises(OutOfRangeEnumValueError) as exc_info:
            coerce_enum(MavType, 250, "type", strict=True)
        assert exc_info.value.enum_name == "MAV_TYPE"
        assert exc_info.value.value == 250

    def test_bitmask_combination(self):
        """Test that combinations of known bits are accepted."""
        value = coerce_enum(MavModeFlag, 0x81, "base_mode", strict=True)
        assert isinstance(value, MavModeFlag)
        assert value & MavModeFlag.SAFETY_ARMED
        assert value & MavModeFlag.CUSTOM_MODE_ENABLED

    def test_bitmask_zero(self):
        """Test that an empty bit set is valid."""
        assert coerce_enum(MavModeFlag, 0, "base_mode", strict=True) == 0

    def test_bitmask_unknown_bits(self):
        """Test bits outside the enum."""
        assert coerce_enum(EkfStatusFlags, 0x8001, "flags") == 0x8001
        with pytest.raises(OutOfRangeEnumValueError):
            coerce_enum(EkfStatusFlags, 0x8001, "flags", strict=True)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
