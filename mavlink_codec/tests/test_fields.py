"""Tests for field descriptors, wire ordering and crc_extra derivation."""

import pytest

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from mavlink_codec.protocol.fields import (
    Field,
    derive_crc_extra,
    field_offsets,
    struct_format,
    wire_order,
    x25_crc,
)
from mavlink_codec.dialects.common.messages import Heartbeat, Ping, CommandLong, Statustext
from mavlink_codec.dialects.ardupilotmega.messages import SensorOffsets


class TestField:
    """Test field descriptor properties."""

    def test_scalar(self):
        """Test a scalar integer field."""
        f = Field("seq", "uint32_t")
        assert not f.is_array
        assert f.array_length == 0
        assert f.cardinality == 1
        assert f.width == 4
        assert f.size == 4
        assert f.struct_code == "I"

    def test_numeric_array(self):
        """Test a float array field."""
        f = Field("q", "float[4]")
        assert f.is_array
        assert f.is_float
        assert f.base_type == "float"
        assert f.cardinality == 4
        assert f.width == 4
        assert f.size == 16
        assert f.struct_code == "4f"

    def test_text(self):
        """Test that char[N] is text, one byte per element."""
        f = Field("param_id", "char[16]")
        assert f.is_text
        assert f.width == 1
        assert f.size == 16
        assert f.struct_code == "16s"

    def test_default_values(self):
        """Test zero defaults per kind."""
        assert Field("a", "uint8_t").default_value() == 0
        assert Field("b", "float").default_value() == 0.0
        assert Field("c", "char[8]").default_value() == ""
        assert Field("d", "int16_t[3]").default_value() == [0, 0, 0]
        assert Field("e", "uint8_t", default=3).default_value() == 3

    def test_array_defaults_are_not_shared(self):
        """Test that each default array is a fresh list."""
        f = Field("d", "int16_t[3]")
        assert f.default_value() is not f.default_value()

    def test_unsupported_type(self):
        """Test that unknown C types are rejected."""
        with pytest.raises(ValueError):
            Field("x", "uint128_t")

    def test_zero_length_array(self):
        """Test that empty arrays are rejected."""
        with pytest.raises(ValueError):
            Field("x", "uint8_t[0]")


class TestWireOrder:
    """Test MAVLink 1.0 field ordering."""

    def test_sorted_by_width(self):
        """Test that wider types come first."""
        fields = [
            Field("a", "uint8_t"),
            Field("b", "uint32_t"),
            Field("c", "uint64_t"),
            Field("d", "int16_t"),
        ]
        assert [f.name for f in wire_order(fields)] == ["c", "b", "d", "a"]

    def test_stable_for_equal_width(self):
        """Test that equal widths keep declaration order."""
        fields = [
            Field("x", "uint8_t"),
            Field("y", "float"),
            Field("z", "int8_t"),
            Field("w", "uint32_t"),
        ]
        assert [f.name for f in wire_order(fields)] == ["y", "w", "x", "z"]

    def test_arrays_sort_by_element_width(self):
        """Test that arrays sort by element width, not total size."""
        fields = [
            Field("text", "char[50]"),
            Field("value", "float"),
        ]
        assert [f.name for f in wire_order(fields)] == ["value", "text"]

    def test_heartbeat_order(self):
        """Test HEARTBEAT's wire layout."""
        assert [f.name for f in Heartbeat.WIRE_FIELDS] == [
            "custom_mode",
            "type",
            "autopilot",
            "base_mode",
            "system_status",
            "mavlink_version",
        ]

    def test_offsets(self):
        """Test byte offsets of PING fields."""
        offsets = {f.name: offset for f, offset in field_offsets(Ping.FIELDS)}
        assert offsets == {
            "time_usec": 0,
            "seq": 8,
            "target_system": 12,
            "target_component": 13,
        }

    def test_struct_format(self):
        """Test the struct format of PING."""
        assert struct_format(wire_order(Ping.FIELDS)) == "<QIBB"
        assert Ping.STRUCT_FORMAT == "<QIBB"


class TestCrcExtra:
    """Test crc_extra derivation."""

    def test_x25_check_value(self):
        """Test the CRC against the standard check string."""
        assert x25_crc(b"123456789") == 0x6F91

    def test_x25_empty(self):
        """Test that an empty input leaves the seed unchanged."""
        assert x25_crc(b"") == 0xFFFF

    def test_x25_chaining(self):
        """Test that accumulating in pieces equals one pass."""
        assert x25_crc(b"6789", x25_crc(b"12345")) == x25_crc(b"123456789")

    @pytest.mark.parametrize("message_cls,expected", [
        (Heartbeat, 50),
        (Ping, 237),
        (CommandLong, 152),
        (Statustext, 83),
        (SensorOffsets, 134),
    ])
    def test_known_values(self, message_cls, expected):
        """Test derivation against published crc_extra values."""
        assert derive_crc_extra(message_cls.NAME, message_cls.FIELDS) == expected
        assert message_cls.CRC_EXTRA == expected

    def test_declaration_order_irrelevant_across_widths(self):
        """Test that reordering fields of different widths keeps the seed."""
        fields = list(Heartbeat.FIELDS)
        shuffled = [fields[3]] + fields[:3] + fields[4:]
        assert derive_crc_extra("HEARTBEAT", shuffled) == 50

    def test_name_changes_seed(self):
        """Test that the message name is part of the seed."""
        assert derive_crc_extra("HEARTBEAT2", Heartbeat.FIELDS) != 50


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
