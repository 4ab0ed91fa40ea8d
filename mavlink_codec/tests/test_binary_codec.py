"""Tests for the payload writer, reader and codec."""

import struct

import pytest

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from mavlink_codec.config import CodecConfig
from mavlink_codec.protocol.binary_codec import BinaryCodec, PayloadReader, PayloadWriter
from mavlink_codec.protocol.errors import FieldValueError, TruncatedPayloadError
from mavlink_codec.protocol.fields import Field
from mavlink_codec.dialects.common.messages import Heartbeat, ParamSet, ParamValue


class TestPayloadWriter:
    """Test field encoding."""

    @pytest.fixture
    def writer(self):
        """Create a writer with default policies."""
        return PayloadWriter()

    def test_little_endian_integers(self, writer):
        """Test that integers are written little-endian at their width."""
        writer.write_field(Field("a", "uint16_t"), 0x1234)
        writer.write_field(Field("b", "int32_t"), -2)
        assert writer.getvalue() == b"\x34\x12" + b"\xfe\xff\xff\xff"
        assert len(writer) == 6

    def test_float(self, writer):
        """Test IEEE-754 single precision."""
        writer.write_field(Field("f", "float"), 1.5)
        assert writer.getvalue() == struct.pack("<f", 1.5)

    def test_double(self, writer):
        """Test IEEE-754 double precision."""
        writer.write_field(Field("d", "double"), -0.25)
        assert writer.getvalue() == struct.pack("<d", -0.25)

    def test_array(self, writer):
        """Test that arrays are written element by element."""
        writer.write_field(Field("v", "uint16_t[3]"), [1, 2, 3])
        assert writer.getvalue() == b"\x01\x00\x02\x00\x03\x00"

    def test_text_zero_filled(self, writer):
        """Test that short text is padded with NUL bytes."""
        writer.write_field(Field("t", "char[8]"), "abc")
        assert writer.getvalue() == b"abc\x00\x00\x00\x00\x00"

    def test_text_exact_length(self, writer):
        """Test that text filling the field has no terminator."""
        writer.write_field(Field("t", "char[4]"), "abcd")
        assert writer.getvalue() == b"abcd"

    def test_text_truncated(self, writer):
        """Test that long text is cut to the declared length."""
        writer.write_field(Field("t", "char[4]"), "abcdefgh")
        assert writer.getvalue() == b"abcd"

    def test_text_too_long_rejected(self):
        """Test that truncation can be turned off."""
        writer = PayloadWriter(truncate_text=False)
        with pytest.raises(FieldValueError) as exc_info:
            writer.write_field(Field("t", "char[4]"), "abcdefgh")
        assert exc_info.value.field_name == "t"

    def test_text_utf8(self, writer):
        """Test that text is UTF-8 encoded."""
        writer.write_field(Field("t", "char[4]"), "é")
        assert writer.getvalue() == b"\xc3\xa9\x00\x00"

    def test_text_truncated_on_character_boundary(self, writer):
        """Test that truncation never splits a multi-byte character."""
        # "é" is two bytes and would straddle the end of char[4]
        writer.write_field(Field("t", "char[4]"), "abcé")
        assert writer.getvalue() == b"abc\x00"

    def test_text_multibyte_fits_exactly(self, writer):
        """Test that a multi-byte character ending on the limit is kept."""
        writer.write_field(Field("t", "char[4]"), "abé")
        assert writer.getvalue() == b"ab\xc3\xa9"

    def test_text_embedded_nul_rejected(self, writer):
        """Test that text with an embedded NUL is rejected."""
        with pytest.raises(FieldValueError) as exc_info:
            writer.write_field(Field("t", "char[8]"), "ab\x00cd")
        assert exc_info.value.field_name == "t"
        assert writer.getvalue() == b""

    def test_text_bytes(self, writer):
        """Test that raw bytes are accepted for text fields."""
        writer.write_field(Field("t", "char[3]"), b"ab")
        assert writer.getvalue() == b"ab\x00"

    @pytest.mark.parametrize("type_,value", [
        ("uint8_t", 256),
        ("uint8_t", -1),
        ("int8_t", 128),
        ("uint16_t", 70000),
        ("int32_t", 2 ** 31),
        ("uint64_t", -1),
    ])
    def test_integer_out_of_range(self, writer, type_, value):
        """Test that out-of-range integers are rejected."""
        with pytest.raises(FieldValueError) as exc_info:
            writer.write_field(Field("x", type_), value)
        assert "out of range" in str(exc_info.value)

    def test_float_overflow(self, writer):
        """Test that floats too large for single precision are rejected."""
        with pytest.raises(FieldValueError):
            writer.write_field(Field("f", "float"), 1e300)

    def test_non_integer_rejected(self, writer):
        """Test that floats are not silently truncated into integer fields."""
        with pytest.raises(FieldValueError):
            writer.write_field(Field("x", "uint8_t"), 1.5)

    def test_wrong_array_length(self, writer):
        """Test that array length must match exactly."""
        with pytest.raises(FieldValueError):
            writer.write_field(Field("v", "uint16_t[3]"), [1, 2])
        with pytest.raises(FieldValueError):
            writer.write_field(Field("v", "uint16_t[3]"), [1, 2, 3, 4])

    def test_failed_write_leaves_buffer(self, writer):
        """Test that a rejected value does not write partial bytes."""
        writer.write_field(Field("a", "uint8_t"), 1)
        with pytest.raises(FieldValueError):
            writer.write_field(Field("v", "uint8_t[2]"), [1, 300])
        assert writer.getvalue() == b"\x01"


class TestPayloadReader:
    """Test field decoding."""

    def test_read_sequence(self):
        """Test reading several fields in order."""
        reader = PayloadReader(b"\x34\x12\xfe\xff\xff\xff\x07")
        assert reader.read_field(Field("a", "uint16_t")) == 0x1234
        assert reader.read_field(Field("b", "int32_t")) == -2
        assert reader.offset == 6
        assert reader.remaining == 1

    def test_text_stops_at_nul(self):
        """Test that text ends at the first NUL byte."""
        reader = PayloadReader(b"ab\x00cd\x00\x00\x00")
        assert reader.read_field(Field("t", "char[8]")) == "ab"

    def test_text_without_terminator(self):
        """Test that full-length text needs no terminator."""
        reader = PayloadReader(b"abcd")
        assert reader.read_field(Field("t", "char[4]")) == "abcd"

    def test_array(self):
        """Test that arrays decode to lists."""
        reader = PayloadReader(b"\x01\x00\x02\x00")
        assert reader.read_field(Field("v", "int16_t[2]")) == [1, 2]

    def test_truncated(self):
        """Test that a short buffer raises with byte counts."""
        reader = PayloadReader(b"\x01\x02\x03", message_name="TEST")
        reader.read_field(Field("a", "uint16_t"))
        with pytest.raises(TruncatedPayloadError) as exc_info:
            reader.read_field(Field("b", "uint16_t"))
        assert exc_info.value.needed == 4
        assert exc_info.value.available == 3
        assert exc_info.value.message_name == "TEST"
        assert "TEST" in str(exc_info.value)
        # Nothing consumed on failure
        assert reader.offset == 2


class TestBinaryCodec:
    """Test the configured codec."""

    def test_encode_heartbeat(self):
        """Test the HEARTBEAT payload bytes."""
        msg = Heartbeat(type=2, autopilot=3, base_mode=0x51, custom_mode=0, system_status=4)
        payload = BinaryCodec().encode(msg)
        assert payload == bytes.fromhex("000000000203510403")

    def test_decode_ignores_trailing_bytes(self):
        """Test that extra payload bytes are ignored."""
        payload = bytes.fromhex("000000000203510403") + b"\xaa\xbb"
        msg = BinaryCodec().decode(Heartbeat, payload)
        assert msg.system_status == 4
        assert msg.mavlink_version == 3

    def test_config_truncate_text(self):
        """Test that the codec applies the text policy from its config."""
        codec = BinaryCodec(CodecConfig(truncate_text=False))
        msg = ParamValue(param_id="X" * 17)
        with pytest.raises(FieldValueError):
            codec.encode(msg)

    def test_config_encoding(self):
        """Test that the codec applies the configured text encoding."""
        codec = BinaryCodec(CodecConfig(text_encoding="latin-1"))
        payload = codec.encode(ParamValue(param_id="é"))
        assert b"\xe9" in payload
        assert codec.decode(ParamValue, payload).param_id == "é"

    def test_multibyte_truncation_round_trip(self):
        """Test that a truncated UTF-8 value decodes without replacement characters."""
        msg = ParamSet(param_id="abcdefghijklmno\u00e9")
        assert len(msg.param_id.encode("utf-8")) == 17
        assert ParamSet.unpack(msg.pack()).param_id == "abcdefghijklmno"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
