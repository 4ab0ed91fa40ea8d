"""Wire format definitions for MAVLink message payloads."""

from .batch import decode_batch, message_dtype
from .binary_codec import BinaryCodec, PayloadReader, PayloadWriter
from .dialect import Dialect
from .enums import EnumEntry, EnumMetadata, build_enum, coerce_enum
from .errors import (
    CodecError,
    CrcExtraMismatchError,
    FieldValueError,
    OutOfRangeEnumValueError,
    TruncatedPayloadError,
    UnknownMessageError,
)
from .fields import Field, derive_crc_extra, field_offsets, wire_order, x25_crc
from .messages import MavlinkMessage, build_message

__all__ = [
    "decode_batch",
    "message_dtype",
    "BinaryCodec",
    "PayloadReader",
    "PayloadWriter",
    "Dialect",
    "EnumEntry",
    "EnumMetadata",
    "build_enum",
    "coerce_enum",
    "CodecError",
    "CrcExtraMismatchError",
    "FieldValueError",
    "OutOfRangeEnumValueError",
    "TruncatedPayloadError",
    "UnknownMessageError",
    "Field",
    "derive_crc_extra",
    "field_offsets",
    "wire_order",
    "x25_crc",
    "MavlinkMessage",
    "build_message",
]
