"""Binary encoding/decoding of MAVLink message payloads."""

import logging
import numbers
import struct
from typing import Any, Optional, Type, TypeVar

from ..config import CodecConfig, default_config
from .errors import FieldValueError, TruncatedPayloadError
from .fields import INTEGER_RANGES, Field

logger = logging.getLogger(__name__)

M = TypeVar("M")


class PayloadWriter:
    """
    Append-only little-endian writer for message payloads.

    Text fields are zero-filled up to their declared length. Text longer than
    the field is truncated, or rejected when ``truncate_text`` is False.
    """

    def __init__(self, truncate_text: bool = True, encoding: str = "utf-8"):
        self.truncate_text = truncate_text
        self.encoding = encoding
        self._buffer = bytearray()

    def __len__(self) -> int:
        return len(self._buffer)

    def getvalue(self) -> bytes:
        """Return the bytes written so far."""
        return bytes(self._buffer)

    def write_field(self, field: Field, value: Any) -> None:
        """
        Write one field at its declared width.

        Args:
            field: Field descriptor.
            value: Python value (``str`` for text, sequence for arrays).

        Raises:
            FieldValueError: If the value cannot be represented.
        """
        if field.is_text:
            values = (self._text_bytes(field, value),)
        elif field.is_array:
            values = self._array_values(field, value)
        else:
            values = (self._scalar_value(field, value),)

        try:
            self._buffer += struct.pack("<" + field.struct_code, *values)
        except (struct.error, OverflowError) as e:
            raise FieldValueError(field.name, self._describe_pack_error(field, e)) from e

    def _text_bytes(self, field: Field, value: Any) -> bytes:
        if value is None:
            return b""
        if isinstance(value, (bytes, bytearray)):
            raw = bytes(value)
        elif isinstance(value, str):
            if "\x00" in value:
                # Decode stops at the first NUL, so the tail would be lost
                raise FieldValueError(field.name, "text contains an embedded NUL")
            raw = value.encode(self.encoding)
        else:
            raise FieldValueError(field.name, f"expected text, got {type(value).__name__}")

        if len(raw) > field.array_length:
            if not self.truncate_text:
                raise FieldValueError(
                    field.name,
                    f"{len(raw)} bytes do not fit in char[{field.array_length}]",
                )
            if isinstance(value, str):
                # Cut on a character boundary, never inside a multi-byte sequence
                raw = raw[: field.array_length].decode(self.encoding, "ignore").encode(self.encoding)
        # struct's "Ns" zero-fills short values and truncates long ones
        return raw

    def _array_values(self, field: Field, value: Any) -> tuple:
        try:
            items = list(value)
        except TypeError:
            raise FieldValueError(field.name, f"expected a sequence of {field.array_length}")
        if len(items) != field.array_length:
            raise FieldValueError(
                field.name,
                f"expected {field.array_length} elements, got {len(items)}",
            )
        return tuple(self._scalar_value(field, item) for item in items)

    @staticmethod
    def _scalar_value(field: Field, value: Any) -> Any:
        if field.is_float:
            try:
                return float(value)
            except (TypeError, ValueError):
                raise FieldValueError(field.name, f"expected a number, got {value!r}")
        if not isinstance(value, numbers.Integral):
            raise FieldValueError(field.name, f"expected an integer, got {value!r}")
        return int(value)

    @staticmethod
    def _describe_pack_error(field: Field, error: Exception) -> str:
        bounds = INTEGER_RANGES.get(field.base_type)
        if bounds is not None:
            return f"out of range for {field.base_type} [{bounds[0]}, {bounds[1]}]"
        return str(error)


class PayloadReader:
    """Sequential little-endian reader over a payload buffer."""

    def __init__(self, data: bytes, encoding: str = "utf-8", message_name: Optional[str] = None):
        self._data = memoryview(bytes(data))
        self._offset = 0
        self.encoding = encoding
        self.message_name = message_name

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset

    def read_field(self, field: Field) -> Any:
        """
        Read one field at its declared width.

        Raises:
            TruncatedPayloadError: If fewer than ``field.size`` bytes remain.
        """
        if self.remaining < field.size:
            raise TruncatedPayloadError(
                needed=self._offset + field.size,
                available=len(self._data),
                message_name=self.message_name,
            )

        values = struct.unpack_from("<" + field.struct_code, self._data, self._offset)
        self._offset += field.size

        if field.is_text:
            raw = values[0].split(b"\x00", 1)[0]
            return raw.decode(self.encoding, errors="replace")
        if field.is_array:
            return list(values)
        return values[0]


class BinaryCodec:
    """
    Payload codec bound to a configuration.

    Messages know their own layout; this class owns the policies that apply
    around it (text truncation, text encoding, enum strictness).

    Payload layout (HEARTBEAT shown):
    ┌─────────────┬──────┬──────────────────┬────────────────────────┐
    │ Byte Offset │ Size │ Field            │ Description            │
    ├─────────────┼──────┼──────────────────┼────────────────────────┤
    │ 0           │ 4    │ custom_mode      │ uint32, autopilot mode │
    │ 4           │ 1    │ type             │ uint8, MAV_TYPE        │
    │ 5           │ 1    │ autopilot        │ uint8, MAV_AUTOPILOT   │
    │ 6           │ 1    │ base_mode        │ uint8, MAV_MODE_FLAG   │
    │ 7           │ 1    │ system_status    │ uint8, MAV_STATE       │
    │ 8           │ 1    │ mavlink_version  │ uint8                  │
    └─────────────┴──────┴──────────────────┴────────────────────────┘
    """

    def __init__(self, config: Optional[CodecConfig] = None):
        self.config = config or default_config

    def writer(self) -> PayloadWriter:
        return PayloadWriter(
            truncate_text=self.config.truncate_text,
            encoding=self.config.text_encoding,
        )

    def reader(self, payload: bytes, message_name: Optional[str] = None) -> PayloadReader:
        return PayloadReader(payload, encoding=self.config.text_encoding, message_name=message_name)

    def encode(self, message) -> bytes:
        """
        Encode a message to its payload bytes.

        Args:
            message: Message instance to encode.

        Returns:
            Payload bytes (exactly ``message.payload_length`` long).
        """
        writer = self.writer()
        message.encode(writer)
        return writer.getvalue()

    def decode(self, message_cls: Type[M], payload: bytes) -> M:
        """
        Decode payload bytes into a new instance of ``message_cls``.

        Args:
            message_cls: Message class to instantiate.
            payload: Payload bytes.

        Returns:
            Decoded message.

        Raises:
            TruncatedPayloadError: If the payload is too short.
            OutOfRangeEnumValueError: In strict enum mode, for unknown enum values.
        """
        message = message_cls()
        reader = self.reader(payload, message_name=message_cls.NAME)
        message.decode(reader, strict_enums=self.config.strict_enums)
        if reader.remaining:
            logger.debug(
                f"{message_cls.NAME}: ignoring {reader.remaining} trailing payload bytes"
            )
        return message
