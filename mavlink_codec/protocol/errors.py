"""Error taxonomy for the MAVLink payload codec."""

from typing import Optional


class CodecError(ValueError):
    """Base class for all codec errors."""


class TruncatedPayloadError(CodecError):
    """The payload ended before every field of the message was read."""

    def __init__(
        self,
        needed: int,
        available: int,
        message_name: Optional[str] = None,
    ):
        self.needed = needed
        self.available = available
        self.message_name = message_name
        where = f" while decoding {message_name}" if message_name else ""
        super().__init__(
            f"Payload truncated{where}: need {needed} bytes, {available} available"
        )


class FieldValueError(CodecError):
    """A field value cannot be represented in its declared wire type."""

    def __init__(self, field_name: str, reason: str):
        self.field_name = field_name
        super().__init__(f"Invalid value for field '{field_name}': {reason}")


class OutOfRangeEnumValueError(CodecError):
    """A decoded integer is not a member of the field's enum (strict mode)."""

    def __init__(self, field_name: str, enum_name: str, value: int):
        self.field_name = field_name
        self.enum_name = enum_name
        self.value = value
        super().__init__(
            f"Value {value} of field '{field_name}' is not a known {enum_name} entry"
        )


class UnknownMessageError(CodecError, KeyError):
    """Lookup of a message by name (or strict id lookup) found nothing."""

    def __init__(self, key):
        self.key = key
        super().__init__(f"Unknown message: {key!r}")

    def __str__(self) -> str:
        return self.args[0]


class CrcExtraMismatchError(CodecError):
    """Declared crc_extra does not match the one derived from the layout."""

    def __init__(self, message_name: str, declared: int, derived: int):
        self.message_name = message_name
        self.declared = declared
        self.derived = derived
        super().__init__(
            f"{message_name}: declared crc_extra {declared} but layout gives {derived}"
        )
