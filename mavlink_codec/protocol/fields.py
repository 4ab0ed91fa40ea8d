"""Field descriptors and wire layout rules for MAVLink messages."""

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Tuple

# C type -> (struct code, width in bytes)
WIRE_TYPES = {
    "char": ("s", 1),
    "uint8_t": ("B", 1),
    "int8_t": ("b", 1),
    "uint16_t": ("H", 2),
    "int16_t": ("h", 2),
    "uint32_t": ("I", 4),
    "int32_t": ("i", 4),
    "uint64_t": ("Q", 8),
    "int64_t": ("q", 8),
    "float": ("f", 4),
    "double": ("d", 8),
}

# Inclusive integer ranges, used to report values that do not fit
INTEGER_RANGES = {
    "uint8_t": (0, 0xFF),
    "int8_t": (-0x80, 0x7F),
    "uint16_t": (0, 0xFFFF),
    "int16_t": (-0x8000, 0x7FFF),
    "uint32_t": (0, 0xFFFFFFFF),
    "int32_t": (-0x80000000, 0x7FFFFFFF),
    "uint64_t": (0, 0xFFFFFFFFFFFFFFFF),
    "int64_t": (-0x8000000000000000, 0x7FFFFFFFFFFFFFFF),
}


@dataclass(frozen=True)
class Field:
    """
    One declared field of a MAVLink message.

    The type is the C type as written in the dialect definition, with an
    optional array suffix, e.g. ``"uint16_t"``, ``"char[16]"`` or
    ``"float[4]"``.
    """

    name: str
    type: str
    description: str = ""
    enum: Optional[str] = None  # Name of the associated enum, if any
    default: Any = None  # Overrides the zero default (HEARTBEAT.mavlink_version)

    def __post_init__(self):
        if self.base_type not in WIRE_TYPES:
            raise ValueError(f"Field '{self.name}': unsupported type '{self.type}'")
        if self.is_array and self.array_length <= 0:
            raise ValueError(f"Field '{self.name}': array length must be positive")

    @property
    def is_array(self) -> bool:
        """True for ``T[N]`` declarations, including ``char[N]``."""
        return "[" in self.type

    @property
    def array_length(self) -> int:
        """Declared array length, 0 for scalars."""
        if not self.is_array:
            return 0
        start = self.type.index("[")
        return int(self.type[start + 1 : self.type.index("]")])

    @property
    def base_type(self) -> str:
        """Element type without the array suffix."""
        if self.is_array:
            return self.type[: self.type.index("[")]
        return self.type

    @property
    def is_text(self) -> bool:
        return self.base_type == "char"

    @property
    def is_float(self) -> bool:
        return self.base_type in ("float", "double")

    @property
    def cardinality(self) -> int:
        """Number of wire elements: 1 for scalars, N for arrays (and text)."""
        return self.array_length or 1

    @property
    def width(self) -> int:
        """Width of a single element in bytes."""
        return WIRE_TYPES[self.base_type][1]

    @property
    def size(self) -> int:
        """Bytes this field occupies in the payload."""
        return self.width * self.cardinality

    @property
    def struct_code(self) -> str:
        """``struct`` format fragment for the whole field."""
        code = WIRE_TYPES[self.base_type][0]
        if self.is_text:
            return f"{self.array_length or 1}s"
        if self.is_array:
            return f"{self.array_length}{code}"
        return code

    def default_value(self) -> Any:
        """Value a freshly created message holds for this field."""
        if self.default is not None:
            return list(self.default) if self.is_array and not self.is_text else self.default
        if self.is_text:
            return ""
        zero = 0.0 if self.is_float else 0
        if self.is_array:
            return [zero] * self.array_length
        return zero


def wire_order(fields: Sequence[Field]) -> Tuple[Field, ...]:
    """
    Order fields the way MAVLink 1.0 lays them out on the wire.

    Fields are sorted by element width, largest first. The sort is stable so
    fields of equal width keep their declaration order.
    """
    return tuple(sorted(fields, key=lambda f: f.width, reverse=True))


def struct_format(fields: Iterable[Field]) -> str:
    """Little-endian ``struct`` format string for fields already in wire order."""
    return "<" + "".join(f.struct_code for f in fields)


def x25_crc(data: bytes, crc: int = 0xFFFF) -> int:
    """CRC-16/MCRF4XX as used by MAVLink (the "X.25" checksum)."""
    for b in data:
        tmp = b ^ (crc & 0xFF)
        tmp = (tmp ^ (tmp << 4)) & 0xFF
        crc = ((crc >> 8) ^ (tmp << 8) ^ (tmp << 3) ^ (tmp >> 4)) & 0xFFFF
    return crc


def derive_crc_extra(message_name: str, fields: Sequence[Field]) -> int:
    """
    Compute the crc_extra seed of a message from its layout.

    The seed is the X.25 CRC over the message name and, for every field in
    wire order, its element type and name (plus the array length for arrays),
    folded to a single byte.

    Args:
        message_name: Upper-case MAVLink message name, e.g. ``"HEARTBEAT"``.
        fields: Fields in declaration order.

    Returns:
        crc_extra in the range 0-255.
    """
    crc = x25_crc(f"{message_name} ".encode("ascii"))
    for f in wire_order(fields):
        crc = x25_crc(f"{f.base_type} ".encode("ascii"), crc)
        crc = x25_crc(f"{f.name} ".encode("ascii"), crc)
        if f.is_array:
            crc = x25_crc(bytes([f.array_length]), crc)
    return (crc & 0xFF) ^ (crc >> 8)


def field_offsets(fields: Sequence[Field]) -> List[Tuple[Field, int]]:
    """Pair each wire-ordered field with its byte offset in the payload."""
    offsets = []
    offset = 0
    for f in wire_order(fields):
        offsets.append((f, offset))
        offset += f.size
    return offsets
