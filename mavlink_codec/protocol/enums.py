"""Integer-backed MAVLink enums and their descriptive metadata."""

import enum
import logging
import os
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from .errors import OutOfRangeEnumValueError

logger = logging.getLogger(__name__)

# (name, value, description) or (name, value, description, params)
EntrySpec = Union[Tuple[str, int, str], Tuple[str, int, str, Sequence[str]]]

MAX_COMMAND_PARAMS = 7


@dataclass(frozen=True)
class EnumEntry:
    """One named constant of a MAVLink enum."""

    name: str
    value: int
    description: str = ""
    params: Tuple[str, ...] = ()  # Command parameter descriptions (MAV_CMD)


@dataclass(frozen=True)
class EnumMetadata:
    """Descriptive metadata of a MAVLink enum."""

    name: str
    description: str
    entries: Tuple[EnumEntry, ...]
    bitmask: bool = False

    def entry(self, name: str) -> EnumEntry:
        """Look up an entry by its full MAVLink name."""
        for e in self.entries:
            if e.name == name:
                return e
        raise KeyError(f"{self.name} has no entry {name!r}")

    def entries_for_value(self, value: int) -> List[EnumEntry]:
        """All entries carrying ``value`` (more than one if values repeat)."""
        return [e for e in self.entries if e.value == value]

    def duplicate_values(self) -> Dict[int, List[str]]:
        """Map each repeated value to the entry names that share it."""
        names: Dict[int, List[str]] = {}
        for e in self.entries:
            names.setdefault(e.value, []).append(e.name)
        return {value: group for value, group in names.items() if len(group) > 1}


def class_name_for(mavlink_name: str) -> str:
    """``MAV_TYPE`` -> ``MavType``."""
    return "".join(part.capitalize() for part in mavlink_name.lower().split("_"))


def member_names(entry_names: Sequence[str]) -> List[str]:
    """
    Python member names of an enum's entries.

    The prefix shared by all entries is dropped
    (``MAV_TYPE_QUADROTOR`` -> ``QUADROTOR``). If that leaves any name that is
    not a valid identifier (``GPS_FIX_TYPE_3D_FIX`` -> ``3D_FIX``), the full
    entry names are kept for the whole enum.
    """
    prefix = os.path.commonprefix(list(entry_names))
    if len(entry_names) == 1 or prefix in entry_names:
        prefix = prefix[: prefix.rstrip("_").rfind("_") + 1]
    prefix = prefix[: prefix.rfind("_") + 1]
    short = [n[len(prefix):] for n in entry_names]
    if all(s.isidentifier() and not s.startswith("_") for s in short):
        return short
    return list(entry_names)


def build_enum(
    name: str,
    description: str,
    entries: Iterable[EntrySpec],
    bitmask: bool = False,
    module: Optional[str] = None,
) -> type:
    """
    Create an ``IntEnum`` (or ``IntFlag`` for bitmasks) from an entry table.

    The MAVLink metadata is attached to the class as ``metadata``. Entries that
    repeat a value become aliases, so every name stays addressable.

    Args:
        name: MAVLink enum name, e.g. ``"MAV_TYPE"``.
        description: Human readable description.
        entries: ``(name, value, description[, params])`` tuples.
        bitmask: Build an ``IntFlag`` so that combined bits are representable.
        module: Module the class is reported to live in.

    Returns:
        The new enum class.
    """
    parsed = []
    for spec in entries:
        entry_name, value, entry_description = spec[0], spec[1], spec[2]
        params = tuple(spec[3]) if len(spec) > 3 else ()
        if len(params) > MAX_COMMAND_PARAMS:
            raise ValueError(f"{entry_name}: at most {MAX_COMMAND_PARAMS} params")
        parsed.append(EnumEntry(entry_name, int(value), entry_description, params))

    members = list(zip(member_names([e.name for e in parsed]), [e.value for e in parsed]))
    base = enum.IntFlag if bitmask else enum.IntEnum
    enum_cls = base(class_name_for(name), members, module=module)

    enum_cls.metadata = EnumMetadata(
        name=name,
        description=description,
        entries=tuple(parsed),
        bitmask=bitmask,
    )
    return enum_cls


def is_bitmask(enum_cls: type) -> bool:
    return issubclass(enum_cls, enum.IntFlag)


def coerce_enum(
    enum_cls: type,
    raw: int,
    field_name: str = "",
    strict: bool = False,
) -> int:
    """
    Convert a decoded integer into the field's enum type.

    Known values become enum members. Unknown values are passed through as a
    plain ``int`` unless ``strict`` is set.

    Raises:
        OutOfRangeEnumValueError: In strict mode, for values (or bits) that the
            enum does not define.
    """
    metadata = enum_cls.metadata
    if is_bitmask(enum_cls):
        known_bits = 0
        for e in metadata.entries:
            known_bits |= e.value
        if raw & ~known_bits:
            if strict:
                raise OutOfRangeEnumValueError(field_name, metadata.name, raw)
            logger.debug(f"{field_name}: unknown {metadata.name} bits in {raw:#x}")
            return raw
        return enum_cls(raw)

    try:
        return enum_cls(raw)
    except ValueError:
        if strict:
            raise OutOfRangeEnumValueError(field_name, metadata.name, raw)
        logger.debug(f"{field_name}: {raw} is not a known {metadata.name} value")
        return raw
