"""Dialects: named collections of MAVLink enums and message definitions."""

import logging
import sys
from typing import Dict, Iterable, List, Optional, Sequence

from .enums import EntrySpec, build_enum
from .fields import Field
from .messages import build_message

logger = logging.getLogger(__name__)


def _caller_module(depth: int = 2) -> Optional[str]:
    # Same trick the functional Enum API uses to report a sensible __module__
    try:
        return sys._getframe(depth).f_globals.get("__name__")
    except (AttributeError, ValueError):
        return None


class Dialect:
    """
    A MAVLink dialect.

    A dialect owns the enums and messages it defines and can include other
    dialects (``ardupilotmega`` includes ``common``). Lookups search the
    dialect itself first, then its includes.
    """

    def __init__(self, name: str, includes: Sequence["Dialect"] = ()):
        """
        Initialize an empty dialect.

        Args:
            name: Dialect name, e.g. ``"common"``.
            includes: Dialects whose definitions this one extends.
        """
        self.name = name
        self.includes = tuple(includes)
        self._enums: Dict[str, type] = {}
        self._messages: Dict[int, type] = {}

    def __repr__(self) -> str:
        return f"Dialect({self.name!r}, enums={len(self.enums)}, messages={len(self.messages)})"

    # Definitions

    def enum(
        self,
        name: str,
        description: str,
        entries: Iterable[EntrySpec],
        bitmask: bool = False,
    ) -> type:
        """Define an enum in this dialect and return its class."""
        if name in self._enums:
            raise ValueError(f"{self.name}: enum {name} defined twice")
        enum_cls = build_enum(name, description, entries, bitmask, module=_caller_module())
        self._enums[name] = enum_cls
        return enum_cls

    def message(
        self,
        msg_id: int,
        name: str,
        crc_extra: int,
        description: str,
        fields: Sequence[Field],
    ) -> type:
        """
        Define a message in this dialect and return its record class.

        Enum names referenced by the fields are resolved against this dialect
        and its includes; an unresolved name leaves the field as a plain
        integer (reported by the metadata catalog's validation).
        """
        existing = self.find_message(msg_id)
        if existing is not None:
            raise ValueError(
                f"{self.name}: message id {msg_id} already used by {existing.NAME}"
            )

        enum_types = {}
        for f in fields:
            if f.enum is None:
                continue
            enum_cls = self.find_enum(f.enum)
            if enum_cls is not None:
                enum_types[f.name] = enum_cls

        cls = build_message(
            msg_id,
            name,
            crc_extra,
            description,
            fields,
            enum_types,
            dialect=self.name,
            module=_caller_module(),
        )
        self._messages[msg_id] = cls
        return cls

    # Lookups

    def find_enum(self, name: str) -> Optional[type]:
        if name in self._enums:
            return self._enums[name]
        for included in self.includes:
            found = included.find_enum(name)
            if found is not None:
                return found
        return None

    def find_message(self, msg_id: int) -> Optional[type]:
        if msg_id in self._messages:
            return self._messages[msg_id]
        for included in self.includes:
            found = included.find_message(msg_id)
            if found is not None:
                return found
        return None

    @property
    def enums(self) -> Dict[str, type]:
        """All enums visible in this dialect, keyed by MAVLink name."""
        merged: Dict[str, type] = {}
        for included in self.includes:
            merged.update(included.enums)
        merged.update(self._enums)
        return merged

    @property
    def messages(self) -> Dict[int, type]:
        """All messages visible in this dialect, keyed by id."""
        merged: Dict[int, type] = {}
        for included in self.includes:
            merged.update(included.messages)
        merged.update(self._messages)
        return dict(sorted(merged.items()))

    def own_messages(self) -> List[type]:
        """Messages defined by this dialect itself."""
        return [self._messages[k] for k in sorted(self._messages)]
