"""Process-wide catalog of message and enum metadata for introspection."""

import logging
import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple, Union

from ..config import CodecConfig, default_config
from ..dialects import get_dialect
from ..protocol.dialect import Dialect
from ..protocol.enums import EnumMetadata
from ..protocol.fields import derive_crc_extra, field_offsets

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldMetadata:
    """Description of one message field."""

    name: str
    type: str  # Declared C type, e.g. "uint16_t" or "char[16]"
    description: str
    cardinality: int  # 1 for scalars, N for arrays
    enum: Optional[str]  # Associated enum name
    offset: int  # Byte offset in the payload
    size: int  # Bytes on the wire


@dataclass(frozen=True)
class MessageMetadata:
    """Description of one message type."""

    name: str
    id: int
    crc_extra: int
    description: str
    payload_length: int
    dialect: str
    fields: Tuple[FieldMetadata, ...]  # Declaration order

    @property
    def wire_fields(self) -> Tuple[FieldMetadata, ...]:
        """Fields in payload order."""
        return tuple(sorted(self.fields, key=lambda f: f.offset))

    def field(self, name: str) -> FieldMetadata:
        for f in self.fields:
            if f.name == name:
                return f
        raise KeyError(f"{self.name} has no field {name!r}")


def describe_message(message_cls: type) -> MessageMetadata:
    """Build the metadata record of a message class."""
    offsets = {f.name: offset for f, offset in field_offsets(message_cls.FIELDS)}
    return MessageMetadata(
        name=message_cls.NAME,
        id=message_cls.ID,
        crc_extra=message_cls.CRC_EXTRA,
        description=message_cls.DESCRIPTION,
        payload_length=message_cls.payload_length,
        dialect=message_cls.DIALECT,
        fields=tuple(
            FieldMetadata(
                name=f.name,
                type=f.type,
                description=f.description,
                cardinality=f.cardinality,
                enum=f.enum,
                offset=offsets[f.name],
                size=f.size,
            )
            for f in message_cls.FIELDS
        ),
    )


class MetadataCatalog:
    """
    Lazily built, read-only catalog of a dialect's metadata.

    Nothing is built until the first lookup. The build runs once, under a
    lock, and publishes read-only mappings that are safe to share between
    threads.
    """

    def __init__(
        self,
        config: Optional[CodecConfig] = None,
        dialect: Optional[Dialect] = None,
    ):
        self.config = config or default_config
        self._dialect = dialect
        self._lock = threading.Lock()

        self._enums: Optional[Mapping[str, EnumMetadata]] = None
        self._messages_by_id: Optional[Mapping[int, MessageMetadata]] = None
        self._messages: Optional[Mapping[str, MessageMetadata]] = None
        self._message_classes: Optional[Mapping[str, type]] = None

    @property
    def dialect(self) -> Dialect:
        if self._dialect is None:
            self._dialect = get_dialect(self.config.dialect)
        return self._dialect

    @property
    def is_built(self) -> bool:
        return self._messages is not None

    def _ensure_built(self) -> None:
        if self._messages is not None:
            return
        with self._lock:
            if self._messages is not None:
                return

            dialect = self.dialect
            enums = {name: cls.metadata for name, cls in sorted(dialect.enums.items())}
            by_id = {}
            by_name = {}
            classes = {}
            for msg_id, message_cls in dialect.messages.items():
                metadata = describe_message(message_cls)
                by_id[msg_id] = metadata
                by_name[metadata.name] = metadata
                classes[metadata.name] = message_cls

            self._enums = MappingProxyType(enums)
            self._messages_by_id = MappingProxyType(by_id)
            self._message_classes = MappingProxyType(classes)
            # Published last: readers check this one without the lock
            self._messages = MappingProxyType(by_name)

            logger.info(
                f"Metadata catalog built for '{dialect.name}': "
                f"{len(enums)} enums, {len(by_name)} messages"
            )

    # Lookups

    @property
    def enums(self) -> Mapping[str, EnumMetadata]:
        self._ensure_built()
        return self._enums

    @property
    def messages(self) -> Mapping[str, MessageMetadata]:
        self._ensure_built()
        return self._messages

    def enum_metadata(self, name: str) -> EnumMetadata:
        """
        Metadata of the enum named ``name``.

        Raises:
            KeyError: If the dialect has no such enum.
        """
        self._ensure_built()
        try:
            return self._enums[name]
        except KeyError:
            raise KeyError(f"Unknown enum: {name!r}") from None

    def message_metadata(self, key: Union[int, str]) -> MessageMetadata:
        """
        Metadata of a message, by id or name.

        Raises:
            KeyError: If the dialect has no such message.
        """
        self._ensure_built()
        if isinstance(key, str):
            found = self._messages.get(key.upper())
        else:
            found = self._messages_by_id.get(key)
        if found is None:
            raise KeyError(f"Unknown message: {key!r}")
        return found

    def enum_names(self) -> List[str]:
        return sorted(self.enums)

    def message_names(self) -> List[str]:
        """Message names in id order."""
        self._ensure_built()
        return [m.name for _, m in sorted(self._messages_by_id.items())]

    # Validation

    def validate(self) -> List[str]:
        """
        Check the dialect's definitions for schema problems.

        Reports fields referencing an enum the dialect does not define, enum
        values shared by several entries, field descriptors whose cardinality
        disagrees with the record class, and crc_extra values that do not match
        the message layout.

        Returns:
            Human readable problem descriptions; empty when consistent.
        """
        self._ensure_built()
        problems = []

        for name, metadata in self._enums.items():
            for value, names in sorted(metadata.duplicate_values().items()):
                problems.append(f"enum {name}: value {value} shared by {', '.join(names)}")

        for name, metadata in self._messages.items():
            message_cls = self._message_classes[name]
            declared = {f.name: f for f in message_cls.FIELDS}
            if set(declared) != {f.name for f in metadata.fields}:
                problems.append(f"message {name}: field descriptors do not match the record")

            for f in metadata.fields:
                if f.enum is not None and f.enum not in self._enums:
                    problems.append(f"message {name}: field {f.name} references unknown enum {f.enum}")
                if f.name in declared and declared[f.name].cardinality != f.cardinality:
                    problems.append(f"message {name}: field {f.name} cardinality mismatch")

            derived = derive_crc_extra(name, message_cls.FIELDS)
            if derived != metadata.crc_extra:
                problems.append(
                    f"message {name}: crc_extra {metadata.crc_extra} does not match layout ({derived})"
                )

        for problem in problems:
            logger.warning(problem)
        return problems


_catalog: Optional[MetadataCatalog] = None
_catalog_lock = threading.Lock()


def get_catalog() -> MetadataCatalog:
    """The process-wide catalog for ``default_config``."""
    global _catalog
    if _catalog is None:
        with _catalog_lock:
            if _catalog is None:
                _catalog = MetadataCatalog()
    return _catalog


def enum_metadata(name: str) -> EnumMetadata:
    """``enum_metadata`` on the process-wide catalog."""
    return get_catalog().enum_metadata(name)
