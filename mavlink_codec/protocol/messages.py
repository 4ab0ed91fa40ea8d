"""Typed MAVLink message records."""

import copy
import dataclasses
import logging
from typing import Any, Callable, ClassVar, Dict, Optional, Sequence, Tuple

from ..config import CodecConfig
from .binary_codec import BinaryCodec, PayloadReader, PayloadWriter
from .enums import class_name_for, coerce_enum
from .errors import OutOfRangeEnumValueError
from .fields import Field, struct_format, wire_order

logger = logging.getLogger(__name__)

# listener(message, field_name, old_value, new_value)
MutationListener = Callable[["MavlinkMessage", str, Any, Any], None]

_UNSET = object()


class MavlinkMessage:
    """
    Base class of every generated message record.

    Subclasses are dataclasses whose fields are the message's wire fields.
    Class attributes describe the message:

    - ``ID``: numeric message id
    - ``NAME``: MAVLink message name
    - ``CRC_EXTRA``: checksum seed handed to the framing layer
    - ``FIELDS``: fields in declaration order
    - ``WIRE_FIELDS``: fields in wire order
    - ``ENUM_TYPES``: field name -> enum class, for enum-typed fields
    - ``payload_length``: fixed payload size in bytes
    """

    ID: ClassVar[int] = -1
    NAME: ClassVar[str] = ""
    CRC_EXTRA: ClassVar[int] = 0
    DESCRIPTION: ClassVar[str] = ""
    DIALECT: ClassVar[str] = ""
    FIELDS: ClassVar[Tuple[Field, ...]] = ()
    WIRE_FIELDS: ClassVar[Tuple[Field, ...]] = ()
    ENUM_TYPES: ClassVar[Dict[str, type]] = {}
    FIELD_NAMES: ClassVar[frozenset] = frozenset()
    STRUCT_FORMAT: ClassVar[str] = "<"
    payload_length: ClassVar[int] = 0

    _listeners: Tuple[MutationListener, ...] = ()

    def __setattr__(self, name: str, value: Any) -> None:
        old = self.__dict__.get(name, _UNSET)
        object.__setattr__(self, name, value)
        if self._listeners and old is not _UNSET and name in self.FIELD_NAMES:
            self.on_mutation_hook(name, old, value)

    # Mutation hooks

    def subscribe(self, listener: MutationListener) -> MutationListener:
        """
        Register a listener called after every field assignment.

        Args:
            listener: Function(message, field_name, old_value, new_value).

        Returns:
            The listener, so it can be passed to ``unsubscribe`` later.
        """
        object.__setattr__(self, "_listeners", self._listeners + (listener,))
        return listener

    def unsubscribe(self, listener: MutationListener) -> None:
        remaining = tuple(l for l in self._listeners if l is not listener)
        object.__setattr__(self, "_listeners", remaining)

    def on_mutation_hook(self, field_name: str, old: Any, new: Any) -> None:
        """Notify listeners that ``field_name`` changed."""
        for listener in self._listeners:
            try:
                listener(self, field_name, old, new)
            except Exception as e:
                logger.error(f"{self.NAME}.{field_name} listener error: {e}")

    # Copying

    def __getstate__(self) -> Dict[str, Any]:
        # Listeners belong to the instance they were registered on
        state = dict(self.__dict__)
        state.pop("_listeners", None)
        return state

    def __setstate__(self, state: Dict[str, Any]) -> None:
        self.__dict__.update(state)

    def __copy__(self) -> "MavlinkMessage":
        clone = type(self).__new__(type(self))
        clone.__setstate__(self.__getstate__())
        return clone

    def __deepcopy__(self, memo: Dict[int, Any]) -> "MavlinkMessage":
        clone = type(self).__new__(type(self))
        memo[id(self)] = clone
        clone.__setstate__(copy.deepcopy(self.__getstate__(), memo))
        return clone

    # Wire format

    def encode(self, writer: PayloadWriter) -> None:
        """Write every field, in wire order, to ``writer``."""
        for f in self.WIRE_FIELDS:
            writer.write_field(f, getattr(self, f.name))

    def decode(self, reader: PayloadReader, strict_enums: bool = False) -> None:
        """
        Read every field, in wire order, from ``reader``.

        Fields are assigned only once the whole payload has been read, so a
        truncated payload leaves the message unchanged.

        Raises:
            TruncatedPayloadError: If the reader runs out of bytes.
            OutOfRangeEnumValueError: In strict mode, for unknown enum values.
        """
        values = []
        for f in self.WIRE_FIELDS:
            value = reader.read_field(f)
            enum_cls = self.ENUM_TYPES.get(f.name)
            if enum_cls is not None:
                value = coerce_enum(enum_cls, value, f.name, strict_enums)
            values.append((f.name, value))

        for name, value in values:
            setattr(self, name, value)

    def pack(self, config: Optional[CodecConfig] = None) -> bytes:
        """Encode this message to payload bytes."""
        return BinaryCodec(config).encode(self)

    @classmethod
    def unpack(cls, payload: bytes, config: Optional[CodecConfig] = None) -> "MavlinkMessage":
        """Decode payload bytes into a new instance of this message."""
        return BinaryCodec(config).decode(cls, payload)

    # Introspection

    def to_dict(self) -> Dict[str, Any]:
        """Field values keyed by name, in declaration order."""
        return {f.name: getattr(self, f.name) for f in self.FIELDS}

    def unrecognized_enum_fields(self) -> Dict[str, int]:
        """Enum fields currently holding a value their enum does not define."""
        unknown = {}
        for name, enum_cls in self.ENUM_TYPES.items():
            value = getattr(self, name)
            try:
                coerce_enum(enum_cls, value, name, strict=True)
            except OutOfRangeEnumValueError:
                unknown[name] = value
        return unknown


def build_message(
    msg_id: int,
    name: str,
    crc_extra: int,
    description: str,
    fields: Sequence[Field],
    enum_types: Dict[str, type],
    dialect: str = "",
    module: Optional[str] = None,
) -> type:
    """
    Create the dataclass record for one message definition.

    Args:
        msg_id: Message id.
        name: MAVLink message name, e.g. ``"HEARTBEAT"``.
        crc_extra: Published crc_extra of the message.
        description: Human readable description.
        fields: Fields in declaration order.
        enum_types: Field name -> enum class for enum-typed fields.
        dialect: Name of the defining dialect.
        module: Module the class is reported to live in.

    Returns:
        A ``MavlinkMessage`` dataclass subclass.
    """
    names = [f.name for f in fields]
    if len(set(names)) != len(names):
        raise ValueError(f"{name}: duplicate field names")

    ordered = wire_order(fields)
    namespace = {
        "ID": msg_id,
        "NAME": name,
        "CRC_EXTRA": crc_extra,
        "DESCRIPTION": description,
        "DIALECT": dialect,
        "FIELDS": tuple(fields),
        "WIRE_FIELDS": ordered,
        "ENUM_TYPES": dict(enum_types),
        "FIELD_NAMES": frozenset(names),
        "STRUCT_FORMAT": struct_format(ordered),
        "payload_length": sum(f.size for f in ordered),
    }
    spec = [
        (f.name, Any, dataclasses.field(default_factory=_default_factory(f, enum_types.get(f.name))))
        for f in fields
    ]
    cls = dataclasses.make_dataclass(
        class_name_for(name),
        spec,
        bases=(MavlinkMessage,),
        namespace=namespace,
    )
    if module is not None:
        cls.__module__ = module
    return cls


def _default_factory(f: Field, enum_cls: Optional[type] = None) -> Callable[[], Any]:
    if enum_cls is None:
        return f.default_value

    def make() -> Any:
        try:
            return coerce_enum(enum_cls, f.default_value(), f.name, strict=True)
        except OutOfRangeEnumValueError:
            return f.default_value()

    return make
