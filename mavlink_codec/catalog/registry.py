"""Id-keyed message registry used by transports to instantiate messages."""

import logging
import threading
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Union

from ..config import CodecConfig, default_config
from ..dialects import get_dialect
from ..protocol.binary_codec import BinaryCodec
from ..protocol.dialect import Dialect
from ..protocol.errors import CrcExtraMismatchError, UnknownMessageError
from ..protocol.fields import derive_crc_extra
from ..protocol.messages import MavlinkMessage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistryEntry:
    """One registered message: id, crc_extra and record class."""

    msg_id: int
    crc_extra: int
    message_cls: type


class MessageRegistry:
    """
    Factory for message records, keyed by message id.

    The registry holds one entry per message of a dialect. Both transport
    lookups (``create_from_id`` and ``crc_extra_for_id``) read the same entry,
    so they always cover the same ids.

    Inbound use:
        msg = registry.create_from_id(msg_id)
        seed = registry.crc_extra_for_id(msg_id)
        msg.decode(reader)

    Unknown ids are reported as ``None``, never raised.
    """

    def __init__(
        self,
        config: Optional[CodecConfig] = None,
        dialect: Optional[Dialect] = None,
    ):
        """
        Build the registry for a dialect.

        Args:
            config: Codec configuration. Defaults to ``default_config``.
            dialect: Dialect to register. Defaults to the one named in config.

        Raises:
            CrcExtraMismatchError: If ``verify_crc_extra`` is set and a declared
                crc_extra disagrees with its message layout.
        """
        self.config = config or default_config
        self.dialect = dialect or get_dialect(self.config.dialect)
        self._codec = BinaryCodec(self.config)

        self._by_id: Dict[int, RegistryEntry] = {}
        self._by_name: Dict[str, RegistryEntry] = {}

        for message_cls in self.dialect.messages.values():
            self.register(message_cls)

        logger.info(
            f"Registry built for dialect '{self.dialect.name}': {len(self)} messages"
        )

    def register(self, message_cls: type) -> RegistryEntry:
        """
        Add a message class to the registry.

        Registering the same class twice is a no-op.

        Raises:
            ValueError: If the id or name is already taken by another class.
            CrcExtraMismatchError: If verification is enabled and the declared
                crc_extra does not match the layout.
        """
        existing = self._by_id.get(message_cls.ID)
        if existing is not None:
            if existing.message_cls is message_cls:
                return existing
            raise ValueError(
                f"Message id {message_cls.ID} already registered to "
                f"{existing.message_cls.NAME}, cannot register {message_cls.NAME}"
            )
        if message_cls.NAME in self._by_name:
            raise ValueError(f"Message name {message_cls.NAME} already registered")

        if self.config.verify_crc_extra:
            derived = derive_crc_extra(message_cls.NAME, message_cls.FIELDS)
            if derived != message_cls.CRC_EXTRA:
                raise CrcExtraMismatchError(message_cls.NAME, message_cls.CRC_EXTRA, derived)

        entry = RegistryEntry(message_cls.ID, message_cls.CRC_EXTRA, message_cls)
        self._by_id[entry.msg_id] = entry
        self._by_name[message_cls.NAME] = entry
        return entry

    # Transport interface

    def create_from_id(self, msg_id: int) -> Optional[MavlinkMessage]:
        """
        Create a default-initialized message for ``msg_id``.

        Returns:
            New message instance, or None if the id is not registered.
        """
        entry = self._lookup(msg_id)
        if entry is None:
            return None
        return entry.message_cls()

    def crc_extra_for_id(self, msg_id: int) -> Optional[int]:
        """Return the crc_extra seed for ``msg_id``, or None if unregistered."""
        entry = self._lookup(msg_id)
        if entry is None:
            return None
        return entry.crc_extra

    def decode_payload(self, msg_id: int, payload: bytes) -> Optional[MavlinkMessage]:
        """
        Decode a payload for ``msg_id``.

        Returns:
            Decoded message, or None if the id is not registered.

        Raises:
            TruncatedPayloadError: If the payload is too short.
            OutOfRangeEnumValueError: In strict enum mode.
        """
        entry = self._lookup(msg_id)
        if entry is None:
            return None
        return self._codec.decode(entry.message_cls, payload)

    def crc_table(self) -> Dict[int, int]:
        """Map of message id to crc_extra, for framing layers."""
        return {msg_id: entry.crc_extra for msg_id, entry in sorted(self._by_id.items())}

    # Lookup by name or id

    def message_class(self, key: Union[int, str]) -> type:
        """
        Return the record class for a message id or name.

        Raises:
            UnknownMessageError: If nothing is registered under ``key``.
        """
        if isinstance(key, str):
            entry = self._by_name.get(key.upper())
        else:
            entry = self._by_id.get(key)
        if entry is None:
            raise UnknownMessageError(key)
        return entry.message_cls

    def create_from_name(self, name: str) -> MavlinkMessage:
        """
        Create a default-initialized message by name.

        Raises:
            UnknownMessageError: If the name is not registered.
        """
        return self.message_class(name)()

    def ids(self) -> List[int]:
        return sorted(self._by_id)

    def names(self) -> List[str]:
        return [self._by_id[i].message_cls.NAME for i in self.ids()]

    def __contains__(self, key: object) -> bool:
        if isinstance(key, str):
            return key.upper() in self._by_name
        return key in self._by_id

    def __len__(self) -> int:
        return len(self._by_id)

    def __iter__(self) -> Iterator[RegistryEntry]:
        return iter(self._by_id[i] for i in self.ids())

    def _lookup(self, msg_id: int) -> Optional[RegistryEntry]:
        entry = self._by_id.get(msg_id)
        if entry is None and self.config.log_unknown_ids:
            logger.debug(f"No message registered for id {msg_id} in '{self.dialect.name}'")
        return entry


_default_registry: Optional[MessageRegistry] = None
_default_registry_lock = threading.Lock()


def default_registry() -> MessageRegistry:
    """Registry for ``default_config``, built on first use."""
    global _default_registry
    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                _default_registry = MessageRegistry()
    return _default_registry


def create_from_id(msg_id: int) -> Optional[MavlinkMessage]:
    """``create_from_id`` on the default registry."""
    return default_registry().create_from_id(msg_id)


def crc_extra_for_id(msg_id: int) -> Optional[int]:
    """``crc_extra_for_id`` on the default registry."""
    return default_registry().crc_extra_for_id(msg_id)
