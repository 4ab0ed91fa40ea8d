"""Registry, metadata catalog and change tracking for message records."""

from .change_tracker import ChangeTracker
from .metadata import (
    FieldMetadata,
    MessageMetadata,
    MetadataCatalog,
    describe_message,
    enum_metadata,
    get_catalog,
)
from .registry import (
    MessageRegistry,
    RegistryEntry,
    create_from_id,
    crc_extra_for_id,
    default_registry,
)

__all__ = [
    "ChangeTracker",
    "FieldMetadata",
    "MessageMetadata",
    "MetadataCatalog",
    "describe_message",
    "enum_metadata",
    "get_catalog",
    "MessageRegistry",
    "RegistryEntry",
    "create_from_id",
    "crc_extra_for_id",
    "default_registry",
]
