"""Tests for the metadata catalog."""

import threading
from types import MappingProxyType

import pytest

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from mavlink_codec.catalog import metadata as metadata_module
from mavlink_codec.catalog.metadata import MetadataCatalog, describe_message
from mavlink_codec.config import CodecConfig
from mavlink_codec.dialects import get_dialect
from mavlink_codec.dialects.common.messages import CommandLong, Heartbeat
from mavlink_codec.protocol.dialect import Dialect
from mavlink_codec.protocol.fields import Field, derive_crc_extra


class TestMetadataCatalog:
    """Test suite for the ardupilotmega catalog."""

    @pytest.fixture
    def catalog(self):
        """Create a fresh, unbuilt catalog."""
        return MetadataCatalog()

    def test_lazy_build(self, catalog):
        """Test that nothing is built before the first lookup."""
        assert not catalog.is_built
        catalog.enum_metadata("MAV_TYPE")
        assert catalog.is_built

    def test_enum_metadata(self, catalog):
        """Test enum lookup."""
        metadata = catalog.enum_metadata("MAV_STATE")
        assert metadata.name == "MAV_STATE"
        assert metadata.entry("MAV_STATE_ACTIVE").value == 4
        assert not metadata.bitmask
        assert catalog.enum_metadata("MAV_MODE_FLAG").bitmask

    def test_unknown_enum(self, catalog):
        """Test that unknown enum names raise KeyError."""
        with pytest.raises(KeyError):
            catalog.enum_metadata("NOT_AN_ENUM")

    def test_enums_include_common(self, catalog):
        """Test that ardupilotmega sees common and its own enums."""
        names = catalog.enum_names()
        assert "MAV_CMD" in names
        assert "COPTER_MODE" in names
        assert names == sorted(names)
        assert len(names) == 61

    def test_message_metadata_by_name_and_id(self, catalog):
        """Test message lookup by name or id."""
        by_name = catalog.message_metadata("HEARTBEAT")
        assert catalog.message_metadata(0) is by_name
        assert catalog.message_metadata("heartbeat") is by_name
        assert by_name.id == 0
        assert by_name.crc_extra == 50
        assert by_name.payload_length == 9
        assert by_name.dialect == "common"

    def test_unknown_message(self, catalog):
        """Test that unknown messages raise KeyError."""
        with pytest.raises(KeyError):
            catalog.message_metadata(9999)
        with pytest.raises(KeyError):
            catalog.message_metadata("NOT_A_MESSAGE")

    def test_field_descriptors(self, catalog):
        """Test field metadata of COMMAND_LONG."""
        metadata = catalog.message_metadata("COMMAND_LONG")
        assert [f.name for f in metadata.fields] == [f.name for f in CommandLong.FIELDS]
        command = metadata.field("command")
        assert command.type == "uint16_t"
        assert command.enum == "MAV_CMD"
        assert command.offset == 28
        assert command.size == 2
        assert command.cardinality == 1
        with pytest.raises(KeyError):
            metadata.field("nope")

    def test_wire_fields(self, catalog):
        """Test that wire fields are in offset order."""
        metadata = catalog.message_metadata("HEARTBEAT")
        assert [f.name for f in metadata.wire_fields] == [f.name for f in Heartbeat.WIRE_FIELDS]
        assert [f.offset for f in metadata.wire_fields] == [0, 4, 5, 6, 7, 8]

    def test_array_cardinality(self, catalog):
        """Test cardinality of array fields."""
        metadata = catalog.message_metadata("STATUSTEXT")
        assert metadata.field("text").cardinality == 50
        assert metadata.field("severity").cardinality == 1

    def test_message_names_in_id_order(self, catalog):
        """Test message name listing."""
        names = catalog.message_names()
        assert names[0] == "HEARTBEAT"
        assert len(names) == 185
        assert [catalog.message_metadata(n).id for n in names] == sorted(get_dialect("ardupilotmega").messages)

    def test_read_only(self, catalog):
        """Test that published mappings cannot be modified."""
        assert isinstance(catalog.enums, MappingProxyType)
        assert isinstance(catalog.messages, MappingProxyType)
        with pytest.raises(TypeError):
            catalog.enums["NEW"] = None
        with pytest.raises(TypeError):
            catalog.messages["NEW"] = None

    def test_common_dialect(self):
        """Test a catalog of the common dialect."""
        catalog = MetadataCatalog(CodecConfig(dialect="common"))
        assert len(catalog.message_names()) == 136
        with pytest.raises(KeyError):
            catalog.enum_metadata("COPTER_MODE")


class TestConcurrentBuild:
    """Test the one-time build under concurrent access."""

    def test_single_build(self):
        """Test that concurrent first lookups all see one build."""
        catalog = MetadataCatalog()
        results = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            results.append(catalog.messages)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 8
        assert all(r is results[0] for r in results)


class TestValidate:
    """Test schema validation."""

    @pytest.mark.parametrize("dialect_name", ["common", "ardupilotmega"])
    def test_bundled_dialects_are_consistent(self, dialect_name):
        """Test that the bundled definitions have no problems."""
        catalog = MetadataCatalog(CodecConfig(dialect=dialect_name))
        assert catalog.validate() == []

    def test_every_field_has_descriptor(self):
        """Test descriptor coverage and cardinality for every message."""
        catalog = MetadataCatalog()
        for name, metadata in catalog.messages.items():
            message_cls = get_dialect("ardupilotmega").find_message(metadata.id)
            assert len(metadata.fields) == len(message_cls.FIELDS)
            for field, descriptor in zip(message_cls.FIELDS, metadata.fields):
                assert descriptor.cardinality == field.cardinality
                if descriptor.enum is not None:
                    assert descriptor.enum in catalog.enums

    def test_reports_unknown_enum(self):
        """Test that dangling enum references are reported."""
        dialect = Dialect("scratch")
        fields = [Field("mode", "uint8_t", enum="NOT_DEFINED")]
        dialect.message(1, "FOO", derive_crc_extra("FOO", fields), "", fields)
        problems = MetadataCatalog(dialect=dialect).validate()
        assert len(problems) == 1
        assert "NOT_DEFINED" in problems[0]

    def test_reports_duplicate_enum_values(self):
        """Test that shared enum values are reported."""
        dialect = Dialect("scratch")
        dialect.enum("DUP", "", [("DUP_A", 1, ""), ("DUP_B", 1, "")])
        problems = MetadataCatalog(dialect=dialect).validate()
        assert problems == ["enum DUP: value 1 shared by DUP_A, DUP_B"]

    def test_reports_crc_mismatch(self):
        """Test that a wrong crc_extra is reported."""
        dialect = Dialect("scratch")
        fields = [Field("x", "uint8_t")]
        wrong = (derive_crc_extra("FOO", fields) + 1) % 256
        dialect.message(1, "FOO", wrong, "", fields)
        problems = MetadataCatalog(dialect=dialect).validate()
        assert len(problems) == 1
        assert "crc_extra" in problems[0]


class TestModuleFunctions:
    """Test the process-wide catalog."""

    def test_shared_catalog(self):
        """Test that get_catalog returns one instance."""
        assert metadata_module.get_catalog() is metadata_module.get_catalog()

    def test_enum_metadata(self):
        """Test the module-level enum lookup."""
        assert metadata_module.enum_metadata("MAV_TYPE").name == "MAV_TYPE"
        with pytest.raises(KeyError):
            metadata_module.enum_metadata("NOT_AN_ENUM")

    def test_describe_message(self):
        """Test building metadata straight from a class."""
        metadata = describe_message(Heartbeat)
        assert metadata.name == "HEARTBEAT"
        assert metadata.field("mavlink_version").offset == 8


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
