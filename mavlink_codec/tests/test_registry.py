"""Tests for the id-keyed message registry."""

import threading

import pytest

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from mavlink_codec.catalog import registry as registry_module
from mavlink_codec.catalog.registry import MessageRegistry, RegistryEntry
from mavlink_codec.config import CodecConfig
from mavlink_codec.dialects import get_dialect
from mavlink_codec.dialects.common.messages import Heartbeat, Ping
from mavlink_codec.dialects.ardupilotmega.messages import SensorOffsets
from mavlink_codec.protocol.dialect import Dialect
from mavlink_codec.protocol.errors import CrcExtraMismatchError, TruncatedPayloadError, UnknownMessageError
from mavlink_codec.protocol.fields import Field, derive_crc_extra


def _scratch_dialect(crc_extra=None):
    dialect = Dialect("scratch")
    fields = [Field("x", "uint8_t")]
    if crc_extra is None:
        crc_extra = derive_crc_extra("FOO", fields)
    dialect.message(1000, "FOO", crc_extra, "Scratch message", fields)
    return dialect


class TestMessageRegistry:
    """Test suite for the ardupilotmega registry."""

    @pytest.fixture
    def registry(self):
        """Create a registry for the default dialect."""
        return MessageRegistry()

    def test_create_from_id(self, registry):
        """Test that known ids produce default records."""
        msg = registry.create_from_id(0)
        assert isinstance(msg, Heartbeat)
        assert msg.mavlink_version == 3

    def test_create_from_id_returns_new_instances(self, registry):
        """Test that each call builds a fresh record."""
        assert registry.create_from_id(4) is not registry.create_from_id(4)

    def test_crc_extra_for_id(self, registry):
        """Test crc_extra lookup."""
        assert registry.crc_extra_for_id(0) == 50
        assert registry.crc_extra_for_id(4) == 237
        assert registry.crc_extra_for_id(150) == 134

    def test_unknown_id(self, registry):
        """Test that unknown ids yield None from both lookups."""
        assert registry.create_from_id(9999) is None
        assert registry.crc_extra_for_id(9999) is None
        assert registry.decode_payload(9999, b"") is None

    def test_lookups_agree(self, registry):
        """Test that both transport lookups cover the same ids."""
        for msg_id in range(0, 256):
            created = registry.create_from_id(msg_id)
            crc = registry.crc_extra_for_id(msg_id)
            assert (created is None) == (crc is None)
            if created is not None:
                assert created.ID == msg_id
                assert created.CRC_EXTRA == crc

    def test_completeness(self, registry):
        """Test that every dialect message is registered."""
        assert len(registry) == 185
        assert registry.ids() == sorted(get_dialect("ardupilotmega").messages)
        assert "HEARTBEAT" in registry
        assert "sensor_offsets" in registry
        assert 226 in registry
        assert 9999 not in registry

    def test_iteration_order(self, registry):
        """Test that entries iterate in id order."""
        entries = list(registry)
        assert all(isinstance(e, RegistryEntry) for e in entries)
        assert [e.msg_id for e in entries] == registry.ids()
        assert registry.names()[0] == "HEARTBEAT"

    def test_crc_table(self, registry):
        """Test the id to crc_extra map."""
        table = registry.crc_table()
        assert table[0] == 50
        assert table[76] == 152
        assert table[253] == 83
        assert len(table) == len(registry)

    def test_decode_payload(self, registry):
        """Test decoding through the registry."""
        msg = registry.decode_payload(4, bytes.fromhex("0100000000000000020000000304"))
        assert isinstance(msg, Ping)
        assert msg.seq == 2

    def test_decode_payload_truncated(self, registry):
        """Test that short payloads raise."""
        with pytest.raises(TruncatedPayloadError):
            registry.decode_payload(0, b"\x00\x00")

    def test_message_class(self, registry):
        """Test lookup by id and name."""
        assert registry.message_class(0) is Heartbeat
        assert registry.message_class("HEARTBEAT") is Heartbeat
        assert registry.message_class("heartbeat") is Heartbeat

    def test_create_from_name(self, registry):
        """Test creating a record by name."""
        assert isinstance(registry.create_from_name("SENSOR_OFFSETS"), SensorOffsets)

    def test_unknown_name(self, registry):
        """Test that unknown names raise."""
        with pytest.raises(UnknownMessageError) as exc_info:
            registry.create_from_name("NOT_A_MESSAGE")
        assert exc_info.value.key == "NOT_A_MESSAGE"
        # Still a KeyError for callers that expect mapping semantics
        with pytest.raises(KeyError):
            registry.message_class(9999)

    def test_register_same_class_is_noop(self, registry):
        """Test idempotent registration."""
        before = len(registry)
        entry = registry.register(Heartbeat)
        assert entry.message_cls is Heartbeat
        assert len(registry) == before

    def test_register_conflicting_id(self, registry):
        """Test that another class cannot take a used id."""
        dialect = Dialect("conflict")
        other = dialect.message(0, "NOT_HEARTBEAT", 0, "", [Field("x", "uint8_t")])
        with pytest.raises(ValueError):
            registry.register(other)

    def test_register_conflicting_name(self, registry):
        """Test that another class cannot take a used name."""
        dialect = Dialect("conflict")
        fields = [Field("x", "uint8_t")]
        other = dialect.message(5000, "HEARTBEAT", derive_crc_extra("HEARTBEAT", fields), "", fields)
        with pytest.raises(ValueError):
            registry.register(other)


class TestDialectSelection:
    """Test registries for different dialects."""

    def test_common_excludes_ardupilot(self):
        """Test that the common registry has no ardupilotmega messages."""
        registry = MessageRegistry(CodecConfig(dialect="common"))
        assert len(registry) == 136
        assert registry.create_from_id(150) is None
        assert registry.crc_extra_for_id(150) is None
        assert registry.create_from_id(0) is not None

    def test_unknown_dialect(self):
        """Test that an unknown dialect name is rejected."""
        with pytest.raises(ValueError):
            MessageRegistry(CodecConfig(dialect="nope"))

    def test_explicit_dialect(self):
        """Test passing a dialect object."""
        registry = MessageRegistry(dialect=_scratch_dialect())
        assert registry.ids() == [1000]
        assert registry.crc_extra_for_id(1000) == derive_crc_extra("FOO", [Field("x", "uint8_t")])


class TestCrcVerification:
    """Test crc_extra verification at registration."""

    def test_mismatch_raises(self):
        """Test that a wrong crc_extra is rejected."""
        correct = derive_crc_extra("FOO", [Field("x", "uint8_t")])
        dialect = _scratch_dialect(crc_extra=(correct + 1) % 256)
        with pytest.raises(CrcExtraMismatchError) as exc_info:
            MessageRegistry(dialect=dialect)
        assert exc_info.value.message_name == "FOO"
        assert exc_info.value.derived == correct

    def test_verification_disabled(self):
        """Test that verification can be turned off."""
        correct = derive_crc_extra("FOO", [Field("x", "uint8_t")])
        dialect = _scratch_dialect(crc_extra=(correct + 1) % 256)
        registry = MessageRegistry(CodecConfig(verify_crc_extra=False), dialect=dialect)
        assert registry.crc_extra_for_id(1000) == (correct + 1) % 256


class TestModuleFunctions:
    """Test the default registry shortcuts."""

    def test_default_registry_shared(self):
        """Test that the default registry is built once."""
        assert registry_module.default_registry() is registry_module.default_registry()

    def test_default_registry_concurrent_build(self, monkeypatch):
        """Test that concurrent first calls share one registry."""
        monkeypatch.setattr(registry_module, "_default_registry", None)
        results = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            results.append(registry_module.default_registry())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 8
        assert all(r is results[0] for r in results)

    def test_shortcuts(self):
        """Test module-level lookups."""
        assert isinstance(registry_module.create_from_id(0), Heartbeat)
        assert registry_module.crc_extra_for_id(0) == 50
        assert registry_module.create_from_id(9999) is None
        assert registry_module.crc_extra_for_id(9999) is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
