"""Tests for codec configuration."""

import json

import pytest

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from mavlink_codec.config import CodecConfig, default_config


class TestCodecConfig:
    """Test configuration defaults and loading."""

    def test_defaults(self):
        """Test default option values."""
        config = CodecConfig()
        assert config.dialect == "ardupilotmega"
        assert config.verify_crc_extra is True
        assert config.strict_enums is False
        assert config.truncate_text is True
        assert config.text_encoding == "utf-8"
        assert config.log_unknown_ids is True

    def test_default_instance(self):
        """Test the module-level default config."""
        assert default_config == CodecConfig()

    def test_from_dict(self):
        """Test overrides from a mapping."""
        config = CodecConfig.from_dict({"dialect": "common", "strict_enums": True})
        assert config.dialect == "common"
        assert config.strict_enums is True
        assert config.truncate_text is True

    def test_from_dict_unknown_key(self):
        """Test that unknown options are rejected."""
        with pytest.raises(ValueError) as exc_info:
            CodecConfig.from_dict({"dialect": "common", "colour": "red"})
        assert "colour" in str(exc_info.value)

    def test_to_dict_round_trip(self):
        """Test that to_dict feeds back into from_dict."""
        config = CodecConfig(dialect="common", truncate_text=False)
        assert CodecConfig.from_dict(config.to_dict()) == config

    def test_load(self, tmp_path):
        """Test loading a JSON file."""
        path = tmp_path / "codec.json"
        path.write_text(json.dumps({"strict_enums": True}))
        config = CodecConfig.load(path)
        assert config.strict_enums is True
        assert config.dialect == "ardupilotmega"

    def test_load_not_object(self, tmp_path):
        """Test that a non-object JSON document is rejected."""
        path = tmp_path / "codec.json"
        path.write_text("[1, 2]")
        with pytest.raises(ValueError):
            CodecConfig.load(path)

    def test_load_missing_file(self, tmp_path):
        """Test that a missing file raises OSError."""
        with pytest.raises(OSError):
            CodecConfig.load(tmp_path / "missing.json")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
