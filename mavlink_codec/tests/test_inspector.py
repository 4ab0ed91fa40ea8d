"""Tests for the inspector command line."""

import json

import pytest

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from mavlink_codec.run_inspector import main


class TestInspector:
    """Test inspector subcommands and exit codes."""

    def test_list(self, capsys):
        """Test listing all messages."""
        assert main(["list"]) == 0
        out = capsys.readouterr().out
        assert "HEARTBEAT" in out
        assert "SENSOR_OFFSETS" in out
        assert "185 messages in dialect 'ardupilotmega'" in out

    def test_list_common(self, capsys):
        """Test listing the common dialect."""
        assert main(["--dialect", "common", "list"]) == 0
        out = capsys.readouterr().out
        assert "SENSOR_OFFSETS" not in out
        assert "136 messages in dialect 'common'" in out

    def test_describe_by_name(self, capsys):
        """Test describing a message by name."""
        assert main(["describe", "command_long"]) == 0
        out = capsys.readouterr().out
        assert "COMMAND_LONG (id 76, crc_extra 152, 33 bytes" in out
        assert "MAV_CMD" in out

    def test_describe_by_id(self, capsys):
        """Test describing a message by id."""
        assert main(["describe", "0"]) == 0
        assert "HEARTBEAT" in capsys.readouterr().out

    def test_describe_unknown(self, capsys):
        """Test describing an unknown message."""
        assert main(["describe", "NOT_A_MESSAGE"]) == 1
        assert "Unknown message" in capsys.readouterr().out

    def test_enum(self, capsys):
        """Test showing an enum with command params."""
        assert main(["enum", "mav_cmd"]) == 0
        out = capsys.readouterr().out
        assert "MAV_CMD_COMPONENT_ARM_DISARM" in out
        assert "param1:" in out

    def test_enum_unknown(self, capsys):
        """Test showing an unknown enum."""
        assert main(["enum", "NOT_AN_ENUM"]) == 1

    def test_decode(self, capsys):
        """Test decoding a HEARTBEAT payload."""
        assert main(["decode", "0", "000000000203510403"]) == 0
        out = capsys.readouterr().out
        assert "HEARTBEAT (id 0)" in out
        assert "QUADROTOR (2)" in out

    def test_decode_unrecognized_enum(self, capsys):
        """Test that unknown enum values are shown."""
        assert main(["decode", "0", "00000000c803510403"]) == 0
        assert "unrecognized enum values: {'type': 200}" in capsys.readouterr().out

    def test_decode_truncated(self, capsys):
        """Test decoding a short payload."""
        assert main(["decode", "0", "0000000002"]) == 1
        assert "Decode failed" in capsys.readouterr().out

    def test_decode_unknown_id(self, capsys):
        """Test decoding for an unregistered id."""
        assert main(["decode", "9999", "00"]) == 1
        assert "Unknown message id 9999" in capsys.readouterr().out

    def test_decode_bad_hex(self, capsys):
        """Test decoding invalid hex."""
        assert main(["decode", "0", "zz"]) == 2
        assert "Invalid input" in capsys.readouterr().out

    @pytest.mark.parametrize("dialect", ["common", "ardupilotmega"])
    def test_check(self, capsys, dialect):
        """Test validating the bundled dialects."""
        assert main(["--dialect", dialect, "check"]) == 0
        assert capsys.readouterr().out.startswith("OK:")

    def test_unknown_dialect(self, capsys):
        """Test that an unknown dialect is a usage error."""
        assert main(["--dialect", "nope", "list"]) == 2
        assert "Unknown dialect" in capsys.readouterr().out

    def test_config_file(self, capsys, tmp_path):
        """Test loading options from a config file."""
        path = tmp_path / "codec.json"
        path.write_text(json.dumps({"strict_enums": True}))
        assert main(["--config", str(path), "decode", "0", "00000000c803510403"]) == 1
        assert "Decode failed" in capsys.readouterr().out

    def test_bad_config_file(self, capsys, tmp_path):
        """Test that a config with unknown options is rejected."""
        path = tmp_path / "codec.json"
        path.write_text(json.dumps({"bogus": 1}))
        assert main(["--config", str(path), "list"]) == 2

    def test_missing_command(self):
        """Test that a subcommand is required."""
        with pytest.raises(SystemExit):
            main([])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
