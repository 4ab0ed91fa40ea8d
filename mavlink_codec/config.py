"""Configuration for the MAVLink codec."""

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, Union


@dataclass
class CodecConfig:
    """Configuration for encoding, decoding and registry construction."""

    # Dialect Settings
    dialect: str = "ardupilotmega"  # "common" or "ardupilotmega"
    verify_crc_extra: bool = True  # Check declared crc_extra against the layout

    # Decode Policy
    strict_enums: bool = False  # Reject enum values outside the enum's entries

    # Text Fields
    truncate_text: bool = True  # Truncate over-long char[N] values instead of failing
    text_encoding: str = "utf-8"

    # Logging
    log_unknown_ids: bool = True  # Debug log when the factory misses an id

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CodecConfig":
        """
        Build a config from a mapping, rejecting unknown keys.

        Args:
            data: Mapping of option name to value.

        Returns:
            CodecConfig with the given overrides applied.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config options: {', '.join(unknown)}")
        return cls(**dict(data))

    @classmethod
    def load(cls, path: Union[str, Path]) -> "CodecConfig":
        """Load a config from a JSON object file."""
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("codec config must be a JSON object")
        return cls.from_dict(data)

    def to_dict(self) -> dict:
        return asdict(self)


# Default configuration instance
default_config = CodecConfig()
