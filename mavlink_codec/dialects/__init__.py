"""Bundled MAVLink dialects."""

from typing import Dict

from ..protocol.dialect import Dialect
from .ardupilotmega import ardupilotmega
from .common import common

DIALECTS: Dict[str, Dialect] = {
    "common": common,
    "ardupilotmega": ardupilotmega,
}


def get_dialect(name: str) -> Dialect:
    """
    Look up a bundled dialect by name.

    Raises:
        ValueError: If no dialect of that name is bundled.
    """
    try:
        return DIALECTS[name]
    except KeyError:
        raise ValueError(
            f"Unknown dialect '{name}', expected one of: {', '.join(sorted(DIALECTS))}"
        ) from None


__all__ = ["DIALECTS", "get_dialect", "common", "ardupilotmega"]
