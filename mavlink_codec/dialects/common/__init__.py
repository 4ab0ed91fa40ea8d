"""The MAVLink ``common`` dialect."""

from . import messages
from .enums import common

__all__ = ["common", "messages"]
