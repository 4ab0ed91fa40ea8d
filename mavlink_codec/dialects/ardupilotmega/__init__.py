"""The MAVLink ``ardupilotmega`` dialect (includes ``common``)."""

from . import messages
from .enums import ardupilotmega

__all__ = ["ardupilotmega", "messages"]
