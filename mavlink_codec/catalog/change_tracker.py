"""Dirty tracking for message records at the application boundary."""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..protocol.messages import MavlinkMessage

logger = logging.getLogger(__name__)

# callback(field_name, old_value, new_value)
ChangeCallback = Callable[[str, Any, Any], None]


def _same(a: Any, b: Any) -> bool:
    try:
        return bool(a == b)
    except (TypeError, ValueError):
        # Array-like values without a single truth value
        return False


class ChangeTracker:
    """
    Tracks which fields of a message changed since a baseline.

    The tracker subscribes to the message's mutation hook. A field is dirty
    while its value differs from the value it had when tracking started (or
    at the last ``reset``). Assigning the original value back clears it.

    Usage:
        tracker = ChangeTracker(msg)
        tracker.on_change(lambda name, old, new: ..., "custom_mode")
        msg.custom_mode = 4
        tracker.changes()  # {"custom_mode": (0, 4)}
    """

    def __init__(self, message: MavlinkMessage):
        """
        Start tracking ``message``.

        Args:
            message: Record to observe. The current values become the baseline.
        """
        self.message = message
        self._original: Dict[str, Any] = {}
        self._field_callbacks: Dict[str, List[ChangeCallback]] = {}
        self._any_field_callbacks: List[ChangeCallback] = []
        self._reverting = False
        self._listener = message.subscribe(self._on_mutation)
        self._attached = True

    @property
    def attached(self) -> bool:
        return self._attached

    def _on_mutation(self, message: MavlinkMessage, field_name: str, old: Any, new: Any) -> None:
        if field_name not in self._original:
            if _same(old, new):
                return
            self._original[field_name] = old
        elif _same(self._original[field_name], new):
            del self._original[field_name]

        if not self._reverting:
            self._notify_change(field_name, old, new)

    def _notify_change(self, field_name: str, old: Any, new: Any) -> None:
        """Call the field's callbacks, then the any-field callbacks."""
        for callback in self._field_callbacks.get(field_name, []):
            try:
                callback(field_name, old, new)
            except Exception as e:
                logger.error(f"Change callback error on {self.message.NAME}.{field_name}: {e}")

        for callback in self._any_field_callbacks:
            try:
                callback(field_name, old, new)
            except Exception as e:
                logger.error(f"Change callback error on {self.message.NAME}.{field_name}: {e}")

    def on_change(self, callback: ChangeCallback, field_name: Optional[str] = None) -> None:
        """
        Register a callback for changes.

        Args:
            callback: Function(field_name, old_value, new_value) to call.
            field_name: Field to watch; None watches every field.

        Raises:
            KeyError: If ``field_name`` is not a field of the message.
        """
        if field_name is None:
            self._any_field_callbacks.append(callback)
            return
        if field_name not in self.message.FIELD_NAMES:
            raise KeyError(f"{self.message.NAME} has no field {field_name!r}")
        self._field_callbacks.setdefault(field_name, []).append(callback)

    def is_dirty(self, field_name: Optional[str] = None) -> bool:
        """True if ``field_name`` (or any field, when None) differs from the baseline."""
        if field_name is None:
            return bool(self._original)
        return field_name in self._original

    @property
    def dirty_fields(self) -> List[str]:
        """Dirty field names in declaration order."""
        return [f.name for f in self.message.FIELDS if f.name in self._original]

    def changes(self) -> Dict[str, Tuple[Any, Any]]:
        """Map each dirty field to ``(original_value, current_value)``."""
        return {
            name: (self._original[name], getattr(self.message, name))
            for name in self.dirty_fields
        }

    def reset(self) -> None:
        """Accept the current values as the new baseline."""
        self._original.clear()

    def revert(self) -> None:
        """Restore every dirty field to its baseline value, without callbacks."""
        self._reverting = True
        try:
            for name, value in list(self._original.items()):
                setattr(self.message, name, value)
        finally:
            self._reverting = False
        self._original.clear()
        logger.debug(f"Reverted changes on {self.message.NAME}")

    def detach(self) -> None:
        """Stop observing the message. Recorded changes are kept."""
        if self._attached:
            self.message.unsubscribe(self._listener)
            self._attached = False
