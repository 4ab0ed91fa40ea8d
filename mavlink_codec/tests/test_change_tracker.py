"""Tests for message change tracking."""

import copy
import pickle

import pytest

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from mavlink_codec.catalog.change_tracker import ChangeTracker
from mavlink_codec.dialects.common.enums import MavState
from mavlink_codec.dialects.common.messages import AttitudeQuaternionCov, Heartbeat
from mavlink_codec.protocol.binary_codec import PayloadReader


class TestChangeTracker:
    """Test suite for dirty tracking."""

    @pytest.fixture
    def msg(self):
        """Create a fresh HEARTBEAT."""
        return Heartbeat()

    @pytest.fixture
    def tracker(self, msg):
        """Create a tracker attached to the message."""
        return ChangeTracker(msg)

    def test_initially_clean(self, tracker):
        """Test that nothing is dirty before any change."""
        assert not tracker.is_dirty()
        assert tracker.dirty_fields == []
        assert tracker.changes() == {}
        assert tracker.attached

    def test_change_marks_dirty(self, msg, tracker):
        """Test that an assignment marks the field dirty."""
        msg.custom_mode = 4
        assert tracker.is_dirty()
        assert tracker.is_dirty("custom_mode")
        assert not tracker.is_dirty("type")
        assert tracker.changes() == {"custom_mode": (0, 4)}

    def test_original_value_kept(self, msg, tracker):
        """Test that repeated changes keep the first original value."""
        msg.custom_mode = 4
        msg.custom_mode = 5
        assert tracker.changes() == {"custom_mode": (0, 5)}

    def test_back_to_original_is_clean(self, msg, tracker):
        """Test that restoring the original value clears the field."""
        msg.custom_mode = 4
        msg.custom_mode = 0
        assert not tracker.is_dirty("custom_mode")

    def test_same_value_not_dirty(self, msg, tracker):
        """Test that assigning an equal value does not mark dirty."""
        msg.custom_mode = 0
        assert not tracker.is_dirty()

    def test_dirty_fields_in_declaration_order(self, msg, tracker):
        """Test the order of dirty field names."""
        msg.system_status = MavState.ACTIVE
        msg.type = 2
        assert tracker.dirty_fields == ["type", "system_status"]

    def test_field_callback(self, msg, tracker):
        """Test per-field callbacks."""
        seen = []
        tracker.on_change(lambda name, old, new: seen.append((name, old, new)), "custom_mode")
        msg.type = 2
        msg.custom_mode = 4
        assert seen == [("custom_mode", 0, 4)]

    def test_any_field_callback(self, msg, tracker):
        """Test callbacks for every field."""
        seen = []
        tracker.on_change(lambda name, old, new: seen.append(name))
        msg.type = 2
        msg.custom_mode = 4
        assert seen == ["type", "custom_mode"]

    def test_unknown_field_callback(self, tracker):
        """Test that callbacks on unknown fields are rejected."""
        with pytest.raises(KeyError):
            tracker.on_change(lambda name, old, new: None, "nope")

    def test_callback_error_isolated(self, msg, tracker):
        """Test that a failing callback does not stop the others."""
        seen = []

        def bad_callback(name, old, new):
            raise RuntimeError("boom")

        tracker.on_change(bad_callback, "custom_mode")
        tracker.on_change(lambda name, old, new: seen.append(name))
        msg.custom_mode = 4
        assert seen == ["custom_mode"]
        assert tracker.is_dirty("custom_mode")

    def test_reset(self, msg, tracker):
        """Test that reset accepts current values as the baseline."""
        msg.custom_mode = 4
        tracker.reset()
        assert not tracker.is_dirty()
        msg.custom_mode = 0
        assert tracker.changes() == {"custom_mode": (4, 0)}

    def test_revert(self, msg, tracker):
        """Test that revert restores original values silently."""
        seen = []
        msg.custom_mode = 4
        msg.system_status = MavState.ACTIVE
        tracker.on_change(lambda name, old, new: seen.append(name))
        tracker.revert()
        assert msg.custom_mode == 0
        assert msg.system_status == MavState.UNINIT
        assert not tracker.is_dirty()
        assert seen == []

    def test_detach(self, msg, tracker):
        """Test that a detached tracker stops observing."""
        msg.custom_mode = 4
        tracker.detach()
        assert not tracker.attached
        msg.type = 2
        assert tracker.dirty_fields == ["custom_mode"]
        tracker.detach()

    def test_decode_marks_changed_fields(self, msg, tracker):
        """Test that decoding into a tracked record marks what changed."""
        msg.decode(PayloadReader(bytes.fromhex("000000000203510403")))
        assert tracker.dirty_fields == ["type", "autopilot", "base_mode", "system_status"]

    def test_array_fields(self):
        """Test tracking of array-valued fields."""
        msg = AttitudeQuaternionCov()
        tracker = ChangeTracker(msg)
        msg.q = [1.0, 0.0, 0.0, 0.0]
        assert tracker.changes() == {"q": ([0.0, 0.0, 0.0, 0.0], [1.0, 0.0, 0.0, 0.0])}
        msg.q = [0.0, 0.0, 0.0, 0.0]
        assert not tracker.is_dirty()

    def test_two_trackers(self, msg):
        """Test that several trackers observe independently."""
        first = ChangeTracker(msg)
        msg.custom_mode = 4
        second = ChangeTracker(msg)
        msg.type = 2
        assert first.dirty_fields == ["type", "custom_mode"]
        assert second.dirty_fields == ["type"]

class TestCopiedMessages:
    """Test that copies of a tracked message are independent."""

    @pytest.fixture
    def msg(self):
        """Create a HEARTBEAT with a non-default value."""
        return Heartbeat(custom_mode=3)

    def test_shallow_copy_not_tracked(self, msg):
        """Test that editing a shallow copy leaves the tracker clean."""
        tracker = ChangeTracker(msg)
        clone = copy.copy(msg)
        clone.custom_mode = 7
        assert not tracker.is_dirty()
        assert msg.custom_mode == 3
        assert clone == Heartbeat(custom_mode=7)

    def test_deep_copy_not_tracked(self, msg):
        """Test that editing a deep copy leaves the tracker clean."""
        tracker = ChangeTracker(msg)
        clone = copy.deepcopy(msg)
        clone.custom_mode = 7
        assert not tracker.is_dirty()
        assert clone.custom_mode == 7

    def test_copy_can_be_tracked(self, msg):
        """Test that a copy accepts its own tracker."""
        original = ChangeTracker(msg)
        clone = copy.copy(msg)
        clone_tracker = ChangeTracker(clone)
        clone.custom_mode = 7
        assert clone_tracker.changes() == {"custom_mode": (3, 7)}
        assert not original.is_dirty()

    def test_deep_copy_arrays_independent(self):
        """Test that a deep copy does not share array values."""
        msg = AttitudeQuaternionCov(q=[1.0, 0.0, 0.0, 0.0])
        clone = copy.deepcopy(msg)
        clone.q[0] = 0.5
        assert msg.q[0] == 1.0

    def test_pickle_drops_listeners(self, msg):
        """Test that pickled messages come back without listeners."""
        tracker = ChangeTracker(msg)
        clone = pickle.loads(pickle.dumps(msg))
        clone.custom_mode = 7
        assert clone == Heartbeat(custom_mode=7)
        assert not tracker.is_dirty()



if __name__ == "__main__":
    pytest.main([__file__, "-v"])
