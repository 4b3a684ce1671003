from __future__ import annotations

from smfnotes.notes import NoteTracker
from smfnotes.timeline import NoteEvent


def test_release_after_arm():
    t = NoteTracker(3)
    t.arm(60, 1.0, 90)
    assert t.armed == 1
    assert t.release(60, 2.5) == NoteEvent(1.0, 2.5, 3, 60, 90)
    assert t.armed == 0
    assert t.release(60, 3.0) is None


def test_release_unarmed_is_ignored():
    assert NoteTracker(0).release(61, 1.0) is None


def test_double_arm_overwrites():
    t = NoteTracker(0)
    t.arm(64, 0.0, 50)
    t.arm(64, 1.0, 70)
    ev = t.release(64, 2.0)
    assert (ev.onset_seconds, ev.velocity) == (1.0, 70)
    assert t.release(64, 3.0) is None


def test_end_of_track_drops_dangling():
    t = NoteTracker(0)
    t.arm(0, 0.0, 1)
    t.arm(127, 0.5, 127)
    assert t.at_end_of_track() == 2
    assert t.armed == 0
    assert t.release(127, 1.0) is None
