from __future__ import annotations
from typing import List, Optional, Tuple
from .timeline import NoteEvent, NUM_PITCHES

class NoteTracker:
    """
    Onset-Tabelle eines Tracks: pro Pitch entweder None oder (onset_seconds, velocity).
    Gepaart wird nur über den Pitch, der Kanal spielt keine Rolle.
    """

    def __init__(self, track_index: int):
        self.track_index = track_index
        self._slots: List[Optional[Tuple[float, int]]] = [None] * NUM_PITCHES

    @property
    def armed(self) -> int:
        return sum(1 for s in self._slots if s is not None)

    def arm(self, pitch: int, seconds: float, velocity: int) -> None:
        # ein bereits laufender Onset wird ohne Ausgabe überschrieben
        self._slots[pitch] = (seconds, velocity)

    def release(self, pitch: int, seconds: float) -> Optional[NoteEvent]:
        slot = self._slots[pitch]
        if slot is None:
            return None
        self._slots[pitch] = None
        onset, velocity = slot
        return NoteEvent(
            onset_seconds=onset,
            offset_seconds=seconds,
            track_index=self.track_index,
            pitch=pitch,
            velocity=velocity,
        )

    def at_end_of_track(self) -> int:
        """Hängende Onsets verwerfen; liefert deren Anzahl."""
        dropped = self.armed
        self._slots = [None] * NUM_PITCHES
        return dropped
