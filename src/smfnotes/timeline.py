from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .notes import NoteTracker

DEFAULT_BPM = 120.0
NUM_PITCHES = 128

class Division(Enum):
    METRICAL = "metrical"   # ticks per quarter
    SMPTE = "smpte"         # ticks per frame

@dataclass
class TimeBase:
    ticks_per_unit: float
    units_per_second: float
    mode: Division = Division.METRICAL
    tempo_override: Optional[float] = None   # quarters per second

    def seconds(self, delta_ticks: int) -> float:
        return delta_ticks / (self.units_per_second * self.ticks_per_unit)

    def set_tempo(self, us_per_quarter: int) -> bool:
        """
        Tempo-Metaevent anwenden, auch bei SMPTE-Division. Bei gesetztem
        Override bleibt die Zeitbasis unverändert; Rückgabe: ob sich etwas geändert hat.
        """
        if self.tempo_override is not None:
            return False
        if us_per_quarter <= 0:
            # μ == 0 würde units_per_second unendlich machen
            return False
        self.units_per_second = 1_000_000 / us_per_quarter
        return True

@dataclass(frozen=True)
class NoteEvent:
    onset_seconds: float
    offset_seconds: float
    track_index: int
    pitch: int
    velocity: int

@dataclass
class TrackState:
    index: int
    notes: "NoteTracker"
    accumulated_seconds: float = 0.0
    running_status: Optional[int] = None    # None = unset

@dataclass
class DecodeSummary:
    num_tracks: int
    time_base: TimeBase
    emitted: int = 0
    suppressed: int = 0
