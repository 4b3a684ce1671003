# src/smfnotes/track.py
from __future__ import annotations
from typing import Callable, Optional
import mido
from .errors import BadMagic, UnsupportedSmpteOffset
from .notes import NoteTracker
from .reader import ByteReader
from .timeline import NoteEvent, TimeBase, TrackState
from .util import log

TRACK_MAGIC = b"MTrk"

META = 0xFF
SYSEX = 0xF0
SYSEX_ESCAPE = 0xF7

META_END_OF_TRACK = 0x2F
META_TEMPO = 0x51
META_SMPTE_OFFSET = 0x54

NOTE_OFF = 0x8
NOTE_ON = 0x9
PROGRAM_CHANGE = 0xC
CHANNEL_PRESSURE = 0xD

class TrackDecoder:
    """
    Dekodiert genau einen MTrk-Chunk. Die TimeBase wird geteilt und bei
    Tempo-Metaevents verändert; fertige Noten gehen an `emit`.
    """

    def __init__(
        self,
        reader: ByteReader,
        time_base: TimeBase,
        index: int,
        emit: Optional[Callable[[NoteEvent], None]] = None,
    ):
        self.reader = reader
        self.time_base = time_base
        self.emit = emit
        self.state = TrackState(index=index, notes=NoteTracker(index))

    def decode(self) -> TrackState:
        r = self.reader
        magic = r.read(4)
        if magic != TRACK_MAGIC:
            raise BadMagic(TRACK_MAGIC, magic)
        r.skip(4)  # track size, Ende kommt über End-of-Track

        while True:
            delta = r.read_varlen()
            self.state.accumulated_seconds += self.time_base.seconds(delta)

            p1 = r.read_u8()
            if p1 & 0x80:
                if p1 == META:
                    self.state.running_status = None
                    if self._meta_event():
                        break
                    continue
                if p1 in (SYSEX, SYSEX_ESCAPE):
                    self.state.running_status = None
                    r.skip(r.read_varlen())
                    continue
                if p1 > 0xEF:
                    # system common / realtime: keine Daten in SMF
                    self.state.running_status = None
                    continue
                self.state.running_status = p1
                p1 = r.read_u8()
            elif self.state.running_status is None:
                # Datenbyte ohne Status: verwerfen
                continue

            self._channel_event(self.state.running_status, p1)

        dropped = self.state.notes.at_end_of_track()
        if dropped:
            log.info("track", f"track {self.state.index}: {dropped} note(s) without release dropped")
        return self.state

    def _meta_event(self) -> bool:
        """Liefert True bei End-of-Track."""
        r = self.reader
        kind = r.read_u8()
        length = r.read_varlen()

        if kind == META_END_OF_TRACK:
            return True
        if kind == META_TEMPO:
            # immer 3 Bytes, unabhängig von `length`
            tempo = r.read_fixed(3)
            if self.time_base.set_tempo(tempo):
                log.info("track", f"track {self.state.index}: tempo {mido.tempo2bpm(tempo):g} bpm "
                                  f"at {self.state.accumulated_seconds:.3f}s")
            return False
        if kind == META_SMPTE_OFFSET:
            r.skip(length)
            raise UnsupportedSmpteOffset()
        r.skip(length)
        return False

    def _channel_event(self, status: int, p1: int) -> None:
        kind = (status >> 4) & 0xF
        p1 &= 0x7F
        p2 = 0
        if kind not in (PROGRAM_CHANGE, CHANNEL_PRESSURE):
            p2 = self.reader.read_u8() & 0x7F

        notes = self.state.notes
        if kind == NOTE_ON and p2 != 0:
            notes.arm(p1, self.state.accumulated_seconds, p2)
        elif kind in (NOTE_ON, NOTE_OFF):
            ev = notes.release(p1, self.state.accumulated_seconds)
            if ev is not None and self.emit is not None:
                self.emit(ev)
