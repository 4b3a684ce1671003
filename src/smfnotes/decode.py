from __future__ import annotations
from pathlib import Path
from typing import BinaryIO, Callable, List, Optional, Union
from .header import read_header
from .reader import ByteReader
from .timeline import DecodeSummary, NoteEvent, DEFAULT_BPM
from .track import TrackDecoder
from .util import log

def decode_notes(
    source: BinaryIO,
    sink: Callable[[NoteEvent], None],
    *,
    tempo_bpm: Optional[float] = None,
    track: Optional[int] = None,
    default_bpm: float = DEFAULT_BPM,
) -> DecodeSummary:
    """
    Dekodiert eine komplette SMF-Datei aus `source` und reicht jede
    fertige Note an `sink`.

    - tempo_bpm: fester Tempo-Override in BPM; Tempo-Metaevents werden dann ignoriert.
    - track: nur Noten dieses Tracks (0-basiert) ausgeben. Geparst wird trotzdem alles.
    - default_bpm: Starttempo ohne Override, bis ein Tempo-Metaevent kommt.
    """
    reader = ByteReader(source)
    num_tracks, time_base = read_header(reader, tempo_override=tempo_bpm, default_bpm=default_bpm)
    summary = DecodeSummary(num_tracks=num_tracks, time_base=time_base)

    def emit(ev: NoteEvent) -> None:
        if track is not None and ev.track_index != track:
            summary.suppressed += 1
            return
        summary.emitted += 1
        sink(ev)

    # Tracks strikt nacheinander; die TimeBase läuft über Trackgrenzen weiter
    for i in range(num_tracks):
        state = TrackDecoder(reader, time_base, i, emit).decode()
        log.info("track", f"track {i}: end at {state.accumulated_seconds:.3f}s")

    if track is not None and track >= num_tracks:
        log.info("decode", f"track filter {track} is out of range (file has {num_tracks} tracks)")
    return summary

def read_notes(
    path: Union[str, Path],
    *,
    tempo_bpm: Optional[float] = None,
    track: Optional[int] = None,
    default_bpm: float = DEFAULT_BPM,
) -> List[NoteEvent]:
    notes: List[NoteEvent] = []
    with open(path, "rb") as f:
        decode_notes(f, notes.append, tempo_bpm=tempo_bpm, track=track, default_bpm=default_bpm)
    return notes
