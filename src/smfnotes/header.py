# src/smfnotes/header.py
from __future__ import annotations
from typing import Optional, Tuple
from .errors import BadMagic, InvalidTimeDivision
from .reader import ByteReader
from .timeline import TimeBase, Division, DEFAULT_BPM
from .util import log

HEADER_MAGIC = b"MThd"

# SMPTE-Framerate 29 steht für 29.97 (drop frame)
DROP_FRAME_FPS = 29.97

def bpm_to_qps(bpm: float) -> float:
    return abs(float(bpm)) / 60.0

def read_header(
    reader: ByteReader,
    tempo_override: Optional[float] = None,
    default_bpm: float = DEFAULT_BPM,
) -> Tuple[int, TimeBase]:
    """
    MThd lesen. tempo_override ist in BPM (None = Tempo-Metaevents gelten).
    Liefert (num_tracks, TimeBase).
    """
    magic = reader.read(4)
    if magic != HEADER_MAGIC:
        raise BadMagic(HEADER_MAGIC, magic)

    reader.skip(4)  # chunk size
    reader.skip(2)  # format, wird nicht ausgewertet
    num_tracks = reader.read_fixed(2)
    division = reader.read_fixed(2)

    override_qps = bpm_to_qps(tempo_override) if tempo_override is not None else None

    if division & 0x8000:
        # High-Byte = negative Framerate im Zweierkomplement
        fps = 256 - (division >> 8)
        ticks_per_frame = division & 0xFF
        if ticks_per_frame == 0:
            raise InvalidTimeDivision(f"SMPTE division 0x{division:04X} has zero ticks per frame")
        tb = TimeBase(
            ticks_per_unit=ticks_per_frame,
            units_per_second=DROP_FRAME_FPS if fps == 29 else float(fps),
            mode=Division.SMPTE,
            tempo_override=override_qps,
        )
        log.info("header", f"tracks={num_tracks} smpte fps={tb.units_per_second} ticks/frame={ticks_per_frame}")
    else:
        ticks_per_quarter = division & 0x7FFF
        if ticks_per_quarter == 0:
            raise InvalidTimeDivision("metrical division has zero ticks per quarter")
        qps = override_qps if override_qps is not None else bpm_to_qps(default_bpm)
        if qps <= 0:
            raise InvalidTimeDivision(f"tempo must be positive, got {qps * 60:g} bpm")
        tb = TimeBase(
            ticks_per_unit=ticks_per_quarter,
            units_per_second=qps,
            mode=Division.METRICAL,
            tempo_override=override_qps,
        )
        log.info("header", f"tracks={num_tracks} ticks/quarter={ticks_per_quarter} qps={qps:g}")

    return num_tracks, tb
