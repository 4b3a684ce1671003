from __future__ import annotations
import sys
from typing import Callable, Optional, TextIO
from .timeline import NoteEvent
from .util.time import format_time

COLUMNS = ("onset", "offset", "track", "pitch", "velocity")

def format_note(ev: NoteEvent, sep: str = "\t") -> str:
    return sep.join((
        format_time(ev.onset_seconds),
        format_time(ev.offset_seconds),
        str(ev.track_index),
        str(ev.pitch),
        str(ev.velocity),
    ))

def line_writer(out: Optional[TextIO] = None, sep: str = "\t", header: bool = False) -> Callable[[NoteEvent], None]:
    """
    Sink für decode_notes(): eine Zeile pro Note.
    Mit header=True wird vorab eine Spaltenzeile geschrieben.
    """
    out = out if out is not None else sys.stdout
    if header:
        out.write(sep.join(COLUMNS) + "\n")

    def write(ev: NoteEvent) -> None:
        out.write(format_note(ev, sep) + "\n")

    return write
