from __future__ import annotations
import io
import pytest

from smfnotes.timeline import NoteEvent
from smfnotes.util.time import format_time, seconds_to_millis
from smfnotes.write import format_note, line_writer


@pytest.mark.parametrize("seconds, text", [
    (0.0, "00:00:00.000"),
    (1.0, "00:00:01.000"),
    (0.0006, "00:00:00.001"),
    (0.0004, "00:00:00.000"),
    (61.25, "00:01:01.250"),
    (3600 + 59 * 60 + 59.9994, "01:59:59.999"),
    (3600 + 59 * 60 + 59.9996, "02:00:00.000"),
    (100 * 3600.0, "100:00:00.000"),
])
def test_format_time(seconds, text):
    assert format_time(seconds) == text


def test_seconds_to_millis():
    assert seconds_to_millis(0.0126) == 13
    assert seconds_to_millis(2.5) == 2500


def test_format_note():
    ev = NoteEvent(0.0, 1.0, 0, 60, 100)
    assert format_note(ev) == "00:00:00.000\t00:00:01.000\t0\t60\t100"
    assert format_note(ev, sep=";") == "00:00:00.000;00:00:01.000;0;60;100"


def test_line_writer_with_header():
    out = io.StringIO()
    sink = line_writer(out, header=True)
    sink(NoteEvent(0.5, 1.5, 1, 62, 64))
    assert out.getvalue() == "onset\toffset\ttrack\tpitch\tvelocity\n00:00:00.500\t00:00:01.500\t1\t62\t64\n"
