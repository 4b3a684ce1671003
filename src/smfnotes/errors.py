# src/smfnotes/errors.py
from __future__ import annotations


class SmfError(Exception):
    """Basisklasse für alle Decoder-Fehler."""


class BadMagic(SmfError):
    def __init__(self, expected: bytes, found: bytes):
        self.expected = expected
        self.found = found
        super().__init__(f"bad chunk magic: expected {expected!r}, found {found!r}")


class UnexpectedEof(SmfError):
    pass


class UnsupportedSmpteOffset(SmfError):
    def __init__(self):
        super().__init__("SMPTE time offset is not supported")


class InvalidTimeDivision(SmfError):
    pass


class SourceError(SmfError):
    """I/O-Fehler der Bytequelle (Original-Exception hängt an __cause__)."""
