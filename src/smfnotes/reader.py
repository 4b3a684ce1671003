# src/smfnotes/reader.py
from __future__ import annotations
from typing import BinaryIO
from .errors import SourceError, UnexpectedEof

class ByteReader:
    """
    Sequenzieller Leser über einer binären Quelle (Datei, BytesIO, Pipe).
    Kennt die beiden SMF-Integer-Codecs: feste Breite big-endian und VLQ.
    """

    def __init__(self, source: BinaryIO):
        self._source = source
        self.position = 0

    def read(self, n: int) -> bytes:
        if n < 0:
            raise ValueError(f"negative read length: {n}")
        chunks = []
        remaining = n
        # read() darf bei Pipes/Sockets weniger liefern als angefragt
        while remaining > 0:
            try:
                chunk = self._source.read(remaining)
            except OSError as exc:
                raise SourceError(f"read failed at offset {self.position}: {exc}") from exc
            if not chunk:
                raise UnexpectedEof(
                    f"unexpected end of input at offset {self.position + n - remaining} "
                    f"({remaining} of {n} bytes missing)"
                )
            chunks.append(chunk)
            remaining -= len(chunk)
        self.position += n
        return b"".join(chunks)

    def read_u8(self) -> int:
        return self.read(1)[0]

    def skip(self, n: int) -> None:
        self.read(n)

    def read_fixed(self, n: int) -> int:
        if not 1 <= n <= 4:
            raise ValueError(f"fixed-width field must be 1..4 bytes, got {n}")
        return int.from_bytes(self.read(n), "big")

    def read_varlen(self) -> int:
        value = 0
        while True:
            byte = self.read_u8()
            value = (value << 7) | (byte & 0x7F)
            if not byte & 0x80:
                return value
