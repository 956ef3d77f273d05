"""A readable stream that applies a rotation cipher to ASCII letters."""

from __future__ import annotations

import io
import string
from typing import BinaryIO, Sequence


def _table(rot: int) -> bytes:
    lower = string.ascii_lowercase.encode()
    upper = string.ascii_uppercase.encode()
    shift = rot % 26
    table = bytearray(range(256))
    for alphabet in (lower, upper):
        rotated = alphabet[shift:] + alphabet[:shift]
        for plain, coded in zip(alphabet, rotated):
            table[plain] = coded
    return bytes(table)


class RotDecoder(io.RawIOBase):
    """Wrap a binary stream, rotating each ASCII letter by ``rot`` places."""

    def __init__(self, stream: BinaryIO, rot: int) -> None:
        super().__init__()
        self._stream = stream
        self.rot = rot
        self._table = _table(rot)

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        view = memoryview(buffer).cast("B")
        data = self._stream.read(len(view))
        if not data:
            return 0
        size = len(data)
        view[:size] = bytes(data).translate(self._table)
        return size


def main(argv: Sequence[str] | None = None) -> None:
    """Decode and print a short ROT13 message."""
    decoder = RotDecoder(io.BytesIO(b"Gb trg gb gur bgure fvqr!"), 13)
    print(decoder.readall().decode("utf-8"))


if __name__ == "__main__":
    main()