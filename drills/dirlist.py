"""Iterating over the names in a directory, including "." and ".."."""

from __future__ import annotations

import os
import sys
from typing import Iterator, Sequence


class DirectoryError(OSError):
    """Raised when a directory cannot be opened."""


class DirectoryIterator:
    """Yield every entry name of a directory, "." and ".." included.

    The directory handle is released when iteration ends, when ``close()``
    is called, or when a ``with`` block around the iterator is left.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.fsdecode(path)
        if "\0" in self.path:
            raise DirectoryError(f"Invalid path: nul byte found in {self.path!r}")
        try:
            self._scan = os.scandir(self.path)
        except OSError as error:
            raise DirectoryError(f"Could not open {self.path!r}") from error
        self._pending = [".", ".."]
        self._closed = False

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if self._closed:
            raise StopIteration
        if self._pending:
            return self._pending.pop(0)
        try:
            return next(self._scan).name
        except StopIteration:
            self.close()
            raise

    def close(self) -> None:
        """Release the directory handle; further iteration yields nothing."""
        if not self._closed:
            self._closed = True
            self._pending.clear()
            self._scan.close()

    def __enter__(self) -> DirectoryIterator:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def __del__(self) -> None:
        scan = getattr(self, "_scan", None)
        if scan is not None:
            scan.close()


def main(argv: Sequence[str] | None = None) -> int:
    """List the entries of a directory, the current one by default."""
    args = list(sys.argv[1:] if argv is None else argv)
    path = args[0] if args else "."
    try:
        with DirectoryIterator(path) as entries:
            names = list(entries)
    except DirectoryError as error:
        print(error, file=sys.stderr)
        return 1
    print(f"files: {names!r}")
    return 0


if __name__ == "__main__":
    sys.exit(main())