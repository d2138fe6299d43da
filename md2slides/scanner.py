"""Byte cursor with lookahead and one level of backtracking."""

from __future__ import annotations

from typing import Callable, Optional, TypeVar

from .models import ScanError

T = TypeVar("T")


class Scanner:
    """Cursor over a fixed byte buffer.

    Only one mark is kept: ``save()`` overwrites any earlier mark.  The line
    grammar never nests trial parses, so a single slot is enough.
    """

    def __init__(self, data: bytes) -> None:
        self.data = data
        self.cursor = 0
        self.saved_cursor = 0

    def at_end(self) -> bool:
        return self.cursor >= len(self.data)

    def peek(self) -> Optional[int]:
        """Return the byte under the cursor, or ``None`` at end of input."""
        if self.cursor < len(self.data):
            return self.data[self.cursor]
        return None

    def advance(self) -> None:
        if self.cursor >= len(self.data):
            raise ScanError(f"advance() past end of input at offset {self.cursor}")
        self.cursor += 1

    def take_while(self, predicate: Callable[[int], bool]) -> bool:
        """Consume the longest run of bytes matching *predicate*.

        Returns ``True`` if at least one byte was consumed.  A zero-length
        match leaves the cursor where it was; deciding whether that is a
        failure is up to the caller.
        """
        start = self.cursor
        end = len(self.data)
        while self.cursor < end and predicate(self.data[self.cursor]):
            self.cursor += 1
        return self.cursor > start

    def save(self) -> None:
        self.saved_cursor = self.cursor

    def restore(self) -> None:
        self.cursor = self.saved_cursor

    def attempt(self, rule: Callable[[Scanner], Optional[T]]) -> Optional[T]:
        """Run *rule* speculatively.

        The cursor advance is kept only when *rule* returns a result; on
        ``None`` the scanner is rewound to where the attempt began.
        """
        self.save()
        result = rule(self)
        if result is None:
            self.restore()
        return result
