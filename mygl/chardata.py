"""Text held in memory and split into lines that keep their newlines."""

from __future__ import annotations

from typing import Iterator, List, Optional


class CharStream:
    """Splits text into lines; each line keeps its trailing newline."""

    def __init__(self, data: str, size: Optional[int] = None) -> None:
        if size is not None:
            if size < 0:
                raise ValueError(f"size must not be negative, got {size}")
            data = data[:size]
        self.data = data
        pieces = data.split("\n")
        self._lines: List[str] = [piece + "\n" for piece in pieces[:-1]]
        if pieces[-1]:
            self._lines.append(pieces[-1])

    def line_count(self) -> int:
        """Number of lines in the text."""
        return len(self._lines)

    def get_line(self, no: int) -> str:
        """Line ``no`` with its newline, or an empty string when out of range."""
        if not 0 <= no < len(self._lines):
            return ""
        return self._lines[no]

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)