from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

from .errors import InvariantError

SEPARATOR = " "


class WordSpans:
    """Word boundaries of a text as cumulative exclusive end offsets.

    Word ``n`` covers ``[ends[n - 1], ends[n])`` (the first word starts at 0).
    A word's range includes its trailing separator when it has one.
    """

    __slots__ = ("_ends", "_length")

    def __init__(self, ends: Sequence[int], length: int, strict: bool = False) -> None:
        ends = tuple(ends)
        prev = 0
        for end in ends:
            if end < prev or (strict and end == prev):
                raise InvariantError(f"word offsets out of order: {list(ends)}")
            prev = end
        if prev > length:
            raise InvariantError(f"word offset {prev} past end of text ({length})")
        self._ends = ends
        self._length = length

    @classmethod
    def scan(cls, text: str, separator: str = SEPARATOR) -> "WordSpans":
        """Split ``text`` after every separator; the last word ends at ``len(text)``."""
        if not text:
            return cls((), 0, strict=True)
        ends = [i + 1 for i, ch in enumerate(text) if ch == separator]
        if not ends or ends[-1] != len(text):
            ends.append(len(text))
        return cls(ends, len(text), strict=True)

    @property
    def ends(self) -> Tuple[int, ...]:
        return self._ends

    def __len__(self) -> int:
        return len(self._ends)

    def __iter__(self) -> Iterator[range]:
        return iter(self.ranges())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordSpans):
            return NotImplemented
        return self._ends == other._ends and self._length == other._length

    def __repr__(self) -> str:
        return f"WordSpans({list(self._ends)}, length={self._length})"

    def ranges(self) -> List[range]:
        out: List[range] = []
        start = 0
        for end in self._ends:
            out.append(range(start, end))
            start = end
        return out

    def slice(self, text: str) -> List[str]:
        """Cut ``text`` into its words (separators kept)."""
        if len(text) != self._length:
            raise InvariantError(
                f"text length {len(text)} does not match spans ({self._length})"
            )
        return [text[r.start:r.stop] for r in self.ranges()]


def strip_separator(word: str, separator: str = SEPARATOR) -> str:
    if word.endswith(separator):
        return word[: -len(separator)]
    return word
