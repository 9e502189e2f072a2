from __future__ import annotations

import enum
from typing import List, NamedTuple, Sequence

from .differ import WordDiff
from .errors import InvariantError
from .spans import SEPARATOR


class SpanTag(enum.Enum):
    CORRECT = "correct"
    WRONG = "wrong"
    PENDING = "pending"
    GAP = "gap"


class Span(NamedTuple):
    text: str
    tag: SpanTag


def _word_spans(diff: WordDiff) -> List[Span]:
    parts = (
        (diff.correct, SpanTag.CORRECT),
        (diff.wrong, SpanTag.WRONG),
        (diff.pending, SpanTag.PENDING),
    )
    return [Span(text, tag) for text, tag in parts if text]


def layout_rows(diffs: Sequence[WordDiff], width: int) -> List[List[Span]]:
    """Greedily pack classified words into rows at most ``width`` cells wide.

    A word is never split across rows. Words that do not already carry their
    separator get a one-cell GAP span after them, except the last word. A
    word's length counts every span emitted for it, separator included. A
    word wider than the whole row is placed alone rather than after an empty
    row.
    """
    if width <= 0:
        raise InvariantError(f"layout width must be positive, got {width}")
    rows: List[List[Span]] = [[]]
    line_len = 0
    last = len(diffs) - 1
    for n, diff in enumerate(diffs):
        spans = _word_spans(diff)
        text = "".join(s.text for s in spans)
        if n != last and not text.endswith(SEPARATOR):
            spans.append(Span(SEPARATOR, SpanTag.GAP))
        word_len = sum(len(s.text) for s in spans)
        if line_len and line_len + word_len > width:
            rows.append([])
            line_len = 0
        rows[-1].extend(spans)
        line_len += word_len
    return rows
