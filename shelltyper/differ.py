from __future__ import annotations

from itertools import zip_longest
from typing import List, NamedTuple, Sequence

from .errors import InvariantError
from .spans import strip_separator


class WordDiff(NamedTuple):
    """How one typed word lines up against its target word.

    correct: typed prefix that matches the target
    wrong:   typed characters after the first mismatch (or past the target)
    pending: target characters not yet matched
    """

    correct: str
    wrong: str
    pending: str

    @property
    def is_clean(self) -> bool:
        return not self.wrong and not self.pending


def _first_mismatch(target: str, entered: str) -> int:
    for i, (t, e) in enumerate(zip(target, entered)):
        if t != e:
            return i
    return -1


def classify(target: str, entered: str) -> WordDiff:
    i = _first_mismatch(target, entered)
    if i >= 0:
        return WordDiff(
            strip_separator(entered[:i]),
            strip_separator(entered[i:]),
            target[i:],
        )
    if len(entered) <= len(target):
        return WordDiff(strip_separator(entered), "", target[len(entered):])
    # over-typed: everything past the target is wrong
    return WordDiff(target, strip_separator(entered[len(target):]), "")


def diff_words(target_words: Sequence[str], entered_words: Sequence[str]) -> List[WordDiff]:
    """Classify every target word; untyped words are paired with ``""``."""
    if len(entered_words) > len(target_words):
        raise InvariantError(
            f"{len(entered_words)} entered words for {len(target_words)} target words"
        )
    return [classify(t, e) for t, e in zip_longest(target_words, entered_words, fillvalue="")]
