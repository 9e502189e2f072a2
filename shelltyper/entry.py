from __future__ import annotations

from typing import List

from .spans import SEPARATOR, WordSpans


class EnteredText:
    """What the user has typed so far, split into words as they type.

    ``word_limit`` is the number of words in the target passage; the tracker
    never opens more words than that.
    """

    def __init__(self, word_limit: int) -> None:
        self.word_limit = word_limit
        self._chars: List[str] = []
        # one open (empty) word to type into, unless there is nothing to type
        self._ends: List[int] = [0] if word_limit > 0 else []

    def __len__(self) -> int:
        return len(self._chars)

    @property
    def text(self) -> str:
        return "".join(self._chars)

    @property
    def spans(self) -> WordSpans:
        return WordSpans(self._ends, len(self._chars))

    def words(self) -> List[str]:
        return self.spans.slice(self.text)

    def committed_words(self) -> List[str]:
        """Words whose trailing separator has been typed."""
        return [w for w in self.words() if w.endswith(SEPARATOR)]

    @property
    def current_word(self) -> str:
        if not self._ends:
            return ""
        start = self._ends[-2] if len(self._ends) > 1 else 0
        return "".join(self._chars[start:self._ends[-1]])

    def append_char(self, c: str) -> bool:
        if not self._ends or c == SEPARATOR:
            return False
        self._chars.append(c)
        self._ends[-1] = len(self._chars)
        return True

    def commit_word_break(self) -> bool:
        """Close the current word. Returns True when that was the last word."""
        if not self._ends or (self._chars and self._chars[-1] == SEPARATOR):
            return False
        self._chars.append(SEPARATOR)
        self._ends[-1] = len(self._chars)
        if len(self._ends) == self.word_limit:
            return True
        self._ends.append(self._ends[-1])
        return False

    def delete_last_char(self) -> bool:
        if not self._chars:
            return False
        c = self._chars.pop()
        if c == SEPARATOR:
            # words are only editable inside their own span
            self._chars.append(c)
            return False
        self._ends[-1] -= 1
        return True
