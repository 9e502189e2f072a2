from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .dictionary import ENGLISH
from .errors import InvariantError
from .spans import SEPARATOR, WordSpans

log = logging.getLogger("shelltyper.target")

MODES = ["words", "time"]

# Generous ceiling so a timed passage never runs out before the timer does.
MAX_WPM = 300


@dataclass(frozen=True)
class TestConfig:
    """How long a test is: ``amount`` words, or ``amount`` seconds."""

    __test__ = False

    mode: str = "words"
    amount: int = 30

    def __post_init__(self) -> None:
        if self.mode not in MODES:
            raise InvariantError(f"unknown test mode {self.mode!r}")
        if self.amount < 0:
            raise InvariantError(f"test length must not be negative, got {self.amount}")

    @classmethod
    def words(cls, count: int) -> "TestConfig":
        return cls("words", count)

    @classmethod
    def time(cls, seconds: int) -> "TestConfig":
        return cls("time", seconds)

    @property
    def is_timed(self) -> bool:
        return self.mode == "time"

    @property
    def word_count(self) -> int:
        """Number of words to put in the passage."""
        if self.is_timed:
            return math.ceil(self.amount * MAX_WPM / 60)
        return self.amount

    def describe(self) -> str:
        return f"{self.amount}s" if self.is_timed else f"{self.amount} words"


@dataclass(frozen=True)
class TargetPassage:
    text: str
    spans: WordSpans = field(repr=False)

    @classmethod
    def from_text(cls, text: str) -> "TargetPassage":
        return cls(text, WordSpans.scan(text))

    def __len__(self) -> int:
        return len(self.text)

    @property
    def word_count(self) -> int:
        return len(self.spans)

    def words(self) -> List[str]:
        return self.spans.slice(self.text)


def generate_target(
    config: TestConfig,
    words: Sequence[str] = ENGLISH,
    rng: Optional[random.Random] = None,
) -> TargetPassage:
    if not words:
        raise InvariantError("dictionary is empty")
    bad = [w for w in words if not w or SEPARATOR in w]
    if bad:
        raise InvariantError(f"dictionary words must be non-empty and unspaced: {bad[:3]!r}")
    rng = rng or random.Random()
    count = config.word_count
    text = SEPARATOR.join(rng.choices(words, k=count))
    passage = TargetPassage.from_text(text)
    log.debug("generated %d-word passage for %s", passage.word_count, config.describe())
    return passage
