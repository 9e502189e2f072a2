from __future__ import annotations

from typing import List, NamedTuple, Optional, Sequence

from .spans import strip_separator
from .target import TestConfig

# Minimum wall-clock gap between two history samples, in seconds.
SAMPLE_INTERVAL = 0.1


class StatsSample(NamedTuple):
    progress: float
    value: float


# ---------------------------
# Typing math
# ---------------------------

def compute_wpm(words: int, elapsed_sec: float) -> float:
    if elapsed_sec <= 0:
        return 0.0
    return words / (elapsed_sec / 60.0)


def compute_accuracy(correct: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return correct * 100.0 / total


def count_correct(target_words: Sequence[str], committed_words: Sequence[str]):
    """Return (correct, total) over the pairs both sequences have.

    A word only counts as correct when it matches its target exactly; the
    per-character highlighting done by the differ is a separate notion.
    """
    correct = total = 0
    for target, entered in zip(target_words, committed_words):
        total += 1
        if strip_separator(target) == strip_separator(entered):
            correct += 1
    return correct, total


# ---------------------------
# Engine
# ---------------------------

class StatsEngine:
    """Live statistics for one running test, plus their history for graphs."""

    def __init__(self, config: TestConfig, target_word_count: int) -> None:
        self.config = config
        self.target_word_count = target_word_count
        self.accuracy_history: List[StatsSample] = []
        self.wpm_history: List[StatsSample] = []
        self.reset(None)

    def reset(self, now: Optional[float]) -> None:
        self.started_at = now
        self.last_sample_at = now
        self.elapsed = 0.0
        self.correct = 0
        self.total = 0
        self.wpm = 0.0
        self.accuracy = 0.0
        self.progress = 0.0
        self.accuracy_history.clear()
        self.wpm_history.clear()

    def _progress(self) -> float:
        if self.config.is_timed:
            if self.config.amount <= 0:
                return 100.0
            return self.elapsed * 100.0 / self.config.amount
        if self.target_word_count <= 0:
            return 0.0
        return self.total * 100.0 / self.target_word_count

    def update(
        self,
        now: float,
        target_words: Sequence[str],
        committed_words: Sequence[str],
    ) -> bool:
        """Recompute stats at ``now``. Returns True once progress reaches 100."""
        if self.started_at is None:
            self.reset(now)
        self.elapsed = max(0.0, now - self.started_at)
        self.correct, self.total = count_correct(target_words, committed_words)
        self.accuracy = compute_accuracy(self.correct, self.total)
        self.progress = self._progress()
        self.wpm = compute_wpm(self.correct, self.elapsed)

        if now - self.last_sample_at >= SAMPLE_INTERVAL:
            if self.accuracy > 0:
                self.accuracy_history.append(StatsSample(self.progress, self.accuracy))
            self.wpm_history.append(StatsSample(self.progress, self.wpm))
            self.last_sample_at = now

        return self.progress >= 100.0
