from __future__ import annotations

import enum
import logging
import random
import time
from typing import Callable, Dict, FrozenSet, List, Optional, Sequence

from .dictionary import ENGLISH
from .differ import WordDiff, diff_words
from .entry import EnteredText
from .errors import InvariantError
from .layout import Span, layout_rows
from .spans import SEPARATOR
from .stats import StatsEngine, StatsSample
from .target import TargetPassage, TestConfig, generate_target

log = logging.getLogger("shelltyper.session")


class TestState(enum.Enum):
    __test__ = False

    PRE = "pre"
    RUNNING = "running"
    POST = "post"


_TRANSITIONS: Dict[TestState, FrozenSet[TestState]] = {
    TestState.PRE: frozenset({TestState.PRE, TestState.RUNNING}),
    TestState.RUNNING: frozenset({TestState.PRE, TestState.POST}),
    TestState.POST: frozenset({TestState.PRE}),
}


class TypingSession:
    """One typing test: the passage, what has been typed, and the live stats.

    The event source calls ``on_tick`` periodically and the ``on_*`` key
    handlers for keystrokes; the renderer reads ``rows()`` and the stats
    accessors. Handlers return True when they changed anything.
    """

    def __init__(
        self,
        config: Optional[TestConfig] = None,
        words: Sequence[str] = ENGLISH,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._words = words
        self._rng = rng or random.Random()
        self._clock = clock
        self.state = TestState.PRE
        self.new_test(config or TestConfig())

    # ---------------------------
    # State machine
    # ---------------------------

    def _transition(self, new: TestState) -> None:
        if new not in _TRANSITIONS[self.state]:
            raise InvariantError(f"illegal transition {self.state.name} -> {new.name}")
        log.debug("test state %s -> %s", self.state.name, new.name)
        self.state = new

    def new_test(self, config: Optional[TestConfig] = None) -> None:
        if config is not None:
            self.config = config
        self._transition(TestState.PRE)
        self.target: TargetPassage = generate_target(self.config, self._words, self._rng)
        self._target_words = self.target.words()
        self.entered = EnteredText(self.target.word_count)
        self.stats = StatsEngine(self.config, self.target.word_count)

    def _start(self) -> None:
        self._transition(TestState.RUNNING)
        self.stats.reset(self._clock())

    def _finish(self, now: Optional[float] = None) -> None:
        self.stats.update(
            self._clock() if now is None else now,
            self._target_words,
            self.entered.committed_words(),
        )
        self._transition(TestState.POST)

    # ---------------------------
    # Events
    # ---------------------------

    def on_tick(self, now: Optional[float] = None) -> bool:
        if self.state is not TestState.RUNNING:
            return False
        now = self._clock() if now is None else now
        done = self.stats.update(now, self._target_words, self.entered.committed_words())
        if done:
            self._transition(TestState.POST)
        return True

    def on_char(self, c: str) -> bool:
        if c == SEPARATOR:
            return self.on_word_break()
        if self.state is TestState.POST:
            return False
        if not self.entered.append_char(c):
            return False
        if self.state is TestState.PRE:
            self._start()
        return True

    def on_word_break(self) -> bool:
        if self.state is not TestState.RUNNING:
            return False
        before = len(self.entered)
        last = self.entered.commit_word_break()
        if last:
            self._finish()
        return len(self.entered) != before

    def on_backspace(self) -> bool:
        if self.state is not TestState.RUNNING:
            return False
        return self.entered.delete_last_char()

    def on_abort(self) -> bool:
        self.new_test()
        return True

    def on_force_end(self) -> bool:
        if self.state is not TestState.RUNNING:
            return False
        self._finish()
        return True

    # ---------------------------
    # Read accessors
    # ---------------------------

    def word_diffs(self) -> List[WordDiff]:
        return diff_words(self._target_words, self.entered.words())

    def rows(self, width: int) -> List[List[Span]]:
        return layout_rows(self.word_diffs(), width)

    @property
    def wpm(self) -> float:
        return self.stats.wpm

    @property
    def accuracy(self) -> float:
        return self.stats.accuracy

    @property
    def progress(self) -> float:
        return self.stats.progress

    @property
    def elapsed(self) -> float:
        return self.stats.elapsed

    @property
    def correct_words(self) -> int:
        return self.stats.correct

    @property
    def accuracy_history(self) -> List[StatsSample]:
        return self.stats.accuracy_history

    @property
    def wpm_history(self) -> List[StatsSample]:
        return self.stats.wpm_history
