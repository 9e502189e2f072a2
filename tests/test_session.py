"""Tests for the TypingSession state machine."""

import random

import pytest

from shelltyper.errors import InvariantError
from shelltyper.layout import SpanTag
from shelltyper.session import TestState, TypingSession
from shelltyper.target import TestConfig


def make_session(clock, words=("ab", "cd"), count=2, config=None):
    return TypingSession(
        config or TestConfig.words(count),
        words=list(words),
        rng=random.Random(0),
        clock=clock,
    )


def type_text(session, text):
    for c in text:
        session.on_char(c)


def type_target(session):
    type_text(session, session.target.text)


class TestStartAndFinish:

    def test_starts_in_pre(self, clock):
        session = make_session(clock)
        assert session.state is TestState.PRE

    def test_first_char_starts_test(self, clock):
        session = make_session(clock)
        assert session.on_char("a")
        assert session.state is TestState.RUNNING
        assert session.stats.started_at == clock.now

    def test_two_words_typed_correctly(self, clock):
        """Pre -> Running -> Post, progress reaches 100."""
        session = make_session(clock, words=["ab"], count=2)
        assert session.target.text == "ab ab"
        type_text(session, "ab ab")
        assert session.state is TestState.RUNNING
        clock.advance(6.0)
        session.on_word_break()
        assert session.state is TestState.POST
        assert session.progress == pytest.approx(100.0)
        assert session.accuracy == pytest.approx(100.0)
        assert session.correct_words == 2
        assert session.wpm == pytest.approx(20.0)

    def test_stats_reach_100_on_tick(self, clock):
        session = make_session(clock, words=["ab"], count=2)
        type_text(session, "ab ")
        clock.advance(1.0)
        session.on_tick()
        assert session.progress == pytest.approx(50.0)
        assert session.state is TestState.RUNNING

    def test_timed_test_ends_on_tick(self, clock):
        session = make_session(clock, config=TestConfig.time(2))
        session.on_char("a")
        session.on_tick(clock.advance(1.0))
        assert session.state is TestState.RUNNING
        session.on_tick(clock.advance(1.0))
        assert session.state is TestState.POST

    def test_timed_test_without_keystrokes(self, clock):
        session = make_session(clock, config=TestConfig.time(15))
        for _ in range(20):
            assert not session.on_tick(clock.advance(1.0))
        assert session.state is TestState.PRE
        assert session.wpm == 0.0
        assert session.progress == 0.0

    def test_force_end(self, clock):
        session = make_session(clock)
        session.on_char("a")
        assert session.on_force_end()
        assert session.state is TestState.POST

    def test_force_end_ignored_before_start(self, clock):
        session = make_session(clock)
        assert not session.on_force_end()
        assert session.state is TestState.PRE


class TestInputGating:

    def test_input_frozen_after_post(self, clock):
        session = make_session(clock)
        session.on_char("a")
        session.on_force_end()
        text = session.entered.text
        assert not session.on_char("b")
        assert not session.on_backspace()
        assert not session.on_word_break()
        assert session.entered.text == text

    def test_word_break_ignored_before_start(self, clock):
        session = make_session(clock)
        assert not session.on_word_break()
        assert session.state is TestState.PRE

    def test_space_char_is_word_break(self, clock):
        session = make_session(clock, count=3)
        type_text(session, "ab ")
        assert session.entered.text == "ab "
        assert len(session.entered.spans) == 2

    def test_word_break_after_deleting_first_char(self, clock):
        """A word break on emptied input still commits an (empty) word."""
        session = make_session(clock, count=3)
        session.on_char("a")
        session.on_backspace()
        assert session.on_word_break()
        assert session.entered.text == " "
        assert session.entered.spans.ends == (1, 1)
        assert session.state is TestState.RUNNING

    def test_backspace_at_start_is_noop(self, clock):
        session = make_session(clock)
        assert not session.on_backspace()
        assert session.state is TestState.PRE
        assert session.entered.text == ""

    def test_tick_in_pre_does_nothing(self, clock):
        session = make_session(clock)
        assert not session.on_tick()
        assert session.wpm_history == []

    def test_ticks_sample_history(self, clock):
        session = make_session(clock, count=3)
        type_text(session, "ab ")
        for _ in range(5):
            session.on_tick(clock.advance(0.15))
        assert len(session.wpm_history) == 5
        assert len(session.accuracy_history) in (0, 5)


class TestReset:

    def test_abort_returns_to_pre(self, clock):
        session = make_session(clock)
        type_text(session, "ab")
        session.on_abort()
        assert session.state is TestState.PRE
        assert session.entered.text == ""
        assert session.wpm_history == []

    def test_abort_after_post(self, clock):
        session = make_session(clock)
        session.on_char("a")
        session.on_force_end()
        session.on_abort()
        assert session.state is TestState.PRE
        assert session.on_char("a")

    def test_new_test_with_config(self, clock):
        session = make_session(clock)
        session.new_test(TestConfig.words(5))
        assert session.target.word_count == 5
        assert session.config == TestConfig.words(5)

    def test_illegal_transition(self, clock):
        session = make_session(clock)
        with pytest.raises(InvariantError):
            session._transition(TestState.POST)

    def test_empty_dictionary(self, clock):
        with pytest.raises(InvariantError):
            make_session(clock, words=[])


class TestRows:

    def test_rows_reflect_typing(self, clock):
        session = make_session(clock, words=["ab", "cd"], count=2)
        target = session.target.text
        first, second = target.split(" ")
        type_text(session, first + " " + second[0])
        rows = session.rows(80)
        assert len(rows) == 1
        tags = [s.tag for s in rows[0]]
        assert tags[0] is SpanTag.CORRECT
        assert rows[0][0].text == first
        assert tags[-1] is SpanTag.PENDING
        assert rows[0][-1].text == second[1:]

    def test_word_diffs_one_per_target_word(self, clock):
        session = make_session(clock, count=6)
        type_text(session, "xy")
        diffs = session.word_diffs()
        assert len(diffs) == 6
        assert diffs[0].wrong
