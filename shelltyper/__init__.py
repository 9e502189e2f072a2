"""shelltyper - a typing-speed test for the terminal."""

import logging

__version__ = "0.1.0"

from .differ import WordDiff, classify, diff_words
from .errors import InvariantError
from .layout import Span, SpanTag, layout_rows
from .session import TestState, TypingSession
from .target import TargetPassage, TestConfig, generate_target

logging.getLogger(__name__).addHandler(logging.NullHandler())
