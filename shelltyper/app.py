from __future__ import annotations

import time
from typing import Dict, List, Optional, Sequence, Tuple

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.widgets import Static

from .config import Settings
from .layout import Span, SpanTag
from .session import TestState, TypingSession
from .stats import StatsSample
from .target import TestConfig

THEMES: Dict[str, Dict[str, str]] = {
    "slate": {
        "card_bg": "#111827",
        "stats_bg": "#0f172a",
        "prompt_bg": "#0b1220",
        "border": "#1f2937",
        "title": "#e5e7eb",
        "muted": "#64748b",
        "hint": "#93c5fd",
        "complete": "#e5e7eb",
        "correct": "#86efac",
        "wrong": "#fb7185",
        "pending": "#64748b",
        "accuracy": "#e879f9",
        "wpm": "#67e8f9",
        "bar_fg": "#60a5fa",
        "bar_bg": "#1e293b",
    },
    "ember": {
        "card_bg": "#1f140f",
        "stats_bg": "#21140e",
        "prompt_bg": "#1a1210",
        "border": "#3b1d14",
        "title": "#fef3c7",
        "muted": "#d6a08a",
        "hint": "#fbbf24",
        "complete": "#fef3c7",
        "correct": "#fcd34d",
        "wrong": "#f87171",
        "pending": "#a8705c",
        "accuracy": "#f472b6",
        "wpm": "#fdba74",
        "bar_fg": "#f97316",
        "bar_bg": "#3b1d14",
    },
    "mint": {
        "card_bg": "#0b1f24",
        "stats_bg": "#0b1c22",
        "prompt_bg": "#0a1b1f",
        "border": "#12323a",
        "title": "#d1fae5",
        "muted": "#7dd3c7",
        "hint": "#5eead4",
        "complete": "#d1fae5",
        "correct": "#a7f3d0",
        "wrong": "#fb7185",
        "pending": "#4b8f86",
        "accuracy": "#c4b5fd",
        "wpm": "#5eead4",
        "bar_fg": "#34d399",
        "bar_bg": "#12323a",
    },
}

STATE_LABELS = {
    TestState.PRE: "Ready to Go",
    TestState.RUNNING: "Test Running",
    TestState.POST: "Test Complete",
}

SPARK_BLOCKS = " ▁▂▃▄▅▆▇█"
WORD_BREAK_KEYS = ("space", "enter", "right")


# ---------------------------
# Rendering helpers
# ---------------------------

def span_style(span: Span, palette: Dict[str, str], word_clean: bool = False) -> str:
    if span.tag is SpanTag.CORRECT:
        return f"bold {palette['complete']}" if word_clean else palette["correct"]
    if span.tag is SpanTag.WRONG:
        return f"bold {palette['wrong']} underline"
    if span.tag is SpanTag.PENDING:
        return palette["pending"]
    return ""


def render_rows(rows: Sequence[Sequence[Span]], palette: Dict[str, str]) -> Text:
    text = Text()
    for n, row in enumerate(rows):
        if n:
            text.append("\n")
        for i, span in enumerate(row):
            # a correct span standing alone marks a fully typed, clean word
            nxt = row[i + 1] if i + 1 < len(row) else None
            clean = span.tag is SpanTag.CORRECT and (nxt is None or nxt.tag is SpanTag.GAP)
            text.append(span.text, style=span_style(span, palette, clean))
    return text


def sparkline(samples: Sequence[StatsSample], width: int, ceiling: float = 100.0) -> str:
    """Plot samples over progress 0-100 as one row of block characters."""
    if width <= 0:
        return ""
    columns: List[Optional[float]] = [None] * width
    for sample in samples:
        col = int(min(100.0, max(0.0, sample.progress)) * (width - 1) / 100.0)
        columns[col] = sample.value
    top = len(SPARK_BLOCKS) - 1
    out = []
    for value in columns:
        if value is None:
            out.append(" ")
            continue
        level = int(round(min(ceiling, max(0.0, value)) / ceiling * top)) if ceiling > 0 else 0
        out.append(SPARK_BLOCKS[max(1, level)])
    return "".join(out)


def gauge(progress: float, width: int) -> Tuple[str, str]:
    filled = int(width * min(1.0, max(0.0, progress / 100.0)))
    return "━" * filled, "─" * (width - filled)


# ---------------------------
# App
# ---------------------------

# panel id -> palette key for its background
PANELS = (
    ("title", "card_bg"),
    ("stats", "stats_bg"),
    ("prompt", "prompt_bg"),
    ("help", "stats_bg"),
)


class ShellTyper(App):
    CSS = """
    #root { padding: 1 2; }
    .panel { padding: 0 2; }
    #title { height: 3; }
    #stats { height: 6; }
    #prompt { height: 1fr; padding: 1 2; }
    #help { height: 3; }
    """

    TITLE = "shelltyper"
    SUB_TITLE = "monkeytype in the shell"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("escape", "restart", "New test", priority=True),
        Binding("tab", "force_end", "End test", priority=True),
        Binding("ctrl+n", "cycle_mode", "Mode", priority=True),
        Binding("ctrl+t", "cycle_theme", "Theme", priority=True),
    ]

    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self.theme_name = self.settings.theme if self.settings.theme in THEMES else "slate"
        self.session = TypingSession(self.settings.test_config())

    @property
    def theme_colors(self) -> Dict[str, str]:
        return THEMES[self.theme_name]

    def compose(self) -> ComposeResult:
        self.title_bar, self.stats_bar, self.prompt_view, self.help_bar = (
            Static(id=panel_id, classes="panel") for panel_id, _ in PANELS
        )
        with Container(id="root"):
            yield from (self.title_bar, self.stats_bar, self.prompt_view, self.help_bar)

    def on_mount(self) -> None:
        self.apply_theme()
        self.set_interval(self.settings.tick_interval, self._tick)
        self._render_all()

    def on_resize(self, event: events.Resize) -> None:
        self._render_prompt()
        self._render_stats()

    def apply_theme(self) -> None:
        for panel_id, background in PANELS:
            styles = self.query_one(f"#{panel_id}", Static).styles
            styles.background = self.theme_colors[background]
            styles.border = ("round", self.theme_colors["border"])

    # ---------------------------
    # Events into the session
    # ---------------------------

    def _tick(self) -> None:
        before = self.session.state
        if self.session.on_tick(time.monotonic()):
            self._render_stats()
            if self.session.state is not before:
                self._render_all()

    def on_key(self, event: events.Key) -> None:
        session = self.session
        if event.key in WORD_BREAK_KEYS:
            changed = session.on_word_break()
        elif event.key == "backspace":
            changed = session.on_backspace()
        elif event.is_printable and event.character:
            changed = session.on_char(event.character)
        else:
            return
        event.stop()
        if changed:
            self._render_all()

    def action_restart(self) -> None:
        self.session.on_abort()
        self._render_all()

    def action_force_end(self) -> None:
        if self.session.on_force_end():
            self._render_all()

    def action_cycle_mode(self) -> None:
        mode = "time" if self.settings.mode == "words" else "words"
        self.settings = self.settings.with_overrides(mode=mode)
        self.session.new_test(self.settings.test_config())
        self._render_all()

    def action_cycle_theme(self) -> None:
        names = list(THEMES)
        self.theme_name = names[(names.index(self.theme_name) + 1) % len(names)]
        self.apply_theme()
        self._render_all()

    # ---------------------------
    # Rendering
    # ---------------------------

    def _render_all(self) -> None:
        self._render_title()
        self._render_stats()
        self._render_prompt()
        self._render_help()

    def _render_title(self) -> None:
        theme = self.theme_colors
        config: TestConfig = self.session.config
        text = Text()
        text.append(STATE_LABELS[self.session.state], style=f"bold {theme['title']}")
        text.append("  |  ", style=theme["muted"])
        text.append(f"{config.describe()} • {self.theme_name}", style=theme["muted"])
        self.title_bar.update(text)

    def _render_stats(self) -> None:
        theme = self.theme_colors
        session = self.session
        width = max(10, self.stats_bar.content_size.width - 26)

        text = Text()
        text.append("WPM ", style=theme["muted"])
        text.append(f"{session.wpm:>5.0f}", style=f"bold {theme['wpm']}")
        text.append("   Acc ", style=theme["muted"])
        text.append(f"{session.accuracy:>5.0f}%", style=f"bold {theme['accuracy']}")
        text.append("   Progress ", style=theme["muted"])
        text.append(f"{min(100.0, session.progress):>5.0f}%", style=f"bold {theme['title']}")
        text.append("   Time ", style=theme["muted"])
        text.append(f"{session.elapsed:>5.1f}s", style=f"bold {theme['title']}")
        text.append("   Correct ", style=theme["muted"])
        text.append(f"{session.correct_words}", style=f"bold {theme['title']}")
        text.append("\n")

        full, empty = gauge(session.progress, width + 10)
        text.append(full, style=f"bold {theme['bar_fg']}")
        text.append(empty, style=theme["bar_bg"])
        text.append("\n")

        text.append("accuracy ", style=theme["muted"])
        text.append(sparkline(session.accuracy_history, width), style=theme["accuracy"])
        text.append("\n")
        text.append("wpm      ", style=theme["muted"])
        text.append(sparkline(session.wpm_history, width), style=theme["wpm"])
        self.stats_bar.update(text)

    def _render_prompt(self) -> None:
        width = self.prompt_view.content_size.width or 80
        rows = self.session.rows(width)
        self.prompt_view.update(render_rows(rows, self.theme_colors))

    def _render_help(self) -> None:
        theme = self.theme_colors
        text = Text()
        if self.session.state is TestState.PRE:
            text.append("Start typing to begin. ", style=theme["hint"])
        elif self.session.state is TestState.POST:
            text.append("Test complete. ", style=theme["hint"])
        for label in ("Esc new test", "Tab end test", "Ctrl+N mode", "Ctrl+T theme", "Ctrl+Q quit"):
            text.append(label, style=theme["hint"])
            text.append("  ", style=theme["muted"])
        self.help_bar.update(text)
