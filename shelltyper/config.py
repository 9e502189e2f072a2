from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

from .target import MODES, TestConfig

log = logging.getLogger("shelltyper.config")


def default_config_path() -> Path:
    """
    Settings file location:
    - $SHELLTYPER_CONFIG if set
    - $XDG_CONFIG_HOME/shelltyper/config.json
    - ~/.config/shelltyper/config.json
    """
    override = os.environ.get("SHELLTYPER_CONFIG")
    if override:
        return Path(override)
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "shelltyper" / "config.json"
    return Path.home() / ".config" / "shelltyper" / "config.json"


@dataclass(frozen=True)
class Settings:
    mode: str = "words"
    words: int = 30
    seconds: int = 30
    theme: str = "slate"
    tick_interval: float = 0.05

    def test_config(self) -> TestConfig:
        if self.mode == "time":
            return TestConfig.time(self.seconds)
        return TestConfig.words(self.words)

    def with_overrides(self, **changes: Any) -> "Settings":
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def _validate(name: str, value: Any) -> bool:
    if name == "mode":
        return value in MODES
    if name in ("words", "seconds"):
        return isinstance(value, int) and not isinstance(value, bool) and value > 0
    if name == "theme":
        return isinstance(value, str) and bool(value)
    if name == "tick_interval":
        return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0
    return False


def settings_from_dict(data: Dict[str, Any]) -> Settings:
    values: Dict[str, Any] = {}
    for f in fields(Settings):
        if f.name not in data:
            continue
        value = data[f.name]
        if _validate(f.name, value):
            values[f.name] = value
        else:
            log.warning("ignoring invalid setting %s=%r", f.name, value)
    return Settings(**values)


def load_settings(path: Optional[Path] = None) -> Settings:
    path = path or default_config_path()
    if not path.exists():
        return Settings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        log.warning("could not read settings from %s: %s", path, exc)
        return Settings()
    if not isinstance(data, dict):
        log.warning("settings file %s does not hold a JSON object", path)
        return Settings()
    return settings_from_dict(data)
