"""Runtime settings for a game session.

Environment-first: NOUGHTS_MODE, NOUGHTS_HUMAN and NOUGHTS_AI_DELAY override
the defaults; command-line flags override both.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .board import MARKS

MODE_AI = "ai"
MODE_TWO_PLAYER = "2p"
MODES = (MODE_AI, MODE_TWO_PLAYER)

DEFAULT_AI_DELAY = 0.25


@dataclass
class Settings:
    mode: str = MODE_AI
    human: str = "X"
    ai_delay: float = DEFAULT_AI_DELAY

    def validate(self) -> "Settings":
        if self.mode not in MODES:
            raise ValueError(f"Unknown mode {self.mode!r}; expected one of {MODES}")
        if self.human not in MARKS:
            raise ValueError(f"Human mark must be X or O, got {self.human!r}")
        if self.ai_delay < 0:
            raise ValueError(f"AI delay must be >= 0, got {self.ai_delay}")
        return self


def load_settings() -> Settings:
    s = Settings()
    mode = os.getenv("NOUGHTS_MODE")
    if mode:
        s.mode = mode.strip().lower()
    human = os.getenv("NOUGHTS_HUMAN")
    if human:
        s.human = human.strip().upper()
    delay = os.getenv("NOUGHTS_AI_DELAY")
    if delay:
        try:
            s.ai_delay = float(delay)
        except ValueError:
            raise ValueError(f"NOUGHTS_AI_DELAY must be a number, got {delay!r}") from None
    return s.validate()
