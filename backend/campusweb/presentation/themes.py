"""
Campus Web — Theme Selector
============================

What:  Picks the body colour theme for a page, uniformly at random per request.
How:   `pick_theme()` draws from the six Theme members using an injectable
       random source (tests pass a seeded `random.Random`).
"""

import random
from enum import Enum
from typing import Optional


class Theme(str, Enum):
    """Body colour themes; the stylesheet defines one `<name>-theme` class each."""

    BLUE = "blue"
    GREEN = "green"
    RED = "red"
    YELLOW = "yellow"
    PURPLE = "purple"
    ORANGE = "orange"

    @property
    def css_class(self) -> str:
        return f"{self.value}-theme"


THEMES: tuple[Theme, ...] = tuple(Theme)


def pick_theme(rng: Optional[random.Random] = None) -> Theme:
    """Return one of the six themes with equal probability."""
    return (rng or random).choice(THEMES)
