"""
Campus Web — Asset Registry
============================

What:  Per-response collection of stylesheet and script fragments.
How:   Middleware, route-group dependencies and handlers append fragments with a
       numeric priority; the base template renders them once, highest priority
       first.

Ordering rules:
    1. Higher priority renders earlier.
    2. Equal priorities keep insertion order (Python's sort is stable,
       including with reverse=True).
    3. Rendering never mutates the collections, so it can be repeated.

Priority values:
    Finite real numbers are truncated with int(). Anything else (strings,
    None, booleans, inf, nan) is stored as priority 0. Registration never
    raises.

Example:
    registry = AssetRegistry()
    registry.add_style(stylesheet("/css/catalog.css"))
    registry.add_style(stylesheet("/css/print.css"), priority=-1)
    registry.render_styles()
"""

import math
from dataclasses import dataclass, field
from html import escape
from numbers import Real
from typing import Any, List


@dataclass(frozen=True)
class AssetEntry:
    """An opaque markup fragment and the priority it renders at."""

    content: str
    priority: int = 0


def _coerce_priority(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, Real):
        return 0
    if not math.isfinite(value):
        return 0
    return int(value)


def _render(entries: List[AssetEntry]) -> str:
    ordered = sorted(entries, key=lambda entry: entry.priority, reverse=True)
    return "\n".join(entry.content for entry in ordered)


@dataclass
class AssetRegistry:
    """
    Style and script fragments registered while one request is processed.

    A fresh, empty instance is installed on every request by the
    LocalsComposer; instances are never shared between requests.
    """

    styles: List[AssetEntry] = field(default_factory=list)
    scripts: List[AssetEntry] = field(default_factory=list)

    def add_style(self, content: str, priority: Any = 0) -> None:
        self.styles.append(AssetEntry(content, _coerce_priority(priority)))

    def add_script(self, content: str, priority: Any = 0) -> None:
        self.scripts.append(AssetEntry(content, _coerce_priority(priority)))

    def render_styles(self) -> str:
        return _render(self.styles)

    def render_scripts(self) -> str:
        return _render(self.scripts)

    def is_empty(self) -> bool:
        return not self.styles and not self.scripts


def stylesheet(href: str) -> str:
    """Build a stylesheet link tag for `href`."""
    return f'<link rel="stylesheet" href="{escape(href)}">'


def script_tag(src: str, defer: bool = False) -> str:
    """Build an external script tag for `src`."""
    attrs = " defer" if defer else ""
    return f'<script src="{escape(src)}"{attrs}></script>'
