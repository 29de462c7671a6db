"""
Campus Web — Presentation Package
==================================

What:  Per-request response decoration shared by every rendered page.
How:   Pure helpers (greetings, themes) plus the per-response asset registry and
       the composer that bundles them into a ResponseContext.

Flow:
    Request → LocalsComposer.compose() → ResponseContext on request.state
            → route-group dependencies call add_style()/add_script()
            → render_page() pulls template_locals() at template-emission time
"""

from campusweb.presentation.assets import AssetEntry, AssetRegistry, script_tag, stylesheet
from campusweb.presentation.context import (
    LocalsComposer,
    ResponseContext,
    get_response_context,
)
from campusweb.presentation.greetings import (
    current_seasonal_greeting,
    current_time_greeting,
    wrap_paragraph,
)
from campusweb.presentation.themes import Theme, pick_theme

__all__ = [
    "AssetEntry",
    "AssetRegistry",
    "LocalsComposer",
    "ResponseContext",
    "Theme",
    "current_seasonal_greeting",
    "current_time_greeting",
    "get_response_context",
    "pick_theme",
    "script_tag",
    "stylesheet",
    "wrap_paragraph",
]
