"""
Campus Web — Flash Messages
=============================

What:  One-shot messages (success, warning, error) carried across a redirect.
How:   Stored in the signed session cookie under "_flashes" and removed the
       first time a page renders them. Without session middleware both
       functions do nothing.
"""

from typing import Dict, List

from starlette.requests import Request

FLASH_KEY = "_flashes"


def flash(request: Request, category: str, message: str) -> None:
    session = request.scope.get("session")
    if session is None:
        return
    # Reassign so the session is marked modified and the cookie is rewritten
    session[FLASH_KEY] = [*session.get(FLASH_KEY, []), [category, message]]


def pop_flashes(request: Request) -> Dict[str, List[str]]:
    """Return pending messages grouped by category and clear them."""
    session = request.scope.get("session")
    if not session:
        return {}
    grouped: Dict[str, List[str]] = {}
    for category, message in session.pop(FLASH_KEY, []):
        grouped.setdefault(category, []).append(message)
    return grouped
