"""
Campus Web — Route Dependencies
=================================

What:  FastAPI dependencies shared by the routers.
How:
    response_context  → the ResponseContext installed by the locals middleware
    section_assets()  → route-group asset registration, used as
                        APIRouter(dependencies=[section_assets(...)])
    require_login     → raises AuthenticationRequiredError without a user

Ordering:
    Router-level dependencies run after every middleware and before the
    endpoint, so fragments registered here are always present when the page
    template calls render_styles()/render_scripts().
"""

from typing import Any, Dict, Sequence

from fastapi import Depends, Request

from campusweb.exceptions import AuthenticationRequiredError
from campusweb.presentation.context import SESSION_USER_KEY, ResponseContext, get_response_context


def response_context(request: Request) -> ResponseContext:
    return get_response_context(request)


def section_assets(
    *styles: str,
    scripts: Sequence[str] = (),
    priority: int = 0,
) -> Any:
    """
    Build a dependency that registers section-specific fragments.

    Example:
        router = APIRouter(
            prefix="/catalog",
            dependencies=[section_assets(stylesheet("/css/catalog.css"))],
        )
    """

    def register_section_assets(
        context: ResponseContext = Depends(response_context),
    ) -> None:
        for content in styles:
            context.add_style(content, priority)
        for content in scripts:
            context.add_script(content, priority)

    return Depends(register_section_assets)


def current_user(request: Request) -> Dict[str, Any]:
    """Session payload of the signed-in user, or an empty dict."""
    session = request.scope.get("session") or {}
    return session.get(SESSION_USER_KEY) or {}


def require_login(request: Request) -> Dict[str, Any]:
    user = current_user(request)
    if not user:
        raise AuthenticationRequiredError(next_path=request.url.path)
    return user
