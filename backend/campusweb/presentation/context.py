"""
Campus Web — Locals Composer & Response Context
=================================================

What:  Builds the ResponseContext every rendered page reads from: copyright
       year, environment name, query echo, greetings, body theme, login state,
       and an empty AssetRegistry.
How:   LocalsComposer receives its collaborators explicitly (environment name,
       clock, theme picker) so tests can pin them. compose() attaches the
       result to `request.state.response_context`.
Who:   ResponseLocalsMiddleware calls compose() once per request; route-group
       dependencies and handlers fetch the context with get_response_context().

Degradation:
    Missing environment name → "production"
    No session at all        → is_logged_in = False
    Session without "user"   → is_logged_in = False
    Nothing in here raises.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, Mapping, Optional

from starlette.requests import Request

from campusweb.presentation.assets import AssetRegistry
from campusweb.presentation.greetings import (
    current_seasonal_greeting,
    current_time_greeting,
    wrap_paragraph,
)
from campusweb.presentation.themes import Theme, pick_theme

DEFAULT_ENVIRONMENT = "production"

# Key under request.state and the session key that marks a signed-in user
STATE_KEY = "response_context"
SESSION_USER_KEY = "user"


@dataclass
class ResponseContext:
    """Values and asset registry attached to one request/response cycle."""

    current_year: int
    environment: str
    query_params: Dict[str, str]
    greeting_html: str
    seasonal_greeting_html: str
    theme: Theme
    is_logged_in: bool
    assets: AssetRegistry = field(default_factory=AssetRegistry)

    @property
    def body_theme_class(self) -> str:
        return self.theme.css_class

    def add_style(self, content: str, priority: Any = 0) -> None:
        self.assets.add_style(content, priority)

    def add_script(self, content: str, priority: Any = 0) -> None:
        self.assets.add_script(content, priority)

    def render_styles(self) -> str:
        return self.assets.render_styles()

    def render_scripts(self) -> str:
        return self.assets.render_scripts()

    def template_locals(self) -> Dict[str, Any]:
        """Flat mapping handed to the template renderer."""
        return {
            "current_year": self.current_year,
            "environment": self.environment,
            "query_params": dict(self.query_params),
            "greeting": self.greeting_html,
            "seasonal_greeting": self.seasonal_greeting_html,
            "body_class": self.body_theme_class,
            "is_logged_in": self.is_logged_in,
            "add_style": self.add_style,
            "add_script": self.add_script,
            "render_styles": self.render_styles,
            "render_scripts": self.render_scripts,
        }


def normalize_environment(value: Optional[str]) -> str:
    """Lower-case the environment name, falling back to production."""
    return (value or "").strip().lower() or DEFAULT_ENVIRONMENT


def session_has_user(session: Optional[Mapping[str, Any]]) -> bool:
    if session is None:
        return False
    return bool(session.get(SESSION_USER_KEY))


class LocalsComposer:
    """
    Populates a fresh ResponseContext for each request.

    Args:
        environment:  Deployment environment name (NODE_ENV).
        clock:        Zero-argument callable returning the current datetime.
        theme_picker: Zero-argument callable returning a Theme.
    """

    def __init__(
        self,
        environment: Optional[str] = DEFAULT_ENVIRONMENT,
        clock: Callable[[], datetime] = datetime.now,
        theme_picker: Callable[[], Theme] = pick_theme,
    ):
        self.environment = normalize_environment(environment)
        self.clock = clock
        self.theme_picker = theme_picker

    def build(
        self,
        query_params: Mapping[str, str],
        session: Optional[Mapping[str, Any]] = None,
    ) -> ResponseContext:
        now = self.clock()
        return ResponseContext(
            current_year=now.year,
            environment=self.environment,
            query_params=dict(query_params),
            greeting_html=wrap_paragraph(current_time_greeting(now)),
            seasonal_greeting_html=wrap_paragraph(current_seasonal_greeting(now)),
            theme=self.theme_picker(),
            is_logged_in=session_has_user(session),
            assets=AssetRegistry(),
        )

    def compose(self, request: Request) -> None:
        """Attach a new ResponseContext to `request.state`."""
        # request.session asserts when SessionMiddleware is absent; read the scope
        session = request.scope.get("session")
        context = self.build(request.query_params, session)
        setattr(request.state, STATE_KEY, context)


def get_response_context(request: Request) -> ResponseContext:
    """
    Return the context installed for this request.

    Requests that never reached the locals middleware (for example errors
    rendered by the outermost server-error handler) get one composed on demand
    with the application's composer.
    """
    context = getattr(request.state, STATE_KEY, None)
    if context is None:
        composer = None
        if "app" in request.scope:
            composer = getattr(request.app.state, "locals_composer", None)
        (composer or LocalsComposer()).compose(request)
        context = getattr(request.state, STATE_KEY)
    return context
