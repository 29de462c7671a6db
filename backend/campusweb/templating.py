"""
Campus Web — Template Rendering
=================================

What:  The shared Jinja2Templates instance and `render_page()`, the single
       place pages are rendered.
How:   Page values are layered over the request's ResponseContext locals, so
       every template sees the greeting, theme, login state, query echo and
       the render_styles()/render_scripts() callables. Asset rendering happens
       while the template is emitted, after all middleware and dependencies
       have registered their fragments.
"""

from pathlib import Path
from typing import Any

from fastapi.templating import Jinja2Templates
from starlette.requests import Request
from starlette.responses import HTMLResponse

from campusweb import __version__
from campusweb.flash import pop_flashes
from campusweb.presentation.context import get_response_context

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals["app_version"] = __version__


def render_page(
    request: Request,
    name: str,
    status_code: int = 200,
    **values: Any,
) -> HTMLResponse:
    context = get_response_context(request).template_locals()
    context["flash_messages"] = pop_flashes(request)
    context.update(values)
    return templates.TemplateResponse(request, name, context, status_code=status_code)
