"""
Campus Web — Static Pages
===========================

What:  Home and about pages. They only need the shared response locals; the
       home page also registers its own script from the handler.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from campusweb.dependencies import response_context
from campusweb.presentation.assets import script_tag
from campusweb.presentation.context import ResponseContext
from campusweb.templating import render_page

router = APIRouter(tags=["Pages"])


@router.get("/", response_class=HTMLResponse)
async def home_page(
    request: Request,
    context: ResponseContext = Depends(response_context),
) -> HTMLResponse:
    context.add_script(script_tag("/js/main.js", defer=True))
    return render_page(request, "home.html", title="Home")


@router.get("/about", response_class=HTMLResponse)
async def about_page(request: Request) -> HTMLResponse:
    return render_page(request, "about.html", title="About Me")
