"""
Campus Web — Login, Logout & Dashboard
========================================

What:  Session-based sign-in for registered users.
How:   A successful login stores User.to_session() (id, name, email) under
       session["user"]; that key is what the response locals read to set
       is_logged_in. Logout clears the whole session.

Failure messages never say whether the email or the password was wrong.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError as FormValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from campusweb.database import get_db_session
from campusweb.dependencies import require_login, section_assets
from campusweb.flash import FLASH_KEY, flash
from campusweb.presentation.assets import stylesheet
from campusweb.presentation.context import SESSION_USER_KEY
from campusweb.schemas.forms import LoginForm, form_error_messages
from campusweb.services.user_service import user_service
from campusweb.templating import render_page

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/login",
    tags=["Auth"],
    dependencies=[section_assets(stylesheet("/css/login.css"))],
)

account_router = APIRouter(tags=["Auth"])

INVALID_CREDENTIALS = "Invalid email or password"


def _back_to_login() -> RedirectResponse:
    return RedirectResponse(url="/login", status_code=303)


@router.get("", response_class=HTMLResponse)
async def login_form_page(request: Request) -> HTMLResponse:
    return render_page(request, "forms/login/form.html", title="User Login")


@router.post("")
async def process_login(
    request: Request,
    email: str = Form(""),
    password: str = Form(""),
    db: AsyncSession = Depends(get_db_session),
) -> RedirectResponse:
    try:
        form = LoginForm(email=email, password=password)
    except FormValidationError as exc:
        for message in form_error_messages(exc):
            flash(request, "error", message)
        return _back_to_login()

    try:
        user = await user_service.authenticate(db, form.email, form.password)
    except SQLAlchemyError as e:
        logger.error("Error logging in: %s", str(e))
        flash(request, "error", "Error logging in. Please try again later.")
        return _back_to_login()

    if user is None:
        flash(request, "error", INVALID_CREDENTIALS)
        return _back_to_login()

    request.session[SESSION_USER_KEY] = user.to_session()
    flash(request, "success", "Welcome! Thanks for joining us!")
    return RedirectResponse(url="/dashboard", status_code=303)


@account_router.get("/logout")
async def process_logout(request: Request) -> RedirectResponse:
    session = request.scope.get("session")
    if session is not None:
        session.clear()
    return RedirectResponse(url="/", status_code=303)


@account_router.get("/dashboard", response_class=HTMLResponse)
async def dashboard_page(
    request: Request,
    user: Dict[str, Any] = Depends(require_login),
) -> HTMLResponse:
    session_data = {k: v for k, v in request.session.items() if k != FLASH_KEY}
    return render_page(
        request,
        "dashboard.html",
        title="Dashboard",
        user=user,
        session_data=session_data,
    )
