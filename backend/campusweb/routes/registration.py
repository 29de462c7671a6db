"""
Campus Web — Registration Route Handlers
==========================================

What:  Account sign-up form, submission, and the registered-users list.
How:   Submission is validated with RegistrationForm. Every failed rule is
       flashed and the user is redirected back to the form (POST/redirect/GET),
       so a refresh never re-submits.
"""

import logging

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError as FormValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from campusweb.database import get_db_session
from campusweb.dependencies import section_assets
from campusweb.exceptions import DatabaseError
from campusweb.flash import flash
from campusweb.presentation.assets import stylesheet
from campusweb.schemas.forms import RegistrationForm, form_error_messages
from campusweb.services.user_service import EmailAlreadyRegisteredError, user_service
from campusweb.templating import render_page

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/register",
    tags=["Registration"],
    dependencies=[section_assets(stylesheet("/css/registration.css"))],
)


def _back_to_form() -> RedirectResponse:
    return RedirectResponse(url="/register", status_code=303)


@router.get("", response_class=HTMLResponse)
async def registration_form_page(request: Request) -> HTMLResponse:
    return render_page(request, "forms/registration/form.html", title="User Registration")


@router.post("")
async def process_registration(
    request: Request,
    name: str = Form(""),
    email: str = Form(""),
    email_confirm: str = Form("", alias="emailConfirm"),
    password: str = Form(""),
    password_confirm: str = Form("", alias="passwordConfirm"),
    db: AsyncSession = Depends(get_db_session),
) -> RedirectResponse:
    try:
        form = RegistrationForm(
            name=name,
            email=email,
            email_confirm=email_confirm,
            password=password,
            password_confirm=password_confirm,
        )
    except FormValidationError as exc:
        for message in form_error_messages(exc):
            flash(request, "error", message)
        return _back_to_form()

    try:
        await user_service.register(db, form.name, form.email, form.password)
    except EmailAlreadyRegisteredError as exc:
        flash(request, "warning", exc.message)
        return _back_to_form()
    except DatabaseError:
        flash(request, "error", "Registration failed, please try again another time.")
        return _back_to_form()

    flash(request, "success", "Registration successful! Thank you for creating an account with us!")
    return RedirectResponse(url="/login", status_code=303)


@router.get("/list", response_class=HTMLResponse)
async def registered_users_page(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> HTMLResponse:
    users = []
    try:
        users = await user_service.list_users(db)
    except SQLAlchemyError as e:
        # The page still renders, just with an empty list
        logger.error("Error retrieving users: %s", str(e))

    return render_page(request, "forms/registration/list.html", title="Registered Users", users=users)
