"""
Campus Web — Catalog Route Handlers
=====================================

What:  Course catalog pages and the departments overview.
How:   Every /catalog page gets catalog.css through the router dependency;
       /departments shares the stylesheet through its own router.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from campusweb.database import get_db_session
from campusweb.dependencies import section_assets
from campusweb.presentation.assets import stylesheet
from campusweb.services.catalog_service import catalog_service, normalize_section_sort
from campusweb.templating import render_page

logger = logging.getLogger(__name__)

CATALOG_STYLESHEET = stylesheet("/css/catalog.css")

router = APIRouter(
    prefix="/catalog",
    tags=["Catalog"],
    dependencies=[section_assets(CATALOG_STYLESHEET)],
)

departments_router = APIRouter(
    tags=["Catalog"],
    dependencies=[section_assets(CATALOG_STYLESHEET)],
)


@router.get("", response_class=HTMLResponse)
async def catalog_page(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> HTMLResponse:
    courses = await catalog_service.list_courses(db)
    return render_page(request, "catalog/list.html", title="Course Catalog", courses=courses)


@router.get("/random")
async def random_course_page(db: AsyncSession = Depends(get_db_session)) -> RedirectResponse:
    slug = await catalog_service.random_course_slug(db)
    return RedirectResponse(url=f"/catalog/{slug}", status_code=303)


@router.get("/{slug}", response_class=HTMLResponse)
async def course_detail_page(
    request: Request,
    slug: str,
    sort: str = "time",
    db: AsyncSession = Depends(get_db_session),
) -> HTMLResponse:
    current_sort = normalize_section_sort(sort)
    course = await catalog_service.get_course(db, slug, current_sort)
    return render_page(
        request,
        "catalog/detail.html",
        title=f"{course.course_code} - {course.name}",
        course=course,
        current_sort=current_sort,
    )


@departments_router.get("/departments", response_class=HTMLResponse)
async def departments_page(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> HTMLResponse:
    departments = await catalog_service.get_courses_by_department(db)
    return render_page(request, "departments.html", title="Departments", departments=departments)
