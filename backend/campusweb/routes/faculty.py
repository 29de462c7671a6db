"""
Campus Web — Faculty Route Handlers
=====================================

What:  Faculty directory and individual profiles (with the sections taught).
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.ext.asyncio import AsyncSession

from campusweb.database import get_db_session
from campusweb.dependencies import section_assets
from campusweb.presentation.assets import stylesheet
from campusweb.services.catalog_service import catalog_service
from campusweb.services.faculty_service import faculty_service, normalize_faculty_sort
from campusweb.templating import render_page

router = APIRouter(
    prefix="/faculty",
    tags=["Faculty"],
    dependencies=[section_assets(stylesheet("/css/faculty.css"))],
)


@router.get("", response_class=HTMLResponse)
async def faculty_list_page(
    request: Request,
    sort: str = "department",
    db: AsyncSession = Depends(get_db_session),
) -> HTMLResponse:
    current_sort = normalize_faculty_sort(sort)
    faculty = await faculty_service.list_faculty(db, current_sort)
    return render_page(
        request,
        "faculty/list.html",
        title="Faculty List",
        faculty=faculty,
        current_sort=current_sort,
    )


@router.get("/{slug}", response_class=HTMLResponse)
async def faculty_detail_page(
    request: Request,
    slug: str,
    db: AsyncSession = Depends(get_db_session),
) -> HTMLResponse:
    member = await faculty_service.get_faculty(db, slug)
    sections = await catalog_service.get_sections_by_faculty(db, slug)
    return render_page(
        request,
        "faculty/detail.html",
        title=f"{member.name} - Faculty Profile",
        faculty=member,
        sections=sections,
    )
