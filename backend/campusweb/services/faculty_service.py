"""
Campus Web — Faculty Service
==============================

What:  Faculty directory queries: sorted listing and profile lookup.
Who:   Called by the /faculty route handlers.

Sort options (unknown values fall back to "department"):
    name        last name, first name
    title       title, last name
    department  department name, last name, first name
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from campusweb.exceptions import DatabaseError, NotFoundError
from campusweb.models.catalog import Department
from campusweb.models.faculty import Faculty
from campusweb.schemas.catalog import FacultyView

logger = logging.getLogger(__name__)

FACULTY_SORT_OPTIONS = ("name", "department", "title")

_ORDERINGS = {
    "name": (Faculty.last_name, Faculty.first_name),
    "title": (Faculty.title, Faculty.last_name),
    "department": (Department.name, Faculty.last_name, Faculty.first_name),
}


def normalize_faculty_sort(sort: Optional[str]) -> str:
    return sort if sort in FACULTY_SORT_OPTIONS else "department"


def to_faculty_view(member: Faculty) -> FacultyView:
    return FacultyView(
        id=member.id,
        slug=member.slug,
        first_name=member.first_name,
        last_name=member.last_name,
        name=member.name,
        title=member.title,
        office=member.office,
        phone=member.phone,
        email=member.email,
        gender=member.gender,
        department=member.department.name,
        department_code=member.department.code,
    )


class FacultyService:
    async def list_faculty(self, db: AsyncSession, sort: str = "department") -> List[FacultyView]:
        sort = normalize_faculty_sort(sort)
        try:
            result = await db.execute(
                select(Faculty)
                .join(Faculty.department)
                .options(joinedload(Faculty.department))
                .order_by(*_ORDERINGS[sort])
            )
            members = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing faculty: %s", str(e), exc_info=True)
            raise DatabaseError(message="Could not load the faculty directory.") from e
        return [to_faculty_view(m) for m in members]

    async def get_faculty(self, db: AsyncSession, slug: str) -> FacultyView:
        """
        Raises:
            NotFoundError: No faculty member has this slug (→ 404 page)
        """
        try:
            result = await db.execute(
                select(Faculty)
                .options(joinedload(Faculty.department))
                .where(Faculty.slug == slug)
            )
            member = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching faculty %s: %s", slug, str(e))
            raise DatabaseError(
                message="Could not retrieve the faculty profile.",
                context={"slug": slug},
            ) from e

        if member is None:
            raise NotFoundError(resource="faculty member", resource_id=slug)
        return to_faculty_view(member)


faculty_service = FacultyService()
