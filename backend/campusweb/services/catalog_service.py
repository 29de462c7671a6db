"""
Campus Web — Catalog Service
==============================

What:  Course catalog queries: listing, detail with sections, departments.
How:   SQLAlchemy selects with explicit eager loading; rows are flattened into
       view models from campusweb.schemas.catalog.
Who:   Called by the /catalog and /departments route handlers.

Section sort options:
    time       hour of the first H:MM in the time text (default)
    room       room text
    professor  last name, then first name
Unknown options fall back to "time".
"""

import logging
import random
import re
from typing import Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload, selectinload

from campusweb.exceptions import DatabaseError, NotFoundError
from campusweb.models.catalog import Course, Department, Section
from campusweb.schemas.catalog import CourseDetail, CourseSummary, DepartmentGroup, SectionView

logger = logging.getLogger(__name__)

SECTION_SORT_OPTIONS = ("time", "room", "professor")
_TIME_PATTERN = re.compile(r"(\d{1,2}):(\d{2})")


def section_hour(time_text: str) -> int:
    """Hour of the first H:MM in `time_text`; text without one sorts last."""
    match = _TIME_PATTERN.search(time_text or "")
    if match is None:
        return 99
    return int(match.group(1))


def normalize_section_sort(sort: Optional[str]) -> str:
    return sort if sort in SECTION_SORT_OPTIONS else "time"


def sort_sections(sections: Iterable[SectionView], sort: str) -> List[SectionView]:
    """Order sections for display; sorted() keeps ties in their stored order."""
    sort = normalize_section_sort(sort)
    if sort == "room":
        return sorted(sections, key=lambda s: s.room)
    if sort == "professor":
        return sorted(sections, key=lambda s: tuple(reversed(s.professor.split(" ", 1))))
    return sorted(sections, key=lambda s: section_hour(s.time))


def to_section_view(section: Section) -> SectionView:
    course = section.course
    faculty = section.faculty
    return SectionView(
        id=section.id,
        time=section.time,
        room=section.room,
        course_slug=course.slug,
        course_code=course.course_code,
        course_name=course.name,
        description=course.description,
        credit_hours=course.credit_hours,
        professor=faculty.name,
        professor_slug=faculty.slug,
        professor_title=faculty.title,
        department=course.department.name,
        department_code=course.department.code,
    )


def _section_options():
    return (
        joinedload(Section.course).joinedload(Course.department),
        joinedload(Section.faculty),
    )


class CatalogService:
    """Read-only course catalog queries."""

    async def list_courses(self, db: AsyncSession) -> List[CourseSummary]:
        try:
            result = await db.execute(
                select(Course)
                .options(joinedload(Course.department))
                .order_by(Course.course_code)
            )
            courses = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing courses: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not load the course catalog. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e

        return [
            CourseSummary(
                slug=course.slug,
                course_code=course.course_code,
                name=course.name,
                credit_hours=course.credit_hours,
                department=course.department.name,
                department_code=course.department.code,
            )
            for course in courses
        ]

    async def get_course(self, db: AsyncSession, slug: str, sort: str = "time") -> CourseDetail:
        """
        Course detail with its sections in the requested order.

        Raises:
            NotFoundError: No course has this slug (→ 404 page)
            DatabaseError: Query execution failed (→ 500 page)
        """
        try:
            result = await db.execute(
                select(Course)
                .options(joinedload(Course.department))
                .where(Course.slug == slug)
            )
            course = result.scalar_one_or_none()
            if course is None:
                raise NotFoundError(resource="course", resource_id=slug)

            sections = await self.get_sections_by_course(db, slug, sort)
        except SQLAlchemyError as e:
            logger.error("Database error fetching course %s: %s", slug, str(e))
            raise DatabaseError(
                message="Could not retrieve the course. Please try again.",
                context={"slug": slug},
            ) from e

        return CourseDetail(
            slug=course.slug,
            course_code=course.course_code,
            name=course.name,
            description=course.description,
            credit_hours=course.credit_hours,
            department=course.department.name,
            department_code=course.department.code,
            sections=sections,
        )

    async def get_sections_by_course(
        self, db: AsyncSession, slug: str, sort: str = "time"
    ) -> List[SectionView]:
        result = await db.execute(
            select(Section)
            .options(*_section_options())
            .where(Section.course_slug == slug)
            .order_by(Section.id)
        )
        return sort_sections((to_section_view(s) for s in result.scalars().all()), sort)

    async def get_sections_by_faculty(
        self, db: AsyncSession, faculty_slug: str, sort: str = "time"
    ) -> List[SectionView]:
        """Sections taught by one faculty member; "course" sorts by course code."""
        result = await db.execute(
            select(Section)
            .options(*_section_options())
            .where(Section.faculty_slug == faculty_slug)
            .order_by(Section.id)
        )
        views = [to_section_view(s) for s in result.scalars().all()]
        if sort == "course":
            return sorted(views, key=lambda s: s.course_code)
        return sort_sections(views, sort)

    async def get_courses_by_department(self, db: AsyncSession) -> List[DepartmentGroup]:
        """Courses grouped by department, ordered by department name then code."""
        try:
            result = await db.execute(
                select(Department)
                .options(selectinload(Department.courses))
                .order_by(Department.name)
            )
            departments = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error grouping departments: %s", str(e), exc_info=True)
            raise DatabaseError(message="Could not load departments. Please try again.") from e

        groups = []
        for department in departments:
            courses = sorted(department.courses, key=lambda c: c.course_code)
            if not courses:
                continue
            groups.append(
                DepartmentGroup(
                    department=department.name,
                    department_code=department.code,
                    courses=[
                        CourseSummary(
                            slug=c.slug,
                            course_code=c.course_code,
                            name=c.name,
                            credit_hours=c.credit_hours,
                            department=department.name,
                            department_code=department.code,
                        )
                        for c in courses
                    ],
                )
            )
        return groups

    async def random_course_slug(
        self, db: AsyncSession, rng: Optional[random.Random] = None
    ) -> str:
        result = await db.execute(select(Course.slug))
        slugs = list(result.scalars().all())
        if not slugs:
            raise NotFoundError(resource="course")
        return (rng or random).choice(slugs)


catalog_service = CatalogService()
