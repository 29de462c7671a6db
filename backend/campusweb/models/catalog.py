"""
Campus Web — Catalog SQLAlchemy Models
========================================

What:  ORM models for the `departments`, `courses` and `catalog` tables.
How:   A catalog row is one scheduled section of a course, joined to the
       faculty member teaching it by slug.

Relationships:
    Department 1 ── * Course 1 ── * Section * ── 1 Faculty

Relationships are never lazy-loaded under the async session; services pass
selectinload()/joinedload() options explicitly.
"""

from typing import TYPE_CHECKING, List

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from campusweb.database import Base

if TYPE_CHECKING:
    from campusweb.models.faculty import Faculty


class Department(Base):
    __tablename__ = "departments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    code: Mapped[str] = mapped_column(String(10), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    courses: Mapped[List["Course"]] = relationship(back_populates="department")
    faculty: Mapped[List["Faculty"]] = relationship(back_populates="department")

    def __repr__(self) -> str:
        return f"<Department(code='{self.code}', name='{self.name}')>"


class Course(Base):
    """A course offered by a department, addressed in URLs by its slug."""

    __tablename__ = "courses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    slug: Mapped[str] = mapped_column(String(50), unique=True, nullable=False, index=True)
    course_code: Mapped[str] = mapped_column(String(20), nullable=False)
    name: Mapped[str] = mapped_column(String(150), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    credit_hours: Mapped[int] = mapped_column(Integer, nullable=False, default=3)
    department_id: Mapped[int] = mapped_column(ForeignKey("departments.id"), nullable=False)

    department: Mapped[Department] = relationship(back_populates="courses")
    sections: Mapped[List["Section"]] = relationship(back_populates="course")

    def __repr__(self) -> str:
        return f"<Course(slug='{self.slug}', course_code='{self.course_code}')>"


class Section(Base):
    """
    One scheduled offering of a course.

    `time` is free text such as "Mon Wed Fri 8:00-8:50"; the catalog service
    sorts on the first H:MM it contains.
    """

    __tablename__ = "catalog"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    course_slug: Mapped[str] = mapped_column(ForeignKey("courses.slug"), nullable=False)
    faculty_slug: Mapped[str] = mapped_column(ForeignKey("faculty.slug"), nullable=False)
    time: Mapped[str] = mapped_column(String(100), nullable=False)
    room: Mapped[str] = mapped_column(String(50), nullable=False)

    course: Mapped[Course] = relationship(back_populates="sections")
    faculty: Mapped["Faculty"] = relationship(back_populates="sections")

    def __repr__(self) -> str:
        return f"<Section(course='{self.course_slug}', time='{self.time}', room='{self.room}')>"
