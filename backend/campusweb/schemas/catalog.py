"""
Campus Web — Catalog & Faculty View Models
============================================

What:  Flattened shapes the catalog and faculty templates render.
How:   Built field by field in the services from joined ORM rows.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class CourseSummary(BaseModel):
    """One row of the catalog listing or a department group."""
    slug: str
    course_code: str
    name: str
    credit_hours: int
    department: Optional[str] = None
    department_code: Optional[str] = None


class SectionView(BaseModel):
    """A scheduled section joined with its course, faculty and department."""
    id: int
    time: str
    room: str
    course_slug: str
    course_code: str
    course_name: str
    description: str = ""
    credit_hours: int
    professor: str
    professor_slug: str
    professor_title: str
    department: str
    department_code: str


class CourseDetail(BaseModel):
    slug: str
    course_code: str
    name: str
    description: str
    credit_hours: int
    department: str
    department_code: str
    sections: List[SectionView] = Field(default_factory=list)


class DepartmentGroup(BaseModel):
    """Courses grouped under their department for the departments page."""
    department: str
    department_code: str
    courses: List[CourseSummary] = Field(default_factory=list)


class FacultyView(BaseModel):
    id: int
    slug: str
    first_name: str
    last_name: str
    name: str
    title: str
    office: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    gender: Optional[str] = None
    department: str
    department_code: str
