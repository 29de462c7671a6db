"""
Campus Web — ORM Models
=========================

Importing this package registers every table with Base.metadata, which Alembic
and the test fixtures rely on.
"""

from campusweb.models.catalog import Course, Department, Section
from campusweb.models.faculty import Faculty
from campusweb.models.user import User

__all__ = ["Course", "Department", "Faculty", "Section", "User"]
