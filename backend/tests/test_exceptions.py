"""Campus Web — Exception Hierarchy Tests."""

import campusweb.exceptions as exceptions
from campusweb.exceptions import (
    AuthenticationRequiredError,
    CampusError,
    DatabaseError,
    NotFoundError,
)


def test_status_codes():
    assert CampusError().status_code == 500
    assert NotFoundError().status_code == 404
    assert DatabaseError().status_code == 500
    assert AuthenticationRequiredError().status_code == 401


def test_hierarchy_members():
    """Every error defined here has a raiser and a handler."""
    defined = {
        name
        for name, value in vars(exceptions).items()
        if isinstance(value, type) and issubclass(value, CampusError)
    }
    assert defined == {
        "CampusError",
        "NotFoundError",
        "DatabaseError",
        "AuthenticationRequiredError",
    }


def test_not_found_message():
    assert NotFoundError(resource="course", resource_id="cs999").message == "Course cs999 not found"
    assert NotFoundError(resource="course").message == "The requested course was not found"
