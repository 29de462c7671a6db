"""
Campus Web — Pydantic Schemas
===============================

View models handed to templates (catalog, faculty) and form models validated
on submission (login, registration). ORM objects never reach templates
directly, so nothing like a password hash can leak into a page.
"""
