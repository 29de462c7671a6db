"""
Campus Web — Application Package Initializer
=============================================

Server-rendered campus site: course catalog, faculty directory, accounts.

Layers:
    ┌─────────────────────────────────────┐
    │  Middleware (sessions, locals, log) │  ← per-request ResponseContext
    ├─────────────────────────────────────┤
    │  Routes (page handlers)             │  ← HTTP + render_page()
    ├─────────────────────────────────────┤
    │  Services (catalog, faculty, users) │  ← queries, password checks
    ├─────────────────────────────────────┤
    │  Models & Schemas                   │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │  Database                           │  ← async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
