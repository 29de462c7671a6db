# Middleware package init
"""
Campus Web — Middleware Package
=================================

Middleware Chain (outermost first):
    Request → [Logging] → [Session] → [Response Locals] → Router
                                                         → route-group deps
                                                         → endpoint

    1. Logging: times the whole request, including error pages
    2. Session: decodes the signed cookie into request.session
    3. Response Locals: builds the per-request ResponseContext, which reads the
       session to decide is_logged_in

Starlette runs middleware in reverse order of add_middleware() calls, so
create_app() adds them innermost first.
"""
