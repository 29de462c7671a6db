# Routes package init
"""
Campus Web — Page Routes Package
==================================

Route Inventory:
    - pages.py:         GET  /, /about
    - catalog.py:       GET  /catalog, /catalog/random, /catalog/{slug}
                        GET  /departments
    - faculty.py:       GET  /faculty, /faculty/{slug}
    - registration.py:  GET/POST /register, GET /register/list
    - auth.py:          GET/POST /login, GET /logout, GET /dashboard
    - health.py:        GET  /health (JSON)

Section stylesheets are attached per router with section_assets(); handlers
stay thin and delegate queries to the services.
"""
