# Services package init
"""
Campus Web — Services Layer
=============================

What:  Query and account logic sitting between routes (HTTP) and the database.
How:   Stateless service classes take an AsyncSession per call and return view
       models; a module-level singleton of each is imported by the routes.

Service Inventory:
    - CatalogService: course listing, course detail with sorted sections,
      department grouping, random course selection
    - FacultyService: sorted directory, profile lookup by slug
    - UserService: registration, bcrypt password checks, user listing
"""
