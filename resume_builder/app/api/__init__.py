"""HTTP API of the resume builder.

Routers live in ``api.routes``; the functions they call (resume and user
CRUD, validation, slug assignment, serialization) live in
``api.routes.route_logic`` so they can be used and tested without HTTP.
"""
