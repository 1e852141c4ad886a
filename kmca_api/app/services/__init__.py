"""
Service layer abstraction.

Each service encapsulates business logic for a resource.  Services
talk to the JSON file store through ``get_all``/``replace_all`` so the
flat files could be swapped for an embedded database without changing
API handlers.
"""
