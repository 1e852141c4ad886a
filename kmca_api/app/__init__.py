"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each resource (cases, contact entries) has its own
schemas, service and endpoint module; the endpoint routers are
collected in ``api/router.py`` under the ``/api`` prefix.
"""

from .main import app  # noqa: F401
