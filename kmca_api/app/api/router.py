"""
Top‑level API router.

The route table is matched in registration order and the first
method+path match wins.  Within each endpoint module, sub-resource
routes (``/views``, ``/view``, ``/replies``) are declared before the
generic ``/{id}`` route.  Anything that matches no rule is answered
with the unsupported-path 404 (see ``core.errors``).
"""

from fastapi import APIRouter

from .endpoints import cases, contact

router = APIRouter()

router.include_router(cases.router, prefix="/cases", tags=["cases"])
router.include_router(contact.router, prefix="/contact", tags=["contact"])
