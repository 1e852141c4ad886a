"""
API package containing the HTTP routes.

``router.py`` exposes a single ``router`` holding the ordered route
table; ``middleware.py`` handles CORS preflight and the last‑resort
error envelope.
"""
