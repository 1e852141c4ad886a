"""
Top‑level package for the KMCA site API.

This file makes ``kmca_api`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``kmca_api.app.main``.  The package provides no public exports; all
functionality lives in submodules under ``app``.
"""

__all__ = []
