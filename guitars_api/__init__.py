"""
Top‑level package for the Guitars API.

This file makes ``guitars_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``guitars_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
