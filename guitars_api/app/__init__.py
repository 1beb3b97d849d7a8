"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: configuration and error handling in ``core``, the
durable list of names in ``store``, the collection logic in
``services`` and the HTTP routes in ``api/v1/endpoints``.  The
browser client lives in ``static`` and is served by the same app.
"""

from .main import app  # noqa: F401
