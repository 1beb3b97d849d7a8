"""
FastAPI dependencies shared by the endpoints.
"""

from fastapi import Request

from guitars_api.app.services.guitar_service import GuitarService


def get_guitar_service(request: Request) -> GuitarService:
    """Return the service instance owned by the running application."""
    return request.app.state.guitar_service
