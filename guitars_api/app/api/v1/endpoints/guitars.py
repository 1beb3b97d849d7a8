"""
Guitar endpoints for API v1.

These routes expose list, create and delete for the guitar
collection.  Every entry in a listing carries ``link``, its canonical
address; a create answers with that address in the ``Location``
header so clients never have to build it themselves.

``POST /guitars`` serves two callers: the browser script sends JSON
and gets ``201``, while a plain HTML form post (no script) sends a
form-encoded body and is redirected back to the index page.  Both get
``400`` with the rejected name echoed when the guitar is refused.
"""

import json
import logging
from typing import Any, List, Tuple
from urllib.parse import parse_qsl

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import RedirectResponse
from pydantic import ValidationError as SchemaValidationError

from guitars_api.app.api.dependencies import get_guitar_service
from guitars_api.app.core.exceptions import NotFoundError
from guitars_api.app.schemas.guitar import Guitar, GuitarCreate, GuitarRead
from guitars_api.app.services.guitar_service import GuitarService

logger = logging.getLogger(__name__)

router = APIRouter()

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def _is_form_post(request: Request) -> bool:
    content_type = request.headers.get("content-type", "")
    return content_type.split(";")[0].strip().lower() == FORM_CONTENT_TYPE


async def _read_payload(request: Request, is_form: bool) -> Any:
    body = await request.body()
    if is_form:
        return dict(parse_qsl(body.decode("utf-8", errors="replace"), keep_blank_values=True))
    if not body:
        return {}
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None


def _parse_create(payload: Any, name_max_length: int) -> Tuple[str, bool]:
    """Return ``(name, request_valid)`` for a create payload.

    A payload that does not fit ``GuitarCreate`` is not an error here;
    its raw name (if any) is handed on with ``request_valid=False`` so
    the service rejects it and the response can echo it.
    """
    try:
        guitar_in = GuitarCreate.model_validate(
            payload, context={"name_max_length": name_max_length}
        )
    except SchemaValidationError:
        raw = payload.get("name") if isinstance(payload, dict) else None
        return (raw if isinstance(raw, str) else ""), False
    return guitar_in.name, True


@router.get("/guitars", response_model=List[GuitarRead])
async def list_guitars(
    service: GuitarService = Depends(get_guitar_service),
) -> List[GuitarRead]:
    """Return every guitar in display order, each with its ``link``."""
    return await service.list()


@router.get("/guitars/{name:path}", response_model=GuitarRead)
async def get_guitar(
    name: str,
    service: GuitarService = Depends(get_guitar_service),
) -> GuitarRead:
    """Retrieve a single guitar by name.

    Returns HTTP 404 if the guitar is not in the collection.
    """
    return await service.get(service.addressing.address_for(name))


@router.post(
    "/guitars",
    response_model=Guitar,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_303_SEE_OTHER: {"description": "Form post accepted, redirect to the index page"},
        status.HTTP_400_BAD_REQUEST: {"description": "Guitar rejected, submitted name echoed"},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": GuitarCreate.model_json_schema()},
                FORM_CONTENT_TYPE: {"schema": GuitarCreate.model_json_schema()},
            },
        }
    },
)
async def create_guitar(
    request: Request,
    response: Response,
    service: GuitarService = Depends(get_guitar_service),
):
    """Create a guitar and point ``Location`` at its canonical address."""
    is_form = _is_form_post(request)
    payload = await _read_payload(request, is_form)
    name, request_valid = _parse_create(payload, request.app.state.settings.name_max_length)

    guitar = await service.create(name, request_valid=request_valid)

    if is_form:
        return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)
    response.headers["Location"] = guitar.link
    return Guitar(name=guitar.name)


@router.delete("/guitars/{name:path}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_guitar(
    name: str,
    service: GuitarService = Depends(get_guitar_service),
) -> None:
    """Delete a guitar.

    Deleting a guitar that is not there is a no-op that still answers
    204, so repeating a delete is harmless.
    """
    address = service.addressing.address_for(name)
    try:
        await service.delete(address)
    except NotFoundError:
        logger.info("Guitar %s already absent, nothing to delete", address)
    return None
