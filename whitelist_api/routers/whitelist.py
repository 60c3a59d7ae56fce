"""Whitelist endpoints.

Exposes:
- POST   /whitelist?username=<name>: add a player to the server whitelist
- DELETE /whitelist?username=<name>: remove a player from the whitelist
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from ..core.models_io import APIResponse, WhitelistAction
from ..pterodactyl.client import PterodactylClient, PterodactylError

logger = logging.getLogger("uvicorn.error")

router = APIRouter()

ADD_USAGE = "Provide ONE username to add to the whitelist"
REMOVE_USAGE = "Provide ONE username to remove from the whitelist"


def get_client(request: Request) -> PterodactylClient:
    return request.app.state.pterodactyl


def _single_username(request: Request) -> Optional[str]:
    """The `username` query value if it was given exactly once and is non-empty."""
    values = request.query_params.getlist("username")
    if len(values) != 1 or not values[0]:
        return None
    return values[0]


def _json(status_code: int, message: str, error: str = "") -> Response:
    # The status stands even if the body can't be rendered
    try:
        return JSONResponse(status_code=status_code, content=APIResponse(message=message, error=error).model_dump())
    except (TypeError, ValueError):
        logger.exception("Failed to marshal api response")
        return Response(status_code=status_code)


@router.post("/whitelist", status_code=201, response_model=APIResponse)
def add_to_whitelist(request: Request, client: PterodactylClient = Depends(get_client)):
    username = _single_username(request)
    if username is None:
        return _json(400, ADD_USAGE, ADD_USAGE)

    try:
        client.update_whitelist(username, WhitelistAction.ADD.value)
    except PterodactylError as e:
        return _json(400, "Failed to whitelist user", str(e))

    return _json(201, "success")


@router.delete("/whitelist", status_code=204, response_class=Response)
def remove_from_whitelist(request: Request, client: PterodactylClient = Depends(get_client)):
    username = _single_username(request)
    if username is None:
        return _json(400, REMOVE_USAGE, REMOVE_USAGE)

    try:
        client.update_whitelist(username, WhitelistAction.REMOVE.value)
    except PterodactylError as e:
        return _json(400, "Failed to remove whitelisted user", str(e))

    return Response(status_code=204)
