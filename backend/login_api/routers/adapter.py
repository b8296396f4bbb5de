"""
Bridge between Starlette requests and the framework-free routers.
"""
import json
import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from ..models.auth import HttpRequest
from .login_router import LoginRouter

log = logging.getLogger(__name__)


async def to_http_request(request: Request) -> HttpRequest:
    """A missing, unparsable or non-object JSON body becomes `body=None`."""
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        log.debug("request body is not valid JSON")
        return HttpRequest()
    return HttpRequest(body=body if isinstance(body, dict) else None)


async def adapt_route(router: LoginRouter, request: Request) -> JSONResponse:
    http_response = await router.route(await to_http_request(request))
    return JSONResponse(status_code=http_response.status_code, content=http_response.body)
