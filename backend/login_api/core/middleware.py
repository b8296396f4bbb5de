"""
App-level response header policy and last-resort error body.

uvicorn writes its own `server` header below the ASGI app, so it can
only be turned off at launch (`server_header=False` / `--no-server-header`).
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..models.auth import HttpResponse

log = logging.getLogger(__name__)

_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "*",
    "Access-Control-Allow-Headers": "*",
}
_FINGERPRINT_HEADERS = ("x-powered-by", "server")


def register_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def response_headers(request: Request, call_next):
        try:
            response = await call_next(request)
        except Exception:
            # e.g. a dependency failing while the login router is composed
            log.exception("unhandled error on %s %s", request.method, request.url.path)
            error = HttpResponse.server_error()
            response = JSONResponse(status_code=error.status_code, content=error.body)
        for header in _FINGERPRINT_HEADERS:
            if header in response.headers:
                del response.headers[header]
        response.headers.update(_CORS_HEADERS)
        return response
