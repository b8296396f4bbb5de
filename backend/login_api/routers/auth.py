# backend/login_api/routers/auth.py
#
# Authentication routes:
#   • POST /login – JSON body {email, password} → {access_token}
#
# The handler only adapts the Starlette request; every decision lives in
# LoginRouter (routers/login_router.py) so it can be tested without HTTP.

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ..models.auth import ErrorBody, LoginRequest, Token
from .adapter import adapt_route
from .composer import get_login_router
from .login_router import LoginRouter

router = APIRouter(tags=["auth"])


# ────────────────────────────── login ────────────────────────────────
@router.post(
    "/login",
    response_model=Token,
    responses={400: {"model": ErrorBody}, 401: {"model": ErrorBody}, 500: {"model": ErrorBody}},
    summary="Email/password login",
    openapi_extra={"requestBody": {"content": {"application/json": {"schema": LoginRequest.model_json_schema()}}}},
)
async def login(request: Request, login_router: LoginRouter = Depends(get_login_router)) -> JSONResponse:
    """
    Expects a **JSON** body with `email` and `password`.
    On success answers `{"access_token": ...}` – snake_case, not `accessToken`.

    Body validation is done by LoginRouter, not by FastAPI, so a bad
    payload answers with the same `{"error": ...}` shape as every other
    failure instead of a 422.
    """
    return await adapt_route(login_router, request)
