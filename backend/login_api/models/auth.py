"""
Request/response models for the login endpoint.

`HttpRequest` / `HttpResponse` are the framework-free shapes the
LoginRouter works with; `LoginRequest` / `Token` only document the wire
format in the OpenAPI schema.
"""
from typing import Any, Optional

from pydantic import BaseModel

from ..core.errors import LoginApiError, ServerError, UnauthorizedError


class LoginRequest(BaseModel):
    """
    Payload expected by POST /api/login
    """
    email: str
    password: str


class Token(BaseModel):
    access_token: str


class ErrorBody(BaseModel):
    error: str


class HttpRequest(BaseModel):
    body: Optional[dict[str, Any]] = None


class HttpResponse(BaseModel):
    status_code: int
    body: dict[str, Any]

    @classmethod
    def ok(cls, body: dict[str, Any]) -> "HttpResponse":
        return cls(status_code=200, body=body)

    @classmethod
    def bad_request(cls, error: LoginApiError) -> "HttpResponse":
        return cls(status_code=400, body={"error": error.message})

    @classmethod
    def unauthorized(cls) -> "HttpResponse":
        return cls(status_code=401, body={"error": UnauthorizedError().message})

    @classmethod
    def server_error(cls) -> "HttpResponse":
        return cls(status_code=500, body={"error": ServerError().message})
