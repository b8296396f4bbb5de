"""
LoginRouter – framework-free request adapter for POST /api/login.

Takes an `HttpRequest`, drives the auth use-case and always answers
with an `HttpResponse`. This is the only place where internal faults
are caught; their detail goes to the log, never to the response body.
"""
from __future__ import annotations

import logging
from typing import Optional

from ..core.errors import InvalidParamError, MissingParamError
from ..core.protocols import AuthUseCaseProtocol, DependencyCheck, EmailValidator, check_dependencies
from ..models.auth import HttpRequest, HttpResponse

log = logging.getLogger(__name__)


class LoginRouter:
    def __init__(
        self,
        *,
        auth_use_case: Optional[AuthUseCaseProtocol] = None,
        email_validator: Optional[EmailValidator] = None,
    ) -> None:
        self.auth_use_case = auth_use_case
        self.email_validator = email_validator

    def check_dependencies(self) -> DependencyCheck:
        return check_dependencies(
            auth_use_case=(self.auth_use_case, AuthUseCaseProtocol),
            email_validator=(self.email_validator, EmailValidator),
        )

    async def route(self, http_request: Optional[HttpRequest] = None) -> HttpResponse:
        if http_request is None or http_request.body is None:
            log.error("login request without body")
            return HttpResponse.server_error()

        email = http_request.body.get("email")
        password = http_request.body.get("password")
        if not email:
            return HttpResponse.bad_request(MissingParamError("email"))
        if not password:
            return HttpResponse.bad_request(MissingParamError("password"))

        deps = self.check_dependencies()
        if not deps.ok:
            log.error("login router misconfigured: %s", ", ".join(deps.invalid))
            return HttpResponse.server_error()

        try:
            email_ok = self.email_validator.is_valid(email)
        except Exception:
            log.exception("email validation failed")
            return HttpResponse.server_error()
        if not email_ok:
            return HttpResponse.bad_request(InvalidParamError("email"))

        try:
            access_token = await self.auth_use_case.auth(email, password)
        except Exception:
            log.exception("authentication failed")
            return HttpResponse.server_error()

        if not access_token:
            return HttpResponse.unauthorized()
        return HttpResponse.ok({"access_token": access_token})
