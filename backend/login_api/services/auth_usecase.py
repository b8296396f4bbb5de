"""
Login use-case:
• auth()  – email + password → access token, or None for bad credentials

Holds no HTTP knowledge; the router in ..routers.login_router maps the
outcome to a response. Collaborator errors propagate unchanged.
"""
from __future__ import annotations

import logging
from typing import Optional

from ..core.errors import DependencyError, MissingParamError
from ..core.protocols import (
    DependencyCheck,
    Encrypter,
    LoadUserByEmailRepository,
    TokenGenerator,
    UpdateAccessTokenRepository,
    check_dependencies,
)

log = logging.getLogger(__name__)


class AuthUseCase:
    def __init__(
        self,
        *,
        load_user_by_email_repository: Optional[LoadUserByEmailRepository] = None,
        update_access_token_repository: Optional[UpdateAccessTokenRepository] = None,
        encrypter: Optional[Encrypter] = None,
        token_generator: Optional[TokenGenerator] = None,
    ) -> None:
        self.load_user_by_email_repository = load_user_by_email_repository
        self.update_access_token_repository = update_access_token_repository
        self.encrypter = encrypter
        self.token_generator = token_generator

    def check_dependencies(self) -> DependencyCheck:
        return check_dependencies(
            load_user_by_email_repository=(self.load_user_by_email_repository, LoadUserByEmailRepository),
            update_access_token_repository=(self.update_access_token_repository, UpdateAccessTokenRepository),
            encrypter=(self.encrypter, Encrypter),
            token_generator=(self.token_generator, TokenGenerator),
        )

    async def auth(self, email: Optional[str] = None, password: Optional[str] = None) -> Optional[str]:
        if not email:
            raise MissingParamError("email")
        if not password:
            raise MissingParamError("password")

        deps = self.check_dependencies()
        if not deps.ok:
            raise DependencyError(deps.invalid)

        user = await self.load_user_by_email_repository.load(email)
        if user is None:
            log.debug("login rejected: unknown email")
            return None
        if not await self.encrypter.compare(password, user.hashed_password):
            log.debug("login rejected: password mismatch for user %s", user.id)
            return None

        access_token = await self.token_generator.generate(user.id)
        await self.update_access_token_repository.update(user.id, access_token)
        log.info("user %s authenticated", user.id)
        return access_token
