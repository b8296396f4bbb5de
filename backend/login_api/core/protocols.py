"""
Collaborator capabilities consumed by the login use-case and router.

Each protocol is `runtime_checkable` so `check_dependencies` can verify
an injected object before any stage runs.
"""
from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Optional, Protocol, runtime_checkable

from ..models.user import UserRecord


@runtime_checkable
class LoadUserByEmailRepository(Protocol):
    async def load(self, email: str) -> Optional[UserRecord]: ...


@runtime_checkable
class UpdateAccessTokenRepository(Protocol):
    async def update(self, user_id: str, access_token: str) -> None: ...


@runtime_checkable
class Encrypter(Protocol):
    async def compare(self, value: str, hashed_value: str) -> bool: ...


@runtime_checkable
class TokenGenerator(Protocol):
    async def generate(self, user_id: str) -> str: ...


@runtime_checkable
class AuthUseCaseProtocol(Protocol):
    async def auth(self, email: str, password: str) -> Optional[str]: ...


@runtime_checkable
class EmailValidator(Protocol):
    def is_valid(self, email: str) -> bool: ...


@dataclass(frozen=True)
class DependencyCheck:
    invalid: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.invalid


def _satisfies(obj: Any, protocol: type) -> bool:
    if obj is None or not isinstance(obj, protocol):
        return False
    for member in (m for m in vars(protocol) if not m.startswith("_")):
        attr = getattr(obj, member, None)
        if not callable(attr):
            return False
        # async members must be implemented async: a dict's `update` is not a repository
        if inspect.iscoroutinefunction(getattr(protocol, member)) and not inspect.iscoroutinefunction(attr):
            return False
    return True


def check_dependencies(**collaborators: tuple[Any, type]) -> DependencyCheck:
    """
    Validate a whole collaborator set at once.

    Keyword = collaborator name, value = (object, protocol). An entry is
    invalid when the object is None, lacks a callable for a protocol
    member, or implements an async member synchronously.
    """
    invalid = [name for name, (obj, protocol) in collaborators.items() if not _satisfies(obj, protocol)]
    return DependencyCheck(invalid=tuple(invalid))
