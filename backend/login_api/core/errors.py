"""
Error types shared by the use-case and the HTTP adapter.

Only the adapter turns these into status codes; everything below it
raises and lets the caller decide.
"""

from typing import Iterable


class LoginApiError(Exception):
    """Base class – `message` is what ends up in a response body."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingParamError(LoginApiError):
    def __init__(self, param_name: str) -> None:
        super().__init__(f"Missing param: {param_name}")
        self.param_name = param_name


class InvalidParamError(LoginApiError):
    def __init__(self, param_name: str) -> None:
        super().__init__(f"Invalid param: {param_name}")
        self.param_name = param_name


class DependencyError(LoginApiError):
    """A collaborator is missing or does not expose the expected method."""

    def __init__(self, names: Iterable[str]) -> None:
        self.names = tuple(names)
        super().__init__(f"Invalid dependencies: {', '.join(self.names)}")


class ServerError(LoginApiError):
    def __init__(self) -> None:
        super().__init__("Internal error")


class UnauthorizedError(LoginApiError):
    def __init__(self) -> None:
        super().__init__("Unauthorized")
