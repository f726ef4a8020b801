"""Exceptions raised by the ndau node client."""

from __future__ import annotations

from dataclasses import dataclass


class NdauError(RuntimeError):
    """Base class for client failures."""


class RequestBuildError(NdauError):
    """Raised when a request object cannot be constructed."""


class UnsupportedMethodError(RequestBuildError):
    """Raised when mapping parameters are paired with a verb other than GET or POST."""

    def __init__(self, method: str) -> None:
        super().__init__(f"Unsupported method for query parameters: {method}")
        self.method = method

    def __reduce__(self):
        return (self.__class__, (self.method,))


@dataclass(eq=False)
class NdauStatusError(NdauError):
    status_code: int
    reason: str = ""

    def __post_init__(self) -> None:
        super().__init__(self.status)

    def __str__(self) -> str:  # noqa: D401
        return self.status

    def __reduce__(self):
        return (self.__class__, (self.status_code, self.reason))

    @property
    def status(self) -> str:
        return f"{self.status_code} {self.reason}".strip()
