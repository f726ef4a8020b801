"""Transport seam between the dispatcher and the network."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

import requests
from requests import PreparedRequest, Response


@runtime_checkable
class HttpClient(Protocol):
    """Anything that can send a prepared request.

    ``SessionTransport`` is the production implementation; it streams so the
    body is read only after the status check. Tests substitute a fake that
    records requests and returns canned responses.
    """

    def send(self, request: PreparedRequest) -> Response:
        ...


class SessionTransport:
    """``requests.Session`` wrapper that owns an optional timeout."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.session = session or requests.Session()
        self.timeout = timeout

    def send(self, request: PreparedRequest) -> Response:
        # Body stays unread until the caller checks the status.
        return self.session.send(request, timeout=self.timeout, stream=True)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "SessionTransport":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
