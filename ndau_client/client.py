"""Minimal ndau node API client."""

from __future__ import annotations

import json
import logging
import uuid
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Tuple

import requests
from requests import PreparedRequest, RequestException

from .config import NdauConfig
from .errors import NdauStatusError, RequestBuildError, UnsupportedMethodError
from .models import AccountListReq, AccountListResp, AccountResp, CurrentPriceResp
from .transport import HttpClient

NOOP_LOGGER = logging.Logger("ndau_client.noop")
NOOP_LOGGER.disabled = True


def new_tracking_number() -> str:
    return str(uuid.uuid4())


def format_param(value: Any) -> str:
    """Render a parameter value the same way for equal logical values."""

    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _is_sequence(params: Any) -> bool:
    return isinstance(params, (list, tuple))


def build_request(method: str, endpoint: str, params: Any = None) -> PreparedRequest:
    """Encode ``params`` by shape and return a prepared request.

    Mappings become a query string (GET) or a form body (POST). Sequences are
    always POSTed as a JSON array whatever ``method`` says. Anything else is
    sent with no body.
    """

    method = method.upper()
    if isinstance(params, Mapping):
        query: List[Tuple[str, str]] = [
            (str(key), format_param(value)) for key, value in params.items()
        ]
        if not query:
            request = requests.Request(method, endpoint)
        elif method == "GET":
            request = requests.Request(method, endpoint, params=query)
        elif method == "POST":
            request = requests.Request(method, endpoint, data=query)
        else:
            raise UnsupportedMethodError(method)
    elif _is_sequence(params):
        try:
            body = json.dumps(list(params)).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise RequestBuildError(f"Failed to serialize post data: {exc}") from exc
        request = requests.Request("POST", endpoint, data=body)
    else:
        request = requests.Request(method, endpoint)

    try:
        return request.prepare()
    except (RequestException, ValueError) as exc:
        raise RequestBuildError(f"Failed to prepare request for {endpoint}: {exc}") from exc


class Ndau:
    """Node API handle: a transport, a configuration and a logger."""

    def __init__(
        self,
        client: HttpClient,
        config: NdauConfig,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.config = config
        self.client = client
        self.log = logger if logger is not None else NOOP_LOGGER
        self.log.info("New ndau client for %s", config.network)

    def get_data(
        self, api: str, params: Any = None, *, tracking_number: Optional[str] = None
    ) -> bytes:
        return self.dispatch("GET", api, params, tracking_number=tracking_number)

    def post_data(
        self, api: str, params: Any = None, *, tracking_number: Optional[str] = None
    ) -> bytes:
        return self.dispatch("POST", api, params, tracking_number=tracking_number)

    def dispatch(
        self,
        method: str,
        api: str,
        params: Any = None,
        *,
        tracking_number: Optional[str] = None,
    ) -> bytes:
        """Send ``method`` to ``node_api + api`` and return the raw body of a 200."""

        tracking_number = tracking_number or new_tracking_number()
        endpoint = self.config.node_api + api

        try:
            request = build_request(method, endpoint, params)
        except RequestBuildError as exc:
            self.log.error("%s | Failed to build a request object. Error %s", tracking_number, exc)
            raise
        if _is_sequence(params) and method.upper() != "POST":
            self.log.debug(
                "%s | Sequence parameters are always posted, ignoring method %s",
                tracking_number,
                method,
            )

        try:
            response = self.client.send(request)
        except Exception as exc:  # noqa: BLE001
            self.log.error(
                "%s | Failed to send request to %s. Error %s", tracking_number, endpoint, exc
            )
            raise

        with response:
            if response.status_code != 200:
                error = NdauStatusError(response.status_code, response.reason or "")
                self.log.error(
                    "%s | Failed to read from %s. Status code %d, Msg = %s",
                    tracking_number,
                    endpoint,
                    response.status_code,
                    error,
                )
                raise error
            try:
                body = response.content
            except Exception as exc:  # noqa: BLE001
                self.log.error(
                    "%s | Failed to read from %s. Error %s", tracking_number, endpoint, exc
                )
                raise
        return body

    # Convenience wrappers -------------------------------------------------

    def account_list(
        self, limit: Optional[int] = None, after: Optional[str] = None
    ) -> AccountListResp:
        query = AccountListReq(limit=limit or 0, after=after or "")
        return AccountListResp.model_validate_json(self.get_data("/account/list", query.to_params()))

    def accounts(self, addresses: Iterable[str]) -> AccountResp:
        return AccountResp.model_validate_json(self.post_data("/account/accounts", list(addresses)))

    def current_price(self) -> CurrentPriceResp:
        return CurrentPriceResp.model_validate_json(self.get_data("/price/current"))


def new(
    client: HttpClient, config: NdauConfig, logger: Optional[logging.Logger] = None
) -> Ndau:
    """Create a client handle; kept as the construction seam for callers."""

    return Ndau(client, config, logger)
