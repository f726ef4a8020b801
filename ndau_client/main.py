"""Command line entrypoint."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, List, Optional, Sequence, Tuple

from pydantic import BaseModel, ValidationError
from requests import RequestException

from .client import Ndau, new
from .config import load_config
from .errors import NdauError
from .transport import SessionTransport

LOGGER = logging.getLogger(__name__)


def _resolve_log_level(value: str) -> int:
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {value!r}")
    return level


def _param(value: str) -> Tuple[str, str]:
    key, sep, raw = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {value!r}")
    return key, raw


def _json_array(value: str) -> List[Any]:
    try:
        data = json.loads(value)
    except json.JSONDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise argparse.ArgumentTypeError("expected a JSON array")
    return data


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ndau-client", description="ndau node API client")
    parser.add_argument("--healthcheck", action="store_true", help="Load configuration and exit")
    commands = parser.add_subparsers(dest="command")

    for verb in ("get", "post"):
        raw = commands.add_parser(verb, help=f"{verb.upper()} a node path and print the raw body")
        raw.add_argument("path", help="Path appended to NDAU_NODE_API, e.g. /price/current")
        raw.add_argument(
            "-p",
            "--param",
            dest="params",
            action="append",
            type=_param,
            default=[],
            metavar="KEY=VALUE",
        )
        if verb == "post":
            raw.add_argument("--json", dest="json_array", type=_json_array, help="JSON array body")

    commands.add_parser("price", help="Show the current price summary")

    listing = commands.add_parser("accounts-list", help="List account addresses")
    listing.add_argument("--limit", type=int)
    listing.add_argument("--after")

    accounts = commands.add_parser("accounts", help="Show account data for addresses")
    accounts.add_argument("addresses", nargs="+")
    return parser


def _write(data: bytes) -> None:
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.write(b"\n")
    sys.stdout.flush()


def _run(client: Ndau, args: argparse.Namespace) -> None:
    if args.command in ("get", "post"):
        params: Any = dict(args.params) or None
        if args.command == "post" and args.json_array is not None:
            params = args.json_array
        _write(client.dispatch(args.command.upper(), args.path, params))
        return

    result: BaseModel
    if args.command == "price":
        result = client.current_price()
    elif args.command == "accounts-list":
        result = client.account_list(limit=args.limit, after=args.after)
    else:
        result = client.accounts(args.addresses)
    _write(result.model_dump_json(by_alias=True).encode("utf-8"))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "json_array", None) is not None and args.params:
        parser.error("--json cannot be combined with -p/--param")

    config = load_config()
    logging.basicConfig(
        level=_resolve_log_level(config.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.healthcheck:
        LOGGER.info("Configuration loaded for %s (%s)", config.network, config.node_api)
        return 0
    if not args.command:
        parser.print_help()
        return 2

    with SessionTransport(timeout=config.timeout) as transport:
        client = new(transport, config, logging.getLogger("ndau_client"))
        try:
            _run(client, args)
        except (NdauError, RequestException, ValidationError) as exc:
            LOGGER.error("Request failed: %s", exc)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
