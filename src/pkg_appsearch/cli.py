# src/pkg_appsearch/cli.py

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Any, Sequence

from .codec import jwt
from .domain.constants import ApiKeyField
from .domain.exceptions import ConfigurationError, TokenError

logger = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="appsearch-token",
        description="Sign and verify App Search signed search keys",
    )
    parser.add_argument(
        "--secret",
        help="Signing secret (the API key). Defaults to env APPSEARCH_API_KEY.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug output to stderr.",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    sign = sub.add_parser("sign", help="Sign a JSON payload")
    sign.add_argument(
        "--payload",
        "-p",
        default="{}",
        help="JSON object with the search options to enforce.",
    )
    key_ref = sign.add_mutually_exclusive_group()
    key_ref.add_argument(
        "--api-key-name",
        help="Inject api_key_name into the payload.",
    )
    key_ref.add_argument(
        "--api-key-id",
        help="Inject api_key_id into the payload.",
    )

    verify = sub.add_parser("verify", help="Verify a token and print its payload")
    verify.add_argument("token")

    return parser.parse_args(args=argv)


def _secret(args: argparse.Namespace) -> str:
    secret = args.secret if args.secret is not None else os.getenv("APPSEARCH_API_KEY")
    if secret is None:
        raise ConfigurationError("Missing secret: pass --secret or set APPSEARCH_API_KEY")
    return secret


def _sign(args: argparse.Namespace) -> dict[str, Any]:
    try:
        payload = json.loads(args.payload)
    except ValueError as exc:
        raise ConfigurationError(f"--payload is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise ConfigurationError("--payload must be a JSON object")

    if args.api_key_name is not None:
        payload[ApiKeyField.NAME.value] = args.api_key_name
    elif args.api_key_id is not None:
        payload[ApiKeyField.ID.value] = args.api_key_id

    return {"token": jwt.sign(_secret(args), payload)}


def _verify(args: argparse.Namespace) -> dict[str, Any]:
    return {"payload": jwt.verify(_secret(args), args.token)}


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    handler = _sign if args.command == "sign" else _verify
    try:
        result = handler(args)
    except (TokenError, ConfigurationError) as exc:
        logger.debug("%s failed: %s", args.command, exc)
        json.dump({"ok": False, "error": str(exc)}, sys.stdout, indent=2)
        sys.stdout.write("\n")
        return 1

    json.dump({"ok": True, **result}, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
