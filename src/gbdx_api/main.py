"""
Command line entry point for the GBDX API client.

Runs single API calls and prints their JSON payload.
"""

import argparse
import json
import sys
from typing import Any, List, Optional

import requests  # type: ignore

from .core import Config, setup_logger, LoggerContext
from .api import GBDXClient, APIError


def _parse_filters(pairs: List[str]) -> dict:
    """Turn field=value pairs into a filter mapping, keeping argument order."""
    filters = {}
    for pair in pairs:
        field, sep, value = pair.partition("=")
        if not sep or not field:
            raise ValueError(f"Invalid filter '{pair}'. Use field=value")
        filters[field] = value
    return filters


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gbdx-api",
        description="GBDX platform API client"
    )
    parser.add_argument("--config", type=str, default=None, help="Path to configuration file")
    parser.add_argument("--token", type=str, default=None, help="Bearer token (default: GBDX_TOKEN)")
    parser.add_argument("--log-level", type=str, default="WARNING", help="Logging level")

    subparsers = parser.add_subparsers(dest="command", required=True)

    token_parser = subparsers.add_parser("token", help="Exchange username/password for a token")
    token_parser.add_argument("--username", type=str, default=None)
    token_parser.add_argument("--password", type=str, default=None)

    subparsers.add_parser("me", help="Show the current user")

    users_parser = subparsers.add_parser("users", help="Search users")
    users_parser.add_argument("filters", nargs="*", help="field=value filters")
    users_parser.add_argument("--page", type=int, default=1)

    accounts_parser = subparsers.add_parser("accounts", help="Search accounts or get one by ID")
    accounts_parser.add_argument("filters", nargs="*", help="field=value filters")
    accounts_parser.add_argument("--id", dest="account_id", type=str, default=None)
    accounts_parser.add_argument("--page", type=int, default=1)

    subparsers.add_parser("plans", help="List billing plans")

    return parser


def run(args: argparse.Namespace, client: GBDXClient, config: Config) -> Any:
    """Dispatch a parsed command to the client."""
    if args.command == "token":
        username = args.username or config.auth_username
        password = args.password or config.auth_password
        if not username or not password:
            raise ValueError("Username and password are required (flags or GBDX_USERNAME/GBDX_PASSWORD)")
        return client.auth.validate_password(username, password)

    if not client.credential.token:
        raise ValueError("A token is required (--token or GBDX_TOKEN)")

    if args.command == "me":
        return client.users.me()
    if args.command == "users":
        return client.users.search(_parse_filters(args.filters), page=args.page)
    if args.command == "accounts":
        if args.account_id:
            return client.accounts.get(args.account_id)
        return client.accounts.search(_parse_filters(args.filters), page=args.page)
    if args.command == "plans":
        return client.billing.fetch_plans()

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    logger = setup_logger(log_level=args.log_level)

    try:
        config = Config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    with GBDXClient.from_config(config, token=args.token, logger=logger) as client:
        try:
            with LoggerContext(logger, f"{args.command} command"):
                result = run(args, client, config)
        except APIError as e:
            print(json.dumps(e.to_dict(), indent=2), file=sys.stderr)
            return 1
        except (ValueError, requests.exceptions.RequestException) as e:
            print(f"Request failed: {e}", file=sys.stderr)
            return 1

    if isinstance(result, str):
        print(result)
    else:
        print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
