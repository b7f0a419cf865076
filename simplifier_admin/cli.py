#!/usr/bin/env python3
"""Command line administration of Simplifier login methods.

Usage:
    python -m simplifier_admin.cli list
    python -m simplifier_admin.cli show BasicAdmin
    python -m simplifier_admin.cli apply --type UserCredentials --name BasicAdmin \\
        --username admin --password secret
    python -m simplifier_admin.cli oauthclients
"""
from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from simplifier_admin.config import load_settings
from simplifier_admin.core.loginmethod import LoginMethodError, LoginMethodTransformer, apply_login_method
from simplifier_admin.core.simplifier import (
    LoginMethodService,
    OAuth2ClientService,
    SimplifierClient,
    SimplifierError,
)

# argparse dest -> request parameter name
_APPLY_FIELDS = {
    "type": "loginMethodType",
    "name": "name",
    "description": "description",
    "source_type": "sourceType",
    "target_type": "targetType",
    "username": "username",
    "password": "password",
    "change_password": "changePassword",
    "token": "token",
    "change_token": "changeToken",
    "ticket": "ticket",
    "change_ticket": "changeTicket",
    "oauth2_client_name": "oauth2ClientName",
    "profile_key": "profileKey",
    "user_attribute_name": "userAttributeName",
    "user_attribute_category": "userAttributeCategory",
    "custom_header_name": "customHeaderName",
    "query_parameter_key": "queryParameterKey",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Simplifier login method administration")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd")

    sub.add_parser("list", help="List login methods")

    show = sub.add_parser("show", help="Show one login method")
    show.add_argument("name")

    ap = sub.add_parser("apply", help="Create or update a login method")
    ap.add_argument("--type", required=True, help="UserCredentials, Token, SingleSignOn or OAuth2")
    ap.add_argument("--name", required=True)
    ap.add_argument("--description", default="")
    ap.add_argument("--source-type")
    ap.add_argument("--target-type")
    ap.add_argument("--username")
    ap.add_argument("--password")
    ap.add_argument("--change-password", action="store_true")
    ap.add_argument("--token")
    ap.add_argument("--change-token", action="store_true")
    ap.add_argument("--ticket")
    ap.add_argument("--change-ticket", action="store_true")
    ap.add_argument("--oauth2-client-name")
    ap.add_argument("--profile-key")
    ap.add_argument("--user-attribute-name")
    ap.add_argument("--user-attribute-category")
    ap.add_argument("--custom-header-name")
    ap.add_argument("--query-parameter-key")

    sub.add_parser("oauthclients", help="List OAuth2 clients")
    return parser


def apply_params(args: argparse.Namespace) -> Dict[str, Any]:
    """Collect the apply arguments into camelCase request parameters, dropping unset ones."""
    params: Dict[str, Any] = {}
    for dest, key in _APPLY_FIELDS.items():
        value = getattr(args, dest, None)
        if value is None or value is False:
            continue
        params[key] = value
    return params


def run(args: argparse.Namespace, client: SimplifierClient) -> Any:
    """Execute a parsed command against a Simplifier client and return its result."""
    login_methods = LoginMethodService(client)
    oauth_clients = OAuth2ClientService(client)

    if args.cmd == "list":
        return LoginMethodTransformer.summarize(login_methods.list_login_methods())
    if args.cmd == "show":
        return LoginMethodTransformer.describe(login_methods.get_login_method(args.name))
    if args.cmd == "apply":
        return {"message": apply_login_method(apply_params(args), login_methods, oauth_clients)}
    if args.cmd == "oauthclients":
        clients = [entry.get("name") for entry in oauth_clients.list_oauth2_clients()]
        return {"oauthClients": clients, "totalCount": len(clients)}
    raise ValueError(f"Unknown command: {args.cmd}")


def _caption(args: argparse.Namespace) -> str:
    if args.cmd == "show":
        return f"get Login Method {args.name}"
    if args.cmd == "apply":
        return f"create or update Login Method {args.name}"
    return {"list": "list Login Methods", "oauthclients": "list OAuth2 Clients"}.get(args.cmd, args.cmd)


def main(argv: Optional[List[str]] = None, client: Optional[SimplifierClient] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.cmd:
        parser.print_help()
        return 0

    if client is None:
        try:
            cfg = load_settings()
        except RuntimeError as e:
            print(f"[config] Error: {e}", file=sys.stderr)
            return 2
        client = SimplifierClient(
            cfg.simplifier_base_url,
            token=cfg.simplifier_token or None,
            credentials_file=cfg.simplifier_credentials_file or None,
            timeout=cfg.request_timeout,
        )

    try:
        result = run(args, client)
    except (LoginMethodError, SimplifierError, ValueError) as e:
        print(json.dumps({"error": f"Tool {_caption(args)} failed: {e}"}), file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
