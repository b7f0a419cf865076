"""Login method and OAuth2 client endpoints.

All business logic lives in simplifier_admin.core; these routes only parse
the request, call the core, and wrap the outcome in the result envelope.
"""
from __future__ import annotations
import logging

from flask import Blueprint, current_app, request
from werkzeug.exceptions import BadRequest

from simplifier_admin.api.errors import wrap_result
from simplifier_admin.core.loginmethod import LoginMethodTransformer, apply_login_method
from simplifier_admin.core.simplifier import LoginMethodService, OAuth2ClientService

bp = Blueprint("loginmethods", __name__)

JSON_MAX_SIZE_BYTES = 65536  # 64 KB

logger = logging.getLogger(__name__)


def _services() -> tuple[LoginMethodService, OAuth2ClientService]:
    client = current_app.config["SIMPLIFIER_CLIENT"]
    return LoginMethodService(client), OAuth2ClientService(client)


@bp.route("/loginmethods", methods=["GET"])
def list_login_methods():
    """List all login methods."""
    login_methods, _ = _services()
    return wrap_result(
        "list Login Methods",
        lambda: LoginMethodTransformer.summarize(login_methods.list_login_methods()),
    )


@bp.route("/loginmethods/<name>", methods=["GET"])
def get_login_method(name: str):
    """Return the detail view of one login method."""
    login_methods, _ = _services()
    return wrap_result(
        f"get Login Method {name}",
        lambda: LoginMethodTransformer.describe(login_methods.get_login_method(name)),
    )


@bp.route("/loginmethods", methods=["PUT"])
def upsert_login_method():
    """Create or update a login method from a flat JSON request."""
    if request.content_length and request.content_length > JSON_MAX_SIZE_BYTES:
        return {"error": f"Request body exceeds {JSON_MAX_SIZE_BYTES} bytes"}, 413
    try:
        params = request.get_json(force=True)
    except BadRequest:
        return {"error": "Request body must be valid JSON"}, 400
    if not isinstance(params, dict):
        return {"error": "Request body must be a JSON object"}, 400

    login_methods, oauth_clients = _services()
    logger.info("Login method upsert requested: name=%s type=%s", params.get("name"), params.get("loginMethodType"))
    return wrap_result(
        f"create or update Login Method {params.get('name')}",
        lambda: {"message": apply_login_method(params, login_methods, oauth_clients)},
    )


@bp.route("/oauthclients", methods=["GET"])
def list_oauth_clients():
    """List the OAuth2 clients usable as oauth2ClientName."""
    _, oauth_clients = _services()

    def _list():
        clients = [
            {
                "name": entry.get("name"),
                "description": entry.get("description"),
                "mechanism": entry.get("mechanism"),
                "hasIcon": entry.get("hasIcon"),
            }
            for entry in oauth_clients.list_oauth2_clients()
        ]
        return {"oauthClients": clients, "totalCount": len(clients)}

    return wrap_result("list OAuth2 Clients", _list)
