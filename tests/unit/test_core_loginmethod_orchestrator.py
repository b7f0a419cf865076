"""Unit tests for the login method create-or-update orchestration."""
import pytest

from simplifier_admin.core.loginmethod import (
    ClientReferenceError,
    LoginMethodFamily,
    LoginMethodOrchestrator,
    LoginMethodRequest,
    MissingFieldError,
    UnsupportedVariantError,
    apply_login_method,
    probe_login_method,
)
from simplifier_admin.core.simplifier import LoginMethodNotFoundError, SimplifierAPIError


EXISTING = {"name": "BasicAdmin", "source": 1, "target": 0}


def committed_payload(service, method):
    call = getattr(service, method).call_args
    return call.args[-1]


# ─────────────────────────────────────────────────────────────────────────────
# Credential create / update
# ─────────────────────────────────────────────────────────────────────────────
def test_credential_create_without_rotation_flag(login_methods, oauth_clients):
    message = apply_login_method(
        {"loginMethodType": "UserCredentials", "name": "BasicAdmin", "username": "admin", "password": "p1"},
        login_methods,
        oauth_clients,
    )

    assert message == "Login method created"
    login_methods.update_login_method.assert_not_called()
    payload = committed_payload(login_methods, "create_login_method")
    assert payload == {
        "name": "BasicAdmin",
        "description": "",
        "loginMethodType": "UserCredentials",
        "source": 1,
        "target": 0,
        "sourceConfiguration": {"username": "admin", "password": "p1"},
    }
    oauth_clients.list_oauth2_clients.assert_not_called()


def test_credential_update_with_rotation_flag(login_methods, oauth_clients):
    login_methods.get_login_method.side_effect = None
    login_methods.get_login_method.return_value = EXISTING

    message = apply_login_method(
        {
            "loginMethodType": "UserCredentials",
            "name": "BasicAdmin",
            "username": "admin",
            "password": "p1",
            "changePassword": True,
        },
        login_methods,
        oauth_clients,
    )

    assert message == "Login method updated"
    login_methods.create_login_method.assert_not_called()
    name, payload = login_methods.update_login_method.call_args.args
    assert name == "BasicAdmin"
    assert payload["sourceConfiguration"] == {"username": "admin", "password": "p1", "changePassword": True}


def test_update_without_flag_sends_false(login_methods, oauth_clients):
    login_methods.get_login_method.side_effect = None
    login_methods.get_login_method.return_value = EXISTING

    apply_login_method(
        {"loginMethodType": "Token", "name": "Bearer", "sourceType": "Provided", "token": "abc"},
        login_methods,
        oauth_clients,
    )

    payload = committed_payload(login_methods, "update_login_method")
    assert payload["sourceConfiguration"] == {"token": "abc", "changeToken": False}


# ─────────────────────────────────────────────────────────────────────────────
# OAuth2 client references
# ─────────────────────────────────────────────────────────────────────────────
def oauth2_params(**overrides):
    params = {
        "loginMethodType": "OAuth2",
        "name": "InfraLogin",
        "sourceType": "Default",
        "oauth2ClientName": "infraOIDC",
    }
    params.update(overrides)
    return params


def test_oauth2_known_client_commits(login_methods, oauth_clients):
    oauth_clients.list_oauth2_clients.return_value = ["infraOIDC", "other"]

    apply_login_method(oauth2_params(), login_methods, oauth_clients)

    payload = committed_payload(login_methods, "create_login_method")
    assert payload["loginMethodType"] == "OAuth2"
    assert payload["source"] == 0
    assert payload["sourceConfiguration"] == {"clientName": "infraOIDC"}
    assert "targetConfiguration" not in payload


def test_oauth2_unknown_client_raises_without_commit(login_methods, oauth_clients):
    oauth_clients.list_oauth2_clients.return_value = ["other"]

    with pytest.raises(ClientReferenceError) as excinfo:
        apply_login_method(oauth2_params(), login_methods, oauth_clients)

    assert "infraOIDC" in str(excinfo.value)
    login_methods.create_login_method.assert_not_called()
    login_methods.update_login_method.assert_not_called()


def test_oauth2_empty_registry_rejects_every_reference(login_methods, oauth_clients):
    oauth_clients.list_oauth2_clients.return_value = []

    with pytest.raises(ClientReferenceError):
        apply_login_method(oauth2_params(sourceType="Reference"), login_methods, oauth_clients)


def test_oauth2_missing_client_name_never_fetches_registry(login_methods, oauth_clients):
    with pytest.raises(MissingFieldError):
        apply_login_method(oauth2_params(oauth2ClientName=None), login_methods, oauth_clients)

    oauth_clients.list_oauth2_clients.assert_not_called()


def test_oauth2_profile_reference_skips_registry(login_methods, oauth_clients):
    apply_login_method(
        oauth2_params(sourceType="ProfileReference", profileKey="oauth", oauth2ClientName=None),
        login_methods,
        oauth_clients,
    )

    oauth_clients.list_oauth2_clients.assert_not_called()
    assert committed_payload(login_methods, "create_login_method")["source"] == 4


def test_oauth2_registry_failure_propagates(login_methods, oauth_clients):
    oauth_clients.list_oauth2_clients.side_effect = SimplifierAPIError(500, "boom", "/AuthSettings")

    with pytest.raises(SimplifierAPIError):
        apply_login_method(oauth2_params(), login_methods, oauth_clients)

    login_methods.create_login_method.assert_not_called()


def test_oauth2_custom_header_target(login_methods, oauth_clients):
    apply_login_method(
        oauth2_params(targetType="CustomHeader", customHeaderName="X-Token"),
        login_methods,
        oauth_clients,
    )

    payload = committed_payload(login_methods, "create_login_method")
    assert payload["target"] == 1
    assert payload["targetConfiguration"] == {"name": "X-Token"}


# ─────────────────────────────────────────────────────────────────────────────
# SingleSignOn
# ─────────────────────────────────────────────────────────────────────────────
def test_sso_missing_ticket_names_field(login_methods, oauth_clients):
    with pytest.raises(MissingFieldError) as excinfo:
        apply_login_method(
            {"loginMethodType": "SingleSignOn", "name": "SSO", "sourceType": "Provided"},
            login_methods,
            oauth_clients,
        )

    assert "ticket" in str(excinfo.value)
    login_methods.create_login_method.assert_not_called()


def test_sso_target_forced_to_default(login_methods, oauth_clients):
    apply_login_method(
        {
            "loginMethodType": "SingleSignOn",
            "name": "SSO",
            "sourceType": "Provided",
            "ticket": "MYSAPSSO2",
            "targetType": "CustomHeader",
            "customHeaderName": "X-SSO",
        },
        login_methods,
        oauth_clients,
    )

    payload = committed_payload(login_methods, "create_login_method")
    assert payload["target"] == 0
    assert "targetConfiguration" not in payload


def test_sso_reference_is_unsupported(login_methods, oauth_clients):
    with pytest.raises(UnsupportedVariantError):
        apply_login_method(
            {"loginMethodType": "SingleSignOn", "name": "SSO", "sourceType": "Reference"},
            login_methods,
            oauth_clients,
        )


# ─────────────────────────────────────────────────────────────────────────────
# Request parsing and probing
# ─────────────────────────────────────────────────────────────────────────────
def test_engine_family_name_is_accepted(login_methods, oauth_clients):
    apply_login_method(
        {"loginMethodType": "Credential", "name": "BasicAdmin", "username": "a", "password": "b"},
        login_methods,
        oauth_clients,
    )

    assert committed_payload(login_methods, "create_login_method")["loginMethodType"] == "UserCredentials"


@pytest.mark.parametrize(
    "params,message",
    [
        ({"name": "x"}, "loginMethodType is required"),
        ({"loginMethodType": "Token"}, "name is required"),
        ({"loginMethodType": "Kerberos", "name": "x"}, "Unsupported loginMethodType: Kerberos"),
    ],
)
def test_invalid_requests_raise_value_error(params, message, login_methods, oauth_clients):
    with pytest.raises(ValueError, match=message):
        apply_login_method(params, login_methods, oauth_clients)

    login_methods.get_login_method.assert_not_called()


def test_probe_treats_any_failure_as_absent(login_methods):
    login_methods.get_login_method.side_effect = SimplifierAPIError(503, "unavailable", "/LoginMethods/x")
    assert probe_login_method(login_methods, "x") is None


def test_probe_returns_existing_record(login_methods):
    login_methods.get_login_method.side_effect = None
    login_methods.get_login_method.return_value = EXISTING
    assert probe_login_method(login_methods, "BasicAdmin") == EXISTING


def test_transient_probe_error_routes_to_create(login_methods, oauth_clients):
    login_methods.get_login_method.side_effect = SimplifierAPIError(503, "unavailable", "/LoginMethods/x")

    apply_login_method(
        {"loginMethodType": "Token", "name": "Bearer"},
        login_methods,
        oauth_clients,
    )

    login_methods.create_login_method.assert_called_once()
    login_methods.update_login_method.assert_not_called()


def test_commit_failure_propagates_and_is_not_retried(login_methods, oauth_clients):
    login_methods.create_login_method.side_effect = SimplifierAPIError(409, "exists", "/LoginMethods")

    with pytest.raises(SimplifierAPIError):
        apply_login_method({"loginMethodType": "Token", "name": "Bearer"}, login_methods, oauth_clients)

    assert login_methods.create_login_method.call_count == 1
    login_methods.update_login_method.assert_not_called()


def test_normalize_does_not_commit(login_methods, oauth_clients):
    orchestrator = LoginMethodOrchestrator(login_methods, oauth_clients)
    request = LoginMethodRequest(family=LoginMethodFamily.TOKEN, name="Bearer", target_kind="CustomHeader",
                                 custom_header_name="X-Auth")

    normalized = orchestrator.normalize(request)

    assert normalized.to_dict() == {
        "name": "Bearer",
        "description": "",
        "loginMethodType": "Token",
        "source": 0,
        "target": 1,
        "sourceConfiguration": {},
        "targetConfiguration": {"name": "X-Auth"},
    }
    login_methods.create_login_method.assert_not_called()
    login_methods.get_login_method.assert_not_called()


def test_applying_same_name_twice_creates_once_then_updates(login_methods, oauth_clients):
    params = {"loginMethodType": "UserCredentials", "name": "BasicAdmin", "username": "admin", "password": "p1"}
    created = {}

    def create(payload):
        created[payload["name"]] = payload
        return "Login method created"

    def fetch(name):
        if name not in created:
            raise LoginMethodNotFoundError(f"Login method '{name}' not found")
        return created[name]

    login_methods.create_login_method.side_effect = create
    login_methods.get_login_method.side_effect = fetch

    assert apply_login_method(params, login_methods, oauth_clients) == "Login method created"
    assert apply_login_method(params, login_methods, oauth_clients) == "Login method updated"

    assert login_methods.create_login_method.call_count == 1
    assert login_methods.update_login_method.call_count == 1
    name, payload = login_methods.update_login_method.call_args.args
    assert name == "BasicAdmin"
    assert payload["sourceConfiguration"] == {"username": "admin", "password": "p1", "changePassword": False}


def test_oauth2_client_reference_label_checks_registry(login_methods, oauth_clients):
    oauth_clients.list_oauth2_clients.return_value = ["other"]

    with pytest.raises(ClientReferenceError):
        apply_login_method(oauth2_params(sourceType="ClientReference"), login_methods, oauth_clients)

    login_methods.create_login_method.assert_not_called()


def test_string_rotation_flag_on_update(login_methods, oauth_clients):
    login_methods.get_login_method.side_effect = None
    login_methods.get_login_method.return_value = EXISTING

    apply_login_method(
        {"loginMethodType": "UserCredentials", "name": "BasicAdmin", "username": "admin", "password": "p1",
         "changePassword": "false"},
        login_methods,
        oauth_clients,
    )

    payload = committed_payload(login_methods, "update_login_method")
    assert payload["sourceConfiguration"]["changePassword"] is False
