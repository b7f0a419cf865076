"""Pytest shared fixtures for login method tests."""
import pathlib
import sys
from unittest.mock import MagicMock

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from simplifier_admin.config import AppConfig
from simplifier_admin.core.simplifier import LoginMethodNotFoundError


# ─────────────────────────────────────────────────────────────────────────────
# Remote Service Stubs
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture
def login_methods():
    """LoginMethodService stub with no existing records."""
    service = MagicMock()
    service.get_login_method.side_effect = LoginMethodNotFoundError("not found")
    service.create_login_method.return_value = "Login method created"
    service.update_login_method.return_value = "Login method updated"
    service.list_login_methods.return_value = []
    return service


@pytest.fixture
def oauth_clients():
    """OAuth2ClientService stub with a small registry."""
    service = MagicMock()
    service.list_oauth2_clients.return_value = [
        {"name": "infraOIDC", "description": "Infrastructure OIDC", "mechanism": "OAuth2", "hasIcon": False},
        {"name": "other", "description": "", "mechanism": "OAuth2", "hasIcon": True},
    ]
    return service


# ─────────────────────────────────────────────────────────────────────────────
# Flask Application
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture
def app_config():
    return AppConfig(simplifier_base_url="https://example.simplifier.cloud", simplifier_token="t")


@pytest.fixture
def app(app_config):
    from simplifier_admin.flask_app import create_app

    app = create_app(cfg=app_config, client=MagicMock())
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client
