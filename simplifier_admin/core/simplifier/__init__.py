"""Simplifier REST API client library.

Architecture:
- client.py: HTTP client with token handling and envelope unwrapping
- loginmethods.py: Login method records (list, fetch, create, update)
- oauthclients.py: OAuth2 client registry
- exceptions.py: Typed exceptions for error handling

Usage:
    from simplifier_admin.core.simplifier import SimplifierClient, LoginMethodService

    client = SimplifierClient("https://myinstance.simplifier.cloud", token="...")
    methods = LoginMethodService(client).list_login_methods()
"""
from .client import SimplifierClient, REQUEST_TIMEOUT, TOKEN_HEADER
from .exceptions import (
    SimplifierError,
    SimplifierAPIError,
    SimplifierConnectionError,
    LoginMethodNotFoundError,
)
from .loginmethods import LoginMethodService
from .oauthclients import OAuth2ClientService

__all__ = [
    "SimplifierClient",
    "REQUEST_TIMEOUT",
    "TOKEN_HEADER",
    "SimplifierError",
    "SimplifierAPIError",
    "SimplifierConnectionError",
    "LoginMethodNotFoundError",
    "LoginMethodService",
    "OAuth2ClientService",
]
