"""Core Business Logic Module

Framework-independent logic for Simplifier administration (no Flask imports).

Module Structure:
    - simplifier/   : Low-level Simplifier REST API client and services
    - loginmethod/  : Login method normalization and create-or-update engine

Usage Pattern:
    from simplifier_admin.core.simplifier import SimplifierClient, LoginMethodService, OAuth2ClientService
    from simplifier_admin.core.loginmethod import apply_login_method

    client = SimplifierClient(base_url, token=token)
    message = apply_login_method(
        {"loginMethodType": "Token", "name": "ApiToken", "description": "", "sourceType": "Provided", "token": "t"},
        LoginMethodService(client),
        OAuth2ClientService(client),
    )
"""
