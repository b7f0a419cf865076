"""Flask application factory and bootstrap.

This module provides the create_app() factory function for initializing
the Flask application with all blueprints and configuration.
"""
from __future__ import annotations
import logging
from typing import Optional

from flask import Flask

from simplifier_admin.config import AppConfig, load_settings
from simplifier_admin.core.simplifier import SimplifierClient

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Application Factory
# ─────────────────────────────────────────────────────────────────────────────
def create_app(cfg: Optional[AppConfig] = None, client: Optional[SimplifierClient] = None) -> Flask:
    """Create and configure Flask application.
    
    Args:
        cfg: Settings (loaded from the environment when omitted)
        client: Simplifier client (built from settings when omitted)
    """
    cfg = cfg or load_settings()
    
    app = Flask(__name__)
    app.config["APP_CONFIG"] = cfg
    app.config["SIMPLIFIER_CLIENT"] = client or SimplifierClient(
        cfg.simplifier_base_url,
        token=cfg.simplifier_token or None,
        credentials_file=cfg.simplifier_credentials_file or None,
        timeout=cfg.request_timeout,
    )
    
    # Register blueprints
    from simplifier_admin.api import health, errors
    from simplifier_admin.api import loginmethods
    
    app.register_blueprint(health.bp)
    app.register_blueprint(loginmethods.bp, url_prefix="/api")
    
    # Register error handlers
    errors.register_error_handlers(app)
    
    logger.info("Login method API registered at /api (env=%s, simplifier=%s)", cfg.app_env, cfg.simplifier_base_url)
    
    return app
