"""Settings loader with environment variable and Docker secrets integration."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

logger = logging.getLogger(__name__)

DEFAULT_REQUEST_TIMEOUT = 10.0


def _load_secret_from_file(secret_name: str, env_var: str | None = None) -> str | None:
    """
    Load secret from /run/secrets (Docker secrets pattern).

    Priority:
    1. /run/secrets/{secret_name} (Docker secrets mount)
    2. Environment variable (fallback)

    Args:
        secret_name: Name of the secret file in /run/secrets
        env_var: Optional environment variable name to check as fallback

    Returns:
        Secret value or None if not found
    """
    secret_file = Path("/run/secrets") / secret_name

    if secret_file.exists() and secret_file.is_file():
        try:
            secret_value = secret_file.read_text().strip()
        except OSError as e:
            logger.warning("Failed to read /run/secrets/%s: %s", secret_name, e)
        else:
            if secret_value:
                logger.info("Loaded %s from /run/secrets", secret_name)
                return secret_value

    if env_var:
        secret_value = os.getenv(env_var)
        if secret_value:
            return secret_value

    return None


@dataclass
class AppConfig:
    """Application configuration container."""
    simplifier_base_url: str
    simplifier_token: str = ""
    simplifier_credentials_file: str = ""
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    app_env: str = "development"

    @property
    def has_credentials(self) -> bool:
        """True when a token or a credentials file is configured."""
        return bool(self.simplifier_token or self.simplifier_credentials_file)


def _validate_base_url(value: Optional[str]) -> str:
    """Return the base URL without trailing slash, or raise if it is missing or invalid."""
    if not value:
        raise RuntimeError("SIMPLIFIER_BASE_URL environment variable is required")
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise RuntimeError("SIMPLIFIER_BASE_URL must be a valid URL")
    return value.rstrip("/")


def load_settings() -> AppConfig:
    """Load application settings from environment and /run/secrets."""
    base_url = _validate_base_url(os.environ.get("SIMPLIFIER_BASE_URL"))

    token = _load_secret_from_file("simplifier_token", "SIMPLIFIER_TOKEN") or ""
    credentials_file = os.environ.get("SIMPLIFIER_CREDENTIALS_FILE", "")
    if credentials_file and not Path(credentials_file).is_file():
        raise RuntimeError(f"SIMPLIFIER_CREDENTIALS_FILE not found: {credentials_file}")

    raw_timeout = os.environ.get("SIMPLIFIER_REQUEST_TIMEOUT", str(DEFAULT_REQUEST_TIMEOUT))
    try:
        request_timeout = float(raw_timeout)
    except ValueError:
        raise RuntimeError(f"SIMPLIFIER_REQUEST_TIMEOUT must be a number, got '{raw_timeout}'")
    if request_timeout <= 0:
        raise RuntimeError("SIMPLIFIER_REQUEST_TIMEOUT must be positive")

    app_env = os.environ.get("APP_ENV", "development")

    cfg = AppConfig(
        simplifier_base_url=base_url,
        simplifier_token=token,
        simplifier_credentials_file=credentials_file,
        request_timeout=request_timeout,
        app_env=app_env,
    )

    auth_label = "token" if token else ("credentials-file" if credentials_file else "none")
    logger.info("Settings loaded: env=%s; base_url=%s; auth=%s", app_env, base_url, auth_label)
    if not cfg.has_credentials:
        logger.warning("No SIMPLIFIER_TOKEN or SIMPLIFIER_CREDENTIALS_FILE configured; remote calls will fail")

    return cfg
