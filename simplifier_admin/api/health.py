"""Health check endpoints."""
from flask import Blueprint, current_app

from simplifier_admin.core.simplifier import SimplifierError

bp = Blueprint("health", __name__)


@bp.route("/health")
def health_check():
    """Basic health check endpoint."""
    return ("ok", 200, {"Content-Type": "text/plain"})


@bp.route("/ready")
def readiness_check():
    """Readiness check: the configured Simplifier instance answers its ping endpoint."""
    client = current_app.config["SIMPLIFIER_CLIENT"]
    try:
        reachable = client.ping()
    except (SimplifierError, OSError) as exc:
        current_app.logger.warning("Simplifier ping failed: %s", exc)
        reachable = False
    if not reachable:
        return ("simplifier unreachable", 503, {"Content-Type": "text/plain"})
    return ("ready", 200, {"Content-Type": "text/plain"})
