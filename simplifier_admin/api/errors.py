"""Result envelope and error handlers for the application."""
from __future__ import annotations
from typing import Any, Callable

from flask import jsonify
from werkzeug.exceptions import HTTPException

from simplifier_admin.core.loginmethod import LoginMethodError
from simplifier_admin.core.simplifier import LoginMethodNotFoundError, SimplifierError


def error_status(error: Exception) -> int:
    """Map an exception to the HTTP status of its error envelope."""
    if isinstance(error, (LoginMethodError, ValueError)):
        return 400
    if isinstance(error, LoginMethodNotFoundError):
        return 404
    if isinstance(error, SimplifierError):
        return 502
    return 500


def wrap_result(caption: str, fn: Callable[[], Any]):
    """Run an operation and return its value as JSON, or a uniform error envelope.
    
    Args:
        caption: Human-readable operation name used in the error message
        fn: Operation to run
        
    Returns:
        Tuple of (JSON response, status code)
    """
    try:
        result = fn()
    except (LoginMethodError, SimplifierError, ValueError) as exc:
        return jsonify({"error": f"Tool {caption} failed: {exc}"}), error_status(exc)
    return jsonify(result), 200


def register_error_handlers(app):
    """Register JSON error handlers with the Flask app."""
    
    @app.errorhandler(404)
    def not_found(error):
        """Handle 404 Not Found errors."""
        return jsonify({"error": "Not Found", "message": "Resource not found"}), 404
    
    @app.errorhandler(405)
    def method_not_allowed(error):
        """Handle 405 Method Not Allowed errors."""
        return jsonify({"error": "Method Not Allowed", "message": str(error)}), 405
    
    @app.errorhandler(Exception)
    def handle_exception(error):
        """Handle uncaught exceptions."""
        if isinstance(error, HTTPException):
            return error
        
        app.logger.error(f"Unhandled exception: {error}", exc_info=True)
        return jsonify({"error": "Internal Server Error", "message": "An unexpected error occurred"}), 500
