"""Simplifier login method record operations."""
from __future__ import annotations
import logging
from typing import Any, Dict, List
from urllib.parse import quote

from .client import SimplifierClient
from .exceptions import LoginMethodNotFoundError, SimplifierAPIError

LOGIN_METHODS_PATH = "/UserInterface/api/LoginMethods"

logger = logging.getLogger(__name__)


class LoginMethodService:
    """Service for reading and writing login method records."""
    
    def __init__(self, client: SimplifierClient):
        """Initialize login method service.
        
        Args:
            client: Authenticated Simplifier client
        """
        self.client = client
    
    def list_login_methods(self) -> List[Dict[str, Any]]:
        """Return all login methods of the instance."""
        result = self.client.get_result(LOGIN_METHODS_PATH)
        if isinstance(result, dict):
            return result.get("loginMethods", [])
        return result or []
    
    def get_login_method(self, name: str) -> Dict[str, Any]:
        """Return the raw login method record with the given name.
        
        Raises:
            LoginMethodNotFoundError: If no login method has that name
            SimplifierAPIError: On any other remote failure
        """
        try:
            return self.client.get_result(f"{LOGIN_METHODS_PATH}/{quote(name, safe='')}")
        except SimplifierAPIError as exc:
            if exc.status_code == 404:
                raise LoginMethodNotFoundError(f"Login method '{name}' not found") from exc
            raise
    
    def create_login_method(self, payload: Dict[str, Any]) -> Any:
        """Create a login method and return the remote response message."""
        resp = self.client.post(LOGIN_METHODS_PATH, json=payload)
        logger.info("Created login method '%s'", payload.get("name"))
        return self.client.message_of(resp)
    
    def update_login_method(self, name: str, payload: Dict[str, Any]) -> Any:
        """Update the named login method and return the remote response message."""
        resp = self.client.put(f"{LOGIN_METHODS_PATH}/{quote(name, safe='')}", json=payload)
        logger.info("Updated login method '%s'", name)
        return self.client.message_of(resp)
