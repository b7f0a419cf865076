"""Simplifier OAuth2 client registry operations."""
from __future__ import annotations
from typing import Any, Dict, List

from .client import SimplifierClient

OAUTH2_CLIENTS_PATH = "/UserInterface/api/AuthSettings"


class OAuth2ClientService:
    """Service for reading the OAuth2 client registry."""
    
    def __init__(self, client: SimplifierClient):
        self.client = client
    
    def list_oauth2_clients(self) -> List[Dict[str, Any]]:
        """Return the registered OAuth2 clients (``authSettings`` entries).
        
        Never cached: every call fetches the registry again.
        """
        result = self.client.get_result(OAUTH2_CLIENTS_PATH, params={"mechanism": "OAuth2"})
        if isinstance(result, dict):
            return result.get("authSettings", [])
        return result or []
