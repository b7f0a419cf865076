"""Referential checks performed before a login method is committed."""
from __future__ import annotations

from typing import Any, Iterable, Mapping, Union

from .errors import ClientReferenceError


def client_names(known_clients: Iterable[Union[str, Mapping[str, Any]]]) -> set[str]:
    """Extract client names from registry entries (dicts with "name") or plain strings."""
    names: set[str] = set()
    for entry in known_clients:
        if isinstance(entry, str):
            names.add(entry)
        elif entry.get("name"):
            names.add(entry["name"])
    return names


def validate_external_client(name: str, known_clients: Iterable[Union[str, Mapping[str, Any]]]) -> None:
    """Ensure an OAuth2 client name exists in the client registry.
    
    An empty registry is valid input; every lookup against it fails.
    
    Args:
        name: Client name referenced by the login method
        known_clients: Registry entries, fetched fresh for each request
        
    Raises:
        ClientReferenceError: If the name is not registered
    """
    if name not in client_names(known_clients):
        raise ClientReferenceError(name)
