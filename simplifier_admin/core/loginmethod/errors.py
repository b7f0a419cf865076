"""Login method engine exceptions.

All of these are caller-correctable and terminal: the orchestrator never
catches them, so they surface unchanged to the result envelope.
"""
from __future__ import annotations

from typing import Sequence


class LoginMethodError(Exception):
    """Base exception for login method normalization failures."""
    pass


class MissingFieldError(LoginMethodError):
    """A resolved source or target kind is missing one of its required fields.
    
    Attributes:
        family: Wire name of the login method type (e.g. "UserCredentials")
        kind: Source or target kind label that was resolved
        fields: All fields the kind requires
        missing: The subset of ``fields`` that was absent
        axis: "source" or "target"
    """
    
    def __init__(
        self,
        family: str,
        kind: str,
        fields: Sequence[str],
        missing: Sequence[str],
        axis: str = "source",
    ):
        self.family = family
        self.kind = kind
        self.fields = tuple(fields)
        self.missing = tuple(missing)
        self.axis = axis
        quoted = " and ".join(f"'{name}'" for name in self.fields)
        noun = "field" if len(self.fields) == 1 else "fields"
        if axis == "target":
            prefix = f"{family} {kind} target"
        elif kind in ("ProfileReference", "UserAttributeReference"):
            prefix = f"{family} {kind}"
        else:
            prefix = f"{family} {kind} source"
        super().__init__(f"{prefix} requires {quoted} {noun}")


class UnsupportedVariantError(LoginMethodError):
    """A source kind (or login method type) does not exist for the resolved family."""
    
    def __init__(self, family: str, kind: str, axis: str = "sourceType"):
        self.family = family
        self.kind = kind
        self.axis = axis
        super().__init__(f"Unsupported {axis} for {family}: {kind}")


class ClientReferenceError(LoginMethodError):
    """An OAuth2 client name is not present in the remote client registry."""
    
    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"OAuth2 client '{name}' does not exist. "
            "Check the available OAuth2 clients before referencing one."
        )
