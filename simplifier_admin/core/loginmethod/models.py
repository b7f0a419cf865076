"""Data model for login method normalization.

Source codes are scoped to their family: the same integer means different
things for different login method types, so every family owns its own
``IntEnum`` and a code is only ever produced through that enum.

Usage:
    request = LoginMethodRequest.from_params({
        "loginMethodType": "UserCredentials",
        "name": "BasicAdmin",
        "description": "Admin credentials",
        "username": "admin",
        "password": "p1",
    })
    request.family            # LoginMethodFamily.CREDENTIAL
    request.family.value      # "UserCredentials"
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Dict, Mapping, Optional


class LoginMethodFamily(Enum):
    """Login method type, valued by its wire name."""

    CREDENTIAL = "UserCredentials"
    TOKEN = "Token"
    SINGLE_SIGN_ON = "SingleSignOn"
    DELEGATED_AUTH = "OAuth2"

    @classmethod
    def parse(cls, raw: "str | LoginMethodFamily") -> "LoginMethodFamily":
        """Resolve a family from its wire name or engine name.

        Args:
            raw: e.g. "OAuth2", "DelegatedAuth" or a LoginMethodFamily

        Returns:
            Matching family

        Raises:
            ValueError: If the name denotes no known family
        """
        if isinstance(raw, cls):
            return raw
        for member in cls:
            if raw in (member.value, _ENGINE_NAMES[member]):
                return member
        raise ValueError(f"Unsupported loginMethodType: {raw}")


_ENGINE_NAMES = {
    LoginMethodFamily.CREDENTIAL: "Credential",
    LoginMethodFamily.TOKEN: "Token",
    LoginMethodFamily.SINGLE_SIGN_ON: "SingleSignOn",
    LoginMethodFamily.DELEGATED_AUTH: "DelegatedAuth",
}


class _Kind(IntEnum):
    """Kind enum whose members render as CamelCase labels ("ProfileReference")."""

    @property
    def label(self) -> str:
        return _camel(self.name)

    @classmethod
    def from_label(cls, label: str) -> Optional["_Kind"]:
        """Resolve a label to its member; aliases resolve to the canonical member."""
        for name, member in cls.__members__.items():
            if _camel(name) == label:
                return member
        return None


def _camel(name: str) -> str:
    return "".join(part.capitalize() for part in name.split("_"))


class CredentialSource(_Kind):
    PROVIDED = 1
    PROFILE_REFERENCE = 4
    USER_ATTRIBUTE_REFERENCE = 5


class TokenSource(_Kind):
    DEFAULT = 0
    PROVIDED = 1
    SYSTEM_REFERENCE = 3
    PROFILE_REFERENCE = 4
    USER_ATTRIBUTE_REFERENCE = 5


class SingleSignOnSource(_Kind):
    DEFAULT = 0
    PROVIDED = 1
    SYSTEM_REFERENCE = 3
    PROFILE_REFERENCE = 4
    USER_ATTRIBUTE_REFERENCE = 5


class DelegatedAuthSource(_Kind):
    DEFAULT = 0
    CLIENT_REFERENCE = 0  # alias of DEFAULT
    REFERENCE = 2
    PROFILE_REFERENCE = 4
    USER_ATTRIBUTE_REFERENCE = 5


class TargetKind(_Kind):
    """Where the credential is attached on outgoing calls."""

    DEFAULT = 0
    CUSTOM_HEADER = 1
    QUERY_PARAMETER = 2


DEFAULT_TARGET_KIND = "Default"


@dataclass(frozen=True)
class SourceMapping:
    """Family-scoped source code and its configuration."""

    code: int
    config: Dict[str, Any]


@dataclass(frozen=True)
class TargetMapping:
    """Target code and optional configuration (absent for the Default target)."""

    code: int
    config: Optional[Dict[str, Any]] = None


DEFAULT_TARGET = TargetMapping(code=TargetKind.DEFAULT.value)


def _flag(params: Mapping[str, Any], key: str) -> bool:
    """Read a rotation flag: a real boolean, "true"/"false", or absent (False)."""
    value = params.get(key)
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ValueError(f"{key} must be a boolean, got {value!r}")


@dataclass(frozen=True)
class LoginMethodRequest:
    """User-supplied request to create or update a login method.

    Only the fields required by the resolved source/target kinds are read;
    all others are ignored.
    """

    family: LoginMethodFamily
    name: str
    description: str = ""
    source_kind: Optional[str] = None
    target_kind: Optional[str] = None

    username: Optional[str] = None
    password: Optional[str] = None
    change_password: bool = False
    token: Optional[str] = None
    change_token: bool = False
    ticket: Optional[str] = None
    change_ticket: bool = False
    external_client_name: Optional[str] = None
    profile_key: Optional[str] = None
    user_attribute_name: Optional[str] = None
    user_attribute_category: Optional[str] = None
    custom_header_name: Optional[str] = None
    query_parameter_key: Optional[str] = None

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "LoginMethodRequest":
        """Build a request from raw camelCase parameters.

        Args:
            params: Raw parameters (e.g. a JSON body or tool arguments)

        Returns:
            LoginMethodRequest

        Raises:
            ValueError: If loginMethodType or name is missing or unknown, or a
                rotation flag is not a boolean
        """
        raw_family = params.get("loginMethodType")
        if not raw_family:
            raise ValueError("loginMethodType is required")
        name = params.get("name")
        if not name:
            raise ValueError("name is required")

        return cls(
            family=LoginMethodFamily.parse(raw_family),
            name=name,
            description=params.get("description") or "",
            source_kind=params.get("sourceType") or None,
            target_kind=params.get("targetType") or None,
            username=params.get("username"),
            password=params.get("password"),
            change_password=_flag(params, "changePassword"),
            token=params.get("token"),
            change_token=_flag(params, "changeToken"),
            ticket=params.get("ticket"),
            change_ticket=_flag(params, "changeTicket"),
            external_client_name=params.get("oauth2ClientName"),
            profile_key=params.get("profileKey"),
            user_attribute_name=params.get("userAttributeName"),
            user_attribute_category=params.get("userAttributeCategory"),
            custom_header_name=params.get("customHeaderName"),
            query_parameter_key=params.get("queryParameterKey"),
        )


@dataclass(frozen=True)
class NormalizedRequest:
    """Exact payload submitted to the remote create or update operation."""

    name: str
    description: str
    login_method_type: LoginMethodFamily
    source: SourceMapping
    target: TargetMapping = field(default=DEFAULT_TARGET)

    def to_dict(self) -> Dict[str, Any]:
        """Render the wire representation; targetConfiguration only when present."""
        payload: Dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "loginMethodType": self.login_method_type.value,
            "source": self.source.code,
            "target": self.target.code,
            "sourceConfiguration": dict(self.source.config),
        }
        if self.target.config is not None:
            payload["targetConfiguration"] = dict(self.target.config)
        return payload
