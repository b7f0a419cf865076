"""Source/target mappers, one per login method family.

Each mapper turns a source kind label and the raw request into the
family-scoped ``(code, config)`` pair the remote store expects, and does the
same for the target kind. The orchestrator dispatches to a mapper once, by
family, through ``get_mapper``.

Usage:
    mapper = get_mapper(LoginMethodFamily.TOKEN)
    source = mapper.map_source("Provided", request, existing=None)
    target = mapper.map_target("CustomHeader", request)
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, FrozenSet, Mapping, Optional, Type

from .errors import MissingFieldError, UnsupportedVariantError
from .models import (
    DEFAULT_TARGET,
    CredentialSource,
    DelegatedAuthSource,
    LoginMethodFamily,
    LoginMethodRequest,
    SingleSignOnSource,
    SourceMapping,
    TargetKind,
    TargetMapping,
    TokenSource,
    _Kind,
)

# Request parameter name -> LoginMethodRequest attribute
_FIELD_ATTRS = {
    "username": "username",
    "password": "password",
    "token": "token",
    "ticket": "ticket",
    "oauth2ClientName": "external_client_name",
    "profileKey": "profile_key",
    "userAttributeName": "user_attribute_name",
    "userAttributeCategory": "user_attribute_category",
    "customHeaderName": "custom_header_name",
    "queryParameterKey": "query_parameter_key",
}


class TargetAndSourceMapper(ABC):
    """Shared capability of all login method mappers.

    Subclasses declare their family, their source kind enum and the target
    kinds they expose; unlisted targets fall back to the Default target.
    """

    family: LoginMethodFamily
    source_kinds: Type[_Kind]
    default_source: _Kind
    target_kinds: FrozenSet[TargetKind] = frozenset()

    def default_source_kind(self) -> str:
        """Return the label of the family's default source kind."""
        return self.default_source.label

    def map_source(
        self,
        source_kind: str,
        request: LoginMethodRequest,
        existing: Optional[Mapping[str, Any]] = None,
    ) -> SourceMapping:
        """Map a source kind and the request fields to a source code and configuration.

        Args:
            source_kind: Source kind label (e.g. "Provided")
            request: Login method request
            existing: Existing remote record, if any; rotation flags are only
                emitted when it is present

        Returns:
            SourceMapping scoped to this family

        Raises:
            UnsupportedVariantError: If the kind does not exist for this family
            MissingFieldError: If a required field is absent
        """
        kind = self.source_kinds.from_label(source_kind)
        if kind is None:
            raise UnsupportedVariantError(self.family.value, source_kind)

        if kind.label == "ProfileReference":
            self._require(kind, request, "profileKey")
            config: Dict[str, Any] = {"key": request.profile_key}
        elif kind.label == "UserAttributeReference":
            self._require(kind, request, "userAttributeName", "userAttributeCategory")
            config = {
                "name": request.user_attribute_name,
                "category": request.user_attribute_category,
            }
        else:
            config = self._source_config(kind, request, include_rotation=existing is not None)

        return SourceMapping(code=kind.value, config=config)

    def map_target(self, target_kind: str, request: LoginMethodRequest) -> TargetMapping:
        """Map a target kind to a target code and optional configuration.

        Unrecognized kinds, and kinds this family does not expose, fall back
        to the Default target (code 0, no configuration).

        Raises:
            MissingFieldError: If a recognized target kind lacks its field
        """
        kind = TargetKind.from_label(target_kind)
        if kind is None or kind not in self.target_kinds:
            return DEFAULT_TARGET

        if kind is TargetKind.CUSTOM_HEADER:
            self._require(kind, request, "customHeaderName", axis="target")
            return TargetMapping(code=kind.value, config={"name": request.custom_header_name})
        if kind is TargetKind.QUERY_PARAMETER:
            self._require(kind, request, "queryParameterKey", axis="target")
            return TargetMapping(code=kind.value, config={"key": request.query_parameter_key})
        return DEFAULT_TARGET

    @abstractmethod
    def _source_config(
        self,
        kind: _Kind,
        request: LoginMethodRequest,
        include_rotation: bool,
    ) -> Dict[str, Any]:
        """Build the configuration for the family-specific source kinds."""

    def _require(self, kind: _Kind, request: LoginMethodRequest, *fields: str, axis: str = "source") -> None:
        missing = [name for name in fields if not getattr(request, _FIELD_ATTRS[name])]
        if missing:
            raise MissingFieldError(self.family.value, kind.label, fields, missing, axis=axis)


class UserCredentialsMapper(TargetAndSourceMapper):
    """Basic auth: username/password, profile key or user attribute. Default target only."""

    family = LoginMethodFamily.CREDENTIAL
    source_kinds = CredentialSource
    default_source = CredentialSource.PROVIDED

    def _source_config(self, kind, request, include_rotation):
        self._require(kind, request, "username", "password")
        config: Dict[str, Any] = {"username": request.username, "password": request.password}
        if include_rotation:
            config["changePassword"] = request.change_password
        return config


class TokenMapper(TargetAndSourceMapper):
    """Bearer token; Default and SystemReference use the platform's own token."""

    family = LoginMethodFamily.TOKEN
    source_kinds = TokenSource
    default_source = TokenSource.DEFAULT
    target_kinds = frozenset({TargetKind.DEFAULT, TargetKind.CUSTOM_HEADER})

    def _source_config(self, kind, request, include_rotation):
        if kind is not TokenSource.PROVIDED:
            return {}
        self._require(kind, request, "token")
        config: Dict[str, Any] = {"token": request.token}
        if include_rotation:
            config["changeToken"] = request.change_token
        return config


class SingleSignOnMapper(TargetAndSourceMapper):
    """SAP single sign-on; Default and SystemReference use the user's login ticket."""

    family = LoginMethodFamily.SINGLE_SIGN_ON
    source_kinds = SingleSignOnSource
    default_source = SingleSignOnSource.DEFAULT

    def _source_config(self, kind, request, include_rotation):
        if kind is not SingleSignOnSource.PROVIDED:
            return {}
        self._require(kind, request, "ticket")
        config: Dict[str, Any] = {"ticket": request.ticket}
        if include_rotation:
            config["changeTicket"] = request.change_ticket
        return config


class OAuth2Mapper(TargetAndSourceMapper):
    """OAuth2 via a registered client; supports header and query parameter targets."""

    family = LoginMethodFamily.DELEGATED_AUTH
    source_kinds = DelegatedAuthSource
    default_source = DelegatedAuthSource.DEFAULT
    target_kinds = frozenset({TargetKind.DEFAULT, TargetKind.CUSTOM_HEADER, TargetKind.QUERY_PARAMETER})

    # Source kinds embedding a client name that must exist in the registry
    client_reference_kinds = frozenset({DelegatedAuthSource.DEFAULT, DelegatedAuthSource.REFERENCE})

    def _source_config(self, kind, request, include_rotation):
        self._require(kind, request, "oauth2ClientName")
        return {"clientName": request.external_client_name}

    def references_client(self, source_kind: str) -> bool:
        """Return True when the source kind embeds an OAuth2 client name."""
        return DelegatedAuthSource.from_label(source_kind) in self.client_reference_kinds


_MAPPERS: Dict[LoginMethodFamily, TargetAndSourceMapper] = {
    mapper.family: mapper
    for mapper in (UserCredentialsMapper(), TokenMapper(), SingleSignOnMapper(), OAuth2Mapper())
}


def get_mapper(family: LoginMethodFamily) -> TargetAndSourceMapper:
    """Return the mapper for a login method family."""
    return _MAPPERS[family]
