"""Create-or-update orchestration for login methods.

Turns a flat LoginMethodRequest into the exact payload the remote store
expects and commits it with a single create or update call.

Flow:
    request -> mapper (by family) -> existence probe -> map source
            -> [OAuth2 client check] -> map target -> create | update

Any failure aborts before the mutation and propagates unchanged; the remote
record is written at most once per call and nothing is retried.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Union

from simplifier_admin.core.simplifier import LoginMethodService, OAuth2ClientService

from .mappers import OAuth2Mapper, get_mapper
from .models import DEFAULT_TARGET_KIND, LoginMethodRequest, NormalizedRequest
from .validators import validate_external_client

logger = logging.getLogger(__name__)


def probe_login_method(service: LoginMethodService, name: str) -> Optional[Dict[str, Any]]:
    """Return the existing login method record, or None.

    Every fetch failure, not only "not found", is treated as absence.
    """
    try:
        return service.get_login_method(name)
    except Exception as exc:
        logger.debug("Login method '%s' not fetched (%s); treating as new", name, exc)
        return None


class LoginMethodOrchestrator:
    """Normalizes login method requests and commits them to Simplifier."""

    def __init__(self, login_methods: LoginMethodService, oauth_clients: OAuth2ClientService):
        """Initialize orchestrator.

        Args:
            login_methods: Service for the login method records
            oauth_clients: Service for the OAuth2 client registry
        """
        self.login_methods = login_methods
        self.oauth_clients = oauth_clients

    def normalize(
        self,
        request: LoginMethodRequest,
        existing: Optional[Mapping[str, Any]] = None,
    ) -> NormalizedRequest:
        """Build the normalized payload for a request without committing it.

        Args:
            request: Login method request
            existing: Existing remote record (controls rotation flags)

        Returns:
            NormalizedRequest

        Raises:
            MissingFieldError: If a resolved kind lacks a required field
            UnsupportedVariantError: If the source kind is unknown for the family
            ClientReferenceError: If a referenced OAuth2 client does not exist
            SimplifierAPIError: If the client registry cannot be fetched
        """
        mapper = get_mapper(request.family)
        source_kind = request.source_kind or mapper.default_source_kind()

        source = mapper.map_source(source_kind, request, existing)

        if isinstance(mapper, OAuth2Mapper) and mapper.references_client(source_kind):
            validate_external_client(
                request.external_client_name,
                self.oauth_clients.list_oauth2_clients(),
            )

        target_kind = request.target_kind or DEFAULT_TARGET_KIND
        target = mapper.map_target(target_kind, request)

        logger.info(
            "Normalized login method '%s': type=%s source=%s(%d) target=%s(%d)",
            request.name,
            request.family.value,
            source_kind,
            source.code,
            target_kind,
            target.code,
        )
        return NormalizedRequest(
            name=request.name,
            description=request.description,
            login_method_type=request.family,
            source=source,
            target=target,
        )

    def apply(self, request: LoginMethodRequest) -> Any:
        """Create or update a login method.

        Args:
            request: Login method request

        Returns:
            Response message of the remote create or update call, verbatim

        Raises:
            LoginMethodError: On any normalization or reference failure
            SimplifierAPIError: On remote failures of the registry or commit calls
        """
        existing = probe_login_method(self.login_methods, request.name)
        payload = self.normalize(request, existing).to_dict()

        if existing is not None:
            logger.info("Updating existing login method '%s'", request.name)
            return self.login_methods.update_login_method(request.name, payload)

        logger.info("Creating login method '%s'", request.name)
        return self.login_methods.create_login_method(payload)


def apply_login_method(
    params: Union[LoginMethodRequest, Mapping[str, Any]],
    login_methods: LoginMethodService,
    oauth_clients: OAuth2ClientService,
) -> Any:
    """Create or update a login method from raw parameters or a LoginMethodRequest."""
    request = params if isinstance(params, LoginMethodRequest) else LoginMethodRequest.from_params(params)
    return LoginMethodOrchestrator(login_methods, oauth_clients).apply(request)
