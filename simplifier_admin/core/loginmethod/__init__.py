"""Login method normalization and orchestration engine.

Architecture:
- models.py: families, per-family source kind enums, request and payload types
- mappers.py: one source/target mapper per family
- validators.py: OAuth2 client reference check
- orchestrator.py: existence probe and create-or-update commit
- transformer.py: read views of fetched records
- errors.py: typed engine exceptions
"""
from .errors import (
    LoginMethodError,
    MissingFieldError,
    UnsupportedVariantError,
    ClientReferenceError,
)
from .models import (
    LoginMethodFamily,
    LoginMethodRequest,
    NormalizedRequest,
    SourceMapping,
    TargetMapping,
    CredentialSource,
    TokenSource,
    SingleSignOnSource,
    DelegatedAuthSource,
    TargetKind,
)
from .mappers import (
    TargetAndSourceMapper,
    UserCredentialsMapper,
    TokenMapper,
    SingleSignOnMapper,
    OAuth2Mapper,
    get_mapper,
)
from .validators import validate_external_client
from .orchestrator import LoginMethodOrchestrator, apply_login_method, probe_login_method
from .transformer import LoginMethodTransformer

__all__ = [
    # Errors
    "LoginMethodError",
    "MissingFieldError",
    "UnsupportedVariantError",
    "ClientReferenceError",
    
    # Models
    "LoginMethodFamily",
    "LoginMethodRequest",
    "NormalizedRequest",
    "SourceMapping",
    "TargetMapping",
    "CredentialSource",
    "TokenSource",
    "SingleSignOnSource",
    "DelegatedAuthSource",
    "TargetKind",
    
    # Mappers
    "TargetAndSourceMapper",
    "UserCredentialsMapper",
    "TokenMapper",
    "SingleSignOnMapper",
    "OAuth2Mapper",
    "get_mapper",
    
    # Orchestration
    "validate_external_client",
    "LoginMethodOrchestrator",
    "apply_login_method",
    "probe_login_method",
    "LoginMethodTransformer",
]
