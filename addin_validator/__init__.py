"""Add-in manifest validator - submits manifests to the validation service."""

from .config import DEFAULT_ENDPOINT, ServiceConfig
from .schemas import ValidationOutcome
from .tools import ValidationService, ValidationServiceClient
from .validator import validate_manifest, validate_manifest_sync

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_ENDPOINT",
    "ServiceConfig",
    "ValidationOutcome",
    "ValidationService",
    "ValidationServiceClient",
    "validate_manifest",
    "validate_manifest_sync",
]
