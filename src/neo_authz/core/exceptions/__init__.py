"""Exception hierarchy for neo-authz."""

from .base import NeoAuthzError, create_error_response
from .domain import (
    ConfigurationError,
    CatalogError,
    CatalogUnavailableError,
    InvalidPermissionRecordError,
    InvalidPermissionCodeError,
    AuthorizationError,
    PermissionDeniedError,
    PresetError,
    PresetNotFoundError,
)

__all__ = [
    "NeoAuthzError",
    "create_error_response",
    "ConfigurationError",
    "CatalogError",
    "CatalogUnavailableError",
    "InvalidPermissionRecordError",
    "InvalidPermissionCodeError",
    "AuthorizationError",
    "PermissionDeniedError",
    "PresetError",
    "PresetNotFoundError",
]
