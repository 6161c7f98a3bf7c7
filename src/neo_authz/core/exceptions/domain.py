"""Domain exceptions for neo-authz."""

from .base import NeoAuthzError


# Configuration Errors
class ConfigurationError(NeoAuthzError):
    """Raised when there's a configuration issue."""
    pass


# Catalog Errors
class CatalogError(NeoAuthzError):
    """Base class for permission catalog errors."""
    pass


class CatalogUnavailableError(CatalogError):
    """Raised when the catalog fetch failed or returned nothing."""
    pass


class InvalidPermissionRecordError(CatalogError):
    """Raised when a raw catalog record cannot be turned into a definition."""
    pass


# Permission code errors
class InvalidPermissionCodeError(NeoAuthzError, ValueError):
    """Raised when a permission code string is malformed."""
    pass


# Authorization Errors
class AuthorizationError(NeoAuthzError):
    """Base class for authorization errors."""
    pass


class PermissionDeniedError(AuthorizationError):
    """Raised by the require_* helpers when a check fails."""
    pass


# Preset Errors
class PresetError(NeoAuthzError):
    """Base class for preset errors."""
    pass


class PresetNotFoundError(PresetError):
    """Raised when a preset key is not registered."""
    pass
