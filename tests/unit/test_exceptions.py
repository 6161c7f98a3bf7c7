"""Tests for the exception hierarchy."""

from neo_authz.core.exceptions import (
    AuthorizationError,
    CatalogError,
    CatalogUnavailableError,
    InvalidPermissionRecordError,
    NeoAuthzError,
    PermissionDeniedError,
    PresetError,
    PresetNotFoundError,
    create_error_response,
)


class TestExceptions:
    """Test cases for neo-authz exceptions."""

    def test_hierarchy(self):
        assert issubclass(CatalogUnavailableError, CatalogError)
        assert issubclass(InvalidPermissionRecordError, CatalogError)
        assert issubclass(PermissionDeniedError, AuthorizationError)
        assert issubclass(PresetNotFoundError, PresetError)
        assert all(
            issubclass(cls, NeoAuthzError)
            for cls in (CatalogError, AuthorizationError, PresetError)
        )

    def test_defaults(self):
        error = CatalogUnavailableError("catalog down")

        assert str(error) == "catalog down"
        assert error.error_code == "CatalogUnavailableError"
        assert error.details == {}

    def test_error_response(self):
        error = PresetNotFoundError("Unknown preset: x", error_code="PRESET_404", details={"key": "x"})

        assert create_error_response(error) == {
            "error": {
                "code": "PRESET_404",
                "message": "Unknown preset: x",
                "details": {"key": "x"},
                "type": "PresetNotFoundError",
            }
        }
