"""Tests for the public package surface."""

import neo_authz
from neo_authz.config.constants import BASIC_TO_GRANULAR, HIGH_RISK_PERMISSIONS, PermissionCategory


class TestPackage:
    """Test cases for the top-level package."""

    def test_all_exports_resolve(self):
        for name in neo_authz.__all__:
            assert hasattr(neo_authz, name), name

    def test_version(self):
        assert neo_authz.__version__ == "0.1.0"

    def test_every_category_has_an_expansion(self):
        assert set(BASIC_TO_GRANULAR) == set(PermissionCategory)
        for category, codes in BASIC_TO_GRANULAR.items():
            assert codes
            assert all(code.startswith(f"{category.value}:") for code in codes)

    def test_basic_expansions_leave_out_destructive_codes(self):
        """Only infra:k8s:manage is both curated and high-risk."""
        curated = {code for codes in BASIC_TO_GRANULAR.values() for code in codes}

        assert curated & HIGH_RISK_PERMISSIONS == {"infra:k8s:manage"}
