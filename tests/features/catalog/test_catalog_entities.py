"""Tests for catalog entities."""

import pytest
from dataclasses import FrozenInstanceError

from neo_authz.config.constants import PermissionCategory, RiskLevel
from neo_authz.core.exceptions import InvalidPermissionRecordError
from neo_authz.features.catalog.entities import (
    CatalogSnapshot,
    PermissionDefinition,
    PermissionRecord,
    build_snapshot,
    group_by_subcategory,
    subcategory_rank,
)


def _definition(code, subcategory=None, **kwargs):
    return PermissionDefinition(
        code=code,
        category=code.split(":", 1)[0],
        subcategory=subcategory,
        **kwargs,
    )


class TestPermissionDefinition:
    """Test cases for PermissionDefinition entity."""

    def test_definition_creation_coerces_enums(self):
        """Test string category and risk level are converted to enums."""
        definition = PermissionDefinition(
            code="backup:restore",
            category="backup",
            risk_level="critical",
            requires_approval=True,
        )

        assert definition.category is PermissionCategory.BACKUP
        assert definition.risk_level is RiskLevel.CRITICAL
        assert definition.is_high_risk_level
        assert definition.requires_security_check()

    def test_definition_rejects_malformed_code(self):
        """Test a code without a separator is rejected."""
        with pytest.raises(InvalidPermissionRecordError):
            PermissionDefinition(code="service", category="service")

    def test_definition_rejects_unknown_category(self):
        """Test categories outside the closed set are rejected."""
        with pytest.raises(InvalidPermissionRecordError):
            PermissionDefinition(code="storage:view", category="storage")

    def test_definition_rejects_category_mismatch(self):
        """Test the category field must equal the first code segment."""
        with pytest.raises(InvalidPermissionRecordError) as exc_info:
            PermissionDefinition(code="infra:view", category="service")

        assert exc_info.value.details["code"] == "infra:view"

    def test_definition_is_immutable(self):
        """Test definitions cannot be mutated after load."""
        definition = _definition("device:view", "view")

        with pytest.raises(FrozenInstanceError):
            definition.code = "device:create"

    def test_missing_subcategory_groups_as_other(self):
        """Test effective subcategory defaults to 'other'."""
        assert _definition("database:update").effective_subcategory == "other"
        assert _definition("database:view", "view").effective_subcategory == "view"

    def test_low_risk_without_approval_needs_no_security_check(self):
        definition = _definition("device:view", "view")

        assert not definition.is_high_risk_level
        assert not definition.requires_security_check()

    def test_matches_search_is_case_insensitive(self):
        """Test search matches code, Korean name and description."""
        definition = _definition(
            "service:build:execute",
            "execute",
            name_ko="빌드 실행",
            description="Run a Pipeline build",
        )

        assert definition.matches_search("BUILD:EXEC")
        assert definition.matches_search("빌드")
        assert definition.matches_search("pipeline")
        assert not definition.matches_search("restore")

    def test_from_record_and_to_dict(self):
        """Test conversion from a validated record and back."""
        record = PermissionRecord.model_validate({
            "id": 7,
            "code": "  infra:k8s:manage ",
            "name": "Manage Kubernetes",
            "category": "infra",
            "subcategory": "manage",
            "risk_level": "high",
            "unexpected_column": "ignored",
        })

        definition = PermissionDefinition.from_record(record)
        data = definition.to_dict()

        assert definition.code == "infra:k8s:manage"
        assert data["category"] == "infra"
        assert data["risk_level"] == "high"
        assert data["id"] == 7
        assert "unexpected_column" not in data

    def test_null_display_fields_fall_back_to_defaults(self):
        record = PermissionRecord.model_validate({
            "code": "device:view",
            "category": "device",
            "name": None,
            "name_ko": None,
            "risk_level": None,
            "requires_approval": None,
            "display_order": None,
        })

        definition = PermissionDefinition.from_record(record)

        assert definition.name == ""
        assert definition.name_ko == ""
        assert definition.risk_level is RiskLevel.LOW
        assert definition.requires_approval is False
        assert definition.display_order == 0


class TestSubcategoryOrdering:
    """Test cases for subcategory ordering helpers."""

    def test_subcategory_rank_places_unknown_last(self):
        assert subcategory_rank("view") == 0
        assert subcategory_rank("other") == 6
        assert subcategory_rank("custom") > subcategory_rank("other")

    def test_group_by_subcategory_order(self):
        """Test groups follow the priority list, unknown ones last in appearance order."""
        definitions = [
            _definition("service:build:execute", "execute"),
            _definition("service:zeta", "zeta"),
            _definition("service:update", "update"),
            _definition("service:alpha", "alpha"),
            _definition("service:view", "view"),
            _definition("service:misc"),
        ]

        groups = group_by_subcategory(definitions)

        assert [name for name, _ in groups] == [
            "view", "update", "execute", "other", "zeta", "alpha",
        ]
        assert [d.code for d in groups[0][1]] == ["service:view"]


class TestCatalogSnapshot:
    """Test cases for CatalogSnapshot."""

    def test_grouped_preserves_category_order_and_sorts_subcategories(self, catalog):
        """Test category insertion order and stable subcategory sort."""
        assert catalog.categories == [
            PermissionCategory.SERVICE,
            PermissionCategory.INFRA,
            PermissionCategory.BACKUP,
            PermissionCategory.DEVICE,
            PermissionCategory.DATABASE,
        ]
        assert [d.code for d in catalog.grouped[PermissionCategory.SERVICE]] == [
            "service:view",
            "service:build:view",
            "service:operate:logs",
            "service:create",
            "service:update",
            "service:delete",
            "service:build:execute",
            "service:operate:restart",
            "service:operate:exec",
        ]
        assert [d.code for d in catalog.grouped[PermissionCategory.DATABASE]] == [
            "database:view",
            "database:test",
            "database:migrate:execute",
            "database:update",
        ]

    def test_all_keeps_load_order(self, catalog):
        codes = [d.code for d in catalog.all]

        assert codes[0] == "service:view"
        assert codes[-1] == "database:update"
        assert len(codes) == 21

    def test_hidden_codes_are_known_but_not_visible(self, catalog):
        """Test hidden codes stay resolvable but are not enumerated."""
        assert catalog.is_known("backup:download")
        assert "backup:download" not in catalog
        assert catalog.get("backup:download") is None
        assert "backup:download" not in catalog.codes

    def test_get_and_is_known(self, catalog):
        assert catalog.get("infra:k8s:manage").risk_level is RiskLevel.HIGH
        assert catalog.is_known("device:view")
        assert not catalog.is_known("device:delete")
        assert not catalog.is_known("storage:view")

    def test_search_filters_groups(self, catalog):
        """Test search omits categories with no match."""
        result = catalog.search("restart")

        assert list(result) == [PermissionCategory.SERVICE]
        assert [d.code for d in result[PermissionCategory.SERVICE]] == ["service:operate:restart"]

    def test_blank_search_returns_everything(self, catalog):
        assert catalog.search("   ") == catalog.grouped

    def test_in_category_and_filter(self, catalog):
        assert [d.code for d in catalog.in_category(PermissionCategory.DEVICE)] == [
            "device:view",
            "device:create",
        ]
        assert [d.code for d in catalog.filter(lambda d: d.requires_approval)] == ["backup:restore"]

    def test_grouped_returns_copies(self, catalog):
        """Test callers cannot mutate the snapshot through returned lists."""
        grouped = catalog.grouped
        grouped[PermissionCategory.DEVICE].clear()

        assert len(catalog.grouped[PermissionCategory.DEVICE]) == 2

    def test_empty_snapshot(self):
        snapshot = CatalogSnapshot.empty()

        assert snapshot.is_empty
        assert snapshot.all == []
        assert snapshot.grouped == {}
        assert not snapshot.is_known("service:view")

    def test_build_snapshot_merges_known_codes(self):
        snapshot = build_snapshot(
            [_definition("device:view", "view")],
            known_codes={"device:secret"},
        )

        assert snapshot.known_codes == frozenset({"device:view", "device:secret"})
        assert snapshot.codes == frozenset({"device:view"})
