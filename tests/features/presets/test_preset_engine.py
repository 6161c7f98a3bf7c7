"""Tests for the preset engine."""

import pytest

from neo_authz.config.constants import PermissionCategory
from neo_authz.core.exceptions import PresetNotFoundError
from neo_authz.features.catalog import load_catalog
from neo_authz.features.grants import BasicGrantSet, GranularGrantSet
from neo_authz.features.presets import Preset, PresetRegistry, create_preset_engine


@pytest.fixture
def device_catalog():
    """Catalog holding only device:view and device:create."""
    return load_catalog(
        [
            {"code": "device:view", "category": "device", "subcategory": "view"},
            {"code": "device:create", "category": "device", "subcategory": "create"},
        ],
        hidden_permissions=(),
    )


class TestAdditivePresets:
    """Additive presets toggle their matched codes."""

    def test_partial_selection_grants_everything(self, preset_engine, device_catalog):
        """Test applying to a partial selection moves to the fully granted state."""
        device = preset_engine.registry.get("device")

        result = preset_engine.apply(device, GranularGrantSet.of("device:view"), device_catalog)

        assert result == GranularGrantSet.of("device:view", "device:create")

    def test_full_selection_removes_everything(self, preset_engine, device_catalog):
        """Test applying again to the fully granted state removes all matched codes."""
        device = preset_engine.registry.get("device")
        granted = preset_engine.apply(device, GranularGrantSet.of("device:view"), device_catalog)

        result = preset_engine.apply(device, granted, device_catalog)

        assert result == GranularGrantSet()

    @pytest.mark.parametrize("start", [
        frozenset(),
        frozenset({"infra:view", "service:view"}),
        frozenset({"device:view", "device:create", "database:view"}),
    ])
    def test_toggle_pairs_restore_original(self, preset_engine, catalog, start):
        """Test applying twice restores sets that did not partially overlap."""
        current = GranularGrantSet(start)

        for preset in preset_engine.registry.additive_presets():
            matched = preset.matched_codes(catalog)
            if 0 < len(matched & current.codes) < len(matched):
                continue
            twice = preset_engine.apply(preset, preset_engine.apply(preset, current, catalog), catalog)
            assert twice == current, preset.key

    def test_other_codes_are_untouched(self, preset_engine, catalog):
        current = GranularGrantSet.of("service:view", "custom:code")

        result = preset_engine.apply_key("device", current, catalog)

        assert result.codes == {"service:view", "custom:code", "device:view", "device:create"}

    def test_empty_match_is_noop(self, preset_engine):
        empty_catalog = load_catalog([], hidden_permissions=())
        current = GranularGrantSet.of("device:view")
        device = preset_engine.registry.get("device")

        assert preset_engine.apply(device, current, empty_catalog) == current
        assert preset_engine.apply(device, current, None) == current
        assert preset_engine.is_active(device, current, empty_catalog) is False

    def test_is_active(self, preset_engine, device_catalog):
        device = preset_engine.registry.get("device")

        assert preset_engine.is_active(device, GranularGrantSet.of("device:view"), device_catalog) is False
        assert preset_engine.is_active(
            device, GranularGrantSet.of("device:view", "device:create"), device_catalog
        ) is True

    def test_basic_input_is_expanded_first(self, preset_engine, catalog):
        """Test basic grants are expanded and the output is granular."""
        result = preset_engine.apply_key("infra", BasicGrantSet.of("device"), catalog)

        assert isinstance(result, GranularGrantSet)
        assert result.codes == {
            "device:view", "device:create", "device:update",
            "infra:view", "infra:k8s:manage", "infra:docker:view",
        }


class TestReplacePresets:
    """Replace presets set the grants to exactly the matched codes."""

    def test_viewer_replaces_current(self, preset_engine, catalog):
        """Test viewer yields every visible ':view' code and drops the rest."""
        result = preset_engine.apply_key("viewer", GranularGrantSet.of("service:build:execute"), catalog)

        assert result.codes == {
            "service:view",
            "service:build:view",
            "infra:view",
            "infra:docker:view",
            "backup:view",
            "device:view",
            "database:view",
        }

    def test_admin_selects_all_visible_codes(self, preset_engine, catalog):
        result = preset_engine.apply_key("admin", GranularGrantSet(), catalog)

        assert result.codes == catalog.codes
        assert "backup:download" not in result

    def test_read_update(self, preset_engine, catalog):
        result = preset_engine.apply_key("read-update", GranularGrantSet(), catalog)

        assert {"service:create", "service:update", "backup:create", "device:create"} <= result.codes
        assert "database:update" in result
        assert "service:delete" not in result
        assert "service:build:execute" not in result

    def test_operator(self, preset_engine, catalog):
        result = preset_engine.apply_key("operator", GranularGrantSet(), catalog)

        assert {"service:operate:restart", "service:operate:logs", "database:test"} <= result.codes
        assert "service:create" not in result

    def test_developer(self, preset_engine, catalog):
        result = preset_engine.apply_key("developer", GranularGrantSet.of("device:view"), catalog)

        assert {d.category for d in map(catalog.get, result.codes)} == {
            PermissionCategory.SERVICE,
            PermissionCategory.DATABASE,
        }
        assert "device:view" not in result

    def test_replace_presets_are_never_active(self, preset_engine, catalog):
        admin = preset_engine.registry.get("admin")

        assert preset_engine.is_active(admin, GranularGrantSet(catalog.codes), catalog) is False


class TestCategoryOperations:
    """Select-all, clear-all and direct toggles."""

    def test_select_category_toggles(self, preset_engine, catalog):
        selected = preset_engine.select_category("backup", GranularGrantSet(), catalog)
        cleared = preset_engine.select_category(PermissionCategory.BACKUP, selected, catalog)

        assert selected.codes == {"backup:view", "backup:create", "backup:restore"}
        assert cleared == GranularGrantSet()

    def test_category_preset_for_unknown_category(self, preset_engine):
        with pytest.raises(PresetNotFoundError):
            preset_engine.category_preset("storage")

    def test_clear_all(self, preset_engine, catalog):
        assert preset_engine.clear_all(GranularGrantSet(catalog.codes), catalog) == GranularGrantSet()

    def test_toggle_permission(self, preset_engine):
        added = preset_engine.toggle_permission(GranularGrantSet(), "device:view", True)
        removed = preset_engine.toggle_permission(added, "device:view", False)

        assert added == GranularGrantSet.of("device:view")
        assert removed == GranularGrantSet()

    def test_toggle_permission_on_basic_grants(self, preset_engine):
        result = preset_engine.toggle_permission(BasicGrantSet.of("device"), "device:update", False)

        assert result == GranularGrantSet.of("device:view", "device:create")

    def test_category_selection(self, preset_engine, catalog):
        current = GranularGrantSet.of("service:view", "service:create")

        assert preset_engine.category_selection("service", current, catalog) == (2, 9)
        assert preset_engine.category_selection("storage", current, catalog) == (0, 0)
        assert preset_engine.category_selection("service", current, None) == (0, 0)


class TestCustomPresets:
    """Engines accept custom registries."""

    def test_empty_registry_is_kept(self, catalog):
        engine = create_preset_engine(registry=PresetRegistry())

        with pytest.raises(PresetNotFoundError):
            engine.apply_key("admin", GranularGrantSet(), catalog)

    def test_custom_additive_preset(self, catalog):
        registry = PresetRegistry()
        registry.register(Preset(
            key="approvals",
            filter=lambda definition: definition.requires_approval,
            additive=True,
        ))
        engine = create_preset_engine(registry=registry)

        result = engine.apply_key("approvals", GranularGrantSet(), catalog)

        assert result == GranularGrantSet.of("backup:restore")
