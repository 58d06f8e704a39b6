"""Tests for catalog models and the default catalog."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from accesscore import (
    DEFAULT_CATALOG,
    Catalog,
    CatalogIntegrityError,
    Module,
    Permission,
)


class TestCatalogModels:
    """Tests for Catalog.from_data and typed lookups."""

    def test_from_data_keeps_declaration_order(self, catalog: Catalog) -> None:
        """Applications and modules keep declaration order."""
        assert catalog.app_codes == ("crm", "accounting")
        assert catalog.get_application("crm").module_codes == ("leads", "dashboard")

    def test_permission_tuple_without_description(self, catalog: Catalog) -> None:
        """Two-element permission tuples default the description to empty."""
        permission = catalog.get_permission("crm", "dashboard", "view")
        assert permission == Permission(code="view", name="View Dashboard", description="")

    def test_lookup_misses_return_none(self, catalog: Catalog) -> None:
        """Unknown codes are an explicit None, never an exception."""
        assert catalog.get_application("nope") is None
        assert catalog.get_module("crm", "nope") is None
        assert catalog.get_module("nope", "leads") is None
        assert catalog.get_permission("crm", "leads", "nope") is None

    def test_mapping_permissions_accepted(self) -> None:
        """Permissions may be given as mappings instead of tuples."""
        catalog = Catalog.from_data([
            {
                "app_code": "hr",
                "app_name": "HR",
                "modules": {
                    "leave": {"permissions": [{"code": "approve", "name": "Approve Leave"}]},
                },
            },
        ])
        assert catalog.get_permission("hr", "leave", "approve").name == "Approve Leave"

    def test_serializes_camel_case(self, catalog: Catalog) -> None:
        """Dumped catalog uses the camelCase wire keys."""
        data = catalog.get_application("crm").model_dump(by_alias=True)
        assert data["appCode"] == "crm"
        assert data["sortOrder"] == 2
        assert data["modules"][0]["moduleCode"] == "leads"
        assert "isCore" in data["modules"][0]

    def test_models_are_frozen(self, catalog: Catalog) -> None:
        """Catalog nodes cannot be mutated after construction."""
        module = catalog.get_module("crm", "leads")
        with pytest.raises(ValidationError):
            module.module_name = "Changed"  # type: ignore[misc]


class TestCatalogIntegrity:
    """Uniqueness and separator rules enforced at construction."""

    def test_duplicate_app_code_rejected(self) -> None:
        with pytest.raises(CatalogIntegrityError):
            Catalog.from_data([
                {"app_code": "crm", "app_name": "A", "modules": {}},
                {"app_code": "crm", "app_name": "B", "modules": {}},
            ])

    def test_duplicate_permission_code_rejected(self) -> None:
        with pytest.raises(CatalogIntegrityError):
            Catalog.from_data([
                {
                    "app_code": "crm",
                    "app_name": "CRM",
                    "modules": {"leads": {"permissions": [("read", "A"), ("read", "B")]}},
                },
            ])

    def test_duplicate_module_code_rejected(self) -> None:
        """Module codes are unique within an application."""
        with pytest.raises(CatalogIntegrityError):
            Catalog.from_data([
                {
                    "app_code": "crm",
                    "app_name": "CRM",
                    "modules": {
                        "leads": {"permissions": [("read", "A")]},
                        "leads_alias": {"module_code": "leads", "permissions": [("read", "A")]},
                    },
                },
            ])

    def test_same_module_code_in_two_apps_allowed(self) -> None:
        """Module codes only need to be unique within their application."""
        catalog = Catalog.from_data([
            {"app_code": "crm", "app_name": "CRM", "modules": {"dashboard": {"permissions": [("view", "V")]}}},
            {"app_code": "hr", "app_name": "HR", "modules": {"dashboard": {"permissions": [("view", "V")]}}},
        ])
        assert catalog.get_module("hr", "dashboard") is not None

    def test_dotted_code_rejected(self) -> None:
        """Segments of a fully-qualified code never contain dots."""
        with pytest.raises(CatalogIntegrityError):
            Catalog.from_data([
                {
                    "app_code": "crm",
                    "app_name": "CRM",
                    "modules": {"system": {"permissions": [("credit_config.view", "View")]}},
                },
            ])

    def test_error_carries_messages(self) -> None:
        with pytest.raises(CatalogIntegrityError) as exc_info:
            Catalog.from_data([
                {"app_code": "crm", "modules": {}},
                {"app_code": "crm", "modules": {}},
            ])
        assert exc_info.value.code == "CATALOG_INTEGRITY_ERROR"
        assert any("duplicate application codes" in msg for msg in exc_info.value.details["errors"])

    def test_empty_names_tolerated(self) -> None:
        """Missing names are a validator finding, not a construction error."""
        catalog = Catalog.from_data([{"app_code": "crm", "modules": {"leads": {"permissions": []}}}])
        assert catalog.get_module("crm", "leads").permissions == ()


class TestDefaultCatalog:
    """Invariants of the shipped catalog."""

    def test_known_applications(self) -> None:
        assert DEFAULT_CATALOG.app_codes == (
            "crm",
            "hr",
            "affiliate_connect",
            "project_management",
            "operations",
            "accounting",
        )

    def test_unique_codes(self) -> None:
        """Codes are unique at every level."""
        app_codes = DEFAULT_CATALOG.app_codes
        assert len(app_codes) == len(set(app_codes))
        for app in DEFAULT_CATALOG.applications:
            assert len(app.module_codes) == len(set(app.module_codes)), app.app_code
            for module in app.modules:
                codes = module.permission_codes
                assert len(codes) == len(set(codes)), f"{app.app_code}.{module.module_code}"

    def test_non_empty(self) -> None:
        """Every application has modules and every module has permissions."""
        for app in DEFAULT_CATALOG.applications:
            assert app.modules, app.app_code
            for module in app.modules:
                assert module.permissions, f"{app.app_code}.{module.module_code}"

    def test_no_dotted_segments(self) -> None:
        for app in DEFAULT_CATALOG.applications:
            for module in app.modules:
                for permission in module.permissions:
                    assert "." not in permission.code

    def test_dashboard_permissions(self) -> None:
        module = DEFAULT_CATALOG.get_module("hr", "dashboard")
        assert isinstance(module, Module)
        assert module.permission_codes == ("view", "customize", "export")
