"""Tests for catalog and plan-access diagnostics."""

from __future__ import annotations

from accesscore import (
    DEFAULT_CATALOG,
    DEFAULT_PLAN_ACCESS,
    WILDCARD,
    Catalog,
    PlanAccessProjection,
    validate_matrix,
    validate_plan_access,
)


class TestValidateMatrix:
    """Tests for validate_matrix."""

    def test_default_catalog_is_valid(self) -> None:
        assert validate_matrix(DEFAULT_CATALOG) == []

    def test_fixture_catalog_is_valid(self, catalog: Catalog) -> None:
        assert validate_matrix(catalog) == []

    def test_missing_application_name(self) -> None:
        catalog = Catalog.from_data([
            {"app_code": "crm", "modules": {"leads": {"permissions": [("read", "View")]}}},
        ])
        assert validate_matrix(catalog) == ["Application 'crm' is missing a name"]

    def test_application_without_modules(self) -> None:
        catalog = Catalog.from_data([{"app_code": "crm", "app_name": "CRM"}])
        assert validate_matrix(catalog) == ["Application 'crm' has no modules"]

    def test_module_without_permissions(self) -> None:
        catalog = Catalog.from_data([
            {"app_code": "crm", "app_name": "CRM", "modules": {"leads": {"module_name": "Leads"}}},
        ])
        assert validate_matrix(catalog) == ["Module 'crm.leads' has no permissions"]

    def test_permission_missing_name_or_code(self) -> None:
        catalog = Catalog.from_data([
            {
                "app_code": "crm",
                "app_name": "CRM",
                "modules": {"leads": {"permissions": [("read", ""), ("", "Nameless code")]}},
            },
        ])
        assert validate_matrix(catalog) == [
            "Permission 'read' in module 'crm.leads' is missing a code or name",
            "Permission '#1' in module 'crm.leads' is missing a code or name",
        ]

    def test_reports_every_defect(self) -> None:
        """Defects are independent; one does not hide another."""
        catalog = Catalog.from_data([
            {"app_code": "crm", "modules": {"leads": {}}},
            {"app_code": "hr"},
        ])
        assert validate_matrix(catalog) == [
            "Application 'crm' is missing a name",
            "Module 'crm.leads' has no permissions",
            "Application 'hr' is missing a name",
            "Application 'hr' has no modules",
        ]


class TestValidatePlanAccess:
    """Tests for validate_plan_access."""

    def test_default_plans_are_valid(self) -> None:
        assert validate_plan_access(DEFAULT_PLAN_ACCESS, DEFAULT_CATALOG) == []

    def test_fixture_plans_are_valid(self, projection: PlanAccessProjection, catalog: Catalog) -> None:
        assert validate_plan_access(projection, catalog) == []

    def test_unknown_application(self, catalog: Catalog) -> None:
        projection = PlanAccessProjection.from_data({"free": {"applications": ["payroll"]}})
        assert validate_plan_access(projection, catalog) == ["Plan 'free' grants unknown application 'payroll'"]

    def test_unknown_listed_module(self, catalog: Catalog) -> None:
        projection = PlanAccessProjection.from_data({
            "free": {"applications": ["crm"], "modules": {"crm": ["leads", "ghost"]}},
        })
        assert validate_plan_access(projection, catalog) == ["Plan 'free' lists unknown module 'crm.ghost'"]

    def test_stale_permission_code(self, catalog: Catalog) -> None:
        projection = PlanAccessProjection.from_data({
            "free": {
                "applications": ["crm"],
                "modules": {"crm": ["leads"]},
                "permissions": {"crm": {"leads": ["read", "teleport"]}},
            },
        })
        assert validate_plan_access(projection, catalog) == [
            "Plan 'free' references unknown permission 'crm.leads.teleport'",
        ]

    def test_granted_module_not_listed(self, catalog: Catalog) -> None:
        projection = PlanAccessProjection.from_data({
            "free": {
                "applications": ["crm"],
                "modules": {"crm": ["leads"]},
                "permissions": {"crm": {"leads": ["read"], "dashboard": ["view"]}},
            },
        })
        assert validate_plan_access(projection, catalog) == [
            "Plan 'free' grants permissions on 'crm.dashboard' without listing the module",
        ]

    def test_granted_unknown_module(self, catalog: Catalog) -> None:
        projection = PlanAccessProjection.from_data({
            "free": {
                "applications": ["crm"],
                "modules": {"crm": ["leads"]},
                "permissions": {"crm": {"ghost": WILDCARD}},
            },
        })
        assert validate_plan_access(projection, catalog) == [
            "Plan 'free' grants permissions on unknown module 'crm.ghost'",
        ]

    def test_wildcards_are_not_reported(self, catalog: Catalog) -> None:
        projection = PlanAccessProjection.from_data({
            "free": {
                "applications": ["crm"],
                "modules": {"crm": ["dashboard"]},
                "permissions": {"crm": {"dashboard": WILDCARD}},
            },
            "pro": {"applications": ["crm"], "permissions": {"crm": WILDCARD}},
        })
        assert validate_plan_access(projection, catalog) == []
