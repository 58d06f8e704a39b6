"""Tests for runtime access checks."""

from __future__ import annotations

import pytest

from accesscore import (
    DEFAULT_CATALOG,
    DEFAULT_PLAN_ACCESS,
    WILDCARD,
    Catalog,
    MatrixQueryService,
    PlanAccessProjection,
    PlanResolver,
    RoleProvisioner,
    build_legacy_action_map,
    build_module_access_map,
    has_module_access,
    has_permission,
    satisfies_legacy_action,
    unlocked_modules,
)


class TestHasPermission:
    """Tests for has_permission over persisted role permissions."""

    PERMISSIONS = {
        "crm": {"leads": ["read", "create"], "dashboard": WILDCARD},
        "accounting": WILDCARD,
    }

    @pytest.mark.parametrize(
        "full_code, expected",
        [
            ("crm.leads.read", True),
            ("crm.leads.delete", False),
            ("crm.dashboard.anything", False),
            ("crm.contacts.read", False),
            ("accounting.invoices.read", False),
            ("hr.employees.read", False),
        ],
    )
    def test_lookup(self, full_code: str, expected: bool) -> None:
        assert has_permission(self.PERMISSIONS, full_code) is expected

    @pytest.mark.parametrize("full_code", ["", "crm", "crm.leads", "crm.leads.read.extra", "crm..read"])
    def test_malformed_codes_are_denied(self, full_code: str) -> None:
        assert has_permission(self.PERMISSIONS, full_code) is False

    def test_wildcards_need_catalog(self) -> None:
        """Without a catalog a wildcard cannot be bounded and grants nothing."""
        assert has_permission(self.PERMISSIONS, "crm.dashboard.export") is False
        assert has_permission(self.PERMISSIONS, "accounting.does_not_exist.nuke") is False

    def test_wildcards_bounded_by_catalog(self, catalog: Catalog) -> None:
        assert has_permission(self.PERMISSIONS, "crm.dashboard.export", catalog) is True
        assert has_permission(self.PERMISSIONS, "crm.dashboard.anything", catalog) is False
        assert has_permission(self.PERMISSIONS, "accounting.invoices.send", catalog) is True
        assert has_permission(self.PERMISSIONS, "accounting.payroll.run", catalog) is False
        assert has_permission(self.PERMISSIONS, "accounting.does_not_exist.nuke", catalog) is False

    def test_unexpected_shapes_are_denied(self) -> None:
        permissions = {"crm": "leads", "hr": {"employees": "read"}}
        assert has_permission(permissions, "crm.leads.read") is False
        assert has_permission(permissions, "hr.employees.read") is False

    def test_provisioned_role_agrees_with_resolver(
        self, projection: PlanAccessProjection, catalog: Catalog
    ) -> None:
        """Every code a plan resolves to passes the check on its provisioned role."""
        role = RoleProvisioner(projection).build_super_admin_role("starter")
        resolver = PlanResolver(projection, MatrixQueryService(catalog))
        for full_code in resolver.resolve_full_codes("starter"):
            assert has_permission(role.permissions, full_code, catalog)
        assert not has_permission(role.permissions, "accounting.invoices.create", catalog)

    def test_default_enterprise_role(self) -> None:
        role = RoleProvisioner(DEFAULT_PLAN_ACCESS).build_super_admin_role("enterprise")
        assert has_permission(role.permissions, "hr.payroll.process", DEFAULT_CATALOG) is True
        assert has_permission(role.permissions, "crm.system.admin_tenants_read", DEFAULT_CATALOG) is True
        assert has_permission(role.permissions, "hr.does_not_exist.nuke", DEFAULT_CATALOG) is False
        assert has_permission(role.permissions, "hr.does_not_exist.nuke") is False

    def test_default_roles_need_no_catalog(self) -> None:
        """Default plans grant explicit codes, so lookups work without a catalog."""
        role = RoleProvisioner(DEFAULT_PLAN_ACCESS).build_super_admin_role("enterprise")
        assert has_permission(role.permissions, "hr.employees.read") is True
        assert has_permission(role.permissions, "accounting.invoices.send") is True


class TestModuleAccess:
    """Tests for keyword-based module unlocking."""

    @pytest.fixture
    def keyword_map(self, catalog: Catalog) -> dict[str, list[str]]:
        return build_module_access_map(catalog)

    def test_unlocked_by_full_code(self, keyword_map: dict[str, list[str]]) -> None:
        assert unlocked_modules(["accounting.invoices.read"], keyword_map) == {"invoices", "accounts_receivable"}

    def test_unlocked_by_bare_keyword(self, keyword_map: dict[str, list[str]]) -> None:
        assert unlocked_modules(["general_ledger"], keyword_map) == {"general_ledger", "accounting"}

    def test_unknown_keywords_unlock_nothing(self, keyword_map: dict[str, list[str]]) -> None:
        assert unlocked_modules(["crm.leads.read", "banking"], keyword_map) == set()

    def test_has_module_access(self, keyword_map: dict[str, list[str]]) -> None:
        granted = ["accounting.invoices.read"]
        assert has_module_access(granted, "accounts_receivable", keyword_map) is True
        assert has_module_access(granted, "accounts_payable", keyword_map) is False

    def test_banking_on_default_catalog(self) -> None:
        keyword_map = build_module_access_map(DEFAULT_CATALOG)
        granted = ["accounting.banking.read"]
        assert has_module_access(granted, "bank_reconciliation", keyword_map) is True
        assert has_module_access(granted, "cash_flow", keyword_map) is True
        assert has_module_access(granted, "payroll", keyword_map) is False


class TestLegacyActions:
    """Tests for satisfies_legacy_action."""

    @pytest.fixture
    def legacy_map(self, catalog: Catalog) -> dict[str, list[str]]:
        return build_legacy_action_map(catalog)

    def test_view_action(self, legacy_map: dict[str, list[str]]) -> None:
        assert satisfies_legacy_action(["accounting.invoices.read"], "view_invoices", legacy_map) is True
        assert satisfies_legacy_action(["accounting.invoices.send"], "view_invoices", legacy_map) is False

    def test_manage_action(self, legacy_map: dict[str, list[str]]) -> None:
        assert satisfies_legacy_action(["accounting.invoices.send"], "manage_invoices", legacy_map) is True

    def test_composite_action(self, legacy_map: dict[str, list[str]]) -> None:
        granted = ["accounting.chart_of_accounts.read"]
        assert satisfies_legacy_action(granted, "view_accounting", legacy_map) is True

    def test_unknown_action_is_denied(self, legacy_map: dict[str, list[str]]) -> None:
        assert satisfies_legacy_action(["accounting.invoices.read"], "view_payroll", legacy_map) is False

    def test_nothing_granted(self, legacy_map: dict[str, list[str]]) -> None:
        assert satisfies_legacy_action([], "manage_invoices", legacy_map) is False
