"""Tests for the module-access keyword map and the legacy action map."""

from __future__ import annotations

from accesscore import (
    DEFAULT_CATALOG,
    Catalog,
    build_legacy_action_map,
    build_module_access_map,
)
from accesscore.permissions import ACCOUNTING_MODULE_ALIASES


class TestModuleAccessMap:
    """Tests for build_module_access_map."""

    def test_every_module_unlocks_itself(self, catalog: Catalog) -> None:
        access = build_module_access_map(catalog)
        accounting = catalog.get_application("accounting")
        assert set(access) == set(accounting.module_codes)
        for module_code, modules in access.items():
            assert modules[0] == module_code

    def test_umbrella_aliases(self, catalog: Catalog) -> None:
        access = build_module_access_map(catalog)
        assert access["invoices"] == ["invoices", "accounts_receivable"]
        assert access["general_ledger"] == ["general_ledger", "accounting"]
        assert access["chart_of_accounts"] == ["chart_of_accounts", "accounting"]

    def test_module_without_alias(self, catalog: Catalog) -> None:
        access = build_module_access_map(catalog)
        assert access["multi_entity"] == ["multi_entity"]
        assert access["audit_log"] == ["audit_log"]

    def test_alias_for_absent_module_is_ignored(self, catalog: Catalog) -> None:
        """The fixture accounting app has no banking module."""
        assert "banking" not in build_module_access_map(catalog)

    def test_banking_on_default_catalog(self) -> None:
        access = build_module_access_map(DEFAULT_CATALOG)
        assert access["banking"] == ["banking", "bank_accounts", "bank_reconciliation", "cash_flow"]

    def test_default_catalog_umbrellas(self) -> None:
        access = build_module_access_map(DEFAULT_CATALOG)
        receivable = {k for k, modules in access.items() if "accounts_receivable" in modules}
        payable = {k for k, modules in access.items() if "accounts_payable" in modules}
        assert receivable == {"invoices", "customers", "credit_notes", "sales_orders", "estimates"}
        assert payable == {"bills", "vendors", "purchase_orders", "expense_reports", "vendor_credits"}
        assert access["analytics"] == ["analytics", "reports"]
        assert access["compliance"] == ["compliance", "audit"]

    def test_values_are_deduplicated(self, catalog: Catalog) -> None:
        access = build_module_access_map(
            catalog,
            aliases={"invoices": ("invoices", "billing", "billing")},
        )
        assert access["invoices"] == ["invoices", "billing"]

    def test_other_application(self, catalog: Catalog) -> None:
        access = build_module_access_map(catalog, app_code="crm", aliases={"leads": ("pipeline",)})
        assert access == {"leads": ["leads", "pipeline"], "dashboard": ["dashboard"]}

    def test_unknown_application(self, catalog: Catalog) -> None:
        assert build_module_access_map(catalog, app_code="payroll") == {}

    def test_recomputation_is_idempotent(self) -> None:
        """Rebuilding yields the same map and does not mutate the alias table."""
        before = dict(ACCOUNTING_MODULE_ALIASES)
        assert build_module_access_map(DEFAULT_CATALOG) == build_module_access_map(DEFAULT_CATALOG)
        assert ACCOUNTING_MODULE_ALIASES == before


class TestLegacyActionMap:
    """Tests for build_legacy_action_map."""

    def test_manage_covers_every_permission(self, catalog: Catalog) -> None:
        actions = build_legacy_action_map(catalog)
        assert actions["manage_invoices"] == [
            "accounting.invoices.read",
            "accounting.invoices.create",
            "accounting.invoices.send",
        ]

    def test_view_covers_read_codes(self, catalog: Catalog) -> None:
        actions = build_legacy_action_map(catalog)
        assert actions["view_invoices"] == ["accounting.invoices.read"]
        assert actions["view_general_ledger"] == [
            "accounting.general_ledger.read",
            "accounting.general_ledger.read_all",
        ]

    def test_no_view_without_read(self, catalog: Catalog) -> None:
        actions = build_legacy_action_map(catalog)
        assert actions["manage_audit_log"] == ["accounting.audit_log.export"]
        assert "view_audit_log" not in actions

    def test_accounting_composite(self, catalog: Catalog) -> None:
        """The old ``accounting`` action spans the ledger and the chart of accounts."""
        actions = build_legacy_action_map(catalog)
        assert actions["manage_accounting"] == [
            "accounting.general_ledger.read",
            "accounting.general_ledger.read_all",
            "accounting.general_ledger.post",
            "accounting.chart_of_accounts.read",
            "accounting.chart_of_accounts.update",
        ]
        assert actions["view_accounting"] == [
            "accounting.general_ledger.read",
            "accounting.general_ledger.read_all",
            "accounting.chart_of_accounts.read",
        ]

    def test_entities_rename(self, catalog: Catalog) -> None:
        actions = build_legacy_action_map(catalog)
        assert actions["manage_entities"] == actions["manage_multi_entity"]
        assert actions["view_entities"] == ["accounting.multi_entity.read"]

    def test_composite_with_missing_members_is_skipped(self, catalog: Catalog) -> None:
        actions = build_legacy_action_map(catalog, composites={"treasury": ("banking", "cash_flow")}, renames={})
        assert "manage_treasury" not in actions
        assert "view_treasury" not in actions

    def test_default_catalog_entries_are_catalog_codes(self) -> None:
        actions = build_legacy_action_map(DEFAULT_CATALOG)
        accounting = DEFAULT_CATALOG.get_application("accounting")
        for module_code in accounting.module_codes:
            assert f"manage_{module_code}" in actions
        for codes in actions.values():
            for full_code in codes:
                app_code, module_code, code = full_code.split(".")
                assert DEFAULT_CATALOG.get_permission(app_code, module_code, code) is not None

    def test_unknown_application(self, catalog: Catalog) -> None:
        assert build_legacy_action_map(catalog, app_code="payroll") == {}

    def test_recomputation_is_idempotent(self, catalog: Catalog) -> None:
        assert build_legacy_action_map(catalog) == build_legacy_action_map(catalog)
