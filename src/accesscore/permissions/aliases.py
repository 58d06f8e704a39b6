"""Consumer-facing lookup tables derived from the catalog.

Provides:
- ``build_module_access_map()`` — keyword → modules unlocked by any
  permission carrying that keyword.
- ``build_legacy_action_map()`` — ``manage_<module>`` / ``view_<module>``
  → fully-qualified permissions satisfying the old-style action.

Both are pure functions of the catalog and are recomputed on every call.
They default to the accounting application and its hand-curated aliases,
but accept any application and alias table.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from .constants import READ_PERMISSION_CODES, Permissions
from .models import Catalog

ACCOUNTING_APP = "accounting"

# Extra keywords a module's permissions unlock, beyond the module itself.
ACCOUNTING_MODULE_ALIASES: dict[str, tuple[str, ...]] = {
    # Accounts receivable umbrella
    "invoices": ("accounts_receivable",),
    "customers": ("accounts_receivable",),
    "credit_notes": ("accounts_receivable",),
    "sales_orders": ("accounts_receivable",),
    "estimates": ("accounts_receivable",),
    # Accounts payable umbrella
    "bills": ("accounts_payable",),
    "vendors": ("accounts_payable",),
    "purchase_orders": ("accounts_payable",),
    "expense_reports": ("accounts_payable",),
    "vendor_credits": ("accounts_payable",),
    # Older sidebar module names
    "general_ledger": ("accounting",),
    "chart_of_accounts": ("accounting",),
    "journal_entries": ("accounting",),
    "budgeting": ("financial_planning",),
    "banking": ("bank_accounts", "bank_reconciliation", "cash_flow"),
    "tax": ("tax_management", "gst", "tds", "tax_compliance"),
    "payroll": ("payroll_employees", "payroll_runs", "payroll_payslips"),
    "reports": ("financial_statements",),
    "analytics": ("reports",),
    "compliance": ("audit",),
    "projects": ("time_tracking", "project_billing", "project_costing"),
    "system": ("user_management", "system_admin", "settings", "admin_settings", "rbac"),
}

# Umbrella legacy name → modules whose manage_/view_ entries it unions.
ACCOUNTING_LEGACY_COMPOSITES: dict[str, tuple[str, ...]] = {
    "accounting": ("general_ledger", "chart_of_accounts"),
}

# Legacy name → module it is another name for.
ACCOUNTING_LEGACY_RENAMES: dict[str, str] = {
    "entities": "multi_entity",
}


def _unique(values: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(values))


def build_module_access_map(
    catalog: Catalog,
    app_code: str = ACCOUNTING_APP,
    aliases: Mapping[str, Iterable[str]] = ACCOUNTING_MODULE_ALIASES,
) -> dict[str, list[str]]:
    """Keyword → deduplicated list of modules it unlocks.

    Every module of the application unlocks itself. ``aliases`` then adds
    umbrella and legacy module names; aliases for modules the application
    does not define are ignored.

    Example::

        build_module_access_map(DEFAULT_CATALOG)["banking"]
        # ["banking", "bank_accounts", "bank_reconciliation", "cash_flow"]
    """
    app = catalog.get_application(app_code)
    if app is None:
        return {}

    access: dict[str, list[str]] = {code: [code] for code in app.module_codes}
    for module_code, extra in aliases.items():
        if module_code in access:
            access[module_code].extend(extra)

    return {keyword: _unique(modules) for keyword, modules in access.items()}


def build_legacy_action_map(
    catalog: Catalog,
    app_code: str = ACCOUNTING_APP,
    composites: Mapping[str, Iterable[str]] = ACCOUNTING_LEGACY_COMPOSITES,
    renames: Mapping[str, str] = ACCOUNTING_LEGACY_RENAMES,
) -> dict[str, list[str]]:
    """Legacy action name → fully-qualified permissions satisfying it.

    For each module: ``manage_<module>`` maps to every permission of the
    module, ``view_<module>`` to its ``read``/``read_all`` permissions
    (omitted when the module defines neither). Composites union the
    entries of their member modules; renames copy a module's entries
    under another name. Missing members are skipped.

    Composite ``view_`` entries union every member read code, so
    ``view_accounting`` includes ``general_ledger.read_all`` when the
    ledger defines it, not only the two ``read`` codes.
    """
    app = catalog.get_application(app_code)
    if app is None:
        return {}

    actions: dict[str, list[str]] = {}
    for module in app.modules:
        actions[Permissions.manage(module.module_code)] = [
            Permissions.full_code(app_code, module.module_code, p.code) for p in module.permissions
        ]
        read_codes = [
            Permissions.full_code(app_code, module.module_code, p.code)
            for p in module.permissions
            if p.code in READ_PERMISSION_CODES
        ]
        if read_codes:
            actions[Permissions.view(module.module_code)] = read_codes

    derived: dict[str, list[str]] = {}
    for name, members in composites.items():
        for builder in (Permissions.manage, Permissions.view):
            parts = [actions[builder(m)] for m in members if builder(m) in actions]
            if parts:
                derived[builder(name)] = _unique(code for part in parts for code in part)

    for name, module_code in renames.items():
        for builder in (Permissions.manage, Permissions.view):
            if builder(module_code) in actions:
                derived[builder(name)] = list(actions[builder(module_code)])

    actions.update(derived)
    return actions


__all__ = [
    "ACCOUNTING_APP",
    "ACCOUNTING_LEGACY_COMPOSITES",
    "ACCOUNTING_LEGACY_RENAMES",
    "ACCOUNTING_MODULE_ALIASES",
    "build_legacy_action_map",
    "build_module_access_map",
]
