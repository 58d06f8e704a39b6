"""Shared fixture catalogs and projections."""

from __future__ import annotations

import pytest

from accesscore import (
    WILDCARD,
    Catalog,
    MatrixQueryService,
    PlanAccessProjection,
    PlanResolver,
)

SMALL_CATALOG_DATA = (
    {
        "app_code": "crm",
        "app_name": "CRM",
        "sort_order": 2,
        "modules": {
            "leads": {
                "module_name": "Leads",
                "permissions": (
                    ("read", "View Leads", "View lead records"),
                    ("create", "Create Leads", "Add new leads"),
                ),
            },
            "dashboard": {
                "module_name": "Dashboard",
                "permissions": (
                    ("view", "View Dashboard"),
                    ("customize", "Customize Dashboard"),
                    ("export", "Export Dashboard"),
                ),
            },
        },
    },
    {
        "app_code": "accounting",
        "app_name": "Accounting",
        "sort_order": 1,
        "modules": {
            "invoices": {
                "module_name": "Invoices",
                "permissions": (
                    ("read", "View Invoices"),
                    ("create", "Create Invoices"),
                    ("send", "Send Invoices"),
                ),
            },
            "general_ledger": {
                "module_name": "General Ledger",
                "permissions": (
                    ("read", "View Ledger"),
                    ("read_all", "View All Ledgers"),
                    ("post", "Post Entries"),
                ),
            },
            "chart_of_accounts": {
                "module_name": "Chart of Accounts",
                "permissions": (
                    ("read", "View Accounts"),
                    ("update", "Edit Accounts"),
                ),
            },
            "multi_entity": {
                "module_name": "Multi-Entity",
                "permissions": (
                    ("read", "View Entities"),
                    ("consolidate", "Consolidate"),
                ),
            },
            "audit_log": {
                "module_name": "Audit Log",
                "permissions": (("export", "Export Audit Log"),),
            },
        },
    },
)

SMALL_PLAN_DATA = {
    "free": {
        "applications": ("crm",),
        "modules": {"crm": ("leads",)},
        "permissions": {"crm": {"leads": ("read",)}},
        "credits": {"free": 1000, "paid": 0, "expiry_days": 30},
    },
    "starter": {
        "applications": ("crm", "accounting"),
        "modules": {"crm": ("leads", "dashboard"), "accounting": ("invoices",)},
        "permissions": {
            "crm": {"leads": ("read", "create"), "dashboard": WILDCARD},
            "accounting": {"invoices": ("read", "send")},
        },
        "credits": {"free": 60000, "paid": 0, "expiry_days": 365},
    },
    "enterprise": {
        "applications": ("crm", "accounting"),
        "modules": {
            "crm": ("leads", "dashboard"),
            "accounting": ("invoices", "general_ledger", "chart_of_accounts", "multi_entity", "audit_log"),
        },
        "permissions": {"crm": WILDCARD, "accounting": WILDCARD},
        "credits": {"free": 1200000, "paid": 0, "expiry_days": 365},
    },
}


@pytest.fixture
def catalog() -> Catalog:
    return Catalog.from_data(SMALL_CATALOG_DATA)


@pytest.fixture
def projection() -> PlanAccessProjection:
    return PlanAccessProjection.from_data(SMALL_PLAN_DATA)


@pytest.fixture
def query(catalog: Catalog) -> MatrixQueryService:
    return MatrixQueryService(catalog)


@pytest.fixture
def resolver(projection: PlanAccessProjection, query: MatrixQueryService) -> PlanResolver:
    return PlanResolver(projection, query)
