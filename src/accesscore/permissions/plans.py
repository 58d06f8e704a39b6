"""Default plan-access projection.

Maps each subscription plan to the applications, modules and permission
codes it grants, plus its credit configuration. Every grant is an explicit
list of codes so persisted roles can be looked up as
``permissions[app_code][module_code]`` without expansion.
"""

from __future__ import annotations

from typing import Any

from .grants import PlanAccessProjection

PLAN_ACCESS_DATA: dict[str, dict[str, Any]] = {
    "free": {
        "applications": ("crm", "accounting"),
        "modules": {
            "crm": ("leads", "contacts", "dashboard"),
            "accounting": (
                "dashboard", "general_ledger", "chart_of_accounts", "journal_entries", "invoices",
                "customers", "bills", "vendors", "reports", "multi_entity",
            ),
        },
        "permissions": {
            "crm": {
                "leads": ("read", "create", "update", "delete"),
                "contacts": ("read", "create", "update", "delete"),
                "dashboard": ("view",),
            },
            "accounting": {
                "dashboard": ("view",),
                "general_ledger": ("read", "create", "update"),
                "chart_of_accounts": ("read", "create", "update"),
                "journal_entries": ("read", "create", "update"),
                "invoices": ("read", "create", "update", "delete"),
                "customers": ("read", "create", "update", "delete"),
                "bills": ("read", "create", "update", "delete"),
                "vendors": ("read", "create", "update", "delete"),
                "reports": ("read", "export"),
                "multi_entity": ("read",),
            },
        },
        "credits": {"free": 1000, "paid": 0, "expiry_days": 30},
    },
    "starter": {
        "applications": ("crm", "hr", "project_management", "accounting"),
        "modules": {
            "crm": ("leads", "contacts", "accounts", "opportunities", "dashboard"),
            "hr": ("employees", "leave", "dashboard"),
            "project_management": ("projects", "tasks", "team", "dashboard"),
            "accounting": (
                "dashboard", "general_ledger", "chart_of_accounts", "journal_entries", "invoices",
                "customers", "credit_notes", "sales_orders", "estimates", "bills", "vendors",
                "purchase_orders", "expense_reports", "vendor_credits", "banking", "tax", "reports",
                "analytics", "workflows", "documents", "notifications", "system",
            ),
        },
        "permissions": {
            "crm": {
                "leads": (
                    "read", "read_all", "create", "update", "delete", "export", "import", "assign",
                    "convert",
                ),
                "contacts": ("read", "read_all", "create", "update", "delete", "export", "import"),
                "accounts": ("read", "read_all", "create", "update", "delete", "export", "import", "assign"),
                "opportunities": (
                    "read", "read_all", "create", "update", "delete", "export", "import", "close",
                    "assign",
                ),
                "dashboard": ("view",),
            },
            "hr": {
                "employees": ("read", "create", "update", "delete"),
                "leave": ("read", "create", "approve"),
                "dashboard": ("view",),
            },
            "project_management": {
                "projects": ("read", "create", "update", "delete", "export", "assign"),
                "tasks": (
                    "read", "read_all", "create", "update", "delete", "export", "assign",
                    "change_status",
                ),
                "team": ("read", "read_all", "create", "update", "delete", "export"),
                "dashboard": ("view",),
            },
            "accounting": {
                "dashboard": ("view", "customize"),
                "general_ledger": ("read", "create", "update", "delete", "post", "export"),
                "chart_of_accounts": ("read", "create", "update", "delete", "export"),
                "journal_entries": ("read", "create", "update", "delete", "post", "export"),
                "invoices": ("read", "read_all", "create", "update", "delete", "send", "export"),
                "customers": ("read", "read_all", "create", "update", "delete", "export", "import"),
                "credit_notes": ("read", "create", "update"),
                "sales_orders": ("read", "create", "update", "delete"),
                "estimates": ("read", "create", "update", "delete", "send"),
                "bills": ("read", "read_all", "create", "update", "delete", "pay", "export"),
                "vendors": ("read", "read_all", "create", "update", "delete", "export", "import"),
                "purchase_orders": ("read", "create", "update", "delete", "approve"),
                "expense_reports": ("read", "create", "update", "approve"),
                "vendor_credits": ("read", "create", "update"),
                "banking": ("read", "create", "update", "reconcile", "export"),
                "tax": ("read", "create", "update", "configure"),
                "reports": ("read", "create", "export"),
                "analytics": ("read", "export"),
                "workflows": ("read", "approve"),
                "documents": ("read", "create", "update"),
                "notifications": ("read", "update"),
                "system": ("settings_read", "users_read", "roles_read", "audit_read"),
            },
        },
        "credits": {"free": 60000, "paid": 0, "expiry_days": 365},
    },
    "professional": {
        "applications": ("crm", "hr", "project_management", "accounting"),
        "modules": {
            "crm": (
                "leads", "contacts", "accounts", "opportunities", "quotations", "invoices",
                "inventory", "product_orders", "tickets", "communications", "calendar", "dashboard",
            ),
            "hr": ("employees", "payroll", "leave", "dashboard"),
            "project_management": (
                "projects", "tasks", "sprints", "time_tracking", "team", "backlog", "documents",
                "analytics", "reports", "chat", "calendar", "kanban", "dashboard", "notifications",
                "workspace",
            ),
            "accounting": (
                "dashboard", "general_ledger", "chart_of_accounts", "journal_entries", "invoices",
                "customers", "credit_notes", "sales_orders", "estimates", "bills", "vendors",
                "purchase_orders", "expense_reports", "vendor_credits", "banking", "tax", "reports",
                "analytics", "budgeting", "cost_accounting", "fixed_assets", "payroll", "projects",
                "inventory", "compliance", "workflows", "documents", "integrations",
                "notifications", "system",
            ),
        },
        "permissions": {
            "crm": {
                "leads": (
                    "read", "read_all", "create", "update", "delete", "export", "import", "assign",
                    "convert",
                ),
                "contacts": ("read", "read_all", "create", "update", "delete", "export", "import"),
                "accounts": ("read", "read_all", "create", "update", "delete", "export", "import", "assign"),
                "opportunities": (
                    "read", "read_all", "create", "update", "delete", "export", "import", "close",
                    "assign",
                ),
                "quotations": ("read", "read_all", "create", "update", "delete", "approve"),
                "invoices": ("read", "read_all", "create", "update", "delete", "export", "send"),
                "inventory": ("read", "create", "update", "delete", "adjust"),
                "product_orders": ("read", "create", "update", "delete"),
                "tickets": ("read", "read_all", "create", "update", "delete", "assign"),
                "communications": ("read", "create", "update", "delete", "send"),
                "calendar": ("read", "create", "update", "delete"),
                "dashboard": ("view",),
            },
            "hr": {
                "employees": ("read", "read_all", "create", "update", "delete"),
                "payroll": ("read", "process"),
                "leave": ("read", "create", "approve", "reject"),
                "dashboard": ("view",),
            },
            "project_management": {
                "projects": (
                    "read", "read_all", "create", "update", "delete", "export", "import", "assign",
                    "archive", "restore", "manage_budget", "manage_timeline", "manage_settings",
                ),
                "tasks": (
                    "read", "read_all", "create", "update", "delete", "export", "import", "assign",
                    "reassign", "change_status", "change_priority", "add_subtasks",
                    "manage_dependencies", "add_attachments", "add_comments", "time_track",
                ),
                "sprints": (
                    "read", "read_all", "create", "update", "delete", "export", "start", "complete",
                    "cancel", "manage_capacity", "assign_tasks", "view_burndown",
                ),
                "time_tracking": (
                    "read", "read_all", "create", "update", "delete", "export", "import", "approve",
                    "reject", "view_reports", "manage_billable",
                ),
                "team": (
                    "read", "read_all", "create", "update", "delete", "export", "import",
                    "assign_roles", "manage_permissions", "view_performance", "manage_availability",
                ),
                "backlog": (
                    "read", "read_all", "create", "update", "delete", "export", "import",
                    "prioritize", "estimate", "move_to_sprint", "manage_epics",
                ),
                "documents": (
                    "read", "read_all", "create", "update", "delete", "export", "download", "share",
                    "version_control", "add_comments", "approve", "manage_permissions",
                ),
                "analytics": (
                    "read", "read_all", "create", "update", "delete", "export", "schedule",
                    "view_dashboards", "customize_dashboards", "view_project_health",
                    "view_team_performance", "view_burndown", "view_velocity",
                ),
                "reports": (
                    "read", "read_all", "create", "update", "delete", "export", "schedule", "share",
                    "generate_pdf", "customize",
                ),
                "chat": (
                    "read", "read_all", "create", "update", "delete", "create_channels",
                    "manage_channels", "delete_channels", "mention_users", "share_files",
                    "pin_messages",
                ),
                "calendar": (
                    "read", "read_all", "create", "update", "delete", "export", "import", "share",
                    "manage_recurring",
                ),
                "kanban": (
                    "read", "read_all", "create", "update", "delete", "move_cards",
                    "manage_columns", "manage_filters", "export",
                ),
                "dashboard": ("view", "customize", "export", "share", "create_widgets", "manage_widgets"),
                "notifications": (
                    "read", "read_all", "create", "update", "delete", "manage_preferences",
                    "mark_read", "bulk_actions",
                ),
                "workspace": (
                    "read", "read_all", "create", "update", "delete", "manage_members",
                    "manage_roles", "manage_settings", "export", "archive", "restore",
                ),
            },
            "accounting": {
                "dashboard": ("view", "customize", "export"),
                "general_ledger": ("read", "create", "update", "delete", "post", "approve", "close_period", "export"),
                "chart_of_accounts": ("read", "create", "update", "delete", "import", "export"),
                "journal_entries": ("read", "create", "update", "delete", "post", "approve", "reverse", "export"),
                "invoices": (
                    "read", "read_all", "create", "update", "delete", "send", "post", "export",
                    "import", "generate_pdf",
                ),
                "customers": ("read", "read_all", "create", "update", "delete", "export", "import"),
                "credit_notes": ("read", "create", "update", "delete", "apply", "export"),
                "sales_orders": ("read", "read_all", "create", "update", "delete", "approve", "convert", "export"),
                "estimates": ("read", "create", "update", "delete", "send", "convert", "export", "generate_pdf"),
                "bills": ("read", "read_all", "create", "update", "delete", "pay", "approve", "export"),
                "vendors": ("read", "read_all", "create", "update", "delete", "export", "import"),
                "purchase_orders": ("read", "read_all", "create", "update", "delete", "approve", "receive", "export"),
                "expense_reports": ("read", "read_all", "create", "update", "delete", "approve", "reimburse", "export"),
                "vendor_credits": ("read", "create", "update", "delete", "apply", "export"),
                "banking": (
                    "read", "read_all", "create", "update", "delete", "reconcile", "import_feeds",
                    "transfer", "export",
                ),
                "tax": (
                    "read", "create", "update", "delete", "configure", "file_returns", "reconcile",
                    "export",
                ),
                "reports": ("read", "read_all", "create", "export", "schedule", "generate_pdf"),
                "analytics": ("read", "read_all", "create", "export", "schedule", "customize_dashboards"),
                "budgeting": ("read", "read_all", "create", "update", "delete", "approve", "forecast", "export"),
                "cost_accounting": ("read", "read_all", "create", "update", "delete", "allocate", "export"),
                "fixed_assets": (
                    "read", "read_all", "create", "update", "delete", "depreciate", "dispose",
                    "transfer", "export",
                ),
                "payroll": ("read", "read_all", "create", "update", "run", "approve", "view_salary", "export"),
                "projects": (
                    "read", "read_all", "create", "update", "delete", "track_time", "bill",
                    "allocate_resources", "export",
                ),
                "inventory": (
                    "read", "read_all", "create", "update", "delete", "adjust", "movement", "count",
                    "export", "import",
                ),
                "compliance": ("read", "read_all", "create", "update", "manage_controls", "audit_trail", "export"),
                "workflows": (
                    "read", "read_all", "create", "update", "delete", "approve", "manage_templates",
                    "export",
                ),
                "documents": ("read", "read_all", "create", "update", "delete", "download", "export"),
                "integrations": ("read", "create", "update", "delete", "manage_api_keys", "manage_webhooks", "sync"),
                "notifications": ("read", "update", "manage_preferences"),
                "system": (
                    "settings_read", "settings_update", "users_read", "users_read_all",
                    "users_create", "users_update", "users_delete", "users_activate",
                    "users_export", "roles_read", "roles_read_all", "roles_create", "roles_update",
                    "roles_delete", "roles_assign", "roles_export", "audit_read", "audit_read_all",
                    "audit_export", "tenant_config_read", "tenant_config_update",
                    "credit_config_view", "credit_config_edit", "dropdowns_read",
                    "dropdowns_manage", "fiscal_year_manage", "sequences_manage",
                ),
            },
        },
        "credits": {"free": 300000, "paid": 0, "expiry_days": 365},
    },
    "enterprise": {
        "applications": ("crm", "hr", "affiliate_connect", "project_management", "operations", "accounting"),
        "modules": {
            "crm": (
                "leads", "accounts", "contacts", "opportunities", "quotations", "invoices",
                "inventory", "product_orders", "sales_orders", "tickets", "communications",
                "calendar", "ai_insights", "form_builder", "analytics", "dashboard", "system",
            ),
            "hr": ("employees", "payroll", "leave", "dashboard"),
            "affiliate_connect": (
                "dashboard", "products", "affiliates", "tracking", "commissions", "campaigns",
                "influencers", "payments", "analytics", "fraud", "communications", "integrations",
                "settings", "support",
            ),
            "project_management": (
                "projects", "tasks", "sprints", "time_tracking", "team", "backlog", "documents",
                "analytics", "reports", "chat", "calendar", "kanban", "dashboard", "notifications",
                "workspace", "workflow", "system",
            ),
            "operations": (
                "dashboard", "inventory", "warehouse", "procurement", "suppliers", "transportation",
                "orders", "fulfillments", "shipments", "catalog", "quality", "rfx", "finance",
                "tax_compliance", "supply_chain", "analytics", "contracts", "service_appointments",
                "notifications", "system", "marketing", "customers", "returns", "customer_portal",
                "vendor_management", "service_providers",
            ),
            "accounting": (
                "dashboard", "general_ledger", "chart_of_accounts", "journal_entries", "invoices",
                "customers", "credit_notes", "sales_orders", "estimates", "bills", "vendors",
                "purchase_orders", "expense_reports", "vendor_credits", "banking", "tax", "reports",
                "analytics", "budgeting", "cost_accounting", "fixed_assets", "payroll", "projects",
                "inventory", "multi_entity", "compliance", "workflows", "documents", "integrations",
                "ai_insights", "security", "performance", "notifications", "system",
            ),
        },
        "permissions": {
            "crm": {
                "leads": (
                    "read", "read_all", "create", "update", "delete", "export", "import", "assign",
                    "convert",
                ),
                "accounts": ("read", "read_all", "create", "update", "delete", "export", "import", "assign"),
                "contacts": ("read", "read_all", "create", "update", "delete", "export", "import"),
                "opportunities": (
                    "read", "read_all", "create", "update", "delete", "export", "import", "close",
                    "assign",
                ),
                "quotations": (
                    "read", "read_all", "create", "update", "delete", "generate_pdf", "send", "approve",
                    "assign",
                ),
                "invoices": (
                    "read", "read_all", "create", "update", "delete", "send", "mark_paid", "generate_pdf",
                    "export",
                ),
                "inventory": (
                    "read", "read_all", "create", "update", "delete", "adjust", "movement", "export",
                    "import",
                ),
                "product_orders": (
                    "read", "read_all", "create", "update", "delete", "process", "export", "import",
                ),
                "sales_orders": (
                    "read", "read_all", "create", "update", "delete", "export", "import", "approve",
                    "assign",
                ),
                "tickets": (
                    "read", "read_all", "create", "update", "delete", "assign", "resolve", "escalate",
                    "export", "import",
                ),
                "communications": (
                    "read", "read_all", "create", "update", "delete", "send", "schedule", "export",
                ),
                "calendar": ("read", "read_all", "create", "update", "delete", "share", "export", "import"),
                "ai_insights": ("read", "read_all", "generate", "export", "schedule"),
                "form_builder": (
                    "read", "read_all", "create", "update", "delete", "export", "import", "publish",
                    "duplicate", "view_analytics", "manage_layout",
                ),
                "analytics": (
                    "read", "read_all", "create", "update", "delete", "export", "calculate",
                    "generate_formula", "validate_formula", "suggest_metrics", "generate_insights",
                    "manage_dashboards", "view_dashboards",
                ),
                "dashboard": ("view", "customize", "export"),
                "system": (
                    "settings_read", "settings_update", "configurations_read", "configurations_create",
                    "configurations_update", "configurations_delete", "tenant_config_read",
                    "tenant_config_update", "admin_tenants_read", "credit_config_view",
                    "credit_config_edit", "credit_config_reset", "credit_config_bulk_update",
                    "system_config_read", "system_config_update", "dropdowns_read", "dropdowns_create",
                    "dropdowns_update", "dropdowns_delete", "integrations_read", "integrations_create",
                    "integrations_update", "integrations_delete", "backup_read", "backup_create",
                    "backup_restore", "maintenance_read", "maintenance_perform", "maintenance_schedule",
                    "users_read", "users_read_all", "users_create", "users_update", "users_delete",
                    "users_activate", "users_reset_password", "users_export", "users_import",
                    "roles_read", "roles_read_all", "roles_create", "roles_update", "roles_delete",
                    "roles_assign", "roles_export", "reports_read", "reports_read_all", "reports_create",
                    "reports_update", "reports_delete", "reports_export", "reports_schedule",
                    "audit_read", "audit_read_all", "audit_export", "audit_view_details",
                    "audit_generate_reports", "activity_logs_read", "activity_logs_read_all",
                    "activity_logs_export", "activity_logs_view_details",
                    "activity_logs_generate_reports",
                ),
            },
            "hr": {
                "employees": ("read", "read_all", "create", "update", "delete", "view_salary", "export"),
                "payroll": ("read", "process", "approve", "export", "generate_reports"),
                "leave": ("read", "create", "approve", "reject", "cancel", "export"),
                "dashboard": ("view", "customize", "export"),
            },
            "affiliate_connect": {
                "dashboard": (
                    "view_dashboard", "view_analytics", "view_reports", "export_data", "view_all_tenants",
                    "view_tenant_analytics", "view_affiliate_analytics", "view_influencer_analytics",
                ),
                "products": (
                    "read", "read_all", "create", "update", "delete", "update_commission",
                    "upload_images", "export", "import", "manage_categories",
                ),
                "affiliates": (
                    "read", "read_all", "create", "update", "delete", "invite", "approve", "reject",
                    "assign_tier", "view_pending", "view_details", "update_details", "view_commissions",
                    "update_commissions",
                ),
                "tracking": (
                    "read", "read_all", "create", "update", "delete", "track_clicks", "track_conversions",
                    "view_analytics", "export_analytics", "manage_utm",
                ),
                "commissions": (
                    "read_tiers", "create_tiers", "update_tiers", "delete_tiers", "read_rules",
                    "create_rules", "update_rules", "delete_rules", "view_products", "update_products",
                    "calculate_commissions", "view_affiliate_commissions",
                ),
                "campaigns": (
                    "read", "read_all", "create", "update", "delete", "join_campaign",
                    "view_participants", "manage_participants", "view_progress", "submit_content",
                    "approve_content", "view_contract", "accept_contract", "manage_versions",
                    "view_analytics",
                ),
                "influencers": (
                    "read", "read_all", "create", "update", "delete", "connect_instagram",
                    "connect_youtube", "connect_twitter", "view_analytics", "view_media_kit",
                    "update_media_kit", "view_ratings", "manage_ratings",
                ),
                "payments": (
                    "read_payouts", "create_payouts", "update_payouts", "view_methods", "add_methods",
                    "update_methods", "delete_methods", "view_history", "process_payments",
                    "view_affiliate_payments",
                ),
                "analytics": (
                    "view_dashboard", "view_campaign_analytics", "view_affiliate_analytics",
                    "view_revenue_analytics", "create_reports", "view_reports", "export_analytics",
                    "view_all_tenants", "view_tenant_analytics",
                ),
                "fraud": (
                    "read_rules", "create_rules", "update_rules", "delete_rules", "view_alerts",
                    "update_alerts", "view_monitoring", "manage_detection",
                ),
                "communications": (
                    "read_templates", "create_templates", "update_templates", "delete_templates",
                    "send_notifications", "view_notifications", "update_notification_status",
                    "manage_messaging",
                ),
                "integrations": (
                    "read_api_keys", "create_api_keys", "update_api_keys", "delete_api_keys",
                    "read_webhooks", "create_webhooks", "update_webhooks", "delete_webhooks",
                    "manage_integrations",
                ),
                "settings": (
                    "read_tenant_settings", "update_tenant_settings", "read_users", "create_users",
                    "update_users", "delete_users", "read_roles", "create_roles", "update_roles",
                    "delete_roles", "manage_permissions",
                ),
                "support": (
                    "read_tickets", "create_tickets", "update_tickets", "view_knowledge_base",
                    "search_knowledge_base", "manage_tickets", "view_all_tickets",
                ),
            },
            "project_management": {
                "projects": (
                    "read", "read_all", "create", "update", "delete", "export", "import", "assign",
                    "archive", "restore", "manage_budget", "manage_timeline", "manage_settings",
                ),
                "tasks": (
                    "read", "read_all", "create", "update", "delete", "export", "import", "assign",
                    "reassign", "change_status", "change_priority", "add_subtasks", "manage_dependencies",
                    "add_attachments", "add_comments", "time_track",
                ),
                "sprints": (
                    "read", "read_all", "create", "update", "delete", "export", "start", "complete",
                    "cancel", "manage_capacity", "assign_tasks", "view_burndown",
                ),
                "time_tracking": (
                    "read", "read_all", "create", "update", "delete", "export", "import", "approve",
                    "reject", "view_reports", "manage_billable", "bulk_approve",
                ),
                "team": (
                    "read", "read_all", "create", "update", "delete", "export", "import", "assign_roles",
                    "manage_permissions", "view_performance", "manage_availability",
                ),
                "backlog": (
                    "read", "read_all", "create", "update", "delete", "export", "import", "prioritize",
                    "estimate", "move_to_sprint", "manage_epics",
                ),
                "documents": (
                    "read", "read_all", "create", "update", "delete", "export", "download", "share",
                    "version_control", "add_comments", "approve", "manage_permissions",
                ),
                "analytics": (
                    "read", "read_all", "create", "update", "delete", "export", "schedule",
                    "view_dashboards", "customize_dashboards", "view_project_health",
                    "view_team_performance", "view_burndown", "view_velocity",
                ),
                "reports": (
                    "read", "read_all", "create", "update", "delete", "export", "schedule", "share",
                    "generate_pdf", "customize",
                ),
                "chat": (
                    "read", "read_all", "create", "update", "delete", "create_channels",
                    "manage_channels", "delete_channels", "mention_users", "share_files", "pin_messages",
                ),
                "calendar": (
                    "read", "read_all", "create", "update", "delete", "export", "import", "share",
                    "manage_recurring",
                ),
                "kanban": (
                    "read", "read_all", "create", "update", "delete", "move_cards", "manage_columns",
                    "manage_filters", "export",
                ),
                "dashboard": ("view", "customize", "export", "share", "create_widgets", "manage_widgets"),
                "notifications": (
                    "read", "read_all", "create", "update", "delete", "manage_preferences", "mark_read",
                    "bulk_actions",
                ),
                "workspace": (
                    "read", "read_all", "create", "update", "delete", "manage_members", "manage_roles",
                    "manage_settings", "export", "archive", "restore",
                ),
                "workflow": (
                    "read", "read_all", "create", "update", "delete", "activate", "deactivate",
                    "view_executions", "manage_rules", "manage_actions", "export", "import",
                ),
                "system": (
                    "settings_read", "settings_update", "users_read", "users_read_all", "users_create",
                    "users_update", "users_delete", "users_activate", "users_reset_password",
                    "users_export", "users_import", "roles_read", "roles_read_all", "roles_create",
                    "roles_update", "roles_delete", "roles_assign", "roles_export", "integrations_read",
                    "integrations_create", "integrations_update", "integrations_delete", "audit_read",
                    "audit_read_all", "audit_export", "audit_view_details", "audit_filter",
                    "audit_generate_reports", "audit_archive", "audit_purge", "activity_logs_read",
                    "activity_logs_read_all", "activity_logs_export", "activity_logs_view_details",
                    "activity_logs_filter", "activity_logs_generate_reports", "activity_logs_archive",
                    "activity_logs_purge",
                ),
            },
            "operations": {
                "dashboard": ("view", "customize", "export"),
                "inventory": (
                    "read", "read_all", "create", "update", "delete", "export", "import", "adjust",
                    "movement",
                ),
                "warehouse": ("read", "read_all", "create", "update", "delete", "cycle_count", "pick_path"),
                "procurement": ("read", "read_all", "create", "update", "delete", "approve", "export"),
                "suppliers": (
                    "read", "read_all", "create", "update", "delete", "view_performance", "view_risk",
                    "export",
                ),
                "transportation": ("read", "read_all", "create", "update", "delete", "export"),
                "orders": ("read", "read_all", "create", "update", "delete", "process", "export"),
                "fulfillments": ("read", "read_all", "create", "update", "delete", "export"),
                "shipments": ("read", "read_all", "create", "update", "delete", "track", "export"),
                "catalog": ("read", "read_all", "create", "update", "delete", "export"),
                "quality": ("read", "read_all", "create", "update", "delete", "export"),
                "rfx": (
                    "read", "read_all", "create", "update", "delete", "submit_response", "evaluate",
                    "export",
                ),
                "finance": ("read", "read_all", "create", "update", "delete", "export"),
                "tax_compliance": ("read", "read_all", "create", "update", "export"),
                "supply_chain": ("read", "read_all", "create", "update", "export"),
                "analytics": ("read", "read_all", "create", "export", "schedule"),
                "contracts": ("read", "read_all", "create", "update", "delete", "export"),
                "service_appointments": ("read", "read_all", "create", "update", "delete", "export"),
                "notifications": ("read", "read_all", "create", "update", "manage_preferences"),
                "system": (
                    "settings_read", "settings_update", "users_read", "users_read_all", "users_create",
                    "users_update", "users_delete", "roles_read", "roles_read_all", "roles_create",
                    "roles_update", "roles_delete", "wrapper_sync",
                ),
                "marketing": ("read", "read_all", "create", "update", "delete", "export"),
                "customers": ("read", "read_all", "create", "update", "delete", "export"),
                "returns": ("read", "read_all", "create", "update", "delete", "approve", "export"),
                "customer_portal": (
                    "read", "read_all", "manage_shop", "manage_services", "manage_orders",
                    "manage_bookings", "manage_payments", "manage_wishlist", "manage_preferences",
                    "export",
                ),
                "vendor_management": (
                    "read", "read_all", "create", "update", "delete", "manage_products", "manage_ratings",
                    "manage_policies", "manage_communication", "view_analytics", "manage_certifications",
                    "manage_portfolios", "export",
                ),
                "service_providers": (
                    "read", "read_all", "create", "update", "delete", "manage_catalog", "manage_pricing",
                    "manage_promotions", "view_analytics", "export",
                ),
            },
            "accounting": {
                "dashboard": ("view", "customize", "export"),
                "general_ledger": (
                    "read", "create", "update", "delete", "post", "approve", "close_period", "export",
                ),
                "chart_of_accounts": ("read", "create", "update", "delete", "import", "export"),
                "journal_entries": (
                    "read", "create", "update", "delete", "post", "approve", "reverse", "export",
                ),
                "invoices": (
                    "read", "read_all", "create", "update", "delete", "send", "post", "export", "import",
                    "generate_pdf",
                ),
                "customers": ("read", "read_all", "create", "update", "delete", "export", "import"),
                "credit_notes": ("read", "create", "update", "delete", "apply", "export"),
                "sales_orders": (
                    "read", "read_all", "create", "update", "delete", "approve", "convert", "export",
                ),
                "estimates": (
                    "read", "create", "update", "delete", "send", "convert", "export", "generate_pdf",
                ),
                "bills": ("read", "read_all", "create", "update", "delete", "pay", "approve", "export"),
                "vendors": ("read", "read_all", "create", "update", "delete", "export", "import"),
                "purchase_orders": (
                    "read", "read_all", "create", "update", "delete", "approve", "receive", "export",
                ),
                "expense_reports": (
                    "read", "read_all", "create", "update", "delete", "approve", "reimburse", "export",
                ),
                "vendor_credits": ("read", "create", "update", "delete", "apply", "export"),
                "banking": (
                    "read", "read_all", "create", "update", "delete", "reconcile", "import_feeds",
                    "transfer", "export",
                ),
                "tax": (
                    "read", "create", "update", "delete", "configure", "file_returns", "reconcile",
                    "export",
                ),
                "reports": ("read", "read_all", "create", "export", "schedule", "generate_pdf"),
                "analytics": ("read", "read_all", "create", "export", "schedule", "customize_dashboards"),
                "budgeting": (
                    "read", "read_all", "create", "update", "delete", "approve", "forecast", "export",
                ),
                "cost_accounting": ("read", "read_all", "create", "update", "delete", "allocate", "export"),
                "fixed_assets": (
                    "read", "read_all", "create", "update", "delete", "depreciate", "dispose", "transfer",
                    "export",
                ),
                "payroll": (
                    "read", "read_all", "create", "update", "delete", "run", "approve", "view_salary",
                    "export",
                ),
                "projects": (
                    "read", "read_all", "create", "update", "delete", "track_time", "bill",
                    "allocate_resources", "export",
                ),
                "inventory": (
                    "read", "read_all", "create", "update", "delete", "adjust", "movement", "count",
                    "export", "import",
                ),
                "multi_entity": (
                    "read", "read_all", "create", "update", "delete", "consolidate", "inter_company",
                    "manage_currency", "export",
                ),
                "compliance": (
                    "read", "read_all", "create", "update", "delete", "manage_controls", "manage_risks",
                    "audit_trail", "export",
                ),
                "workflows": (
                    "read", "read_all", "create", "update", "delete", "approve", "manage_templates",
                    "export",
                ),
                "documents": ("read", "read_all", "create", "update", "delete", "download", "export"),
                "integrations": (
                    "read", "create", "update", "delete", "manage_api_keys", "manage_webhooks", "sync",
                    "export",
                ),
                "ai_insights": ("read", "read_all", "generate", "export", "configure"),
                "security": (
                    "read", "configure", "manage_mfa", "manage_sso", "manage_policies", "view_threats",
                    "manage_alerts", "export",
                ),
                "performance": ("read", "manage_cache", "manage_jobs", "configure_alerts", "export"),
                "notifications": ("read", "update", "manage_preferences"),
                "system": (
                    "settings_read", "settings_update", "users_read", "users_read_all", "users_create",
                    "users_update", "users_delete", "users_activate", "users_reset_password",
                    "users_export", "users_import", "roles_read", "roles_read_all", "roles_create",
                    "roles_update", "roles_delete", "roles_assign", "roles_export", "audit_read",
                    "audit_read_all", "audit_export", "tenant_config_read", "tenant_config_update",
                    "credit_config_view", "credit_config_edit", "backup_create", "backup_restore",
                    "dropdowns_read", "dropdowns_manage", "fiscal_year_manage", "sequences_manage",
                    "wrapper_sync",
                ),
            },
        },
        "credits": {"free": 1200000, "paid": 0, "expiry_days": 365},
    },
}

DEFAULT_PLAN_ACCESS = PlanAccessProjection.from_data(PLAN_ACCESS_DATA)


__all__ = [
    "DEFAULT_PLAN_ACCESS",
    "PLAN_ACCESS_DATA",
]
