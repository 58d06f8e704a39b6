"""Customer Relationship Management application catalog."""

from __future__ import annotations

from typing import Any

CRM: dict[str, Any] = {
    "app_code": "crm",
    "app_name": "Customer Relationship Management",
    "description": "Complete CRM solution for managing customers, deals, and sales pipeline",
    "icon": "🎫",
    "base_url": "https://crm.zopkit.com",
    "version": "2.0.0",
    "is_core": True,
    "sort_order": 1,
    "modules": {
        "leads": {
            "module_name": "Lead Management",
            "description": "Manage sales leads and prospects",
            "is_core": True,
            "permissions": (
                ("read", "View Leads", "View and browse lead information"),
                ("read_all", "View All Leads", "View all leads in organization"),
                ("create", "Create Leads", "Add new leads to the system"),
                ("update", "Edit Leads", "Modify existing lead information"),
                ("delete", "Delete Leads", "Remove leads from the system"),
                ("export", "Export Leads", "Export lead data to various formats"),
                ("import", "Import Leads", "Import leads from external files"),
                ("assign", "Assign Leads", "Assign leads to other users"),
                ("convert", "Convert Leads", "Convert leads to opportunities"),
            ),
        },
        "accounts": {
            "module_name": "Account Management",
            "description": "Manage customer accounts and companies",
            "is_core": True,
            "permissions": (
                ("read", "View Accounts", "View and browse account information"),
                ("read_all", "View All Accounts", "View all accounts in organization"),
                ("create", "Create Accounts", "Add new accounts to the system"),
                ("update", "Edit Accounts", "Modify existing account information"),
                ("delete", "Delete Accounts", "Remove accounts from the system"),
                ("export", "Export Accounts", "Export account data"),
                ("import", "Import Accounts", "Import accounts from files"),
                ("assign", "Assign Accounts", "Assign accounts to other users"),
            ),
        },
        "contacts": {
            "module_name": "Contact Management",
            "description": "Manage customer contacts and relationships",
            "is_core": True,
            "permissions": (
                ("read", "View Contacts", "View and browse contact information"),
                ("read_all", "View All Contacts", "View all contacts in organization"),
                ("create", "Create Contacts", "Add new contacts to the system"),
                ("update", "Edit Contacts", "Modify existing contact information"),
                ("delete", "Delete Contacts", "Remove contacts from the system"),
                ("export", "Export Contacts", "Export contact data"),
                ("import", "Import Contacts", "Import contacts from files"),
                ("assign", "Assign Contacts", "Assign contacts to other users"),
            ),
        },
        "opportunities": {
            "module_name": "Opportunity Management",
            "description": "Manage sales opportunities and deals",
            "is_core": True,
            "permissions": (
                ("read", "View Opportunities", "View opportunity information"),
                ("read_all", "View All Opportunities", "View all opportunities in organization"),
                ("create", "Create Opportunities", "Add new opportunities"),
                ("update", "Edit Opportunities", "Modify opportunity information"),
                ("delete", "Delete Opportunities", "Remove opportunities"),
                ("export", "Export Opportunities", "Export opportunity data"),
                ("import", "Import Opportunities", "Import opportunities from files"),
                ("close", "Close Opportunities", "Mark opportunities as won/lost"),
                ("assign", "Assign Opportunities", "Assign opportunities to other users"),
            ),
        },
        "quotations": {
            "module_name": "Quote Management",
            "description": "Create and manage sales quotations",
            "is_core": False,
            "permissions": (
                ("read", "View Quotations", "View quotation information"),
                ("read_all", "View All Quotations", "View all quotations in organization"),
                ("create", "Create Quotations", "Create new quotations"),
                ("update", "Edit Quotations", "Modify quotation information"),
                ("delete", "Delete Quotations", "Remove quotations"),
                ("generate_pdf", "Generate PDF", "Generate PDF versions of quotations"),
                ("send", "Send Quotations", "Send quotations to customers"),
                ("approve", "Approve Quotations", "Approve quotations for sending"),
                ("assign", "Assign Quotations", "Assign quotations to other users"),
            ),
        },
        "invoices": {
            "module_name": "Invoice Management",
            "description": "Create and manage customer invoices",
            "is_core": True,
            "permissions": (
                ("read", "View Invoices", "View invoice information"),
                ("read_all", "View All Invoices", "View all invoices in organization"),
                ("create", "Create Invoices", "Create new invoices"),
                ("update", "Edit Invoices", "Modify invoice information"),
                ("delete", "Delete Invoices", "Remove invoices"),
                ("export", "Export Invoices", "Export invoice data"),
                ("send", "Send Invoices", "Send invoices to customers"),
                ("mark_paid", "Mark as Paid", "Mark invoices as paid"),
                ("generate_pdf", "Generate PDF", "Generate PDF versions"),
                ("assign", "Assign Invoices", "Assign invoices to other users"),
            ),
        },
        "inventory": {
            "module_name": "Inventory Management",
            "description": "Manage product inventory and stock levels",
            "is_core": True,
            "permissions": (
                ("read", "View Inventory", "View inventory information"),
                ("read_all", "View All Inventory", "View all inventory items"),
                ("create", "Create Inventory Items", "Add new inventory items"),
                ("update", "Edit Inventory", "Modify inventory information"),
                ("delete", "Delete Inventory", "Remove inventory items"),
                ("export", "Export Inventory", "Export inventory data"),
                ("import", "Import Inventory", "Import inventory from files"),
                ("adjust", "Adjust Stock Levels", "Adjust inventory quantities"),
                ("movement", "Track Movements", "Track inventory movements"),
            ),
        },
        "product_orders": {
            "module_name": "Product Order Management",
            "description": "Manage product orders and fulfillment",
            "is_core": True,
            "permissions": (
                ("read", "View Product Orders", "View product order information"),
                ("read_all", "View All Product Orders", "View all product orders"),
                ("create", "Create Product Orders", "Create new product orders"),
                ("update", "Edit Product Orders", "Modify order information"),
                ("delete", "Delete Product Orders", "Remove product orders"),
                ("export", "Export Orders", "Export order data"),
                ("import", "Import Orders", "Import orders from files"),
                ("process", "Process Orders", "Process and fulfill orders"),
                ("assign", "Assign Orders", "Assign orders to other users"),
            ),
        },
        "sales_orders": {
            "module_name": "Sales Order Management",
            "description": "Manage sales orders and transactions",
            "is_core": True,
            "permissions": (
                ("read", "View Sales Orders", "View sales order information"),
                ("read_all", "View All Sales Orders", "View all sales orders"),
                ("create", "Create Sales Orders", "Create new sales orders"),
                ("update", "Edit Sales Orders", "Modify sales order information"),
                ("delete", "Delete Sales Orders", "Remove sales orders"),
                ("export", "Export Sales Orders", "Export sales order data"),
                ("import", "Import Sales Orders", "Import sales orders from files"),
                ("approve", "Approve Sales Orders", "Approve sales orders"),
                ("assign", "Assign Sales Orders", "Assign sales orders to other users"),
            ),
        },
        "tickets": {
            "module_name": "Support Ticket Management",
            "description": "Manage customer support tickets and issues",
            "is_core": True,
            "permissions": (
                ("read", "View Tickets", "View ticket information"),
                ("read_all", "View All Tickets", "View all tickets in organization"),
                ("create", "Create Tickets", "Create new support tickets"),
                ("update", "Edit Tickets", "Modify ticket information"),
                ("delete", "Delete Tickets", "Remove tickets"),
                ("assign", "Assign Tickets", "Assign tickets to agents"),
                ("resolve", "Resolve Tickets", "Mark tickets as resolved"),
                ("escalate", "Escalate Tickets", "Escalate urgent tickets"),
                ("export", "Export Tickets", "Export ticket data"),
                ("import", "Import Tickets", "Import tickets from files"),
            ),
        },
        "communications": {
            "module_name": "Communication Management",
            "description": "Manage customer communications and interactions",
            "is_core": True,
            "permissions": (
                ("read", "View Communications", "View communication history"),
                ("read_all", "View All Communications", "View all communications"),
                ("create", "Create Communications", "Create new communications"),
                ("update", "Edit Communications", "Modify communication content"),
                ("delete", "Delete Communications", "Remove communications"),
                ("export", "Export Communications", "Export communication data"),
                ("send", "Send Communications", "Send communications to customers"),
                ("schedule", "Schedule Communications", "Schedule future communications"),
            ),
        },
        "calendar": {
            "module_name": "Calendar Management",
            "description": "Manage appointments, meetings, and schedules",
            "is_core": True,
            "permissions": (
                ("read", "View Calendar", "View calendar events"),
                ("read_all", "View All Events", "View all calendar events"),
                ("create", "Create Events", "Create new calendar events"),
                ("update", "Edit Events", "Modify event information"),
                ("delete", "Delete Events", "Remove calendar events"),
                ("export", "Export Calendar", "Export calendar data"),
                ("import", "Import Events", "Import events from files"),
                ("share", "Share Events", "Share events with others"),
            ),
        },
        "ai_insights": {
            "module_name": "AI Insights & Analytics",
            "description": "AI-powered insights and predictive analytics",
            "is_core": False,
            "permissions": (
                ("read", "View AI Insights", "View AI-generated insights"),
                ("read_all", "View All Insights", "View all AI insights"),
                ("generate", "Generate Insights", "Generate new AI insights"),
                ("export", "Export Insights", "Export insight data"),
                ("schedule", "Schedule Insights", "Schedule automated insights"),
            ),
        },
        "dashboard": {
            "module_name": "CRM Dashboard",
            "description": "CRM analytics and reporting dashboard",
            "is_core": True,
            "permissions": (
                ("view", "View Dashboard", "Access CRM dashboard"),
                ("customize", "Customize Dashboard", "Customize dashboard layout and widgets"),
                ("export", "Export Reports", "Export dashboard reports"),
            ),
        },
        "form_builder": {
            "module_name": "Form Builder",
            "description": "Create and manage dynamic form templates",
            "is_core": False,
            "permissions": (
                ("read", "View Forms", "View form templates and builder"),
                ("read_all", "View All Forms", "View all form templates in organization"),
                ("create", "Create Forms", "Create new form templates"),
                ("update", "Edit Forms", "Modify existing form templates"),
                ("delete", "Delete Forms", "Remove form templates"),
                ("export", "Export Forms", "Export form template data"),
                ("import", "Import Forms", "Import form templates from files"),
                ("publish", "Publish Forms", "Publish forms for use"),
                ("duplicate", "Duplicate Forms", "Duplicate existing form templates"),
                ("view_analytics", "View Form Analytics", "View analytics for form submissions"),
                ("manage_layout", "Manage Layout", "Manage form layout and design"),
            ),
        },
        "analytics": {
            "module_name": "Analytics & Reporting",
            "description": "Create and manage analytics formulas, calculations, and insights",
            "is_core": False,
            "permissions": (
                ("read", "View Analytics", "View analytics formulas and results"),
                ("read_all", "View All Analytics", "View all analytics in organization"),
                ("create", "Create Analytics", "Create new analytics formulas"),
                ("update", "Edit Analytics", "Modify existing analytics formulas"),
                ("delete", "Delete Analytics", "Remove analytics formulas"),
                ("export", "Export Analytics", "Export analytics data and reports"),
                ("calculate", "Calculate Analytics", "Execute analytics calculations"),
                ("generate_formula", "Generate Formulas", "Generate formulas from descriptions using AI"),
                ("validate_formula", "Validate Formulas", "Validate analytics formulas"),
                ("suggest_metrics", "Suggest Metrics", "Get AI-suggested metrics for forms"),
                ("generate_insights", "Generate Insights", "Generate insights from analytics results"),
                ("manage_dashboards", "Manage Dashboards", "Create and manage analytics dashboard views"),
                ("view_dashboards", "View Dashboards", "View analytics dashboard views"),
            ),
        },
        "system": {
            "module_name": "System Configuration",
            "description": "System administration and configuration management",
            "is_core": True,
            "permissions": (
                ("settings_read", "View Settings", "View system settings and configurations"),
                ("settings_update", "Update Settings", "Update system settings"),
                ("configurations_read", "View Configurations", "View system configurations"),
                ("configurations_create", "Create Configurations", "Create new system configurations"),
                ("configurations_update", "Update Configurations", "Update existing configurations"),
                ("configurations_delete", "Delete Configurations", "Delete system configurations"),
                ("tenant_config_read", "View Tenant Config", "View tenant-specific configurations"),
                ("tenant_config_update", "Update Tenant Config", "Update tenant configurations"),
                ("admin_tenants_read", "View All Tenants", "View and list all tenants in the system"),
                ("credit_config_view", "View Credit Configurations", "View tenant credit configuration settings"),
                ("credit_config_edit", "Edit Credit Configurations", "Edit tenant credit configuration settings"),
                ("credit_config_reset", "Reset Credit Configurations", "Reset tenant configurations to global defaults"),
                ("credit_config_bulk_update", "Bulk Update Credit Configurations", "Bulk update multiple credit configuration settings"),
                ("system_config_read", "View System Config", "View system-level configurations"),
                ("system_config_update", "Update System Config", "Update system-level configurations"),
                ("dropdowns_read", "View Dropdowns", "View system dropdown values"),
                ("dropdowns_create", "Create Dropdowns", "Create new dropdown values"),
                ("dropdowns_update", "Update Dropdowns", "Update dropdown values"),
                ("dropdowns_delete", "Delete Dropdowns", "Delete dropdown values"),
                ("integrations_read", "View Integrations", "View system integrations"),
                ("integrations_create", "Create Integrations", "Create new integrations"),
                ("integrations_update", "Update Integrations", "Update existing integrations"),
                ("integrations_delete", "Delete Integrations", "Delete integrations"),
                ("backup_read", "View Backups", "View backup information and history"),
                ("backup_create", "Create Backups", "Create system backups"),
                ("backup_restore", "Restore Backups", "Restore system from backups"),
                ("maintenance_read", "View Maintenance", "View maintenance schedules and status"),
                ("maintenance_perform", "Perform Maintenance", "Execute maintenance operations"),
                ("maintenance_schedule", "Schedule Maintenance", "Schedule maintenance operations"),
                ("users_read", "View Users", "View user information"),
                ("users_read_all", "View All Users", "View all users in organization"),
                ("users_create", "Create Users", "Create new user accounts"),
                ("users_update", "Edit Users", "Modify user information"),
                ("users_delete", "Delete Users", "Remove user accounts"),
                ("users_activate", "Activate Users", "Activate/deactivate users"),
                ("users_reset_password", "Reset Passwords", "Reset user passwords"),
                ("users_export", "Export Users", "Export user data"),
                ("users_import", "Import Users", "Import users from files"),
                ("roles_read", "View Roles", "View role information"),
                ("roles_read_all", "View All Roles", "View all roles in organization"),
                ("roles_create", "Create Roles", "Create new roles"),
                ("roles_update", "Edit Roles", "Modify role information"),
                ("roles_delete", "Delete Roles", "Remove roles"),
                ("roles_assign", "Assign Roles", "Assign roles to users"),
                ("roles_export", "Export Roles", "Export role data"),
                ("reports_read", "View Reports", "View report information"),
                ("reports_read_all", "View All Reports", "View all reports"),
                ("reports_create", "Create Reports", "Create new reports"),
                ("reports_update", "Edit Reports", "Modify existing reports"),
                ("reports_delete", "Delete Reports", "Remove reports"),
                ("reports_export", "Export Reports", "Export report data"),
                ("reports_schedule", "Schedule Reports", "Schedule automated reports"),
                ("audit_read", "View Audit Logs", "View basic audit log information"),
                ("audit_read_all", "View All Audit Logs", "View all audit logs in organization"),
                ("audit_export", "Export Audit Logs", "Export audit log data to various formats"),
                ("audit_view_details", "View Audit Details", "View detailed audit log information"),
                ("audit_filter", "Filter Audit Logs", "Filter audit logs by various criteria"),
                ("audit_generate_reports", "Generate Reports", "Generate audit reports"),
                ("audit_archive", "Archive Logs", "Archive old audit logs"),
                ("audit_purge", "Purge Old Logs", "Purge old audit logs"),
                ("activity_logs_read", "View Activity Logs", "View activity log information"),
                ("activity_logs_read_all", "View All Activity Logs", "View all activity logs in organization"),
                ("activity_logs_export", "Export Activity Logs", "Export activity log data"),
                ("activity_logs_view_details", "View Activity Details", "View detailed activity information"),
                ("activity_logs_filter", "Filter Activity Logs", "Filter activity logs by various criteria"),
                ("activity_logs_generate_reports", "Generate Reports", "Generate activity log reports"),
                ("activity_logs_archive", "Archive Logs", "Archive old activity logs"),
                ("activity_logs_purge", "Purge Old Logs", "Purge old activity logs"),
            ),
        },
    },
}
