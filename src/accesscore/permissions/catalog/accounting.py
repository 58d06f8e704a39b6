"""Financial Accounting application catalog."""

from __future__ import annotations

from typing import Any

ACCOUNTING: dict[str, Any] = {
    "app_code": "accounting",
    "app_name": "Financial Accounting",
    "description": "Complete financial accounting solution — GL, AR, AP, banking, tax, budgeting, payroll, inventory, fixed assets, compliance, and analytics",
    "icon": "💰",
    "base_url": "https://accounting.zopkit.com",
    "version": "2.0.0",
    "is_core": True,
    "sort_order": 5,
    "modules": {
        "dashboard": {
            "module_name": "Accounting Dashboard",
            "description": "Main accounting dashboard with financial overview",
            "is_core": True,
            "permissions": (
                ("view", "View Dashboard", "Access accounting dashboard"),
                ("customize", "Customize Dashboard", "Customize dashboard layout and widgets"),
                ("export", "Export Dashboard", "Export dashboard reports"),
            ),
        },
        "general_ledger": {
            "module_name": "General Ledger",
            "description": "Core general ledger, trial balance, closing and adjusting entries",
            "is_core": True,
            "permissions": (
                ("read", "View General Ledger", "View general ledger entries and balances"),
                ("create", "Create GL Entries", "Create new general ledger entries"),
                ("update", "Edit GL Entries", "Modify general ledger entries"),
                ("delete", "Delete GL Entries", "Remove general ledger entries"),
                ("post", "Post GL Entries", "Post entries to the ledger"),
                ("approve", "Approve GL Entries", "Approve general ledger entries"),
                ("close_period", "Close Period", "Close accounting periods"),
                ("export", "Export GL Data", "Export general ledger data"),
            ),
        },
        "chart_of_accounts": {
            "module_name": "Chart of Accounts",
            "description": "Manage the chart of accounts structure",
            "is_core": True,
            "permissions": (
                ("read", "View Chart of Accounts", "View accounts in the chart"),
                ("create", "Create Accounts", "Add new accounts to the chart"),
                ("update", "Edit Accounts", "Modify account information"),
                ("delete", "Delete Accounts", "Remove accounts from the chart"),
                ("import", "Import Accounts", "Import chart of accounts from files"),
                ("export", "Export Accounts", "Export chart of accounts"),
            ),
        },
        "journal_entries": {
            "module_name": "Journal Entries",
            "description": "Create and manage journal entries",
            "is_core": True,
            "permissions": (
                ("read", "View Journal Entries", "View journal entry information"),
                ("create", "Create Journal Entries", "Create new journal entries"),
                ("update", "Edit Journal Entries", "Modify journal entries"),
                ("delete", "Delete Journal Entries", "Remove journal entries"),
                ("post", "Post Journal Entries", "Post journal entries to the ledger"),
                ("approve", "Approve Journal Entries", "Approve journal entries for posting"),
                ("reverse", "Reverse Journal Entries", "Create reversing journal entries"),
                ("export", "Export Journal Entries", "Export journal entry data"),
            ),
        },
        "invoices": {
            "module_name": "Customer Invoices",
            "description": "Create and manage customer invoices",
            "is_core": True,
            "permissions": (
                ("read", "View Invoices", "View invoice information"),
                ("read_all", "View All Invoices", "View all invoices in organization"),
                ("create", "Create Invoices", "Create new invoices"),
                ("update", "Edit Invoices", "Modify invoice information"),
                ("delete", "Delete Invoices", "Remove invoices"),
                ("send", "Send Invoices", "Send invoices to customers"),
                ("post", "Post Invoices", "Post invoices to the ledger"),
                ("export", "Export Invoices", "Export invoice data"),
                ("import", "Import Invoices", "Import invoices from files"),
                ("generate_pdf", "Generate PDF", "Generate PDF versions of invoices"),
            ),
        },
        "customers": {
            "module_name": "Customer Management",
            "description": "Manage customer accounts and contacts",
            "is_core": True,
            "permissions": (
                ("read", "View Customers", "View customer information"),
                ("read_all", "View All Customers", "View all customers in organization"),
                ("create", "Create Customers", "Add new customers"),
                ("update", "Edit Customers", "Modify customer information"),
                ("delete", "Delete Customers", "Remove customers"),
                ("export", "Export Customers", "Export customer data"),
                ("import", "Import Customers", "Import customers from files"),
            ),
        },
        "credit_notes": {
            "module_name": "Credit Notes",
            "description": "Create and manage customer credit notes",
            "is_core": True,
            "permissions": (
                ("read", "View Credit Notes", "View credit note information"),
                ("create", "Create Credit Notes", "Create new credit notes"),
                ("update", "Edit Credit Notes", "Modify credit note information"),
                ("delete", "Delete Credit Notes", "Remove credit notes"),
                ("apply", "Apply Credit Notes", "Apply credit notes to invoices"),
                ("export", "Export Credit Notes", "Export credit note data"),
            ),
        },
        "sales_orders": {
            "module_name": "Sales Orders",
            "description": "Manage customer sales orders",
            "is_core": True,
            "permissions": (
                ("read", "View Sales Orders", "View sales order information"),
                ("read_all", "View All Sales Orders", "View all sales orders"),
                ("create", "Create Sales Orders", "Create new sales orders"),
                ("update", "Edit Sales Orders", "Modify sales order information"),
                ("delete", "Delete Sales Orders", "Remove sales orders"),
                ("approve", "Approve Sales Orders", "Approve sales orders"),
                ("convert", "Convert to Invoice", "Convert sales orders to invoices"),
                ("export", "Export Sales Orders", "Export sales order data"),
            ),
        },
        "estimates": {
            "module_name": "Estimates & Quotes",
            "description": "Create and manage estimates and quotations",
            "is_core": True,
            "permissions": (
                ("read", "View Estimates", "View estimate information"),
                ("create", "Create Estimates", "Create new estimates"),
                ("update", "Edit Estimates", "Modify estimate information"),
                ("delete", "Delete Estimates", "Remove estimates"),
                ("send", "Send Estimates", "Send estimates to customers"),
                ("convert", "Convert to Invoice", "Convert estimates to invoices"),
                ("export", "Export Estimates", "Export estimate data"),
                ("generate_pdf", "Generate PDF", "Generate PDF versions of estimates"),
            ),
        },
        "bills": {
            "module_name": "Vendor Bills",
            "description": "Manage vendor bills and payments",
            "is_core": True,
            "permissions": (
                ("read", "View Bills", "View bill information"),
                ("read_all", "View All Bills", "View all bills in organization"),
                ("create", "Create Bills", "Create new vendor bills"),
                ("update", "Edit Bills", "Modify bill information"),
                ("delete", "Delete Bills", "Remove bills"),
                ("pay", "Pay Bills", "Process bill payments"),
                ("approve", "Approve Bills", "Approve vendor bills for payment"),
                ("export", "Export Bills", "Export bill data"),
            ),
        },
        "vendors": {
            "module_name": "Vendor Management",
            "description": "Manage vendor accounts and information",
            "is_core": True,
            "permissions": (
                ("read", "View Vendors", "View vendor information"),
                ("read_all", "View All Vendors", "View all vendors in organization"),
                ("create", "Create Vendors", "Add new vendors"),
                ("update", "Edit Vendors", "Modify vendor information"),
                ("delete", "Delete Vendors", "Remove vendors"),
                ("export", "Export Vendors", "Export vendor data"),
                ("import", "Import Vendors", "Import vendors from files"),
            ),
        },
        "purchase_orders": {
            "module_name": "Purchase Orders",
            "description": "Create and manage purchase orders",
            "is_core": True,
            "permissions": (
                ("read", "View Purchase Orders", "View purchase order information"),
                ("read_all", "View All Purchase Orders", "View all purchase orders"),
                ("create", "Create Purchase Orders", "Create new purchase orders"),
                ("update", "Edit Purchase Orders", "Modify purchase order information"),
                ("delete", "Delete Purchase Orders", "Remove purchase orders"),
                ("approve", "Approve Purchase Orders", "Approve purchase orders"),
                ("receive", "Receive Goods", "Record receipt of purchased goods"),
                ("export", "Export Purchase Orders", "Export purchase order data"),
            ),
        },
        "expense_reports": {
            "module_name": "Expense Reports",
            "description": "Manage employee expense reports and reimbursements",
            "is_core": True,
            "permissions": (
                ("read", "View Expense Reports", "View expense report information"),
                ("read_all", "View All Expense Reports", "View all expense reports"),
                ("create", "Create Expense Reports", "Submit expense reports"),
                ("update", "Edit Expense Reports", "Modify expense report information"),
                ("delete", "Delete Expense Reports", "Remove expense reports"),
                ("approve", "Approve Expense Reports", "Approve expense reports for payment"),
                ("reimburse", "Process Reimbursement", "Process expense reimbursements"),
                ("export", "Export Expense Reports", "Export expense report data"),
            ),
        },
        "vendor_credits": {
            "module_name": "Vendor Credits",
            "description": "Manage vendor credits and debit memos",
            "is_core": True,
            "permissions": (
                ("read", "View Vendor Credits", "View vendor credit information"),
                ("create", "Create Vendor Credits", "Create new vendor credits"),
                ("update", "Edit Vendor Credits", "Modify vendor credit information"),
                ("delete", "Delete Vendor Credits", "Remove vendor credits"),
                ("apply", "Apply Vendor Credits", "Apply vendor credits to bills"),
                ("export", "Export Vendor Credits", "Export vendor credit data"),
            ),
        },
        "banking": {
            "module_name": "Banking & Reconciliation",
            "description": "Bank accounts, transactions, reconciliation, and cash flow management",
            "is_core": True,
            "permissions": (
                ("read", "View Banking", "View bank account and transaction information"),
                ("read_all", "View All Banking", "View all bank data in organization"),
                ("create", "Create Bank Entries", "Create bank transactions and accounts"),
                ("update", "Edit Banking", "Modify bank information"),
                ("delete", "Delete Banking", "Remove bank records"),
                ("reconcile", "Reconcile Accounts", "Perform bank reconciliation"),
                ("import_feeds", "Import Bank Feeds", "Import bank feed data"),
                ("transfer", "Wire Transfers", "Process wire transfers"),
                ("export", "Export Banking", "Export bank data"),
            ),
        },
        "tax": {
            "module_name": "Tax Management",
            "description": "Tax configuration, GST/TDS (India), VAT/Sales Tax, compliance",
            "is_core": True,
            "permissions": (
                ("read", "View Tax", "View tax information and rates"),
                ("create", "Create Tax Records", "Create new tax records"),
                ("update", "Edit Tax", "Modify tax information"),
                ("delete", "Delete Tax Records", "Remove tax records"),
                ("configure", "Configure Tax Rules", "Configure tax rates and rules"),
                ("file_returns", "File Tax Returns", "File GST/VAT returns"),
                ("reconcile", "Tax Reconciliation", "Reconcile tax records"),
                ("export", "Export Tax Data", "Export tax reports and data"),
            ),
        },
        "reports": {
            "module_name": "Financial Reports",
            "description": "P&L, Balance Sheet, Cash Flow, Trial Balance, and other financial reports",
            "is_core": True,
            "permissions": (
                ("read", "View Reports", "View financial reports"),
                ("read_all", "View All Reports", "View all reports in organization"),
                ("create", "Create Reports", "Create custom financial reports"),
                ("export", "Export Reports", "Export report data to various formats"),
                ("schedule", "Schedule Reports", "Schedule automated report generation"),
                ("generate_pdf", "Generate PDF", "Generate PDF versions of reports"),
            ),
        },
        "analytics": {
            "module_name": "Analytics & Business Intelligence",
            "description": "Financial dashboards, KPI monitoring, trend analysis, data visualization",
            "is_core": True,
            "permissions": (
                ("read", "View Analytics", "View analytics and metrics"),
                ("read_all", "View All Analytics", "View all analytics data"),
                ("create", "Create Analytics", "Create custom analytics views"),
                ("export", "Export Analytics", "Export analytics data"),
                ("schedule", "Schedule Analytics", "Schedule automated analytics"),
                ("customize_dashboards", "Customize Dashboards", "Customize analytics dashboards"),
            ),
        },
        "budgeting": {
            "module_name": "Budgeting & Financial Planning",
            "description": "Budgets, forecasting, variance analysis, and capital budgeting",
            "is_core": False,
            "permissions": (
                ("read", "View Budgets", "View budget information"),
                ("read_all", "View All Budgets", "View all budgets in organization"),
                ("create", "Create Budgets", "Create new budgets"),
                ("update", "Edit Budgets", "Modify budget information"),
                ("delete", "Delete Budgets", "Remove budgets"),
                ("approve", "Approve Budgets", "Approve budgets"),
                ("forecast", "Create Forecasts", "Create financial forecasts"),
                ("export", "Export Budgets", "Export budget data"),
            ),
        },
        "cost_accounting": {
            "module_name": "Cost Accounting",
            "description": "Cost centers, job costing, and activity-based costing",
            "is_core": False,
            "permissions": (
                ("read", "View Cost Accounting", "View cost accounting data"),
                ("read_all", "View All Cost Data", "View all cost data in organization"),
                ("create", "Create Cost Entries", "Create new cost entries"),
                ("update", "Edit Cost Entries", "Modify cost entries"),
                ("delete", "Delete Cost Entries", "Remove cost entries"),
                ("allocate", "Allocate Costs", "Allocate costs to centers and jobs"),
                ("export", "Export Cost Data", "Export cost accounting data"),
            ),
        },
        "fixed_assets": {
            "module_name": "Fixed Asset Management",
            "description": "Asset register, depreciation, disposal, transfers, and maintenance",
            "is_core": False,
            "permissions": (
                ("read", "View Fixed Assets", "View asset information"),
                ("read_all", "View All Assets", "View all assets in organization"),
                ("create", "Create Assets", "Register new assets"),
                ("update", "Edit Assets", "Modify asset information"),
                ("delete", "Delete Assets", "Remove assets"),
                ("depreciate", "Run Depreciation", "Process depreciation calculations"),
                ("dispose", "Dispose Assets", "Record asset disposals"),
                ("transfer", "Transfer Assets", "Transfer assets between locations"),
                ("export", "Export Assets", "Export asset data"),
            ),
        },
        "payroll": {
            "module_name": "Payroll Management",
            "description": "Employee payroll processing, tax management, benefits, and reports",
            "is_core": False,
            "permissions": (
                ("read", "View Payroll", "View payroll information"),
                ("read_all", "View All Payroll", "View all payroll data"),
                ("create", "Create Payroll", "Create payroll records"),
                ("update", "Edit Payroll", "Modify payroll information"),
                ("delete", "Delete Payroll", "Remove payroll records"),
                ("run", "Run Payroll", "Process payroll calculations"),
                ("approve", "Approve Payroll", "Approve payroll for processing"),
                ("view_salary", "View Salary Details", "View employee salary information"),
                ("export", "Export Payroll", "Export payroll data and reports"),
            ),
        },
        "projects": {
            "module_name": "Project Accounting",
            "description": "Project costing, billing, time tracking, resource allocation, profitability",
            "is_core": False,
            "permissions": (
                ("read", "View Projects", "View project information"),
                ("read_all", "View All Projects", "View all projects in organization"),
                ("create", "Create Projects", "Create new projects"),
                ("update", "Edit Projects", "Modify project information"),
                ("delete", "Delete Projects", "Remove projects"),
                ("track_time", "Track Time", "Record time against projects"),
                ("bill", "Bill Projects", "Generate project invoices"),
                ("allocate_resources", "Allocate Resources", "Allocate resources to projects"),
                ("export", "Export Projects", "Export project data"),
            ),
        },
        "inventory": {
            "module_name": "Inventory Management",
            "description": "Items, stock levels, locations, transactions, and stock alerts",
            "is_core": False,
            "permissions": (
                ("read", "View Inventory", "View inventory information"),
                ("read_all", "View All Inventory", "View all inventory items"),
                ("create", "Create Inventory Items", "Add new inventory items"),
                ("update", "Edit Inventory", "Modify inventory information"),
                ("delete", "Delete Inventory", "Remove inventory items"),
                ("adjust", "Adjust Stock", "Adjust stock quantities"),
                ("movement", "Track Movements", "Record stock movements and transfers"),
                ("count", "Perform Stock Counts", "Perform inventory counts"),
                ("export", "Export Inventory", "Export inventory data"),
                ("import", "Import Inventory", "Import inventory from files"),
            ),
        },
        "multi_entity": {
            "module_name": "Multi-Entity Management",
            "description": "Entity management, consolidation, inter-company transactions, currency management",
            "is_core": False,
            "permissions": (
                ("read", "View Entities", "View entity information"),
                ("read_all", "View All Entities", "View all entities in organization"),
                ("create", "Create Entities", "Create new entities"),
                ("update", "Edit Entities", "Modify entity information"),
                ("delete", "Delete Entities", "Remove entities"),
                ("consolidate", "Consolidate", "Perform financial consolidation"),
                ("inter_company", "Inter-Company Transactions", "Manage inter-company transactions"),
                ("manage_currency", "Manage Currency", "Manage multi-currency settings"),
                ("export", "Export Entity Data", "Export multi-entity data"),
            ),
        },
        "compliance": {
            "module_name": "Compliance & Audit",
            "description": "Audit trail, internal controls, risk management, SOX, regulatory reports",
            "is_core": True,
            "permissions": (
                ("read", "View Compliance", "View compliance information"),
                ("read_all", "View All Compliance", "View all compliance data"),
                ("create", "Create Compliance Records", "Create compliance records"),
                ("update", "Edit Compliance", "Modify compliance records"),
                ("delete", "Delete Compliance Records", "Remove compliance records"),
                ("manage_controls", "Manage Controls", "Manage internal controls"),
                ("manage_risks", "Manage Risks", "Manage risk assessments"),
                ("audit_trail", "View Audit Trail", "Access audit trail logs"),
                ("export", "Export Compliance", "Export compliance and audit data"),
            ),
        },
        "workflows": {
            "module_name": "Workflow Management",
            "description": "Approval workflows, templates, and automation",
            "is_core": True,
            "permissions": (
                ("read", "View Workflows", "View workflow information"),
                ("read_all", "View All Workflows", "View all workflows"),
                ("create", "Create Workflows", "Create new workflow templates"),
                ("update", "Edit Workflows", "Modify workflow definitions"),
                ("delete", "Delete Workflows", "Remove workflows"),
                ("approve", "Approve in Workflows", "Approve items in workflow queues"),
                ("manage_templates", "Manage Templates", "Manage workflow templates"),
                ("export", "Export Workflows", "Export workflow data"),
            ),
        },
        "documents": {
            "module_name": "Document Management",
            "description": "Financial document storage and management",
            "is_core": True,
            "permissions": (
                ("read", "View Documents", "View document information"),
                ("read_all", "View All Documents", "View all documents"),
                ("create", "Upload Documents", "Upload new documents"),
                ("update", "Edit Documents", "Modify document metadata"),
                ("delete", "Delete Documents", "Remove documents"),
                ("download", "Download Documents", "Download document files"),
                ("export", "Export Documents", "Export document data"),
            ),
        },
        "integrations": {
            "module_name": "Integrations",
            "description": "Third-party connections, API keys, webhooks, sync jobs",
            "is_core": False,
            "permissions": (
                ("read", "View Integrations", "View integration information"),
                ("create", "Create Integrations", "Set up new integrations"),
                ("update", "Edit Integrations", "Modify integration settings"),
                ("delete", "Delete Integrations", "Remove integrations"),
                ("manage_api_keys", "Manage API Keys", "Manage API keys"),
                ("manage_webhooks", "Manage Webhooks", "Manage webhook endpoints"),
                ("sync", "Run Sync Jobs", "Trigger data sync jobs"),
                ("export", "Export Integration Logs", "Export integration logs"),
            ),
        },
        "ai_insights": {
            "module_name": "AI-Powered Insights",
            "description": "AI-powered financial insights, predictive analytics, anomaly detection",
            "is_core": False,
            "permissions": (
                ("read", "View AI Insights", "View AI-generated insights"),
                ("read_all", "View All Insights", "View all AI insights"),
                ("generate", "Generate Insights", "Generate new AI insights"),
                ("export", "Export Insights", "Export insight data"),
                ("configure", "Configure AI", "Configure AI models and parameters"),
            ),
        },
        "security": {
            "module_name": "Security Management",
            "description": "Encryption, MFA, SSO, threat intelligence, security policies",
            "is_core": False,
            "permissions": (
                ("read", "View Security", "View security information and settings"),
                ("configure", "Configure Security", "Configure security settings"),
                ("manage_mfa", "Manage MFA", "Manage multi-factor authentication"),
                ("manage_sso", "Manage SSO", "Manage single sign-on settings"),
                ("manage_policies", "Manage Policies", "Manage security policies"),
                ("view_threats", "View Threats", "View threat intelligence"),
                ("manage_alerts", "Manage Alerts", "Manage security alerts"),
                ("export", "Export Security Data", "Export security reports"),
            ),
        },
        "performance": {
            "module_name": "Performance & Monitoring",
            "description": "System performance dashboards, cache management, job queues",
            "is_core": False,
            "permissions": (
                ("read", "View Performance", "View performance metrics"),
                ("manage_cache", "Manage Cache", "Manage system cache"),
                ("manage_jobs", "Manage Jobs", "Manage background job queues"),
                ("configure_alerts", "Configure Alerts", "Configure performance alerts"),
                ("export", "Export Metrics", "Export performance metrics"),
            ),
        },
        "notifications": {
            "module_name": "Notifications",
            "description": "System notifications and alerts",
            "is_core": True,
            "permissions": (
                ("read", "View Notifications", "View notifications"),
                ("update", "Manage Notifications", "Update notification settings"),
                ("manage_preferences", "Manage Preferences", "Manage notification preferences"),
            ),
        },
        "system": {
            "module_name": "System Administration",
            "description": "User management, roles & permissions, company settings, audit logs, backups",
            "is_core": True,
            "permissions": (
                ("settings_read", "View Settings", "View system settings"),
                ("settings_update", "Update Settings", "Update system settings"),
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
                ("roles_read_all", "View All Roles", "View all roles"),
                ("roles_create", "Create Roles", "Create new roles"),
                ("roles_update", "Edit Roles", "Modify role permissions"),
                ("roles_delete", "Delete Roles", "Remove roles"),
                ("roles_assign", "Assign Roles", "Assign roles to users"),
                ("roles_export", "Export Roles", "Export role data"),
                ("audit_read", "View Audit Logs", "View audit log information"),
                ("audit_read_all", "View All Audit Logs", "View all audit logs"),
                ("audit_export", "Export Audit Logs", "Export audit log data"),
                ("tenant_config_read", "View Tenant Config", "View tenant-specific configurations"),
                ("tenant_config_update", "Update Tenant Config", "Update tenant configurations"),
                ("credit_config_view", "View Credit Config", "View credit configuration settings"),
                ("credit_config_edit", "Edit Credit Config", "Edit credit configuration settings"),
                ("backup_create", "Create Backups", "Create system backups"),
                ("backup_restore", "Restore Backups", "Restore system from backups"),
                ("dropdowns_read", "View Dropdowns", "View dropdown values"),
                ("dropdowns_manage", "Manage Dropdowns", "Create/update/delete dropdown values"),
                ("fiscal_year_manage", "Manage Fiscal Year", "Manage fiscal year setup"),
                ("sequences_manage", "Manage Sequences", "Manage number sequences"),
                ("wrapper_sync", "Wrapper Sync", "Trigger and view Wrapper tenant sync"),
            ),
        },
    },
}
