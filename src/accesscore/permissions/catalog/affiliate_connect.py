"""Affiliate Connect Platform application catalog."""

from __future__ import annotations

from typing import Any

AFFILIATE_CONNECT: dict[str, Any] = {
    "app_code": "affiliate_connect",
    "app_name": "Affiliate Connect Platform",
    "description": "Comprehensive multi-tenant SaaS platform for affiliate and influencer marketing management",
    "icon": "🤝",
    "base_url": "https://affiliate-connect.railway.app",
    "version": "1.0.0",
    "is_core": True,
    "sort_order": 3,
    "modules": {
        "dashboard": {
            "module_name": "Dashboard & Analytics",
            "description": "Main dashboard with analytics and performance metrics",
            "is_core": True,
            "permissions": (
                ("view_dashboard", "View Dashboard", "Access main dashboard interface"),
                ("view_analytics", "View Analytics", "View performance analytics and metrics"),
                ("view_reports", "View Reports", "Access reporting and insights"),
                ("export_data", "Export Data", "Export dashboard data to various formats"),
                ("view_all_tenants", "View All Tenants", "View analytics across all tenants (Super Admin)"),
                ("view_tenant_analytics", "View Tenant Analytics", "View analytics for specific tenant"),
                ("view_affiliate_analytics", "View Affiliate Analytics", "View affiliate-specific analytics"),
                ("view_influencer_analytics", "View Influencer Analytics", "View influencer-specific analytics"),
            ),
        },
        "products": {
            "module_name": "Product Management",
            "description": "Product catalog management with commission settings",
            "is_core": True,
            "permissions": (
                ("read", "View Products", "View and browse product information"),
                ("read_all", "View All Products", "View all products in organization"),
                ("create", "Create Products", "Add new products to the catalog"),
                ("update", "Edit Products", "Modify existing product information"),
                ("delete", "Delete Products", "Remove products from the catalog"),
                ("update_commission", "Update Commission", "Update product commission rates"),
                ("upload_images", "Upload Images", "Upload product images"),
                ("export", "Export Products", "Export product data"),
                ("import", "Import Products", "Import products from external files"),
                ("manage_categories", "Manage Categories", "Manage product categories"),
            ),
        },
        "affiliates": {
            "module_name": "Affiliate Management",
            "description": "Affiliate onboarding, management, and tier assignment",
            "is_core": True,
            "permissions": (
                ("read", "View Affiliates", "View and browse affiliate information"),
                ("read_all", "View All Affiliates", "View all affiliates in organization"),
                ("create", "Create Affiliates", "Add new affiliates to the system"),
                ("update", "Edit Affiliates", "Modify existing affiliate information"),
                ("delete", "Delete Affiliates", "Remove affiliates from the system"),
                ("invite", "Invite Affiliates", "Send affiliate invitations via email"),
                ("approve", "Approve Affiliates", "Approve affiliate applications"),
                ("reject", "Reject Affiliates", "Reject affiliate applications"),
                ("assign_tier", "Assign Tier", "Assign commission tiers to affiliates"),
                ("view_pending", "View Pending", "View pending affiliate applications"),
                ("view_details", "View Details", "View detailed affiliate information"),
                ("update_details", "Update Details", "Update affiliate profile details"),
                ("view_commissions", "View Commissions", "View affiliate commission data"),
                ("update_commissions", "Update Commissions", "Update affiliate commission settings"),
            ),
        },
        "tracking": {
            "module_name": "Link Tracking & Analytics",
            "description": "Affiliate link generation, tracking, and conversion analytics",
            "is_core": True,
            "permissions": (
                ("read", "View Tracking Links", "View and browse tracking links"),
                ("read_all", "View All Tracking Links", "View all tracking links in organization"),
                ("create", "Create Tracking Links", "Generate new tracking links"),
                ("update", "Edit Tracking Links", "Modify existing tracking links"),
                ("delete", "Delete Tracking Links", "Remove tracking links"),
                ("track_clicks", "Track Clicks", "Track link click events"),
                ("track_conversions", "Track Conversions", "Track conversion events"),
                ("view_analytics", "View Analytics", "View tracking analytics and reports"),
                ("export_analytics", "Export Analytics", "Export tracking analytics data"),
                ("manage_utm", "Manage UTM", "Manage UTM parameters for links"),
            ),
        },
        "commissions": {
            "module_name": "Commission Management",
            "description": "Commission structure, tiers, and rule management",
            "is_core": True,
            "permissions": (
                ("read_tiers", "View Commission Tiers", "View commission tier information"),
                ("create_tiers", "Create Commission Tiers", "Create new commission tiers"),
                ("update_tiers", "Edit Commission Tiers", "Modify commission tier settings"),
                ("delete_tiers", "Delete Commission Tiers", "Remove commission tiers"),
                ("read_rules", "View Commission Rules", "View commission rule configurations"),
                ("create_rules", "Create Commission Rules", "Create new commission rules"),
                ("update_rules", "Edit Commission Rules", "Modify commission rules"),
                ("delete_rules", "Delete Commission Rules", "Remove commission rules"),
                ("view_products", "View Product Commissions", "View product-specific commission rates"),
                ("update_products", "Update Product Commissions", "Update product commission rates"),
                ("calculate_commissions", "Calculate Commissions", "Calculate commission amounts"),
                ("view_affiliate_commissions", "View Affiliate Commissions", "View affiliate commission data"),
            ),
        },
        "campaigns": {
            "module_name": "Campaign Management",
            "description": "Marketing campaign creation, management, and influencer participation",
            "is_core": True,
            "permissions": (
                ("read", "View Campaigns", "View and browse campaign information"),
                ("read_all", "View All Campaigns", "View all campaigns in organization"),
                ("create", "Create Campaigns", "Create new marketing campaigns"),
                ("update", "Edit Campaigns", "Modify existing campaign information"),
                ("delete", "Delete Campaigns", "Remove campaigns from the system"),
                ("join_campaign", "Join Campaign", "Join campaigns as influencer"),
                ("view_participants", "View Participants", "View campaign participants"),
                ("manage_participants", "Manage Participants", "Manage campaign participants"),
                ("view_progress", "View Progress", "View campaign progress and metrics"),
                ("submit_content", "Submit Content", "Submit campaign content"),
                ("approve_content", "Approve Content", "Approve submitted content"),
                ("view_contract", "View Contract", "View campaign contracts"),
                ("accept_contract", "Accept Contract", "Accept campaign contracts"),
                ("manage_versions", "Manage Versions", "Manage campaign versions"),
                ("view_analytics", "View Campaign Analytics", "View campaign performance analytics"),
            ),
        },
        "influencers": {
            "module_name": "Influencer Management",
            "description": "Influencer profiles, social media integration, and analytics",
            "is_core": True,
            "permissions": (
                ("read", "View Influencers", "View and browse influencer information"),
                ("read_all", "View All Influencers", "View all influencers in organization"),
                ("create", "Create Influencers", "Add new influencers to the system"),
                ("update", "Edit Influencers", "Modify existing influencer information"),
                ("delete", "Delete Influencers", "Remove influencers from the system"),
                ("connect_instagram", "Connect Instagram", "Connect Instagram accounts for analytics"),
                ("connect_youtube", "Connect YouTube", "Connect YouTube accounts for analytics"),
                ("connect_twitter", "Connect Twitter", "Connect Twitter accounts for analytics"),
                ("view_analytics", "View Analytics", "View social media analytics"),
                ("view_media_kit", "View Media Kit", "View influencer media kits"),
                ("update_media_kit", "Update Media Kit", "Update media kit information"),
                ("view_ratings", "View Ratings", "View influencer ratings and reviews"),
                ("manage_ratings", "Manage Ratings", "Manage rating and review system"),
            ),
        },
        "payments": {
            "module_name": "Payment Processing",
            "description": "Payment processing, payouts, and transaction management",
            "is_core": True,
            "permissions": (
                ("read_payouts", "View Payouts", "View payout information and history"),
                ("create_payouts", "Create Payouts", "Create new payout transactions"),
                ("update_payouts", "Update Payouts", "Update payout status and information"),
                ("view_methods", "View Payment Methods", "View payment method information"),
                ("add_methods", "Add Payment Methods", "Add new payment methods"),
                ("update_methods", "Update Payment Methods", "Update payment method details"),
                ("delete_methods", "Delete Payment Methods", "Remove payment methods"),
                ("view_history", "View Payment History", "View payment transaction history"),
                ("process_payments", "Process Payments", "Process payment transactions"),
                ("view_affiliate_payments", "View Affiliate Payments", "View affiliate payment information"),
            ),
        },
        "analytics": {
            "module_name": "Analytics & Reporting",
            "description": "Performance analytics, custom reports, and data visualization",
            "is_core": True,
            "permissions": (
                ("view_dashboard", "View Dashboard Analytics", "View dashboard analytics and metrics"),
                ("view_campaign_analytics", "View Campaign Analytics", "View campaign performance analytics"),
                ("view_affiliate_analytics", "View Affiliate Analytics", "View affiliate performance analytics"),
                ("view_revenue_analytics", "View Revenue Analytics", "View revenue and financial analytics"),
                ("create_reports", "Create Custom Reports", "Create custom analytics reports"),
                ("view_reports", "View Reports", "View existing analytics reports"),
                ("export_analytics", "Export Analytics", "Export analytics data"),
                ("view_all_tenants", "View All Tenants Analytics", "View analytics across all tenants"),
                ("view_tenant_analytics", "View Tenant Analytics", "View tenant-specific analytics"),
            ),
        },
        "fraud": {
            "module_name": "Fraud Prevention",
            "description": "Fraud detection, monitoring, and prevention systems",
            "is_core": False,
            "permissions": (
                ("read_rules", "View Fraud Rules", "View fraud detection rules"),
                ("create_rules", "Create Fraud Rules", "Create new fraud detection rules"),
                ("update_rules", "Edit Fraud Rules", "Modify fraud detection rules"),
                ("delete_rules", "Delete Fraud Rules", "Remove fraud detection rules"),
                ("view_alerts", "View Fraud Alerts", "View fraud detection alerts"),
                ("update_alerts", "Update Alert Status", "Update fraud alert status"),
                ("view_monitoring", "View Fraud Monitoring", "View fraud monitoring dashboard"),
                ("manage_detection", "Manage Detection", "Manage fraud detection settings"),
            ),
        },
        "communications": {
            "module_name": "Communications & Notifications",
            "description": "Email templates, notifications, and messaging system",
            "is_core": False,
            "permissions": (
                ("read_templates", "View Templates", "View notification templates"),
                ("create_templates", "Create Templates", "Create new notification templates"),
                ("update_templates", "Edit Templates", "Modify notification templates"),
                ("delete_templates", "Delete Templates", "Remove notification templates"),
                ("send_notifications", "Send Notifications", "Send notifications to users"),
                ("view_notifications", "View Notifications", "View notification history"),
                ("update_notification_status", "Update Notification Status", "Update notification status"),
                ("manage_messaging", "Manage Messaging", "Manage messaging system settings"),
            ),
        },
        "integrations": {
            "module_name": "Third-party Integrations",
            "description": "API keys, webhooks, and external service integrations",
            "is_core": False,
            "permissions": (
                ("read_api_keys", "View API Keys", "View API key information"),
                ("create_api_keys", "Create API Keys", "Create new API keys"),
                ("update_api_keys", "Update API Keys", "Update API key settings"),
                ("delete_api_keys", "Delete API Keys", "Remove API keys"),
                ("read_webhooks", "View Webhooks", "View webhook configurations"),
                ("create_webhooks", "Create Webhooks", "Create new webhook endpoints"),
                ("update_webhooks", "Update Webhooks", "Update webhook settings"),
                ("delete_webhooks", "Delete Webhooks", "Remove webhook endpoints"),
                ("manage_integrations", "Manage Integrations", "Manage third-party integrations"),
            ),
        },
        "settings": {
            "module_name": "System Settings",
            "description": "Tenant settings, user management, and system configuration",
            "is_core": True,
            "permissions": (
                ("read_tenant_settings", "View Tenant Settings", "View tenant configuration settings"),
                ("update_tenant_settings", "Update Tenant Settings", "Update tenant configuration"),
                ("read_users", "View Users", "View user information"),
                ("create_users", "Create Users", "Create new user accounts"),
                ("update_users", "Update Users", "Update user information"),
                ("delete_users", "Delete Users", "Remove user accounts"),
                ("read_roles", "View Roles", "View role information"),
                ("create_roles", "Create Roles", "Create new user roles"),
                ("update_roles", "Update Roles", "Update role permissions"),
                ("delete_roles", "Delete Roles", "Remove user roles"),
                ("manage_permissions", "Manage Permissions", "Manage role-based permissions"),
            ),
        },
        "support": {
            "module_name": "Customer Support",
            "description": "Support ticket management and knowledge base",
            "is_core": False,
            "permissions": (
                ("read_tickets", "View Support Tickets", "View support ticket information"),
                ("create_tickets", "Create Support Tickets", "Create new support tickets"),
                ("update_tickets", "Update Support Tickets", "Update support ticket status"),
                ("view_knowledge_base", "View Knowledge Base", "Access knowledge base articles"),
                ("search_knowledge_base", "Search Knowledge Base", "Search knowledge base content"),
                ("manage_tickets", "Manage Tickets", "Manage support ticket workflow"),
                ("view_all_tickets", "View All Tickets", "View all support tickets (Admin)"),
            ),
        },
    },
}
