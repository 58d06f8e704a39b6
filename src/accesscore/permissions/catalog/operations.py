"""Operations Management application catalog."""

from __future__ import annotations

from typing import Any

OPERATIONS: dict[str, Any] = {
    "app_code": "operations",
    "app_name": "Operations Management",
    "description": "End-to-end operations: inventory, procurement, suppliers, logistics, orders, fulfillments, and analytics",
    "icon": "📦",
    "base_url": "https://ops.zopkit.com",
    "version": "1.0.0",
    "is_core": True,
    "sort_order": 4,
    "modules": {
        "dashboard": {
            "module_name": "Operations Dashboard",
            "description": "Operations overview and analytics dashboard",
            "is_core": True,
            "permissions": (
                ("view", "View Dashboard", "Access operations dashboard"),
                ("customize", "Customize Dashboard", "Customize dashboard layout and widgets"),
                ("export", "Export Reports", "Export dashboard reports"),
            ),
        },
        "inventory": {
            "module_name": "Inventory Management",
            "description": "Manage inventory, stock levels, and movements",
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
        "warehouse": {
            "module_name": "Warehouse Management",
            "description": "Warehouse operations, cycle counts, and pick paths",
            "is_core": True,
            "permissions": (
                ("read", "View Warehouse", "View warehouse and location information"),
                ("read_all", "View All Warehouses", "View all warehouses"),
                ("create", "Create Warehouse", "Add new warehouses or locations"),
                ("update", "Edit Warehouse", "Modify warehouse information"),
                ("delete", "Delete Warehouse", "Remove warehouses"),
                ("cycle_count", "Cycle Count", "Perform cycle counts"),
                ("pick_path", "Manage Pick Paths", "Manage pick paths and routing"),
            ),
        },
        "procurement": {
            "module_name": "Procurement Management",
            "description": "Requisitions, purchase orders, and procurement workflow",
            "is_core": True,
            "permissions": (
                ("read", "View Procurement", "View requisitions and purchase orders"),
                ("read_all", "View All Procurement", "View all procurement in organization"),
                ("create", "Create Requisition", "Create new requisitions"),
                ("update", "Edit Procurement", "Modify requisitions and POs"),
                ("delete", "Delete Procurement", "Remove requisitions or POs"),
                ("approve", "Approve Requisition", "Approve procurement requests"),
                ("export", "Export Procurement", "Export procurement data"),
            ),
        },
        "suppliers": {
            "module_name": "Supplier Management",
            "description": "Manage suppliers, performance, and risk assessments",
            "is_core": True,
            "permissions": (
                ("read", "View Suppliers", "View supplier information"),
                ("read_all", "View All Suppliers", "View all suppliers in organization"),
                ("create", "Create Suppliers", "Add new suppliers"),
                ("update", "Edit Suppliers", "Modify supplier information"),
                ("delete", "Delete Suppliers", "Remove suppliers"),
                ("view_performance", "View Supplier Performance", "View supplier performance metrics"),
                ("view_risk", "View Risk Assessments", "View supplier risk assessments"),
                ("export", "Export Suppliers", "Export supplier data"),
            ),
        },
        "transportation": {
            "module_name": "Transportation & Logistics",
            "description": "Transportation orders, logistics, and shipping",
            "is_core": True,
            "permissions": (
                ("read", "View Transportation", "View transportation and logistics data"),
                ("read_all", "View All Transportation", "View all transportation orders"),
                ("create", "Create Transportation Order", "Create transportation orders"),
                ("update", "Edit Transportation", "Modify transportation information"),
                ("delete", "Delete Transportation", "Remove transportation orders"),
                ("export", "Export Transportation", "Export transportation data"),
            ),
        },
        "orders": {
            "module_name": "Order Management",
            "description": "Manage orders, fulfillment, and shipments",
            "is_core": True,
            "permissions": (
                ("read", "View Orders", "View order information"),
                ("read_all", "View All Orders", "View all orders in organization"),
                ("create", "Create Orders", "Create new orders"),
                ("update", "Edit Orders", "Modify order information"),
                ("delete", "Delete Orders", "Remove orders"),
                ("process", "Process Orders", "Process and fulfill orders"),
                ("export", "Export Orders", "Export order data"),
            ),
        },
        "fulfillments": {
            "module_name": "Fulfillment Management",
            "description": "Order fulfillment and shipment tracking",
            "is_core": True,
            "permissions": (
                ("read", "View Fulfillments", "View fulfillment information"),
                ("read_all", "View All Fulfillments", "View all fulfillments"),
                ("create", "Create Fulfillment", "Create fulfillments"),
                ("update", "Edit Fulfillment", "Modify fulfillment status"),
                ("delete", "Delete Fulfillment", "Remove fulfillments"),
                ("export", "Export Fulfillments", "Export fulfillment data"),
            ),
        },
        "shipments": {
            "module_name": "Shipment Management",
            "description": "Shipment tracking and carrier management",
            "is_core": True,
            "permissions": (
                ("read", "View Shipments", "View shipment information"),
                ("read_all", "View All Shipments", "View all shipments"),
                ("create", "Create Shipment", "Create new shipments"),
                ("update", "Edit Shipment", "Modify shipment information"),
                ("delete", "Delete Shipment", "Remove shipments"),
                ("track", "Track Shipments", "Track shipment status"),
                ("export", "Export Shipments", "Export shipment data"),
            ),
        },
        "catalog": {
            "module_name": "Product Catalog",
            "description": "Product catalog and categories",
            "is_core": True,
            "permissions": (
                ("read", "View Catalog", "View product catalog"),
                ("read_all", "View All Catalog", "View all catalog items"),
                ("create", "Create Catalog Items", "Add catalog products"),
                ("update", "Edit Catalog", "Modify catalog information"),
                ("delete", "Delete Catalog Items", "Remove catalog items"),
                ("export", "Export Catalog", "Export catalog data"),
            ),
        },
        "quality": {
            "module_name": "Quality Management",
            "description": "Quality checks and compliance",
            "is_core": True,
            "permissions": (
                ("read", "View Quality", "View quality data"),
                ("read_all", "View All Quality", "View all quality records"),
                ("create", "Create Quality Record", "Add quality records"),
                ("update", "Edit Quality", "Modify quality information"),
                ("delete", "Delete Quality", "Remove quality records"),
                ("export", "Export Quality", "Export quality data"),
            ),
        },
        "rfx": {
            "module_name": "RFx & Sourcing",
            "description": "RFQ, RFP, and sourcing events",
            "is_core": True,
            "permissions": (
                ("read", "View RFx", "View RFx and sourcing events"),
                ("read_all", "View All RFx", "View all RFx in organization"),
                ("create", "Create RFx", "Create new RFx events"),
                ("update", "Edit RFx", "Modify RFx information"),
                ("delete", "Delete RFx", "Remove RFx events"),
                ("submit_response", "Submit Response", "Submit vendor responses"),
                ("evaluate", "Evaluate Responses", "Evaluate RFx responses"),
                ("export", "Export RFx", "Export RFx data"),
            ),
        },
        "finance": {
            "module_name": "Finance & Invoices",
            "description": "Invoices and financial operations",
            "is_core": True,
            "permissions": (
                ("read", "View Finance", "View invoice and finance data"),
                ("read_all", "View All Finance", "View all finance records"),
                ("create", "Create Invoice", "Create invoices"),
                ("update", "Edit Finance", "Modify finance records"),
                ("delete", "Delete Finance", "Remove finance records"),
                ("export", "Export Finance", "Export finance data"),
            ),
        },
        "tax_compliance": {
            "module_name": "Tax Compliance",
            "description": "Tax compliance and reporting",
            "is_core": True,
            "permissions": (
                ("read", "View Tax Compliance", "View tax compliance data"),
                ("read_all", "View All Tax", "View all tax records"),
                ("create", "Create Tax Record", "Create tax records"),
                ("update", "Edit Tax", "Modify tax information"),
                ("export", "Export Tax", "Export tax compliance data"),
            ),
        },
        "supply_chain": {
            "module_name": "Supply Chain",
            "description": "Supply chain planning and demand",
            "is_core": True,
            "permissions": (
                ("read", "View Supply Chain", "View supply chain data"),
                ("read_all", "View All Supply Chain", "View all supply chain data"),
                ("create", "Create Supply Chain", "Create supply chain records"),
                ("update", "Edit Supply Chain", "Modify supply chain information"),
                ("export", "Export Supply Chain", "Export supply chain data"),
            ),
        },
        "analytics": {
            "module_name": "Analytics & Reporting",
            "description": "Operations analytics and reports",
            "is_core": True,
            "permissions": (
                ("read", "View Analytics", "View analytics and reports"),
                ("read_all", "View All Analytics", "View all analytics in organization"),
                ("create", "Create Reports", "Create custom reports"),
                ("export", "Export Analytics", "Export analytics data"),
                ("schedule", "Schedule Reports", "Schedule automated reports"),
            ),
        },
        "contracts": {
            "module_name": "Contract Management",
            "description": "Vendor and service contracts",
            "is_core": True,
            "permissions": (
                ("read", "View Contracts", "View contract information"),
                ("read_all", "View All Contracts", "View all contracts"),
                ("create", "Create Contract", "Create new contracts"),
                ("update", "Edit Contract", "Modify contract information"),
                ("delete", "Delete Contract", "Remove contracts"),
                ("export", "Export Contracts", "Export contract data"),
            ),
        },
        "service_appointments": {
            "module_name": "Service Appointments",
            "description": "Service bookings and appointments",
            "is_core": True,
            "permissions": (
                ("read", "View Appointments", "View service appointments"),
                ("read_all", "View All Appointments", "View all appointments"),
                ("create", "Create Appointment", "Create new appointments"),
                ("update", "Edit Appointment", "Modify appointment information"),
                ("delete", "Delete Appointment", "Remove appointments"),
                ("export", "Export Appointments", "Export appointment data"),
            ),
        },
        "notifications": {
            "module_name": "Notifications",
            "description": "Notifications and alerts",
            "is_core": True,
            "permissions": (
                ("read", "View Notifications", "View notifications"),
                ("read_all", "View All Notifications", "View all notifications"),
                ("create", "Create Notification", "Create notifications"),
                ("update", "Edit Notification", "Modify notification settings"),
                ("manage_preferences", "Manage Preferences", "Manage notification preferences"),
            ),
        },
        "system": {
            "module_name": "System Configuration",
            "description": "Operations system settings and user management",
            "is_core": True,
            "permissions": (
                ("settings_read", "View Settings", "View system settings"),
                ("settings_update", "Update Settings", "Update system settings"),
                ("users_read", "View Users", "View user information"),
                ("users_read_all", "View All Users", "View all users in organization"),
                ("users_create", "Create Users", "Create new user accounts"),
                ("users_update", "Edit Users", "Modify user information"),
                ("users_delete", "Delete Users", "Remove user accounts"),
                ("roles_read", "View Roles", "View role information"),
                ("roles_read_all", "View All Roles", "View all roles in organization"),
                ("roles_create", "Create Roles", "Create new roles"),
                ("roles_update", "Edit Roles", "Modify role permissions"),
                ("roles_delete", "Delete Roles", "Remove roles"),
                ("wrapper_sync", "Wrapper Sync", "Trigger and view Wrapper tenant sync"),
            ),
        },
        "marketing": {
            "module_name": "Marketing",
            "description": "Marketing campaigns and cart recovery",
            "is_core": False,
            "permissions": (
                ("read", "View Marketing", "View marketing campaigns and data"),
                ("read_all", "View All Marketing", "View all marketing data"),
                ("create", "Create Campaigns", "Create marketing campaigns"),
                ("update", "Edit Campaigns", "Modify marketing campaigns"),
                ("delete", "Delete Campaigns", "Remove marketing campaigns"),
                ("export", "Export Marketing", "Export marketing data"),
            ),
        },
        "customers": {
            "module_name": "Customer Management",
            "description": "Manage customers, profiles, and communication",
            "is_core": False,
            "permissions": (
                ("read", "View Customers", "View customer information"),
                ("read_all", "View All Customers", "View all customers"),
                ("create", "Create Customer", "Add new customers"),
                ("update", "Edit Customer", "Modify customer information"),
                ("delete", "Delete Customer", "Remove customers"),
                ("export", "Export Customers", "Export customer data"),
            ),
        },
        "returns": {
            "module_name": "Returns Management",
            "description": "Process and track product returns",
            "is_core": False,
            "permissions": (
                ("read", "View Returns", "View return requests"),
                ("read_all", "View All Returns", "View all return requests"),
                ("create", "Create Return", "Initiate a return"),
                ("update", "Edit Return", "Modify return information"),
                ("delete", "Delete Return", "Remove return records"),
                ("approve", "Approve Return", "Approve return requests"),
                ("export", "Export Returns", "Export return data"),
            ),
        },
        "customer_portal": {
            "module_name": "Customer Portal",
            "description": "Customer-facing portal: shop, services, bookings, payments, wishlist",
            "is_core": False,
            "permissions": (
                ("read", "View Customer Portal", "Access customer portal"),
                ("read_all", "View All Portal Data", "View all portal data"),
                ("manage_shop", "Manage Shop", "Manage customer shop settings"),
                ("manage_services", "Manage Services", "Manage customer service bookings"),
                ("manage_orders", "Manage Orders", "Manage customer orders"),
                ("manage_bookings", "Manage Bookings", "Manage customer bookings"),
                ("manage_payments", "Manage Payments", "Manage customer payments"),
                ("manage_wishlist", "Manage Wishlist", "Manage customer wishlists"),
                ("manage_preferences", "Manage Preferences", "Manage customer preferences"),
                ("export", "Export Portal Data", "Export customer portal data"),
            ),
        },
        "vendor_management": {
            "module_name": "Multi-Vendor Management",
            "description": "Vendor profiles, products, ratings, policies, and analytics",
            "is_core": False,
            "permissions": (
                ("read", "View Vendors", "View vendor information"),
                ("read_all", "View All Vendors", "View all vendors"),
                ("create", "Create Vendor", "Add new vendors"),
                ("update", "Edit Vendor", "Modify vendor information"),
                ("delete", "Delete Vendor", "Remove vendors"),
                ("manage_products", "Manage Vendor Products", "Manage vendor product listings"),
                ("manage_ratings", "Manage Ratings", "Manage vendor ratings and reviews"),
                ("manage_policies", "Manage Policies", "Manage vendor policies"),
                ("manage_communication", "Manage Communication", "Manage vendor communication"),
                ("view_analytics", "View Analytics", "View vendor analytics"),
                ("manage_certifications", "Manage Certifications", "Manage vendor certifications"),
                ("manage_portfolios", "Manage Portfolios", "Manage vendor portfolios"),
                ("export", "Export Vendors", "Export vendor data"),
            ),
        },
        "service_providers": {
            "module_name": "Service Provider Portal",
            "description": "Service provider catalog, pricing, promotions, and bundles",
            "is_core": False,
            "permissions": (
                ("read", "View Providers", "View service providers"),
                ("read_all", "View All Providers", "View all service providers"),
                ("create", "Create Provider", "Add service providers"),
                ("update", "Edit Provider", "Modify provider information"),
                ("delete", "Delete Provider", "Remove service providers"),
                ("manage_catalog", "Manage Catalog", "Manage service catalog"),
                ("manage_pricing", "Manage Pricing", "Manage pricing rules"),
                ("manage_promotions", "Manage Promotions", "Manage promotions and bundles"),
                ("view_analytics", "View Analytics", "View pricing analytics"),
                ("export", "Export Providers", "Export provider data"),
            ),
        },
    },
}
