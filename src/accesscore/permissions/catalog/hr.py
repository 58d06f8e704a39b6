"""Human Resources Management application catalog."""

from __future__ import annotations

from typing import Any

HR: dict[str, Any] = {
    "app_code": "hr",
    "app_name": "Human Resources Management",
    "description": "Complete HR solution for employee management and payroll",
    "icon": "👥",
    "base_url": "http://localhost:3003",
    "version": "1.5.0",
    "is_core": True,
    "sort_order": 2,
    "modules": {
        "employees": {
            "module_name": "Employee Management",
            "description": "Manage employee records and information",
            "is_core": True,
            "permissions": (
                ("read", "View Employees", "View employee information"),
                ("read_all", "View All Employees", "View all employees in organization"),
                ("create", "Add Employees", "Add new employees to the system"),
                ("update", "Edit Employees", "Modify employee information"),
                ("delete", "Remove Employees", "Remove employees from system"),
                ("view_salary", "View Salary Information", "Access employee salary details"),
                ("export", "Export Employee Data", "Export employee data"),
            ),
        },
        "payroll": {
            "module_name": "Payroll Management",
            "description": "Process payroll and manage compensation",
            "is_core": True,
            "permissions": (
                ("read", "View Payroll", "View payroll information"),
                ("process", "Process Payroll", "Run payroll calculations"),
                ("approve", "Approve Payroll", "Approve payroll for processing"),
                ("export", "Export Payroll", "Export payroll reports"),
                ("generate_reports", "Generate Reports", "Generate payroll reports"),
            ),
        },
        "leave": {
            "module_name": "Leave Management",
            "description": "Manage employee leave requests and approvals",
            "is_core": True,
            "permissions": (
                ("read", "View Leave Requests", "View leave request information"),
                ("create", "Create Leave Requests", "Submit leave requests"),
                ("approve", "Approve Leave", "Approve leave requests"),
                ("reject", "Reject Leave", "Reject leave requests"),
                ("cancel", "Cancel Leave", "Cancel leave requests"),
                ("export", "Export Leave Data", "Export leave reports"),
            ),
        },
        "dashboard": {
            "module_name": "HR Dashboard",
            "description": "HR analytics and reporting dashboard",
            "is_core": True,
            "permissions": (
                ("view", "View Dashboard", "Access HR dashboard"),
                ("customize", "Customize Dashboard", "Customize dashboard layout"),
                ("export", "Export Reports", "Export HR reports"),
            ),
        },
    },
}
