"""Project Management application catalog."""

from __future__ import annotations

from typing import Any

PROJECT_MANAGEMENT: dict[str, Any] = {
    "app_code": "project_management",
    "app_name": "Project Management",
    "description": "Complete project management solution for managing projects, tasks, teams, and workflows",
    "icon": "📋",
    "base_url": "https://prm.zopkit.com",
    "version": "1.0.0",
    "is_core": True,
    "sort_order": 2,
    "modules": {
        "projects": {
            "module_name": "Project Management",
            "description": "Manage projects, timelines, and budgets",
            "is_core": True,
            "permissions": (
                ("read", "View Projects", "View and browse project information"),
                ("read_all", "View All Projects", "View all projects in organization"),
                ("create", "Create Projects", "Create new projects"),
                ("update", "Edit Projects", "Modify existing project information"),
                ("delete", "Delete Projects", "Remove projects from the system"),
                ("export", "Export Projects", "Export project data to various formats"),
                ("import", "Import Projects", "Import projects from external files"),
                ("assign", "Assign Projects", "Assign projects to team members"),
                ("archive", "Archive Projects", "Archive completed or inactive projects"),
                ("restore", "Restore Projects", "Restore archived projects"),
                ("manage_budget", "Manage Budget", "Manage project budgets and financials"),
                ("manage_timeline", "Manage Timeline", "Manage project timelines and milestones"),
                ("manage_settings", "Manage Settings", "Manage project settings and configurations"),
            ),
        },
        "tasks": {
            "module_name": "Task Management",
            "description": "Manage tasks, subtasks, and assignments",
            "is_core": True,
            "permissions": (
                ("read", "View Tasks", "View and browse task information"),
                ("read_all", "View All Tasks", "View all tasks in organization"),
                ("create", "Create Tasks", "Create new tasks"),
                ("update", "Edit Tasks", "Modify existing task information"),
                ("delete", "Delete Tasks", "Remove tasks from the system"),
                ("export", "Export Tasks", "Export task data to various formats"),
                ("import", "Import Tasks", "Import tasks from external files"),
                ("assign", "Assign Tasks", "Assign tasks to team members"),
                ("reassign", "Reassign Tasks", "Reassign tasks to different team members"),
                ("change_status", "Change Status", "Change task status (todo, in progress, done, etc.)"),
                ("change_priority", "Change Priority", "Change task priority levels"),
                ("add_subtasks", "Add Subtasks", "Add subtasks to existing tasks"),
                ("manage_dependencies", "Manage Dependencies", "Manage task dependencies and relationships"),
                ("add_attachments", "Add Attachments", "Add attachments to tasks"),
                ("add_comments", "Add Comments", "Add comments to tasks"),
                ("time_track", "Track Time", "Track time spent on tasks"),
            ),
        },
        "sprints": {
            "module_name": "Sprint Management",
            "description": "Manage agile sprints and iterations",
            "is_core": True,
            "permissions": (
                ("read", "View Sprints", "View and browse sprint information"),
                ("read_all", "View All Sprints", "View all sprints in organization"),
                ("create", "Create Sprints", "Create new sprints"),
                ("update", "Edit Sprints", "Modify existing sprint information"),
                ("delete", "Delete Sprints", "Remove sprints from the system"),
                ("export", "Export Sprints", "Export sprint data"),
                ("start", "Start Sprints", "Start sprint execution"),
                ("complete", "Complete Sprints", "Mark sprints as completed"),
                ("cancel", "Cancel Sprints", "Cancel active sprints"),
                ("manage_capacity", "Manage Capacity", "Manage sprint capacity and velocity"),
                ("assign_tasks", "Assign Tasks", "Assign tasks to sprints"),
                ("view_burndown", "View Burndown", "View sprint burndown charts"),
            ),
        },
        "time_tracking": {
            "module_name": "Time Tracking",
            "description": "Track time spent on projects and tasks",
            "is_core": True,
            "permissions": (
                ("read", "View Time Entries", "View time entry information"),
                ("read_all", "View All Time Entries", "View all time entries in organization"),
                ("create", "Create Time Entries", "Create new time entries"),
                ("update", "Edit Time Entries", "Modify existing time entries"),
                ("delete", "Delete Time Entries", "Remove time entries"),
                ("export", "Export Time Entries", "Export time tracking data"),
                ("import", "Import Time Entries", "Import time entries from files"),
                ("approve", "Approve Time Entries", "Approve time entries for billing"),
                ("reject", "Reject Time Entries", "Reject time entries"),
                ("view_reports", "View Reports", "View time tracking reports and analytics"),
                ("manage_billable", "Manage Billable Hours", "Mark time entries as billable/non-billable"),
                ("bulk_approve", "Bulk Approve", "Approve multiple time entries at once"),
            ),
        },
        "team": {
            "module_name": "Team Management",
            "description": "Manage team members and assignments",
            "is_core": True,
            "permissions": (
                ("read", "View Team Members", "View team member information"),
                ("read_all", "View All Team Members", "View all team members in organization"),
                ("create", "Add Team Members", "Add new team members to projects"),
                ("update", "Edit Team Members", "Modify team member information"),
                ("delete", "Remove Team Members", "Remove team members from projects"),
                ("export", "Export Team Data", "Export team member data"),
                ("import", "Import Team Members", "Import team members from files"),
                ("assign_roles", "Assign Roles", "Assign roles to team members"),
                ("manage_permissions", "Manage Permissions", "Manage team member permissions"),
                ("view_performance", "View Performance", "View team member performance metrics"),
                ("manage_availability", "Manage Availability", "Manage team member availability and capacity"),
            ),
        },
        "backlog": {
            "module_name": "Backlog Management",
            "description": "Manage product backlog and user stories",
            "is_core": True,
            "permissions": (
                ("read", "View Backlog", "View backlog items and user stories"),
                ("read_all", "View All Backlog", "View all backlog items in organization"),
                ("create", "Create Backlog Items", "Create new backlog items and stories"),
                ("update", "Edit Backlog Items", "Modify existing backlog items"),
                ("delete", "Delete Backlog Items", "Remove backlog items"),
                ("export", "Export Backlog", "Export backlog data"),
                ("import", "Import Backlog", "Import backlog items from files"),
                ("prioritize", "Prioritize Items", "Prioritize backlog items"),
                ("estimate", "Estimate Items", "Add story points and estimates"),
                ("move_to_sprint", "Move to Sprint", "Move backlog items to sprints"),
                ("manage_epics", "Manage Epics", "Manage epics and feature groups"),
            ),
        },
        "documents": {
            "module_name": "Document Management",
            "description": "Manage project documents and files",
            "is_core": True,
            "permissions": (
                ("read", "View Documents", "View document information"),
                ("read_all", "View All Documents", "View all documents in organization"),
                ("create", "Upload Documents", "Upload new documents"),
                ("update", "Edit Documents", "Modify document information and metadata"),
                ("delete", "Delete Documents", "Remove documents from the system"),
                ("export", "Export Documents", "Export document data"),
                ("download", "Download Documents", "Download document files"),
                ("share", "Share Documents", "Share documents with team members"),
                ("version_control", "Manage Versions", "Manage document versions"),
                ("add_comments", "Add Comments", "Add comments to documents"),
                ("approve", "Approve Documents", "Approve documents for use"),
                ("manage_permissions", "Manage Permissions", "Manage document access permissions"),
            ),
        },
        "analytics": {
            "module_name": "Analytics & Reporting",
            "description": "View project analytics and generate reports",
            "is_core": True,
            "permissions": (
                ("read", "View Analytics", "View analytics and metrics"),
                ("read_all", "View All Analytics", "View all analytics in organization"),
                ("create", "Create Reports", "Create custom reports"),
                ("update", "Edit Reports", "Modify existing reports"),
                ("delete", "Delete Reports", "Remove reports"),
                ("export", "Export Reports", "Export report data"),
                ("schedule", "Schedule Reports", "Schedule automated reports"),
                ("view_dashboards", "View Dashboards", "View analytics dashboards"),
                ("customize_dashboards", "Customize Dashboards", "Customize dashboard layouts"),
                ("view_project_health", "View Project Health", "View project health scores and metrics"),
                ("view_team_performance", "View Team Performance", "View team performance analytics"),
                ("view_burndown", "View Burndown Charts", "View sprint and project burndown charts"),
                ("view_velocity", "View Velocity", "View team velocity metrics"),
            ),
        },
        "reports": {
            "module_name": "Report Management",
            "description": "Create and manage project reports",
            "is_core": True,
            "permissions": (
                ("read", "View Reports", "View report information"),
                ("read_all", "View All Reports", "View all reports in organization"),
                ("create", "Create Reports", "Create new reports"),
                ("update", "Edit Reports", "Modify existing reports"),
                ("delete", "Delete Reports", "Remove reports"),
                ("export", "Export Reports", "Export report data to various formats"),
                ("schedule", "Schedule Reports", "Schedule automated report generation"),
                ("share", "Share Reports", "Share reports with team members"),
                ("generate_pdf", "Generate PDF", "Generate PDF versions of reports"),
                ("customize", "Customize Reports", "Customize report templates and layouts"),
            ),
        },
        "chat": {
            "module_name": "Project Chat",
            "description": "Team communication and collaboration",
            "is_core": True,
            "permissions": (
                ("read", "View Messages", "View chat messages and conversations"),
                ("read_all", "View All Messages", "View all messages in organization"),
                ("create", "Send Messages", "Send messages in project chats"),
                ("update", "Edit Messages", "Edit own messages"),
                ("delete", "Delete Messages", "Delete own messages"),
                ("create_channels", "Create Channels", "Create new chat channels"),
                ("manage_channels", "Manage Channels", "Manage channel settings and members"),
                ("delete_channels", "Delete Channels", "Delete chat channels"),
                ("mention_users", "Mention Users", "Mention users in messages"),
                ("share_files", "Share Files", "Share files in chat"),
                ("pin_messages", "Pin Messages", "Pin important messages"),
            ),
        },
        "calendar": {
            "module_name": "Calendar Management",
            "description": "Manage project events, meetings, and schedules",
            "is_core": True,
            "permissions": (
                ("read", "View Calendar", "View calendar events"),
                ("read_all", "View All Events", "View all calendar events in organization"),
                ("create", "Create Events", "Create new calendar events"),
                ("update", "Edit Events", "Modify event information"),
                ("delete", "Delete Events", "Remove calendar events"),
                ("export", "Export Calendar", "Export calendar data"),
                ("import", "Import Events", "Import events from files"),
                ("share", "Share Events", "Share events with team members"),
                ("manage_recurring", "Manage Recurring Events", "Create and manage recurring events"),
            ),
        },
        "kanban": {
            "module_name": "Kanban Board",
            "description": "Manage tasks using Kanban boards",
            "is_core": True,
            "permissions": (
                ("read", "View Kanban Boards", "View Kanban board information"),
                ("read_all", "View All Boards", "View all Kanban boards in organization"),
                ("create", "Create Boards", "Create new Kanban boards"),
                ("update", "Edit Boards", "Modify board settings and columns"),
                ("delete", "Delete Boards", "Remove Kanban boards"),
                ("move_cards", "Move Cards", "Move task cards between columns"),
                ("manage_columns", "Manage Columns", "Add, edit, and remove board columns"),
                ("manage_filters", "Manage Filters", "Create and manage board filters"),
                ("export", "Export Boards", "Export board data"),
            ),
        },
        "dashboard": {
            "module_name": "Project Dashboard",
            "description": "Project overview and analytics dashboard",
            "is_core": True,
            "permissions": (
                ("view", "View Dashboard", "Access project dashboard"),
                ("customize", "Customize Dashboard", "Customize dashboard layout and widgets"),
                ("export", "Export Dashboard", "Export dashboard data and reports"),
                ("share", "Share Dashboard", "Share dashboard views with others"),
                ("create_widgets", "Create Widgets", "Create custom dashboard widgets"),
                ("manage_widgets", "Manage Widgets", "Manage dashboard widget settings"),
            ),
        },
        "notifications": {
            "module_name": "Notification Management",
            "description": "Manage notifications and alerts",
            "is_core": True,
            "permissions": (
                ("read", "View Notifications", "View notification information"),
                ("read_all", "View All Notifications", "View all notifications in organization"),
                ("create", "Create Notifications", "Create custom notifications"),
                ("update", "Edit Notifications", "Modify notification settings"),
                ("delete", "Delete Notifications", "Remove notifications"),
                ("manage_preferences", "Manage Preferences", "Manage notification preferences"),
                ("mark_read", "Mark as Read", "Mark notifications as read"),
                ("bulk_actions", "Bulk Actions", "Perform bulk actions on notifications"),
            ),
        },
        "workspace": {
            "module_name": "Workspace Management",
            "description": "Manage workspaces and team collaboration spaces",
            "is_core": True,
            "permissions": (
                ("read", "View Workspaces", "View workspace information"),
                ("read_all", "View All Workspaces", "View all workspaces in organization"),
                ("create", "Create Workspaces", "Create new workspaces"),
                ("update", "Edit Workspaces", "Modify workspace settings"),
                ("delete", "Delete Workspaces", "Remove workspaces"),
                ("manage_members", "Manage Members", "Add and remove workspace members"),
                ("manage_roles", "Manage Roles", "Assign roles to workspace members"),
                ("manage_settings", "Manage Settings", "Manage workspace settings and configurations"),
                ("export", "Export Workspace Data", "Export workspace data"),
                ("archive", "Archive Workspaces", "Archive inactive workspaces"),
                ("restore", "Restore Workspaces", "Restore archived workspaces"),
            ),
        },
        "workflow": {
            "module_name": "Workflow Management",
            "description": "Manage automated workflows and processes",
            "is_core": False,
            "permissions": (
                ("read", "View Workflows", "View workflow information"),
                ("read_all", "View All Workflows", "View all workflows in organization"),
                ("create", "Create Workflows", "Create new workflows"),
                ("update", "Edit Workflows", "Modify workflow definitions"),
                ("delete", "Delete Workflows", "Remove workflows"),
                ("activate", "Activate Workflows", "Activate workflows for execution"),
                ("deactivate", "Deactivate Workflows", "Deactivate workflows"),
                ("view_executions", "View Executions", "View workflow execution history"),
                ("manage_rules", "Manage Rules", "Manage workflow rules and conditions"),
                ("manage_actions", "Manage Actions", "Manage workflow actions and triggers"),
                ("export", "Export Workflows", "Export workflow definitions"),
                ("import", "Import Workflows", "Import workflows from files"),
            ),
        },
        "system": {
            "module_name": "System Configuration",
            "description": "System administration and configuration management",
            "is_core": True,
            "permissions": (
                ("settings_read", "View Settings", "View system settings and configurations"),
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
                ("roles_read_all", "View All Roles", "View all roles in organization"),
                ("roles_create", "Create Roles", "Create new roles"),
                ("roles_update", "Edit Roles", "Modify role information"),
                ("roles_delete", "Delete Roles", "Remove roles"),
                ("roles_assign", "Assign Roles", "Assign roles to users"),
                ("roles_export", "Export Roles", "Export role data"),
                ("integrations_read", "View Integrations", "View system integrations"),
                ("integrations_create", "Create Integrations", "Create new integrations"),
                ("integrations_update", "Update Integrations", "Update existing integrations"),
                ("integrations_delete", "Delete Integrations", "Delete integrations"),
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
