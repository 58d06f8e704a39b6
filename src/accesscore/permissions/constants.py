"""Permission code format, plan identifiers and role constants.

Provides:
- ``Permissions`` — builders for fully-qualified codes and legacy action names.
- ``PlanId`` — subscription plan identifiers.
- ``RoleScope`` — scope values for provisioned roles.
"""

from __future__ import annotations

WILDCARD = "*"
"""Marker meaning "everything currently defined at this catalog level"."""

FULL_CODE_SEPARATOR = "."

READ_PERMISSION_CODES = ("read", "read_all")


class Permissions:
    """Fully-qualified permission codes and legacy action names.

    Format: ``{app_code}.{module_code}.{permission_code}``

    Usage::

        Permissions.full_code("crm", "leads", "read")   → "crm.leads.read"
        Permissions.split("crm.leads.read")             → ("crm", "leads", "read")
        Permissions.manage("invoices")                  → "manage_invoices"
        Permissions.view("invoices")                    → "view_invoices"
    """

    MANAGE_PREFIX = "manage_"
    VIEW_PREFIX = "view_"

    @staticmethod
    def full_code(app_code: str, module_code: str, code: str) -> str:
        """Join the three segments of a fully-qualified permission code."""
        return FULL_CODE_SEPARATOR.join((app_code, module_code, code))

    @staticmethod
    def split(full_code: str) -> tuple[str, str, str]:
        """Split a fully-qualified code into ``(app_code, module_code, code)``.

        Raises:
            ValueError: if the string does not have exactly three non-empty segments.
        """
        parts = full_code.split(FULL_CODE_SEPARATOR)
        if len(parts) != 3 or not all(parts):
            raise ValueError(f"Malformed permission code: {full_code!r}")
        return parts[0], parts[1], parts[2]

    @staticmethod
    def manage(module_code: str) -> str:
        """Legacy action granting every permission of a module."""
        return f"{Permissions.MANAGE_PREFIX}{module_code}"

    @staticmethod
    def view(module_code: str) -> str:
        """Legacy action granting the read permissions of a module."""
        return f"{Permissions.VIEW_PREFIX}{module_code}"


class PlanId:
    """Subscription plan identifiers emitted by billing."""

    FREE = "free"
    STARTER = "starter"
    PROFESSIONAL = "professional"
    ENTERPRISE = "enterprise"

    ALL = frozenset({"free", "starter", "professional", "enterprise"})


class RoleScope:
    """Scope of a provisioned role."""

    ORGANIZATION = "organization"


__all__ = [
    "FULL_CODE_SEPARATOR",
    "Permissions",
    "PlanId",
    "READ_PERMISSION_CODES",
    "RoleScope",
    "WILDCARD",
]
