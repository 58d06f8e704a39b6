"""Access-check helpers over persisted roles and derived lookup tables.

Provides runtime functions that answer whether a grant covers a specific
permission, module, or legacy action. Used by authorization middleware.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional

from .constants import FULL_CODE_SEPARATOR, WILDCARD, Permissions
from .models import Catalog

logger = logging.getLogger(__name__)


def has_permission(
    role_permissions: Mapping[str, Any],
    full_code: str,
    catalog: Optional[Catalog] = None,
) -> bool:
    """Check if a role's nested permissions grant a fully-qualified code.

    Does a direct three-level lookup on the persisted shape
    ``{app_code: {module_code: [codes]}}``. A ``"*"`` at the application
    or module level grants the codes ``catalog`` currently defines under
    that level; without a catalog it grants nothing.

    Args:
        role_permissions: ``RoleConfig.permissions`` as persisted.
        full_code: ``"<app>.<module>.<code>"``.
        catalog: Catalog bounding wildcard grants. Required for wildcards to match.

    Returns:
        True if access is granted. Malformed codes are denied.

    Example::

        perms = {"crm": {"leads": ["read", "create"]}, "hr": "*"}
        has_permission(perms, "crm.leads.read")                         # True
        has_permission(perms, "crm.leads.delete")                       # False
        has_permission(perms, "hr.employees.read", DEFAULT_CATALOG)     # True
        has_permission(perms, "hr.employees.read")                      # False
        has_permission(perms, "hr.does_not_exist.x", DEFAULT_CATALOG)   # False
    """
    try:
        app_code, module_code, code = Permissions.split(full_code)
    except ValueError:
        logger.debug("Denying malformed permission code %r", full_code)
        return False

    app_grant = role_permissions.get(app_code)
    if app_grant is None:
        return False
    if app_grant == WILDCARD:
        return _in_catalog(catalog, app_code, module_code, code)
    if not isinstance(app_grant, Mapping):
        return False

    module_grant = app_grant.get(module_code)
    if module_grant is None:
        return False
    if module_grant == WILDCARD:
        return _in_catalog(catalog, app_code, module_code, code)
    if isinstance(module_grant, str):
        return False
    return code in module_grant


def _in_catalog(catalog: Optional[Catalog], app_code: str, module_code: str, code: str) -> bool:
    if catalog is None:
        logger.debug("Denying wildcard match for %s.%s.%s without a catalog", app_code, module_code, code)
        return False
    return catalog.get_permission(app_code, module_code, code) is not None


def unlocked_modules(
    granted: Iterable[str],
    keyword_map: Mapping[str, Iterable[str]],
) -> set[str]:
    """Modules unlocked by a set of granted permissions.

    Each granted entry contributes its module segment as a keyword when it
    is a fully-qualified code; any other string is used as a keyword as-is.

    Args:
        granted: Fully-qualified codes or bare keywords.
        keyword_map: Output of ``build_module_access_map()``.
    """
    modules: set[str] = set()
    for entry in granted:
        parts = entry.split(FULL_CODE_SEPARATOR)
        keyword = parts[1] if len(parts) == 3 else entry
        modules.update(keyword_map.get(keyword, ()))
    return modules


def has_module_access(
    granted: Iterable[str],
    module: str,
    keyword_map: Mapping[str, Iterable[str]],
) -> bool:
    """Check if any granted permission unlocks ``module``.

    Example::

        keyword_map = build_module_access_map(DEFAULT_CATALOG)
        has_module_access(["accounting.invoices.read"], "accounts_receivable", keyword_map)  # True
        has_module_access(["accounting.invoices.read"], "accounts_payable", keyword_map)     # False
    """
    return module in unlocked_modules(granted, keyword_map)


def satisfies_legacy_action(
    granted: Iterable[str],
    action: str,
    legacy_map: Mapping[str, Iterable[str]],
) -> bool:
    """Check if any granted permission satisfies an old-style action name.

    Unknown actions are denied.

    Args:
        granted: Fully-qualified codes held by the caller.
        action: Legacy name such as ``"manage_invoices"``.
        legacy_map: Output of ``build_legacy_action_map()``.
    """
    required = legacy_map.get(action)
    if not required:
        return False
    held = set(granted)
    return any(code in held for code in required)


__all__ = [
    "has_module_access",
    "has_permission",
    "satisfies_legacy_action",
    "unlocked_modules",
]
