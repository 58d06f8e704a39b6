"""Super-admin role provisioning for tenant onboarding.

Unlike ``PlanResolver``, provisioning never blocks onboarding on an
unknown plan id: it substitutes the configured fallback plan and logs a
warning.

Also provides helpers over the nested role-permission shape
(``{app_code: {module_code: [codes]}}``).
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..config import AccessConfig
from ..exceptions import CatalogIntegrityError
from ..logging import get_access_logger
from .constants import RoleScope
from .grants import PlanAccessEntry, PlanAccessProjection
from .models import Catalog, RoleConfig


class RoleProvisioner:
    """Builds the administrator role record for a newly onboarded tenant.

    Args:
        projection: Plan-access table.
        config: Role metadata and fallback plan (defaults to ``AccessConfig()``).
    """

    __slots__ = ("_projection", "_config")

    def __init__(self, projection: PlanAccessProjection, config: Optional[AccessConfig] = None) -> None:
        self._projection = projection
        self._config = config or AccessConfig()

    def build_super_admin_role(
        self,
        plan_id: str,
        tenant_id: Optional[str] = None,
        created_by: Optional[str] = None,
    ) -> RoleConfig:
        """Build the super-admin RoleConfig for ``plan_id``.

        The plan's nested permissions are embedded as-is (not flattened);
        wildcards stay ``"*"``.

        Raises:
            CatalogIntegrityError: only if the fallback plan itself is missing.
        """
        entry = self._entry_or_fallback(plan_id, tenant_id)
        return RoleConfig(
            tenant_id=tenant_id,
            # Root organization shares the tenant id until the org record exists
            organization_id=tenant_id,
            role_name=self._config.admin_role_name,
            description=self._config.admin_role_description,
            permissions=entry.permissions_data(),
            is_system_role=True,
            is_default=True,
            priority=self._config.admin_role_priority,
            scope=RoleScope.ORGANIZATION,
            is_inheritable=True,
            color=self._config.admin_role_color,
            created_by=created_by,
            restrictions={},
        )

    def _entry_or_fallback(self, plan_id: str, tenant_id: Optional[str]) -> PlanAccessEntry:
        entry = self._projection.get(plan_id)
        if entry is not None:
            return entry

        fallback = self._config.fallback_plan
        logger = get_access_logger(__name__, tenant_id=tenant_id, plan_id=plan_id)
        logger.warning("Plan '%s' not found in plan-access projection, using '%s' plan", plan_id, fallback)

        entry = self._projection.get(fallback)
        if entry is None:
            raise CatalogIntegrityError(
                f"Fallback plan '{fallback}' is missing from the plan-access projection",
                plan_id=fallback,
            )
        return entry


def extract_applications(permissions: Any, catalog: Catalog) -> list[str]:
    """Application codes present at the top level of a role's permissions.

    Keys the catalog does not know are ignored; non-mapping input yields ``[]``.
    """
    if not isinstance(permissions, Mapping):
        return []
    known = set(catalog.app_codes)
    return [app_code for app_code in permissions if app_code in known]


def filter_permissions_by_application(permissions: Any, app_code: str) -> dict[str, Any]:
    """Restrict a role's nested permissions to a single application."""
    if not isinstance(permissions, Mapping) or app_code not in permissions:
        return {}
    return {app_code: permissions[app_code]}


__all__ = [
    "RoleProvisioner",
    "extract_applications",
    "filter_permissions_by_application",
]
