"""Plan resolution: expand a plan into fully-qualified permissions.

Resolution is strict: an unknown plan id raises ``PlanNotFoundError``.
Callers that want graceful degradation pick their own fallback plan
before calling.
"""

from __future__ import annotations

import logging

from ..exceptions import PlanNotFoundError
from .constants import Permissions
from .grants import CreditGrant, PlanAccessEntry, PlanAccessProjection
from .models import ResolvedPermission
from .query import MatrixQueryService

logger = logging.getLogger(__name__)

_NO_CREDITS = CreditGrant(free=0, paid=0, expiry_days=30)


class PlanResolver:
    """Expands plan ids against a projection and a catalog.

    Args:
        projection: Plan-access table.
        query: Query service over the catalog used to expand wildcards and
            attach display metadata.
    """

    __slots__ = ("_projection", "_query")

    def __init__(self, projection: PlanAccessProjection, query: MatrixQueryService) -> None:
        self._projection = projection
        self._query = query

    def get_plan(self, plan_id: str) -> PlanAccessEntry:
        """Return the projection entry for ``plan_id``.

        Raises:
            PlanNotFoundError: if the plan is not in the projection.
        """
        entry = self._projection.get(plan_id)
        if entry is None:
            logger.warning("Plan '%s' not found in plan-access projection", plan_id)
            raise PlanNotFoundError(plan_id)
        return entry

    def resolve(self, plan_id: str) -> list[ResolvedPermission]:
        """Expand a plan into its granted permissions.

        Order follows the plan: applications, then modules, then codes as
        declared (wildcards in catalog order). Duplicates in the plan are
        passed through.

        Codes the catalog does not define are still emitted, named after
        the bare code with an empty description.

        Raises:
            PlanNotFoundError: if the plan is not in the projection.
        """
        entry = self.get_plan(plan_id)
        catalog = self._query.catalog
        resolved: list[ResolvedPermission] = []

        for app_code in entry.applications:
            app_grant = entry.grant_for(app_code)
            if app_grant is None:
                continue
            application = catalog.get_application(app_code)
            for module_code, grant in app_grant.module_grants(application):
                module = catalog.get_module(app_code, module_code)
                for code in grant.codes_for(module):
                    resolved.append(self._resolve_one(app_code, module_code, code))

        return resolved

    def resolve_full_codes(self, plan_id: str) -> list[str]:
        """Fully-qualified codes granted by a plan, in resolution order."""
        return [p.full_code for p in self.resolve(plan_id)]

    def plan_credits(self, plan_id: str) -> CreditGrant:
        """Credit configuration of a plan; unknown plans get no credits."""
        entry = self._projection.get(plan_id)
        return entry.credits if entry is not None else _NO_CREDITS

    def _resolve_one(self, app_code: str, module_code: str, code: str) -> ResolvedPermission:
        full_code = Permissions.full_code(app_code, module_code, code)
        if self._query.find_permission(app_code, module_code, code) is None:
            logger.debug("Plan references unknown permission %s", full_code)
        return ResolvedPermission(
            code=code,
            name=self._query.permission_name(app_code, module_code, code),
            description=self._query.permission_description(app_code, module_code, code),
            full_code=full_code,
            app_code=app_code,
            module_code=module_code,
        )


__all__ = ["PlanResolver"]
