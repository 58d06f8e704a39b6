"""Permission matrix and resolution engine.

Defines:
- Catalog models: Application → Module → Permission
- Plan-access projection: plan id → granted slice of the catalog
- MatrixQueryService: lenient catalog lookups
- PlanResolver: plan id → fully-qualified permissions
- RoleProvisioner: plan id → super-admin RoleConfig
- Derived maps: module-access keywords and legacy action aliases
- Validators: catalog and plan diagnostics
- DEFAULT_CATALOG / DEFAULT_PLAN_ACCESS: the business suite's data
"""

from .access import (
    has_module_access,
    has_permission,
    satisfies_legacy_action,
    unlocked_modules,
)
from .aliases import (
    ACCOUNTING_APP,
    ACCOUNTING_LEGACY_COMPOSITES,
    ACCOUNTING_LEGACY_RENAMES,
    ACCOUNTING_MODULE_ALIASES,
    build_legacy_action_map,
    build_module_access_map,
)
from .catalog import DEFAULT_CATALOG
from .constants import (
    FULL_CODE_SEPARATOR,
    READ_PERMISSION_CODES,
    WILDCARD,
    Permissions,
    PlanId,
    RoleScope,
)
from .grants import (
    AllModules,
    AllPermissions,
    AppGrant,
    CreditGrant,
    ExplicitCodes,
    ModuleGrants,
    PermissionGrant,
    PlanAccessEntry,
    PlanAccessProjection,
)
from .models import (
    Application,
    Catalog,
    Module,
    Permission,
    ResolvedPermission,
    RoleConfig,
)
from .plans import DEFAULT_PLAN_ACCESS
from .provisioning import (
    RoleProvisioner,
    extract_applications,
    filter_permissions_by_application,
)
from .query import MatrixQueryService
from .resolver import PlanResolver
from .validation import validate_matrix, validate_plan_access

__all__ = [
    "ACCOUNTING_APP",
    "ACCOUNTING_LEGACY_COMPOSITES",
    "ACCOUNTING_LEGACY_RENAMES",
    "ACCOUNTING_MODULE_ALIASES",
    "DEFAULT_CATALOG",
    "DEFAULT_PLAN_ACCESS",
    "FULL_CODE_SEPARATOR",
    "READ_PERMISSION_CODES",
    "WILDCARD",
    "AllModules",
    "AllPermissions",
    "AppGrant",
    "Application",
    "Catalog",
    "CreditGrant",
    "ExplicitCodes",
    "MatrixQueryService",
    "Module",
    "ModuleGrants",
    "Permission",
    "PermissionGrant",
    "Permissions",
    "PlanAccessEntry",
    "PlanAccessProjection",
    "PlanId",
    "PlanResolver",
    "ResolvedPermission",
    "RoleConfig",
    "RoleProvisioner",
    "RoleScope",
    "build_legacy_action_map",
    "build_module_access_map",
    "extract_applications",
    "filter_permissions_by_application",
    "has_module_access",
    "has_permission",
    "satisfies_legacy_action",
    "unlocked_modules",
    "validate_matrix",
    "validate_plan_access",
]
