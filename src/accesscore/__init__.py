from .config import AccessConfig, LogLevel, load_access_config_from_env
from .exceptions import (
    AccessCoreError,
    CatalogIntegrityError,
    ConfigurationError,
    PlanNotFoundError,
)
from .logging import (
    AccessFormatter,
    AccessLoggerAdapter,
    get_access_logger,
    safe_preview,
    setup_logging,
)
from .permissions import (
    DEFAULT_CATALOG,
    DEFAULT_PLAN_ACCESS,
    WILDCARD,
    AllModules,
    AllPermissions,
    Application,
    Catalog,
    CreditGrant,
    ExplicitCodes,
    MatrixQueryService,
    Module,
    ModuleGrants,
    Permission,
    Permissions,
    PlanAccessEntry,
    PlanAccessProjection,
    PlanId,
    PlanResolver,
    ResolvedPermission,
    RoleConfig,
    RoleProvisioner,
    build_legacy_action_map,
    build_module_access_map,
    extract_applications,
    filter_permissions_by_application,
    has_module_access,
    has_permission,
    satisfies_legacy_action,
    unlocked_modules,
    validate_matrix,
    validate_plan_access,
)

__all__ = [
    'AccessConfig',
    'LogLevel',
    'load_access_config_from_env',
    'AccessCoreError',
    'CatalogIntegrityError',
    'ConfigurationError',
    'PlanNotFoundError',
    'AccessFormatter',
    'AccessLoggerAdapter',
    'get_access_logger',
    'safe_preview',
    'setup_logging',
    'DEFAULT_CATALOG',
    'DEFAULT_PLAN_ACCESS',
    'WILDCARD',
    'AllModules',
    'AllPermissions',
    'Application',
    'Catalog',
    'CreditGrant',
    'ExplicitCodes',
    'MatrixQueryService',
    'Module',
    'ModuleGrants',
    'Permission',
    'Permissions',
    'PlanAccessEntry',
    'PlanAccessProjection',
    'PlanId',
    'PlanResolver',
    'ResolvedPermission',
    'RoleConfig',
    'RoleProvisioner',
    'build_legacy_action_map',
    'build_module_access_map',
    'extract_applications',
    'filter_permissions_by_application',
    'has_module_access',
    'has_permission',
    'satisfies_legacy_action',
    'unlocked_modules',
    'validate_matrix',
    'validate_plan_access',
]
