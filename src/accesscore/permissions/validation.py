"""Diagnostic passes over the catalog and the plan-access projection.

Both return human-readable defect strings (empty list = valid) and never
raise. Nothing consults them at request time; run them at startup or in
the test suite.
"""

from __future__ import annotations

from .grants import ModuleGrants, PlanAccessProjection
from .models import Catalog


def validate_matrix(catalog: Catalog) -> list[str]:
    """Report structural defects of a catalog.

    Checks, independently:
    - every application has a name;
    - every application has at least one module;
    - every module has at least one permission;
    - every permission has a code and a name.
    """
    errors: list[str] = []

    for app in catalog.applications:
        if not app.app_name:
            errors.append(f"Application '{app.app_code}' is missing a name")

        if not app.modules:
            errors.append(f"Application '{app.app_code}' has no modules")

        for module in app.modules:
            where = f"{app.app_code}.{module.module_code}"
            if not module.permissions:
                errors.append(f"Module '{where}' has no permissions")

            for index, permission in enumerate(module.permissions):
                if not permission.code or not permission.name:
                    label = permission.code or f"#{index}"
                    errors.append(f"Permission '{label}' in module '{where}' is missing a code or name")

    return errors


def validate_plan_access(projection: PlanAccessProjection, catalog: Catalog) -> list[str]:
    """Cross-check plan entries against the catalog.

    Reports applications, modules and explicit permission codes a plan
    references that the catalog does not define, and modules granted
    permissions without being listed in the plan's module scope.
    Wildcards always refer to the live catalog and are not reported.
    """
    errors: list[str] = []

    for entry in projection:
        plan = entry.plan_id
        for app_code in entry.applications:
            app = catalog.get_application(app_code)
            if app is None:
                errors.append(f"Plan '{plan}' grants unknown application '{app_code}'")
                continue

            for module_code in entry.module_scope(app_code):
                if app.get_module(module_code) is None:
                    errors.append(f"Plan '{plan}' lists unknown module '{app_code}.{module_code}'")

            grant = entry.grant_for(app_code)
            if not isinstance(grant, ModuleGrants):
                continue

            scope = set(entry.module_scope(app_code))
            for module_code, module_grant in grant.modules.items():
                module = app.get_module(module_code)
                if module is None:
                    errors.append(f"Plan '{plan}' grants permissions on unknown module '{app_code}.{module_code}'")
                    continue
                if module_code not in scope:
                    errors.append(
                        f"Plan '{plan}' grants permissions on '{app_code}.{module_code}' "
                        f"without listing the module"
                    )
                for code in module_grant.codes_for(module):
                    if module.get_permission(code) is None:
                        errors.append(f"Plan '{plan}' references unknown permission '{app_code}.{module_code}.{code}'")

    return errors


__all__ = [
    "validate_matrix",
    "validate_plan_access",
]
