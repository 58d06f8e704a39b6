"""Read-only accessors over a capability catalog.

Unknown application or module codes are never an error here: list
accessors return ``[]`` and display lookups fall back to the raw code
(name) or ``""`` (description).
"""

from __future__ import annotations

from typing import Optional

from .models import Application, Catalog, Module, Permission


class MatrixQueryService:
    """Lenient lookups over an immutable Catalog.

    Args:
        catalog: The catalog to query. Inject a fixture catalog in tests.

    Example::

        query = MatrixQueryService(DEFAULT_CATALOG)
        query.list_modules("crm")                          # [Module(...), ...]
        query.list_modules("nope")                         # []
        query.permission_name("crm", "leads", "read")      # "View Leads"
        query.permission_name("crm", "leads", "teleport")  # "teleport"
    """

    __slots__ = ("_catalog",)

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def list_applications(self, *, display_order: bool = False) -> list[Application]:
        """All applications, in declaration order or by ``sort_order``.

        The sort is stable, so applications sharing a ``sort_order`` keep
        their declaration order.
        """
        apps = list(self._catalog.applications)
        if display_order:
            apps.sort(key=lambda app: app.sort_order)
        return apps

    def list_modules(self, app_code: str) -> list[Module]:
        app = self._catalog.get_application(app_code)
        return list(app.modules) if app is not None else []

    def list_permissions(self, app_code: str, module_code: str) -> list[Permission]:
        module = self._catalog.get_module(app_code, module_code)
        return list(module.permissions) if module is not None else []

    def find_permission(self, app_code: str, module_code: str, code: str) -> Optional[Permission]:
        return self._catalog.get_permission(app_code, module_code, code)

    def permission_name(self, app_code: str, module_code: str, code: str) -> str:
        permission = self.find_permission(app_code, module_code, code)
        return permission.name if permission is not None and permission.name else code

    def permission_description(self, app_code: str, module_code: str, code: str) -> str:
        permission = self.find_permission(app_code, module_code, code)
        return permission.description if permission is not None else ""


__all__ = ["MatrixQueryService"]
