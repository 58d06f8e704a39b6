"""Capability catalog models and resolution outputs.

Provides:
- ``Permission`` / ``Module`` / ``Application`` / ``Catalog`` — the three-level
  capability tree. Immutable once built.
- ``ResolvedPermission`` — one fully-qualified permission granted by a plan.
- ``RoleConfig`` — a ready-to-persist administrator role record.

Attributes are snake_case in Python and serialize to camelCase
(``appCode``, ``moduleCode``, ``fullCode``, ...) with ``by_alias=True``.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic.alias_generators import to_camel

from ..exceptions import CatalogIntegrityError
from .constants import FULL_CODE_SEPARATOR, RoleScope


def _check_segment(value: str) -> str:
    if FULL_CODE_SEPARATOR in value:
        raise ValueError(f"code {value!r} must not contain {FULL_CODE_SEPARATOR!r}")
    return value


def _duplicates(codes: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    dupes: list[str] = []
    for code in codes:
        # Empty codes are a validator finding, not a uniqueness violation
        if not code:
            continue
        if code in seen and code not in dupes:
            dupes.append(code)
        seen.add(code)
    return dupes


class _MatrixModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


class Permission(_MatrixModel):
    """An atomic grantable action inside a module."""

    code: str = ""
    name: str = ""
    description: str = ""

    @field_validator("code")
    @classmethod
    def validate_code(cls, v: str) -> str:
        return _check_segment(v)


class Module(_MatrixModel):
    """A functional area inside an application."""

    module_code: str
    module_name: str = ""
    description: str = ""
    is_core: bool = False
    permissions: tuple[Permission, ...] = ()

    @field_validator("module_code")
    @classmethod
    def validate_module_code(cls, v: str) -> str:
        return _check_segment(v)

    @model_validator(mode="after")
    def check_unique_permissions(self) -> Module:
        dupes = _duplicates(p.code for p in self.permissions)
        if dupes:
            raise ValueError(f"duplicate permission codes in module {self.module_code!r}: {dupes}")
        return self

    @property
    def permission_codes(self) -> tuple[str, ...]:
        return tuple(p.code for p in self.permissions)

    def get_permission(self, code: str) -> Optional[Permission]:
        return next((p for p in self.permissions if p.code == code), None)


class Application(_MatrixModel):
    """Top-level product area. Modules keep declaration order."""

    app_code: str
    app_name: str = ""
    description: str = ""
    icon: str = ""
    base_url: str = ""
    version: str = ""
    is_core: bool = False
    sort_order: int = 0
    modules: tuple[Module, ...] = ()

    @field_validator("app_code")
    @classmethod
    def validate_app_code(cls, v: str) -> str:
        return _check_segment(v)

    @model_validator(mode="after")
    def check_unique_modules(self) -> Application:
        dupes = _duplicates(m.module_code for m in self.modules)
        if dupes:
            raise ValueError(f"duplicate module codes in application {self.app_code!r}: {dupes}")
        return self

    @property
    def module_codes(self) -> tuple[str, ...]:
        return tuple(m.module_code for m in self.modules)

    def get_module(self, module_code: str) -> Optional[Module]:
        return next((m for m in self.modules if m.module_code == module_code), None)


class Catalog(_MatrixModel):
    """The full Application → Module → Permission tree.

    Lookups return ``None`` on a miss; nothing here raises for unknown codes.

    Example::

        catalog = Catalog.from_data([
            {
                "app_code": "crm",
                "app_name": "CRM",
                "modules": {
                    "leads": {
                        "module_name": "Leads",
                        "permissions": [("read", "View Leads"), ("create", "Create Leads")],
                    },
                },
            },
        ])
        catalog.get_permission("crm", "leads", "read").name  # "View Leads"
    """

    applications: tuple[Application, ...] = ()

    @model_validator(mode="after")
    def check_unique_applications(self) -> Catalog:
        dupes = _duplicates(a.app_code for a in self.applications)
        if dupes:
            raise ValueError(f"duplicate application codes: {dupes}")
        return self

    @property
    def app_codes(self) -> tuple[str, ...]:
        return tuple(a.app_code for a in self.applications)

    def get_application(self, app_code: str) -> Optional[Application]:
        return next((a for a in self.applications if a.app_code == app_code), None)

    def get_module(self, app_code: str, module_code: str) -> Optional[Module]:
        app = self.get_application(app_code)
        return app.get_module(module_code) if app is not None else None

    def get_permission(self, app_code: str, module_code: str, code: str) -> Optional[Permission]:
        module = self.get_module(app_code, module_code)
        return module.get_permission(code) if module is not None else None

    @classmethod
    def from_data(cls, applications: Iterable[Mapping[str, Any]]) -> Catalog:
        """Build a catalog from declarative application literals.

        Each application literal holds its attributes plus ``modules``, a
        mapping of module code → module literal. A module literal's
        ``permissions`` are ``(code, name[, description])`` tuples or mappings.

        Raises:
            CatalogIntegrityError: on duplicate codes or codes containing ``.``.
        """
        data = {"applications": [_application_data(raw) for raw in applications]}
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise CatalogIntegrityError(
                f"Invalid permission catalog: {exc.error_count()} error(s)",
                errors=[e["msg"] for e in exc.errors()],
            ) from exc


def _permission_data(raw: Any) -> dict[str, Any]:
    if isinstance(raw, Mapping):
        return dict(raw)
    code, name, *rest = raw
    return {"code": code, "name": name, "description": rest[0] if rest else ""}


def _module_data(module_code: str, raw: Mapping[str, Any]) -> dict[str, Any]:
    data = {k: v for k, v in raw.items() if k != "permissions"}
    data.setdefault("module_code", module_code)
    data["permissions"] = [_permission_data(p) for p in raw.get("permissions", ())]
    return data


def _application_data(raw: Mapping[str, Any]) -> dict[str, Any]:
    data = {k: v for k, v in raw.items() if k != "modules"}
    data["modules"] = [_module_data(code, module) for code, module in raw.get("modules", {}).items()]
    return data


class ResolvedPermission(_MatrixModel):
    """One permission granted by a plan, with display metadata attached."""

    code: str
    name: str
    description: str = ""
    full_code: str
    app_code: str
    module_code: str


class RoleConfig(_MatrixModel):
    """Provisioned administrator role, ready to hand to the role store.

    ``permissions`` keeps the plan's nested shape:
    ``{app_code: {module_code: [codes]}}``, with ``"*"`` where the plan
    grants everything at that level.
    """

    tenant_id: Optional[str] = None
    organization_id: Optional[str] = None
    role_name: str
    description: str = ""
    permissions: dict[str, Any] = Field(default_factory=dict)
    is_system_role: bool = True
    is_default: bool = True
    priority: int = 100
    scope: str = RoleScope.ORGANIZATION
    is_inheritable: bool = True
    color: str = "#dc2626"
    created_by: Optional[str] = None
    restrictions: dict[str, Any] = Field(default_factory=dict)

    def to_record(self) -> dict[str, Any]:
        """Persisted shape with camelCase keys."""
        return self.model_dump(by_alias=True)


__all__ = [
    "Application",
    "Catalog",
    "Module",
    "Permission",
    "ResolvedPermission",
    "RoleConfig",
]
