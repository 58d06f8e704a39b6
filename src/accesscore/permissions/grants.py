"""Plan-access projection: which slice of the catalog a plan grants.

Provides:
- ``AllPermissions`` / ``ExplicitCodes`` — a module-level grant (``PermissionGrant``).
- ``AllModules`` / ``ModuleGrants`` — an application-level grant (``AppGrant``).
- ``CreditGrant`` — free/paid credit configuration of a plan.
- ``PlanAccessEntry`` — one plan's applications, modules, permissions and credits.
- ``PlanAccessProjection`` — plan id → entry.

Wildcards are resolved against the catalog at resolution time, never
snapshotted, so catalog growth flows into plans that use them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Iterable, Iterator, Mapping, Optional, Union

from ..exceptions import ConfigurationError
from .constants import WILDCARD

if TYPE_CHECKING:
    from .models import Application, Module


# ── Module-level grants ─────────────────────────────────


@dataclass(frozen=True)
class AllPermissions:
    """Every permission currently defined for the module."""

    def codes_for(self, module: Optional[Module]) -> tuple[str, ...]:
        return module.permission_codes if module is not None else ()

    def to_data(self) -> str:
        return WILDCARD


@dataclass(frozen=True)
class ExplicitCodes:
    """An explicit list of permission codes, in declaration order."""

    codes: tuple[str, ...] = ()

    def codes_for(self, module: Optional[Module]) -> tuple[str, ...]:
        return self.codes

    def to_data(self) -> list[str]:
        return list(self.codes)


PermissionGrant = Union[AllPermissions, ExplicitCodes]


# ── Application-level grants ────────────────────────────


@dataclass(frozen=True)
class AllModules:
    """Every module (and every permission) currently defined for the application."""

    def module_grants(self, application: Optional[Application]) -> tuple[tuple[str, PermissionGrant], ...]:
        if application is None:
            return ()
        return tuple((m.module_code, AllPermissions()) for m in application.modules)

    def to_data(self) -> str:
        return WILDCARD


@dataclass(frozen=True)
class ModuleGrants:
    """Per-module grants, in declaration order."""

    modules: Mapping[str, PermissionGrant] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "modules", MappingProxyType(dict(self.modules)))

    def module_grants(self, application: Optional[Application]) -> tuple[tuple[str, PermissionGrant], ...]:
        return tuple(self.modules.items())

    def to_data(self) -> dict[str, Any]:
        return {module_code: grant.to_data() for module_code, grant in self.modules.items()}


AppGrant = Union[AllModules, ModuleGrants]


def parse_permission_grant(raw: Any) -> PermissionGrant:
    """Parse ``"*"`` or a list of codes into a PermissionGrant."""
    if isinstance(raw, (AllPermissions, ExplicitCodes)):
        return raw
    if raw == WILDCARD:
        return AllPermissions()
    if isinstance(raw, (str, bytes, Mapping)) or not isinstance(raw, Iterable):
        raise ConfigurationError(f"Permission grant must be '{WILDCARD}' or a list of codes, got {raw!r}")
    return ExplicitCodes(tuple(raw))


def parse_app_grant(raw: Any) -> AppGrant:
    """Parse ``"*"`` or a module → grant mapping into an AppGrant."""
    if isinstance(raw, (AllModules, ModuleGrants)):
        return raw
    if raw == WILDCARD:
        return AllModules()
    if isinstance(raw, Mapping):
        return ModuleGrants({code: parse_permission_grant(grant) for code, grant in raw.items()})
    raise ConfigurationError(f"Application grant must be '{WILDCARD}' or a module mapping, got {raw!r}")


# ── Plans ───────────────────────────────────────────────


@dataclass(frozen=True)
class CreditGrant:
    """Credit configuration of a plan."""

    free: int = 0
    paid: int = 0
    expiry_days: int = 30

    @classmethod
    def from_data(cls, raw: Mapping[str, Any]) -> CreditGrant:
        return cls(
            free=int(raw.get("free", 0)),
            paid=int(raw.get("paid", 0)),
            expiry_days=int(raw.get("expiry_days", raw.get("expiryDays", 30))),
        )

    def to_data(self) -> dict[str, int]:
        return {"free": self.free, "paid": self.paid, "expiryDays": self.expiry_days}


@dataclass(frozen=True)
class PlanAccessEntry:
    """One row of the plan-access projection.

    Raises:
        ConfigurationError: if ``modules`` or ``permissions`` mention an
            application that is not listed in ``applications``.
    """

    plan_id: str
    applications: tuple[str, ...] = ()
    modules: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    permissions: Mapping[str, AppGrant] = field(default_factory=dict)
    credits: CreditGrant = field(default_factory=CreditGrant)

    def __post_init__(self) -> None:
        object.__setattr__(self, "applications", tuple(self.applications))
        object.__setattr__(
            self,
            "modules",
            MappingProxyType({app: tuple(codes) for app, codes in self.modules.items()}),
        )
        object.__setattr__(self, "permissions", MappingProxyType(dict(self.permissions)))

        undeclared = sorted({app for app in (*self.modules, *self.permissions) if app not in self.applications})
        if undeclared:
            raise ConfigurationError(
                f"Plan '{self.plan_id}' grants applications missing from its applications list: {undeclared}",
                plan_id=self.plan_id,
                applications=undeclared,
            )

    @classmethod
    def from_data(cls, plan_id: str, raw: Mapping[str, Any]) -> PlanAccessEntry:
        return cls(
            plan_id=plan_id,
            applications=tuple(raw.get("applications", ())),
            modules={app: tuple(codes) for app, codes in raw.get("modules", {}).items()},
            permissions={app: parse_app_grant(grant) for app, grant in raw.get("permissions", {}).items()},
            credits=CreditGrant.from_data(raw.get("credits", {})),
        )

    def grant_for(self, app_code: str) -> Optional[AppGrant]:
        return self.permissions.get(app_code)

    def module_scope(self, app_code: str) -> tuple[str, ...]:
        return self.modules.get(app_code, ())

    def permissions_data(self) -> dict[str, Any]:
        """Nested wire shape: ``{app: {module: [codes] | "*"} | "*"}``."""
        return {app: grant.to_data() for app, grant in self.permissions.items()}


class PlanAccessProjection:
    """Immutable plan id → PlanAccessEntry table, in declaration order."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[PlanAccessEntry] = ()) -> None:
        table: dict[str, PlanAccessEntry] = {}
        for entry in entries:
            if entry.plan_id in table:
                raise ConfigurationError(f"Duplicate plan id: {entry.plan_id!r}", plan_id=entry.plan_id)
            table[entry.plan_id] = entry
        self._entries = MappingProxyType(table)

    @classmethod
    def from_data(cls, raw: Mapping[str, Mapping[str, Any]]) -> PlanAccessProjection:
        return cls(PlanAccessEntry.from_data(plan_id, entry) for plan_id, entry in raw.items())

    def get(self, plan_id: str) -> Optional[PlanAccessEntry]:
        return self._entries.get(plan_id)

    def plan_ids(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def __contains__(self, plan_id: object) -> bool:
        return plan_id in self._entries

    def __iter__(self) -> Iterator[PlanAccessEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"PlanAccessProjection(plan_ids={self.plan_ids()!r})"


__all__ = [
    "AllModules",
    "AllPermissions",
    "AppGrant",
    "CreditGrant",
    "ExplicitCodes",
    "ModuleGrants",
    "PermissionGrant",
    "PlanAccessEntry",
    "PlanAccessProjection",
    "parse_app_grant",
    "parse_permission_grant",
]
