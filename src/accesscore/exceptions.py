"""Unified exception hierarchy for accesscore.

All errors inherit from AccessCoreError and carry a stable ``code``
string callers can map onto their own protocol (HTTP status, RPC code).

Usage:
    from accesscore.exceptions import (
        AccessCoreError,
        PlanNotFoundError,
    )

Consumers may define thin subclasses for their own errors:
    class OnboardingError(AccessCoreError):
        code = "ONBOARDING_ERROR"
"""

from __future__ import annotations

from typing import Any

__all__ = [
    # Base hierarchy
    "AccessCoreError",
    "ConfigurationError",
    "CatalogIntegrityError",
    "PlanNotFoundError",
]


# ---- Exception Hierarchy ----------------------------------------------------


class AccessCoreError(Exception):
    """Base exception for accesscore.

    Attributes:
        code: Stable error code string for protocol mapping (e.g. "PLAN_NOT_FOUND").
        message: Human-readable error description.
        details: Additional context as keyword arguments.
    """

    code: str = "INTERNAL_ERROR"
    message: str = "An internal error occurred"

    def __init__(self, message: str | None = None, code: str | None = None, **kwargs: Any) -> None:
        self.message = message or self.message
        self.code = code or self.code
        self.details = kwargs
        super().__init__(self.message)


class ConfigurationError(AccessCoreError):
    """Invalid configuration or structurally malformed plan data."""

    code: str = "CONFIGURATION_ERROR"
    message: str = "Invalid configuration"


class CatalogIntegrityError(AccessCoreError):
    """Catalog or projection violates a structural invariant.

    Raised for duplicate codes, codes containing the full-code separator,
    and a fallback plan that is missing from the projection.
    """

    code: str = "CATALOG_INTEGRITY_ERROR"
    message: str = "Permission catalog integrity violated"


class PlanNotFoundError(AccessCoreError):
    """Plan identifier has no entry in the plan-access projection."""

    code: str = "PLAN_NOT_FOUND"
    message: str = "Plan not found"

    def __init__(self, plan_id: str, message: str | None = None, **kwargs: Any) -> None:
        self.plan_id = plan_id
        super().__init__(message or f"Plan '{plan_id}' not found", plan_id=plan_id, **kwargs)
