"""Tests for the exception hierarchy and error codes."""

from __future__ import annotations

import pytest

from accesscore import (
    AccessCoreError,
    Catalog,
    CatalogIntegrityError,
    ConfigurationError,
    PlanAccessEntry,
    PlanAccessProjection,
    PlanNotFoundError,
)
from accesscore.permissions.grants import parse_app_grant, parse_permission_grant


class TestExceptionHierarchy:
    """Tests for error codes, messages and details."""

    def test_base_defaults(self) -> None:
        """Test base error carries the default code and message."""
        error = AccessCoreError()
        assert error.code == "INTERNAL_ERROR"
        assert error.message == "An internal error occurred"
        assert error.details == {}
        assert str(error) == "An internal error occurred"

    def test_custom_message_and_details(self) -> None:
        """Test message, code override and keyword details."""
        error = ConfigurationError("Bad grant", code="BAD_GRANT", plan_id="free")
        assert error.message == "Bad grant"
        assert error.code == "BAD_GRANT"
        assert error.details == {"plan_id": "free"}

    def test_subclasses(self) -> None:
        """Test every error derives from AccessCoreError."""
        for cls in (ConfigurationError, CatalogIntegrityError, PlanNotFoundError):
            assert issubclass(cls, AccessCoreError)

    def test_plan_not_found(self) -> None:
        """Test PlanNotFoundError keeps the plan id."""
        error = PlanNotFoundError("gold")
        assert error.plan_id == "gold"
        assert error.code == "PLAN_NOT_FOUND"
        assert str(error) == "Plan 'gold' not found"
        assert error.details == {"plan_id": "gold"}


class TestErrorCodes:
    """Tests for the stable error codes callers map onto their protocol."""

    def test_codes_are_distinct(self) -> None:
        """Test each error type has its own code."""
        classes = (AccessCoreError, ConfigurationError, CatalogIntegrityError, PlanNotFoundError)
        codes = [cls.code for cls in classes]
        assert codes == ["INTERNAL_ERROR", "CONFIGURATION_ERROR", "CATALOG_INTEGRITY_ERROR", "PLAN_NOT_FOUND"]

    def test_consumer_subclass(self) -> None:
        """Test a consumer subclass keeps the base behaviour with its own code."""

        class OnboardingError(AccessCoreError):
            code = "ONBOARDING_ERROR"

        error = OnboardingError("Tenant setup failed", tenant_id="t-1")
        assert error.code == "ONBOARDING_ERROR"
        assert error.details == {"tenant_id": "t-1"}
        assert isinstance(error, AccessCoreError)


class TestMalformedData:
    """Tests for errors raised on malformed catalog and plan data."""

    def test_duplicate_application(self) -> None:
        """Test duplicate application codes are rejected."""
        with pytest.raises(CatalogIntegrityError) as exc_info:
            Catalog.from_data([{"app_code": "crm"}, {"app_code": "crm"}])
        assert exc_info.value.details["errors"]

    def test_permission_grant_shapes(self) -> None:
        """Test permission grants must be a wildcard or a list."""
        for raw in ("read", {"read": True}, 42, None):
            with pytest.raises(ConfigurationError):
                parse_permission_grant(raw)

    def test_app_grant_shapes(self) -> None:
        """Test application grants must be a wildcard or a mapping."""
        for raw in ("crm", ["leads"], None):
            with pytest.raises(ConfigurationError):
                parse_app_grant(raw)

    def test_grant_for_unlisted_application(self) -> None:
        """Test a plan cannot grant applications it does not list."""
        with pytest.raises(ConfigurationError) as exc_info:
            PlanAccessEntry.from_data("free", {"applications": ["crm"], "permissions": {"hr": "*"}})
        assert exc_info.value.details == {"plan_id": "free", "applications": ["hr"]}

    def test_duplicate_plan_id(self) -> None:
        """Test a projection rejects repeated plan ids."""
        entry = PlanAccessEntry(plan_id="free")
        with pytest.raises(ConfigurationError, match="Duplicate plan id"):
            PlanAccessProjection([entry, entry])
