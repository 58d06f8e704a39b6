"""Tests for AccessConfig."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from accesscore import AccessConfig, LogLevel, load_access_config_from_env


class TestAccessConfig:
    """Tests for AccessConfig model."""

    def test_create_default_config(self) -> None:
        """Test creating an AccessConfig with defaults."""
        config = AccessConfig()
        assert config.log_level == LogLevel.INFO
        assert config.log_json is False
        assert config.service_name is None
        assert config.fallback_plan == "free"
        assert config.admin_role_name == "Organization Admin"
        assert config.admin_role_description.startswith("Full administrative access")
        assert config.admin_role_color == "#dc2626"
        assert config.admin_role_priority == 100

    def test_create_custom_config(self) -> None:
        """Test creating an AccessConfig with custom values."""
        config = AccessConfig(
            log_level=LogLevel.DEBUG,
            log_json=True,
            service_name="onboarding",
            fallback_plan="starter",
            admin_role_name="Owner",
            admin_role_color="#112233",
            admin_role_priority=10,
        )
        assert config.log_level == LogLevel.DEBUG
        assert config.log_json is True
        assert config.service_name == "onboarding"
        assert config.fallback_plan == "starter"
        assert config.admin_role_name == "Owner"
        assert config.admin_role_color == "#112233"
        assert config.admin_role_priority == 10

    def test_log_level_from_string(self) -> None:
        """Test creating config with log level as string."""
        assert AccessConfig(log_level="DEBUG").log_level == LogLevel.DEBUG
        assert AccessConfig(log_level="warning").log_level == LogLevel.WARNING

    def test_log_level_invalid(self) -> None:
        """Test creating config with invalid log level."""
        with pytest.raises(ValueError, match="Invalid log level"):
            AccessConfig(log_level="INVALID")

    def test_fallback_plan_validation(self) -> None:
        """Test fallback plan must be a lowercase token."""
        for plan_id in ("", "Free", "free plan", "1free", "free.v2"):
            with pytest.raises(ValueError, match="Invalid plan id"):
                AccessConfig(fallback_plan=plan_id)

    def test_role_color_validation(self) -> None:
        """Test role color must be #rrggbb."""
        for color in ("red", "#fff", "dc2626", "#dc26261"):
            with pytest.raises(ValueError, match="Invalid role color"):
                AccessConfig(admin_role_color=color)

    def test_role_color_is_lowercased(self) -> None:
        """Test role color is normalized."""
        assert AccessConfig(admin_role_color="#DC2626").admin_role_color == "#dc2626"

    def test_extra_fields_forbidden(self) -> None:
        """Test that extra fields are forbidden."""
        with pytest.raises(ValidationError):
            AccessConfig(redis_url="redis://localhost")  # type: ignore[call-arg]


class TestLoadAccessConfigFromEnv:
    """Tests for load_access_config_from_env function."""

    @patch.dict(os.environ, {}, clear=True)
    def test_load_defaults(self) -> None:
        """Test loading config with no environment variables."""
        config = load_access_config_from_env()
        assert config == AccessConfig()

    @patch.dict(
        os.environ,
        {
            "LOG_LEVEL": "DEBUG",
            "LOG_JSON": "true",
            "SERVICE_NAME": "onboarding",
            "ACCESS_FALLBACK_PLAN": "starter",
            "ADMIN_ROLE_NAME": "Owner",
            "ADMIN_ROLE_COLOR": "#00AA00",
            "ADMIN_ROLE_PRIORITY": "250",
        },
        clear=True,
    )
    def test_load_from_env(self) -> None:
        """Test loading config from environment variables."""
        config = load_access_config_from_env()
        assert config.log_level == LogLevel.DEBUG
        assert config.log_json is True
        assert config.service_name == "onboarding"
        assert config.fallback_plan == "starter"
        assert config.admin_role_name == "Owner"
        assert config.admin_role_color == "#00aa00"
        assert config.admin_role_priority == 250

    def test_log_json_variants(self) -> None:
        """Test LOG_JSON accepts various true values."""
        for value in ("true", "TRUE", "1", "yes"):
            with patch.dict(os.environ, {"LOG_JSON": value}, clear=True):
                assert load_access_config_from_env().log_json is True
        for value in ("false", "0", "no"):
            with patch.dict(os.environ, {"LOG_JSON": value}, clear=True):
                assert load_access_config_from_env().log_json is False

    @patch.dict(os.environ, {"ACCESS_FALLBACK_PLAN": "Gold Plan"}, clear=True)
    def test_invalid_fallback_plan(self) -> None:
        """Test invalid environment values are rejected."""
        with pytest.raises(ValidationError):
            load_access_config_from_env()
