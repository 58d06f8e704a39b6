"""Configuration contract for accesscore.

This module provides Pydantic-validated configuration for the logging
setup and the tenant-onboarding role provisioner.

Consumers SHOULD build an AccessConfig once at process start and pass it
to the services that need it. Direct os.environ/os.getenv usage is
limited to load_access_config_from_env().
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

_PLAN_ID_RE = re.compile(r"^[a-z][a-z0-9_]*$")
_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


class LogLevel(str, Enum):
    """Standard log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class AccessConfig(BaseModel):
    """Configuration for the permission matrix services.

    RULE: settings come through this object. Only
    load_access_config_from_env() reads the environment.
    """

    # Logging
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Use JSON log format (default: plain text)",
    )

    # Service identification
    service_name: Optional[str] = Field(
        default=None,
        description="Service name used as the package logger name (e.g., 'onboarding')",
    )

    # Provisioning
    fallback_plan: str = Field(
        default="free",
        description="Plan substituted by the role provisioner for unknown plan ids",
    )
    admin_role_name: str = Field(
        default="Organization Admin",
        description="Display name of the provisioned super-admin role",
    )
    admin_role_description: str = Field(
        default=(
            "Full administrative access to all features and settings. "
            "This role has complete control over the organization."
        ),
        description="Description of the provisioned super-admin role",
    )
    admin_role_color: str = Field(
        default="#dc2626",
        description="Reserved display color of the super-admin role",
    )
    admin_role_priority: int = Field(
        default=100,
        description="Priority of the super-admin role (higher = more authoritative)",
    )

    @field_validator("fallback_plan")
    @classmethod
    def validate_fallback_plan(cls, v: str) -> str:
        """Plan ids are bare lowercase tokens."""
        if not _PLAN_ID_RE.match(v):
            raise ValueError(f"Invalid plan id: {v!r}. Must be a lowercase token")
        return v

    @field_validator("admin_role_color")
    @classmethod
    def validate_admin_role_color(cls, v: str) -> str:
        """Validate #rrggbb color format."""
        if not _COLOR_RE.match(v):
            raise ValueError(f"Invalid role color: {v!r}. Must be #rrggbb")
        return v.lower()

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | LogLevel) -> LogLevel:
        """Convert string to LogLevel enum."""
        if isinstance(v, LogLevel):
            return v
        if isinstance(v, str):
            try:
                return LogLevel[v.upper()]
            except KeyError:
                raise ValueError(f"Invalid log level: {v}. Must be one of {[e.value for e in LogLevel]}")
        raise ValueError(f"Log level must be string or LogLevel enum, got {type(v)}")

    model_config = {
        "use_enum_values": True,
        "extra": "forbid",  # Prevent accidental extra fields
    }


def load_access_config_from_env() -> AccessConfig:
    """Load configuration from environment variables.

    This is the ONLY place where os.getenv is allowed.

    Environment variables:
    - LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - LOG_JSON: Use JSON log format (true/false, default: false)
    - SERVICE_NAME: Service name for logging
    - ACCESS_FALLBACK_PLAN: Plan substituted for unknown plan ids
    - ADMIN_ROLE_NAME: Super-admin role display name
    - ADMIN_ROLE_COLOR: Super-admin role color (#rrggbb)
    - ADMIN_ROLE_PRIORITY: Super-admin role priority

    Returns:
        AccessConfig instance with values from environment or defaults.
    """
    import os

    overrides: dict[str, object] = {}
    if os.getenv("ADMIN_ROLE_NAME"):
        overrides["admin_role_name"] = os.getenv("ADMIN_ROLE_NAME")
    if os.getenv("ADMIN_ROLE_COLOR"):
        overrides["admin_role_color"] = os.getenv("ADMIN_ROLE_COLOR")
    if os.getenv("ADMIN_ROLE_PRIORITY"):
        overrides["admin_role_priority"] = int(os.getenv("ADMIN_ROLE_PRIORITY", "100"))

    return AccessConfig(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_json=os.getenv("LOG_JSON", "false").lower() in ("true", "1", "yes"),
        service_name=os.getenv("SERVICE_NAME"),
        fallback_plan=os.getenv("ACCESS_FALLBACK_PLAN", "free"),
        **overrides,
    )


__all__ = [
    "AccessConfig",
    "LogLevel",
    "load_access_config_from_env",
]
