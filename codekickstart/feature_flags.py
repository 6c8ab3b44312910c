"""Feature flags module for centralized feature toggle management."""

from typing import Literal

from pydantic import BaseModel, Field

from codekickstart.config import get_settings


class FeatureFlags(BaseModel):
    """Pydantic model defining all feature flags in the application."""

    ai: bool = Field(..., description="Whether the AI tutor is configured")
    user_registrations: bool = Field(..., description="Whether user registration is enabled")


FeatureFlagKey = Literal["ai", "user_registrations"]


def get_feature_flags() -> FeatureFlags:
    """Get current feature flags based on application configuration."""
    settings = get_settings()

    return FeatureFlags(
        ai=settings.ai_enabled,
        user_registrations=settings.ALLOW_USER_REGISTRATIONS,
    )


def get_feature_flag(key: FeatureFlagKey) -> bool:
    """Get the value of a specific feature flag."""
    return getattr(get_feature_flags(), key)


def is_user_registrations_enabled() -> bool:
    return get_feature_flag("user_registrations")
