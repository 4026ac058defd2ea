"""Feature flags module for centralized feature toggle management."""

from pydantic import BaseModel, Field

from notedeck.config import get_settings


class FeatureFlags(BaseModel):
    """Pydantic model defining all feature flags in the application."""

    ai: bool = Field(..., description="Whether AI flashcard generation is enabled")


def get_feature_flags() -> FeatureFlags:
    """Get current feature flags based on application configuration."""
    settings = get_settings()
    return FeatureFlags(ai=settings.ai_enabled)


def is_ai_enabled() -> bool:
    """Check if AI features are enabled."""
    return get_feature_flags().ai
