"""Maps model identifiers to the thinking configuration they accept."""

from ..constants import LEGACY_DEFAULT_BUDGET
from .models import (
    CurrentThinkingConfig,
    LegacyThinkingConfig,
    ModelFamily,
    ThinkingConfig,
    ThinkingLevel,
)

CURRENT_FAMILY_MARKER = "gemini-3"


def classify_model(model: str) -> ModelFamily:
    """Unrecognized identifiers fall back to the legacy family."""
    if CURRENT_FAMILY_MARKER in model:
        return ModelFamily.CURRENT
    return ModelFamily.LEGACY


def build_thinking_config(
    model: str,
    thinking_budget: int | None = None,
    thinking_level: ThinkingLevel | str | None = None,
) -> ThinkingConfig:
    """
    Builds the thinking configuration for a model.

    Current-family models get the named level (or none, leaving the
    backend default); every other model gets a numeric budget, -1 when
    not supplied. The parameter that does not apply to the family is
    ignored.
    """
    if classify_model(model) is ModelFamily.CURRENT:
        level = ThinkingLevel(thinking_level.lower()) if thinking_level else None
        return CurrentThinkingConfig(level=level)

    budget = thinking_budget if thinking_budget is not None else LEGACY_DEFAULT_BUDGET
    return LegacyThinkingConfig(budget=budget)
