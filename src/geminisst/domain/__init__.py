"""Domain layer exports."""

from .models import (
    BackendResponse,
    CurrentThinkingConfig,
    GenerationRequest,
    LegacyThinkingConfig,
    ModelFamily,
    ResolvedSource,
    Segment,
    ThinkingConfig,
    ThinkingLevel,
    TokenUsage,
    TranscriptionOptions,
    TranscriptionResult,
    UploadedFile,
    UsageStats,
)
from .response_normalizer import normalize_response
from .source_resolver import is_remote, mime_type_for, resolve_source
from .thinking import build_thinking_config, classify_model

__all__ = [
    "BackendResponse",
    "CurrentThinkingConfig",
    "GenerationRequest",
    "LegacyThinkingConfig",
    "ModelFamily",
    "ResolvedSource",
    "Segment",
    "ThinkingConfig",
    "ThinkingLevel",
    "TokenUsage",
    "TranscriptionOptions",
    "TranscriptionResult",
    "UploadedFile",
    "UsageStats",
    "build_thinking_config",
    "classify_model",
    "is_remote",
    "mime_type_for",
    "resolve_source",
]
