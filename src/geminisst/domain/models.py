"""Domain models for audio transcription."""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..constants import DEFAULT_MODEL, DEFAULT_PROMPT


class _CamelModel(BaseModel):
    """Accepts and emits camelCase keys alongside the snake_case field names."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )


class ThinkingLevel(str, Enum):
    """Named reasoning effort understood by current-family models."""

    MINIMAL = "minimal"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ModelFamily(str, Enum):
    """Model generations that differ in how thinking is configured."""

    LEGACY = "legacy"
    CURRENT = "current"


class TranscriptionOptions(_CamelModel):
    """Caller-facing options for a single transcription."""

    prompt: str = DEFAULT_PROMPT
    model: str = DEFAULT_MODEL
    verbose: bool = False
    # -1 dynamic, 0 disabled, otherwise 512-24576. Legacy family only.
    thinking_budget: int | None = None
    thinking_level: ThinkingLevel | None = None
    # Local files up to this size are sent inline; 0 always uploads.
    inline_max_bytes: int = Field(default=0, ge=0)

    @field_validator("prompt", "model", mode="before")
    @classmethod
    def _default_when_empty(cls, v, info):
        if v is None or v == "":
            return cls.model_fields[info.field_name].default
        return v


class ResolvedSource(BaseModel, frozen=True):
    """An audio source classified as local or remote, with its MIME type."""

    location: str
    mime_type: str
    is_remote: bool
    size_bytes: int | None = None


class LegacyThinkingConfig(BaseModel, frozen=True):
    """Numeric thinking budget for gemini-2.x and unrecognized models."""

    family: Literal[ModelFamily.LEGACY] = ModelFamily.LEGACY
    include_thoughts: bool = True
    budget: int


class CurrentThinkingConfig(BaseModel, frozen=True):
    """Named thinking level for gemini-3 models."""

    family: Literal[ModelFamily.CURRENT] = ModelFamily.CURRENT
    include_thoughts: bool = True
    level: ThinkingLevel | None = None


ThinkingConfig = Annotated[
    LegacyThinkingConfig | CurrentThinkingConfig, Field(discriminator="family")
]


class UploadedFile(BaseModel, frozen=True):
    """A file staged on the backend, addressable by URI."""

    uri: str
    mime_type: str


class GenerationRequest(BaseModel, frozen=True):
    """Everything the backend needs for one generation call."""

    model: str
    prompt: str
    mime_type: str
    thinking: ThinkingConfig
    file_uri: str | None = None
    inline_data: bytes | None = None


class Segment(BaseModel, frozen=True):
    """One output part of a backend response."""

    text: str = ""
    thought: bool = False


class TokenUsage(BaseModel, frozen=True):
    """Raw token counts as reported by the backend."""

    prompt_token_count: int | None = None
    candidates_token_count: int | None = None
    total_token_count: int | None = None
    thoughts_token_count: int | None = None


class BackendResponse(BaseModel, frozen=True):
    """Backend output flattened into ordered segments and usage."""

    segments: list[Segment] = []
    usage: TokenUsage | None = None


class UsageStats(_CamelModel):
    """Token usage and timing for a transcription."""

    input_tokens: int
    output_tokens: int
    total_tokens: int
    thoughts_token_count: int = 0
    processing_time_sec: float


class TranscriptionResult(_CamelModel):
    """Result of a transcription operation."""

    text: str = ""
    thoughts: str | None = None
    model: str
    file_uri: str | None = None
    usage: UsageStats | None = None
