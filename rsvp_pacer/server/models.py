"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation.

HOW: One request model for timeline planning, response models mirroring
the Timeline dataclasses, plus the shared error/health/format models.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Speed fields are validated for basic shape here (positive ints, HTTP 422); the
  cross-field rules (start < target) stay in RunConfig.validate so the
  engine remains the single source of truth
- Defaults come from config.default_run_config()
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, Field

from rsvp_pacer.config import default_run_config
from rsvp_pacer.core.models import RunConfig

_DEFAULTS = default_run_config()


class OutputFormat(str, Enum):
    """Available export format identifiers.

    RULES:
    - Values match keys in rsvp_pacer.formatters.FORMATTERS exactly
    """

    timeline_json = "timeline_json"
    srt = "srt"
    plain_text = "plain_text"


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class TimelineRequest(BaseModel):
    """Text and speed settings for one planned run."""

    text: str = Field(description="Raw text to pace, any length.")
    start_wpm: int = Field(
        default=_DEFAULTS.start_wpm,
        gt=0,
        description="Starting speed in words per minute.",
    )
    target_wpm: int = Field(
        default=_DEFAULTS.target_wpm,
        gt=0,
        description="Target speed in words per minute.",
    )
    acceleration_ms: int = Field(
        default=_DEFAULTS.acceleration_ms,
        ge=0,
        description="Milliseconds to ramp from start to target; 0 disables the ramp.",
    )

    def to_run_config(self) -> RunConfig:
        return RunConfig(
            start_wpm=self.start_wpm,
            target_wpm=self.target_wpm,
            acceleration_ms=self.acceleration_ms,
        )

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "text": "One. Two, three!",
                "start_wpm": 100,
                "target_wpm": 300,
                "acceleration_ms": 10000,
            }
        ]
    }}


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class RunConfigModel(BaseModel):
    start_wpm: int = Field(description="Starting speed in words per minute.")
    target_wpm: int = Field(description="Target speed in words per minute.")
    acceleration_ms: int = Field(description="Ramp length in milliseconds.")


class TimedWordModel(BaseModel):
    """One word of the planned run."""

    index: int = Field(description="0-based position in the text.")
    text: str = Field(description="Token text, punctuation included.")
    fixation_index: int = Field(description="Index of the character to emphasise.")
    start_ms: float = Field(description="When the word appears, from run start.")
    duration_ms: float = Field(description="How long the word stays on screen.")
    wpm: float = Field(description="Speed the word was paced at.")


class TimelineResponse(BaseModel):
    """The planned schedule of a whole run."""

    config: RunConfigModel = Field(description="Configuration the plan was made with.")
    total_ms: float = Field(description="Total run length in milliseconds.")
    word_count: int = Field(description="Number of words displayed.")
    words: List[TimedWordModel] = Field(description="Words in display order.")


class FormatInfo(BaseModel):
    """Description of an available export format."""

    key: str = Field(description="Format identifier used in URLs and CLI flags.")
    name: str = Field(description="Human-readable format name.")
    suffix: str = Field(description="File suffix produced (e.g. '-timeline.json').")


class ErrorResponse(BaseModel):
    """Standard error response body.

    RULES:
    - detail is always a human-readable error message
    """

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
