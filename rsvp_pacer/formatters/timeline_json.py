"""Timeline JSON formatter — the full planned run as structured data.

WHY: Other tools (video captioning, web players, analysis notebooks) want
the exact schedule: which word appears when, for how long, at what speed,
and which glyph to emphasise.

HOW: Serialises the Timeline's config and words into a dict, validates it
against the bundled timeline_schema.json, and dumps it as indented JSON.

RULES:
- One output file with suffix ``-timeline.json``
- Times are milliseconds rounded to 3 decimals, WPM to 2
- Output is schema-validated before it is returned
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional

import jsonschema

from rsvp_pacer.core.models import Timeline
from rsvp_pacer.formatters.base import BaseFormatter, FormatterOutput

_SCHEMA_PATH = Path(__file__).resolve().parent.parent / "timeline_schema.json"

_CACHED_SCHEMA: Optional[dict] = None


def _get_schema() -> dict:
    """Load and cache the timeline JSON schema."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(_SCHEMA_PATH) as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def timeline_to_dict(timeline: Timeline) -> dict[str, Any]:
    """Plain-dict form of *timeline*, shared with the HTTP API."""
    config = timeline.config
    return {
        "config": {
            "start_wpm": config.start_wpm,
            "target_wpm": config.target_wpm,
            "acceleration_ms": config.acceleration_ms,
        },
        "total_ms": round(timeline.total_ms, 3),
        "word_count": len(timeline.words),
        "words": [
            {
                "index": w.index,
                "text": w.text,
                "fixation_index": w.fixation_index,
                "start_ms": round(w.start_ms, 3),
                "duration_ms": round(w.duration_ms, 3),
                "wpm": round(w.wpm, 2),
            }
            for w in timeline.words
        ],
    }


class TimelineJSONFormatter(BaseFormatter):
    """Formatter producing a schema-validated JSON timeline."""

    @property
    def name(self) -> str:
        return "Timeline JSON"

    def format(self, timeline: Timeline) -> List[FormatterOutput]:
        """Serialise *timeline* to JSON.

        Raises:
            jsonschema.ValidationError: If the generated JSON does not
                conform to timeline_schema.json.
        """
        data = timeline_to_dict(timeline)
        jsonschema.validate(instance=data, schema=_get_schema())
        return [FormatterOutput(
            suffix="-timeline.json",
            content=json.dumps(data, indent=2, ensure_ascii=False),
            media_type="application/json",
        )]
