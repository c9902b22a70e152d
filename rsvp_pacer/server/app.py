"""FastAPI application exposing the timeline planner over HTTP.

WHY: Front-ends (web readers, mobile apps, n8n flows) want the same
pacing a terminal run would use without bundling the engine. Planning is
instant and stateless, so a plain request/response API is enough.

HOW: A single FastAPI app with four endpoints. POST /timeline plans a run
and returns it as JSON. POST /timeline/{output_format} runs one formatter
and returns its file as a download. GET /formats and GET /health are
discovery and liveness endpoints.

RULES:
- EmptyInput / InvalidConfig map to HTTP 400 with the engine's message
- Unknown formats are rejected by the OutputFormat enum (HTTP 422)
- Planning never sleeps; there is no server-side playback state
- Planning endpoints are plain functions so FastAPI runs them in its
  threadpool; a long text never blocks /health
- Error responses use the ErrorResponse schema
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response

from rsvp_pacer import __version__
from rsvp_pacer.config import API_HOST, API_PORT
from rsvp_pacer.core.errors import PacerError
from rsvp_pacer.core.models import RunConfig, Timeline
from rsvp_pacer.core.timeline import plan_timeline
from rsvp_pacer.formatters import FORMATTERS
from rsvp_pacer.formatters.timeline_json import timeline_to_dict
from rsvp_pacer.server.models import (
    ErrorResponse,
    FormatInfo,
    HealthResponse,
    OutputFormat,
    TimelineRequest,
    TimelineResponse,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="RSVP Pacer API",
    description=(
        "Plan rapid serial visual presentation runs: post text and reading "
        "speeds, get back every word with its fixation point, display time "
        "and pacing speed, as JSON or as an export file."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _plan(request: TimelineRequest) -> Timeline:
    """Plan a run, turning engine errors into HTTP 400."""
    try:
        return plan_timeline(request.text, request.to_run_config())
    except PacerError as exc:
        logger.info("Rejected timeline request: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc))


# ---------------------------------------------------------------------------
# Endpoints: Timeline
# ---------------------------------------------------------------------------


@app.post(
    "/timeline",
    response_model=TimelineResponse,
    tags=["timeline"],
    summary="Plan a reading run",
    description=(
        "Tokenizes the text and returns the schedule a live run would follow: "
        "each word's fixation index, start time, duration and speed."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "No words in the text, or unusable speeds"},
    },
)
def create_timeline(request: TimelineRequest) -> TimelineResponse:
    timeline = _plan(request)
    return TimelineResponse.model_validate(timeline_to_dict(timeline))


@app.post(
    "/timeline/{output_format}",
    tags=["timeline"],
    summary="Export a planned run",
    description="Plans the run and returns it rendered by one export formatter.",
    responses={
        200: {"description": "The exported file content."},
        400: {"model": ErrorResponse, "description": "No words in the text, or unusable speeds"},
    },
)
def export_timeline(output_format: OutputFormat, request: TimelineRequest) -> Response:
    timeline = _plan(request)
    formatter = FORMATTERS[output_format.value]()
    output = formatter.format(timeline)[0]
    filename = "reading{}".format(output.suffix)
    return Response(
        content=output.content,
        media_type=output.media_type,
        headers={"Content-Disposition": 'attachment; filename="{}"'.format(filename)},
    )


# ---------------------------------------------------------------------------
# Endpoints: Formats
# ---------------------------------------------------------------------------


@app.get(
    "/formats",
    response_model=List[FormatInfo],
    tags=["formats"],
    summary="List available export formats",
)
async def list_formats() -> List[FormatInfo]:
    # An empty plan is enough to learn each formatter's suffix.
    empty = Timeline(config=RunConfig(start_wpm=1, target_wpm=1), words=[])
    result = []
    for key, formatter_cls in sorted(FORMATTERS.items()):
        formatter = formatter_cls()
        outputs = formatter.format(empty)
        result.append(FormatInfo(
            key=key,
            name=formatter.name,
            suffix=outputs[0].suffix if outputs else "",
        ))
    return result


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the rsvp-pacer-api console script."""
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    uvicorn.run(app, host=API_HOST, port=API_PORT)
