"""Timeline formatter registry — pluggable export hub.

WHY: The CLI and the HTTP API need a single lookup to find the right
formatter by name. A central dict makes it trivial to add new formats:
create the formatter class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["srt"]()``.

RULES:
- Keys are snake_case identifiers (used in CLI flags and URL paths)
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rsvp_pacer.formatters.plain_text import PlainTextFormatter
from rsvp_pacer.formatters.srt import SRTFormatter
from rsvp_pacer.formatters.timeline_json import TimelineJSONFormatter

if TYPE_CHECKING:
    from rsvp_pacer.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "timeline_json": TimelineJSONFormatter,
    "srt": SRTFormatter,
    "plain_text": PlainTextFormatter,
}
