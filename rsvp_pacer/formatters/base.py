"""Abstract base formatter and output container.

WHY: Every export format consumes the same planned Timeline but produces
different file content. This base class enforces a consistent interface
so the CLI and the HTTP API can work with any formatter generically.

HOW: BaseFormatter is an ABC with two requirements — a ``name`` property
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles a file suffix with its content and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` returns a list so multi-file formats stay possible
- ``suffix`` starts with a hyphen, e.g. ``"-timeline.json"``
- The caller is responsible for prepending the source filename stem
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from rsvp_pacer.core.models import Timeline


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the source stem,
                e.g. ``"-timeline.json"`` → ``"chapter1-timeline.json"``.
        content: The file content.
        media_type: MIME type for the content, e.g. ``"application/json"``.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all timeline formatters.

    To add a new export format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Timeline JSON'."""

    @abstractmethod
    def format(self, timeline: Timeline) -> list[FormatterOutput]:
        """Convert a planned Timeline into one or more output files."""
