"""Command-line interface for the RSVP Pacer.

WHY: Users need a simple way to speed-read a text file from the terminal,
and to export a planned run (JSON, SRT, pacing table) for other tools.
The CLI wires together input loading, config validation, the playback
controller and the formatter registry behind a single command.

HOW: Uses argparse to accept the text source (file path, ``-`` for stdin,
or --text), speed options and export options. Without --export, plays
the text live on an asyncio loop through the TerminalRenderer. With
--export, plans the timeline and saves one file per formatter output.
Status messages go to stderr.

RULES:
- Text source: positional file, ``-`` for stdin, or --text (exactly one)
- File extension must be in SUPPORTED_TEXT_EXTENSIONS
- --acceleration is in seconds; RunConfig stores milliseconds
- --export: comma-separated formatter keys, or "all"
- Output naming: {stem}{suffix}, numeric suffix for conflicts (-timeline-2.json)
- EmptyInput / InvalidConfig / bad arguments → message on stderr, exit 1
- Ctrl-C during playback stops the run and exits 130
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from rsvp_pacer.config import SUPPORTED_TEXT_EXTENSIONS, default_run_config
from rsvp_pacer.core.controller import PlaybackController
from rsvp_pacer.core.errors import PacerError
from rsvp_pacer.core.models import RunConfig
from rsvp_pacer.core.scheduler import AsyncioScheduler
from rsvp_pacer.core.timeline import plan_timeline
from rsvp_pacer.formatters import FORMATTERS
from rsvp_pacer.formatters.base import FormatterOutput
from rsvp_pacer.terminal import TerminalRenderer


class CLIError(Exception):
    """Raised for user errors the CLI reports and exits 1 on."""


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout, which carries the
    playback line.
    """
    print(msg, file=sys.stderr, flush=True)


def _read_input(args: argparse.Namespace) -> Tuple[str, str]:
    """Return (text, output stem) for the selected text source.

    RULES:
    - --text and a positional input are mutually exclusive
    - ``-`` reads stdin; stem is "stdin"
    - --text uses stem "text"
    """
    if args.text is not None:
        if args.input_file is not None:
            raise CLIError("Give either a file or --text, not both.")
        return args.text, "text"

    if args.input_file is None:
        raise CLIError("No text given. Pass a file path, '-' for stdin, or --text.")

    if args.input_file == "-":
        return sys.stdin.read(), "stdin"

    path = Path(args.input_file)
    if not path.is_file():
        raise CLIError("File not found: {}".format(path))
    ext = path.suffix.lower()
    if ext not in SUPPORTED_TEXT_EXTENSIONS:
        raise CLIError("Unsupported file type '{}'. Supported formats: {}".format(
            ext, ", ".join(sorted(SUPPORTED_TEXT_EXTENSIONS)),
        ))
    return path.read_text(encoding="utf-8"), path.stem


def _parse_formats(value: str) -> List[str]:
    if value.strip() == "all":
        return list(FORMATTERS.keys())
    keys = [f.strip() for f in value.split(",") if f.strip()]
    for key in keys:
        if key not in FORMATTERS:
            raise CLIError("Unknown format '{}'. Available formats: {}".format(
                key, ", ".join(sorted(FORMATTERS.keys())),
            ))
    if not keys:
        raise CLIError("No export formats given.")
    return keys


def _resolve_output_path(stem: str, suffix: str, output_dir: Path) -> Path:
    """Resolve the output file path, adding a numeric suffix on conflict.

    RULES:
    - First attempt: {stem}{suffix} (e.g. chapter1-timeline.json)
    - Conflict: insert a counter before the extension
      (e.g. chapter1-timeline-2.json), counter starts at 2
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    dot_idx = suffix.rfind(".")
    if dot_idx > 0:
        suffix_name, suffix_ext = suffix[:dot_idx], suffix[dot_idx:]
    else:
        suffix_name, suffix_ext = suffix, ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(output: FormatterOutput, stem: str, output_dir: Path) -> Path:
    path = _resolve_output_path(stem, output.suffix, output_dir)
    path.write_text(output.content, encoding="utf-8")
    return path


def _export(text: str, config: RunConfig, stem: str, format_keys: List[str],
            output_dir: Path) -> List[Path]:
    """Plan the run and save every selected formatter's output."""
    if not output_dir.is_dir():
        raise CLIError("Output directory does not exist: {}".format(output_dir))

    timeline = plan_timeline(text, config)
    _status("Planned {} words, {:.1f} s total".format(
        len(timeline.words), timeline.total_ms / 1000.0,
    ))

    saved: List[Path] = []
    for key in format_keys:
        formatter = FORMATTERS[key]()
        for output in formatter.format(timeline):
            path = _save_output(output, stem, output_dir)
            saved.append(path)
            _status("  Saved: {}".format(path.name))
    return saved


async def play(text: str, config: RunConfig, renderer: TerminalRenderer) -> bool:
    """Play *text* live; returns True if the run completed, False if stopped.

    Cancelling the coroutine stops the controller before propagating.
    """
    loop = asyncio.get_running_loop()
    finished: asyncio.Future = loop.create_future()

    def _settle(completed: bool) -> None:
        if not finished.done():
            finished.set_result(completed)

    controller = PlaybackController(
        AsyncioScheduler(loop),
        on_word=renderer.show_word,
        on_progress=renderer.show_progress,
        on_speed=renderer.show_speed,
        on_complete=lambda: _settle(True),
        on_stop=lambda: _settle(False),
    )
    controller.start(text, config)
    try:
        return await finished
    finally:
        controller.stop()
        renderer.finish()


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without running playback.
    """
    defaults = default_run_config()
    parser = argparse.ArgumentParser(
        prog="rsvp-pacer",
        description="Speed-read text one word at a time (RSVP) with a ramped "
                    "reading speed, or export the planned run.",
    )

    parser.add_argument(
        "input_file",
        nargs="?",
        default=None,
        help="Text file to read, or '-' for stdin.",
    )

    parser.add_argument(
        "--text",
        default=None,
        help="Read this text instead of a file.",
    )

    parser.add_argument(
        "--start-wpm",
        type=int,
        default=defaults.start_wpm,
        help="Starting speed in words per minute (default: %(default)s).",
    )

    parser.add_argument(
        "--target-wpm",
        type=int,
        default=defaults.target_wpm,
        help="Target speed in words per minute (default: %(default)s).",
    )

    parser.add_argument(
        "--acceleration",
        type=float,
        default=defaults.acceleration_ms / 1000.0,
        help="Seconds to ramp from start to target speed; 0 disables the "
             "ramp (default: %(default)s).",
    )

    parser.add_argument(
        "--export",
        default=None,
        help="Comma-separated export formats instead of playing, or 'all'. "
             "Available: {}.".format(", ".join(sorted(FORMATTERS.keys()))),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory for exported files (default: next to the input "
             "file, or the current directory).",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Mark the fixation letter with brackets instead of colour.",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = RunConfig(
        start_wpm=args.start_wpm,
        target_wpm=args.target_wpm,
        acceleration_ms=int(round(args.acceleration * 1000)),
    )

    try:
        text, stem = _read_input(args)
        if args.export:
            format_keys = _parse_formats(args.export)
            if args.output_dir:
                output_dir = Path(args.output_dir).resolve()
            elif args.input_file not in (None, "-"):
                output_dir = Path(args.input_file).resolve().parent
            else:
                output_dir = Path.cwd()
            saved = _export(text, config, stem, format_keys, output_dir)
            _status("Done! Saved {} file(s) to {}".format(len(saved), output_dir))
            return

        renderer = TerminalRenderer(color=False if args.no_color else None)
        completed = asyncio.run(play(text, config, renderer))
        if completed:
            _status("Done.")
    except KeyboardInterrupt:
        _status("Stopped.")
        sys.exit(130)
    except (CLIError, PacerError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
