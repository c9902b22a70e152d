"""Package entry point for ``python -m rsvp_pacer``.

WHY: Users run the reader as ``python -m rsvp_pacer book.txt`` for live
terminal playback, or ``python -m rsvp_pacer --serve`` for the HTTP API.

HOW: Checks sys.argv for the ``--serve`` flag. If present, starts the
FastAPI app under uvicorn. Otherwise, delegates to the CLI's main().

RULES:
- ``--serve`` starts the HTTP API
- Without ``--serve``, falls through to the CLI
"""

import sys

if __name__ == "__main__":
    if "--serve" in sys.argv:
        from rsvp_pacer.server.app import run_api
        run_api()
    else:
        from rsvp_pacer.cli import main
        main()
