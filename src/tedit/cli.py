"""Command-line entry point: ``tedit [path]``."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Optional, Sequence

from tedit import __version__
from tedit.buffer import BufferIOError, TextBuffer, open_buffer
from tedit.config import EditorSettings
from tedit.loop import create_session
from tedit.runtime import telemetry
from tedit.terminal import RawTerminal, Terminal, TerminalError


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tedit", description="Minimal full-screen terminal text editor."
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="File to edit; created on first save if it does not exist",
    )
    parser.add_argument(
        "--log-file",
        default=os.environ.get("TEDIT_LOG_FILE"),
        help="Write diagnostics to this file (default: $TEDIT_LOG_FILE)",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("TEDIT_LOG_LEVEL", "INFO"),
        help="Minimum diagnostic level (default: INFO)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser.parse_args(argv)


def main(
    argv: Optional[Sequence[str]] = None, *, terminal: Optional[Terminal] = None
) -> int:
    args = _parse_args(argv)
    telemetry.configure(log_file=args.log_file, level=args.log_level)

    try:
        buffer = open_buffer(args.path) if args.path else TextBuffer()
    except BufferIOError as exc:
        print(f"tedit: {exc}", file=sys.stderr)
        return 1

    terminal = terminal or RawTerminal()
    session = create_session(buffer, terminal, EditorSettings.from_env())
    try:
        with terminal.session():
            return session.run()
    except TerminalError as exc:
        print(f"tedit: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover - manual entry
    sys.exit(main())
