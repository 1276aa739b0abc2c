"""Command line entry point: asq-viewer.

Modes:
    asq-viewer LOCATIONS_FILE     flat `path:line:column` list
    producer | asq-viewer --display   annotated stream on stdin
    asq-viewer                    empty list

`--print` renders to stdout with rich instead of starting the TUI.
"""

from __future__ import annotations

import argparse
import io
import logging
import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from asqview import __version__
from asqview.application.renderers.console import ConsoleConfig, ConsoleRenderer
from asqview.application.services.loader import load_annotated_stream, load_location_file
from asqview.application.session import ViewerSession
from asqview.domain.model.configuration import DEFAULT_MARKER, DEFAULT_REF, ViewerConfig
from asqview.infrastructure.content import GitContentSource, WorkingTreeContentSource

if TYPE_CHECKING:
    from collections.abc import Sequence

    from asqview.application.renderers.protocol import RendererProtocol
    from asqview.domain.model.location import Location

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for asq-viewer."""
    parser = argparse.ArgumentParser(
        prog="asq-viewer",
        description="Show match locations side by side: committed copy and working copy.",
    )
    parser.add_argument(
        "locations_file",
        nargs="?",
        type=Path,
        help="File with one path:line:column per line",
    )
    parser.add_argument(
        "--display",
        action="store_true",
        help="Read annotated matches from standard input",
    )
    parser.add_argument(
        "--marker",
        default=DEFAULT_MARKER,
        help=f"Prefix of match lines in --display input (default: {DEFAULT_MARKER!r})",
    )
    parser.add_argument("--ref", default=DEFAULT_REF, help="Git ref for the committed pane (default: HEAD)")
    parser.add_argument("--git", default="git", help="Git executable")
    parser.add_argument("--encoding", default="utf-8", help="Encoding of location files and sources")
    parser.add_argument(
        "--print",
        dest="print_only",
        action="store_true",
        help="Print the list (and --select entry) instead of starting the viewer",
    )
    parser.add_argument(
        "--select",
        type=int,
        metavar="N",
        help="Index of the location to show with --print",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Plain text output for --print",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", type=Path, help="Write log to file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(level: str, log_file: Path | None, *, terminal_free: bool) -> None:
    """Configure root logging once.

    Args:
        level: Level name
        log_file: Destination file. None = stderr when terminal_free, else discarded.
        terminal_free: False while the TUI owns the terminal
    """
    if log_file is not None:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    elif terminal_free:
        handler = logging.StreamHandler(sys.stderr)
    else:
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(level=level, handlers=[handler], force=True)


def load_locations(args: argparse.Namespace, config: ViewerConfig, stdin: TextIO) -> tuple[Location, ...]:
    """Load locations for the selected mode."""
    if args.display:
        return load_annotated_stream(stdin, marker=config.marker)
    if args.locations_file is not None:
        return load_location_file(args.locations_file, encoding=config.encoding)
    return ()


def build_session(config: ViewerConfig, locations: Sequence[Location], cwd: Path | None = None) -> ViewerSession:
    """Session wired to git and working tree sources."""
    return ViewerSession(
        committed_source=GitContentSource(config.ref, git=config.git, cwd=cwd, encoding=config.encoding),
        working_source=WorkingTreeContentSource(cwd, encoding=config.encoding),
        locations=locations,
    )


def print_session(session: ViewerSession, select: int | None, output: TextIO, *, color: bool = True) -> int:
    """Render list and optional selection to output.

    Returns:
        Exit code: 0, or 1 if select is out of range.
    """
    renderer: RendererProtocol = ConsoleRenderer(ConsoleConfig(color=color))
    output.write(renderer.render_list(session.locations))
    if select is None:
        return 0

    selection = session.select(select)
    if selection is None:
        output.write(f"No location at index {select} ({len(session)} loaded)\n")
        return 1
    output.write(renderer.render_selection(selection))
    return 0


def run(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Run asq-viewer.

    Args:
        argv: Arguments without program name. None = sys.argv[1:].
        stdin: Annotated input for --display. None = sys.stdin.
        stdout: Output for --print. None = sys.stdout.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.display and args.locations_file is not None:
        parser.error("--display reads standard input; do not pass a locations file")
    if args.select is not None and not args.print_only:
        parser.error("--select requires --print")

    try:
        config = ViewerConfig(marker=args.marker, ref=args.ref, git=args.git, encoding=args.encoding)
    except ValueError as e:
        parser.error(str(e))

    configure_logging(args.log_level, args.log_file, terminal_free=args.print_only)

    if stdin is not None:
        locations = load_locations(args, config, stdin)
    else:
        locations = _load_from_process_stdin(args, config)
    session = build_session(config, locations)
    output = stdout if stdout is not None else sys.stdout

    print_only = args.print_only
    if not print_only and args.display and not _reattach_terminal():
        logger.warning("no terminal available after reading stdin, printing instead")
        print_only = True

    if print_only:
        return print_session(session, args.select, output, color=not args.no_color)

    # Imported late: textual is only needed for the interactive viewer
    from asqview.presentation.tui.app import AsqViewerApp

    AsqViewerApp(session, config).run()
    return 0


def main() -> None:
    """Console script entry point."""
    sys.exit(run())


def _reattach_terminal() -> bool:
    """Point fd 0 at the controlling terminal after stdin was consumed.

    The TUI reads keys from stdin, which was the producer's pipe.
    """
    if sys.stdin is not None and sys.stdin.isatty():
        return True
    try:
        fd = os.open("/dev/tty", os.O_RDONLY)
    except OSError as e:
        logger.debug("cannot open /dev/tty: %s", e)
        return False
    os.dup2(fd, 0)
    os.close(fd)
    previous = sys.stdin
    sys.stdin = open(0, closefd=False)  # noqa: SIM115
    if previous is not None:
        previous.close()
    return True


def _load_from_process_stdin(args: argparse.Namespace, config: ViewerConfig) -> tuple[Location, ...]:
    """load_locations() over sys.stdin decoded with the configured encoding.

    Undecodable bytes are replaced, so producer output in another encoding
    still yields its matches.
    """
    if not args.display or sys.stdin is None:
        return load_locations(args, config, sys.stdin)

    reader = io.TextIOWrapper(sys.stdin.buffer, encoding=config.encoding, errors="replace")
    try:
        return load_locations(args, config, reader)
    finally:
        # Leave sys.stdin.buffer open; the terminal is re-attached afterwards
        reader.detach()
