import logging
import os
import sys
import curses

import config_paths
from file_type_handler import FileTypeHandler, LoadError
from log_config import configure_logging

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")
from orchestrator import Orchestrator

__version__ = "0.1.0"

log = logging.getLogger(__name__)

USAGE = "Usage: fastdata [-b format] <path_to_file>"
HELP = (
    "fastdata - terminal table viewer\n\n"
    f"{USAGE}\n\n"
    "Keys:\n"
    "  arrows/hjkl  move            [ ]   sort ascending / descending\n"
    "  _            column width    g_    all column widths\n"
    "  space        aggregations    g-    clear aggregations\n"
    "  enter        row detail      q     close view\n"
)


class UsageError(Exception):
    pass


def parse_args(args):
    """Return ``(path, fmt)`` from argv (without the program name)."""
    path = None
    fmt = None
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "-b":
            if i + 1 >= len(args):
                raise UsageError("'-b' option requires format specification")
            fmt = args[i + 1]
            i += 1
        elif path is None:
            path = arg
        else:
            raise UsageError("Multiple files specified. Only one file expected.")
        i += 1

    if path is None:
        raise UsageError(USAGE)
    return path, fmt


def _fail(msg, code):
    print(f"Error: {msg}" if msg != USAGE else msg, file=sys.stderr)
    sys.exit(code)


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)

    if "-v" in args or "-V" in args:
        print(__version__)
        return

    if "-h" in args or "--help" in args:
        print(HELP)
        return

    try:
        path, fmt = parse_args(args)
    except UsageError as exc:
        _fail(str(exc), 2)

    cfg = config_paths.load_config()

    try:
        handler = FileTypeHandler(path, fmt)
        table = handler.load()
    except LoadError as exc:
        _fail(str(exc), 1)

    try:
        configure_logging(cfg)
    except OSError as exc:
        _fail(f"Cannot open log file: {exc}", 1)

    def curses_main(stdscr):
        Orchestrator(stdscr, table, file_path=path, config=cfg).run()

    try:
        curses.wrapper(curses_main)
    except Exception:
        log.exception("session terminated by an error")
        raise


if __name__ == "__main__":
    main()
