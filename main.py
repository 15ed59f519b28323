import csv
import sys
import os
import curses

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")
from config_paths import ConfigError, load_config
from orchestrator import Orchestrator
from table_store import TableStore

__version__ = "0.1.0"

USAGE = (
    "csvdesk - terminal editor for a directory of CSV tables\n\n"
    "Usage:\n  csvdesk [-c CONFIG]\n  csvdesk -v\n  csvdesk -h\n"
)


def _config_path_arg(args):
    if "-c" not in args:
        return None
    idx = args.index("-c")
    if idx + 1 >= len(args):
        raise ConfigError("-c requires a path")
    return args[idx + 1]


def build_store(cfg):
    return TableStore.load(
        cfg["MASTER_DIRECTORY"],
        cfg["ARCHIVE_DIRECTORY"],
        extension=cfg["EXTENSION"],
        sample_limit=cfg["INFER_SAMPLE_LIMIT"],
    )


def main():
    args = sys.argv[1:]

    if "-v" in args or "-V" in args:
        print(__version__)
        return

    if "-h" in args:
        print(USAGE)
        return

    try:
        cfg = load_config(_config_path_arg(args))
    except ConfigError as e:
        print(f"Config error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        store = build_store(cfg)
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        print(f"Load failed: {e}", file=sys.stderr)
        sys.exit(1)

    def curses_main(stdscr):
        Orchestrator(stdscr, store, sample_limit=cfg["INFER_SAMPLE_LIMIT"]).run()

    curses.wrapper(curses_main)


if __name__ == "__main__":
    main()
