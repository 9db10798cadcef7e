"""Entry point: python -m advent [list|show N|next N|prev N|index|progress]

- No args / "list": One line per day entry
- "show N":         Full article for day N
- "next N"/"prev N": Neighbouring day
- "index":          Overview page
- "progress":       Days unlocked so far
"""

from __future__ import annotations

import logging
import sys

from advent.config import load_config
from advent.content.errors import ContentError
from advent.content.store import ContentStore
from advent.tools.content_tools import get_content_tools

logger = logging.getLogger(__name__)

_USAGE = """\
Usage: python -m advent [list|show N|next N|prev N|index|progress]
  list      — One line per day (default)
  show N    — Full article for day N
  next N    — The day after N
  prev N    — The day before N
  index     — Overview page
  progress  — Days unlocked so far"""


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _usage() -> None:
    print(_USAGE)
    sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    cmd = args[0] if args else "list"

    config = load_config()
    _setup_logging(config.log_level)

    store = ContentStore.from_config(config)
    tools = get_content_tools(store)

    # command -> (tool name, lookup whose None result means the entry is missing)
    numbered = {
        "show": ("read_day", store.get_day_by_number),
        "next": ("next_day", store.get_next_day),
        "prev": ("previous_day", store.get_previous_day),
    }
    plain = {
        "list": ("list_days", None),
        "index": ("read_index", store.get_index),
        "progress": ("progress", None),
    }

    try:
        if cmd in plain:
            tool, lookup = plain[cmd]
            missing = lookup is not None and lookup() is None
            output = tools[tool]()
        elif cmd in numbered:
            try:
                day = int(args[1])
            except (IndexError, ValueError):
                _usage()
            tool, lookup = numbered[cmd]
            missing = lookup(day) is None
            output = tools[tool](day)
        else:
            _usage()
    except ContentError as exc:
        logger.error("%s", exc)
        sys.exit(1)

    print(output)
    if missing:
        sys.exit(1)


if __name__ == "__main__":
    main()
