"""Sort lines in natural model order."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from ..compare import sort_models
from ..exceptions import UserError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..cli_types import SortArgs

logger = logging.getLogger(__name__)


def read_lines(lines: Iterable[str]) -> list[str]:
    """Strip line endings and drop blank lines."""
    return [line.rstrip("\r\n") for line in lines if line.strip()]


def unique_lines(lines: Iterable[str]) -> list[str]:
    """Drop repeated lines, keeping the first occurrence."""
    return list(dict.fromkeys(lines))


def cmd_sort(args: SortArgs) -> None:
    """Sort lines from a file or stdin and print them, one per line."""
    source = args.file or "stdin"
    try:
        if args.file:
            path = Path(args.file)
            if not path.is_file():
                raise UserError(f"File not found: {path}", rc=1)
            with path.open(encoding="utf-8") as f:
                lines = read_lines(f)
        else:
            lines = read_lines(sys.stdin)
    except UnicodeDecodeError as e:
        raise UserError(f"Cannot decode {source}: {e}", rc=1)

    if args.unique:
        lines = unique_lines(lines)
    logger.debug("Sorting %d line(s)", len(lines))

    for line in sort_models(lines, reverse=args.reverse):
        print(line)
