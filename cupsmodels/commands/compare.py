"""Compare two model names."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..compare import model_compare

if TYPE_CHECKING:
    from ..cli_types import CompareArgs


def cmd_compare(args: CompareArgs) -> None:
    """Print -1, 0 or 1 for the natural order of two model names."""
    print(model_compare(args.a, args.b))
