"""cupsmodels command implementations."""

from __future__ import annotations

from .compare import cmd_compare
from .models import cmd_models
from .printers import cmd_printers
from .sort import cmd_sort

__all__ = [
    "cmd_compare",
    "cmd_models",
    "cmd_printers",
    "cmd_sort",
]
