"""
cupsmodels - natural-order printer and model names for CUPS.

Design goals:
- Model names sort the way people read them: "Model-2" before "Model-10".
- The comparator is a plain two-argument function usable with any sort.
- Server access goes through the standard CUPS tools, configured per
  connection rather than through process-wide setters.
"""

from __future__ import annotations

from .cli import main
from .compare import model_compare, model_sort_key, sort_models
from .cups import PPD, Connection, Printer
from .exceptions import CupsCommandError, CupsModelsError, UserError
from .settings import ClientSettings, load_settings

__all__ = [
    "PPD",
    "ClientSettings",
    "Connection",
    "CupsCommandError",
    "CupsModelsError",
    "Printer",
    "UserError",
    "load_settings",
    "main",
    "model_compare",
    "model_sort_key",
    "sort_models",
]
