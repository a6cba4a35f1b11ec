"""List printers on a CUPS server."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from ..cups import Connection
from ..settings import load_settings

if TYPE_CHECKING:
    from ..cli_types import PrintersArgs
    from ..cups import Printer


def format_printer_line(printer: Printer, *, is_default: bool, width: int) -> str:
    """Format one printer row; the default printer is marked with '*'."""
    marker = "*" if is_default else " "
    return f"{marker} {printer.name:<{width}}  {printer.device_uri}"


def cmd_printers(args: PrintersArgs) -> None:
    """Print the server's printers in natural order."""
    settings = load_settings(args.server, args.user, args.encryption)
    conn = Connection(settings, timeout_s=args.timeout)

    printers = conn.get_printers()
    default = conn.get_default()

    if args.json:
        records = [
            {"name": p.name, "device_uri": p.device_uri, "default": p.name == default}
            for p in printers
        ]
        print(json.dumps(records, indent=2))
        return

    if not printers:
        print("No printers.")
        return

    width = max(len(p.name) for p in printers)
    for printer in printers:
        print(format_printer_line(printer, is_default=printer.name == default, width=width))
