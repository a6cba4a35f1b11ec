"""List printer models (drivers) available on a CUPS server."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from ..cups import Connection
from ..settings import load_settings

if TYPE_CHECKING:
    from ..cli_types import ModelsArgs


def cmd_models(args: ModelsArgs) -> None:
    """Print available models, or manufacturers, in natural order."""
    settings = load_settings(args.server, args.user, args.encryption)
    conn = Connection(settings, timeout_s=args.timeout)

    if args.makes:
        makes = conn.get_makes()
        if args.json:
            print(json.dumps(makes, indent=2))
        else:
            for make in makes:
                print(make)
        return

    ppds = conn.get_ppds(args.make)
    if args.json:
        records = [{"name": p.name, "make_and_model": p.make_and_model} for p in ppds]
        print(json.dumps(records, indent=2))
        return

    for ppd in ppds:
        print(f"{ppd.make_and_model}\t{ppd.name}")
