"""Type definitions for CLI command arguments."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CompareArgs:
    """Arguments for compare command."""

    a: str
    b: str


@dataclass
class SortArgs:
    """Arguments for sort command."""

    file: str | None
    reverse: bool
    unique: bool


@dataclass
class ServerArgs:
    """Options shared by commands that talk to a CUPS server."""

    server: str | None
    user: str | None
    encryption: str | None
    timeout: int
    json: bool


@dataclass
class PrintersArgs(ServerArgs):
    """Arguments for printers command."""


@dataclass
class ModelsArgs(ServerArgs):
    """Arguments for models command."""

    make: str | None = None
    makes: bool = False
