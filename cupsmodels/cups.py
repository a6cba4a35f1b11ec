"""Read-only access to a CUPS scheduler through the CUPS command-line tools."""

from __future__ import annotations

import logging
import os
import re
import subprocess
import time
from dataclasses import dataclass

from .compare import sort_models
from .constants import DEFAULT_TOOL_TIMEOUT_S, LPINFO, LPSTAT, TOOL_TIMEOUT_EXIT_CODE
from .exceptions import CupsCommandError, CupsModelsError
from .settings import ClientSettings

logger = logging.getLogger(__name__)

_DEVICE_RE = re.compile(r"^device for (?P<name>[^:\s]+):\s*(?P<uri>\S.*)$")
_DEFAULT_RE = re.compile(r"^system default destination:\s*(?P<name>\S+)")


@dataclass(frozen=True)
class Printer:
    """A print queue and the device it sends jobs to."""

    name: str
    device_uri: str


@dataclass(frozen=True)
class PPD:
    """A driver available on the server, as listed by ``lpinfo -m``."""

    name: str
    make_and_model: str

    @property
    def make(self) -> str:
        """Manufacturer: the first word of make-and-model."""
        return self.make_and_model.split(None, 1)[0] if self.make_and_model else ""


def run_tool(
    argv: list[str], *, timeout_s: int = DEFAULT_TOOL_TIMEOUT_S
) -> tuple[int, str, str]:
    """
    Executes a CUPS command-line tool with a C locale.

    Returns (returncode, stdout, stderr). Does NOT raise on non-zero rc.
    """
    logger.debug("CUPS command: %s", " ".join(argv))
    env = dict(os.environ, LC_ALL="C")

    start_time = time.time()
    try:
        p = subprocess.run(
            argv,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            timeout=timeout_s,
            env=env,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        elapsed = time.time() - start_time
        logger.debug("%s timeout after %.2fs", argv[0], elapsed)
        return (
            TOOL_TIMEOUT_EXIT_CODE,
            e.stdout.decode("utf-8", "replace") if e.stdout else "",
            e.stderr.decode("utf-8", "replace") if e.stderr else f"{argv[0]} timeout",
        )
    except FileNotFoundError:
        raise CupsModelsError(
            f"{argv[0]} not found on PATH. Install the CUPS client tools (cups-client)."
        )

    elapsed = time.time() - start_time
    logger.debug("%s completed in %.2fs (rc=%d)", argv[0], elapsed, p.returncode)
    return (
        p.returncode,
        p.stdout.decode("utf-8", "replace"),
        p.stderr.decode("utf-8", "replace"),
    )


def parse_lpstat_devices(output: str) -> list[Printer]:
    """Parse ``lpstat -v`` output into printers, in output order."""
    printers = []
    for line in output.splitlines():
        match = _DEVICE_RE.match(line.strip())
        if not match:
            if line.strip():
                logger.debug("Skipping unrecognised lpstat line: %r", line)
            continue
        printers.append(Printer(name=match.group("name"), device_uri=match.group("uri").strip()))
    return printers


def parse_lpstat_default(output: str) -> str | None:
    """Parse ``lpstat -d`` output; None when there is no default destination."""
    for line in output.splitlines():
        match = _DEFAULT_RE.match(line.strip())
        if match:
            return match.group("name")
    return None


def parse_lpinfo_models(output: str) -> list[PPD]:
    """Parse ``lpinfo -m`` output into PPDs, in output order."""
    ppds = []
    for line in output.splitlines():
        parts = line.strip().split(None, 1)
        if len(parts) != 2:
            if line.strip():
                logger.debug("Skipping unrecognised lpinfo line: %r", line)
            continue
        ppds.append(PPD(name=parts[0], make_and_model=parts[1].strip()))
    return ppds


class Connection:
    """A scheduler, reached with the tools and the settings it was built with."""

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        timeout_s: int = DEFAULT_TOOL_TIMEOUT_S,
    ):
        self.settings = settings or ClientSettings()
        self.timeout_s = timeout_s

    def __repr__(self) -> str:
        return f"Connection(server={self.settings.server or 'localhost'!r})"

    def _run(self, tool: str, *args: str) -> str:
        argv = [tool, *self.settings.tool_options(), *args]
        rc, out, err = run_tool(argv, timeout_s=self.timeout_s)
        if rc != 0:
            raise CupsCommandError(argv, rc, (out or "") + (err or ""))
        return out

    def get_printers(self) -> list[Printer]:
        """Return the server's printers sorted by name in model order."""
        printers = parse_lpstat_devices(self._run(LPSTAT, "-v"))
        return sort_models(printers, key=lambda p: p.name)

    def get_default(self) -> str | None:
        """Return the name of the default printer, if one is set."""
        return parse_lpstat_default(self._run(LPSTAT, "-d"))

    def get_ppds(self, make_and_model: str | None = None) -> list[PPD]:
        """Return available drivers sorted by make-and-model in model order.

        Args:
            make_and_model: Only drivers matching this make-and-model string,
                as filtered by the scheduler

        Returns:
            PPDs in natural order
        """
        args = ["-m"]
        if make_and_model:
            args = ["--make-and-model", make_and_model, *args]
        ppds = parse_lpinfo_models(self._run(LPINFO, *args))
        return sort_models(ppds, key=lambda p: p.make_and_model)

    def get_makes(self) -> list[str]:
        """Return the distinct manufacturers of the available drivers."""
        makes = {ppd.make for ppd in self.get_ppds() if ppd.make}
        return sort_models(makes)
