"""Shared pytest fixtures for cupsmodels tests."""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
from cupsmodels.cli_types import ModelsArgs, PrintersArgs


@pytest.fixture
def tmp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture(autouse=True)
def isolated_cups_env(tmp_path: Path, monkeypatch) -> Path:
    """Keep the user's CUPS environment and client.conf out of every test."""
    monkeypatch.setenv("HOME", str(tmp_path))
    for name in ("CUPS_SERVER", "CUPS_USER", "CUPS_ENCRYPTION"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


@pytest.fixture
def sample_lpstat_devices() -> str:
    """Sample `lpstat -v` output."""
    return """device for Office-10: ipp://10.0.0.10/ipp/print
device for Office-2: socket://10.0.0.2:9100
device for LaserJet-100: usb://HP/LaserJet%20100
device for Office-1: dnssd://Office%201._ipp._tcp.local/
"""


@pytest.fixture
def sample_lpinfo_models() -> str:
    """Sample `lpinfo -m` output."""
    return """drv:///sample.drv/laserjet.ppd HP LaserJet Series PCL 4/5
gutenprint.5.3://hp-lj_2200/expert HP LaserJet 2200 - CUPS+Gutenprint v5.3.4
gutenprint.5.3://hp-lj_100/expert HP LaserJet 100 - CUPS+Gutenprint v5.3.4
everywhere IPP Everywhere
drv:///sample.drv/epson9.ppd Epson 9-Pin Series
drv:///sample.drv/epson24.ppd Epson 24-Pin Series
"""


@pytest.fixture
def mock_args_printers() -> PrintersArgs:
    """Create Args object for printers command."""
    return PrintersArgs(
        server=None,
        user=None,
        encryption=None,
        timeout=30,
        json=False,
    )


@pytest.fixture
def mock_args_models() -> ModelsArgs:
    """Create Args object for models command."""
    return ModelsArgs(
        server=None,
        user=None,
        encryption=None,
        timeout=30,
        json=False,
    )


@pytest.fixture(autouse=True)
def reset_package_logger() -> Generator[None, None, None]:
    """Undo setup_logging() between tests (CliRunner swaps sys.stderr)."""
    logger = logging.getLogger("cupsmodels")
    level, handlers = logger.level, list(logger.handlers)
    yield
    logger.setLevel(level)
    logger.handlers[:] = handlers
