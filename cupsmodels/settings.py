"""CUPS client settings: which server to talk to, as whom, and how."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .constants import (
    CLIENT_CONF_DIR_NAME,
    CLIENT_CONF_FILE_NAME,
    ENCRYPTION_NAMES,
    ENV_ENCRYPTION,
    ENV_SERVER,
    ENV_USER,
    HTTP_ENCRYPT_ALWAYS,
    HTTP_ENCRYPT_IF_REQUESTED,
    HTTP_ENCRYPT_REQUIRED,
)
from .exceptions import UserError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClientSettings:
    """Connection settings handed to each Connection.

    ``server`` and ``user`` of None leave the choice to the CUPS tools
    (local scheduler, current login).
    """

    server: str | None = None
    user: str | None = None
    encryption: int = HTTP_ENCRYPT_IF_REQUESTED

    def tool_options(self) -> list[str]:
        """Options understood by both lpstat and lpinfo."""
        opts: list[str] = []
        if self.encryption in (HTTP_ENCRYPT_REQUIRED, HTTP_ENCRYPT_ALWAYS):
            opts.append("-E")
        if self.server:
            opts += ["-h", self.server]
        if self.user:
            opts += ["-U", self.user]
        return opts


def parse_encryption(value: int | str) -> int:
    """Parse an encryption policy given as a number or a CUPS keyword.

    Args:
        value: 0-3, or one of IfRequested, Never, Required, Always

    Returns:
        One of the HTTP_ENCRYPT_* constants

    Raises:
        UserError: If the value is not a known policy
    """
    if isinstance(value, bool):
        raise UserError(f"Invalid encryption policy: {value}")
    if isinstance(value, int):
        if value in ENCRYPTION_NAMES.values():
            return value
        raise UserError(f"Invalid encryption policy: {value}")
    text = value.strip()
    if text.isascii() and text.isdigit():
        return parse_encryption(int(text))
    try:
        return ENCRYPTION_NAMES[text.lower()]
    except KeyError:
        choices = ", ".join(("IfRequested", "Never", "Required", "Always"))
        raise UserError(f"Invalid encryption policy '{value}' (expected one of: {choices})")


def default_client_conf_path() -> Path:
    """Return the per-user client.conf path."""
    return Path.home() / CLIENT_CONF_DIR_NAME / CLIENT_CONF_FILE_NAME


def load_client_conf(path: Path) -> dict[str, str]:
    """Read directives from a CUPS client.conf file.

    Only ServerName, User and Encryption are returned, keyed by their
    lowercased name. A missing file yields an empty dict.
    """
    directives: dict[str, str] = {}
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return directives
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Cannot read %s: %s", path, e)
        return directives

    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.split(None, 1)
        if len(parts) != 2:
            continue
        name, value = parts[0].lower(), parts[1].strip()
        if name in ("servername", "user", "encryption"):
            directives[name] = value
    return directives


def load_settings(
    server: str | None = None,
    user: str | None = None,
    encryption: int | str | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    conf_path: Path | None = None,
) -> ClientSettings:
    """Resolve client settings.

    Each field comes from, in order: the explicit argument, the CUPS_SERVER /
    CUPS_USER / CUPS_ENCRYPTION environment variables, ~/.cups/client.conf,
    then the built-in default.
    """
    env = os.environ if environ is None else environ
    conf = load_client_conf(conf_path if conf_path is not None else default_client_conf_path())

    resolved_server = server or env.get(ENV_SERVER) or conf.get("servername") or None
    resolved_user = user or env.get(ENV_USER) or conf.get("user") or None

    if encryption is None:
        encryption = env.get(ENV_ENCRYPTION) or conf.get("encryption")
    resolved_encryption = (
        HTTP_ENCRYPT_IF_REQUESTED if encryption is None else parse_encryption(encryption)
    )

    settings = ClientSettings(
        server=resolved_server,
        user=resolved_user,
        encryption=resolved_encryption,
    )
    logger.debug("Client settings: %s", settings)
    return settings
