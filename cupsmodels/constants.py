"""cupsmodels constants."""

from __future__ import annotations

# HTTP encryption policy (libcups http_encryption_t)
HTTP_ENCRYPT_IF_REQUESTED = 0
HTTP_ENCRYPT_NEVER = 1
HTTP_ENCRYPT_REQUIRED = 2
HTTP_ENCRYPT_ALWAYS = 3

ENCRYPTION_NAMES = {
    "ifrequested": HTTP_ENCRYPT_IF_REQUESTED,
    "never": HTTP_ENCRYPT_NEVER,
    "required": HTTP_ENCRYPT_REQUIRED,
    "always": HTTP_ENCRYPT_ALWAYS,
}

# Client configuration, in the same places libcups looks
ENV_SERVER = "CUPS_SERVER"
ENV_USER = "CUPS_USER"
ENV_ENCRYPTION = "CUPS_ENCRYPTION"
CLIENT_CONF_DIR_NAME = ".cups"
CLIENT_CONF_FILE_NAME = "client.conf"

# CUPS command-line tools
LPSTAT = "lpstat"
LPINFO = "lpinfo"
DEFAULT_TOOL_TIMEOUT_S = 30
TOOL_TIMEOUT_EXIT_CODE = 124
