"""Small helpers shared by the commands."""

from __future__ import annotations

import sys
from pathlib import Path

from credhubcli.errors import FileLoadError

VERSION = "dev"

INFO_COLOR = "\033[1;34m%s\033[0m"
NOTICE_COLOR = "\033[1;36m%s\033[0m"
WARNING_COLOR = "\033[1;33m%s\033[0m"
ERROR_COLOR = "\033[1;31m%s\033[0m"
DEBUG_COLOR = "\033[0;36m%s\033[0m"


def read_file_or_string_from_field(field: str) -> str:
    """Return the contents of the file named by field, or field itself.

    When no such file exists, literal ``\\n`` sequences become newlines.
    """
    path = Path(field)
    try:
        path.stat()
    except (OSError, ValueError):
        return field.replace("\\n", "\n")

    try:
        data = path.read_bytes()
    except OSError as exc:
        raise FileLoadError() from exc
    return data.decode("utf-8", errors="replace")


def add_default_scheme_if_necessary(server_url: str) -> str:
    """Prefix https:// unless the URL already carries a scheme."""
    if "://" in server_url:
        return server_url
    return "https://" + server_url


def warning(msg: str) -> None:
    """Print a highlighted warning to standard error."""
    sys.stderr.write(WARNING_COLOR % msg + "\n")


def error(msg: str) -> None:
    """Print a highlighted error to standard error."""
    sys.stderr.write(ERROR_COLOR % msg + "\n")


def token_is_present(token: str) -> bool:
    """Tell whether a usable access token is stored."""
    return token not in ("", "revoked")