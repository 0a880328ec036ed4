"""
Error page resolution rules.

Each derivation is total: a missing or malformed input is logged and
replaced by a default, so a file path can always be built. Nothing here
raises to the caller.
"""

import logging
import re
from typing import Mapping

from default_backend.domain.pages.errors import InvalidMediaTypeError
from default_backend.domain.pages.ports import ExtensionLookupPort

logger = logging.getLogger(__name__)

FORMAT_HEADER = "X-Format"
CODE_HEADER = "X-Code"

DEFAULT_FORMAT = "text/html"
DEFAULT_EXTENSION = "html"
DEFAULT_STATUS_CODE = 404
DEFAULT_BASE_PATH = "./errors"

_STATUS_CODE_PATTERN = re.compile(r"(?P<sign>[+-]?)0*(?P<digits>[0-9]+)")
_MIN_STATUS_CODE = -(2**63)
_MAX_STATUS_CODE = 2**63 - 1
_MAX_STATUS_CODE_DIGITS = len(str(_MAX_STATUS_CODE))


def resolve_format(headers: Mapping[str, str]) -> str:
    """Return the requested MIME type, ``text/html`` when absent."""
    media_type = headers.get(FORMAT_HEADER, "")
    if not media_type:
        media_type = DEFAULT_FORMAT
        logger.info("Using default format %s", media_type)
    return media_type


def resolve_extension(media_type: str, lookup: ExtensionLookupPort) -> str:
    """Return the dot-prefixed file extension for a MIME type.

    The first registered extension wins. A lookup error or an unknown
    type falls back to ``.html``.
    """
    extension = DEFAULT_EXTENSION
    try:
        candidates = lookup.extensions_for(media_type)
    except InvalidMediaTypeError as exc:
        logger.warning("error getting extension using %s: %s", media_type, exc.message)
    else:
        if candidates:
            extension = candidates[0]
        else:
            logger.warning("no media type extension using %s", media_type)

    if not extension.startswith("."):
        extension = "." + extension
    return extension


def resolve_status_code(headers: Mapping[str, str]) -> int:
    """Return the status code from ``X-Code``, 404 when missing or malformed.

    A value must be a base-10 integer that fits in 64 bits. No HTTP range
    check is applied; the HTTP layer decides what it accepts.
    """
    raw = headers.get(CODE_HEADER, "")
    code = None
    match = _STATUS_CODE_PATTERN.fullmatch(raw)
    # digit count is checked first, int() refuses very long strings
    if match and len(match.group("digits")) <= _MAX_STATUS_CODE_DIGITS:
        code = int(match.group("sign") + match.group("digits"))
    if code is None or not _MIN_STATUS_CODE <= code <= _MAX_STATUS_CODE:
        logger.warning(
            "error getting status code from %r, using %d", raw, DEFAULT_STATUS_CODE
        )
        return DEFAULT_STATUS_CODE
    return code


def resolve_base_path(configured: str) -> str:
    """Return the error documents directory, ``./errors`` when unset."""
    return configured or DEFAULT_BASE_PATH


def resolve_file_path(base: str, code: int, extension: str) -> str:
    """Build ``{base}/{code}{extension}``. No existence check."""
    return f"{base}/{code}{extension}"
