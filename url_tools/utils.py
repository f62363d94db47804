"""URL-Tools Utils."""

from __future__ import annotations

from base64 import b64decode
from binascii import Error as BinasciiError
from typing import TYPE_CHECKING, Optional
from urllib.parse import quote

from multidict import CIMultiDict

from .constants import BASE_ENCODING
from .errors import InvalidUrlError

if TYPE_CHECKING:
    from .types import TASGIHeaders


def parse_headers(headers: TASGIHeaders) -> CIMultiDict:
    """Decode the given headers list."""
    return CIMultiDict(
        [(n.decode(BASE_ENCODING), v.decode(BASE_ENCODING)) for n, v in headers],
    )


def split_host(value: str) -> tuple[str, Optional[int]]:
    """Split a ``host[:port]`` value (IPv6 hosts keep their brackets)."""
    host, sep, port = value.rpartition(":")
    if not sep or "]" in port:
        return value, None

    if not port.isdigit():
        raise InvalidUrlError(value, f"invalid port {port!r}")

    return host, int(port)


def parse_basic_auth(value: str) -> tuple[Optional[str], Optional[str]]:
    """Extract the percent-encoded user and password from a Basic authorization header."""
    scheme, _, credentials = value.partition(" ")
    if scheme.lower() != "basic" or not credentials.strip():
        return None, None

    try:
        decoded = b64decode(credentials.strip(), validate=True).decode(BASE_ENCODING)
    except (BinasciiError, ValueError):
        return None, None

    user, sep, password = decoded.partition(":")
    return quote(user, safe=""), quote(password, safe="") if sep else None
