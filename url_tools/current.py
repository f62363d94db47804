"""Rebuild the requested URL from an ASGI-style scope.

The scope is always passed explicitly, the library never reads a global request
state. The result is a natural ``uri`` argument for
:meth:`UrlComposer.add_arg <url_tools.composer.UrlComposer.add_arg>`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from yarl import URL

from .constants import DEFAULT_PORTS, SECURE_SCHEMES
from .utils import parse_basic_auth, parse_headers, split_host

if TYPE_CHECKING:
    from .types import TASGIScope


def is_https(scope: TASGIScope) -> bool:
    """Check that the scope was requested over a secure connection."""
    return scope.get("scheme", "http") in SECURE_SCHEMES


def current_url(scope: TASGIScope, *, include_auth: bool = False) -> str:
    """Return the full URL of the given scope.

    .. code-block:: python

        url = current_url(request.scope)
        next_page = add_arg({"page": 2}, url)

    :param scope: ASGI scope (``scheme``, ``server``, ``headers``, ``root_path``,
                  ``path``, ``query_string``)
    :param include_auth: Add the user and password from a Basic ``authorization``
                         header
    """
    headers = parse_headers(scope.get("headers") or [])
    scheme = scope.get("scheme") or "http"

    port = None
    host = headers.get("host")
    if host:
        host, port = split_host(host)

    elif scope.get("server"):
        host, port = scope["server"]
        if ":" in host:
            host = f"[{host}]"

    else:
        host = "localhost"

    if port == DEFAULT_PORTS.get(scheme):
        port = None

    user = password = None
    if include_auth:
        user, password = parse_basic_auth(headers.get("authorization", ""))

    path = f"{scope.get('root_path', '')}{scope.get('path', '')}"
    if not path.startswith("/"):
        path = f"/{path}"

    query_string = scope.get("query_string", b"")
    if isinstance(query_string, bytes):
        query_string = query_string.decode(encoding="ascii")

    url = URL.build(
        scheme=scheme,
        user=user,
        password=password,
        host=host,
        port=port,
        path=path,
        query_string=query_string,
        encoded=True,
    )
    return str(url)
