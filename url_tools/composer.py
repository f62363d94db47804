"""Compose URLs from a base URL and override parts."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Mapping, Optional, Union

from .constants import ARG_SEPARATOR, DEFAULT_ENCODING
from .errors import InvalidArgumentsError
from .flags import STRIP_FLAGS, MergeFlag, expand_flags
from .logs import logger
from .parts import MERGEABLE_FIELDS, UrlParts, parse_url, unparse_url
from .query import REMOVE, decode, encode, merge, resolve

if TYPE_CHECKING:
    import logging

    from .types import TFlags, TQueryInput, TQueryMap, TURIProvider, TURLInput


class UrlComposer:
    """Build URLs by merging override parts into a base URL.

    :param separator: A query pairs separator
    :type separator: str
    :param encoding: A charset to percent-encode query keys and values with
    :type encoding: str
    :param current_uri: A callable which returns the URI to edit when
                        :meth:`add_arg` / :meth:`del_arg` are called without one
    :type current_uri: Optional[Callable[[], str]]
    :param logger: Custom logger for the composer
    :type logger: logging.Logger

    Example:
        >>> composer = UrlComposer()
        >>> composer.build("http://a.com/dir/file.html", {"path": "other.html"},
        ...                MergeFlag.JOIN_PATH)
        'http://a.com/dir/other.html'
    """

    __slots__ = ("separator", "encoding", "current_uri", "logger")

    def __init__(
        self,
        *,
        separator: str = ARG_SEPARATOR,
        encoding: str = DEFAULT_ENCODING,
        current_uri: Optional[TURIProvider] = None,
        logger: logging.Logger = logger,
    ):
        if not separator:
            raise InvalidArgumentsError("The query separator can't be empty")

        self.separator = separator
        self.encoding = encoding
        self.current_uri = current_uri
        self.logger = logger

    def compose(
        self,
        base: TURLInput = None,
        overrides: TURLInput = None,
        flags: TFlags = MergeFlag.REPLACE,
    ) -> tuple[str, UrlParts]:
        """Merge the overrides into the base URL according to the given flags.

        Scheme and host from the overrides always win. Other parts are replaced with
        ``REPLACE``; without it only the path (``JOIN_PATH``) and the query
        (``JOIN_QUERY``) are joined. ``STRIP_*`` flags are applied last.

        :param base: A base URL: a string, :class:`UrlParts` or a mapping of parts
        :param overrides: Parts to merge (same types as ``base``)
        :param flags: :class:`MergeFlag` bitmask (unknown bits are ignored)
        :return: The composed URL and its parts
        :raises InvalidArgumentsError: if both base and overrides are empty
        :raises InvalidUrlError: if a string can't be parsed
        """
        if _is_empty(base) and _is_empty(overrides):
            raise InvalidArgumentsError("Nothing to compose: base and overrides are empty")

        url = self.to_parts(base)
        parts = self.to_parts(overrides)
        flags = expand_flags(flags)
        self.logger.debug("Compose %r with %r (%r)", url, parts, flags)

        for name in ("scheme", "host"):
            value = getattr(parts, name)
            if value is not None:
                setattr(url, name, value)

        if flags & MergeFlag.REPLACE:
            for name in MERGEABLE_FIELDS:
                value = getattr(parts, name)
                if value is None or (name == "path" and not value):
                    continue
                setattr(url, name, value)

        else:
            if parts.path and flags & MergeFlag.JOIN_PATH:
                url.path = join_path(url.path, parts.path)

            if parts.query is not None and flags & MergeFlag.JOIN_QUERY:
                url.query = self.join_query(url.query, parts.query)

        if url.path and not url.path.startswith("/"):
            url.path = f"/{url.path}"

        for name, flag in STRIP_FLAGS.items():
            if flags & flag:
                setattr(url, name, None)

        result = unparse_url(url)
        self.logger.debug("Composed %r", result)
        return result, url

    def build(
        self,
        base: TURLInput = None,
        overrides: TURLInput = None,
        flags: TFlags = MergeFlag.REPLACE,
    ) -> str:
        """Same as :meth:`compose` but return the URL only."""
        url, _ = self.compose(base, overrides, flags)
        return url

    def to_parts(self, value: TURLInput) -> UrlParts:
        """Convert the given URL (or its parts) into a fresh :class:`UrlParts`."""
        if value is None:
            return UrlParts()

        if isinstance(value, str):
            return parse_url(value)

        if isinstance(value, UrlParts):
            return value.copy()

        if isinstance(value, Mapping):
            return UrlParts.from_dict(value)

        raise InvalidArgumentsError(f"Unsupported URL type: {type(value).__name__}")

    def join_query(self, base: Optional[str], query: str) -> str:
        """Deep merge the given query strings."""
        if base is None:
            return query

        merged = merge(decode(base, self.separator), decode(query, self.separator))
        return self.build_query(merged)

    def build_query(self, query: TQueryInput) -> str:
        """Encode the given query with the composer's separator."""
        return encode(query, self.separator, encoding=self.encoding)

    def add_arg(self, params: TQueryMap, uri: Optional[str] = None) -> str:
        """Add, replace or remove query arguments of the given URI.

        ``REMOVE`` (or ``False``) values delete a key, ``SET_EMPTY`` (or ``None``)
        values keep it without a value. A URI without ``?`` whose path looks like a
        query (``a=1&b=2``) is treated as a query.

        .. code-block:: python

            composer.add_arg({"page": 2, "debug": REMOVE}, "/list?page=1&debug=1")
            # '/list?page=2'

        """
        uri = self.resolve_uri(uri)
        url = parse_url(uri)
        if url.query is not None:
            query = merge(decode(url.query, self.separator), params, deep=False)

        elif url.path and "=" in url.path:
            query = merge(decode(url.path, self.separator), params, deep=False)
            url.path = None

        else:
            query = dict(params)

        url.query = None
        result, _ = self.compose(url, UrlParts(query=self.build_query(resolve(query))))

        # Keep the result consistent with the given URI
        if result.startswith("//") and not uri.lstrip().startswith("//"):
            result = result[2:]

        if result.startswith("/") and "/" not in uri:
            result = result[1:]

        if result.startswith("?") and "?" not in uri:
            result = result[1:]

        return result.rstrip("?")

    def del_arg(self, keys: Union[str, Iterable[str]], uri: Optional[str] = None) -> str:
        """Remove the given query keys from the URI."""
        if isinstance(keys, str):
            keys = [keys]

        return self.add_arg(dict.fromkeys(keys, REMOVE), uri)

    def resolve_uri(self, uri: Optional[str]) -> str:
        if uri is not None:
            return uri

        if self.current_uri is None:
            raise InvalidArgumentsError("URI is required when no current URI provider is set")

        return self.current_uri()


def join_path(base: Optional[str], path: str) -> str:
    """Resolve the given path against the directory of the base path.

    An absolute path (or a missing base) replaces the base path.
    """
    if not base or path.startswith("/"):
        return path

    # Drop the last non-empty segment: "/dir/sub/" and "/dir/sub" both give "/dir"
    stripped = base.rstrip("/")
    directory = stripped[: stripped.rfind("/") + 1].rstrip("/")
    return f"{directory}/{path.lstrip('/')}"


def _is_empty(value: Any) -> bool:
    if isinstance(value, (str, UrlParts, Mapping)):
        return not value
    return value is None
