"""Encode, decode and merge query strings.

Nested values use the bracket notation: ``tags[]=a&tags[]=b`` for lists and
``filter[name]=bob`` for mappings. Keys and values are form-encoded with
:func:`urllib.parse.quote_plus` (a space becomes ``+``).
"""

from __future__ import annotations

import re
from enum import Enum
from typing import TYPE_CHECKING, Any, Mapping
from urllib.parse import quote_plus, unquote_plus

from multidict import MultiDict

from .constants import ARG_SEPARATOR, DEFAULT_ENCODING

if TYPE_CHECKING:
    from .types import TQueryInput, TQueryMap

__all__ = (
    "REMOVE",
    "SET_EMPTY",
    "Keep",
    "Override",
    "decode",
    "encode",
    "merge",
    "parse_pairs",
    "resolve",
)


class Override(Enum):
    """Markers to edit query keys."""

    REMOVE = "remove"  #: drop the key
    SET_EMPTY = "set-empty"  #: keep the key without a value (``?key``)


REMOVE = Override.REMOVE
SET_EMPTY = Override.SET_EMPTY


class Keep:
    """Set a query key to the given value as is (``False`` and ``None`` included)."""

    __slots__ = ("value",)

    def __init__(self, value: Any):
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Keep) and other.value == self.value

    def __repr__(self) -> str:
        return f"Keep({self.value!r})"


KEY_PIECE_RE = re.compile(r"\[([^\[\]]*)\]")


def encode(
    query: TQueryInput, separator: str = ARG_SEPARATOR, *, encoding: str = DEFAULT_ENCODING
) -> str:
    """Serialize the given query into a string.

    :param query: A mapping, a :class:`multidict.MultiDict` or an iterable of pairs
    :param separator: A pairs separator
    :param encoding: A charset to percent-encode the keys and values with
    """
    items = query.items() if hasattr(query, "items") else query
    chunks: list[str] = []
    for key, value in items:
        _encode_value(chunks, _quote(key, encoding), value, encoding)

    return separator.join(chunks)


def _encode_value(chunks: list[str], name: str, value: Any, encoding: str) -> None:
    if isinstance(value, Keep):
        value = value.value

    elif value is REMOVE or value is False:
        return

    if value is SET_EMPTY or value is None or (isinstance(value, str) and not value):
        chunks.append(name)

    elif isinstance(value, Mapping):
        for key, item in value.items():
            _encode_value(chunks, f"{name}[{_quote(key, encoding)}]", item, encoding)

    elif isinstance(value, (list, tuple)):
        for item in value:
            _encode_value(chunks, f"{name}[]", item, encoding)

    else:
        if isinstance(value, bool):
            value = int(value)
        chunks.append(f"{name}={_quote(value, encoding)}")


def _quote(value: Any, encoding: str) -> str:
    return quote_plus(str(value), safe="", encoding=encoding, errors="surrogateescape")


def _unquote(value: str, encoding: str) -> str:
    return unquote_plus(value, encoding=encoding, errors="surrogateescape")


def parse_pairs(
    query: str, separator: str = ARG_SEPARATOR, *, encoding: str = DEFAULT_ENCODING
) -> MultiDict[str]:
    """Decode the given query string into a flat multidict.

    Every pair is kept in order (repeated keys included). Keys without ``=`` get an
    empty value, malformed escapes are left as is.
    """
    pairs: MultiDict[str] = MultiDict()
    for chunk in query.split(separator):
        if not chunk:
            continue

        name, _, value = chunk.partition("=")
        name = _unquote(name, encoding)
        if name:
            pairs.add(name, _unquote(value, encoding))

    return pairs


def decode(
    query: str, separator: str = ARG_SEPARATOR, *, encoding: str = DEFAULT_ENCODING
) -> dict[str, Any]:
    """Decode the given query string into a nested mapping.

    Bracketed keys build nested values, a later pair overrides an earlier one::

        >>> decode("a=1&tags[]=x&tags[]=y&user[name]=bob&a=2")
        {'a': '2', 'tags': ['x', 'y'], 'user': {'name': 'bob'}}

    A container whose keys are exactly ``0..n-1`` comes back as a list.
    """
    result: dict[str, Any] = {}
    for name, value in parse_pairs(query, separator, encoding=encoding).items():
        _assign(result, _split_key(name), value)

    return {key: _listify(value) for key, value in result.items()}


def _split_key(name: str) -> list[str]:
    base, bracket, _ = name.partition("[")
    if not (base and bracket):
        return [name]

    rest = name[len(base) :]
    match = KEY_PIECE_RE.match(rest)
    if match is None:
        return [name]

    keys = [base]
    while match is not None:
        keys.append(match.group(1))
        match = KEY_PIECE_RE.match(rest, match.end())

    return keys


def _assign(target: dict[str, Any], keys: list[str], value: str) -> None:
    *path, last = keys
    for key in path:
        if not key:
            key = _next_index(target)

        child = target.get(key)
        if not isinstance(child, dict):
            child = target[key] = {}
        target = child

    target[last or _next_index(target)] = value


def _next_index(target: dict[str, Any]) -> str:
    indexes = [int(key) for key in target if key.isdecimal()]
    return str(max(indexes) + 1) if indexes else "0"


def _listify(value: Any) -> Any:
    if not isinstance(value, dict):
        return value

    items = {key: _listify(item) for key, item in value.items()}
    if items and list(items) == [str(idx) for idx in range(len(items))]:
        return list(items.values())

    return items


def merge(base: TQueryMap, overrides: TQueryMap, deep: bool = True) -> dict[str, Any]:
    """Merge the given query mappings, the overrides win.

    With ``deep`` nested values are merged too (mappings key by key, lists index
    by index), otherwise the overrides replace same-named keys. The inputs are not
    changed.
    """
    if not deep:
        return {**base, **overrides}

    return _replace_recursive(base, overrides)


def _replace_recursive(base: Any, overrides: Any) -> Any:
    if isinstance(base, Mapping) and isinstance(overrides, Mapping):
        merged = dict(base)
        for key, value in overrides.items():
            merged[key] = _replace_recursive(merged[key], value) if key in merged else value
        return merged

    if isinstance(base, list) and isinstance(overrides, list):
        merged_list = list(base)
        for idx, value in enumerate(overrides):
            if idx < len(merged_list):
                merged_list[idx] = _replace_recursive(merged_list[idx], value)
            else:
                merged_list.append(value)
        return merged_list

    return overrides


def resolve(query: TQueryMap) -> dict[str, Any]:
    """Apply the override markers.

    ``REMOVE`` (or ``False``) drops a key, ``SET_EMPTY`` (or ``None``) makes it
    valueless, :class:`Keep` values are left for :func:`encode`. Nested mappings are
    resolved too.
    """
    resolved: dict[str, Any] = {}
    for key, value in query.items():
        if value is REMOVE or value is False:
            continue

        elif value is SET_EMPTY or value is None:
            resolved[key] = ""

        elif isinstance(value, Mapping):
            resolved[key] = resolve(value)

        else:
            resolved[key] = value

    return resolved
