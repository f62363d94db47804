"""Merge policy flags.

The numeric values are the ones of PHP's ``http_build_url()`` constants, so a
plain integer bitmask can be passed anywhere a :class:`MergeFlag` is expected.
"""

from __future__ import annotations

from enum import IntFlag
from functools import reduce
from operator import or_
from typing import TYPE_CHECKING

from .errors import InvalidArgumentsError

if TYPE_CHECKING:
    from .types import TFlags


class MergeFlag(IntFlag):
    """Control how the override parts are merged into the base URL."""

    REPLACE = 1
    JOIN_PATH = 2
    JOIN_QUERY = 4
    STRIP_USER = 8
    STRIP_PASS = 16
    STRIP_AUTH = 32
    STRIP_PORT = 64
    STRIP_PATH = 128
    STRIP_QUERY = 256
    STRIP_FRAGMENT = 512
    STRIP_ALL = 1024


ALL_FLAGS = 2047

STRIP_FLAGS = {
    "user": MergeFlag.STRIP_USER,
    "password": MergeFlag.STRIP_PASS,
    "port": MergeFlag.STRIP_PORT,
    "path": MergeFlag.STRIP_PATH,
    "query": MergeFlag.STRIP_QUERY,
    "fragment": MergeFlag.STRIP_FRAGMENT,
}


def expand_flags(flags: TFlags) -> MergeFlag:
    """Normalize the given flags.

    Accept an integer bitmask or an iterable of flags. Unknown bits are dropped,
    ``STRIP_ALL`` and ``STRIP_AUTH`` are replaced by the flags they cover.

    :raises InvalidArgumentsError: if the flags are neither an integer nor flags
    """
    if not isinstance(flags, int):
        try:
            flags = reduce(or_, flags, 0)
        except TypeError as exc:
            raise InvalidArgumentsError(f"Invalid merge flags: {flags!r}") from exc

    expanded = MergeFlag(int(flags) & ALL_FLAGS)
    if expanded & MergeFlag.STRIP_ALL:
        expanded |= reduce(or_, STRIP_FLAGS.values())

    elif expanded & MergeFlag.STRIP_AUTH:
        expanded |= MergeFlag.STRIP_USER | MergeFlag.STRIP_PASS

    return expanded
