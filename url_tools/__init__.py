""" URL-Tools -- Compose URLs and edit their query strings """
from __future__ import annotations

from .composer import UrlComposer, join_path
from .current import current_url, is_https
from .errors import InvalidArgumentsError, InvalidUrlError, URLToolsError
from .flags import MergeFlag, expand_flags
from .parts import UrlParts, parse_url, unparse_url
from .query import REMOVE, SET_EMPTY, Keep, Override

composer = UrlComposer()

compose = composer.compose
build = composer.build
build_query = composer.build_query
add_arg = composer.add_arg
del_arg = composer.del_arg

__all__ = (
    # Errors
    "InvalidArgumentsError",
    "InvalidUrlError",
    "URLToolsError",
    # Composition
    "MergeFlag",
    "UrlComposer",
    "UrlParts",
    "add_arg",
    "build",
    "build_query",
    "compose",
    "composer",
    "del_arg",
    "expand_flags",
    "join_path",
    "parse_url",
    "unparse_url",
    # Query overrides
    "REMOVE",
    "SET_EMPTY",
    "Keep",
    "Override",
    # Current URL
    "current_url",
    "is_https",
)
