from __future__ import annotations

from typing import Any


class URLToolsError(Exception):
    """Base class for URL-Tools Errors."""


class InvalidUrlError(URLToolsError, ValueError):
    """Raise when the given URL can't be parsed.

    :param url: The rejected input
    :param reason: A short description of the problem
    """

    def __init__(self, url: Any, reason: str = ""):
        self.url = url
        self.reason = reason
        message = f"Invalid URL {url!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InvalidArgumentsError(URLToolsError, TypeError):
    """Raise when the given arguments can't be composed."""
