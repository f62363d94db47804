"""URL-Tools defaults."""

from __future__ import annotations

ARG_SEPARATOR = "&"
BASE_ENCODING = "latin-1"
DEFAULT_ENCODING = "utf-8"

DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443}
SECURE_SCHEMES = frozenset({"https", "wss"})
