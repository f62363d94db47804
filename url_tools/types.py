from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Iterable, Mapping, Tuple, Union

if TYPE_CHECKING:
    from .flags import MergeFlag
    from .parts import UrlParts

TQueryMap = Mapping[str, Any]
TQueryInput = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]
TURLInput = Union[str, "UrlParts", Mapping[str, Any], None]
TFlags = Union[int, "MergeFlag", Iterable["MergeFlag"]]
TURIProvider = Callable[[], str]

TASGIScope = Mapping[str, Any]
TASGIHeaders = list[tuple[bytes, bytes]]
