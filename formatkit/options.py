from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Any, Mapping, Optional

from .errors import ConfigurationError, InvalidMarkError


DEFAULT_PRECISION = 6
DEFAULT_MARK = "%"


def _reject_unknown(name: str, data: Mapping[str, Any], known: AbstractSet[str]) -> None:
    unknown = sorted(str(k) for k in data if k not in known)
    if unknown:
        raise ConfigurationError(f"{name}: unknown option(s): {', '.join(unknown)}")


@dataclass(frozen=True)
class IndexedOptions:
    """
    Options captured by an IndexedFieldFormatter at construction.

    default_precision is used whenever a placeholder carries a format key
    but no explicit ``.precision``.
    """
    default_precision: int = DEFAULT_PRECISION

    def __post_init__(self) -> None:
        p = self.default_precision
        if isinstance(p, bool) or not isinstance(p, int) or p < 0:
            raise ConfigurationError(
                f"'default_precision' must be a non-negative int, but: {p!r}"
            )

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "IndexedOptions":
        """Build from a plain dict (e.g. parsed JSON). Unknown keys are rejected."""
        data = data or {}
        _reject_unknown("IndexedOptions", data, {"default_precision"})
        return cls(default_precision=data.get("default_precision", DEFAULT_PRECISION))


@dataclass(frozen=True)
class MarkedOptions:
    """Options captured by a MarkedFieldFormatter at construction."""
    mark: str = DEFAULT_MARK

    def __post_init__(self) -> None:
        if not isinstance(self.mark, str) or len(self.mark) != 1:
            raise InvalidMarkError(self.mark)

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "MarkedOptions":
        data = data or {}
        _reject_unknown("MarkedOptions", data, {"mark"})
        return cls(mark=data.get("mark", DEFAULT_MARK))
