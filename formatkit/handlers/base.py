from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional, TypeVar

from ..errors import InvalidTableError


T = TypeVar("T")

# (value, precision) -> unpadded text
Handler = Callable[[Any, int], str]
# (text, width) -> padded text
AlignFunc = Callable[[str, int], str]
# (value) -> text, for marked directives
DateHandler = Callable[[T], str]

HandlerTable = Mapping[str, Handler]
AlignTable = Mapping[str, AlignFunc]


def checked_table(
    name: str,
    table: Mapping[str, Callable[..., str]],
    *,
    allow_empty_key: bool = False,
) -> Dict[str, Callable[..., str]]:
    """
    Copy a handler/align table into a plain dict, validating its entries.

    Keys must be non-empty strings unless allow_empty_key is set (the align
    table's "" fallback). Values must be callable.
    """
    out: Dict[str, Callable[..., str]] = {}
    for key, fn in table.items():
        if not isinstance(key, str):
            raise InvalidTableError(name, f"key must be str, but {type(key).__name__}")
        if not key and not allow_empty_key:
            raise InvalidTableError(name, "empty key is not allowed", key=key)
        if not callable(fn):
            raise InvalidTableError(name, f"entry for {key!r} is not callable", key=key)
        out[key] = fn
    return out


def overlay(base: Mapping[str, T], patch: Optional[Mapping[str, T]]) -> Dict[str, T]:
    """New dict with base's entries overridden by patch's."""
    merged = dict(base)
    if patch:
        merged.update(patch)
    return merged
