"""
Regex construction for both formatter kinds.

Patterns are compiled once per formatter instance from the keys of its
tables. Keys are escaped, so any character (including regex
metacharacters) may be used as a format key, align symbol or mark.
"""
from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional

from .errors import InvalidTableError


logger = logging.getLogger(__name__)


INDEX_RE = r"[0-9]+"
WIDTH_RE = r"[0-9]*"
PRECISION_RE = r"[0-9]+"


def key_alternation(keys: Iterable[str]) -> Optional[str]:
    """
    Join keys into a regex alternation, or return None for an empty key set.

    Longer keys come first so that e.g. "HH" is preferred over "H".
    Multi-character keys are wrapped in a non-capturing group.
    """
    unique = list(dict.fromkeys(keys))
    unique.sort(key=len, reverse=True)

    parts: List[str] = []
    for k in unique:
        escaped = re.escape(k)
        parts.append(escaped if len(k) == 1 else f"(?:{escaped})")
    if not parts:
        return None
    return "|".join(parts)


def compile_indexed_pattern(
    handler_keys: Iterable[str],
    align_keys: Iterable[str],
) -> re.Pattern[str]:
    """
    Pattern for ``{index[:[[align]width][.precision]key]}``.

    The "" align key is the fallback and never appears in the pattern.
    Groups whose key set is empty are left out entirely.
    """
    align = key_alternation(k for k in align_keys if k)
    handler = key_alternation(handler_keys)

    align_part = f"(?P<align>{align})?" if align else ""
    key_part = f"(?P<key>{handler})?" if handler else ""

    source = (
        rf"\{{(?P<index>{INDEX_RE})"
        rf"(?::{align_part}(?P<width>{WIDTH_RE})(?:\.(?P<precision>{PRECISION_RE}))?{key_part})?"
        r"\}"
    )
    logger.debug("compiled indexed pattern: %s", source)
    return re.compile(source)


def compile_marked_pattern(mark: str, handler_keys: Iterable[str]) -> re.Pattern[str]:
    """Pattern for ``(mark+)(key)``."""
    handler = key_alternation(handler_keys)
    if handler is None:
        raise InvalidTableError("handlers", "at least one control key is required")

    # a run only matches from its first mark
    mark_re = re.escape(mark)
    source = f"(?<!{mark_re})(?P<run>{mark_re}+)(?P<key>{handler})"
    logger.debug("compiled marked pattern: %s", source)
    return re.compile(source)
