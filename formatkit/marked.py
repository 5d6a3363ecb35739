"""
Mark-character formatter, modelled on ``date`` / strftime directives.

A run of N mark characters followed by a known control key collapses to
N // 2 marks. When N is odd the key is replaced by its handler's output,
when N is even the key is kept as literal text:

    %d    -> "23"
    %%d   -> "%d"
    %%%d  -> "%23"

The value passed to format() is handed to every handler as is, so any
object works as long as the handler table knows how to read it.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Generic, List, Mapping, Optional, TypeVar, Union

from .errors import UnknownDirectiveError
from .handlers.base import DateHandler, checked_table, overlay
from .options import MarkedOptions
from .patterns import compile_marked_pattern


logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class EscapeRun:
    """A run of mark characters and the control key right after it."""
    length: int
    key: str

    @classmethod
    def from_match(cls, match: re.Match[str]) -> "EscapeRun":
        return cls(length=len(match.group("run")), key=match.group("key"))

    @property
    def escaped(self) -> bool:
        return self.length % 2 == 0

    @property
    def marks(self) -> int:
        return self.length // 2


def _as_options(options: Union[MarkedOptions, Mapping[str, Any], None]) -> MarkedOptions:
    if options is None:
        return MarkedOptions()
    if isinstance(options, MarkedOptions):
        return options
    return MarkedOptions.from_mapping(options)


class MarkedFieldFormatter(Generic[T]):
    """
    Formats mark-prefixed directives against a single value.

    Instances never change after construction; patch() returns a new one.
    """

    def __init__(
        self,
        handlers: Mapping[str, DateHandler[T]],
        options: Union[MarkedOptions, Mapping[str, Any], None] = None,
    ) -> None:
        self._options = _as_options(options)
        table = checked_table("handlers", handlers)

        self._handlers: Mapping[str, DateHandler[T]] = MappingProxyType(table)
        self._pattern = compile_marked_pattern(self._options.mark, table)

        logger.debug(
            "MarkedFieldFormatter built: %d handlers, mark=%r",
            len(table), self._options.mark,
        )

    @property
    def handlers(self) -> Mapping[str, DateHandler[T]]:
        return self._handlers

    @property
    def options(self) -> MarkedOptions:
        return self._options

    @property
    def mark(self) -> str:
        return self._options.mark

    @property
    def pattern(self) -> re.Pattern[str]:
        return self._pattern

    def runs(self, template: str) -> List[EscapeRun]:
        return [EscapeRun.from_match(m) for m in self._pattern.finditer(template)]

    def render_run(self, run: EscapeRun, value: T) -> str:
        prefix = self._options.mark * run.marks
        if run.escaped:
            return prefix + run.key

        handler = self._handlers.get(run.key)
        if handler is None:
            logger.debug("no handler for directive %r", run.key)
            raise UnknownDirectiveError(run.key)
        return prefix + handler(value)

    def format(self, template: str, value: T) -> str:
        return self._pattern.sub(lambda m: self.render_run(EscapeRun.from_match(m), value), template)

    def patch(self, handlers: Optional[Mapping[str, DateHandler[T]]] = None) -> "MarkedFieldFormatter[T]":
        """New formatter with handlers laid over this one's; same mark."""
        logger.debug("patching MarkedFieldFormatter: handlers=%s", list(handlers or ()))
        return MarkedFieldFormatter(overlay(self._handlers, handlers), self._options)

    def __repr__(self) -> str:
        return f"MarkedFieldFormatter(handlers={list(self._handlers)!r}, mark={self._options.mark!r})"
