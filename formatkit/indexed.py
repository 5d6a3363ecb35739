"""
Positional placeholder formatter, modelled on Python's ``str.format``.

    fmt = IndexedFieldFormatter(DEFAULT_HANDLERS, DEFAULT_ALIGN)
    fmt.format("{0} + {1} = {2:.2f}", 1, 2, 3)   # "1 + 2 = 3.00"

Placeholder syntax is ``{index[:[[align]width][.precision]key]}``. The set
of keys and align symbols is whatever the tables passed at construction
contain; the matching regex is compiled from them once.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Sequence, Union

from .errors import InvalidTableError, UnknownAlignError, UnknownFormatKeyError
from .handlers.base import AlignFunc, AlignTable, Handler, HandlerTable, checked_table, overlay
from .options import IndexedOptions
from .patterns import compile_indexed_pattern


logger = logging.getLogger(__name__)

MISSING_TEXT = "undefined"


@dataclass(frozen=True)
class Field:
    """
    One parsed placeholder.

    width is None when the ``:`` section is absent. When the section is
    present but carries no digits, width is 0 and alignment still runs.
    key is None when no format key was given.
    """
    index: int
    align: str = ""
    width: Optional[int] = None
    precision: Optional[int] = None
    key: Optional[str] = None

    @classmethod
    def from_match(cls, match: re.Match[str]) -> "Field":
        g = match.groupdict()
        width = g.get("width")
        precision = g.get("precision")
        return cls(
            index=int(g["index"]),
            align=g.get("align") or "",
            width=None if width is None else int(width or 0),
            precision=None if precision is None else int(precision),
            key=g.get("key"),
        )


def _as_options(options: Union[IndexedOptions, Mapping[str, Any], None]) -> IndexedOptions:
    if options is None:
        return IndexedOptions()
    if isinstance(options, IndexedOptions):
        return options
    return IndexedOptions.from_mapping(options)


class IndexedFieldFormatter:
    """
    Formats ``{0:...}`` placeholders against positional arguments.

    Instances never change after construction; use patch() to derive a
    formatter with extra or replaced handlers/align functions.
    """

    def __init__(
        self,
        handlers: HandlerTable,
        align: AlignTable,
        options: Union[IndexedOptions, Mapping[str, Any], None] = None,
    ) -> None:
        handler_table = checked_table("handlers", handlers)
        align_table = checked_table("align", align, allow_empty_key=True)
        if "" not in align_table:
            raise InvalidTableError("align", "fallback entry '' is required", key="")

        self._handlers: Mapping[str, Handler] = MappingProxyType(handler_table)
        self._align: Mapping[str, AlignFunc] = MappingProxyType(align_table)
        self._options = _as_options(options)
        self._pattern = compile_indexed_pattern(handler_table, align_table)

        logger.debug(
            "IndexedFieldFormatter built: %d handlers, %d align, precision=%d",
            len(handler_table), len(align_table), self._options.default_precision,
        )

    # -----------------------------
    # read-only views
    # -----------------------------

    @property
    def handlers(self) -> Mapping[str, Handler]:
        return self._handlers

    @property
    def align(self) -> Mapping[str, AlignFunc]:
        return self._align

    @property
    def options(self) -> IndexedOptions:
        return self._options

    @property
    def default_precision(self) -> int:
        return self._options.default_precision

    @property
    def pattern(self) -> re.Pattern[str]:
        return self._pattern

    # -----------------------------
    # formatting
    # -----------------------------

    def fields(self, template: str) -> List[Field]:
        """Placeholders found in template, left to right."""
        return [Field.from_match(m) for m in self._pattern.finditer(template)]

    def render_field(self, field: Field, args: Sequence[Any]) -> str:
        """
        Text for a single placeholder.

        A missing or None argument renders as "undefined". Without a format
        key the argument's str() is used as is, with no padding.
        """
        value = args[field.index] if field.index < len(args) else None
        if value is None:
            return MISSING_TEXT

        if field.key is None:
            return str(value)

        handler = self._handlers.get(field.key)
        if handler is None:
            logger.debug("no handler for key %r at index %d", field.key, field.index)
            raise UnknownFormatKeyError(field.index, field.key)

        precision = field.precision
        if precision is None:
            precision = self._options.default_precision
        text = handler(value, precision)

        if field.width is None:
            return text

        align = self._align.get(field.align)
        if align is None:
            logger.debug("no align function for %r", field.align)
            raise UnknownAlignError(field.align)
        return align(text, field.width)

    def format(self, template: str, *args: Any) -> str:
        return self._pattern.sub(lambda m: self.render_field(Field.from_match(m), args), template)

    def patch(
        self,
        handlers: Optional[HandlerTable] = None,
        align: Optional[AlignTable] = None,
    ) -> "IndexedFieldFormatter":
        """
        New formatter with handlers/align laid over this one's tables.

        The receiver is left untouched and default precision carries over.
        """
        logger.debug(
            "patching IndexedFieldFormatter: handlers=%s align=%s",
            list(handlers or ()), list(align or ()),
        )
        return IndexedFieldFormatter(
            overlay(self._handlers, handlers),
            overlay(self._align, align),
            self._options,
        )

    def __repr__(self) -> str:
        return (
            f"IndexedFieldFormatter(handlers={list(self._handlers)!r}, "
            f"align={list(self._align)!r}, default_precision={self._options.default_precision})"
        )
