"""
Shared default formatters and the free functions that call into them.

    format("{0} + {1} = {2}", 1, 2, 3)            # "1 + 2 = 3"
    format_date("%Y%m%d", datetime(2024, 6, 29))  # "20240629"

The defaults are built once at import and never rebound. The
patch_default_* functions return detached formatters; callers keep the
result and the shared instances stay as they are.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional

from .handlers import DEFAULT_ALIGN, DEFAULT_DATE_HANDLERS, DEFAULT_HANDLERS
from .handlers.base import AlignTable, DateHandler, HandlerTable
from .indexed import IndexedFieldFormatter
from .marked import MarkedFieldFormatter


DEFAULT_FORMATTER = IndexedFieldFormatter(DEFAULT_HANDLERS, DEFAULT_ALIGN)
DEFAULT_DATE_FORMATTER: MarkedFieldFormatter[datetime] = MarkedFieldFormatter(DEFAULT_DATE_HANDLERS)


def format(template: str, *args: Any) -> str:
    return DEFAULT_FORMATTER.format(template, *args)


def format_date(template: str, date: datetime) -> str:
    return DEFAULT_DATE_FORMATTER.format(template, date)


def patch_default_format(
    handlers: Optional[HandlerTable] = None,
    align: Optional[AlignTable] = None,
) -> IndexedFieldFormatter:
    return DEFAULT_FORMATTER.patch(handlers, align)


def patch_default_format_date(
    handlers: Optional[Mapping[str, DateHandler[datetime]]] = None,
) -> MarkedFieldFormatter[datetime]:
    return DEFAULT_DATE_FORMATTER.patch(handlers)
