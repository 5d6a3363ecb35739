from __future__ import annotations

from .base import AlignFunc, AlignTable, DateHandler, Handler, HandlerTable
from .calendar import DEFAULT_DATE_HANDLERS
from .numeric import DEFAULT_ALIGN, DEFAULT_HANDLERS


__all__ = [
    "AlignFunc",
    "AlignTable",
    "DateHandler",
    "Handler",
    "HandlerTable",
    "DEFAULT_ALIGN",
    "DEFAULT_DATE_HANDLERS",
    "DEFAULT_HANDLERS",
]
