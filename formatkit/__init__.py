"""
formatkit: two small pattern-driven string formatters.

- IndexedFieldFormatter: ``{0:^8.2f}`` style positional placeholders.
- MarkedFieldFormatter: ``%Y-%m-%d`` style mark directives.

format / format_date call shared default instances; patch_default_format /
patch_default_format_date derive new ones from them.
"""
from __future__ import annotations

import logging

from .errors import (
    ConfigurationError,
    FormatkitError,
    InvalidMarkError,
    InvalidTableError,
    TemplateError,
    UnknownAlignError,
    UnknownDirectiveError,
    UnknownFormatKeyError,
)
from .formatting import (
    DEFAULT_DATE_FORMATTER,
    DEFAULT_FORMATTER,
    format,
    format_date,
    patch_default_format,
    patch_default_format_date,
)
from .indexed import Field, IndexedFieldFormatter
from .marked import EscapeRun, MarkedFieldFormatter
from .options import IndexedOptions, MarkedOptions


logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "DEFAULT_DATE_FORMATTER",
    "DEFAULT_FORMATTER",
    "EscapeRun",
    "Field",
    "FormatkitError",
    "IndexedFieldFormatter",
    "IndexedOptions",
    "InvalidMarkError",
    "InvalidTableError",
    "MarkedFieldFormatter",
    "MarkedOptions",
    "TemplateError",
    "UnknownAlignError",
    "UnknownDirectiveError",
    "UnknownFormatKeyError",
    "format",
    "format_date",
    "patch_default_format",
    "patch_default_format_date",
]
