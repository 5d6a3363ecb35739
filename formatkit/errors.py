from __future__ import annotations

from typing import Optional


class FormatkitError(Exception):
    """Base class for every error raised by formatkit."""


# -----------------------------
# Construction-time errors
# -----------------------------

class ConfigurationError(FormatkitError, ValueError):
    """
    A formatter could not be built from the given tables/options.
    No formatter instance is produced when this is raised.
    """


class InvalidMarkError(ConfigurationError):
    def __init__(self, mark: object) -> None:
        self.mark = mark
        if isinstance(mark, str):
            detail = f"'mark' must be single letter, but: {mark!r}"
        else:
            detail = f"'mark' must be str, but {type(mark).__name__}"
        super().__init__(detail)


class InvalidTableError(ConfigurationError):
    def __init__(self, table: str, message: str, key: Optional[str] = None) -> None:
        self.table = table
        self.key = key
        super().__init__(f"{table}: {message}")


# -----------------------------
# Render-time errors
# -----------------------------

class TemplateError(FormatkitError, LookupError):
    """A template referenced something the formatter cannot resolve."""


class UnknownFormatKeyError(TemplateError):
    def __init__(self, index: int, key: str) -> None:
        self.index = index
        self.key = key
        super().__init__(f"Unknown Format at {index}: {key}")


class UnknownAlignError(TemplateError):
    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Unknown Align: {symbol!r}")


class UnknownDirectiveError(TemplateError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Unknown Format: {key}")
