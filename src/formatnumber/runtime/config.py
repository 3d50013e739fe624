"""Formatter configuration.

FormatterConfig is an immutable value holding every default NumberFormatter
applies when a format() call leaves an argument out. Setters on the
formatter swap in a modified copy, so a config snapshot taken at the start
of a call never changes underneath it.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from formatnumber.constants import DEFAULT_DECIMALS_COUNT, DEFAULT_LOCALE
from formatnumber.enums import NumberFormatStyle

from .conventions import DEFAULT_LOCALE_CONVENTIONS, LocaleConventions

__all__ = ["FormatterConfig"]


def _frozen(mapping: Mapping[Any, Any]) -> Mapping[Any, Any]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True, slots=True)
class FormatterConfig:
    """Immutable defaults for NumberFormatter.

    Attributes:
        decimals_count: Digits after the decimal point (default: 2)
        style: NumberFormatStyle id for the Babel formatter
        pattern: Number pattern for PATTERN_DECIMAL style
        attributes: NumberFormatAttribute id -> value
        text_attributes: NumberFormatTextAttribute id -> value
        locale_code: Locale of the Babel formatter
        intl_formatting: True formats with Babel, False with locale conventions
        locale_conventions: Conventions set by the caller; None loads the
            system conventions on first fallback use
        default_locale_conventions: Substitute for missing or unusable
            conventions

    Example:
        >>> config = FormatterConfig(decimals_count=0, intl_formatting=False)
        >>> config.replace(decimals_count=3).decimals_count
        3
    """

    decimals_count: int = DEFAULT_DECIMALS_COUNT
    style: int = NumberFormatStyle.DEFAULT_STYLE
    pattern: str | None = None
    attributes: Mapping[int, int | float] = field(default_factory=dict)
    text_attributes: Mapping[int, str] = field(default_factory=dict)
    locale_code: str = DEFAULT_LOCALE
    intl_formatting: bool = True
    locale_conventions: LocaleConventions | None = None
    default_locale_conventions: LocaleConventions = DEFAULT_LOCALE_CONVENTIONS

    def __post_init__(self) -> None:
        """Check field types and freeze the attribute mappings.

        Raises:
            TypeError: If a field has the wrong type
        """
        if isinstance(self.decimals_count, bool) or not isinstance(self.decimals_count, int):
            msg = f"decimals_count must be int, got {type(self.decimals_count).__name__}"
            raise TypeError(msg)
        if isinstance(self.style, bool) or not isinstance(self.style, int):
            msg = f"style must be int, got {type(self.style).__name__}"
            raise TypeError(msg)
        if self.pattern is not None and not isinstance(self.pattern, str):
            msg = f"pattern must be str or None, got {type(self.pattern).__name__}"
            raise TypeError(msg)
        if not isinstance(self.attributes, Mapping):
            msg = f"attributes must be a mapping, got {type(self.attributes).__name__}"
            raise TypeError(msg)
        if not isinstance(self.text_attributes, Mapping):
            msg = f"text_attributes must be a mapping, got {type(self.text_attributes).__name__}"
            raise TypeError(msg)
        if not isinstance(self.locale_code, str):
            msg = f"locale_code must be str, got {type(self.locale_code).__name__}"
            raise TypeError(msg)
        if self.locale_conventions is not None and not isinstance(
            self.locale_conventions, LocaleConventions
        ):
            msg = "locale_conventions must be LocaleConventions or None"
            raise TypeError(msg)
        if not isinstance(self.default_locale_conventions, LocaleConventions):
            msg = "default_locale_conventions must be LocaleConventions"
            raise TypeError(msg)
        # Frozen dataclass: bypass __setattr__ to store read-only copies
        object.__setattr__(self, "attributes", _frozen(self.attributes))
        object.__setattr__(self, "text_attributes", _frozen(self.text_attributes))
        object.__setattr__(self, "intl_formatting", bool(self.intl_formatting))

    def replace(self, **changes: Any) -> FormatterConfig:
        """Return a copy with the given fields changed (validated again)."""
        return dataclasses.replace(self, **changes)
