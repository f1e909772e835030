"""Locale code handling shared by providers and the engine cache.

Locale codes arrive as BCP-47 ("sr-Latn-RS") or POSIX ("sr_Latn_RS").
Everything downstream uses the POSIX form, so one spelling of a locale
always maps to one cache key and one Babel lookup.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "locale_fallback_chain",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """POSIX spelling of a locale code.

    Hyphens become underscores and surrounding whitespace is dropped.
    Letter case is left alone because Babel matches case-insensitively.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("pt_BR")
        'pt_BR'
    """
    return locale_code.strip().replace("-", "_")


def locale_fallback_chain(locale_code: str) -> tuple[str, ...]:
    """Candidate locales, most specific first.

    Each candidate drops the last subtag of the previous one. Empty
    subtags ("en__US") are ignored; an empty code has no candidates.

    Example:
        >>> locale_fallback_chain("sr-Latn-RS")
        ('sr_Latn_RS', 'sr_Latn', 'sr')
    """
    parts = [p for p in normalize_locale(locale_code).split("_") if p]
    return tuple("_".join(parts[:end]) for end in range(len(parts), 0, -1))


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Parsed Babel Locale for a code, memoised per spelling.

    Cardinal and ordinal lookups for the same locale share one parse.

    Raises:
        babel.core.UnknownLocaleError: Babel has no data for the locale
        ValueError: The code is not a syntactically valid locale
    """
    # Babel reads CLDR data on first use; keep that off the import path.
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
