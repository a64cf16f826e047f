"""Locale utilities: BCP-47 normalization and CLDR plural categories.

Python 3.13+. Depends on Babel for CLDR data.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from intllint.enums import PluralType

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
    "plural_categories",
]

# Babel's PluralRule.tags omits the implicit fallback category
_FALLBACK_CATEGORY = "other"


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


@functools.lru_cache(maxsize=128)
def plural_categories(
    locale_code: str, plural_type: PluralType = PluralType.CARDINAL
) -> frozenset[str]:
    """CLDR plural categories a locale distinguishes.

    Args:
        locale_code: Locale code (e.g. "pl", "en-US")
        plural_type: Cardinal (``plural``) or ordinal (``selectordinal``)

    Returns:
        Category keywords, always including "other"

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> sorted(plural_categories("pl"))
        ['few', 'many', 'one', 'other']
        >>> sorted(plural_categories("en", PluralType.ORDINAL))
        ['few', 'one', 'other', 'two']
    """
    locale = get_babel_locale(locale_code)
    rule = locale.ordinal_form if plural_type is PluralType.ORDINAL else locale.plural_form
    return frozenset(rule.tags) | {_FALLBACK_CATEGORY}
