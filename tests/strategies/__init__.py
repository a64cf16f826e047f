"""Hypothesis strategies for intllint property-based testing.

Strategies are organized by domain:

- icu: ICU message text with known structure

Usage:
    from tests.strategies import icu_messages, placeholder_names
"""

from .icu import (
    SAFE_TEXT_CHARS,
    GeneratedMessage,
    camel_case_names,
    icu_messages,
    literal_texts,
    lower_case_names,
    placeholder_names,
)

__all__ = [
    "SAFE_TEXT_CHARS",
    "GeneratedMessage",
    "camel_case_names",
    "icu_messages",
    "literal_texts",
    "lower_case_names",
    "placeholder_names",
]
