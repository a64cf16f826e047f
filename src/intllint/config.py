"""Linter configuration.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields
from typing import Any

from intllint.constants import FRAMEWORK_MODULE, MAX_SOURCE_SIZE

__all__ = ["DEFAULT_RULES", "LintConfig"]

# Rules enabled when none are configured
DEFAULT_RULES: tuple[str, ...] = ("no-camel-case", "no-multiple-plurals")


@dataclass(frozen=True, slots=True)
class LintConfig:
    """Immutable configuration for a Linter.

    All fields have sensible defaults; ``LintConfig()`` lints with the two
    default rules against ``react-intl`` imports.

    Attributes:
        framework_module: Module specifier whose imports are tracked
        rules: Ids of enabled rules, in reporting order
        locale: Locale whose CLDR plural categories ``enforce-plural-rules``
            requires (e.g. "pl"). None disables the locale-derived set.
        required_plural_rules: Selector keywords every plural must carry
        forbidden_plural_rules: Selector keywords no plural may carry
        requires_other_clause: Whether the ICU parser rejects plurals and
            selects without an ``other`` option
        ignore_tag: Whether ``<tag>`` markup is parsed as literal text
        max_source_size: Largest source, in characters, that is linted

    Example:
        >>> config = LintConfig(rules=("no-offset",), ignore_tag=True)
        >>> config.rules
        ('no-offset',)
    """

    framework_module: str = FRAMEWORK_MODULE
    rules: tuple[str, ...] = DEFAULT_RULES
    locale: str | None = None
    required_plural_rules: tuple[str, ...] = ()
    forbidden_plural_rules: tuple[str, ...] = ()
    requires_other_clause: bool = True
    ignore_tag: bool = False
    max_source_size: int = MAX_SOURCE_SIZE

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If the module name is empty, a rule id repeats, a
                keyword is both required and forbidden, or max_source_size
                is not positive.
        """
        if not self.framework_module:
            msg = "framework_module must be a non-empty module specifier"
            raise ValueError(msg)
        if len(set(self.rules)) != len(self.rules):
            msg = f"rules must not repeat, got {self.rules!r}"
            raise ValueError(msg)
        overlap = set(self.required_plural_rules) & set(self.forbidden_plural_rules)
        if overlap:
            msg = f"plural rules both required and forbidden: {sorted(overlap)}"
            raise ValueError(msg)
        if self.max_source_size <= 0:
            msg = "max_source_size must be positive"
            raise ValueError(msg)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "LintConfig":
        """Build a config from plain data (e.g. a parsed JSON or TOML table).

        Sequence values are converted to tuples. Keys may use ``-`` in place
        of ``_``.

        Raises:
            ValueError: On unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for raw_key, value in data.items():
            key = raw_key.replace("-", "_")
            if key not in known:
                msg = f"Unknown configuration key: {raw_key!r}"
                raise ValueError(msg)
            if isinstance(value, Iterable) and not isinstance(value, (str, bytes, Mapping)):
                value = tuple(value)
            kwargs[key] = value
        return cls(**kwargs)
