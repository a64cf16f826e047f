"""Rule framework: metadata, per-file context and the shared rule driver.

Every rule works the same way. It tracks framework imports, extracts
message candidates from calls and elements, parses each default message
and runs its validator. Only the validator differs between rules, so a
rule subclass supplies ``meta`` and ``verify``.

The per-file state (tracked imports, diagnostics) lives in RuleContext,
created fresh for each rule and file. Rule instances are stateless and can
be shared between files and threads.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, ClassVar, Literal

from intllint.diagnostics import DepthLimitExceededError, MessageSyntaxError
from intllint.extraction import ImportTracker, TrackedSymbols, extract_messages
from intllint.icu import IcuParser

if TYPE_CHECKING:
    from tree_sitter import Node

    from intllint.config import LintConfig
    from intllint.diagnostics import Diagnostic
    from intllint.enums import RuleType
    from intllint.extraction import MessageCandidate
    from intllint.host import SourceFile
    from intllint.icu import MessageElement

__all__ = [
    "Rule",
    "RuleContext",
    "RuleHandler",
    "RuleMeta",
    "TemplateVisitors",
]

logger = logging.getLogger(__name__)

type RuleHandler = Callable[[RuleContext, Node], None]


@dataclass(frozen=True, slots=True)
class RuleMeta:
    """Descriptive metadata of a rule.

    ``fixable`` is advisory: no rule offers an automatic fix.
    """

    id: str
    type: RuleType
    description: str
    url: str
    fixable: Literal["code", "whitespace"] | None = None
    recommended: bool = False


@dataclass(slots=True)
class RuleContext:
    """State of one rule during one file pass.

    Attributes:
        rule_id: Id stamped on every reported diagnostic
        source: File being linted (positions, filename)
        tracked: Framework imports seen so far in the file
        diagnostics: Diagnostics reported so far, in report order
    """

    rule_id: str
    source: SourceFile
    tracked: TrackedSymbols = field(default_factory=TrackedSymbols)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def report(self, node: Node, diagnostic: Diagnostic) -> None:
        """Record ``diagnostic`` positioned at ``node``."""
        self.diagnostics.append(
            replace(
                diagnostic,
                span=self.source.span_of(node),
                rule=self.rule_id,
                filename=self.source.filename,
            )
        )


@dataclass(frozen=True, slots=True)
class TemplateVisitors:
    """Handlers for component files: template expressions and script blocks."""

    template: Mapping[str, RuleHandler]
    script: Mapping[str, RuleHandler]


class Rule:
    """Base class of all message rules.

    Subclasses set ``meta`` and implement ``verify``.
    """

    meta: ClassVar[RuleMeta]

    __slots__ = ("_config", "_parser", "_tracker")

    def __init__(self, config: LintConfig) -> None:
        self._config = config
        self._tracker = ImportTracker(config.framework_module)
        self._parser = IcuParser(
            requires_other_clause=config.requires_other_clause,
            ignore_tag=config.ignore_tag,
        )

    @property
    def id(self) -> str:
        return self.meta.id

    @property
    def config(self) -> LintConfig:
        return self._config

    def verify(self, elements: tuple[MessageElement, ...]) -> Diagnostic | None:
        """Validate one parsed message; return the first violation or None."""
        raise NotImplementedError

    # ========================================================================
    # VISITORS
    # ========================================================================

    def visitors(self) -> dict[str, RuleHandler]:
        """Handlers for script files, by node type."""
        return {
            "import_statement": self.on_import,
            "call_expression": self.check_node,
            "jsx_opening_element": self.check_node,
            "jsx_self_closing_element": self.check_node,
        }

    def template_visitors(self) -> TemplateVisitors:
        """Handlers for component files.

        Component files get call checks only, in both the template and the
        script blocks. Imports are not tracked there, so only format
        functions matched by name are recognized.
        """
        return TemplateVisitors(
            template={"call_expression": self.check_node},
            script={"call_expression": self.check_node},
        )

    def new_context(self, source: SourceFile) -> RuleContext:
        return RuleContext(rule_id=self.meta.id, source=source)

    # ========================================================================
    # HANDLERS
    # ========================================================================

    def on_import(self, context: RuleContext, node: Node) -> None:
        """Replace the tracked set when ``node`` imports the framework module.

        A later qualifying import replaces, not extends, the set from an
        earlier one.
        """
        symbols = self._tracker.track(node)
        if symbols is not None:
            context.tracked = symbols

    def check_node(self, context: RuleContext, node: Node) -> None:
        """Extract messages at ``node`` and report one diagnostic per bad message."""
        for candidate in extract_messages(node, context.tracked):
            self.check_candidate(context, candidate)

    def check_candidate(self, context: RuleContext, candidate: MessageCandidate) -> None:
        default_message = candidate.descriptor.default_message
        anchor = candidate.message_node
        if not default_message or anchor is None:
            logger.debug(
                "Skipping message %r without static default message",
                candidate.descriptor.id,
            )
            return
        try:
            elements = self._parser.parse(default_message)
        except (MessageSyntaxError, DepthLimitExceededError) as e:
            if e.diagnostic is not None:
                context.report(anchor, e.diagnostic)
            return
        try:
            violation = self.verify(elements)
        except DepthLimitExceededError as e:
            violation = e.diagnostic
        if violation is not None:
            context.report(anchor, violation)
