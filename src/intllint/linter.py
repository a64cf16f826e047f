"""Linter: runs the enabled rules over source files.

A Linter is built once from a LintConfig and reused for any number of
files. Every file pass creates fresh RuleContexts, so passes share no state
and results do not depend on the order files are linted in.

Host problems (unsupported extension, unreadable file, oversized source)
become diagnostics on the file's LintResult and are logged; they never
raise.

Python 3.13+.
"""

import logging
from collections import defaultdict
from collections.abc import Callable, Iterable, Iterator, Mapping
from functools import partial
from os import PathLike
from pathlib import Path

from intllint.config import LintConfig
from intllint.diagnostics import ErrorTemplate, LintResult, SourceError
from intllint.enums import SourceLanguage
from intllint.host import (
    EXTENSION_LANGUAGES,
    FragmentKind,
    NodeHandler,
    SourceFile,
    VueDocument,
    language_for,
    make_parser,
    walk,
)
from intllint.rules import RULES, Rule, RuleContext, RuleHandler

__all__ = ["Linter", "read_source"]

logger = logging.getLogger(__name__)

# Directories never entered when expanding a directory argument
_SKIPPED_DIRECTORIES = frozenset({"node_modules", "__pycache__"})


class Linter:
    """Runs message rules over JavaScript, TypeScript and Vue sources.

    Example:
        >>> linter = Linter(LintConfig(rules=("no-camel-case",)))
        >>> result = linter.lint_source(
        ...     "intl.formatMessage({defaultMessage: 'Hi {userName}'})", "a.js"
        ... )
        >>> [d.message for d in result.diagnostics]
        ['Camel case arguments are not allowed']
    """

    __slots__ = ("_config", "_rules")

    def __init__(self, config: LintConfig | None = None) -> None:
        """Instantiate the enabled rules.

        Raises:
            ValueError: If a configured rule id is unknown, or a rule rejects
                the configuration
        """
        self._config = config if config is not None else LintConfig()
        unknown = [rule_id for rule_id in self._config.rules if rule_id not in RULES]
        if unknown:
            msg = f"Unknown rule(s): {', '.join(unknown)}. Available: {', '.join(sorted(RULES))}"
            raise ValueError(msg)
        self._rules: tuple[Rule, ...] = tuple(
            RULES[rule_id](self._config) for rule_id in self._config.rules
        )

    @property
    def config(self) -> LintConfig:
        return self._config

    @property
    def rules(self) -> tuple[Rule, ...]:
        """Enabled rules, in configuration order."""
        return self._rules

    # ========================================================================
    # PUBLIC API
    # ========================================================================

    def lint_source(
        self,
        source: str,
        filename: str = "<input>.js",
        *,
        language: SourceLanguage | None = None,
    ) -> LintResult:
        """Lint source text.

        Args:
            source: Source text
            filename: Name used in diagnostics; selects the grammar unless
                ``language`` is given
            language: Grammar override

        Returns:
            LintResult with diagnostics sorted by position
        """
        language = language if language is not None else language_for(filename)
        if language is None:
            logger.warning("Skipping %s: unsupported file type", filename)
            return LintResult(filename, (ErrorTemplate.source_unsupported(filename),))
        limit = self._config.max_source_size
        if len(source) > limit:
            logger.warning(
                "Skipping %s: %d characters exceeds limit of %d", filename, len(source), limit
            )
            return LintResult(
                filename, (ErrorTemplate.source_too_large(filename, len(source), limit),)
            )

        source_file = SourceFile(filename=filename, text=source, language=language)
        contexts = [rule.new_context(source_file) for rule in self._rules]
        if language is SourceLanguage.VUE:
            self._lint_component(source_file, contexts)
        else:
            self._lint_script(source_file, contexts)

        diagnostics = sorted(
            (d for context in contexts for d in context.diagnostics), key=LintResult.sort_key
        )
        logger.debug("Linted %s: %d diagnostic(s)", filename, len(diagnostics))
        return LintResult(filename, tuple(diagnostics))

    def lint_file(self, path: str | PathLike[str]) -> LintResult:
        """Read and lint one file (UTF-8)."""
        filename = str(path)
        if language_for(filename) is None:
            logger.warning("Skipping %s: unsupported file type", filename)
            return LintResult(filename, (ErrorTemplate.source_unsupported(filename),))
        try:
            source = read_source(path)
        except SourceError as e:
            logger.warning("%s", e)
            diagnostic = e.diagnostic or ErrorTemplate.source_unreadable(filename, str(e))
            return LintResult(filename, (diagnostic,))
        return self.lint_source(source, filename)

    def lint_paths(self, paths: Iterable[str | PathLike[str]]) -> Iterator[LintResult]:
        """Lint files and directory trees, one result per file.

        Directories are searched recursively for supported extensions,
        skipping hidden directories and ``node_modules``. Files named
        explicitly are always linted.
        """
        for path in paths:
            candidate = Path(path)
            if candidate.is_dir():
                for file_path in _iter_source_files(candidate):
                    yield self.lint_file(file_path)
            else:
                yield self.lint_file(candidate)

    # ========================================================================
    # FILE PASSES
    # ========================================================================

    def _visitor_table(
        self,
        contexts: list[RuleContext],
        select: Callable[[Rule], Mapping[str, RuleHandler]],
    ) -> dict[str, list[NodeHandler]]:
        """Bind each rule's handlers to its context, grouped by node type."""
        table: defaultdict[str, list[NodeHandler]] = defaultdict(list)
        for rule, context in zip(self._rules, contexts, strict=True):
            for node_type, handler in select(rule).items():
                table[node_type].append(partial(handler, context))
        return dict(table)

    def _lint_script(self, source_file: SourceFile, contexts: list[RuleContext]) -> None:
        tree = make_parser(source_file.language).parse(source_file.data)
        if tree.root_node.has_error:
            logger.warning(
                "Syntax errors in %s; checking the recoverable parts", source_file.filename
            )
        walk(tree.root_node, self._visitor_table(contexts, Rule.visitors))

    def _lint_component(self, source_file: SourceFile, contexts: list[RuleContext]) -> None:
        document = VueDocument(source_file.data)
        template_table = self._visitor_table(
            contexts, lambda rule: rule.template_visitors().template
        )
        script_table = self._visitor_table(contexts, lambda rule: rule.template_visitors().script)
        for fragment in document.fragments:
            tree = make_parser(fragment.language).parse(document.buffer(fragment))
            if tree.root_node.has_error:
                logger.debug(
                    "Unparseable %s fragment in %s at byte %d",
                    fragment.kind,
                    source_file.filename,
                    fragment.start,
                )
            table = script_table if fragment.kind is FragmentKind.SCRIPT else template_table
            walk(tree.root_node, table)


def _iter_source_files(root: Path) -> Iterator[Path]:
    for path in sorted(root.rglob("*")):
        relative = path.relative_to(root).parts
        if any(part.startswith(".") or part in _SKIPPED_DIRECTORIES for part in relative[:-1]):
            continue
        if path.is_file() and path.suffix.lower() in EXTENSION_LANGUAGES:
            yield path


def read_source(path: str | PathLike[str]) -> str:
    """Read a source file as UTF-8.

    Raises:
        SourceError: If the file cannot be read or is not valid UTF-8
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceError(ErrorTemplate.source_unreadable(str(path), str(e))) from e
