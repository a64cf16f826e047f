"""Tests for Vue single-file components: host/vue.py and component linting.

Python 3.13+.
"""

from __future__ import annotations

from intllint import Linter
from intllint.enums import SourceLanguage
from intllint.host import FragmentKind, VueDocument

COMPONENT = (
    "<template>\n"
    "  <p>{{ $t({defaultMessage: 'Hi {userName}'}) }}</p>\n"
    '  <Comp :title="$formatMessage({defaultMessage: '
    "'{a, plural, other {x}} {b, plural, other {y}}'})\" />\n"
    "  <!-- {{ $t({defaultMessage: 'commented {outName}'}) }} -->\n"
    "  <li v-for=\"item in items\">{{ item }}</li>\n"
    "</template>\n"
    "<script>\n"
    "import {defineMessage} from 'react-intl'\n"
    "export const m = $t({defaultMessage: 'Bye {firstName}'})\n"
    "defineMessage({defaultMessage: 'Hi {lastName}'})\n"
    "</script>\n"
)


class TestVueDocument:
    """Splitting a component into parseable fragments."""

    def test_fragment_kinds(self) -> None:
        document = VueDocument(COMPONENT.encode("utf-8"))
        assert len(document.script_fragments) == 1
        # Two interpolations and one bound attribute; the comment and v-for are skipped
        assert len(document.template_fragments) == 3

    def test_buffer_keeps_offsets_and_lines(self) -> None:
        data = COMPONENT.encode("utf-8")
        document = VueDocument(data)
        for fragment in document.fragments:
            buffer = document.buffer(fragment)
            assert len(buffer) == fragment.end
            assert buffer[fragment.start :] == data[fragment.start : fragment.end]
            assert buffer.count(b"\n") == data[: fragment.end].count(b"\n")
            assert buffer[: fragment.start].strip() == b""

    def test_script_lang(self) -> None:
        document = VueDocument(b'<script setup lang="ts">\nconst a: number = 1\n</script>')
        (fragment,) = document.fragments
        assert fragment.kind is FragmentKind.SCRIPT
        assert fragment.language is SourceLanguage.TYPESCRIPT

    def test_nested_templates_belong_to_root(self) -> None:
        source = b"<template><template v-if=\"ok\">{{ a }}</template>{{ b }}</template>"
        document = VueDocument(source)
        assert len(document.template_fragments) == 3

    def test_no_template(self) -> None:
        assert VueDocument(b"<script>\nx()\n</script>").template_fragments == ()


class TestVueLinting:
    """Components use call visitors only, without import tracking."""

    def test_template_and_script_calls(self) -> None:
        result = Linter().lint_source(COMPONENT, "Comp.vue")
        reported = [(d.rule, d.span.line if d.span else None) for d in result.diagnostics]
        assert reported == [
            ("no-camel-case", 2),
            ("no-multiple-plurals", 3),
            ("no-camel-case", 9),
        ]

    def test_template_positions_match_the_file(self) -> None:
        result = Linter().lint_source(COMPONENT, "Comp.vue")
        first = result.diagnostics[0]
        assert first.span is not None
        assert first.span.column == COMPONENT.splitlines()[1].index("'Hi") + 1
        assert COMPONENT[first.span.start : first.span.end] == "'Hi {userName}'"

    def test_typescript_script_block(self) -> None:
        source = (
            '<script lang="ts">\n'
            "const label: string = $t({defaultMessage: 'Hi {userName}'})\n"
            "</script>\n"
        )
        (diagnostic,) = Linter().lint_source(source, "A.vue").diagnostics
        assert diagnostic.span is not None
        assert diagnostic.span.line == 2
