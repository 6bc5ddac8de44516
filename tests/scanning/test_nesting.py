"""Tests for block nesting and active loop depth."""

import pytest

from snippet_insight.scanning.nesting import (
    NestingReport,
    indent_nesting,
    max_block_nesting,
    max_loop_depth,
    track_nesting,
)

TRIPLE_LOOP = "for(a){for(b){for(c){}}}"


class TestBraceNesting:
    """Brace mode: {} scopes and loop-body scopes."""

    def test_triple_loop(self):
        assert track_nesting(TRIPLE_LOOP) == NestingReport(max_nesting_depth=3, max_loop_depth=3)

    def test_enclosing_block_adds_exactly_one(self):
        """Wrapping in a non-loop block raises nesting by one, loop depth not at all."""
        wrapped = track_nesting("function w(){" + TRIPLE_LOOP + "}")
        assert wrapped.max_nesting_depth == 4
        assert wrapped.max_loop_depth == 3

    def test_braceless_loop_gets_no_scope(self):
        text = "for (i = 0; i < n; i++) x++;\n{ y(); }"
        assert max_loop_depth(text) == 0
        assert max_block_nesting(text) == 1

    def test_do_while_tail_does_not_open_a_scope(self):
        assert max_loop_depth("do { x(); } while (y);\n{ z(); }") == 1

    def test_sibling_loops_do_not_stack(self):
        assert max_loop_depth("for(a){}\nfor(b){}\nwhile(c){}") == 1

    def test_non_loop_block_between_loops(self):
        text = "for (a) { if (b) { while (c) { } } }"
        assert track_nesting(text) == NestingReport(max_nesting_depth=3, max_loop_depth=2)

    def test_stray_closing_braces_never_go_negative(self):
        assert max_block_nesting("}}{") == 1
        assert max_loop_depth("}} for (a) { }") == 1

    def test_empty_text(self):
        assert track_nesting("") == NestingReport()


class TestIndentNesting:
    """Indent mode: colon-opened blocks."""

    def test_nested_python_loops(self):
        text = "for x in xs:\n    for y in ys:\n        if x == y:\n            print(x)\n"
        assert indent_nesting(text) == NestingReport(max_nesting_depth=3, max_loop_depth=2)

    def test_dedent_closes_blocks(self):
        text = "def f():\n    if a:\n        pass\ndef g():\n    pass\n"
        assert indent_nesting(text) == NestingReport(max_nesting_depth=2, max_loop_depth=0)

    def test_blank_lines_do_not_close_blocks(self):
        text = "while a:\n\n    for b in c:\n        pass\n"
        assert indent_nesting(text).max_loop_depth == 2

    def test_track_nesting_indent_mode(self):
        assert track_nesting("while a:\n    pass\n", mode="indent").max_loop_depth == 1


def test_unknown_mode_rejected():
    with pytest.raises(ValueError):
        track_nesting("{}", mode="xml")
