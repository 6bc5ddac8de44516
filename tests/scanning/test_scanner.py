"""Tests for the construct scanner."""

from snippet_insight.models import Category
from snippet_insight.scanning.languages import HASH_STYLE
from snippet_insight.scanning.normalizer import normalize
from snippet_insight.scanning.scanner import count_by_category, scan_constructs, sort_findings


def _scan(text, syntax=None):
    normalized = normalize(text) if syntax is None else normalize(text, syntax)
    return scan_constructs(normalized, text)


def _labels(findings, category):
    return [f.label for f in findings if f.category is category]


class TestFunctionRules:
    """Function-like constructs, deduplicated by start offset."""

    def test_named_function_counted_once(self):
        """Several function rules match `function foo() {}` but one finding is kept."""
        findings = _scan("function foo() {}")
        assert _labels(findings, Category.FUNCTION) == ["foo"]

    def test_assigned_arrow_function(self):
        findings = _scan("const add = (a, b) => a + b;")
        assert _labels(findings, Category.FUNCTION) == ["add"]

    def test_anonymous_function_uses_rule_name(self):
        findings = _scan("setTimeout(function () { run(); }, 10);")
        assert _labels(findings, Category.FUNCTION) == ["Function (Anon)"]

    def test_assigned_function_expression(self):
        findings = _scan("var handler = function (e) { stop(e); };")
        assert _labels(findings, Category.FUNCTION) == ["handler"]

    def test_python_def(self):
        findings = _scan("def area(w, h):\n    return w * h\n", HASH_STYLE)
        assert _labels(findings, Category.FUNCTION) == ["area"]

    def test_method_with_block(self):
        findings = _scan("int main() {\n  return 0;\n}")
        assert _labels(findings, Category.FUNCTION) == ["main"]

    def test_control_keywords_are_not_methods(self):
        findings = _scan("if (a) { b(); }\nwhile (c) { d(); }\nswitch (e) { }")
        assert _labels(findings, Category.FUNCTION) == []

    def test_function_weight(self):
        (finding,) = _scan("function foo() {}")
        assert finding.weight == 2


class TestConditionalRules:
    """if/else/switch/case/ternary."""

    def test_all_conditional_kinds(self):
        text = "if (a) { x = b ? 1 : 2; } else { switch (x) { case 1: break; default: } }"
        labels = _labels(_scan(text), Category.CONDITIONAL)
        assert sorted(labels) == sorted(["if", "else", "switch", "case 1", "ternary (?)"])

    def test_optional_chaining_and_nullish_are_not_ternaries(self):
        assert _labels(_scan("const v = a?.b ?? c;"), Category.CONDITIONAL) == []

    def test_python_if_and_elif(self):
        text = "if x:\n    pass\nelif y:\n    pass\nelse:\n    pass\n"
        labels = _labels(_scan(text, HASH_STYLE), Category.CONDITIONAL)
        assert sorted(labels) == ["elif", "else", "if"]

    def test_python_one_line_bodies(self):
        text = "def f(xs):\n    if xs: return None\n    else: return 1\n"
        labels = _labels(_scan(text, HASH_STYLE), Category.CONDITIONAL)
        assert labels == ["if", "else"]

    def test_colon_inside_brackets_is_not_the_header_colon(self):
        text = "if d[1:2] == {\"k\": v}: pass\nif f(g(x)):\n    pass\n"
        labels = _labels(_scan(text, HASH_STYLE), Category.CONDITIONAL)
        assert labels == ["if", "if"]

    def test_python_header_without_colon_is_not_counted(self):
        assert _labels(_scan("result = [\n    x\n    if x\n]\n", HASH_STYLE), Category.CONDITIONAL) == []

    def test_conditional_weight(self):
        (finding,) = _scan("if (a) b();")
        assert finding.category is Category.CONDITIONAL
        assert finding.weight == 3


class TestLoopRules:
    """for/while/do-while."""

    def test_brace_loops(self):
        labels = _labels(_scan("while (x) { do { x--; } while (y); }"), Category.LOOP)
        assert sorted(labels) == ["do-while", "while", "while"]

    def test_python_loops_capture_keyword(self):
        text = "for i in range(3):\n    while i:\n        i -= 1\n"
        labels = _labels(_scan(text, HASH_STYLE), Category.LOOP)
        assert labels == ["for", "while"]

    def test_python_one_line_loop_bodies(self):
        text = "for x in xs: print(x)\nwhile n := read(): n -= 1\n"
        labels = _labels(_scan(text, HASH_STYLE), Category.LOOP)
        assert labels == ["for", "while"]

    def test_crlf_line_endings(self):
        text = "for i in range(3):\r\n    if i:\r\n        print(i)\r\n"
        findings = _scan(text, HASH_STYLE)
        assert _labels(findings, Category.LOOP) == ["for"]
        assert _labels(findings, Category.CONDITIONAL) == ["if"]


class TestScanBehavior:
    """Masking, line numbers, ordering."""

    def test_constructs_in_comments_and_strings_ignored(self):
        assert _scan('// for (;;) {}\nconst s = "if (x) {";') == []

    def test_line_numbers_and_sorting(self, js_snippet):
        findings = sort_findings(_scan(js_snippet))
        assert [(f.category, f.line) for f in findings] == [
            (Category.FUNCTION, 2),
            (Category.LOOP, 4),
            (Category.CONDITIONAL, 5),
        ]

    def test_same_line_keeps_discovery_order(self):
        findings = sort_findings(_scan("if (a) { for (;;) {} }"))
        assert [f.label for f in findings] == ["if", "for"]

    def test_count_by_category_has_every_category(self):
        counts = count_by_category([])
        assert counts == {Category.FUNCTION: 0, Category.CONDITIONAL: 0, Category.LOOP: 0}

    def test_repeated_scans_are_identical(self, js_snippet):
        assert _scan(js_snippet) == _scan(js_snippet)
