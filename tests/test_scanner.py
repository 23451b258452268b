"""Tests for the line-oriented statement scanner."""

from logsweep.config import SweepConfig
from logsweep.scanner import (
    ScanState,
    find_matches,
    remove_matches,
    scan_line,
    truncate_statement,
)


def matches(text, config):
    return list(find_matches(text.encode("utf-8"), config))


class TestSingleLineCalls:
    """Calls whose parentheses balance on the line they start."""

    def test_nested_call_removed_as_one_statement(self, config):
        content = b'const a = 1;\nconsole.log("a", f(1,2));\nconst b = 2;\n'

        result = remove_matches(content, config)

        assert result.changed
        assert result.content == b"const a = 1;\nconst b = 2;\n"
        assert result.removed_statements == 1
        assert result.removed_lines == 1

    def test_reported_with_trimmed_text(self, config):
        found = matches('if (x) {\n    console.log("a", f(1,2));\n}\n', config)

        assert len(found) == 1
        assert found[0].start_line == 2
        assert found[0].end_line == 2
        assert found[0].text == 'console.log("a", f(1,2));'
        assert found[0].span_label == "Line 2"

    def test_several_calls_in_order(self, config):
        found = matches("console.log(1);\nfoo();\nconsole.log(2);\n", config)

        assert [(m.start_line, m.text) for m in found] == [
            (1, "console.log(1);"),
            (3, "console.log(2);"),
        ]


class TestMultiLineCalls:
    """Calls that span lines are reconstructed from start to end."""

    SOURCE = (
        "function f(x) {\n"
        "  console.log(\n"
        '    "value:", x\n'
        "  );\n"
        "  return x;\n"
        "}\n"
    )

    def test_detected_as_one_statement(self, config):
        found = matches(self.SOURCE, config)

        assert len(found) == 1
        assert found[0].start_line == 2
        assert found[0].end_line == 4
        assert found[0].is_multiline
        assert found[0].span_label == "Lines 2-4"
        assert found[0].text == '  console.log(\n    "value:", x\n  );'

    def test_removed_without_blank_lines(self, config):
        result = remove_matches(self.SOURCE.encode("utf-8"), config)

        assert result.changed
        assert result.content == b"function f(x) {\n  return x;\n}\n"
        assert result.removed_lines == 3

    def test_comment_lines_inside_call_belong_to_call(self, config):
        source = "console.log(\n  // note\n  x\n);\nkeep();\n"

        assert remove_matches(source.encode("utf-8"), config).content == b"keep();\n"
        assert [(m.start_line, m.end_line) for m in matches(source, config)] == [(1, 4)]

    def test_bare_reference_keeps_following_code(self, config):
        source = "const log = console.log;\nsetup();\nrun(1);\nfinish();\n"

        result = remove_matches(source.encode("utf-8"), config)

        assert not result.changed
        assert result.content == source.encode("utf-8")
        assert matches(source, config) == []

    def test_markdown_mention_is_kept(self, config):
        source = "Use `console.log` while debugging.\n\n```js\nrender(app);\n```\n"

        assert not remove_matches(source.encode("utf-8"), config).changed
        assert matches(source, config) == []

    def test_parenthesis_on_following_line_is_not_a_call(self, config):
        source = 'console.log\n("x");\nnext();\n'

        assert matches(source, config) == []
        assert not remove_matches(source.encode("utf-8"), config).changed

    def test_stray_close_paren_ends_call_at_zero(self, config):
        source = "console.log(\n) ) (\n)\nkeep();\n"

        found = matches(source, config)

        assert [(m.start_line, m.end_line) for m in found] == [(1, 2)]
        assert remove_matches(source.encode("utf-8"), config).content == b")\nkeep();\n"

    def test_depth_must_return_to_zero(self, config):
        source = "console.log((\n)\n)\nkeep();\n"

        found = matches(source, config)

        assert [(m.start_line, m.end_line) for m in found] == [(1, 3)]
        assert remove_matches(source.encode("utf-8"), config).content == b"keep();\n"

    def test_unbalanced_call_consumes_rest_of_file(self, config):
        source = "keep();\nconsole.log((\nlost();\nconsole.log(1);\n"

        result = remove_matches(source.encode("utf-8"), config)

        assert result.changed
        assert result.content == b"keep();"
        assert matches(source, config) == []


class TestComments:
    """Calls inside comments are never matched."""

    def test_comment_reopened_after_inline_comment(self, config):
        source = "/* a */ x(); /* b\nconsole.log(1);\n*/\nkeep();\n"

        assert matches(source, config) == []
        assert not remove_matches(source.encode("utf-8"), config).changed

    def test_comment_reopened_on_terminator_line(self, config):
        source = "/* start\n*/ x(); /* more\nconsole.log(1);\n*/\nconsole.log(2);\n"

        found = matches(source, config)

        assert [m.start_line for m in found] == [5]
        assert remove_matches(source.encode("utf-8"), config).content == (
            b"/* start\n*/ x(); /* more\nconsole.log(1);\n*/\n"
        )

    def test_line_comment_at_start(self, config):
        source = "// console.log(x)\n"

        assert matches(source, config) == []
        assert not remove_matches(source.encode("utf-8"), config).changed

    def test_line_comment_before_call(self, config):
        source = "let a = 1; // console.log(a)\n"

        assert matches(source, config) == []
        assert not remove_matches(source.encode("utf-8"), config).changed

    def test_block_comment_spanning_lines(self, config):
        source = "/*\nconsole.log(x);\n*/\nconsole.log(y);\n"

        found = matches(source, config)

        assert [(m.start_line, m.text) for m in found] == [(4, "console.log(y);")]
        assert remove_matches(source.encode("utf-8"), config).content == b"/*\nconsole.log(x);\n*/\n"

    def test_single_line_block_comment_does_not_swallow_following_lines(self, config):
        source = "/* console.log(x) */\nconsole.log(z);\n"

        found = matches(source, config)

        assert [(m.start_line, m.text) for m in found] == [(2, "console.log(z);")]

    def test_terminator_line_is_not_searched(self, config):
        source = "/* start\nend */ console.log(x);\nconsole.log(y);\n"

        assert [m.start_line for m in matches(source, config)] == [3]

    def test_opener_line_is_not_searched(self, config):
        source = "console.log(x); /* trailing\n*/\n"

        assert matches(source, config) == []


class TestRemoveMode:
    """Properties of the transformed content."""

    def test_no_match_is_unchanged(self, config):
        content = b"const a = 1;\nlogger.info('x');\n"

        result = remove_matches(content, config)

        assert not result.changed
        assert result.content is content

    def test_second_pass_is_idempotent(self, config):
        content = (
            b"a();\nconsole.log(1);\nconsole.log(\n  2\n);\n"
            b"/* console.log(3) */\n// console.log(4)\nb();\n"
        )

        first = remove_matches(content, config)
        second = remove_matches(first.content, config)

        assert first.changed
        assert not second.changed
        assert second.content == first.content

    def test_carriage_returns_preserved(self, config):
        content = b"a\r\nconsole.log(1);\r\nb\r\n"

        assert remove_matches(content, config).content == b"a\r\nb\r\n"

    def test_non_utf8_bytes_survive(self, config):
        content = b"\xff\xfe = 1;\nconsole.log(1);\n"

        assert remove_matches(content, config).content == b"\xff\xfe = 1;\n"

    def test_similar_names_are_matched_literally(self, config):
        # console.logger contains the target text
        result = remove_matches(b"console.logger.info(1);\nconsole.error(2);\n", config)

        assert result.content == b"console.error(2);\n"


class TestTruncation:
    """Reported statements are capped at 500 characters."""

    def test_long_single_line_statement(self, config):
        line = 'console.log("' + "a" * 600 + '");'

        found = matches(line + "\n", config)

        assert len(found[0].text) == 500
        assert found[0].text.endswith("...")
        assert found[0].text[:497] == line[:497]

    def test_long_multi_line_statement(self, config):
        source = "console.log(\n" + ("'x' +\n" * 200) + "'y'\n);\n"

        found = matches(source, config)

        assert len(found[0].text) == 500
        assert found[0].text.endswith("...")

    def test_exact_limit_kept_whole(self, config):
        text = "b" * 500

        assert truncate_statement(text, config) == text

    def test_custom_limit(self):
        config = SweepConfig(max_statement_length=10)

        assert truncate_statement("0123456789AB", config) == "0123456..."


class TestScanLine:
    """scan_line is a pure step function."""

    def test_does_not_mutate_input_state(self, config):
        state = ScanState()

        new_state, outcome = scan_line(state, "console.log(", 4, config)

        assert state == ScanState()
        assert new_state.in_call
        assert new_state.paren_depth == 1
        assert new_state.match_start == 4
        assert new_state.accumulated == ("console.log(",)
        assert not outcome.keep
        assert outcome.match is None

    def test_closing_line_emits_record_and_resets(self, config):
        state = ScanState(in_call=True, paren_depth=1, match_start=0, accumulated=("console.log(",))

        new_state, outcome = scan_line(state, "  x);", 1, config)

        assert new_state == ScanState()
        assert outcome.match.start_line == 1
        assert outcome.match.end_line == 2
        assert outcome.match.text == "console.log(\n  x);"

    def test_block_comment_and_call_are_exclusive(self, config):
        state, _ = scan_line(ScanState(), "/* open", 0, config)
        assert state.in_block_comment and not state.in_call

        state, outcome = scan_line(state, "console.log(", 1, config)
        assert state.in_block_comment and not state.in_call
        assert outcome.keep

    def test_other_target_call(self):
        config = SweepConfig(target_call="debugger.trace")

        result = remove_matches(b"debugger.trace(1);\nconsole.log(2);\n", config)

        assert result.content == b"console.log(2);\n"
