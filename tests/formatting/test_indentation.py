"""Tests for the indentation engine."""

from msfmt.formatting.indentation import IndentConfig, Indenter, process_indentation
from msfmt.formatting.lines import CodeLine


def _indent(*codes, config=None):
    lines = [CodeLine(code=code) for code in codes]
    process_indentation(lines, config)
    return [line.indentation for line in lines]


class TestBlocks:

    def test_simple_block(self):
        assert _indent("while a", "b", "end while") == ["", "    ", ""]

    def test_function_assignment(self):
        assert _indent("f = function(x)", "return x", "end function") == ["", "    ", ""]

    def test_function_in_argument_list(self):
        assert _indent("map function(x)", "return x", "end function") == ["", "    ", ""]

    def test_function_name_prefix_is_not_a_block(self):
        assert _indent("myfunction x", "b") == ["", ""]

    def test_if_chain(self):
        assert _indent("if a then", "b", "else", "c", "end if") == ["", "    ", "", "    ", ""]

    def test_single_line_if(self):
        assert _indent("if a then b", "c") == ["", ""]

    def test_nested(self):
        indents = _indent("for i in x", "if i then", "y", "end if", "end for")
        assert indents == ["", "    ", "        ", "    ", ""]

    def test_missing_end(self):
        assert _indent("if a then", "b") == ["", "    "]
        assert _indent("for i in x") == [""]


class TestContinuations:

    def test_operator_continuation(self):
        assert _indent("a +", "b", "c") == ["", "  ", ""]

    def test_bracket_continuation(self):
        assert _indent("x = [", "1,", "2", "]", "y") == ["", "  ", "  ", "", ""]

    def test_nested_brackets(self):
        indents = _indent("x = [", "[1,", "2],", "]")
        assert indents == ["", "  ", "    ", ""]

    def test_continuation_inside_block(self):
        assert _indent("while a", "x = [", "1", "]", "end while") == ["", "    ", "      ", "    ", ""]

    def test_custom_config(self):
        config = IndentConfig(block_indent="\t", multiline_indent=" ")
        assert _indent("if a then", "b +", "c", "end if", config=config) == ["", "\t", "\t ", ""]


class TestIndenter:

    def test_counts_unmatched_closers(self):
        lines = [CodeLine(code="x = [1,"), CodeLine(code="2]]"), CodeLine(code="y")]
        indenter = Indenter(lines)
        indenter.run()
        assert indenter.unmatched_closers == 1
        assert [line.indentation for line in lines] == ["", "  ", ""]

    def test_default_config(self):
        assert Indenter([]).config == IndentConfig("    ", "  ")
