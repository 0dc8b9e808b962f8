"""Tests for literal and comment extraction."""

from msfmt.formatting.extraction import (
    extract_comments,
    extract_literals,
    render_comment,
    restore_comments,
    restore_literals,
)


class TestLiterals:

    def test_literals_replaced_by_markers(self):
        code, literals = extract_literals('a = "x" + "y"')
        assert code == 'a = "$0" + "$1"'
        assert literals == ['"x"', '"y"']

    def test_doubled_quote_is_escaped(self):
        code, literals = extract_literals('s = "a""b"')
        assert code == 's = "$0"'
        assert literals == ['"a""b"']

    def test_empty_string(self):
        code, literals = extract_literals('s = ""')
        assert code == 's = "$0"'
        assert literals == ['""']

    def test_unterminated_string_runs_to_end(self):
        code, literals = extract_literals('s = "abc\nd = 1')
        assert code == 's = "$0"'
        assert literals == ['"abc\nd = 1']

    def test_comment_markers_inside_strings_are_hidden(self):
        code, literals = extract_literals('url = "http://x"')
        assert "//" not in code
        assert restore_literals(code, literals) == 'url = "http://x"'

    def test_no_literals(self):
        assert extract_literals("a = 1") == ("a = 1", [])


class TestComments:

    def test_body_replaced_by_marker(self):
        code, comments = extract_comments("a = 1 // note\nb = 2")
        assert code == "a = 1 //$0\nb = 2"
        assert comments == [" note"]

    def test_bodies_are_right_trimmed(self):
        _, comments = extract_comments("//  spaced   ")
        assert comments == ["  spaced"]

    def test_empty_trailing_comment_left_in_place(self):
        code, comments = extract_comments("func //   ")
        assert code == "func //   "
        assert comments == []

    def test_empty_comment_line_is_kept(self):
        code, comments = extract_comments("  //")
        assert code == "  //$0"
        assert comments == [""]

    def test_crlf_normalized(self):
        code, _ = extract_comments("a\r\n// x\r\n")
        assert code == "a\n//$0\n"

    def test_only_first_double_slash_opens_comment(self):
        code, comments = extract_comments("a // b // c")
        assert code == "a //$0"
        assert comments == [" b // c"]


class TestRendering:

    def test_space_added(self):
        assert render_comment("note") == "// note"

    def test_existing_whitespace_kept(self):
        assert render_comment("  note") == "//  note"
        assert render_comment("\tnote") == "//\tnote"

    def test_empty_body(self):
        assert render_comment("") == "//"

    def test_extra_slash_stays_attached(self):
        assert render_comment("/doc") == "/// doc"
        assert render_comment("/ doc") == "/// doc"
        assert render_comment("/") == "///"

    def test_restore_comments(self):
        assert restore_comments("a //$1\n//$0", ["first", " second"]) == "a // second\n// first"

    def test_restore_literals(self):
        assert restore_literals('f "$0", "$1"', ['"a"', '"$0"']) == 'f "a", "$0"'
