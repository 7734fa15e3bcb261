"""
Tests for placeholder scanning and variable extraction.
"""

from docfill.tokenizer import TokenScanner, extract_variables


class TestExtractVariables:
    """extract_variables returns unique names in first-occurrence order."""

    def test_text_without_tokens(self):
        assert extract_variables("Dear customer, nothing to fill here.") == []

    def test_empty_and_none(self):
        assert extract_variables("") == []
        assert extract_variables(None) == []

    def test_duplicates_keep_first_occurrence_order(self):
        assert extract_variables("{{a}}{{b}}{{a}}") == ["a", "b"]

    def test_whitespace_is_trimmed(self):
        assert extract_variables("{{ name }}") == ["name"]
        assert extract_variables("{{name}} and {{\tname  }}") == ["name"]

    def test_names_are_case_sensitive(self):
        assert extract_variables("{{Name}} {{name}}") == ["Name", "name"]

    def test_inner_whitespace_is_kept(self):
        assert extract_variables("{{first name}} {{first  name}}") == ["first name", "first  name"]

    def test_whitespace_only_token_is_empty_name(self):
        assert extract_variables("[{{   }}] [{{ }}]") == [""]

    def test_empty_braces_are_not_a_token(self):
        assert extract_variables("{{}}") == []

    def test_unterminated_token(self):
        assert extract_variables("Hello {{name") == []
        assert extract_variables("Hello {{name}") == []

    def test_nested_braces_end_at_first_close(self):
        """The inner text stops at the first "}", leaving the outer "}}" as text."""
        assert extract_variables("{{a{{b}}}}") == ["a{{b"]

    def test_extra_opening_brace(self):
        assert extract_variables("{{{a}}") == ["{a"]

    def test_single_close_brace_inside_skips_candidate(self):
        assert extract_variables("{{a}b}} {{c}}") == ["c"]

    def test_tokens_across_lines(self):
        text = "Name: {{name}}\nDate: {{date}}\nSigned: {{name}}"
        assert extract_variables(text) == ["name", "date"]

    def test_repeated_calls_are_identical(self):
        text = "{{x}} {{y}} {{x}} {{ z }}"
        assert extract_variables(text) == extract_variables(text) == ["x", "y", "z"]


class TestTokenScanner:
    """The scanner exposes token positions and raw inner text."""

    def test_token_offsets_and_raw_text(self):
        tokens = list(TokenScanner("Hi {{ x }}!").tokens())
        assert len(tokens) == 1
        tok = tokens[0]
        assert tok.name == "x"
        assert tok.raw == " x "
        assert (tok.start, tok.end) == (3, 10)

    def test_find_start_and_end(self):
        scanner = TokenScanner("ab{{cd}}ef")
        start = scanner.find_start(0)
        assert start == 2
        end = scanner.find_end(start)
        assert end == 8
        assert scanner.inner_name(start, end) == "cd"

    def test_find_end_rejects_bad_candidates(self):
        assert TokenScanner("{{}}").find_end(0) == -1
        assert TokenScanner("{{a}b").find_end(0) == -1
        assert TokenScanner("{{abc").find_end(0) == -1

    def test_tokens_do_not_overlap(self):
        tokens = list(TokenScanner("{{a}}}{{b}}").tokens())
        assert [t.name for t in tokens] == ["a", "b"]
        assert tokens[0].end <= tokens[1].start
