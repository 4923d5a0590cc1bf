"""Unit tests for YAML value escaping."""

from localrss.yaml_format import escape_yaml_value


class TestEscapeYamlValue:
    """Tests for escape_yaml_value."""

    def test_plain_value_unchanged(self):
        assert escape_yaml_value("Simple title") == "Simple title"

    def test_trimmed(self):
        assert escape_yaml_value("  padded  ") == "padded"

    def test_newlines_become_spaces(self):
        assert escape_yaml_value("line one\nline two\r\nthree") == "line one line two three"

    def test_special_characters_quoted(self):
        for char in "[]{}:>|*&!%@,":
            value = f"a{char}b"
            assert escape_yaml_value(value) == f'"{value}"', char

    def test_quotes_and_backslashes_escaped(self):
        assert escape_yaml_value('Say "hi": C:\\path') == '"Say \\"hi\\": C:\\\\path"'

    def test_quotes_without_special_characters_untouched(self):
        assert escape_yaml_value('He said "hi"') == 'He said "hi"'
