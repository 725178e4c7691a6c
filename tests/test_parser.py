"""Tests for the field specification parser."""

import pytest
from pydantic import ValidationError

from fieldspec.models.field_info import Component
from fieldspec.models.parse_result import Diagnostic
from fieldspec.parser import (
    FieldSpecParser,
    normalize_string,
    parse_field_spec,
    parse_form,
    string_to_boolean,
)


class TestComponentResolution:
    """Tests for resolving the control type and its arguments."""

    @pytest.mark.parametrize(
        "spec,component,arguments",
        [
            ("text", Component.TEXT, None),
            ("textarea required", Component.TEXTAREA, None),
            ("select('a', 'b')", Component.SELECT, ("a", "b")),
            ("checkbox()", Component.CHECKBOX, ()),
            ("label('x') text(\"y\")", Component.TEXT, ("y",)),
        ],
    )
    def test_single_component(self, spec, component, arguments):
        """Test one control type with its quote-stripped arguments."""
        metadata = parse_field_spec(spec).metadata
        assert metadata.component is component
        assert metadata.arguments == arguments

    def test_unknown_component(self):
        """Test a specification without a control type."""
        metadata = parse_field_spec("number label('Age') required").metadata
        assert metadata.component is None
        assert metadata.arguments is None
        assert metadata.label == "Age"
        assert metadata.required is True

    def test_first_component_wins(self):
        """Test the first control type in source order is chosen."""
        assert parse_field_spec("text textarea").metadata.component is Component.TEXT
        assert parse_field_spec("checkbox select('a')").metadata.component is Component.CHECKBOX

    def test_arguments_from_last_token_with_resolved_name(self):
        """Test the arguments come from the last token named like the first component."""
        metadata = parse_field_spec("text('a') select('b') text('c')").metadata
        assert metadata.component is Component.TEXT
        assert metadata.arguments == ("c",)

    def test_first_match_and_last_write_together(self):
        """Test duplicated component and flag tokens in one specification."""
        result = parse_field_spec("select('x') text label('A') select('y', 'z') label('B')")
        assert result.metadata.component is Component.SELECT
        assert result.metadata.arguments == ("y", "z")
        assert result.metadata.label == "B"
        assert result.diagnostics == []


class TestMetadata:
    """Tests for the metadata builder."""

    def test_text_with_default_and_required(self):
        """Test a typical text field."""
        result = parse_field_spec("text default('English') required")
        metadata = result.metadata
        assert metadata.component is Component.TEXT
        assert metadata.arguments is None
        assert metadata.label is None
        assert metadata.required is True
        assert metadata.default == "English"
        assert result.diagnostics == []

    def test_required_defaults_to_false(self):
        """Test required is off unless asked for."""
        assert parse_field_spec("text").metadata.required is False

    def test_duplicate_label_last_wins(self):
        """Test later flag tokens overwrite earlier ones."""
        assert parse_field_spec("text label('A') label('B')").metadata.label == "B"

    def test_not_required_wins(self):
        """Test not-required overrides required in either order."""
        assert parse_field_spec("text required not-required").metadata.required is False
        assert parse_field_spec("text not-required required").metadata.required is False

    def test_label_and_description(self):
        """Test label and description are trimmed and unquoted."""
        metadata = parse_field_spec("textarea label(' Name ') description(\"Help text\")").metadata
        assert metadata.label == "Name"
        assert metadata.description == "Help text"

    def test_label_takes_first_argument(self):
        """Test only the first argument of a flag is used."""
        assert parse_field_spec("text label('A', 'B')").metadata.label == "A"

    def test_comma_inside_quoted_label(self):
        """Test a quoted comma stays part of the value."""
        assert parse_field_spec("text label('a,b')").metadata.label == "a,b"

    def test_comma_inside_quoted_option(self):
        """Test select options may contain commas when quoted."""
        metadata = parse_field_spec("select('Paris, FR', 'Rome, IT')").metadata
        assert metadata.arguments == ("Paris, FR", "Rome, IT")

    def test_nested_quotes(self):
        """Test flag values lose one more layer of quotes than arguments."""
        metadata = parse_field_spec("text label(\"'A'\")").metadata
        assert metadata.label == "A"

    def test_flags_without_value(self):
        """Test flags without arguments leave the field absent."""
        metadata = parse_field_spec("text label label() description default").metadata
        assert metadata.label is None
        assert metadata.description is None
        assert metadata.default is None

    def test_text_default_not_coerced(self):
        """Test boolean words stay strings outside checkboxes."""
        assert parse_field_spec("text default(true)").metadata.default == "true"

    def test_empty_spec(self):
        """Test an empty specification."""
        result = parse_field_spec("")
        assert result.metadata.component is None
        assert result.metadata.required is False
        assert result.diagnostics == []


class TestSelect:
    """Tests for select fields."""

    def test_select_without_arguments(self):
        """Test the missing arguments diagnostic."""
        result = parse_field_spec("select required")
        assert result.metadata.component is Component.SELECT
        assert result.metadata.arguments is None
        assert result.metadata.required is True
        assert result.diagnostics == [Diagnostic(title="select", message="Requires arguments")]

    def test_select_with_arguments(self):
        """Test no diagnostic when options are given."""
        result = parse_field_spec("select('a')")
        assert result.metadata.arguments == ("a",)
        assert result.is_valid

    def test_select_with_empty_parentheses(self):
        """Test empty parentheses count as arguments present."""
        result = parse_field_spec("select()")
        assert result.metadata.arguments == ()
        assert result.is_valid


class TestCheckbox:
    """Tests for checkbox fields."""

    def test_default_coerced(self):
        """Test the default becomes a bool."""
        result = parse_field_spec("checkbox default('true')")
        assert result.metadata.component is Component.CHECKBOX
        assert result.metadata.required is False
        assert result.metadata.default is True
        assert result.diagnostics == []

    def test_false_default(self):
        """Test false words are recognized case-insensitively."""
        assert parse_field_spec("checkbox default('FALSE')").metadata.default is False
        assert parse_field_spec("checkbox default(yes)").metadata.default is True

    def test_never_required(self):
        """Test a required token is ignored."""
        assert parse_field_spec("checkbox required").metadata.required is False

    def test_no_default(self):
        """Test the default stays absent when not given."""
        assert parse_field_spec("checkbox").metadata.default is None

    def test_unrecognized_default(self):
        """Test an unreadable default becomes False with a diagnostic."""
        result = parse_field_spec("checkbox default('maybe')")
        assert result.metadata.default is False
        assert result.diagnostics == [
            Diagnostic(title="checkbox", message="Default value 'maybe' is not a boolean")
        ]


class TestParserInstance:
    """Tests for parser instance behavior."""

    def test_views(self):
        """Test the ordered view keeps duplicates, the map keeps the last."""
        parser = FieldSpecParser("text label('A') label('B')")
        assert [t.name for t in parser.tokens] == ["text", "label", "label"]
        assert parser.token_map["label"] == ("B",)
        assert parser.token_map["text"] is None

    def test_token_map_read_only(self):
        """Test the map cannot be modified."""
        parser = FieldSpecParser("text")
        with pytest.raises(TypeError):
            parser.token_map["text"] = ("x",)

    def test_get_data_once(self):
        """Test building metadata again does not repeat diagnostics."""
        parser = FieldSpecParser("select")
        first = parser.get_data()
        second = parser.get_data()
        assert first == second
        assert len(parser.errors) == 1

    def test_metadata_not_shared_for_writing(self):
        """Test callers cannot change the record the parser owns."""
        parser = FieldSpecParser("select")
        result = parser.parse()
        with pytest.raises(ValidationError):
            result.metadata.label = "changed"
        assert parser.get_data().label is None
        assert parser.parse().metadata == result.metadata

    def test_errors_is_a_copy(self):
        """Test callers cannot modify the diagnostics list."""
        parser = FieldSpecParser("select")
        parser.get_data()
        parser.errors.clear()
        assert len(parser.errors) == 1

    def test_add_error(self):
        """Test diagnostics are appended in order."""
        parser = FieldSpecParser("text")
        parser.add_error("text", "first")
        parser.add_error("text", "second")
        assert [e.message for e in parser.errors] == ["first", "second"]

    def test_idempotent_across_instances(self):
        """Test fresh parsers give identical results for the same input."""
        spec = "select label('Pick') required not-required"
        first = parse_field_spec(spec)
        second = parse_field_spec(spec)
        assert first.metadata == second.metadata
        assert first.diagnostics == second.diagnostics
        assert len(second.diagnostics) == 1

    def test_rejects_non_string(self):
        """Test non-string input is a programming error."""
        with pytest.raises(TypeError):
            FieldSpecParser(None)


class TestHelpers:
    """Tests for helper functions."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("true", True),
            (" TRUE ", True),
            ("yes", True),
            ("on", True),
            ("1", True),
            ("false", False),
            ("No", False),
            ("off", False),
            ("0", False),
            ("", False),
            ("maybe", None),
        ],
    )
    def test_string_to_boolean(self, value, expected):
        """Test the canonical boolean words."""
        assert string_to_boolean(value) is expected

    def test_normalize_string(self):
        """Test normalization of flag arguments."""
        assert normalize_string(None) is None
        assert normalize_string(()) is None
        assert normalize_string((" 'a' ", "b")) == "a"


class TestParseForm:
    """Tests for parsing a whole form."""

    def test_parse_form(self):
        """Test each field is parsed and order is kept."""
        results = parse_form({
            "language": "text default('English')",
            "country": "select",
            "agree": "checkbox default('true')",
        })
        assert list(results) == ["language", "country", "agree"]
        assert results["language"].metadata.default == "English"
        assert not results["country"].is_valid
        assert results["agree"].metadata.default is True

    def test_empty_form(self):
        """Test an empty form definition."""
        assert parse_form({}) == {}
