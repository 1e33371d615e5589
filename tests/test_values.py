"""Unit tests for typed option value coercion and name=value assignments."""

import pytest

from raptor_options.state import OptionState
from raptor_options.types import Option, OptionArea
from raptor_options.uri import OPTION_URI_PREFIX
from raptor_options.values import (
    OptionAreaError,
    OptionValueError,
    UnknownOptionError,
    apply_assignments,
    coerce_option_value,
    parse_option_assignment,
)


class TestCoerce:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("true", 1), ("YES", 1), ("1", 1), ("false", 0), (" no ", 0), ("0", 0)],
    )
    def test_boolean(self, registry, raw, expected):
        value = coerce_option_value(
            Option.NO_NET, raw, registry.catalog, registry.uri_factory
        )
        assert value == expected

    def test_bad_boolean(self, registry):
        with pytest.raises(OptionValueError, match="boolean"):
            coerce_option_value(Option.NO_NET, "maybe", registry.catalog, registry.uri_factory)

    def test_integer(self, registry):
        value = coerce_option_value(
            Option.WWW_TIMEOUT, "30", registry.catalog, registry.uri_factory
        )
        assert value == 30

    def test_bad_integer(self, registry):
        with pytest.raises(OptionValueError, match="integer"):
            coerce_option_value(Option.WWW_TIMEOUT, "soon", registry.catalog, registry.uri_factory)

    def test_string_kept_verbatim(self, registry):
        value = coerce_option_value(
            Option.WWW_HTTP_USER_AGENT, " agent/1.0 ", registry.catalog, registry.uri_factory
        )
        assert value == " agent/1.0 "

    def test_uri(self, registry):
        value = coerce_option_value(
            Option.ATOM_ENTRY_URI, "http://example.org/entry", registry.catalog,
            registry.uri_factory,
        )
        assert str(value) == "http://example.org/entry"

    def test_bad_uri(self, registry):
        with pytest.raises(OptionValueError, match="URI"):
            coerce_option_value(
                Option.ATOM_ENTRY_URI, "not a uri", registry.catalog, registry.uri_factory
            )

    def test_unknown_identity(self, registry):
        with pytest.raises(UnknownOptionError):
            coerce_option_value(99, "1", registry.catalog, registry.uri_factory)


class TestParseAssignment:
    def test_name_value(self, registry):
        assert parse_option_assignment("wwwTimeout=45", OptionArea.PARSER, registry) == (
            Option.WWW_TIMEOUT,
            45,
        )

    def test_bare_boolean_name(self, registry):
        assert parse_option_assignment("noNet", OptionArea.SAX2, registry) == (Option.NO_NET, 1)

    def test_bare_non_boolean_needs_value(self, registry):
        with pytest.raises(OptionValueError, match="needs a value"):
            parse_option_assignment("wwwTimeout", OptionArea.PARSER, registry)

    def test_value_may_contain_equals(self, registry):
        option, value = parse_option_assignment(
            "jsonExtraData=a=b", OptionArea.SERIALIZER, registry
        )
        assert option == Option.JSON_EXTRA_DATA
        assert value == "a=b"

    def test_uri_key(self, registry):
        option, value = parse_option_assignment(
            f"{OPTION_URI_PREFIX}noNet=0", OptionArea.PARSER, registry
        )
        assert option == Option.NO_NET
        assert value == 0

    def test_unknown_name(self, registry):
        with pytest.raises(UnknownOptionError, match="bogus"):
            parse_option_assignment("bogus=1", OptionArea.PARSER, registry)

    def test_wrong_area(self, registry):
        with pytest.raises(OptionAreaError, match="relativeURIs"):
            parse_option_assignment("relativeURIs", OptionArea.XML_WRITER, registry)


class TestApplyAssignments:
    def test_applies_to_state(self, registry):
        state = OptionState(OptionArea.XML_WRITER, registry.catalog)
        options = apply_assignments(state, ["autoIndent", "indentWidth=4"], registry)
        assert options == [Option.WRITER_AUTO_INDENT, Option.WRITER_INDENT_WIDTH]
        assert state.get(Option.WRITER_AUTO_INDENT) == 1
        assert state.get(Option.WRITER_INDENT_WIDTH) == 4

    def test_nothing_applied_on_error(self, registry):
        state = OptionState(OptionArea.XML_WRITER, registry.catalog)
        with pytest.raises(OptionAreaError):
            apply_assignments(state, ["autoIndent", "noNet"], registry)
        assert state.get(Option.WRITER_AUTO_INDENT) == 0
