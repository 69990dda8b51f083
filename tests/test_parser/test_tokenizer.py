"""Tests for template tokenizing."""

import pytest
from templateparser.lib.parser.base import TokenParser
from templateparser.models.dataModel import (
    LiteralSegment,
    ScopeClose,
    ScopeOpen,
    ValueToken,
)


@pytest.fixture
def parser():
    return TokenParser(open_char="[", close_char="]", scope_keyword="with")


def test_literal_only(parser):
    assert parser.parse("Hello there") == [LiteralSegment(text="Hello there")]


@pytest.mark.parametrize("template", ["", None])
def test_empty_template(parser, template):
    assert parser.parse(template) == []


def test_value_token_between_literals(parser):
    assert parser.parse("Hello [Name]!") == [
        LiteralSegment(text="Hello "),
        ValueToken(path=("Name",)),
        LiteralSegment(text="!"),
    ]


def test_adjacent_tokens_have_no_empty_literals(parser):
    segments = parser.parse("[A][B]")
    assert segments == [ValueToken(path=("A",)), ValueToken(path=("B",))]


def test_dotted_path(parser):
    (segment,) = parser.parse("[Contact.Organisation.City]")
    assert segment.path == ("Contact", "Organisation", "City")
    assert segment.format_arg is None
    assert segment.dotted == "Contact.Organisation.City"


def test_scope_tokens(parser):
    assert parser.parse("[with Contact][Name][/with]") == [
        ScopeOpen(name="Contact"),
        ValueToken(path=("Name",)),
        ScopeClose(),
    ]


def test_scope_open_allows_extra_whitespace(parser):
    assert parser.parse("[with \t Contact ]") == [ScopeOpen(name="Contact")]


@pytest.mark.parametrize(
    "body", ["with B extra", 'with B "fmt"', "with B.C", "with\tB  trailing words"]
)
def test_scope_open_ignores_text_after_name(parser, body):
    assert parser.parse(f"[{body}]") == [ScopeOpen(name="B")]


@pytest.mark.parametrize("body", ["with", "with ", "withContact", "With Contact", "with .A"])
def test_not_scope_open(parser, body):
    (segment,) = parser.parse(f"[{body}]")
    assert isinstance(segment, ValueToken)


@pytest.mark.parametrize("body", ["/with ", "/With", "/ with"])
def test_not_scope_close(parser, body):
    (segment,) = parser.parse(f"[{body}]")
    assert isinstance(segment, ValueToken)


def test_format_argument(parser):
    (segment,) = parser.parse('[Today "d MMMM yyyy"]')
    assert segment == ValueToken(path=("Today",), format_arg="d MMMM yyyy")


def test_format_argument_surroundings_ignored(parser):
    (segment,) = parser.parse('[Today junk "yyyy" trailing]')
    assert segment == ValueToken(path=("Today",), format_arg="yyyy")


def test_format_argument_directly_after_path(parser):
    (segment,) = parser.parse('[Today"yyyy"]')
    assert segment == ValueToken(path=("Today",), format_arg="yyyy")


def test_unterminated_format_argument_runs_to_end(parser):
    (segment,) = parser.parse('[Today "d MMM]')
    assert segment.format_arg == "d MMM"


def test_empty_format_argument(parser):
    (segment,) = parser.parse('[Today ""]')
    assert segment.format_arg == ""


@pytest.mark.parametrize("template", ["a[]b", "a[   ]b", 'a[ "fmt"]b'])
def test_blank_tokens_are_dropped(parser, template):
    assert parser.parse(template) == [LiteralSegment(text="ab")]


def test_unterminated_token_is_literal(parser):
    assert parser.parse("Hello [Name] and [unterminated") == [
        LiteralSegment(text="Hello "),
        ValueToken(path=("Name",)),
        LiteralSegment(text=" and [unterminated"),
    ]


def test_open_delimiter_inside_token_is_literal(parser):
    assert parser.parse("Price [USD [Amount]") == [
        LiteralSegment(text="Price [USD "),
        ValueToken(path=("Amount",)),
    ]


def test_stray_close_delimiter_is_literal(parser):
    assert parser.parse("a ] b [Name]") == [
        LiteralSegment(text="a ] b "),
        ValueToken(path=("Name",)),
    ]


def test_settings_supply_defaults():
    parser = TokenParser()
    assert (parser.open_char, parser.close_char, parser.scope_keyword) == ("[", "]", "with")
    assert parser.scope_close == "/with"


def test_custom_keyword():
    parser = TokenParser(scope_keyword="in")
    assert parser.parse("[in Contact][/in]") == [ScopeOpen(name="Contact"), ScopeClose()]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"open_char": ""},
        {"close_char": "]]"},
        {"open_char": "|", "close_char": "|"},
        {"scope_keyword": ""},
        {"scope_keyword": "with in"},
    ],
)
def test_invalid_configuration(kwargs):
    with pytest.raises(ValueError):
        TokenParser(**kwargs)
