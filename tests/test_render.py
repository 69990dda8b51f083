"""Tests for the scope-aware renderer."""

from datetime import date
from types import SimpleNamespace as NS
from unittest.mock import Mock, patch

import pytest
from templateparser.lib.parser.resolvers import MappingResolver
from templateparser.lib.render import TemplateRenderer
from templateparser.models.dataModel import (
    LiteralSegment,
    ResolveResult,
    ScopeClose,
    ScopeOpen,
    ValueToken,
)


@pytest.fixture
def renderer():
    return TemplateRenderer()


@pytest.fixture
def source():
    return {
        "Name": "Root",
        "Contact": {
            "Name": "John",
            "Organisation": {"Name": "Acme Ltd", "Address": {"Street": "Main St"}},
        },
    }


def test_literals_and_values(renderer, source):
    segments = [LiteralSegment(text="Hi "), ValueToken(path=("Name",))]
    assert renderer.render(segments, source) == "Hi Root"


def test_nested_scopes_resolve_innermost(renderer, source):
    segments = [
        ScopeOpen(name="Contact"),
        ScopeOpen(name="Organisation"),
        ValueToken(path=("Name",)),
        LiteralSegment(text=" / "),
        ValueToken(path=("Address", "Street")),
        ScopeClose(),
        LiteralSegment(text=" / "),
        ValueToken(path=("Name",)),
        ScopeClose(),
        LiteralSegment(text=" / "),
        ValueToken(path=("Name",)),
    ]
    assert renderer.render(segments, source) == "Acme Ltd / Main St / John / Root"


def test_values_resolve_against_top_context_only(renderer, source):
    segments = [ScopeOpen(name="Contact"), ValueToken(path=("Contact", "Name"))]
    assert renderer.render(segments, source) == ""


def test_scope_names_resolve_against_top_context_only(renderer, source):
    segments = [
        ScopeOpen(name="Contact"),
        ScopeOpen(name="Contact"),
        ValueToken(path=("Name",)),
        ScopeClose(),
        ValueToken(path=("Name",)),
    ]
    assert renderer.render(segments, source) == "John"


def test_root_is_never_popped(renderer, source):
    segments = [ScopeClose(), ScopeClose(), ValueToken(path=("Name",))]
    assert renderer.render(segments, source) == "Root"


def test_format_argument_passed_through(renderer):
    segments = [ValueToken(path=("Born",), format_arg="yyyy-MM-dd")]
    assert renderer.render(segments, NS(Born=date(1990, 12, 1))) == "1990-12-01"


def test_none_member_renders_empty(renderer):
    assert renderer.render([ValueToken(path=("Name",))], {"Name": None}) == ""


def test_custom_resolver_is_used():
    resolver = Mock()
    resolver.resolve.return_value = ResolveResult(value="v", success=True)
    renderer = TemplateRenderer(resolver=resolver)
    assert renderer.render([ValueToken(path=("Any",))], object()) == "v"


def test_mapping_only_resolver_ignores_attributes():
    renderer = TemplateRenderer(resolver=MappingResolver())
    segments = [ValueToken(path=("Name",)), ValueToken(path=("real",))]
    assert renderer.render(segments, {"Name": "John"}) == "John"
    assert renderer.render(segments, NS(Name="John", real=1)) == ""


def test_tolerated_faults_are_reported(renderer, source):
    segments = [ScopeClose(), ScopeOpen(name="Nobody"), ValueToken(path=("Missing",))]
    with patch("templateparser.lib.render.COMPLAIN") as mock_complain:
        assert renderer.render(segments, source) == ""
    messages = " ".join(call.args[0] for call in mock_complain.call_args_list)
    assert "no open scope" in messages
    assert "Nobody" in messages
    assert "Missing" in messages
    assert "left open" in messages


def test_unresolved_token_warning_names_full_path(renderer, source):
    segments = [ValueToken(path=("Contact", "Organisation", "Phone"))]
    with patch("templateparser.lib.render.COMPLAIN") as mock_complain:
        assert renderer.render(segments, source) == ""
    (message,) = mock_complain.call_args.args
    assert message.startswith("Token 'Contact.Organisation.Phone' rendered empty")
