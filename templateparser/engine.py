"""
Template engine entry point.

Combines the token parser and the scope-aware renderer behind a single
`apply` call:

    template string -> TokenParser -> segments -> TemplateRenderer -> text

Template syntax:
    [Name]                          member of the current context
    [Contact.Organisation.City]     dotted path from the current context
    [Today "d MMMM yyyy"]           value with a format argument
    [with Contact] ... [/with]      resolve enclosed tokens against Contact

Examples:
    >>> engine = TemplateEngine()
    >>> engine.apply("Hello [Name]", {"Name": "John"})
    'Hello John'
    >>> template_apply("[with Contact][FirstName][/with]", {"Contact": {"FirstName": "Jo"}})
    'Jo'

Note:
    `apply` never raises for malformed templates or missing data; missing
    properties render as nothing and malformed tokens are kept as text or
    ignored.
"""

from typing import Any, Final, Self, Sequence
from templateparser.lib.log import LOG
from templateparser.lib.parser.base import TokenParser
from templateparser.lib.parser.resolvers import MemberResolver
from templateparser.lib.render import TemplateRenderer
from templateparser.models.dataModel import Segment

__version__: Final[str] = "0.1.0"


class TemplateEngine:
    """Parses and renders bracketed templates.

    An engine holds configuration only, so one instance can serve any
    number of concurrent `apply` calls.

    Attributes:
        parser: Tokenizer for template text
        renderer: Scope-aware renderer for parsed segments
    """

    def __init__(
        self: Self,
        parser: TokenParser | None = None,
        resolver: MemberResolver | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            parser: Tokenizer to use; defaults to one configured from settings
            resolver: Member lookup strategy; defaults to DataSourceResolver
        """
        self.parser: TokenParser = parser or TokenParser()
        self.renderer: TemplateRenderer = TemplateRenderer(resolver)

    def parse(self: Self, template: str | None) -> list[Segment]:
        return self.parser.parse(template)

    def render(self: Self, segments: Sequence[Segment], data_source: Any) -> str:
        return self.renderer.render(segments, data_source)

    def apply(self: Self, template: str | None, data_source: Any) -> str:
        """Render a template against a data source.

        Args:
            template: Template text; None or empty renders as ""
            data_source: Root object, mapping or other value whose members
                the template's tokens name

        Returns:
            The rendered text, or "" if rendering failed unexpectedly
        """
        try:
            if not template:
                return ""

            segments: list[Segment] = self.parse(template)
            return self.render(segments, data_source)
        except Exception as e:
            LOG(f"Error in apply: {e}")
            return ""


_default_engine: TemplateEngine | None = None


def template_apply(template: str | None, data_source: Any) -> str:
    """
    Render a template with a shared default engine.

    :param template: Template text.
    :param data_source: Root object whose members the tokens name.
    :return: The rendered text.
    """
    global _default_engine
    if _default_engine is None:
        _default_engine = TemplateEngine()
    return _default_engine.apply(template, data_source)
