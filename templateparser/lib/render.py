"""
Scope-aware renderer for parsed templates.

Walks a segment list once, keeping a stack of data contexts:
- literal segments are emitted as-is
- a scope open pushes the named member of the current context
- a scope close pops back to the enclosing context (never past the root)
- a value token is resolved against the current context and formatted

Unresolvable value tokens render as nothing. The context stack lives only
for the duration of one `render` call.
"""

from typing import Any, Self, Sequence
from templateparser.lib.formatting import value_format
from templateparser.lib.log import COMPLAIN
from templateparser.lib.parser.resolvers import (
    DataSourceResolver,
    MemberResolver,
    path_resolve,
)
from templateparser.models.dataModel import (
    LiteralSegment,
    ResolveResult,
    ScopeClose,
    ScopeOpen,
    Segment,
    ValueToken,
)


class TemplateRenderer:
    """Single-pass interpreter over parsed segments.

    Attributes:
        resolver: Strategy used to read named members from the data source
    """

    def __init__(self: Self, resolver: MemberResolver | None = None) -> None:
        self.resolver: MemberResolver = resolver or DataSourceResolver()

    def render(self: Self, segments: Sequence[Segment], data_source: Any) -> str:
        """Render segments against a data source.

        Args:
            segments: Parsed template segments
            data_source: Root context; may be None, in which case every
                value token renders as nothing

        Returns:
            The rendered text
        """
        context_stack: list[Any] = [data_source]
        output: list[str] = []

        for segment in segments:
            if isinstance(segment, LiteralSegment):
                output.append(segment.text)
            elif isinstance(segment, ScopeOpen):
                context_stack.append(self.scope_enter(context_stack[-1], segment.name))
            elif isinstance(segment, ScopeClose):
                if len(context_stack) > 1:
                    context_stack.pop()
                else:
                    COMPLAIN("Ignoring scope close with no open scope")
            elif isinstance(segment, ValueToken):
                output.append(self.value_render(context_stack[-1], segment))

        if len(context_stack) > 1:
            COMPLAIN(f"{len(context_stack) - 1} scope(s) left open at end of template")
        return "".join(output)

    def scope_enter(self: Self, context: Any, name: str) -> Any:
        """Resolve the context a scope opens on.

        The name is looked up in the current context only. A missing member
        still opens a scope, on None, so the matching close stays paired.
        """
        result: ResolveResult = self.resolver.resolve(context, name)
        if not result.success:
            COMPLAIN(f"Scope {name!r} opened on a missing member: {result.error}")
            return None
        return result.value

    def value_render(self: Self, context: Any, token: ValueToken) -> str:
        """Resolve and format one value token; unresolved tokens are empty."""
        result: ResolveResult = path_resolve(context, token.path, self.resolver)
        if not result.success:
            COMPLAIN(f"Token {token.dotted!r} rendered empty: {result.error}")
            return ""
        return value_format(result.value, token.format_arg)
