"""
dataModel.py

This module defines the data models used throughout the template engine.
The models leverage Pydantic for validation and immutability.

Features:
- Segment variants produced by the token parser (literal text, scope open,
  scope close, value token) and the discriminated `Segment` union.
- Member and path resolution results.

Usage:
Import these models to build, inspect or consume parsed templates.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


class SegmentKind(str, Enum):
    """
    Enum for the kind of a parsed template segment.
    """

    LITERAL = "literal"
    SCOPE_OPEN = "scope_open"
    SCOPE_CLOSE = "scope_close"
    VALUE = "value"


class LiteralSegment(BaseModel):
    """Literal template text, emitted as-is.

    Attributes:
        text: The literal text span
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal[SegmentKind.LITERAL] = SegmentKind.LITERAL
    text: str


class ScopeOpen(BaseModel):
    """Opens a scope on a member of the current context.

    Attributes:
        name: Identifier of the member that becomes the new context
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal[SegmentKind.SCOPE_OPEN] = SegmentKind.SCOPE_OPEN
    name: str = Field(..., min_length=1)


class ScopeClose(BaseModel):
    """Closes the most recently opened scope."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[SegmentKind.SCOPE_CLOSE] = SegmentKind.SCOPE_CLOSE


class ValueToken(BaseModel):
    """A property path to substitute, with an optional format argument.

    Attributes:
        path: Identifiers of the dotted path, outermost first
        format_arg: Contents of the quoted format argument, if one was given

    Example:
        * The token `[Contact.When "d MMMM yyyy"]` is a ValueToken of:
            path = ("Contact", "When")
            format_arg = "d MMMM yyyy"
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal[SegmentKind.VALUE] = SegmentKind.VALUE
    path: tuple[str, ...] = Field(..., min_length=1)
    format_arg: Optional[str] = None

    @property
    def dotted(self) -> str:
        return ".".join(self.path)


Segment = Annotated[
    Union[LiteralSegment, ScopeOpen, ScopeClose, ValueToken],
    Field(discriminator="kind"),
]


class ResolveResult(BaseModel):
    """Result of a member lookup or a path walk.

    Attributes:
        value: The resolved value (meaningful only on success)
        error: Optional error message if resolution failed
        success: Whether resolution succeeded
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    value: Any = None
    error: str | None = None
    success: bool
