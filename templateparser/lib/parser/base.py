r"""
Token parser for bracketed templates.

Scans a template into an ordered list of segments: literal text and the
tokens found between the open and close delimiters. Tokens are classified as
scope opens, scope closes or value tokens.

The parser handles:
- Configurable delimiters and scope keyword
- Dotted property paths with an optional quoted format argument
- Permissive recovery: an unterminated token is literal text, a stray open
  delimiter inside a token is literal text, a blank token is dropped

Parsing never raises for malformed templates.

Example:
    parser = TokenParser()
    segments = parser.parse('[with Contact]Hi [FirstName][/with]')
"""

import re
from typing import Self
from templateparser.config.settings import appsettings
from templateparser.lib.log import LOG, COMPLAIN
from templateparser.models.dataModel import (
    LiteralSegment,
    ScopeClose,
    ScopeOpen,
    Segment,
    ValueToken,
)

_QUOTE: str = '"'


class TokenParser:
    """Template tokenizer.

    Attributes:
        open_char: Character that opens a token (e.g. "[")
        close_char: Character that closes a token (e.g. "]")
        scope_keyword: Keyword that opens a scope (e.g. "with")
    """

    def __init__(
        self: Self,
        open_char: str | None = None,
        close_char: str | None = None,
        scope_keyword: str | None = None,
    ) -> None:
        """Initialize parser with token configuration.

        Unset arguments fall back to `tokenOpen`, `tokenClose` and
        `scopeKeyword` from application settings.

        Args:
            open_char: Character that opens a token
            close_char: Character that closes a token
            scope_keyword: Keyword that opens a scope

        Raises:
            ValueError: If a delimiter is not a single character, both
                delimiters are the same, or the keyword is blank
        """
        self.open_char: str = appsettings.tokenOpen if open_char is None else open_char
        self.close_char: str = (
            appsettings.tokenClose if close_char is None else close_char
        )
        self.scope_keyword: str = (
            appsettings.scopeKeyword if scope_keyword is None else scope_keyword
        )

        if len(self.open_char) != 1 or len(self.close_char) != 1:
            raise ValueError("Token delimiters must be single characters")
        if self.open_char == self.close_char:
            raise ValueError("Token open and close delimiters must differ")
        if not self.scope_keyword or any(ch.isspace() for ch in self.scope_keyword):
            raise ValueError("Scope keyword cannot be empty or contain whitespace")

        self.scope_close: str = "/" + self.scope_keyword
        self._scope_open_re: re.Pattern[str] = re.compile(
            rf"{re.escape(self.scope_keyword)}\s+([^\s.{_QUOTE}]+)"
        )

    def parse(self: Self, template: str | None) -> list[Segment]:
        """Scan a template into segments.

        Args:
            template: Raw template text; None is treated as empty

        Returns:
            Ordered list of segments. Adjacent literal text is merged into a
            single LiteralSegment.
        """
        if not template:
            return []

        segments: list[Segment] = []
        literal: list[str] = []
        position: int = 0
        length: int = len(template)

        while position < length:
            start: int = template.find(self.open_char, position)
            if start < 0:
                literal.append(template[position:])
                break

            end: int = template.find(self.close_char, start + 1)
            if end < 0:
                COMPLAIN(f"Unterminated token at offset {start}, kept as text")
                literal.append(template[position:])
                break

            # An open delimiter before the close means the earlier one was text
            reopen: int = template.rfind(self.open_char, start + 1, end)
            if reopen >= 0:
                literal.append(template[position:reopen])
                start = reopen
            else:
                literal.append(template[position:start])

            segment: Segment | None = self.token_classify(template[start + 1 : end])
            if segment is not None:
                self._literal_flush(literal, segments)
                segments.append(segment)
            position = end + 1

        self._literal_flush(literal, segments)
        LOG(f"Parsed {len(segments)} segment(s) from {length} character(s)")
        return segments

    def token_classify(self: Self, body: str) -> Segment | None:
        """Classify the body of a single token.

        Args:
            body: Text between the delimiters, delimiters excluded

        Returns:
            ScopeOpen, ScopeClose or ValueToken; None for a blank body
        """
        if body == self.scope_close:
            return ScopeClose()

        # Text after the scope name is ignored
        match = self._scope_open_re.match(body)
        if match:
            return ScopeOpen(name=match.group(1))

        return self._value_parse(body)

    def _value_parse(self: Self, body: str) -> ValueToken | None:
        """Split a value token body into path and format argument.

        The path runs up to the first whitespace or quote. Text between the
        path and the opening quote, and after the closing quote, is ignored.
        """
        stripped: str = body.lstrip()
        if not stripped:
            return None

        head_end: int = len(stripped)
        for i, char in enumerate(stripped):
            if char.isspace() or char == _QUOTE:
                head_end = i
                break

        head: str = stripped[:head_end]
        if not head:
            LOG(f"Token has no property path: {body!r}")
            return None

        format_arg: str | None = None
        quote_start: int = stripped.find(_QUOTE, head_end)
        if quote_start >= 0:
            quote_end: int = stripped.find(_QUOTE, quote_start + 1)
            if quote_end < 0:
                format_arg = stripped[quote_start + 1 :]
            else:
                format_arg = stripped[quote_start + 1 : quote_end]

        return ValueToken(path=tuple(head.split(".")), format_arg=format_arg)

    @staticmethod
    def _literal_flush(literal: list[str], segments: list[Segment]) -> None:
        """Move accumulated literal text into the segment list."""
        text: str = "".join(literal)
        literal.clear()
        if text:
            segments.append(LiteralSegment(text=text))

