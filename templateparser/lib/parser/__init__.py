"""
Parser package for bracketed template tokens.

Provides the tokenizer that turns a template into segments and the member
resolvers used to look up token paths in a data source.
"""

from .base import TokenParser
from .resolvers import (
    AttributeResolver,
    DataSourceResolver,
    MappingResolver,
    MemberResolver,
    path_resolve,
)

__all__ = [
    "TokenParser",
    "MemberResolver",
    "MappingResolver",
    "AttributeResolver",
    "DataSourceResolver",
    "path_resolve",
]
