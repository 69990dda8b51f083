"""
Member resolvers for the template engine.

Implements the strategies used to read a named member from a data source
value:
- Mappings: key lookup
- Objects: public, non-routine attribute lookup
- Data sources: mapping lookup, then attribute lookup

Resolvers never raise; they report absence through ResolveResult.
"""

import inspect
from collections.abc import Mapping
from typing import Any, Protocol, Self, Sequence, runtime_checkable
from templateparser.lib.log import LOG
from templateparser.models.dataModel import ResolveResult


@runtime_checkable
class MemberResolver(Protocol):
    """Protocol defining the member lookup capability.

    Given a value and a name, a resolver returns the named member's value or
    reports its absence. The renderer depends only on this protocol, so any
    data source shape can be supported by supplying a resolver for it.
    """

    def resolve(self: Self, target: Any, name: str) -> ResolveResult:
        """Read member `name` of `target`.

        Args:
            target: The value to read from
            name: Member name, case-sensitive

        Returns:
            ResolveResult containing:
                - value: The member's value if found
                - error: Error message if the member is absent
                - success: Whether the member was found
        """
        ...


def _missing(target: Any, name: str) -> ResolveResult:
    return ResolveResult(
        error=f"{type(target).__name__} has no member {name!r}", success=False
    )


class MappingResolver:
    """Resolver for mapping values using key lookup."""

    def resolve(self: Self, target: Any, name: str) -> ResolveResult:
        if isinstance(target, Mapping) and name in target:
            return ResolveResult(value=target[name], success=True)
        return _missing(target, name)


class AttributeResolver:
    """Resolver for plain objects using attribute lookup.

    Only public data members are visible: names starting with an underscore
    and members that are functions or methods are reported as absent.
    """

    def resolve(self: Self, target: Any, name: str) -> ResolveResult:
        if target is None or not name or name.startswith("_"):
            return _missing(target, name)

        try:
            value: Any = getattr(target, name)
        except AttributeError:
            return _missing(target, name)
        except Exception as e:
            # Properties may raise anything; treat them as unreadable
            msg: str = f"Error reading {name!r} from {type(target).__name__}: {e}"
            LOG(msg)
            return ResolveResult(error=msg, success=False)

        if inspect.isroutine(value):
            return _missing(target, name)
        return ResolveResult(value=value, success=True)


class DataSourceResolver:
    """Default resolver: mapping lookup first, attribute lookup second.

    Attributes:
        resolvers: Strategies tried in order until one succeeds
    """

    def __init__(self: Self, resolvers: Sequence[MemberResolver] | None = None) -> None:
        self.resolvers: tuple[MemberResolver, ...] = tuple(
            resolvers if resolvers is not None else (MappingResolver(), AttributeResolver())
        )

    def resolve(self: Self, target: Any, name: str) -> ResolveResult:
        """Try each strategy in turn.

        Args:
            target: The value to read from; None never resolves
            name: Member name

        Returns:
            The first successful ResolveResult, or a failure
        """
        if target is None:
            return ResolveResult(error=f"Cannot read {name!r} from None", success=False)

        for resolver in self.resolvers:
            result: ResolveResult = resolver.resolve(target, name)
            if result.success:
                return result
        return _missing(target, name)


def path_resolve(
    target: Any, path: Sequence[str], resolver: MemberResolver
) -> ResolveResult:
    """
    Walk a dotted path one member at a time.

    :param target: The value the path is relative to.
    :param path: Identifiers of the path, outermost first.
    :param resolver: Member lookup strategy.
    :return: ResolveResult with the final value, or the first failure with
             an error naming the part of the path that was reached.
    """
    if not path:
        return ResolveResult(error="Empty property path", success=False)

    current: Any = target
    for depth, name in enumerate(path):
        result: ResolveResult = resolver.resolve(current, name)
        if not result.success:
            walked: str = ".".join(path[: depth + 1])
            return ResolveResult(
                error=f"Unresolved path {walked!r}: {result.error}", success=False
            )
        current = result.value
    return ResolveResult(value=current, success=True)
