"""RouteEntry, RouteMatch, and RouteSpec frozen dataclasses."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from navigator.routing.schema import Parameter, Schema

if TYPE_CHECKING:
    from navigator.routing.router import Router

# Pure gate over a provisional match; all of an entry's predicates must pass
type Predicate = Callable[[RouteMatch], bool]

# Produces the handler for a match (constructed, loaded from a template, ...)
type HandlerFactory = Callable[[RouteMatch], Any]


@dataclass(frozen=True, slots=True, eq=False)
class RouteEntry:
    """One registration: schema + predicates + handler factory.

    ``schema`` is the router's interned instance and may be shared with
    other entries. ``parameters`` are this registration's own parameter
    names, so ``/user/:id`` and ``/user/:name`` registered side by side
    each capture under their own names.

    Identity is ``(schema.fingerprint, sequence)``; sequence numbers are
    assigned by the router and never reused.
    """

    pattern: str
    schema: Schema
    parameters: tuple[Parameter, ...]
    predicates: tuple[Predicate, ...]
    factory: HandlerFactory | None
    sequence: int

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RouteEntry):
            return NotImplemented
        return (self.schema.fingerprint, self.sequence) == (
            other.schema.fingerprint,
            other.sequence,
        )

    def __hash__(self) -> int:
        return hash((self.schema.fingerprint, self.sequence))

    def capture(self, tokens: Sequence[str]) -> dict[str, str]:
        """Build a bundle from *tokens* using this entry's parameter names."""
        return {param.name: tokens[param.index] for param in self.parameters}


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful lookup, handed to predicates and factories.

    ``router`` is the router that produced the match, for handlers that
    need to look up further paths. ``bundle`` is a read-only copy of the
    captured parameters.
    """

    path: str
    tokens: tuple[str, ...]
    bundle: Mapping[str, str] = field(hash=False)
    schema: Schema
    entry: RouteEntry = field(repr=False)
    router: Router = field(repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "bundle", MappingProxyType(dict(self.bundle)))

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the captured value for parameter *name*."""
        return self.bundle.get(name, default)


@dataclass(frozen=True, slots=True)
class RouteSpec:
    """A typed record for ``Router.register_all``.

    ``where`` accepts a single predicate or a sequence of them::

        RouteSpec("/match/:id", show_match, where=is_live)
        RouteSpec("/match/:id", show_archive)
    """

    path: str
    factory: HandlerFactory
    where: tuple[Predicate, ...] = ()

    def __post_init__(self) -> None:
        where: Any = self.where
        if callable(where):
            where = (where,)
        object.__setattr__(self, "where", tuple(where or ()))
