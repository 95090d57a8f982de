"""Router — two-phase schema lookup with predicate-gated dispatch.

Routes are registered during setup and looked up afterwards. Lookup
tries schemas of exactly the path's length first, then wildcard schemas
from the longest floor down, so ``/a/b/*`` beats ``/a/*`` for ``/a/b/c``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from navigator.config import NavigatorConfig
from navigator.errors import BadSchema
from navigator.routing.index import RouteIndex
from navigator.routing.matcher import match_schema
from navigator.routing.route import HandlerFactory, Predicate, RouteEntry, RouteMatch, RouteSpec
from navigator.routing.schema import Schema, compile_schema
from navigator.routing.tokenizer import tokenize

logger = logging.getLogger("navigator.routing")


class Router:
    """Path router with named parameters, trailing wildcards and predicates.

    Usage::

        router = Router()
        router.register("/match/:id", factory=construct(MatchView))
        router.register("/match/:id", [is_archived], construct(ArchiveView))
        match = router.lookup("/match/42")     # RouteMatch | None
        view = router.dispatch("/match/42")    # handler | None

    Not thread-safe: register everything up front, then look up.
    Predicates must not call back into the same router.
    """

    __slots__ = ("_index", "_sequence", "config")

    def __init__(self, config: NavigatorConfig | None = None) -> None:
        self.config = config or NavigatorConfig()
        self._index = RouteIndex()
        self._sequence = 0

    @classmethod
    def from_patterns(
        cls,
        patterns: Iterable[str],
        config: NavigatorConfig | None = None,
    ) -> Router:
        """Build a parser-only router with no predicates or factories.

        ``lookup`` then works as a parameter parser over *patterns*.
        Raises ``BadSchema`` on the first invalid pattern.
        """
        router = cls(config)
        for pattern in patterns:
            router.register(pattern)
        return router

    # -- Registration --

    def register(
        self,
        pattern: str,
        predicates: Sequence[Predicate] = (),
        factory: HandlerFactory | None = None,
    ) -> Schema:
        """Register *pattern* and return its (interned) schema.

        Entries sharing a schema are evaluated in registration order.
        Raises ``BadSchema`` if the pattern does not compile; the router
        is left unchanged.
        """
        return self._insert(pattern, compile_schema(pattern), predicates, factory)

    def register_all(self, specs: Iterable[RouteSpec]) -> list[Schema]:
        """Register a batch of ``RouteSpec`` records.

        Every record is validated and compiled before the first one is
        inserted, so a bad record raises ``BadSchema`` with no partial
        registration.
        """
        compiled: list[tuple[RouteSpec, Schema]] = []
        for position, spec in enumerate(specs):
            if not isinstance(spec, RouteSpec):
                msg = f"Route {position} is not a RouteSpec: {spec!r}"
                raise BadSchema(msg)
            if not isinstance(spec.path, str) or not spec.path:
                msg = f"Route {position} has no path"
                raise BadSchema(msg)
            if spec.factory is None or not callable(spec.factory):
                msg = f"Route {position} ({spec.path!r}) has no handler factory"
                raise BadSchema(msg)
            compiled.append((spec, compile_schema(spec.path)))

        return [
            self._insert(spec.path, schema, spec.where, spec.factory)
            for spec, schema in compiled
        ]

    def route(
        self,
        pattern: str,
        where: Sequence[Predicate] = (),
    ) -> Callable[[HandlerFactory], HandlerFactory]:
        """Decorator form of ``register``.

        Usage::

            @router.route("/match/:id")
            def show_match(match: RouteMatch) -> MatchView:
                return notify(MatchView(), match)
        """

        def decorator(factory: HandlerFactory) -> HandlerFactory:
            self.register(pattern, where, factory)
            return factory

        return decorator

    def _insert(
        self,
        pattern: str,
        compiled: Schema,
        predicates: Sequence[Predicate],
        factory: HandlerFactory | None,
    ) -> Schema:
        schema = self._index.intern(compiled)
        self._sequence += 1
        entry = RouteEntry(
            pattern=pattern,
            schema=schema,
            parameters=compiled.parameters,
            predicates=tuple(predicates),
            factory=factory,
            sequence=self._sequence,
        )
        self._index.add(schema, entry)
        logger.debug(
            "Registered %r as %s (entry %d)", pattern, schema.fingerprint, entry.sequence
        )
        return schema

    # -- Introspection --

    @property
    def entries(self) -> list[RouteEntry]:
        """All entries in registration order."""
        entries = [
            entry for schema in self._index.schemas for entry in self._index.entries_for(schema)
        ]
        return sorted(entries, key=lambda entry: entry.sequence)

    @property
    def schemas(self) -> list[Schema]:
        """Interned schemas in first-registration order."""
        return self._index.schemas

    def __len__(self) -> int:
        return len(self._index)

    # -- Lookup --

    def lookup(self, path: str) -> RouteMatch | None:
        """Find the first schema and entry that match *path*.

        Returns ``None`` when nothing matches; a miss is not an error.
        """
        tokens = tokenize(path)

        result = self._first_match(
            path, tokens, self._index.candidates_for_exact_length(len(tokens))
        )
        if result is None:
            for floor in range(len(tokens), 0, -1):
                result = self._first_match(
                    path, tokens, self._index.candidates_for_wildcard_floor(floor)
                )
                if result is not None:
                    break

        if self.config.trace_lookups:
            if result is None:
                logger.debug("No route matches %r", path)
            else:
                logger.debug(
                    "%r matched %s (entry %d)",
                    path,
                    result.schema.fingerprint,
                    result.entry.sequence,
                )
        return result

    def _first_match(
        self,
        path: str,
        tokens: list[str],
        candidates: Sequence[Schema],
    ) -> RouteMatch | None:
        """Try *candidates* in order; first entry whose predicates all pass wins."""
        for schema in candidates:
            bundle = match_schema(schema, tokens)
            if bundle is None:
                continue

            for entry in self._index.entries_for(schema):
                # Entries sharing the schema may spell their parameters differently
                if entry.parameters == schema.parameters:
                    entry_bundle = bundle
                else:
                    entry_bundle = entry.capture(tokens)

                match = RouteMatch(
                    path=path,
                    tokens=tuple(tokens),
                    bundle=entry_bundle,
                    schema=schema,
                    entry=entry,
                    router=self,
                )
                if all(predicate(match) for predicate in entry.predicates):
                    return match

        return None

    # -- Dispatch --

    def instantiate(self, match: RouteMatch) -> Any | None:
        """Run the winning entry's factory, or return ``None`` if it has none."""
        factory = match.entry.factory
        if factory is None:
            return None
        return factory(match)

    def dispatch(self, path: str) -> Any | None:
        """Look up *path* and hand the match to its factory.

        Returns the produced handler, or ``None`` if nothing matched.
        """
        match = self.lookup(path)
        if match is None:
            return None
        return self.instantiate(match)
