"""Append-only route index grouped by segment count.

Exact schemas are keyed by their length. Wildcard schemas are keyed by
their floor, the fewest segments they can match.
"""

from navigator.routing.route import RouteEntry
from navigator.routing.schema import Schema


class RouteIndex:
    """Interned schemas plus their entries in registration order.

    Usage::

        index = RouteIndex()
        schema = index.add(compile_schema("/match/:id"), entry)
        index.candidates_for_exact_length(2)   # [schema]
        index.entries_for(schema)              # [entry]
    """

    __slots__ = ("_by_length", "_by_floor", "_entries", "_schemas")

    def __init__(self) -> None:
        self._by_length: dict[int, list[Schema]] = {}
        self._by_floor: dict[int, list[Schema]] = {}
        self._entries: dict[Schema, list[RouteEntry]] = {}
        # fingerprint-equal lookup returns the first instance registered
        self._schemas: dict[Schema, Schema] = {}

    def intern(self, schema: Schema) -> Schema:
        """Return the stored schema equal to *schema*, or *schema* itself."""
        return self._schemas.get(schema, schema)

    def add(self, schema: Schema, entry: RouteEntry) -> Schema:
        """Record *entry* under *schema* and return the interned schema.

        The first registration of a fingerprint places the schema into its
        length group; later ones only extend its entry list.
        """
        interned = self._schemas.get(schema)
        if interned is None:
            interned = self._schemas[schema] = schema
            groups = self._by_floor if schema.ends_in_wildcard else self._by_length
            groups.setdefault(len(schema.components), []).append(schema)
            self._entries[schema] = []

        self._entries[interned].append(entry)
        return interned

    def candidates_for_exact_length(self, n: int) -> list[Schema]:
        """Non-wildcard schemas with exactly *n* components."""
        return self._by_length.get(n, [])

    def candidates_for_wildcard_floor(self, n: int) -> list[Schema]:
        """Wildcard schemas whose floor is exactly *n*.

        Callers walk floors from high to low so longer prefixes win.
        """
        return self._by_floor.get(n, [])

    def entries_for(self, schema: Schema) -> list[RouteEntry]:
        """Entries registered against *schema*, oldest first."""
        return self._entries.get(schema, [])

    @property
    def schemas(self) -> list[Schema]:
        """All interned schemas in first-registration order."""
        return list(self._schemas)

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._entries.values())
