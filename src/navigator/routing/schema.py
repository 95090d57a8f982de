"""Schema compilation — pattern strings to comparable, matchable schemas.

A pattern like ``/match/:id/comments/`` compiles to three components
(``Literal("match")``, ``Parameter("id", 1)``, ``Literal("comments")``)
and the fingerprint ``/match/$/comments``. Parameter names never reach
the fingerprint, so ``/match/:slug/comments`` is the same schema.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from navigator.errors import BadSchema, SchemaMismatch
from navigator.routing.tokenizer import SENTINEL, WILDCARD, tokenize


@dataclass(frozen=True, slots=True)
class Literal:
    """A segment that must equal ``value`` exactly (case-sensitive)."""

    value: str


@dataclass(frozen=True, slots=True)
class Parameter:
    """A ``:name`` segment captured into the bundle under ``name``.

    ``index`` is the segment position within the schema.
    """

    name: str
    index: int


@dataclass(frozen=True, slots=True)
class Wildcard:
    """A final ``*`` segment.

    Absorbs one or more remaining segments, or exactly one when the
    pattern ends in ``*/``.
    """

    index: int


type Component = Literal | Parameter | Wildcard


@dataclass(frozen=True, slots=True, eq=False)
class Schema:
    """A compiled path pattern.

    Equality and hashing use the fingerprint only. Two schemas that
    differ in parameter names, or in the raw spelling of the pattern,
    are interchangeable keys.
    """

    raw: str
    fingerprint: str
    components: tuple[Component, ...]
    ends_in_wildcard: bool
    _hash: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_hash", hash(self.fingerprint))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Schema):
            return NotImplemented
        return self.fingerprint == other.fingerprint

    def __hash__(self) -> int:
        return self._hash

    @property
    def parameters(self) -> tuple[Parameter, ...]:
        """Parameter components in segment order."""
        return tuple(c for c in self.components if isinstance(c, Parameter))

    def matches(self, path: str) -> dict[str, str] | None:
        """Tokenize *path* and match it against this schema."""
        from navigator.routing.matcher import match_schema

        return match_schema(self, tokenize(path))

    def parse_parameters(self, path: str) -> dict[str, str]:
        """Positional parameter extraction. See ``parse_parameters``."""
        return parse_parameters(path, self)


def compile_schema(pattern: str) -> Schema:
    """Compile a pattern string into a ``Schema``.

    Segments starting with ``:`` become parameters, a final ``*`` becomes
    the wildcard, and everything else (an interior ``*`` included) is a
    literal. Without a trailing slash the wildcard is open-ended: ``/a/*``
    matches ``/a/x`` and ``/a/x/y``. With one, ``/a/*/`` stands for exactly
    one segment and is looked up by exact length like any other schema.

    Raises ``BadSchema`` if a parameter segment has no name.
    """
    tokens = tokenize(pattern)
    single_segment = len(tokens) > 1 and tokens[-1] == SENTINEL and tokens[-2] == WILDCARD
    if single_segment:
        tokens = tokens[:-1]

    components: list[Component] = []
    structure: list[str] = []
    last = len(tokens) - 1

    for i, token in enumerate(tokens):
        if token.startswith(":"):
            name = token[1:]
            if not name:
                msg = f"Parameter {i} has no name in pattern {pattern!r}"
                raise BadSchema(msg)
            components.append(Parameter(name=name, index=i))
            structure.append("/$")
        elif token == WILDCARD and i == last:
            components.append(Wildcard(index=i))
            structure.append("/*")
        else:
            components.append(Literal(token))
            structure.append("/" + token)

    # keeps "/a/*/" and "/a/*" apart
    if single_segment:
        structure.append("/")

    return Schema(
        raw=pattern,
        fingerprint="".join(structure),
        components=tuple(components),
        ends_in_wildcard=isinstance(components[-1], Wildcard) and not single_segment,
    )


def parse_parameters(path: str, schema: Schema) -> dict[str, str]:
    """Read parameters out of *path* by position, without literal checks.

    Unlike matching, this never rejects a path for its literals; it only
    requires the segment counts to agree.

    Raises ``SchemaMismatch`` if *path* and *schema* differ in length.
    """
    tokens = tokenize(path)
    if len(tokens) != len(schema.components):
        msg = (
            f"Segment counts for {path!r} ({len(tokens)}) and "
            f"{schema.fingerprint!r} ({len(schema.components)}) do not match"
        )
        raise SchemaMismatch(msg)

    return {param.name: tokens[param.index] for param in schema.parameters}
