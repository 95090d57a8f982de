"""Structural matching of token sequences against compiled schemas."""

from navigator.routing.schema import Literal, Parameter, Schema, Wildcard


def match_schema(schema: Schema, tokens: list[str]) -> dict[str, str] | None:
    """Match *tokens* against *schema* and return the captured bundle.

    Lengths must agree exactly, unless the schema ends in a wildcard, in
    which case extra trailing tokens are absorbed by it. Returns ``None``
    on a length or literal mismatch.
    """
    components = schema.components
    if len(tokens) != len(components) and not (
        schema.ends_in_wildcard and len(tokens) >= len(components)
    ):
        return None

    bundle: dict[str, str] = {}
    for component, token in zip(components, tokens, strict=False):
        match component:
            case Literal(value=value):
                if value != token:
                    return None
            case Parameter(name=name):
                bundle[name] = token
            case Wildcard():
                pass

    return bundle
