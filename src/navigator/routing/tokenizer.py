"""Path tokenization shared by pattern compilation and lookup.

Both registered patterns and incoming paths go through ``tokenize`` so
the open-ended wildcard sentinel is applied the same way on each side.
"""

WILDCARD = "*"

# Appended after a final "*" segment when the path ends with "/"
SENTINEL = ""


def tokenize(path: str) -> list[str]:
    """Split a path into its non-empty ``/``-separated segments.

    Examples::

        "/match/12/comments/" -> ["match", "12", "comments"]
        "//a///b"             -> ["a", "b"]
        "/files/*/"           -> ["files", "*", ""]
        "/files/*"            -> ["files", "*"]
        "" or "/"             -> [""]
    """
    tokens = [part for part in path.split("/") if part]

    if tokens and tokens[-1] == WILDCARD and path.endswith("/"):
        tokens.append(SENTINEL)

    if not tokens:
        tokens.append("")

    return tokens
