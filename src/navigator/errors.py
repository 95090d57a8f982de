"""Navigator exception hierarchy.

Shared across the schema compiler, Router, and handler bindings so every
module raises and catches the same types.
"""


class NavigatorError(Exception):
    """Base for all navigator-specific errors."""


class ConfigurationError(NavigatorError):
    """Raised when handler binding or template setup is invalid.

    Typically raised while building handler factories, before any
    lookup happens.
    """


class RoutingError(NavigatorError):
    """Base for errors raised by the routing core.

    Carries a human-readable ``reason`` that doubles as the message.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason

    def __str__(self) -> str:
        return self.reason


class BadSchema(RoutingError):  # noqa: N818
    """A pattern string could not be compiled into a ``Schema``.

    Raised for parameter segments without a name (``/:/foo``) and for
    bulk-registration records missing a path or handler factory.
    """


class SchemaMismatch(RoutingError):  # noqa: N818
    """A concrete path has a different segment count than the schema it
    was explicitly parsed against.

    Ordinary lookups never raise this; a miss there is just ``None``.
    """
