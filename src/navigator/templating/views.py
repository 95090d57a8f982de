"""TemplateView — the handler produced for template-backed routes."""

from typing import Any

from navigator.routing.route import RouteMatch


class TemplateView:
    """A handler wrapping one kida template.

    Receives its match through ``on_match`` after construction and
    renders with the captured parameters plus ``path`` and ``tokens``.
    """

    __slots__ = ("match", "template")

    def __init__(self, template: Any) -> None:
        self.template = template
        self.match: RouteMatch | None = None

    def on_match(self, match: RouteMatch) -> None:
        self.match = match

    def context(self) -> dict[str, Any]:
        if self.match is None:
            return {}
        return {
            **self.match.bundle,
            "path": self.match.path,
            "tokens": list(self.match.tokens),
        }

    def render(self, **extra: Any) -> str:
        """Render the template. Keyword arguments override match values."""
        return self.template.render({**self.context(), **extra})
