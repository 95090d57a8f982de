"""Handler bindings — factories that turn a RouteMatch into a handler.

A factory is any callable ``(RouteMatch) -> handler``. Handlers that
want to know how they were reached implement ``MatchAware``; no base
class required. Two ready-made strategies::

    # (a) construct a handler type directly
    router.register("/match/:id", factory=construct(MatchView))

    # (b) load a template by identifier within a group
    router.register("/about", factory=from_template("about.html", "pages", catalog))

A handler type may also declare ``template_id`` and ``template_group``
class attributes; ``construct`` then builds it around that template.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from navigator.errors import ConfigurationError
from navigator.routing.route import HandlerFactory, RouteMatch
from navigator.templating.views import TemplateView

if TYPE_CHECKING:
    from navigator.templating.catalog import TemplateCatalog

logger = logging.getLogger("navigator.binding")


@runtime_checkable
class MatchAware(Protocol):
    """Handlers that want to be told which match produced them."""

    def on_match(self, match: RouteMatch) -> None: ...


def notify[H](handler: H, match: RouteMatch) -> H:
    """Call ``handler.on_match(match)`` if the handler supports it.

    Returns *handler* either way so factories can ``return notify(...)``.
    """
    if isinstance(handler, MatchAware):
        logger.debug("Notifying %s of %r", type(handler).__name__, match.path)
        handler.on_match(match)
    return handler


def construct(handler_type: type, catalog: TemplateCatalog | None = None) -> HandlerFactory:
    """Factory that instantiates *handler_type* for every match.

    Plain types are called with no arguments. Types declaring both
    ``template_id`` and ``template_group`` are called with the loaded
    template instead, which requires *catalog*.

    Raises ``ConfigurationError`` if a template-backed type is given
    without a catalog.
    """
    template_id = getattr(handler_type, "template_id", None)
    template_group = getattr(handler_type, "template_group", None)

    if template_id is None or template_group is None:

        def build(match: RouteMatch) -> Any:
            return notify(handler_type(), match)

        return build

    if catalog is None:
        msg = (
            f"{handler_type.__name__} is backed by template {template_id!r} "
            f"in group {template_group!r}, but no TemplateCatalog was given."
        )
        raise ConfigurationError(msg)

    def build_from_template(match: RouteMatch) -> Any:
        template = catalog.get_template(template_id, template_group)
        return notify(handler_type(template), match)

    return build_from_template


def from_template(template_id: str, group: str, catalog: TemplateCatalog) -> HandlerFactory:
    """Factory that wraps template *template_id* from *group* in a ``TemplateView``.

    The template is loaded on every dispatch, so ``auto_reload`` picks up
    edits.
    """

    def build(match: RouteMatch) -> TemplateView:
        return notify(TemplateView(catalog.get_template(template_id, group)), match)

    return build
