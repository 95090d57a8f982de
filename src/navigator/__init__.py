"""Navigator — declarative path routing with named parameters and wildcards.

Register path patterns, look up concrete paths, and dispatch the match
to a handler factory, optionally gated by predicates.

Basic usage::

    from navigator import Router, construct

    router = Router()
    router.register("/match/:id/comments", factory=construct(CommentsView))
    router.register("/files/*", factory=construct(FileBrowser))

    view = router.dispatch("/match/42/comments")

Template-backed handlers::

    from navigator import NavigatorConfig, create_catalog, from_template

    catalog = create_catalog(NavigatorConfig(template_dir="views"))
    router.register("/about", factory=from_template("about.html", "pages", catalog))
"""

from importlib import import_module

__version__ = "0.1.0"
__all__ = [
    "BadSchema",
    "ConfigurationError",
    "MatchAware",
    "NavigatorConfig",
    "NavigatorError",
    "RouteEntry",
    "RouteIndex",
    "RouteMatch",
    "RouteSpec",
    "Router",
    "RoutingError",
    "Schema",
    "SchemaMismatch",
    "TemplateCatalog",
    "TemplateView",
    "compile_schema",
    "construct",
    "create_catalog",
    "from_template",
    "match_schema",
    "notify",
    "parse_parameters",
    "tokenize",
]

# public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "BadSchema": "navigator.errors",
    "ConfigurationError": "navigator.errors",
    "NavigatorError": "navigator.errors",
    "RoutingError": "navigator.errors",
    "SchemaMismatch": "navigator.errors",
    "NavigatorConfig": "navigator.config",
    "tokenize": "navigator.routing.tokenizer",
    "Schema": "navigator.routing.schema",
    "compile_schema": "navigator.routing.schema",
    "parse_parameters": "navigator.routing.schema",
    "match_schema": "navigator.routing.matcher",
    "RouteEntry": "navigator.routing.route",
    "RouteMatch": "navigator.routing.route",
    "RouteSpec": "navigator.routing.route",
    "RouteIndex": "navigator.routing.index",
    "Router": "navigator.routing.router",
    "MatchAware": "navigator.binding",
    "construct": "navigator.binding",
    "from_template": "navigator.binding",
    "notify": "navigator.binding",
    "TemplateCatalog": "navigator.templating.catalog",
    "create_catalog": "navigator.templating.catalog",
    "TemplateView": "navigator.templating.views",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import navigator`` fast and kida unloaded until a template
    helper is actually used.
    """
    module = _LAZY_IMPORTS.get(name)
    if module is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(import_module(module), name)
