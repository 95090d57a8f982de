"""Tests for navigator.binding — handler factories and match notification."""

import pytest
from kida import DictLoader, Environment

from navigator.binding import MatchAware, construct, from_template, notify
from navigator.errors import ConfigurationError
from navigator.routing.route import RouteMatch
from navigator.routing.router import Router
from navigator.templating.catalog import TemplateCatalog
from navigator.templating.views import TemplateView


class MatchView:
    def __init__(self) -> None:
        self.match: RouteMatch | None = None

    def on_match(self, match: RouteMatch) -> None:
        self.match = match


class PlainView:
    pass


class DetailView:
    template_id = "detail.html"
    template_group = "matches"

    def __init__(self, template: object) -> None:
        self.template = template
        self.match: RouteMatch | None = None

    def on_match(self, match: RouteMatch) -> None:
        self.match = match


def _catalog() -> TemplateCatalog:
    return TemplateCatalog(
        Environment(
            loader=DictLoader(
                {
                    "matches/detail.html": "Match {{ id }}",
                    "pages/about.html": "About {{ path }}",
                }
            )
        )
    )


def _match(router: Router, path: str) -> RouteMatch:
    match = router.lookup(path)
    assert match is not None
    return match


class TestNotify:
    def test_match_aware_is_notified(self) -> None:
        r = Router()
        r.register("/match/:id")
        view = MatchView()

        assert isinstance(view, MatchAware)
        assert notify(view, _match(r, "/match/1")) is view
        assert view.match is not None
        assert view.match.bundle == {"id": "1"}

    def test_plain_handler_passes_through(self) -> None:
        r = Router()
        r.register("/a")
        view = PlainView()

        assert not isinstance(view, MatchAware)
        assert notify(view, _match(r, "/a")) is view


class TestConstruct:
    def test_constructs_and_notifies(self) -> None:
        r = Router()
        r.register("/match/:id", factory=construct(MatchView))

        view = r.dispatch("/match/12")
        assert isinstance(view, MatchView)
        assert view.match is not None
        assert view.match.bundle == {"id": "12"}

    def test_new_instance_per_dispatch(self) -> None:
        r = Router()
        r.register("/a", factory=construct(MatchView))
        assert r.dispatch("/a") is not r.dispatch("/a")

    def test_plain_type(self) -> None:
        r = Router()
        r.register("/a", factory=construct(PlainView))
        assert isinstance(r.dispatch("/a"), PlainView)

    def test_template_backed_type(self) -> None:
        r = Router()
        r.register("/match/:id", factory=construct(DetailView, _catalog()))

        view = r.dispatch("/match/5")
        assert isinstance(view, DetailView)
        assert view.template.render({"id": "5"}) == "Match 5"
        assert view.match is not None

    def test_template_backed_type_requires_catalog(self) -> None:
        with pytest.raises(ConfigurationError, match="no TemplateCatalog"):
            construct(DetailView)


class TestFromTemplate:
    def test_renders_with_bundle(self) -> None:
        r = Router()
        r.register("/match/:id", factory=from_template("detail.html", "matches", _catalog()))

        view = r.dispatch("/match/9")
        assert isinstance(view, TemplateView)
        assert view.render() == "Match 9"

    def test_path_in_context(self) -> None:
        r = Router()
        r.register("/about", factory=from_template("about.html", "pages", _catalog()))

        view = r.dispatch("/about")
        assert view.render() == "About /about"

    def test_missing_template(self) -> None:
        r = Router()
        r.register("/x", factory=from_template("missing.html", "pages", _catalog()))

        with pytest.raises(ConfigurationError, match="missing.html"):
            r.dispatch("/x")
