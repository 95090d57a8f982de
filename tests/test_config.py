"""Tests for navigator.config — NavigatorConfig frozen dataclass."""

from pathlib import Path

import pytest

from navigator.config import NavigatorConfig
from navigator.routing.router import Router


class TestNavigatorConfig:
    def test_defaults(self) -> None:
        cfg = NavigatorConfig()

        assert cfg.trace_lookups is False
        assert cfg.template_dir == "templates"
        assert cfg.autoescape is True
        assert cfg.trim_blocks is True
        assert cfg.lstrip_blocks is True
        assert cfg.auto_reload is False

    def test_override(self) -> None:
        cfg = NavigatorConfig(trace_lookups=True, auto_reload=True)

        assert cfg.trace_lookups is True
        assert cfg.auto_reload is True

    def test_frozen(self) -> None:
        cfg = NavigatorConfig()

        with pytest.raises(AttributeError):
            cfg.trace_lookups = True  # type: ignore[misc]

    def test_template_dir_as_path(self) -> None:
        cfg = NavigatorConfig(template_dir=Path("views"))
        assert cfg.template_dir == Path("views")

    def test_router_default_config(self) -> None:
        assert Router().config == NavigatorConfig()

    def test_router_custom_config(self) -> None:
        cfg = NavigatorConfig(trace_lookups=True)
        assert Router(cfg).config is cfg
