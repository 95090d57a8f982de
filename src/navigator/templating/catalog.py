"""Kida environment setup for template-backed handlers.

A catalog resolves a template identifier within a named group, the
group being a subdirectory of ``NavigatorConfig.template_dir``::

    templates/
        matches/
            detail.html     -> catalog.get_template("detail.html", "matches")
"""

from typing import Any

from kida import Environment, FileSystemLoader
from kida.environment.exceptions import TemplateNotFoundError

from navigator.config import NavigatorConfig
from navigator.errors import ConfigurationError


class TemplateCatalog:
    """Group-aware template lookup over a kida ``Environment``."""

    __slots__ = ("env",)

    def __init__(self, env: Environment) -> None:
        self.env = env

    def get_template(self, template_id: str, group: str) -> Any:
        """Load *template_id* from *group*.

        Raises ``ConfigurationError`` if the template does not exist.
        """
        name = f"{group}/{template_id}"
        try:
            return self.env.get_template(name)
        except TemplateNotFoundError as exc:
            msg = f"No template {template_id!r} in group {group!r} (looked up {name!r})"
            raise ConfigurationError(msg) from exc


def create_catalog(config: NavigatorConfig) -> TemplateCatalog:
    """Create a catalog from configuration.

    Templates are loaded from ``config.template_dir``; each group is a
    subdirectory of it.
    """
    env = Environment(
        loader=FileSystemLoader(str(config.template_dir)),
        autoescape=config.autoescape,
        auto_reload=config.auto_reload,
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
    )
    return TemplateCatalog(env)
