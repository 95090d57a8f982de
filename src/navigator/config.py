"""Navigator configuration.

NavigatorConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class NavigatorConfig:
    """Router and handler-binding configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = NavigatorConfig(trace_lookups=True, template_dir="views")
    """

    # Routing
    trace_lookups: bool = False  # Log every lookup outcome at DEBUG on "navigator.routing"

    # Templates (declarative handlers), one subdirectory per group
    template_dir: str | Path = "templates"
    autoescape: bool = True
    trim_blocks: bool = True
    lstrip_blocks: bool = True
    auto_reload: bool = False
