"""Run configuration for the collapsing engine.

Environment Variables:
    DEPCOLLAPSE_VIEW: Default output view (default: cc_processed)
    DEPCOLLAPSE_KEEP_PUNCT: Keep punctuation dependents (default: true)
    DEPCOLLAPSE_FORMAT: Output format, plain or conllx (default: plain)
    DEPCOLLAPSE_CHECK_CONNECTED: Warn on disconnected graphs (default: false)
    DEPCOLLAPSE_SKIP_BAD_SENTENCES: Skip sentences with unknown relations (default: false)
    DEPCOLLAPSE_LOG_LEVEL: Console log level (default: INFO)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Mapping


class View(str, Enum):
    """The four dependency views a structure can produce."""

    BASIC = "basic"
    COLLAPSED = "collapsed"
    COLLAPSED_TREE = "collapsed_tree"
    CC_PROCESSED = "cc_processed"

    @property
    def heading(self) -> str:
        return {
            View.BASIC: "Basic dependencies",
            View.COLLAPSED: "Collapsed dependencies",
            View.COLLAPSED_TREE: "Collapsed tree dependencies",
            View.CC_PROCESSED: "CC-processed dependencies",
        }[self]


OUTPUT_FORMATS = ("plain", "conllx")
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "WARN", "ERROR")


def get_view(name: str) -> View:
    """Resolve a view by name; dashes and case are ignored."""
    key = name.strip().lower().replace("-", "_")
    for view in View:
        if view.value == key:
            return view
    raise ValueError(f"Unknown view: {name}. Available: {[v.value for v in View]}")


@dataclass(frozen=True)
class CollapseConfig:
    view: View = View.CC_PROCESSED
    keep_punct: bool = True
    output_format: str = "plain"
    check_connected: bool = False
    skip_bad_sentences: bool = False
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format: {self.output_format}. Available: {list(OUTPUT_FORMATS)}"
            )
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}. Available: {list(LOG_LEVELS)}")

    def override(self, **changes: Any) -> "CollapseConfig":
        """Copy with the given fields replaced; ``None`` values are ignored."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def parse_bool(value: str) -> bool:
    """Parse boolean from environment variable."""
    return value.lower() in ("true", "1", "yes", "on")


def config_from_env(environ: Mapping[str, str] | None = None) -> CollapseConfig:
    """Build a config from ``DEPCOLLAPSE_*`` variables with defaults."""
    env = os.environ if environ is None else environ
    return CollapseConfig(
        view=get_view(env.get("DEPCOLLAPSE_VIEW", "cc_processed")),
        keep_punct=parse_bool(env.get("DEPCOLLAPSE_KEEP_PUNCT", "true")),
        output_format=env.get("DEPCOLLAPSE_FORMAT", "plain").lower(),
        check_connected=parse_bool(env.get("DEPCOLLAPSE_CHECK_CONNECTED", "false")),
        skip_bad_sentences=parse_bool(env.get("DEPCOLLAPSE_SKIP_BAD_SENTENCES", "false")),
        log_level=env.get("DEPCOLLAPSE_LOG_LEVEL", "INFO").upper(),
    )
