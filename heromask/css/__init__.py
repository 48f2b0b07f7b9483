"""Stylesheet generation."""

from .build import BuildResult, build_stylesheet, render_icon_css
from .content import expand_globs, extract_candidates, scan_content
from .render import escape_class, render_rule

__all__ = [
    "BuildResult",
    "build_stylesheet",
    "render_icon_css",
    "expand_globs",
    "extract_candidates",
    "scan_content",
    "escape_class",
    "render_rule",
]
