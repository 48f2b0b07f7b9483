"""Stylesheet builder tying icon scanning, content scanning and rendering."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel

from ..config import CONTENT_GLOBS, ICON_PREFIX
from ..icons.inline import IconComponent, UnknownIconError
from ..icons.scan import IconMap, scan_icons
from ..theme.tokens import Theme, render_theme
from ..theme.variants import get_variant
from .content import scan_content, split_candidate
from .render import class_selector, render_rule

logger = logging.getLogger(__name__)


class BuildResult(BaseModel):
    """Result of building a stylesheet."""

    css: str
    icons: list[str]
    files_scanned: int
    warnings: list[str]
    output_path: Path | None = None


def render_icon_css(
    icons: IconMap,
    candidates: Iterable[str],
    theme: Theme,
    warnings: list[str] | None = None,
) -> tuple[str, list[str]]:
    """Render rules for icon class candidates.

    Candidates that cannot be generated are skipped and described in
    ``warnings`` when a list is given; otherwise the first error is raised.

    Returns:
        (css text, class names emitted)
    """
    component = IconComponent(icons, theme.accessor())
    blocks: list[str] = []
    emitted: list[str] = []

    for candidate in candidates:
        variant_name, name = split_candidate(candidate)

        variant = None
        if variant_name is not None:
            variant = get_variant(variant_name)
            if variant is None:
                if warnings is None:
                    raise ValueError(f"Unsupported variant: {variant_name}")
                warnings.append(f"Unsupported variant: {candidate}")
                continue

        try:
            declarations = component(name[len(ICON_PREFIX) + 1 :])
        except UnknownIconError:
            if warnings is None:
                raise
            warnings.append(f"Unknown icon: {candidate}")
            continue

        selector = class_selector(candidate)
        if variant is not None:
            selector = variant.apply(selector)

        blocks.append(render_rule(selector, declarations))
        emitted.append(candidate)

    return "\n".join(blocks), emitted


def build_stylesheet(
    icons_dir: Path,
    content_root: Path,
    patterns: Iterable[str] = CONTENT_GLOBS,
    theme: Theme | None = None,
    out_path: Path | None = None,
    include_theme: bool = False,
) -> BuildResult:
    """Build the icon stylesheet for an application.

    Args:
        icons_dir: Root of the icon asset tree
        content_root: Directory the content globs are relative to
        patterns: Content globs to scan for icon classes
        theme: Theme tokens (defaults when None)
        out_path: Write the stylesheet here when given
        include_theme: Prepend theme custom properties

    Returns:
        BuildResult with the stylesheet and per-icon warnings

    Raises:
        DirectoryNotFoundError: If an icon style directory is missing
    """
    theme = theme or Theme()
    warnings: list[str] = []

    # Fatal before any output is produced
    icons = scan_icons(icons_dir)

    candidates, files_scanned = scan_content(content_root, patterns)
    icon_css, emitted = render_icon_css(icons, candidates, theme, warnings=warnings)

    parts = []
    if include_theme:
        parts.append(render_theme(theme))
    if icon_css:
        parts.append(icon_css)
    css = "\n".join(parts)

    for w in warnings:
        logger.warning(w)
    if theme.flags.logs:
        logger.info(
            "Generated %d icon classes from %d files (%d available)",
            len(emitted),
            files_scanned,
            len(icons),
        )

    if out_path is not None:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(css, encoding="utf-8")

    return BuildResult(
        css=css,
        icons=emitted,
        files_scanned=files_scanned,
        warnings=warnings,
        output_path=out_path,
    )
