"""Theme token model and ``theme()`` accessor."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from ..config import BRAND_COLOR, BUILTIN_THEMES, DARK_THEME, FONT_FAMILY, MYDIA_THEME, SPACING


class ThemeTokenError(KeyError):
    """Raised when a theme path does not resolve to a token."""

    def __init__(self, path: str):
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return f"Unknown theme token: {self.path}"


class FrameworkFlags(BaseModel):
    """Component framework feature switches."""

    base: bool = True
    styled: bool = True
    utils: bool = True
    logs: bool = True
    rtl: bool = False


class Theme(BaseModel):
    """Design tokens used by generated CSS."""

    spacing: dict[str, str] = Field(default_factory=lambda: dict(SPACING))
    colors: dict[str, str] = Field(default_factory=lambda: {"brand": BRAND_COLOR})
    font_family: dict[str, list[str]] = Field(
        default_factory=lambda: {k: list(v) for k, v in FONT_FAMILY.items()}
    )
    themes: dict[str, dict[str, str]] = Field(
        default_factory=lambda: {DARK_THEME: dict(MYDIA_THEME)}
    )
    builtin_themes: list[str] = Field(default_factory=lambda: list(BUILTIN_THEMES))
    dark_theme: str = DARK_THEME
    flags: FrameworkFlags = Field(default_factory=FrameworkFlags)

    def resolve(self, path: str) -> str:
        """Resolve a dotted token path such as ``"spacing.6"``.

        Only the first dot separates the group, so ``"spacing.0.5"`` works.
        """
        group, _, key = path.partition(".")
        tokens = getattr(self, group, None) if group in _TOKEN_GROUPS else None
        if not key or tokens is None or key not in tokens:
            raise ThemeTokenError(path)

        value = tokens[key]
        if isinstance(value, list):
            return format_font_stack(value)
        return value

    def accessor(self) -> Callable[[str], str]:
        return self.resolve


_TOKEN_GROUPS = ("spacing", "colors", "font_family")


def format_font_stack(families: list[str]) -> str:
    """Join font families for a CSS ``font-family`` value."""
    return ", ".join(f'"{f}"' if " " in f else f for f in families)


def load_theme(path: Path | None = None) -> Theme:
    """Load a theme from a JSON file, or the defaults when ``path`` is None.

    Missing keys fall back to defaults; pydantic validation errors propagate.
    """
    if path is None:
        return Theme()
    data: dict[str, Any] = json.loads(path.read_text(encoding="utf-8"))
    return Theme.model_validate(data)


def render_theme(theme: Theme) -> str:
    """Render theme tokens as CSS custom properties."""
    lines = [":root {"]
    for name, value in sorted(theme.colors.items()):
        lines.append(f"  --color-{name}: {value};")
    for name, families in sorted(theme.font_family.items()):
        lines.append(f"  --font-{name}: {format_font_stack(families)};")
    lines.append("}")

    for name, palette in theme.themes.items():
        if name in theme.builtin_themes:
            continue
        lines.append("")
        lines.append(f'[data-theme="{name}"] {{')
        if name == theme.dark_theme:
            lines.append("  color-scheme: dark;")
        for key, value in palette.items():
            lines.append(f"  --color-{key}: {value};")
        lines.append("}")

    return "\n".join(lines) + "\n"
