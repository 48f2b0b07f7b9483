"""Theme tokens and selector variants."""

from .tokens import FrameworkFlags, Theme, ThemeTokenError, load_theme, render_theme
from .variants import VARIANTS, Variant, get_variant

__all__ = [
    "FrameworkFlags",
    "Theme",
    "ThemeTokenError",
    "VARIANTS",
    "Variant",
    "get_variant",
    "load_theme",
    "render_theme",
]
