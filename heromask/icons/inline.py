"""Per-icon CSS generation.

The SVG markup is embedded verbatim inside ``url('...')``; only line breaks
are removed. Icons whose markup contains single quotes are not supported.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from pathlib import Path

from ..config import ICON_PREFIX, SVG_DATA_URI
from .scan import IconMap, IconSource

_NEWLINES_RE = re.compile(r"\r?\n|\r")

ThemeAccessor = Callable[[str], str]


class UnknownIconError(LookupError):
    """Raised when a requested icon name is not in the icon map."""

    def __init__(self, name: str):
        super().__init__(f"Unknown icon: {name}")
        self.name = name


def strip_newlines(text: str) -> str:
    """Remove every ``\\r\\n``, ``\\n`` and ``\\r`` from ``text``."""
    return _NEWLINES_RE.sub("", text)


def load_markup(path: Path) -> str:
    """Read an SVG file as a single line of markup."""
    return strip_newlines(path.read_text(encoding="utf-8"))


def custom_property(name: str) -> str:
    return f"--{ICON_PREFIX}-{name}"


def icon_declarations(source: IconSource, theme: ThemeAccessor) -> dict[str, str]:
    """CSS declarations rendering one icon as a tinted mask.

    Args:
        source: Icon to render
        theme: Resolves theme paths such as ``"spacing.6"`` to CSS values

    Returns:
        Property -> value pairs, in output order
    """
    name = source.logical_name
    var = custom_property(name)
    markup = load_markup(source.path)
    size = theme(source.size.token)

    return {
        var: f"url('{SVG_DATA_URI}{markup}')",
        "-webkit-mask": f"var({var})",
        "mask": f"var({var})",
        "mask-repeat": "no-repeat",
        "background-color": "currentColor",
        "vertical-align": "middle",
        "display": "inline-block",
        "width": size,
        "height": size,
    }


class IconComponent:
    """Callable registered with the stylesheet builder.

    Maps a logical icon name to its declarations using a pre-built icon map.
    """

    def __init__(self, icons: IconMap, theme: ThemeAccessor):
        self.icons = icons
        self.theme = theme

    def __contains__(self, name: str) -> bool:
        return name in self.icons

    def __call__(self, name: str) -> dict[str, str]:
        source = self.icons.get(name)
        if source is None:
            raise UnknownIconError(name)
        return icon_declarations(source, self.theme)
