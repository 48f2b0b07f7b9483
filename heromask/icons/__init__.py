"""Icon scanning and inlining."""

from .inline import IconComponent, UnknownIconError, icon_declarations, load_markup, strip_newlines
from .scan import DirectoryNotFoundError, IconMap, IconSize, IconSource, IconStyle, scan_icons

__all__ = [
    "DirectoryNotFoundError",
    "IconComponent",
    "IconMap",
    "IconSize",
    "IconSource",
    "IconStyle",
    "UnknownIconError",
    "icon_declarations",
    "load_markup",
    "scan_icons",
    "strip_newlines",
]
