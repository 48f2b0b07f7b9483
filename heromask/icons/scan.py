"""Icon directory scanning.

The asset tree holds four fixed style directories. Each ``*.svg`` file in
them becomes one logical icon name: its base name plus the style suffix.
Scanning only records file paths; markup is loaded when a class is generated.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType

logger = logging.getLogger(__name__)

SVG_EXTENSION = ".svg"


class DirectoryNotFoundError(FileNotFoundError):
    """Raised when a required icon style directory is missing."""

    def __init__(self, path: Path):
        super().__init__(f"Icon directory not found: {path}")
        self.path = path


class IconStyle(Enum):
    """Icon style directories, in scan order.

    Each member is ``(suffix, subpath)``.
    """

    OUTLINE = ("", "24/outline")
    SOLID = ("-solid", "24/solid")
    MINI = ("-mini", "20/solid")
    MICRO = ("-micro", "16/solid")

    def __init__(self, suffix: str, subpath: str):
        self.suffix = suffix
        self.subpath = subpath

    @classmethod
    def from_label(cls, label: str) -> IconStyle:
        """Look up a style by its lowercase member name (e.g. ``"mini"``)."""
        try:
            return cls[label.upper()]
        except KeyError:
            raise ValueError(f"Unknown icon style: {label}") from None


class IconSize(Enum):
    """Rendered icon size, keyed by theme spacing token."""

    REGULAR = "spacing.6"
    MINI = "spacing.5"
    MICRO = "spacing.4"

    @property
    def token(self) -> str:
        return self.value

    @classmethod
    def for_name(cls, logical_name: str) -> IconSize:
        """Size from the name suffix: ``-mini``, then ``-micro``, else regular."""
        if logical_name.endswith("-mini"):
            return cls.MINI
        if logical_name.endswith("-micro"):
            return cls.MICRO
        return cls.REGULAR


@dataclass(frozen=True)
class IconSource:
    base_name: str
    style: IconStyle
    path: Path
    size: IconSize = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "size", IconSize.for_name(self.logical_name))

    @property
    def logical_name(self) -> str:
        return self.base_name + self.style.suffix


class IconMap(Mapping[str, IconSource]):
    """Read-only mapping of logical icon name to its source file."""

    def __init__(self, entries: Mapping[str, IconSource]):
        self._entries = MappingProxyType(dict(entries))

    def __getitem__(self, name: str) -> IconSource:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"IconMap({len(self)} icons)"

    def names(self, style: IconStyle | None = None) -> list[str]:
        """Sorted logical names, optionally restricted to one style."""
        return sorted(
            name for name, source in self._entries.items()
            if style is None or source.style is style
        )


Lister = Callable[[Path], Iterable[str]]


def list_directory(path: Path) -> list[str]:
    """List file names directly under ``path``.

    Raises:
        DirectoryNotFoundError: If ``path`` is not an existing directory
    """
    if not path.is_dir():
        raise DirectoryNotFoundError(path)
    return sorted(entry.name for entry in os.scandir(path) if entry.is_file())


def scan_icons(
    root: Path,
    styles: Iterable[IconStyle] = tuple(IconStyle),
    lister: Lister = list_directory,
) -> IconMap:
    """Build the icon map for an asset tree.

    Args:
        root: Directory containing the style subdirectories
        styles: Styles to scan, in order; later styles win name collisions
        lister: Returns the file names under a directory

    Returns:
        IconMap keyed by logical name

    Raises:
        DirectoryNotFoundError: If any style directory is missing
    """
    entries: dict[str, IconSource] = {}

    for style in styles:
        directory = root / style.subpath
        count = 0
        for filename in lister(directory):
            base_name = _strip_extension(filename)
            source = IconSource(base_name=base_name, style=style, path=directory / filename)
            entries[source.logical_name] = source
            count += 1
        logger.debug("Scanned %d icons from %s", count, directory)

    return IconMap(entries)


def _strip_extension(filename: str) -> str:
    # A bare ".svg" keeps its name
    if filename.endswith(SVG_EXTENSION) and len(filename) > len(SVG_EXTENSION):
        return filename[: -len(SVG_EXTENSION)]
    return filename
