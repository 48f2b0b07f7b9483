"""CSS text rendering helpers."""

from __future__ import annotations

import re
from collections.abc import Mapping

_UNSAFE_CLASS_CHARS_RE = re.compile(r"([^A-Za-z0-9_-])")


def escape_class(name: str) -> str:
    """Escape a class name for use in a selector (``a:b`` -> ``a\\:b``)."""
    return _UNSAFE_CLASS_CHARS_RE.sub(r"\\\1", name)


def class_selector(name: str) -> str:
    return "." + escape_class(name)


def render_rule(selector: str, declarations: Mapping[str, str]) -> str:
    lines = [f"{selector} {{"]
    for prop, value in declarations.items():
        lines.append(f"  {prop}: {value};")
    lines.append("}")
    return "\n".join(lines) + "\n"
