"""Selector variants for LiveView loading states.

A class such as ``phx-click-loading:hero-arrow-path`` only applies while the
element, or one of its ancestors, carries the ``phx-click-loading`` class.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Variant:
    name: str
    # "&" is replaced by the generated class selector
    templates: tuple[str, ...]

    def apply(self, selector: str) -> str:
        return ", ".join(t.replace("&", selector) for t in self.templates)


def loading_variant(name: str) -> Variant:
    return Variant(name=name, templates=(f".{name}&", f".{name} &"))


VARIANTS: dict[str, Variant] = {
    v.name: v
    for v in (
        loading_variant("phx-click-loading"),
        loading_variant("phx-submit-loading"),
        loading_variant("phx-change-loading"),
    )
}


def get_variant(name: str) -> Variant | None:
    return VARIANTS.get(name)
