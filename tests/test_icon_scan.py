"""Tests for icon directory scanning."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from heromask.icons.scan import (
    DirectoryNotFoundError,
    IconMap,
    IconSize,
    IconStyle,
    list_directory,
    scan_icons,
)


def _fake_lister(tree: dict[str, list[str]]):
    def lister(path: Path) -> list[str]:
        key = path.as_posix()
        if key not in tree:
            raise DirectoryNotFoundError(path)
        return tree[key]

    return lister


ROOT = Path("/icons")


class TestScanIcons(unittest.TestCase):
    def test_each_file_yields_name_with_style_suffix(self) -> None:
        lister = _fake_lister(
            {
                "/icons/24/outline": ["home.svg", "user.svg"],
                "/icons/24/solid": ["home.svg"],
                "/icons/20/solid": ["x-mark.svg"],
                "/icons/16/solid": ["x-mark.svg"],
            }
        )
        icons = scan_icons(ROOT, lister=lister)

        self.assertEqual(
            sorted(icons),
            ["home", "home-solid", "user", "x-mark-micro", "x-mark-mini"],
        )
        self.assertEqual(icons["home-solid"].path, Path("/icons/24/solid/home.svg"))
        self.assertIs(icons["x-mark-mini"].style, IconStyle.MINI)
        self.assertIs(icons["x-mark-micro"].style, IconStyle.MICRO)

    def test_empty_directories_yield_empty_map(self) -> None:
        lister = _fake_lister({f"/icons/{s.subpath}": [] for s in IconStyle})
        icons = scan_icons(ROOT, lister=lister)
        self.assertEqual(len(icons), 0)

    def test_last_directory_wins_collisions(self) -> None:
        # "a-mini.svg" in outline and "a.svg" in mini both map to "a-mini"
        lister = _fake_lister(
            {
                "/icons/24/outline": ["a-mini.svg"],
                "/icons/24/solid": [],
                "/icons/20/solid": ["a.svg"],
                "/icons/16/solid": [],
            }
        )
        icons = scan_icons(ROOT, lister=lister)
        self.assertEqual(list(icons), ["a-mini"])
        self.assertEqual(icons["a-mini"].path, Path("/icons/20/solid/a.svg"))
        self.assertIs(icons["a-mini"].style, IconStyle.MINI)

    def test_micro_wins_over_earlier_styles(self) -> None:
        lister = _fake_lister(
            {
                "/icons/24/outline": ["x-micro.svg"],
                "/icons/24/solid": [],
                "/icons/20/solid": ["b-micro.svg"],
                "/icons/16/solid": ["x.svg"],
            }
        )
        icons = scan_icons(ROOT, lister=lister)
        self.assertEqual(icons["x-micro"].path, Path("/icons/16/solid/x.svg"))
        self.assertIs(icons["x-micro"].style, IconStyle.MICRO)
        self.assertIs(icons["x-micro"].size, IconSize.MICRO)
        self.assertIs(icons["b-micro-mini"].size, IconSize.MINI)

    def test_missing_directory_is_fatal(self) -> None:
        lister = _fake_lister(
            {
                "/icons/24/outline": ["home.svg"],
                "/icons/24/solid": [],
                "/icons/16/solid": [],
            }
        )
        with self.assertRaises(DirectoryNotFoundError) as ctx:
            scan_icons(ROOT, lister=lister)
        self.assertEqual(ctx.exception.path, Path("/icons/20/solid"))

    def test_scan_is_idempotent(self) -> None:
        lister = _fake_lister(
            {
                "/icons/24/outline": ["home.svg"],
                "/icons/24/solid": ["home.svg"],
                "/icons/20/solid": [],
                "/icons/16/solid": ["bolt.svg"],
            }
        )
        first = scan_icons(ROOT, lister=lister)
        second = scan_icons(ROOT, lister=lister)
        self.assertEqual(dict(first), dict(second))


class TestIconMap(unittest.TestCase):
    def test_is_read_only(self) -> None:
        icons = IconMap({})
        with self.assertRaises(TypeError):
            icons["x"] = None  # type: ignore[index]

    def test_names_filters_by_style(self) -> None:
        lister = _fake_lister(
            {
                "/icons/24/outline": ["b.svg", "a.svg"],
                "/icons/24/solid": ["a.svg"],
                "/icons/20/solid": [],
                "/icons/16/solid": [],
            }
        )
        icons = scan_icons(ROOT, lister=lister)
        self.assertEqual(icons.names(), ["a", "a-solid", "b"])
        self.assertEqual(icons.names(IconStyle.OUTLINE), ["a", "b"])
        self.assertEqual(icons.names(IconStyle.MICRO), [])

    def test_outline_names_with_size_suffix_are_sized_by_suffix(self) -> None:
        lister = _fake_lister(
            {
                "/icons/24/outline": ["a-mini.svg", "x-micro.svg"],
                "/icons/24/solid": ["c.svg"],
                "/icons/20/solid": [],
                "/icons/16/solid": [],
            }
        )
        icons = scan_icons(ROOT, lister=lister)
        self.assertIs(icons["a-mini"].style, IconStyle.OUTLINE)
        self.assertIs(icons["a-mini"].size, IconSize.MINI)
        self.assertIs(icons["x-micro"].size, IconSize.MICRO)
        self.assertIs(icons["c-solid"].size, IconSize.REGULAR)

    def test_bare_extension_file_keeps_its_name(self) -> None:
        lister = _fake_lister(
            {
                "/icons/24/outline": [".svg"],
                "/icons/24/solid": [".svg"],
                "/icons/20/solid": [],
                "/icons/16/solid": [],
            }
        )
        icons = scan_icons(ROOT, lister=lister)
        self.assertEqual(sorted(icons), [".svg", ".svg-solid"])
        self.assertNotIn("", icons)

class TestIconStyle(unittest.TestCase):
    def test_scan_order(self) -> None:
        self.assertEqual(
            [(s.suffix, s.subpath) for s in IconStyle],
            [
                ("", "24/outline"),
                ("-solid", "24/solid"),
                ("-mini", "20/solid"),
                ("-micro", "16/solid"),
            ],
        )

    def test_size_for_name(self) -> None:
        for name, size in (
            ("home", IconSize.REGULAR),
            ("home-solid", IconSize.REGULAR),
            ("home-mini", IconSize.MINI),
            ("home-micro", IconSize.MICRO),
            ("mini-home", IconSize.REGULAR),
        ):
            with self.subTest(name=name):
                self.assertIs(IconSize.for_name(name), size)
        self.assertEqual(IconSize.MINI.token, "spacing.5")

    def test_from_label(self) -> None:
        self.assertIs(IconStyle.from_label("micro"), IconStyle.MICRO)
        with self.assertRaises(ValueError):
            IconStyle.from_label("duotone")


class TestListDirectory(unittest.TestCase):
    def test_scan_real_tree(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            for style in IconStyle:
                (root / style.subpath).mkdir(parents=True)
            (root / "24/outline/home.svg").write_text("<svg/>", encoding="utf-8")
            (root / "16/solid/home.svg").write_text("<svg/>", encoding="utf-8")
            (root / "16/solid/nested").mkdir()

            icons = scan_icons(root)
            self.assertEqual(sorted(icons), ["home", "home-micro"])

    def test_missing_root_raises(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(DirectoryNotFoundError):
                list_directory(Path(td) / "missing")

    def test_directory_not_found_is_file_not_found(self) -> None:
        self.assertTrue(issubclass(DirectoryNotFoundError, FileNotFoundError))


if __name__ == "__main__":
    unittest.main()
