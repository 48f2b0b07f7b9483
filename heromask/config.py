"""Configuration constants and paths for HeroMask."""

import os
from pathlib import Path

# Optimized Heroicons tree, relative to the assets directory by default
# Override via HEROMASK_ICONS_DIR environment variable
ICONS_DIR = Path(os.getenv("HEROMASK_ICONS_DIR", "../deps/heroicons/optimized"))

# Content globs are resolved against this directory
CONTENT_ROOT = Path(os.getenv("HEROMASK_CONTENT_ROOT", "."))

OUTPUT_PATH = Path(os.getenv("HEROMASK_OUTPUT", "priv/static/assets/icons.css"))

CONTENT_GLOBS = (
    "./js/**/*.js",
    "../lib/mydia_web.ex",
    "../lib/mydia_web/**/*.*ex",
)

# Class prefix and custom property prefix for generated icons
ICON_PREFIX = "hero"

SVG_DATA_URI = "data:image/svg+xml;utf8,"

# Tailwind default spacing scale
SPACING = {
    "px": "1px",
    "0": "0px",
    "0.5": "0.125rem",
    "1": "0.25rem",
    "1.5": "0.375rem",
    "2": "0.5rem",
    "2.5": "0.625rem",
    "3": "0.75rem",
    "3.5": "0.875rem",
    "4": "1rem",
    "5": "1.25rem",
    "6": "1.5rem",
    "7": "1.75rem",
    "8": "2rem",
    "9": "2.25rem",
    "10": "2.5rem",
    "11": "2.75rem",
    "12": "3rem",
    "14": "3.5rem",
    "16": "4rem",
    "20": "5rem",
    "24": "6rem",
    "28": "7rem",
    "32": "8rem",
    "36": "9rem",
    "40": "10rem",
    "44": "11rem",
    "48": "12rem",
    "52": "13rem",
    "56": "14rem",
    "60": "15rem",
    "64": "16rem",
    "72": "18rem",
    "80": "20rem",
    "96": "24rem",
}

BRAND_COLOR = "#FD4F00"

FONT_FAMILY = {
    "sans": ["Inter", "ui-sans-serif", "system-ui", "sans-serif"],
    "mono": ["JetBrains Mono", "Fira Code", "monospace"],
}

# Dark application palette; "light" and "dark" are the framework built-ins
MYDIA_THEME = {
    "primary": "#3b82f6",
    "primary-content": "#ffffff",
    "secondary": "#8b5cf6",
    "secondary-content": "#ffffff",
    "accent": "#06b6d4",
    "accent-content": "#ffffff",
    "neutral": "#1f2937",
    "neutral-content": "#f9fafb",
    "base-100": "#0f172a",
    "base-200": "#1e293b",
    "base-300": "#334155",
    "base-content": "#f1f5f9",
    "info": "#3b82f6",
    "success": "#10b981",
    "warning": "#f59e0b",
    "error": "#ef4444",
}

BUILTIN_THEMES = ("light", "dark")
DARK_THEME = "mydia"
