"""HeroMask: inline SVG icons into a stylesheet as CSS mask images."""

__version__ = "0.1.0"
