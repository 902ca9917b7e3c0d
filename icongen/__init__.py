"""icongen — SVG icons to Android vector drawables and iOS SF Symbols."""

__version__ = "0.1.0"
