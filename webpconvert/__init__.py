"""WebP Converter - convert WebP images to JPG or PNG."""

__version__ = "1.0.0"
