"""Image upload gateway: stores uploaded images on disk and hands out public URLs."""

__version__ = "1.0.0"
