"""A tile-based scene with a soldier who walks around water and a rock."""

__version__ = "0.1.0"