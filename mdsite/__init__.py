"""Build a static HTML site from a tree of Markdown documents."""

__version__ = "0.1.0"
