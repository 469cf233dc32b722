"""Read, write and maintain a shelfbox store: index, manifests and store metadata."""

__version__ = "0.4.0"