"""Publishing context resolver for tag-driven package releases."""

__version__ = "0.1.0"
