"""docsync — reconcile generated API reference pages with the curated set."""

__version__ = "0.1.0"
