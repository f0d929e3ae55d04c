"""Patient records loaded from CSV, with prefix search and a paged interactive listing."""

__version__ = "0.1.0"