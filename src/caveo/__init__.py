"""Caveo: filtering, search and sorting over a static wine-cellar catalog."""

__version__ = "0.1.0"
