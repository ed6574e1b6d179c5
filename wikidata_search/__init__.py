"""Wikidata entity search provider for desktop shell search."""

__version__ = "0.2.0"
