"""Subcommands registered on the wikiviews app."""
