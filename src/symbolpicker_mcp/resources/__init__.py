"""Catalogue text files bundled with the package."""
