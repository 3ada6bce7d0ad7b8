"""Catalogue storage."""

from .catalogue_store import CatalogueStore, default_catalogue

__all__ = ["CatalogueStore", "default_catalogue"]
