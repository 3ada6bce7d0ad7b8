"""Symbol catalogues grouped into sections, served over MCP."""

from .parser.catalogue import Catalogue, Section
from .storage.catalogue_store import default_catalogue

__all__ = ["Catalogue", "Section", "default_catalogue"]
