"""MCP tool implementations."""

from .list_catalogues import list_catalogues
from .get_sections import get_sections
from .get_section import get_section, get_section_batch
from .search_symbols import search_symbols
from .import_catalogue import import_catalogue

__all__ = [
    "list_catalogues",
    "get_sections",
    "get_section",
    "get_section_batch",
    "search_symbols",
    "import_catalogue",
]
