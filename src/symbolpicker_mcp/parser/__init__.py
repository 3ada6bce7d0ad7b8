"""Catalogue parsing utilities."""

from .catalogue import Catalogue, Section, split_lines, extract_sections
from .outline import render_catalogue, flatten_sections, find_sections

__all__ = [
    "Catalogue",
    "Section",
    "split_lines",
    "extract_sections",
    "render_catalogue",
    "flatten_sections",
    "find_sections",
]
