"""Outline helpers: flatten, look up and re-render catalogue sections."""

from typing import Iterable

from .catalogue import Catalogue, HEADER_MARKER, Section


def flatten_sections(sections: Iterable[Section]) -> list[tuple[str, str]]:
    """
    Flatten sections back to a list.

    Returns list of (section_name, identifier) tuples in catalogue order.
    """
    result: list[tuple[str, str]] = []
    for section in sections:
        result.extend((section.name, identifier) for identifier in section.identifiers)
    return result


def find_sections(identifier: str, sections: Iterable[Section]) -> list[str]:
    """Get the names of all sections containing an identifier."""
    return [s.name for s in sections if identifier in s.identifiers]


def render_sections(sections: Iterable[Section]) -> str:
    """
    Render sections as catalogue text.

    A leading section named "" is written without a header so that
    ungrouped identifiers stay ungrouped when parsed again.
    """
    lines: list[str] = []
    for index, section in enumerate(sections):
        if index > 0 or section.name:
            lines.append(f"{HEADER_MARKER}{section.name}")
        lines.extend(section.identifiers)
    return "\n".join(lines)


def render_catalogue(catalogue: Catalogue) -> str:
    """Render a catalogue's sections as text that parses back to the same sections."""
    return render_sections(catalogue.sections)
