"""Tool to get the section outline of a catalogue."""

from typing import Optional

from ..parser.catalogue import Catalogue
from ..storage.catalogue_store import CatalogueStore


def _resolve_catalogue(store: CatalogueStore, catalogue: str) -> tuple[Optional[Catalogue], Optional[dict]]:
    """Load a catalogue by name and return (catalogue, error_dict)."""
    if not store.exists(catalogue):
        return None, {"error": f"Catalogue not found: {catalogue}"}
    return store.load(catalogue), None


def _build_meta(catalogue: Catalogue) -> dict:
    """Build standard _meta envelope from a catalogue."""
    return {
        "identifier_count": len(catalogue.identifiers),
        "section_count": len(catalogue.sections),
    }


def get_sections(
    catalogue: str,
    include_identifiers: bool = False,
    catalogue_dir: Optional[str] = None,
) -> dict:
    """
    Get the sections of a catalogue.

    Args:
        catalogue: Catalogue name (file stem)
        include_identifiers: Whether to include each section's identifiers
        catalogue_dir: Custom catalogue directory (defaults to ~/.symbolpicker)

    Returns:
        Dict with section names and identifier counts in catalogue order
    """
    store = CatalogueStore(catalogue_dir)
    cat, err = _resolve_catalogue(store, catalogue)
    if err:
        return err

    sections = []
    for section in cat.sections:
        entry = {
            "name": section.name,
            "identifier_count": len(section.identifiers),
        }
        if include_identifiers:
            entry["identifiers"] = list(section.identifiers)
        sections.append(entry)

    return {
        "catalogue": cat.name,
        "section_count": len(sections),
        "sections": sections,
        "_meta": _build_meta(cat),
    }
