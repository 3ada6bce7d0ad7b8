"""Tool to get the identifiers of a specific section."""

from typing import Optional

from ..storage.catalogue_store import CatalogueStore
from .get_sections import _resolve_catalogue, _build_meta


def get_section(
    catalogue: str,
    section: str,
    catalogue_dir: Optional[str] = None,
) -> dict:
    """
    Get the identifiers of one section.

    Args:
        catalogue: Catalogue name (file stem)
        section: Section name; "" selects identifiers listed before any header
        catalogue_dir: Custom catalogue directory (defaults to ~/.symbolpicker)

    Returns:
        Dict with the section name and its identifiers
    """
    store = CatalogueStore(catalogue_dir)
    cat, err = _resolve_catalogue(store, catalogue)
    if err:
        return err

    found = cat.get_section(section)
    if found is None:
        return {"error": f"Section not found: {section}"}

    return {
        "catalogue": cat.name,
        "section": found.name,
        "identifier_count": len(found.identifiers),
        "identifiers": list(found.identifiers),
        "_meta": _build_meta(cat),
    }


def get_section_batch(
    catalogue: str,
    sections: list[str],
    catalogue_dir: Optional[str] = None,
) -> dict:
    """
    Get the identifiers of several sections.

    Returns:
        Dict with the found sections and any per-section errors
    """
    results = []
    errors = []

    for section in sections:
        result = get_section(catalogue, section, catalogue_dir)
        if "error" in result:
            errors.append({"section": section, "error": result["error"]})
        else:
            results.append(result)

    return {
        "sections": results,
        "errors": errors if errors else None,
    }
