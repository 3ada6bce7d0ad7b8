"""Tool to search identifiers within a catalogue."""

from typing import Optional

from ..parser.outline import find_sections, flatten_sections
from ..storage.catalogue_store import CatalogueStore
from .get_sections import _resolve_catalogue, _build_meta


def search_symbols(
    catalogue: str,
    query: str,
    max_results: int = 50,
    section: Optional[str] = None,
    catalogue_dir: Optional[str] = None,
) -> dict:
    """
    Search for identifiers matching a query.

    Args:
        catalogue: Catalogue name (file stem)
        query: Case-insensitive substring to look for
        max_results: Maximum number of results to return
        section: Only search identifiers of this section
        catalogue_dir: Custom catalogue directory (defaults to ~/.symbolpicker)

    Returns:
        Dict with matching identifiers, the section each match was found in
        and every section listing the same identifier
    """
    store = CatalogueStore(catalogue_dir)
    cat, err = _resolve_catalogue(store, catalogue)
    if err:
        return err

    query_lower = query.strip().lower()
    if not query_lower:
        return {"error": "Empty query"}

    entries = flatten_sections(cat.sections)
    if section is not None:
        entries = [e for e in entries if e[0] == section]

    results: list[tuple[int, int, str, str]] = []
    for position, (section_name, identifier) in enumerate(entries):
        ident_lower = identifier.strip().lower()
        if query_lower not in ident_lower:
            continue

        # Exact, then prefix, then substring; ties keep catalogue order
        if ident_lower == query_lower:
            score = 0
        elif ident_lower.startswith(query_lower):
            score = 1
        else:
            score = 2
        results.append((score, position, section_name, identifier))

    results.sort(key=lambda r: (r[0], r[1]))
    results = results[:max_results]

    return {
        "catalogue": cat.name,
        "query": query,
        "result_count": len(results),
        "results": [
            {
                "identifier": identifier,
                "section": section_name,
                "sections": find_sections(identifier, cat.sections),
            }
            for _, _, section_name, identifier in results
        ],
        "_meta": _build_meta(cat),
    }
