"""Tool to list available catalogues."""

from typing import Optional

from ..storage.catalogue_store import CatalogueStore


def list_catalogues(catalogue_dir: Optional[str] = None) -> dict:
    """
    List all available catalogues.

    Args:
        catalogue_dir: Custom catalogue directory (defaults to ~/.symbolpicker)

    Returns:
        Dict with catalogue names and where each comes from
    """
    store = CatalogueStore(catalogue_dir)
    catalogues = store.list_catalogues()

    return {
        "count": len(catalogues),
        "catalogues": catalogues,
    }
