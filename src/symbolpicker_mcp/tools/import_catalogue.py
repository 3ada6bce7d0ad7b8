"""Tool to import a catalogue from a URL."""

import logging
import os
from typing import Optional

import httpx

from ..loader import fetch_remote_text, is_valid_catalogue_name, catalogue_stem
from ..parser.catalogue import Catalogue
from ..storage.catalogue_store import CatalogueStore

logger = logging.getLogger(__name__)


async def import_catalogue(
    url: str,
    filename: str,
    catalogue_dir: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> dict:
    """
    Download catalogue text and store it as a user catalogue.

    Args:
        url: URL of a plain-text catalogue
        filename: Catalogue name to store it under
        catalogue_dir: Custom catalogue directory (defaults to ~/.symbolpicker)
        transport: Optional httpx transport (used by tests)

    Returns:
        Dict with import statistics
    """
    # Block remote imports in local-only mode
    local_only = os.environ.get('SYMBOLPICKER_LOCAL_ONLY', '').lower() in ('true', '1', 'yes')
    if local_only:
        return {
            "success": False,
            "error": "Remote import disabled in local-only mode. Set SYMBOLPICKER_LOCAL_ONLY=false or unset to enable.",
        }

    stem = catalogue_stem(filename)
    if not is_valid_catalogue_name(stem):
        return {"success": False, "error": f"Invalid catalogue name: {filename}"}

    text = await fetch_remote_text(url, transport=transport)
    if text is None:
        return {"success": False, "error": f"Could not fetch catalogue: {url}"}

    catalogue = Catalogue.from_text(text, name=stem)
    if catalogue.is_empty():
        return {"success": False, "error": "Downloaded catalogue is empty", "url": url}

    store = CatalogueStore(catalogue_dir)
    path = store.save_text(stem, text)
    logger.info("Imported %d identifiers from %s", len(catalogue.identifiers), url)

    return {
        "success": True,
        "catalogue": stem,
        "path": str(path),
        "identifier_count": len(catalogue.identifiers),
        "section_count": len(catalogue.sections),
        "sections": catalogue.section_names,
    }
