"""Catalogue text loading: bundled resources, local files and remote URLs.

Every loader returns the decoded text, or None when the catalogue is
unavailable. Failures are logged here and never raised to callers.
"""

import logging
import re
from importlib import resources
from pathlib import Path
from typing import Optional

import httpx

logger = logging.getLogger(__name__)

CATALOGUE_SUFFIX = ".txt"
RESOURCE_PACKAGE = "symbolpicker_mcp.resources"

# Plain file stems only: no separators, no leading dot.
_NAME_PATTERN = re.compile(r'^[A-Za-z0-9][A-Za-z0-9._-]*$')


def is_valid_catalogue_name(filename: str) -> bool:
    """Check that a catalogue name is a plain file name with no path components."""
    return bool(_NAME_PATTERN.match(filename)) and ".." not in filename


def catalogue_filename(filename: str) -> str:
    """Append the .txt suffix when missing."""
    if filename.endswith(CATALOGUE_SUFFIX):
        return filename
    return filename + CATALOGUE_SUFFIX


def catalogue_stem(filename: str) -> str:
    """Strip the .txt suffix if present."""
    if filename.endswith(CATALOGUE_SUFFIX):
        return filename[:-len(CATALOGUE_SUFFIX)]
    return filename


def normalize_newlines(text: str) -> str:
    return text.replace('\r\n', '\n')


def validate_path_traversal(resolved_path: Path, base_path: Path) -> bool:
    """Check that a resolved path is within the base directory (no traversal/symlink escape)."""
    try:
        resolved_path.relative_to(base_path)
        return True
    except ValueError:
        return False


def load_resource_text(filename: str) -> Optional[str]:
    """Read a catalogue bundled with the package. Returns None if it is missing."""
    if not is_valid_catalogue_name(filename):
        logger.warning("Refusing invalid catalogue name: %s", filename)
        return None

    resource = resources.files(RESOURCE_PACKAGE).joinpath(catalogue_filename(filename))
    try:
        return normalize_newlines(resource.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Bundled catalogue %s unavailable: %s", filename, e)
        return None


def list_resource_names() -> list[str]:
    """List the stems of all catalogues bundled with the package."""
    names = []
    for entry in resources.files(RESOURCE_PACKAGE).iterdir():
        if entry.name.endswith(CATALOGUE_SUFFIX) and entry.is_file():
            names.append(catalogue_stem(entry.name))
    return sorted(names)


def load_file_text(filename: str, base_dir: str) -> Optional[str]:
    """
    Read a catalogue file from a directory.

    Args:
        filename: Catalogue name, with or without the .txt suffix
        base_dir: Directory holding user catalogues

    Returns:
        The file text, or None if missing, unreadable or outside base_dir
    """
    if not is_valid_catalogue_name(filename):
        logger.warning("Refusing invalid catalogue name: %s", filename)
        return None

    base_path = Path(base_dir).resolve()
    file_path = (base_path / catalogue_filename(filename)).resolve()
    if not validate_path_traversal(file_path, base_path):
        logger.warning("Catalogue path escapes %s: %s", base_path, file_path)
        return None

    if not file_path.is_file():
        return None

    try:
        return normalize_newlines(file_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Catalogue file %s unreadable: %s", file_path, e)
        return None


async def fetch_remote_text(
    url: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Optional[str]:
    """Download catalogue text. Returns None on any HTTP or network failure."""
    headers = {
        "Accept": "text/plain",
        "User-Agent": "symbolpicker-mcp",
    }

    try:
        async with httpx.AsyncClient(transport=transport, follow_redirects=True) as client:
            response = await client.get(url, headers=headers)
            response.raise_for_status()
            return normalize_newlines(response.text)
    except httpx.HTTPError as e:
        logger.warning("Could not fetch catalogue from %s: %s", url, e)
        return None
