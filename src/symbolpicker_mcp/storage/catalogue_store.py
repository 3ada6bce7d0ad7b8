"""Catalogue storage and retrieval."""

import logging
import os
from pathlib import Path
from typing import Optional

from ..loader import (
    catalogue_filename,
    catalogue_stem,
    is_valid_catalogue_name,
    list_resource_names,
    load_file_text,
    load_resource_text,
    CATALOGUE_SUFFIX,
)
from ..parser.catalogue import Catalogue, DEFAULT_NAME

logger = logging.getLogger(__name__)

DEFAULT_CATALOGUE = "SFSymbols"

_default_catalogue: Optional[Catalogue] = None


def default_catalogue() -> Catalogue:
    """All symbols in the bundled default catalogue, parsed once per process."""
    global _default_catalogue
    if _default_catalogue is None:
        _default_catalogue = Catalogue.from_resource(DEFAULT_CATALOGUE, name=DEFAULT_NAME)
    return _default_catalogue


class CatalogueStore:
    """Resolves catalogues from a user directory, falling back to bundled ones."""

    def __init__(self, catalogue_dir: Optional[str] = None):
        if catalogue_dir:
            self.base_path = Path(catalogue_dir)
        elif os.environ.get("SYMBOLPICKER_CATALOGUE_DIR"):
            self.base_path = Path(os.environ["SYMBOLPICKER_CATALOGUE_DIR"])
        else:
            # Default to ~/.symbolpicker
            self.base_path = Path.home() / ".symbolpicker"
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _catalogue_path(self, filename: str) -> Path:
        """Get path to a user catalogue file."""
        return self.base_path / catalogue_filename(filename)

    def _user_names(self) -> list[str]:
        return sorted(
            catalogue_stem(p.name)
            for p in self.base_path.glob(f"*{CATALOGUE_SUFFIX}")
            if p.is_file() and is_valid_catalogue_name(p.name)
        )

    def list_catalogues(self) -> list[dict]:
        """List user and bundled catalogues. User files shadow bundled ones."""
        user = self._user_names()
        entries = [{"name": n, "source": "user"} for n in user]
        entries.extend(
            {"name": n, "source": "bundled"}
            for n in list_resource_names()
            if n not in user
        )
        return entries

    def exists(self, filename: str) -> bool:
        filename = catalogue_stem(filename)
        return any(c["name"] == filename for c in self.list_catalogues())

    def load_text(self, filename: str) -> Optional[str]:
        """
        Get raw catalogue text from the user directory, then from bundled resources.

        An existing but unreadable user file shadows the bundled catalogue of
        the same name and yields None.
        """
        if is_valid_catalogue_name(filename) and self._catalogue_path(filename).is_file():
            return load_file_text(filename, str(self.base_path))
        return load_resource_text(filename)

    def load(self, filename: str, name: Optional[str] = None) -> Catalogue:
        """
        Load and parse a catalogue.

        Args:
            filename: Catalogue name, with or without the .txt suffix
            name: Display name (defaults to the catalogue name)

        Returns:
            The parsed Catalogue; empty if no such catalogue exists
        """
        stem = catalogue_stem(filename)
        return Catalogue.from_resource(stem, name=name or stem, loader=self.load_text)

    def save_text(self, filename: str, text: str) -> Path:
        """Write catalogue text into the user directory."""
        if not is_valid_catalogue_name(filename):
            raise ValueError(f"Invalid catalogue name: {filename}")

        path = self._catalogue_path(filename)
        path.write_text(text.replace('\r\n', '\n'), encoding="utf-8", newline='')
        logger.info("Saved catalogue %s", path)
        return path

    def delete(self, filename: str) -> bool:
        """Delete a user catalogue. Bundled catalogues cannot be deleted."""
        if not is_valid_catalogue_name(filename):
            return False

        path = self._catalogue_path(filename)
        if not path.is_file():
            return False

        path.unlink()
        logger.info("Deleted catalogue %s", path)
        return True
