"""Shared test fixtures for symbolpicker-mcp tests."""

import pytest


@pytest.fixture
def catalogue_dir(tmp_path):
    """Provide a temporary user catalogue directory."""
    d = tmp_path / "catalogues"
    d.mkdir()
    return str(d)


@pytest.fixture
def sample_catalogue():
    """Return catalogue text with leading ungrouped lines, blanks and an empty header."""
    return """plus
minus

## Shapes
square
circle

## Unused
## Arrows
arrow.up
arrow.down
   
## Trailing
"""


@pytest.fixture
def populated_dir(catalogue_dir, sample_catalogue):
    """Catalogue directory holding one user catalogue named 'custom'."""
    from pathlib import Path
    (Path(catalogue_dir) / "custom.txt").write_text(sample_catalogue, encoding="utf-8")
    return catalogue_dir
