"""Common test fixtures and utilities."""

import pytest

from src.tubecatalog.catalog import Catalog
from src.tubecatalog.genre import Genre


@pytest.fixture
def catalog() -> Catalog:
    """Create an empty catalog."""
    return Catalog()


@pytest.fixture
def populated_catalog(catalog: Catalog) -> Catalog:
    """Create a catalog holding three entries and no playlists.

    Returns:
        Catalog: Cats (5, Comedy), Dogs (15, Comedy), Volcanoes (42, Documentary)
    """
    catalog.add_entry("Cats", "u1", 5, Genre.COMEDY)
    catalog.add_entry("Dogs", "u2", 15, Genre.COMEDY)
    catalog.add_entry("Volcanoes", "u3", 42, Genre.DOCUMENTARY)
    return catalog
