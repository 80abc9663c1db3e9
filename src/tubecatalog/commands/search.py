"""Search command for the catalog."""

from typing import Optional

from ..catalog import Catalog
from ..collection import Collection
from ..genre import Genre
from ..logging_config import get_logger
from .base import CatalogCommand

# Get logger for this module
logger = get_logger(__name__)


class SearchCommand(CatalogCommand):
    """Command for listing entries that match title, duration and genre filters."""

    def __init__(
        self,
        catalog: Catalog,
        data_file: str,
        title: Optional[str] = None,
        max_duration: int = -1,
        genre: Optional[Genre] = None,
        name: Optional[str] = None,
        verbose: bool = False,
    ) -> None:
        """Initialize command.

        Args:
            catalog: Catalog to load into and query
            data_file: Record file to load before searching
            title: Exact title to match
            max_duration: Longest duration allowed in minutes, negative for any
            genre: Genre to match
            name: Name of the result playlist
            verbose: Whether to show verbose output
        """
        super().__init__(catalog, data_file, verbose=verbose)
        self.title = title
        self.max_duration = max_duration
        self.genre = genre
        self.name = name
        self.results: Optional[Collection] = None

    def search(self) -> Collection:
        """Run the search against the loaded catalog."""
        self.results = self.catalog.search(self.name, self.title, self.max_duration, self.genre)
        return self.results

    def _run(self) -> bool:
        results = self.search()
        logger.info("%s: %d matching videos", results.name, len(results))
        for title in results:
            logger.info("- %s", title)
        return True
