"""Page command: build a playlist from a search and render it as HTML."""

from typing import Optional

from ..catalog import Catalog
from ..genre import Genre
from ..logging_config import get_logger
from ..pages import generate_playlist_page
from .search import SearchCommand

logger = get_logger(__name__)


class PageCommand(SearchCommand):
    """Command for writing a static page for the videos matching a search."""

    def __init__(
        self,
        catalog: Catalog,
        data_file: str,
        output_file: str,
        playlist: str,
        title: Optional[str] = None,
        max_duration: int = -1,
        genre: Optional[Genre] = None,
        verbose: bool = False,
    ) -> None:
        """Initialize command.

        Args:
            catalog: Catalog to load into
            data_file: Record file to load
            output_file: Path of the page to write
            playlist: Name of the playlist to register and render
            title: Exact title to match
            max_duration: Longest duration allowed in minutes, negative for any
            genre: Genre to match
            verbose: Whether to show verbose output
        """
        super().__init__(
            catalog,
            data_file,
            title=title,
            max_duration=max_duration,
            genre=genre,
            name=playlist,
            verbose=verbose,
        )
        self.output_file = output_file
        self.playlist = playlist

    def validate(self) -> None:
        """Validate command parameters."""
        super().validate()
        if not self.output_file:
            raise ValueError("Output file is required")
        if not self.playlist or not self.playlist.strip():
            raise ValueError("Playlist name is required")

    def _run(self) -> bool:
        results = self.search()
        if not self.catalog.add_collection(self.playlist):
            logger.warning("Playlist %r already exists, appending to it", self.playlist)
        for title in results:
            self.catalog.add_entry_to_collection(title, self.playlist)

        logger.info("Playlist %r has %d videos", self.playlist, len(results))
        return generate_playlist_page(
            self.catalog, self.output_file, self.playlist, verbose=self.verbose
        )
