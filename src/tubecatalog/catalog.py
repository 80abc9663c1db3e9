"""In-memory catalog of video entries and playlists."""

from typing import List, Optional

from .collection import Collection
from .config import SEARCH_RESULTS_NAME
from .entry import Entry
from .errors import ValidationError, is_blank, log_error
from .genre import Genre
from .logging_config import get_logger

logger = get_logger(__name__)


class Catalog:
    """Owns every entry and playlist.

    Stored instances never leave the catalog: lookups and listings return
    copies, so callers cannot mutate catalog state through them. The catalog
    does no locking; hosts sharing one instance across threads must guard all
    calls with a single lock.
    """

    def __init__(self) -> None:
        """Initialize an empty catalog."""
        self._entries: List[Entry] = []
        self._collections: List[Collection] = []

    def __len__(self) -> int:
        return len(self._entries)

    def add_entry(self, title: str, url: str, duration_minutes: int, genre: Genre) -> bool:
        """Create an entry and store it.

        Titles are not checked for duplicates. Validation failures are logged
        and reported as False rather than raised.

        Returns:
            True if the entry was added, False otherwise
        """
        result = Entry.create(title, url, duration_minutes, genre)
        if not result.succeeded:
            log_error(result.error, "Entry rejected")
            return False

        self._entries.append(result.value)
        logger.debug("Added entry %r", title)
        return True

    def all_entries(self) -> List[Entry]:
        """Return copies of all entries in insertion order."""
        return [entry.copy() for entry in self._entries]

    def find_entry(self, title: str) -> Optional[Entry]:
        """Find an entry by exact title.

        Args:
            title: Title to look up

        Returns:
            Copy of the first matching entry, or None if not found

        Raises:
            ValidationError: If title is blank
        """
        if is_blank(title):
            raise ValidationError("Title cannot be blank")

        entry = self._find_entry_internal(title)
        return entry.copy() if entry is not None else None

    def add_comment(self, title: str, text: str) -> bool:
        """Add a comment to the stored entry with the given title.

        Returns:
            True if the comment was added, False on blank input or unknown title
        """
        if is_blank(title) or is_blank(text):
            return False

        entry = self._find_entry_internal(title)
        if entry is None:
            logger.debug("No entry titled %r to comment on", title)
            return False
        return entry.add_comment(text)

    def add_collection(self, name: str) -> bool:
        """Create a playlist unless one with this name exists.

        Returns:
            True if the playlist was created, False if the name is taken

        Raises:
            ValidationError: If name is blank
        """
        if is_blank(name):
            raise ValidationError("Playlist name cannot be blank")

        if self._find_collection_internal(name) is not None:
            return False

        self._collections.append(Collection(name))
        logger.debug("Created playlist %r", name)
        return True

    def collection_names(self) -> List[str]:
        """Return playlist names in creation order."""
        return [collection.name for collection in self._collections]

    def add_entry_to_collection(self, title: str, collection_name: str) -> bool:
        """Append a title to a playlist when both exist.

        Adding the same title twice appends it twice.

        Returns:
            True if the title was appended, False otherwise
        """
        if is_blank(title) or is_blank(collection_name):
            return False

        entry = self._find_entry_internal(title)
        collection = self._find_collection_internal(collection_name)
        if entry is None or collection is None:
            return False
        return collection.add_member(title)

    def get_collection(self, name: str) -> Optional[Collection]:
        """Return a copy of the named playlist.

        Returns:
            Copy of the playlist, or None if not found

        Raises:
            ValidationError: If name is blank
        """
        if is_blank(name):
            raise ValidationError("Playlist name cannot be blank")

        collection = self._find_collection_internal(name)
        return collection.copy() if collection is not None else None

    def clear(self) -> None:
        """Remove all entries and playlists."""
        self._entries.clear()
        self._collections.clear()
        logger.debug("Catalog cleared")

    def search(
        self,
        collection_name: Optional[str],
        title: Optional[str] = None,
        max_duration_minutes: int = -1,
        genre: Optional[Genre] = None,
    ) -> Collection:
        """Build an unregistered playlist of entries matching every criterion.

        Args:
            collection_name: Name for the result; blank uses SEARCH_RESULTS_NAME
            title: Exact title to match, ignored if None or empty
            max_duration_minutes: Longest duration allowed, ignored if negative
            genre: Genre to match, ignored if None

        Returns:
            New playlist with matching titles in storage order
        """
        if is_blank(collection_name):
            collection_name = SEARCH_RESULTS_NAME
        results = Collection(collection_name)

        for entry in self._entries:
            if title and entry.title != title:
                continue
            if max_duration_minutes >= 0 and entry.duration_minutes > max_duration_minutes:
                continue
            if genre is not None and entry.genre != genre:
                continue
            results.add_member(entry.title)

        return results

    def statistics(self) -> str:
        """Return a text summary of entry, playlist and per-genre counts."""
        lines = [
            "***** Statistics *****",
            f"Number of video entries: {len(self._entries)}",
            f"Number of playlists: {len(self._collections)}",
        ]
        for genre in Genre:
            count = sum(1 for entry in self._entries if entry.genre == genre)
            lines.append(f'Genre "{genre}" count {count}')
        return "\n".join(lines) + "\n"

    def _find_entry_internal(self, title: str) -> Optional[Entry]:
        for entry in self._entries:
            if entry.title == title:
                return entry
        return None

    def _find_collection_internal(self, name: str) -> Optional[Collection]:
        for collection in self._collections:
            if collection.name == name:
                return collection
        return None
