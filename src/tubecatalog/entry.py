"""Catalog entry representing a single video."""

import functools
from typing import List, Optional

from .errors import CatalogError, Result, ValidationError, is_blank
from .genre import Genre


@functools.total_ordering
class Entry:
    """A video record: title, url, duration, genre and comments.

    Two entries are equal when their titles are equal. Natural order is
    lexicographic by title.
    """

    def __init__(self, title: str, url: str, duration_minutes: int, genre: Genre):
        """Initialize entry.

        Args:
            title: Video title, used as the lookup key
            url: Video url
            duration_minutes: Duration in minutes, must be positive
            genre: Video genre

        Raises:
            ValidationError: If any field is missing, blank or out of range
        """
        if not isinstance(title, str) or not isinstance(url, str):
            raise ValidationError(f"Title and url must be text, got {title!r} and {url!r}")
        if is_blank(title) or is_blank(url):
            raise ValidationError("Title and url cannot be blank")
        if not isinstance(genre, Genre):
            raise ValidationError(f"Invalid genre: {genre!r}")
        if (
            not isinstance(duration_minutes, int)
            or isinstance(duration_minutes, bool)
            or duration_minutes <= 0
        ):
            raise ValidationError(f"Duration must be a positive integer, got {duration_minutes!r}")

        self._title = title
        self._url = url
        self._duration_minutes = duration_minutes
        self._genre = genre
        self._comments: List[str] = []

    @classmethod
    def create(
        cls, title: str, url: str, duration_minutes: int, genre: Optional[Genre]
    ) -> Result["Entry"]:
        """Build an entry without raising.

        Returns:
            Result holding the entry, or the validation error
        """
        try:
            return Result.ok(cls(title, url, duration_minutes, genre))
        except CatalogError as e:
            return Result.fail(e)

    def copy(self) -> "Entry":
        """Return an independent copy with its own comment list."""
        duplicate = Entry(self._title, self._url, self._duration_minutes, self._genre)
        duplicate._comments = list(self._comments)
        return duplicate

    __copy__ = copy

    def __deepcopy__(self, memo) -> "Entry":
        return self.copy()

    @property
    def title(self) -> str:
        return self._title

    @property
    def url(self) -> str:
        return self._url

    @property
    def duration_minutes(self) -> int:
        return self._duration_minutes

    @property
    def genre(self) -> Genre:
        return self._genre

    @property
    def comments(self) -> List[str]:
        """Comments in the order they were added. Returns a new list."""
        return list(self._comments)

    def add_comment(self, text: str) -> bool:
        """Append a comment.

        Args:
            text: Comment text

        Returns:
            True once the comment is stored

        Raises:
            ValidationError: If text is blank
        """
        if is_blank(text):
            raise ValidationError("Comment cannot be blank")
        self._comments.append(text)
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self._title == other._title

    def __lt__(self, other: "Entry") -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self._title < other._title

    def __hash__(self) -> int:
        return hash(self._title)

    def __str__(self) -> str:
        return (
            f'Title: "{self._title}"\n'
            f"Url: {self._url}\n"
            f"Duration (minutes): {self._duration_minutes}\n"
            f"Genre: {self._genre}\n"
        )

    def __repr__(self) -> str:
        return (
            f"Entry(title={self._title!r}, url={self._url!r}, "
            f"duration_minutes={self._duration_minutes!r}, genre={self._genre!r})"
        )
