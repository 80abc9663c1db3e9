"""Genres a catalog entry can carry."""

from enum import Enum

from .errors import GenreNotFoundError


class Genre(Enum):
    """Closed set of genres, in the order statistics report them."""

    FILM_ANIMATION = "FilmAnimation"
    COMEDY = "Comedy"
    EDUCATIONAL = "Educational"
    MUSIC = "Music"
    DOCUMENTARY = "Documentary"
    OTHER = "Other"

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Canonical display label."""
        return self.value

    @classmethod
    def from_label(cls, label: str) -> "Genre":
        """Resolve a genre from its exact display label.

        Args:
            label: Label as it appears in load files, e.g. "Comedy"

        Returns:
            The matching genre

        Raises:
            GenreNotFoundError: If no genre carries this label
        """
        for genre in cls:
            if genre.value == label:
                return genre
        raise GenreNotFoundError(label)
