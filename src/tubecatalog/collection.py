"""Named playlist of entry titles."""

from typing import Iterator, List

from .errors import ValidationError, is_blank


class Collection:
    """A playlist: a fixed name and an ordered list of member titles.

    Members are appended as given, so a title can appear more than once.
    Whether a title exists in the catalog is checked by the catalog, not here.
    """

    def __init__(self, name: str):
        """Initialize collection.

        Args:
            name: Playlist name

        Raises:
            ValidationError: If name is not text or is blank
        """
        if not isinstance(name, str):
            raise ValidationError(f"Playlist name must be text, got {name!r}")
        if is_blank(name):
            raise ValidationError("Playlist name cannot be blank")
        self._name = name
        self._member_titles: List[str] = []

    def copy(self) -> "Collection":
        """Return an independent copy with its own member list."""
        duplicate = Collection(self._name)
        duplicate._member_titles = list(self._member_titles)
        return duplicate

    __copy__ = copy

    def __deepcopy__(self, memo) -> "Collection":
        return self.copy()

    @property
    def name(self) -> str:
        return self._name

    @property
    def member_titles(self) -> List[str]:
        """Member titles in insertion order. Returns a new list."""
        return list(self._member_titles)

    def add_member(self, title: str) -> bool:
        """Append a title to the playlist.

        Args:
            title: Entry title

        Returns:
            True once the title is appended
        """
        self._member_titles.append(title)
        return True

    def __len__(self) -> int:
        return len(self._member_titles)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._member_titles))

    def __repr__(self) -> str:
        return f"Collection(name={self._name!r}, member_titles={self._member_titles!r})"
