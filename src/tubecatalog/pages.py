"""Static HTML page generation for playlists."""

from html import escape
from typing import Iterable, Tuple

from .catalog import Catalog
from .config import PAGE_TITLE
from .errors import ValidationError, is_blank, log_error
from .logging_config import get_logger

logger = get_logger(__name__)


def render_playlist_body(playlist_name: str, items: Iterable[Tuple[str, str]]) -> str:
    """Render the page body for a playlist.

    Args:
        playlist_name: Heading text
        items: (title, url) pairs in playlist order

    Returns:
        HTML fragment with a heading and one embedded frame per item
    """
    body = f"<h2>Playlist: {escape(playlist_name)}</h2>\n"
    for title, url in items:
        body += f"<strong>{escape(title)}</strong><br>"
        body += '<iframe width="100" height="100" '
        body += f'src="{escape(url)}"></iframe><br><br>'
    return body


def render_page(body: str) -> str:
    """Wrap a body fragment in a minimal HTML page."""
    return (
        "<!doctype html>\n"
        '<html lang="en">\n'
        "<head>\n"
        f"<title>{PAGE_TITLE}</title>\n"
        '<meta charset="utf-8" />\n'
        "</head>\n"
        "<body>\n"
        f"{body}\n"
        "</body>\n"
        "</html>\n"
    )


def write_page(filename: str, page: str) -> bool:
    """Write a page to disk as UTF-8.

    Returns:
        True if written, False if the file could not be written
    """
    try:
        with open(filename, "w", encoding="utf-8") as f:
            f.write(page)
    except OSError as e:
        log_error(e, f"Writing to file {filename} failed")
        return False
    return True


def generate_playlist_page(
    catalog: Catalog, filename: str, playlist_name: str, verbose: bool = False
) -> bool:
    """Write a page embedding every video of a playlist.

    Args:
        catalog: Catalog holding the playlist and its entries
        filename: Output file path
        playlist_name: Name of a playlist registered in the catalog
        verbose: Log a line once the file is written

    Returns:
        True if the page was written, False otherwise

    Raises:
        ValidationError: If playlist_name is blank or not a registered playlist
    """
    if is_blank(playlist_name):
        raise ValidationError("Playlist name cannot be blank")
    playlist = catalog.get_collection(playlist_name)
    if playlist is None:
        raise ValidationError(f"Playlist {playlist_name!r} not found")

    items = []
    for title in playlist.member_titles:
        entry = catalog.find_entry(title)
        if entry is None:
            logger.warning("Skipping %r: no longer in catalog", title)
            continue
        items.append((title, entry.url))

    page = render_page(render_playlist_body(playlist_name, items))
    written = write_page(filename, page)
    if written and verbose:
        logger.info("%s has been created", filename)
    return written
