"""Bulk loading of catalog entries from record files.

A record file holds one video per five lines::

    <title>
    <url>
    <duration in minutes>
    <genre label>
    ===============================

The last record also ends with the separator line.
"""

import sys
from typing import Iterable, Iterator, NamedTuple

from tqdm import tqdm

from .catalog import Catalog
from .config import RECORD_SEPARATOR
from .errors import GenreNotFoundError, RecordFormatError, log_error
from .genre import Genre
from .logging_config import get_logger

logger = get_logger(__name__)

LINES_PER_RECORD = 5


class VideoRecord(NamedTuple):
    """One parsed record, before its genre label is resolved."""

    title: str
    url: str
    duration_minutes: int
    genre_label: str
    line_number: int


def parse_records(lines: Iterable[str]) -> Iterator[VideoRecord]:
    """Parse record lines into video records.

    Args:
        lines: Lines of a record file, with or without trailing newlines

    Yields:
        One VideoRecord per five-line block

    Raises:
        RecordFormatError: If a record is truncated or its duration is not an integer
    """
    block = []
    start = 1
    for number, line in enumerate(lines, start=1):
        if not block:
            start = number
        block.append(line.rstrip("\r\n"))
        if len(block) < LINES_PER_RECORD:
            continue

        title, url, duration_text, genre_label, separator = block
        block = []
        try:
            duration = int(duration_text.strip())
        except ValueError:
            raise RecordFormatError(
                f"Duration is not an integer: {duration_text!r}", start + 2
            ) from None
        if separator != RECORD_SEPARATOR:
            logger.warning("Line %d: unexpected record separator %r", start + 4, separator)
        yield VideoRecord(title, url, duration, genre_label, start)

    # Blank lines after the last separator are not a record
    if any(line.strip() for line in block):
        raise RecordFormatError(
            f"Incomplete record ({len(block)} of {LINES_PER_RECORD} lines)", start
        )


def load_entries(catalog: Catalog, filename: str, verbose: bool = False) -> bool:
    """Load every record in a file into the catalog.

    Each record goes through ``Catalog.add_entry``; a rejected record is not
    fatal. A genre label that matches no genre is: the process exits, since
    the rest of the file cannot be trusted.

    Args:
        catalog: Catalog to load into
        filename: Path of the record file
        verbose: Log a feedback line per record and a final count

    Returns:
        True if the file was read, False if it could not be opened

    Raises:
        RecordFormatError: If a record is malformed. Records before it stay loaded.
    """
    try:
        handle = open(filename, "r", encoding="utf-8")
    except OSError as e:
        log_error(e, f"Cannot open {filename}")
        return False

    count = 0
    with handle:
        for record in tqdm(parse_records(handle), desc="Loading", unit="video", disable=not verbose):
            try:
                genre = Genre.from_label(record.genre_label)
            except GenreNotFoundError as e:
                log_error(e, f"Invalid genre found while loading data (line {record.line_number + 3})")
                sys.exit(1)

            if verbose:
                logger.info(
                    "Loading: %s, %s, %d, %s, ",
                    record.title,
                    record.url,
                    record.duration_minutes,
                    genre,
                )

            catalog.add_entry(record.title, record.url, record.duration_minutes, genre)
            count += 1

    if verbose:
        logger.info("Video entries loaded: %d", count)
    return True
