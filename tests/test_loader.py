"""Tests for bulk loading from record files."""

import logging
from unittest.mock import patch

import pytest

from src.tubecatalog.catalog import Catalog
from src.tubecatalog.errors import RecordFormatError
from src.tubecatalog.genre import Genre
from src.tubecatalog.loader import VideoRecord, load_entries, parse_records

SEPARATOR = "=" * 31


def test_parse_records(sample_records):
    """Test records are parsed with their starting line numbers."""
    records = list(parse_records(sample_records.splitlines(keepends=True)))

    assert records == [
        VideoRecord("Cats", "http://example.com/cats", 5, "Comedy", 1),
        VideoRecord("Dogs", "http://example.com/dogs", 15, "Comedy", 6),
        VideoRecord("Volcanoes", "http://example.com/volcanoes", 42, "Documentary", 11),
    ]


def test_parse_records_empty():
    """Test an empty file has no records."""
    assert list(parse_records([])) == []


def test_parse_records_windows_line_endings():
    """Test CRLF line endings are stripped."""
    lines = ["Cats\r\n", "u1\r\n", "5\r\n", "Comedy\r\n", SEPARATOR + "\r\n"]
    assert list(parse_records(lines)) == [VideoRecord("Cats", "u1", 5, "Comedy", 1)]


def test_parse_records_bad_duration():
    """Test a non-integer duration reports its line."""
    lines = ["Cats", "u1", "five", "Comedy", SEPARATOR]
    with pytest.raises(RecordFormatError) as exc_info:
        list(parse_records(lines))
    assert exc_info.value.line_number == 3


def test_parse_records_truncated():
    """Test a truncated final record is reported."""
    lines = ["Cats", "u1", "5", "Comedy", SEPARATOR, "Dogs", "u2"]
    with pytest.raises(RecordFormatError) as exc_info:
        list(parse_records(lines))
    assert exc_info.value.line_number == 6


def test_parse_records_unexpected_separator(caplog):
    """Test an odd separator line is only a warning."""
    lines = ["Cats", "u1", "5", "Comedy", "---"]
    with caplog.at_level(logging.WARNING):
        records = list(parse_records(lines))
    assert len(records) == 1
    assert "unexpected record separator" in caplog.text


def test_load_entries(sample_file):
    """Test every record is added to the catalog."""
    catalog = Catalog()

    assert load_entries(catalog, sample_file) is True

    assert [e.title for e in catalog.all_entries()] == ["Cats", "Dogs", "Volcanoes"]
    assert catalog.find_entry("Volcanoes").genre is Genre.DOCUMENTARY


def test_load_entries_missing_file(tmp_path, caplog):
    """Test an unreadable file returns False."""
    catalog = Catalog()
    with caplog.at_level(logging.ERROR):
        assert load_entries(catalog, str(tmp_path / "missing.txt")) is False
    assert "Cannot open" in caplog.text
    assert len(catalog) == 0


def test_load_entries_verbose(sample_file, caplog):
    """Test verbose mode logs a line per record and a total."""
    with caplog.at_level(logging.INFO):
        load_entries(Catalog(), sample_file, verbose=True)

    assert "Loading: Cats, http://example.com/cats, 5, Comedy, " in caplog.text
    assert "Video entries loaded: 3" in caplog.text


def test_load_entries_rejected_record_not_fatal(tmp_path):
    """Test an invalid record is skipped and loading continues."""
    path = tmp_path / "videos.txt"
    path.write_text(
        "\n".join(["Cats", "u1", "0", "Comedy", SEPARATOR, "Dogs", "u2", "15", "Comedy", SEPARATOR])
        + "\n",
        encoding="utf-8",
    )
    catalog = Catalog()

    assert load_entries(catalog, str(path)) is True
    assert [e.title for e in catalog.all_entries()] == ["Dogs"]


def test_load_entries_unknown_genre_exits(tmp_path, caplog):
    """Test an unknown genre stops the process."""
    path = tmp_path / "videos.txt"
    path.write_text(
        "\n".join(["Cats", "u1", "5", "Comedy", SEPARATOR, "Dogs", "u2", "15", "Horror", SEPARATOR])
        + "\n",
        encoding="utf-8",
    )
    catalog = Catalog()

    with caplog.at_level(logging.ERROR):
        with pytest.raises(SystemExit) as exc_info:
            load_entries(catalog, str(path))

    assert exc_info.value.code == 1
    assert "Invalid genre found while loading data (line 9)" in caplog.text
    assert [e.title for e in catalog.all_entries()] == ["Cats"]


def test_load_entries_uses_add_entry(sample_file):
    """Test records go through Catalog.add_entry."""
    catalog = Catalog()
    with patch.object(catalog, "add_entry", return_value=True) as mock_add:
        load_entries(catalog, sample_file)

    assert mock_add.call_count == 3
    mock_add.assert_any_call("Dogs", "http://example.com/dogs", 15, Genre.COMEDY)


@pytest.mark.parametrize("trailing", [["\n"], ["\n", "  \n", "\n"]])
def test_parse_records_ignores_trailing_blank_lines(trailing):
    """Test blank lines after the last separator are not a record."""
    lines = ["Cats\n", "u1\n", "5\n", "Comedy\n", SEPARATOR + "\n"] + trailing
    assert list(parse_records(lines)) == [VideoRecord("Cats", "u1", 5, "Comedy", 1)]


def test_load_entries_trailing_blank_line(tmp_path, sample_records):
    """Test a file ending in a blank line loads every record."""
    path = tmp_path / "videos.txt"
    path.write_text(sample_records + "\n", encoding="utf-8")
    catalog = Catalog()

    assert load_entries(catalog, str(path)) is True
    assert len(catalog) == 3


def test_load_entries_partial_on_bad_record(tmp_path):
    """Test a malformed record raises after earlier records are loaded."""
    path = tmp_path / "videos.txt"
    path.write_text(
        "\n".join(["Cats", "u1", "5", "Comedy", SEPARATOR, "Dogs", "u2", "lots", "Comedy", SEPARATOR])
        + "\n",
        encoding="utf-8",
    )
    catalog = Catalog()

    with pytest.raises(RecordFormatError) as exc_info:
        load_entries(catalog, str(path))

    assert exc_info.value.line_number == 8
    assert [e.title for e in catalog.all_entries()] == ["Cats"]
