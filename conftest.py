import pytest


SAMPLE_RECORDS = """Cats
http://example.com/cats
5
Comedy
===============================
Dogs
http://example.com/dogs
15
Comedy
===============================
Volcanoes
http://example.com/volcanoes
42
Documentary
===============================
"""


def pytest_addoption(parser):
    parser.addoption(
        "--keep-pages",
        action="store_true",
        default=False,
        help="keep generated HTML pages in the rootdir for inspection",
    )


@pytest.fixture
def sample_records() -> str:
    """Text of a three-record load file."""
    return SAMPLE_RECORDS


@pytest.fixture
def sample_file(tmp_path, sample_records):
    """Write the sample records to a file and return its path."""
    path = tmp_path / "videos.txt"
    path.write_text(sample_records, encoding="utf-8")
    return str(path)


@pytest.fixture
def page_dir(request, tmp_path):
    """Directory for generated pages."""
    if request.config.getoption("--keep-pages"):
        return request.config.rootpath
    return tmp_path
