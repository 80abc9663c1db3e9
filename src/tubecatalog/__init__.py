"""In-memory video catalog and playlist manager."""

__version__ = "0.1.0"

# Import all public components
from .catalog import Catalog
from .cli import main
from .collection import Collection
from .commands import CatalogCommand
from .commands.page import PageCommand
from .commands.search import SearchCommand
from .commands.stats import StatsCommand
from .entry import Entry
from .errors import (
    CatalogError,
    GenreNotFoundError,
    RecordFormatError,
    Result,
    ValidationError,
)
from .genre import Genre
from .loader import VideoRecord, load_entries, parse_records
from .logging_config import configure_logging, get_logger
from .pages import generate_playlist_page, render_page, render_playlist_body

# Import config variables
from .config import (  # noqa: F401
    DATA_DIR,
    DEFAULT_PAGE_FILE,
    LOG_LEVEL,
    SEARCH_RESULTS_NAME,
)

# Get logger for this module
logger = get_logger(__name__)
