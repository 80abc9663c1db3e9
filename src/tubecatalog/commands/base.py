"""Base command class for catalog operations."""

from ..catalog import Catalog
from ..errors import CatalogError
from ..loader import load_entries
from ..logging_config import get_logger

# Get logger for this module
logger = get_logger(__name__)


class CatalogCommand:
    """Base class for commands that run against a loaded catalog."""

    def __init__(self, catalog: Catalog, data_file: str, verbose: bool = False):
        """Initialize command.

        Args:
            catalog: Catalog to load into and query
            data_file: Record file to load before running
            verbose: Whether to show verbose output
        """
        self.catalog = catalog
        self.data_file = data_file
        self.verbose = verbose
        self._logger = logger
        self._validated = False

    def validate(self) -> None:
        """Validate command parameters.

        Raises:
            ValueError: If parameters are invalid
        """
        if self.catalog is None:
            raise ValueError("Catalog is required")
        if not self.data_file:
            raise ValueError("Data file is required")
        self._validated = True

    def run(self) -> bool:
        """Load the data file and run the command.

        Returns:
            bool: True if successful, False otherwise

        Raises:
            CatalogError: If command fails
        """
        try:
            self.validate()
            if not load_entries(self.catalog, self.data_file, verbose=self.verbose):
                return False
            return self._run()
        except CatalogError:
            raise
        except Exception as e:
            raise CatalogError(str(e)) from e

    def _run(self) -> bool:
        """Internal run implementation.

        Returns:
            bool: True if successful, False otherwise
        """
        return False
