"""Statistics command for the catalog."""

from ..logging_config import get_logger
from .base import CatalogCommand

logger = get_logger(__name__)


class StatsCommand(CatalogCommand):
    """Command to report entry, playlist and genre counts."""

    def _run(self) -> bool:
        logger.info("\n%s", self.catalog.statistics())
        return True
