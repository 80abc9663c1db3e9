"""Command module initialization."""

from .base import CatalogCommand
from .page import PageCommand  # noqa: F401
from .search import SearchCommand  # noqa: F401
from .stats import StatsCommand  # noqa: F401

__all__ = ["CatalogCommand", "PageCommand", "SearchCommand", "StatsCommand"]
