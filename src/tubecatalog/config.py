"""Configuration and environment settings."""

import os
from dotenv import load_dotenv

load_dotenv()

# Directory Settings
DATA_DIR = os.getenv("DATA_DIR", "data")

# Output Settings
DEFAULT_PAGE_FILE = os.getenv("DEFAULT_PAGE_FILE", os.path.join(DATA_DIR, "playlist.html"))
PAGE_TITLE = "Manager"

# Logging Settings
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Catalog Settings
SEARCH_RESULTS_NAME = os.getenv("SEARCH_RESULTS_NAME", "Search Results")
RECORD_SEPARATOR = "=" * 31
