"""Static configuration for bulletin.

All user-editable settings (database, similarity defaults, output, logging)
live in a single JSON file for quick edits without touching Python.
"""

import json
import os

from dotenv import load_dotenv

SOURCE_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# .env may point the app at another config file or database.
load_dotenv()


def _default_config_path(source_root: str, working_dir: str) -> str:
    """Prefer config.json next to the sources, else the working directory.

    A regular (non-editable) install puts this module in site-packages, where
    no config.json ships.
    """

    candidate = os.path.join(source_root, "config.json")
    if os.path.exists(candidate):
        return candidate
    return os.path.join(working_dir, "config.json")


CONFIG_PATH = os.getenv("BULLETIN_CONFIG") or _default_config_path(SOURCE_ROOT, os.getcwd())
# Relative paths in config.json resolve against the directory holding it.
PROJECT_ROOT = os.path.dirname(os.path.abspath(CONFIG_PATH))


def _load_json_config() -> dict:
    """Load config.json with a flat, user-friendly schema."""

    if not os.path.exists(CONFIG_PATH):
        raise FileNotFoundError(f"Config file not found: {CONFIG_PATH}")

    with open(CONFIG_PATH, "r", encoding="utf-8") as handle:
        return json.load(handle)


def _resolve_path(path: str) -> str:
    if os.path.isabs(path):
        return path
    return os.path.join(PROJECT_ROOT, path)


_CONFIG = _load_json_config()

# Expose the raw config for modules that need structured access.
CONFIG = _CONFIG

# Where to store the SQLite database. BULLETIN_DB_PATH wins over config.json.
_database = _CONFIG.get("database", {})
DB_PATH = _resolve_path(os.getenv("BULLETIN_DB_PATH") or _database.get("path", "bulletin.db"))

# Similar announcements embedded in the detail view.
# - DEFAULT_SIMILAR_COUNT: used when the caller does not ask for a count
# - MAX_SIMILAR_COUNT: upper bound accepted from callers
_similarity = _CONFIG.get("similarity", {})
DEFAULT_SIMILAR_COUNT = int(_similarity.get("default_count", 3))
MAX_SIMILAR_COUNT = int(_similarity.get("max_count", 50))

# Page size used when a page is requested without an explicit size.
_pagination = _CONFIG.get("pagination", {})
DEFAULT_PAGE_SIZE = int(_pagination.get("default_page_size", 20))

# Output settings shared by the CLI commands.
_output = _CONFIG.get("output", {})
OUTPUT_FORMAT = _output.get("format", "text")
SNIPPET_CHARS = int(_output.get("snippet_chars", 400))

# Logging configuration (optional).
LOGGING = _CONFIG.get("logging", {})
