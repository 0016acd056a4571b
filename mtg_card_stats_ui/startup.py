"""
startup.py

Handles application startup initialization including:
- Creating required directories
- Checking that the configured card document is reachable
"""

import logging
from pathlib import Path
from mtg_card_stats_ui.app_config import app_config

logger = logging.getLogger(__name__)


def ensure_folders():
    """Create required application directories if they don't exist."""
    logger.info("Ensuring required directories exist...")

    directory_keys = [
        "logs_dir",
    ]

    for key in directory_keys:
        try:
            folder_path = app_config.get_path(key)
            folder_path.mkdir(parents=True, exist_ok=True)
            logger.debug(f"Ensured directory exists: {folder_path}")
        except KeyError:
            # This can happen if a key is legitimately missing from the ini.
            logger.warning(f"Directory key '{key}' not found in config, skipping.")
        except OSError as e:
            logger.error(f"Failed to create directory for key '{key}': {e}")


def startup_init(data_source=None):
    """Initialize application on startup.

    Args:
        data_source: Optional card document path or URL overriding the config.
            Used for this run only; the settings file is left unchanged.

    Returns:
        The card document source the dashboard will load.
    """
    logger.info("Running startup initialization...")

    ensure_folders()

    if not data_source:
        source = app_config.get_card_data_source()
    elif str(data_source).startswith(("http://", "https://")):
        source = str(data_source)
    else:
        source = Path(data_source).resolve()
    if isinstance(source, Path) and not source.is_file():
        logger.warning(f"Card document not found at {source}; the dashboard will show no data.")

    logger.info("Startup initialization complete.")
    return source
