# mtg_card_stats_ui/utils/logging_config.py

"""
logging_config.py

Provides centralized logging configuration for the MTG Card Stats dashboard.
Log level and handlers come from the [Logging] section of app_config, so every
module can simply use logging.getLogger(__name__).
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Default configuration
DEFAULT_LOG_LEVEL = logging.INFO
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DIRECTORY = "logs"
LOG_FILE_NAME = "mtg_card_stats.log"

# Dictionary mapping string log level names to their numeric values
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

NOISY_LOGGERS = ("matplotlib", "httpcore", "httpx", "urllib3", "asyncio", "PIL")


def get_log_level(level_name):
    """Convert string log level to numeric log level"""
    return LOG_LEVELS.get(level_name.upper(), DEFAULT_LOG_LEVEL)


def setup_logging(app_config=None, log_to_file=None, log_to_console=None, debug=False):
    """
    Configure the root logger for the application

    Args:
        app_config: Application configuration object with log settings
        log_to_file: Whether to log to a file (defaults to the config value)
        log_to_console: Whether to log to console (defaults to the config value)
        debug: Force DEBUG level regardless of config

    Returns:
        logging.Logger: Configured root logger
    """
    log_level = DEFAULT_LOG_LEVEL
    log_dir = Path(LOG_DIRECTORY)
    if app_config:
        log_level = get_log_level(app_config.get("Logging", "log_level", "INFO"))
        if log_to_file is None:
            log_to_file = app_config.get_bool("Logging", "log_to_file", True)
        if log_to_console is None:
            log_to_console = app_config.get_bool("Logging", "log_to_console", True)
        try:
            log_dir = app_config.get_path("logs_dir")
        except KeyError:
            pass
    if log_to_file is None:
        log_to_file = True
    if log_to_console is None:
        log_to_console = True
    if debug:
        log_level = logging.DEBUG

    # Get the root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove any existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(DEFAULT_LOG_FORMAT)

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_to_file:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / LOG_FILE_NAME, maxBytes=10_485_760, backupCount=5  # 10 MB
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger
