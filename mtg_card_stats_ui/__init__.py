from mtg_card_stats_ui.app_config import app_config
from mtg_card_stats_ui.utils.logging_config import setup_logging

__all__ = ["app_config", "setup_logging"]
