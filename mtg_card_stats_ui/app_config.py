import configparser
import shutil
from pathlib import Path
from typing import Any, Optional, Union

# Define the project root as the directory containing the 'mtg_card_stats_ui' directory
PROJECT_ROOT = Path(__file__).resolve().parent.parent


class AppConfig:
    """
    Centralized application configuration interface.
    Handles persistent settings storage and retrieval from an INI file.
    """

    _instance: Optional["AppConfig"] = None

    def __new__(cls) -> "AppConfig":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self) -> None:
        """Initialize the configuration system."""
        self.config_dir = PROJECT_ROOT / "mtg_card_stats_ui" / "config"
        self.config_dir.mkdir(parents=True, exist_ok=True)

        self.config_file: Path = self.config_dir / "application_settings.ini"
        self.default_config_file: Path = (
            self.config_dir / "default.application_settings.ini"
        )

        self.config: configparser.ConfigParser = configparser.ConfigParser()

        if not self.config_file.exists():
            self._create_from_default()
        else:
            self.config.read(self.config_file)

    def _create_from_default(self) -> None:
        """Create a new config file by copying the default."""
        if not self.default_config_file.is_file():
            raise FileNotFoundError(
                f"The default configuration file was not found at {self.default_config_file}"
            )
        shutil.copy(self.default_config_file, self.config_file)
        self.config.read(self.config_file)

    def get(
        self, section: str, key: str, fallback: Optional[str] = None
    ) -> Optional[str]:
        """
        Get a string value from the configuration.

        Args:
            section: Section name in config.
            key: Setting name.
            fallback: Default value if setting doesn't exist.

        Returns:
            The setting value or fallback.
        """
        return self.config.get(section, key, fallback=fallback)

    def get_bool(self, section: str, key: str, fallback: bool = False) -> bool:
        """Get a boolean value from the configuration."""
        return self.config.getboolean(section, key, fallback=fallback)

    def get_int(self, section: str, key: str, fallback: int = 0) -> int:
        """Get an integer value from the configuration."""
        return self.config.getint(section, key, fallback=fallback)

    def get_float(
        self, section: str, key: str, fallback: Optional[float] = None
    ) -> Optional[float]:
        """
        Get a float value from the configuration.

        An empty value is returned as the fallback, so optional numeric
        settings can be left blank in the INI file.
        """
        value = self.get(section, key)
        if value is None or not value.strip():
            return fallback
        return float(value)

    def get_path(self, key: str) -> Path:
        """
        Get a path from the [Paths] section of the config.
        Paths are stored relative to the project root and are returned as absolute paths.

        Args:
            key: The path key to retrieve from the [Paths] section.

        Returns:
            An absolute Path object.
        """
        relative_path_str = self.config.get("Paths", key, fallback="")
        if not relative_path_str:
            raise KeyError(
                f"Path key '{key}' not found or is empty in the [Paths] section."
            )
        return (PROJECT_ROOT / relative_path_str).resolve()

    def set(self, section: str, key: str, value: Any) -> None:
        """
        Set a setting value in the configuration.

        Args:
            section: Section name in config.
            key: Setting name.
            value: Value to set. It will be converted to a string.
        """
        if not self.config.has_section(section):
            self.config.add_section(section)

        str_value = str(value)
        # If the value is a path, try to make it relative to the project root
        if isinstance(value, Path):
            try:
                str_value = str(value.relative_to(PROJECT_ROOT))
            except ValueError:
                str_value = str(value)  # Not within project root, use absolute path

        self.config.set(section, key, str_value)
        self.save()

    def save(self) -> None:
        """Save the current configuration to the file."""
        with open(self.config_file, "w") as f:
            self.config.write(f)

    def get_card_data_source(self) -> Union[str, Path]:
        """
        Get the location of the card document.

        [Loader] source_url wins when set; otherwise the [Paths] card_data file.
        """
        source_url = (self.get("Loader", "source_url") or "").strip()
        if source_url:
            return source_url
        return self.get_path("card_data")

    def get_load_timeout(self) -> Optional[float]:
        """Get the card document load timeout in seconds, or None for no limit."""
        return self.get_float("Loader", "timeout_seconds")

    def get_default_filter(self) -> str:
        return self.get("UI", "default_filter", fallback="all") or "all"


# Create a singleton instance for application-wide access
app_config: AppConfig = AppConfig()
