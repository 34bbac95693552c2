from typing import Optional
import logging
from pydantic_settings import BaseSettings
from pattern_catalog.core.patterns.singleton import Singleton


class Settings(BaseSettings):
    """Catalog settings using Pydantic BaseSettings."""

    # Proxy Configuration
    stock_count: int = 100
    stock_count_delay: float = 0.5
    single_flight_inventory: bool = True

    # Development Settings
    debug: bool = False
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "PATTERN_CATALOG_"
        extra = "ignore"


class ConfigManager(Singleton):
    """
    Singleton Configuration Manager.

    Holds the catalog settings and provides a single place to read them.
    """

    def _setup(self):
        """Initialize the configuration manager."""
        self._settings: Optional[Settings] = None
        self._logger = logging.getLogger(__name__)
        self._load_settings()

    def _load_settings(self):
        """Load settings from environment variables and .env file."""
        try:
            self._settings = Settings()
            self._logger.debug(f"Configuration loaded successfully. Debug mode: {self._settings.debug}")
        except Exception as e:
            self._logger.error(f"Failed to load configuration: {e}")
            raise

    @property
    def settings(self) -> Settings:
        """Get the catalog settings."""
        if self._settings is None:
            self._load_settings()
        return self._settings

    def reload_settings(self):
        """Reload settings from environment variables and .env file."""
        self._logger.info("Reloading configuration settings...")
        self._load_settings()

    def is_debug_mode(self) -> bool:
        """Check if the catalog runs in debug mode."""
        return self.settings.debug

    def get_log_level(self) -> int:
        """Resolve the configured log level name to a logging constant."""
        return getattr(logging, self.settings.log_level.upper(), logging.INFO)

    def get_proxy_settings(self) -> dict:
        """Get stock-count proxy settings."""
        return {
            "stock_count": self.settings.stock_count,
            "stock_count_delay": self.settings.stock_count_delay,
            "single_flight_inventory": self.settings.single_flight_inventory
        }


# Create the global config manager instance
config_manager = ConfigManager.get_instance()
