"""
Configuration settings for the Pin Input Field package and its demo window.
"""
import os
import sys
import configparser
from pathlib import Path


def get_config_path() -> Path:
    """Get the path to config.ini file."""
    override = os.getenv("PIN_INPUT_CONFIG")
    if override:
        return Path(override)
    if getattr(sys, 'frozen', False):
        exe_dir = Path(sys.executable).parent
        config_path = exe_dir / 'config.ini'
    else:
        # Go up from src/pin_input/config/ to the repository root
        config_path = Path(__file__).parent.parent.parent.parent / 'config.ini'
    return config_path


def load_config() -> configparser.ConfigParser:
    """Load configuration from config.ini file."""
    config = configparser.ConfigParser()
    config_path = get_config_path()
    if config_path.exists():
        config.read(config_path)
    return config


_config = load_config()


class AppSettings:
    """Application configuration settings."""

    # Application metadata
    APP_NAME = "Pin Input Field"
    APP_VERSION = "1.0.0"
    APP_TITLE = "Pin Input Field v1.0.0 (Qt)"

    # Demo window dimensions
    WINDOW_WIDTH = 420
    WINDOW_HEIGHT = 360
    FIELD_HEIGHT = 56

    # Field defaults
    DEFAULT_PIN_LENGTH = int(_config.get('field', 'pin_length',
                                         fallback=os.getenv("PIN_LENGTH", "6")))
    DEFAULT_FONT_SIZE = float(_config.get('field', 'font_size',
                                          fallback=os.getenv("PIN_FONT_SIZE", "24.0")))
    DEFAULT_OBSCURE_TEXT = _config.get('field', 'obscure_text', fallback="●")

    # Logging
    LOG_LEVEL = _config.get('logging', 'level', fallback=os.getenv("LOG_LEVEL", "INFO"))
    LOG_FILE = os.getenv("LOG_FILE", "pin_input.log")
    LOG_TO_FILE = os.getenv("LOG_TO_FILE", "False").lower() in ("true", "1", "yes")
    LOG_MAX_SIZE = int(os.getenv("LOG_MAX_SIZE", "10485760"))   # 10 MB
    LOG_BACKUP_COUNT = int(os.getenv("LOG_BACKUP_COUNT", "5"))

    # File paths
    CONFIG_DIR = Path.home() / ".pin_input"
    LOG_DIR = CONFIG_DIR / "logs"

    # Debug
    DEBUG = os.getenv("DEBUG", "False").lower() in ("true", "1", "yes")

    @classmethod
    def ensure_directories(cls):
        """Ensure required directories exist."""
        for directory in [cls.CONFIG_DIR, cls.LOG_DIR]:
            directory.mkdir(parents=True, exist_ok=True)


# Global settings instance
settings = AppSettings()
