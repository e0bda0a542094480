# File: dayview/core/config_manager.py
"""
Centralized configuration management for the day-view layout engine.
Loads settings from environment variables and config files.
"""

import os
import json
from pathlib import Path
from typing import Dict, Any, Optional

from dotenv import load_dotenv

from dayview.models import LayoutConfig, LayoutConfigError
from dayview.utils.logger import setup_logger

# Load environment variables
load_dotenv()

logger = setup_logger(__name__)


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}; using {default}")
        return default


class Config:
    """Application configuration singleton."""
    
    # Base directories
    BASE_DIR = Path(os.getenv("DAYVIEW_HOME", Path.cwd()))
    
    # Subdirectories
    CONFIG_DIR = BASE_DIR / "config"
    OUTPUT_DIR = BASE_DIR / "output"
    LOGS_DIR = Path(os.getenv("DAYVIEW_LOG_DIR", BASE_DIR / "logs"))
    
    # Files
    CONFIG_FILE = CONFIG_DIR / "layout.json"
    LAYOUT_OUTPUT_FILE = OUTPUT_DIR / "day_layout.json"
    ENV_FILE = BASE_DIR / ".env"
    
    # Layout defaults
    DAY_VIEW_START_HOUR = _env_number("DAYVIEW_START_HOUR", 0, int)
    MINUTE_HEIGHT_PX = _env_number("DAYVIEW_MINUTE_HEIGHT_PX", 1.0, float)
    ITEM_WIDTH_PERCENT = _env_number("DAYVIEW_ITEM_WIDTH_PERCENT", 90.0, float)
    TARGET_TIMEZONE = os.getenv("TIMEZONE") or None
    
    # Grid display
    DAY_VIEW_END_HOUR = _env_number("DAYVIEW_END_HOUR", 24, int)
    SLOT_MINUTES = _env_number("DAYVIEW_SLOT_MINUTES", 60, int)
    FIRST_DAY_OF_WEEK = _env_number("DAYVIEW_FIRST_DAY_OF_WEEK", 1, int)  # 0 = Sunday
    
    @classmethod
    def default_layout_settings(cls) -> Dict[str, Any]:
        """Layout settings from the environment, before any file overrides."""
        return {
            'day_view_start_hour': cls.DAY_VIEW_START_HOUR,
            'minute_height_px': cls.MINUTE_HEIGHT_PX,
            'item_width_percent': cls.ITEM_WIDTH_PERCENT,
            'timezone': cls.TARGET_TIMEZONE,
        }
    
    @classmethod
    def default_layout_config(cls) -> LayoutConfig:
        """Build a validated LayoutConfig from environment defaults."""
        return LayoutConfig.from_dict(cls.default_layout_settings())
    
    @classmethod
    def load_layout_config(cls, path: Optional[Path] = None) -> LayoutConfig:
        """
        Load layout configuration from a JSON file.
        
        Keys present in the file override environment defaults. A missing
        default file is not an error; a missing explicit path is.
        
        Raises:
            FileNotFoundError: If an explicit path does not exist
            LayoutConfigError: If the resulting values are invalid
        """
        settings = cls.default_layout_settings()
        config_path = Path(path) if path else cls.CONFIG_FILE
        
        if config_path.exists():
            with open(config_path, 'r', encoding='utf-8') as f:
                try:
                    file_settings = json.load(f)
                except json.JSONDecodeError as e:
                    raise LayoutConfigError(f"Invalid JSON in {config_path}: {e}") from e
            if not isinstance(file_settings, dict):
                raise LayoutConfigError(f"Expected a JSON object in {config_path}")
            settings.update(LayoutConfig.settings_from_dict(file_settings))
            logger.debug(f"Loaded layout settings from {config_path}")
        elif path:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        
        return LayoutConfig.from_dict(settings)
    
    @classmethod
    def validate(cls) -> bool:
        """Validate that the environment describes a usable layout."""
        errors = []
        
        try:
            cls.default_layout_config()
        except LayoutConfigError as e:
            errors.append(str(e))
        
        if not 0 < cls.DAY_VIEW_END_HOUR <= 24 or cls.DAY_VIEW_END_HOUR <= cls.DAY_VIEW_START_HOUR:
            errors.append(
                f"DAYVIEW_END_HOUR must be after DAYVIEW_START_HOUR and at most 24, "
                f"got {cls.DAY_VIEW_END_HOUR}"
            )
        
        if cls.SLOT_MINUTES <= 0:
            errors.append(f"DAYVIEW_SLOT_MINUTES must be positive, got {cls.SLOT_MINUTES}")
        
        if not 0 <= cls.FIRST_DAY_OF_WEEK <= 6:
            errors.append(f"DAYVIEW_FIRST_DAY_OF_WEEK must be 0-6, got {cls.FIRST_DAY_OF_WEEK}")
        
        if errors:
            for error in errors:
                logger.error(f"Configuration Error: {error}")
            return False
        
        return True
