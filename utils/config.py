"""
Configuration management for the Gastronome application.

Handles environment variables, cookbook storage settings, recommendation
defaults and application configuration.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


THEMES = ("light", "dark", "cozy", "seasonal")


@dataclass
class Config:
    """Application configuration settings"""

    # Cookbook storage
    data_file: str = "gastronome_data.json"
    autosave: bool = True

    # Recommendation defaults
    min_match_score: float = 0.3
    max_results: int = 20
    prefer_fewer_ingredients: bool = True
    prefer_quick_recipes: bool = False

    # UI settings
    debug_mode: bool = False
    default_theme: str = "light"

    # Logging
    log_level: str = "INFO"
    log_file: str = "logs/gastronome.log"

    def __post_init__(self):
        """Fall back to the light theme for unknown values"""
        if self.default_theme not in THEMES:
            self.default_theme = "light"

    @classmethod
    def from_environment(cls) -> 'Config':
        """Create configuration from environment variables"""
        return cls(
            # Storage
            data_file=os.getenv("GASTRONOME_DATA_FILE", "gastronome_data.json"),
            autosave=os.getenv("GASTRONOME_AUTOSAVE", "true").lower() == "true",

            # Recommendations
            min_match_score=float(os.getenv("GASTRONOME_MIN_MATCH_SCORE", "0.3")),
            max_results=int(os.getenv("GASTRONOME_MAX_RESULTS", "20")),
            prefer_fewer_ingredients=os.getenv("GASTRONOME_PREFER_FEWER_INGREDIENTS", "true").lower() == "true",
            prefer_quick_recipes=os.getenv("GASTRONOME_PREFER_QUICK_RECIPES", "false").lower() == "true",

            # UI
            debug_mode=os.getenv("GASTRONOME_DEBUG", "false").lower() == "true",
            default_theme=os.getenv("GASTRONOME_THEME", "light"),

            # Logging
            log_level=os.getenv("GASTRONOME_LOG_LEVEL", "INFO"),
            log_file=os.getenv("GASTRONOME_LOG_FILE", "logs/gastronome.log")
        )

    def ensure_directories(self):
        """Create necessary directories"""
        directories = [
            Path(self.log_file).parent,
            Path(self.data_file).parent
        ]

        for directory in directories:
            if directory and directory != Path("."):
                directory.mkdir(parents=True, exist_ok=True)


# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get global configuration instance"""
    global _config
    if _config is None:
        _config = Config.from_environment()
        _config.ensure_directories()
    return _config


def reload_config():
    """Reload configuration from environment"""
    global _config
    _config = None
    return get_config()
