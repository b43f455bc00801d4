#!/usr/bin/env python3
"""
PROJECT:
-------
CSVLangDetector

TITLE:
------
settings.py

MAIN OBJECTIVE:
---------------
This script manages global configuration for the CSVLangDetector package,
covering CSV decoding, language detection thresholds, logging and paths.

Dependencies:
-------------
- json
- logging
- pathlib
- dataclasses

MAIN FEATURES:
--------------
1) Load and save configuration from/to a JSON file
2) Configure CSV decoding (encodings tried in order, delimiter)
3) Configure language detection (backend, short-text threshold, preview size)
4) Provide default settings with override capability

Author:
-------
Antoine Lemor
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional, List
from dataclasses import dataclass, asdict, field

logger = logging.getLogger(__name__)


@dataclass
class DataConfig:
    """Configuration for CSV decoding"""
    encodings: List[str] = field(default_factory=lambda: [
        "utf-8-sig", "utf-8", "cp1252", "latin-1"
    ])
    delimiter: str = ","


@dataclass
class LanguageConfig:
    """Configuration for language detection and result formatting"""
    method: str = "lingua"  # lingua, langid
    min_text_length: int = 10
    confidence_threshold: float = 0.0
    minimum_relative_distance: float = 0.0
    preview_length: int = 50
    ellipsis: str = "..."


@dataclass
class PathConfig:
    """Configuration for file paths"""
    logs_dir: Path = field(default_factory=lambda: Path.cwd() / "logs")


@dataclass
class LoggingConfig:
    """Configuration for logging"""
    level: str = "INFO"
    format: str = "[%(levelname)s] %(message)s"
    file_logging: bool = False
    console_logging: bool = True
    rich_console: bool = True
    json_logging: bool = False  # JSON lines in the log file
    log_file: str = "csv_lang_detector.log"
    max_bytes: int = 10485760  # 10MB
    backup_count: int = 5


class Settings:
    """Main settings manager for CSVLangDetector"""

    def __init__(self, config_file: Optional[str] = None):
        """Initialize settings with optional config file"""
        self.config_file = config_file or self._get_default_config_file()

        self.data = DataConfig()
        self.language = LanguageConfig()
        self.paths = PathConfig()
        self.logging = LoggingConfig()

        if Path(self.config_file).exists():
            self.load()

    def _get_default_config_file(self) -> str:
        """Get default configuration file path"""
        return str(Path.home() / ".csv_lang_detector" / "config.json")

    def load(self, config_file: Optional[str] = None):
        """Load configuration from file"""
        config_file = config_file or self.config_file

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                config_data = json.load(f)

            if 'data' in config_data:
                self.data = DataConfig(**config_data['data'])
            if 'language' in config_data:
                self.language = LanguageConfig(**config_data['language'])
            if 'paths' in config_data:
                self.paths = PathConfig(**{k: Path(v) for k, v in config_data['paths'].items()})
            if 'logging' in config_data:
                self.logging = LoggingConfig(**config_data['logging'])

            logger.info(f"Configuration loaded from {config_file}")
        except (OSError, ValueError, TypeError) as e:
            logger.warning(f"Could not load configuration: {e}")

    def save(self, config_file: Optional[str] = None):
        """Save configuration to file"""
        config_file = Path(config_file or self.config_file)
        config_file.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(config_file, 'w', encoding='utf-8') as f:
                json.dump(self.to_dict(), f, indent=2)
            logger.info(f"Configuration saved to {config_file}")
        except OSError as e:
            logger.error(f"Could not save configuration: {e}")

    def update_language_settings(self, settings: Dict[str, Any]):
        """Update language settings in place (not persisted)"""
        for key, value in settings.items():
            if hasattr(self.language, key):
                setattr(self.language, key, value)

    def get_log_path(self, filename: Optional[str] = None) -> Path:
        """Get the full path for a log file"""
        return self.paths.logs_dir / (filename or self.logging.log_file)

    def to_dict(self) -> Dict[str, Any]:
        """Convert all settings to dictionary"""
        return {
            'data': asdict(self.data),
            'language': asdict(self.language),
            'paths': {k: str(v) for k, v in asdict(self.paths).items()},
            'logging': asdict(self.logging)
        }

    def __repr__(self) -> str:
        return f"Settings(config_file='{self.config_file}')"


# Global settings instance
_settings = None


def get_settings() -> Settings:
    """Get global settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings():
    """Reset global settings instance"""
    global _settings
    _settings = None
