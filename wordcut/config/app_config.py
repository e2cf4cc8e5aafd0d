"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
The active configuration class is chosen by WORDCUT_ENV.
"""

import os
from dotenv import load_dotenv

CONFIG_DIR = os.path.dirname(os.path.abspath(__file__))

# Load environment variables from config.env (optional)
load_dotenv(os.path.join(CONFIG_DIR, 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Dictionary Settings
    WORD_LIST_PATH = os.getenv('WORD_LIST_PATH', os.path.join(CONFIG_DIR, 'words.json'))

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')
    LOG_TO_FILE = os.getenv('LOG_TO_FILE', 'True').lower() == 'true'


class DevelopmentConfig(Config):
    """Development configuration: rejected moves are logged too."""
    LOG_LEVEL = 'DEBUG'


class ProductionConfig(Config):
    """Production configuration."""


class TestingConfig(Config):
    """Testing configuration: console only, no log files."""
    LOG_TO_FILE = False


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': ProductionConfig
}


def get_config(name=None):
    """
    Return the configuration class for ``name``, or for WORDCUT_ENV when omitted.

    Raises:
        ValueError: If the name is not a known configuration
    """
    name = name or os.getenv('WORDCUT_ENV', 'default')
    try:
        return config[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown configuration '{name}', expected one of {sorted(config)}") from None
