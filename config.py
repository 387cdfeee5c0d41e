"""
Application Configuration

Centralizes all Flask and application configuration settings.
"""

import os

# Base directory of the application
BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def _optional_float(value):
    if value in (None, ''):
        return None
    return float(value)


def _optional_int(value):
    if value in (None, ''):
        return None
    return int(value)


class Config:
    """Base configuration class."""

    # SQLAlchemy settings
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///recipebook.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Bootstrap payloads: a directory path or an http(s) base URL
    BOOTSTRAP_SOURCE = os.environ.get('BOOTSTRAP_SOURCE', os.path.join(BASE_DIR, 'data'))
    # None means wait for the server indefinitely
    BOOTSTRAP_TIMEOUT = _optional_float(os.environ.get('BOOTSTRAP_TIMEOUT'))

    # Target schema version (None = latest declared migration)
    SCHEMA_VERSION = _optional_int(os.environ.get('SCHEMA_VERSION'))

    # Open and seed the store when the app is created
    AUTO_INITIALIZE = os.environ.get('AUTO_INITIALIZE', 'true').lower() == 'true'


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    AUTO_INITIALIZE = False


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Get configuration based on environment."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
