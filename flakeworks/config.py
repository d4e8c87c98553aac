"""Manages configuration variables.

Nothing is read from the environment until ``load_config`` is called.

This module provides:
- Config: a base class holding defaults
- DevelopmentConfig: a dev config class for local runs
- ProductionConfig: a config class for production
- TestingConfig: a config class for the test suite, ignoring the environment
- config: a dict for getting configuration depending on environment
- load_config: a function to pull environment variables on top of a config class
"""

import os

from dotenv import load_dotenv


class Config:
    """Base class holding defaults for environment variables."""

    FROM_ENV = True

    WORKER_ID = 0
    DATACENTER_ID = 0

    LOG_TO_FILE = False
    LOG_PATH = "logs/flakeworks.log"


class DevelopmentConfig(Config):
    """Config class with DEBUG on."""

    DEBUG = True


class ProductionConfig(Config):
    """Config class with DEBUG off."""

    DEBUG = False


class TestingConfig(Config):
    """Config class with DEBUG on, pinned IDs and no log files."""

    FROM_ENV = False
    DEBUG = True


config = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}


def load_config(config_name="development"):
    """Pulls environment variables (and a .env file) over the chosen config class.

    Args:
        config_name (str): One of the keys of ``config``
    Returns:
        type[Config]: The config class, or a subclass of it carrying environment values.

    Raises:
        KeyError: config_name is not a known environment
        ValueError: WORKER_ID or DATACENTER_ID is not an integer
    """
    base = config[config_name]
    if not base.FROM_ENV:
        return base

    load_dotenv()
    overrides = {
        "WORKER_ID": int(os.getenv("WORKER_ID", str(base.WORKER_ID))),
        "DATACENTER_ID": int(os.getenv("DATACENTER_ID", str(base.DATACENTER_ID))),
        "LOG_TO_FILE": os.getenv("LOG_TO_FILE", str(base.LOG_TO_FILE)).lower() == "true",
        "LOG_PATH": os.getenv("LOG_PATH", base.LOG_PATH),
    }
    return type(base.__name__, (base,), overrides)
