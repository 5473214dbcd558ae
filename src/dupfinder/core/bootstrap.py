"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/bootstrap.py
Application data directory setup.
"""

import os
import logging

from appdirs import user_data_dir

from dupfinder.core.errors import DirectoryBootstrapFailure

logger = logging.getLogger(__name__)

APP_NAME = "dupfinder"


def default_app_dir() -> str:
    """Per-user data directory for the application (platform specific)."""
    return user_data_dir(APP_NAME, appauthor=False)


def create_app_dir(app_dir: str) -> None:
    """
    Make sure the application directory exists.

    Args:
        app_dir: Desired location of the app directory

    Raises:
        DirectoryBootstrapFailure: If the path exists and is not a directory,
            or the directory cannot be created
    """
    if os.path.lexists(app_dir):
        if not os.path.isdir(app_dir):
            raise DirectoryBootstrapFailure(app_dir)
        return

    try:
        os.makedirs(app_dir, exist_ok=True)
    except OSError as e:
        raise DirectoryBootstrapFailure(app_dir, e) from e
    logger.debug("Created app directory: %s", app_dir)
