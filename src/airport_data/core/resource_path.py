"""Resource path resolution for source checkouts and packaged applications.

Configuration files live under the project root's config/ directory. The
dataset blob ships inside the airport_data.airports package so it is
available after a plain pip install.

Typical usage:
    from airport_data.core.resource_path import get_config_path, get_dataset_path

    settings_path = get_config_path("settings.yaml")
    blob_path = get_dataset_path()
"""

import sys
from pathlib import Path

DATASET_FILENAME = "airports.json.gz"


def is_bundled() -> bool:
    """Check if running from a PyInstaller bundle.

    Returns:
        True if running from PyInstaller bundle, False if running from source.
    """
    return hasattr(sys, "_MEIPASS")


def get_bundle_dir() -> Path | None:
    """Get the PyInstaller bundle directory if running from bundle."""
    if is_bundled():
        return Path(getattr(sys, "_MEIPASS"))
    return None


def get_project_root() -> Path:
    """Get the project root directory.

    Returns:
        Path to project root:
        - When running from source: the directory holding src/ and config/
        - When bundled: the temporary bundle directory containing resources
    """
    bundle_dir = get_bundle_dir()
    if bundle_dir is not None:
        return bundle_dir
    # src/airport_data/core -> project root
    return Path(__file__).resolve().parent.parent.parent.parent


def get_resource_path(relative_path: str) -> Path:
    """Get absolute path to a resource relative to the project root.

    Examples:
        >>> str(get_resource_path("config/logging.yaml"))
        '/home/user/dev/airport-data/config/logging.yaml'
    """
    return get_project_root() / relative_path


def get_config_path(config_file: str) -> Path:
    """Get path to a configuration file (e.g. "settings.yaml")."""
    return get_resource_path(f"config/{config_file}")


def get_dataset_path(filename: str = DATASET_FILENAME) -> Path:
    """Get path to the packaged dataset blob.

    Args:
        filename: Blob filename inside the package data directory.

    Returns:
        Absolute path to the blob.
    """
    if is_bundled():
        return get_resource_path(f"airport_data/airports/data/{filename}")
    return Path(__file__).resolve().parent.parent / "airports" / "data" / filename
