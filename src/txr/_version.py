"""Installed package version."""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    """Get the txr version from package metadata."""
    try:
        return version("txr")
    except PackageNotFoundError:
        # Running from a source checkout without installing
        return "0.0.0"
