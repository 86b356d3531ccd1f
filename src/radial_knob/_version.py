"""Minimal version helper for the radial_knob package."""

from importlib import metadata
from pathlib import Path

DISTRIBUTION_NAME = "radial-knob"
FALLBACK_VERSION = "0.0.0"


def get_version() -> str:
    """
    Get version for the package.

    :return: Version number.
    """
    try:  # installed
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:  # source checkout
        import setuptools_scm  # type: ignore[import-untyped]

        root = Path(__file__).resolve().parents[2]
        return str(
            setuptools_scm.get_version(root=root, fallback_version=FALLBACK_VERSION)
        )


__all__ = ["get_version"]
