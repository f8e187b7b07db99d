"""Path utilities for errorviews, compatible with PyInstaller."""

import sys
from pathlib import Path


def get_resources_dir() -> Path:
    """Get the resources directory path.

    This function returns the correct path for both:
    - Development/installed package: src/errorviews/resources
    - PyInstaller packaged environment: <MEIPASS>/errorviews/resources

    Returns:
        Path to the resources directory
    """
    if getattr(sys, "frozen", False):
        # PyInstaller packaged environment
        base_path = Path(sys._MEIPASS)  # type: ignore[attr-defined]
        return base_path / "errorviews" / "resources"
    else:
        # This file is at src/errorviews/utils/paths.py
        return Path(__file__).parent.parent / "resources"


def get_messages_file() -> Path:
    """Get the bundled message resource file."""
    return get_resources_dir() / "messages.json"
