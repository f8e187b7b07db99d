"""Utilities for errorviews."""

from errorviews.utils.paths import get_messages_file, get_resources_dir

__all__ = ["get_messages_file", "get_resources_dir"]
