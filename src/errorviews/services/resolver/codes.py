"""Error code table matching."""

from collections.abc import Sequence

from errorviews.models.config import ErrorCodeMapping


def find_view_by_error_code(mappings: Sequence[ErrorCodeMapping], code: str | None) -> str | None:
    """
    Find the view for an error code.

    Each row lists comma-separated codes; codes are compared trimmed and
    case-insensitively. The first matching row wins. Empty codes never match.
    """
    if not code:
        return None
    wanted = code.strip().casefold()
    if not wanted:
        return None

    for mapping in mappings:
        for candidate in mapping.code_list:
            if candidate.casefold() == wanted:
                return mapping.view
    return None
