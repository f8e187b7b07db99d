"""Exception class hierarchy matching.

A mapping pattern matches an exception class when the class's fully-qualified
name (``module.qualname``) contains the pattern. The inheritance distance is
the position of the first matching class in the exception type's MRO: 0 for
the class itself, growing towards ``BaseException``.
"""

from collections.abc import Iterable, Sequence
from functools import lru_cache

from errorviews.models.config import ViewMapping


def qualified_name(cls: type) -> str:
    """Return ``module.qualname`` for a class, e.g. ``builtins.ValueError``."""
    return f"{cls.__module__}.{cls.__qualname__}"


@lru_cache(maxsize=512)
def _lineage(exc_type: type[BaseException]) -> tuple[str, ...]:
    names: list[str] = []
    for klass in exc_type.__mro__:
        names.append(qualified_name(klass))
        if klass is BaseException:
            break
    return tuple(names)


def exception_depth(pattern: str, exc_type: type[BaseException]) -> int | None:
    """
    Distance from ``exc_type`` to the nearest ancestor whose name contains ``pattern``.

    Returns:
        0 for a match on the class itself, 1 for its parent, ... or None when
        nothing up to ``BaseException`` matches (blank patterns never match)
    """
    pattern = pattern.strip()
    if not pattern:
        return None
    for depth, name in enumerate(_lineage(exc_type)):
        if pattern in name:
            return depth
    return None


def find_matching_mapping(mappings: Sequence[ViewMapping], exc: BaseException) -> ViewMapping | None:
    """
    Pick the mapping closest to the exception's class.

    The smallest distance wins; on equal distances the first registered row wins.
    """
    best: ViewMapping | None = None
    best_depth: int | None = None
    for mapping in mappings:
        depth = exception_depth(mapping.pattern, type(exc))
        if depth is not None and (best_depth is None or depth < best_depth):
            best, best_depth = mapping, depth
            if depth == 0:
                break
    return best


def find_matching_view(mappings: Sequence[ViewMapping], exc: BaseException) -> str | None:
    mapping = find_matching_mapping(mappings, exc)
    return mapping.view if mapping is not None else None


def matches_any(patterns: Iterable[str], exc: BaseException) -> bool:
    """True if any pattern matches the exception class or one of its ancestors."""
    return any(exception_depth(pattern, type(exc)) is not None for pattern in patterns)
