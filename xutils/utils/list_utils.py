"""
List helpers: sorting by selector, grouping, safe indexing, chunking
and map-then-drop-None.
"""

from typing import Any, Callable, Dict, Hashable, List, Optional, TypeVar

from xutils.core.exceptions import ListOperationError

T = TypeVar('T')
K = TypeVar('K', bound=Hashable)
R = TypeVar('R')


def _sorted(items: List[T], selector: Optional[Callable[[T], Any]], reverse: bool, name: str) -> List[T]:
    if selector is None and (not items or items[0] is None):
        raise ListOperationError(f"{name}() without selector requires comparable items.")
    try:
        return sorted(items, key=selector, reverse=reverse)
    except TypeError as e:
        raise ListOperationError(f"{name}(): items are not mutually comparable: {e}") from e


def sort_it(items: List[T], selector: Optional[Callable[[T], Any]] = None) -> List[T]:
    """
    Return a new list sorted ascending by selector (or by the items themselves).

    The original list is not modified.

    Example:
        >>> sort_it([3, 1, 5, 2])
        [1, 2, 3, 5]
        >>> sort_it(["bb", "a"], len)
        ['a', 'bb']

    Raises:
        ListOperationError: No selector and the list is empty or not comparable
    """
    return _sorted(items, selector, False, "sort_it")


def sort_it_desc(items: List[T], selector: Optional[Callable[[T], Any]] = None) -> List[T]:
    """Return a new list sorted descending; see sort_it()."""
    return _sorted(items, selector, True, "sort_it_desc")


def sort_it_self(items: List[T], selector: Optional[Callable[[T], Any]] = None) -> None:
    """Sort the list in place, ascending."""
    items[:] = _sorted(items, selector, False, "sort_it_self")


def sort_it_self_desc(items: List[T], selector: Optional[Callable[[T], Any]] = None) -> None:
    """Sort the list in place, descending."""
    items[:] = _sorted(items, selector, True, "sort_it_self_desc")


def group_by(items: List[T], key_selector: Callable[[T], K]) -> Dict[K, List[T]]:
    """
    Group items by key, keeping first-seen key order and item order.

    Example:
        >>> people = [
        ...     {"name": "Alice", "city": "Tokyo"},
        ...     {"name": "Bob", "city": "Osaka"},
        ...     {"name": "Charlie", "city": "Tokyo"},
        ... ]
        >>> {city: [p["name"] for p in group] for city, group in group_by(people, lambda p: p["city"]).items()}
        {'Tokyo': ['Alice', 'Charlie'], 'Osaka': ['Bob']}
    """
    grouped: Dict[K, List[T]] = {}
    for item in items:
        grouped.setdefault(key_selector(item), []).append(item)
    return grouped


def element_at_or_null(items: List[T], index: int) -> Optional[T]:
    """Element at index, or None when out of range (negative indexes included)."""
    return items[index] if 0 <= index < len(items) else None


def chunked(items: List[T], size: int) -> List[List[T]]:
    """
    Split into consecutive chunks of size; the last may be shorter.

    Example:
        >>> chunked([1, 2, 3, 4, 5], 2)
        [[1, 2], [3, 4], [5]]
    """
    if size <= 0:
        raise ListOperationError("size must be > 0")
    return [items[i:i + size] for i in range(0, len(items), size)]


def map_not_null(items: List[T], transform: Callable[[T], Optional[R]]) -> List[R]:
    """
    Map each item and drop None results.

    Example:
        >>> map_not_null(["1", "x", "2"], lambda s: int(s) if s.isdigit() else None)
        [1, 2]
    """
    output: List[R] = []
    for item in items:
        value = transform(item)
        if value is not None:
            output.append(value)
    return output
