"""Deterministic identifier allocation.

Identifiers have the form ``{prefix}-{n}``. Allocation probes a set of
identifiers already in use and increments a per-prefix counter until a
free one is found. There is no randomness, so the same document always
receives the same identifiers.
"""

from collections.abc import Iterable


def format_id(prefix: str, counter: int) -> str:
    return f"{prefix}-{counter}"


def next_free_id(used_ids: Iterable[str], prefix: str) -> str:
    """Return the lowest-numbered free identifier for a prefix.

    Args:
        used_ids: Identifiers already present
        prefix: Identifier prefix, usually the element tag name

    Returns:
        First of ``prefix-1``, ``prefix-2``, ... not in used_ids

    Examples:
        >>> next_free_id({"path-1", "path-2"}, "path")
        'path-3'
    """
    used = set(used_ids)
    counter = 1
    while format_id(prefix, counter) in used:
        counter += 1
    return format_id(prefix, counter)


class IdAllocator:
    """Allocates unique identifiers across a whole document.

    Each prefix keeps its own counter, starting at 1. Allocated identifiers
    are added to the used set so later allocations never collide with them.

    Example:
        allocator = IdAllocator({"path-1"})
        allocator.allocate("path")  # 'path-2'
        allocator.allocate("path")  # 'path-3'
        allocator.allocate("rect")  # 'rect-1'
    """

    def __init__(self, used_ids: Iterable[str] = ()) -> None:
        self._used: set[str] = set(used_ids)
        self._counters: dict[str, int] = {}

    def is_used(self, identifier: str) -> bool:
        return identifier in self._used

    def reserve(self, identifier: str) -> None:
        """Mark an identifier as taken without allocating it."""
        self._used.add(identifier)

    def allocate(self, prefix: str) -> str:
        """Allocate the next free identifier for a prefix.

        Args:
            prefix: Identifier prefix

        Returns:
            A new identifier not previously in use
        """
        counter = self._counters.get(prefix, 1)
        while format_id(prefix, counter) in self._used:
            counter += 1

        identifier = format_id(prefix, counter)
        self._used.add(identifier)
        self._counters[prefix] = counter + 1
        return identifier
