"""Component decomposition shared by every relative path representation.

A component is a non-empty run of characters between separators. Runs of
separators collapse into a single boundary, and leading or trailing
separators never produce empty components.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Any, Iterable, Iterator, List

#: Fixed path separator, independent of the host platform.
SEP = "/"


class Components:
    """Lazy iterator over the components of a raw path string.

    Each call to ``components()`` on a path returns a fresh ``Components``, so
    iteration can be restarted from the path at any time.

    Equality and ordering compare the *remaining* components structurally.
    Comparing two iterators does not advance either of them.
    """

    __slots__ = ("_source", "_index", "_offset", "_last_slash")

    def __init__(self, source: str) -> None:
        self._source = source
        self._index = 0
        self._offset = 0
        # Start inside a separator run so leading separators yield nothing.
        self._last_slash = True

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        source = self._source
        end = len(source)

        while self._index < end:
            i = self._index
            self._index += 1

            if source[i] == SEP:
                if not self._last_slash:
                    start = self._offset
                    self._offset = i
                    self._last_slash = True
                    return source[start:i]
                continue

            if self._last_slash:
                self._last_slash = False
                self._offset = i

        if end > self._offset:
            if self._last_slash:
                self._offset = end
            else:
                start = self._offset
                self._offset = end
                return source[start:]

        raise StopIteration

    def clone(self) -> Components:
        """Return an independent iterator positioned where this one is."""
        other = Components.__new__(Components)
        other._source = self._source
        other._index = self._index
        other._offset = self._offset
        other._last_slash = self._last_slash
        return other

    __copy__ = clone

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Components):
            return NotImplemented
        return compare_components(self.clone(), other.clone()) == 0

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Components):
            return NotImplemented
        return compare_components(self.clone(), other.clone()) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Components):
            return NotImplemented
        return compare_components(self.clone(), other.clone()) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Components):
            return NotImplemented
        return compare_components(self.clone(), other.clone()) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Components):
            return NotImplemented
        return compare_components(self.clone(), other.clone()) >= 0

    # Stateful iterator with value equality
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        remaining: List[str] = list(self.clone())
        return f"Components({remaining!r})"


def compare_components(lhs: Iterable[str], rhs: Iterable[str]) -> int:
    """Lexicographically compare two component sequences.

    Consumes both iterables lazily and stops at the first difference.

    Args:
        lhs: Left-hand component sequence.
        rhs: Right-hand component sequence.

    Returns:
        -1 if ``lhs`` sorts first, 1 if ``rhs`` sorts first, 0 if equal.
        A proper prefix sorts before the longer sequence.
    """
    # Components are never None, so None marks an exhausted side.
    for left, right in zip_longest(lhs, rhs):
        if left is None:
            return -1
        if right is None:
            return 1
        if left != right:
            return -1 if left < right else 1
    return 0
