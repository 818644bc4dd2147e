"""Borrowed and owned relative path types.

``RelativePath`` is a read-only view over a string. ``RelativePathBuf`` owns
its content and can be extended with ``push``. Both decompose into components
with the same routine (see ``relpath.components``) and compare by component
sequence, so ``"foo//bar"`` equals ``"foo/bar"``.

A leading separator marks a path as absolute. Absoluteness only matters when
joining or pushing, where an absolute argument replaces the base. It does not
take part in equality: ``"/foo/bar"`` equals ``"foo/bar"``.
"""

from __future__ import annotations

import os
from pathlib import Path, PurePath
from typing import Any, Tuple, Union

from relpath.components import SEP, Components, compare_components
from relpath.logging import get_logger

logger = get_logger(__name__)

#: Any value accepted where a relative path is expected.
RelativePathLike = Union[str, "RelativePath", "RelativePathBuf"]


class _ComponentOrdered:
    """Equality and ordering by component sequence.

    Every comparison funnels into ``compare_paths`` so that all pairings of
    ``RelativePath``, ``RelativePathBuf`` and ``str`` agree with each other.
    """

    __slots__ = ()

    def __eq__(self, other: Any) -> bool:
        if not _is_path_like(other):
            return NotImplemented
        return compare_paths(self, other) == 0  # type: ignore[arg-type]

    def __lt__(self, other: Any) -> bool:
        if not _is_path_like(other):
            return NotImplemented
        return compare_paths(self, other) < 0  # type: ignore[arg-type]

    def __le__(self, other: Any) -> bool:
        if not _is_path_like(other):
            return NotImplemented
        return compare_paths(self, other) <= 0  # type: ignore[arg-type]

    def __gt__(self, other: Any) -> bool:
        if not _is_path_like(other):
            return NotImplemented
        return compare_paths(self, other) > 0  # type: ignore[arg-type]

    def __ge__(self, other: Any) -> bool:
        if not _is_path_like(other):
            return NotImplemented
        return compare_paths(self, other) >= 0  # type: ignore[arg-type]


class RelativePath(_ComponentOrdered):
    """A borrowed, immutable relative path.

    Wraps a string without copying it. Construction never fails for string
    input; any text, including the empty string or text starting with the
    separator, is a valid relative path.

    Attributes are read-only; assigning to one raises ``AttributeError``.

    Equal views hash alike, but a view does not share the hash of an equal
    ``str``: a plain string key does not find a path key in a dict or set.
    """

    __slots__ = ("_inner",)

    def __init__(self, value: RelativePathLike = "") -> None:
        if isinstance(value, (RelativePath, RelativePathBuf)):
            value = value.as_str()
        elif not isinstance(value, str):
            raise TypeError(
                f"Expected str or relative path, got {type(value).__name__}"
            )
        object.__setattr__(self, "_inner", value)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"RelativePath is immutable: cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"RelativePath is immutable: cannot delete '{name}'")

    def __reduce__(self) -> Tuple[Any, Tuple[str]]:
        return (RelativePath, (self._inner,))

    def __copy__(self) -> RelativePath:
        return self

    def __deepcopy__(self, memo: Any) -> RelativePath:
        return self

    def as_str(self) -> str:
        """Return the raw, unnormalized content."""
        return self._inner

    def is_absolute(self) -> bool:
        """Check if the path starts with the separator."""
        return self._inner[:1] == SEP

    def components(self) -> Components:
        """Iterate over the components of this path, skipping separators."""
        return Components(self._inner)

    @property
    def parts(self) -> Tuple[str, ...]:
        """Tuple of path components."""
        return tuple(self.components())

    def join(self, path: RelativePathLike) -> RelativePathBuf:
        """Join this path with another relative path.

        If ``path`` is absolute, the result is an owned copy of ``path`` and
        this path is discarded. Otherwise ``path`` is appended after a single
        separator (omitted when this path is empty).

        Args:
            path: Path to append.

        Returns:
            A new owned path. Neither operand is modified.
        """
        other = as_relative_path(path)

        if other.is_absolute():
            return other.to_relative_path_buf()

        out = self.to_relative_path_buf()
        out.push(other)
        return out

    def to_relative_path_buf(self) -> RelativePathBuf:
        """Copy the raw content into an owned ``RelativePathBuf``.

        The content is not normalized; repeated separators survive the copy.
        """
        return RelativePathBuf(self._inner)

    def to_native(self, base: Union[str, os.PathLike]) -> PurePath:
        """Create a native path by extending ``base`` with this path's components.

        Only the normalized components are handed to the native layer, so
        repeated or leading separators never leak into the result. A leading
        separator does not make the result absolute.

        Args:
            base: Native path to extend. ``PurePath`` instances keep their
                flavour; anything else is converted with ``pathlib.Path``.

        Returns:
            A copy of ``base`` with every component appended in order.

        Example:
            >>> RelativePath("/hello///world//").to_native(".")
            PosixPath('hello/world')
        """
        root = base if isinstance(base, PurePath) else Path(base)
        parts = self.parts
        logger.debug("Extending native path %r with components %r", root, parts)
        return root.joinpath(*parts)

    def __truediv__(self, other: Any) -> RelativePathBuf:
        if not _is_path_like(other):
            return NotImplemented
        return self.join(other)

    def __rtruediv__(self, other: Any) -> RelativePathBuf:
        if not isinstance(other, str):
            return NotImplemented
        return RelativePath(other).join(self)

    def __hash__(self) -> int:
        return hash(self.parts)

    def __str__(self) -> str:
        return self._inner

    def __repr__(self) -> str:
        return f"RelativePath({self._inner!r})"


class RelativePathBuf(_ComponentOrdered):
    """An owned, mutable relative path.

    Content is stored verbatim. Separators are never collapsed in storage;
    normalization happens only when components are derived. Read-only
    operations delegate to the ``RelativePath`` view returned by
    ``as_relative_path``.

    Mutation is additive only: ``push`` (or ``/=``) appends, or replaces the
    whole content when given an absolute path. Being mutable, a buffer is not
    hashable; use ``as_relative_path()`` for a hashable snapshot.
    """

    __slots__ = ("_inner",)

    def __init__(self, value: RelativePathLike = "") -> None:
        if isinstance(value, (RelativePath, RelativePathBuf)):
            value = value.as_str()
        elif not isinstance(value, str):
            raise TypeError(
                f"Expected str or relative path, got {type(value).__name__}"
            )
        self._inner = value

    def as_relative_path(self) -> RelativePath:
        """Borrow the current content as a ``RelativePath`` without copying.

        The view shares the current string. A later ``push`` rebinds this
        buffer's storage, so an earlier view keeps the content it was taken
        from.
        """
        return RelativePath(self._inner)

    def as_str(self) -> str:
        """Return the raw, unnormalized content."""
        return self._inner

    def push(self, path: RelativePathLike) -> None:
        """Push another relative path onto this one.

        * An absolute ``path`` replaces the current content verbatim.
        * Otherwise a single separator is appended (unless this path is
          empty), followed by the raw content of ``path``.

        No separators are collapsed here; repeated separators are ignored
        later by component iteration.
        """
        other = as_relative_path(path)

        if other.is_absolute():
            logger.debug(
                "Absolute path %r replaces base %r", other.as_str(), self._inner
            )
            self._inner = other.as_str()
            return

        if self._inner:
            self._inner = self._inner + SEP + other.as_str()
        else:
            self._inner = other.as_str()

    def join(self, path: RelativePathLike) -> RelativePathBuf:
        """Return a copy of this path with ``path`` pushed onto it."""
        out = self.to_relative_path_buf()
        out.push(path)
        return out

    def to_relative_path_buf(self) -> RelativePathBuf:
        """Return an owned copy of this path."""
        return RelativePathBuf(self._inner)

    copy = to_relative_path_buf
    __copy__ = to_relative_path_buf

    def is_absolute(self) -> bool:
        """Check if the path starts with the separator."""
        return self.as_relative_path().is_absolute()

    def components(self) -> Components:
        """Iterate over the components of this path, skipping separators."""
        return self.as_relative_path().components()

    @property
    def parts(self) -> Tuple[str, ...]:
        """Tuple of path components."""
        return self.as_relative_path().parts

    def to_native(self, base: Union[str, os.PathLike]) -> PurePath:
        """Create a native path by extending ``base`` with this path's components."""
        return self.as_relative_path().to_native(base)

    def __truediv__(self, other: Any) -> RelativePathBuf:
        if not _is_path_like(other):
            return NotImplemented
        return self.join(other)

    def __rtruediv__(self, other: Any) -> RelativePathBuf:
        if not isinstance(other, str):
            return NotImplemented
        return RelativePath(other).join(self)

    def __itruediv__(self, other: Any) -> RelativePathBuf:
        if not _is_path_like(other):
            return NotImplemented
        self.push(other)
        return self

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self._inner

    def __repr__(self) -> str:
        return f"RelativePathBuf({self._inner!r})"


def _is_path_like(value: Any) -> bool:
    return isinstance(value, (str, RelativePath, RelativePathBuf))


def as_relative_path(value: RelativePathLike) -> RelativePath:
    """Borrow any path-like value as a ``RelativePath`` view.

    Strings are wrapped without copying, views are returned unchanged and
    buffers lend their current storage.

    Raises:
        TypeError: If ``value`` is not a string or relative path.
    """
    if isinstance(value, RelativePath):
        return value
    if isinstance(value, RelativePathBuf):
        return value.as_relative_path()
    if isinstance(value, str):
        return RelativePath(value)
    raise TypeError(f"Expected str or relative path, got {type(value).__name__}")


def compare_paths(lhs: RelativePathLike, rhs: RelativePathLike) -> int:
    """Compare two path-like values by component sequence.

    Returns:
        -1, 0 or 1 following lexicographic component order.
    """
    return compare_components(
        as_relative_path(lhs).components(), as_relative_path(rhs).components()
    )

