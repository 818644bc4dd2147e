"""Cross-type equality and ordering.

Every pairing of RelativePathBuf, RelativePath and str must agree with the
component-sequence comparison.
"""

import itertools

import pytest

from relpath.path import RelativePath, RelativePathBuf, as_relative_path, compare_paths

SAMPLES = [
    "",
    "/",
    "a",
    "/a",
    "a//",
    "a/b",
    "a//b",
    "/a/b/",
    "a/c",
    "ab",
    "b",
    "b/a",
    "B",
]

CONSTRUCTORS = [RelativePath, RelativePathBuf, str]


def _expected(lhs: str, rhs: str) -> int:
    left = tuple(p for p in lhs.split("/") if p)
    right = tuple(p for p in rhs.split("/") if p)
    return (left > right) - (left < right)


def test_as_relative_path():
    """Coercion borrows without copying."""
    view = RelativePath("a")
    assert as_relative_path(view) is view
    assert as_relative_path("a//b").as_str() == "a//b"
    buf = RelativePathBuf("x")
    assert as_relative_path(buf).as_str() is buf.as_str()
    with pytest.raises(TypeError):
        as_relative_path(1.5)  # type: ignore[arg-type]


def test_compare_paths_values():
    assert compare_paths("a//b", RelativePath("/a/b")) == 0
    assert compare_paths(RelativePathBuf("a"), "a/b") == -1
    assert compare_paths("b", RelativePathBuf("a/z")) == 1


@pytest.mark.parametrize(
    "lhs_type,rhs_type",
    [
        pair
        for pair in itertools.product(CONSTRUCTORS, repeat=2)
        if pair != (str, str)
    ],
)
def test_all_pairings_follow_components(lhs_type, rhs_type):
    """Equality and ordering between any two representations match components."""
    for lhs_raw, rhs_raw in itertools.product(SAMPLES, repeat=2):
        lhs = lhs_type(lhs_raw)
        rhs = rhs_type(rhs_raw)
        expected = _expected(lhs_raw, rhs_raw)

        assert (lhs == rhs) is (expected == 0), (lhs, rhs)
        assert (lhs != rhs) is (expected != 0), (lhs, rhs)
        assert (lhs < rhs) is (expected < 0), (lhs, rhs)
        assert (lhs <= rhs) is (expected <= 0), (lhs, rhs)
        assert (lhs > rhs) is (expected > 0), (lhs, rhs)
        assert (lhs >= rhs) is (expected >= 0), (lhs, rhs)


def test_equality_ignores_raw_text():
    """Different raw strings with the same components are equal across types."""
    assert RelativePathBuf("foo//bar") == "foo/bar"
    assert "foo/bar" == RelativePath("foo//bar/")
    assert RelativePath("//foo///bar") == RelativePathBuf("/foo/bar")
    assert RelativePath("foo") == RelativePath("foo").to_relative_path_buf()


def test_equality_is_transitive_across_types():
    a = RelativePathBuf("x//y")
    b = RelativePath("/x/y")
    c = "x/y/"
    assert a == b
    assert b == c
    assert a == c


def test_trichotomy():
    """Exactly one of <, == and > holds for any two paths."""
    paths = [RelativePath(s) for s in SAMPLES]
    for lhs, rhs in itertools.product(paths, repeat=2):
        outcomes = [lhs < rhs, lhs == rhs, lhs > rhs]
        assert outcomes.count(True) == 1, (lhs, rhs)


def test_sorting_mixed_representations():
    """Mixed lists sort by component sequence."""
    mixed = [RelativePathBuf("b"), "a/c", RelativePath("//a//b"), RelativePathBuf("a")]
    ordered = sorted(mixed, key=as_relative_path)
    assert [as_relative_path(p).parts for p in ordered] == [
        ("a",),
        ("a", "b"),
        ("a", "c"),
        ("b",),
    ]


def test_ordering_with_unrelated_type_raises():
    with pytest.raises(TypeError):
        RelativePath("a") < 1  # noqa: B015
    with pytest.raises(TypeError):
        RelativePathBuf("a") >= None  # noqa: B015
