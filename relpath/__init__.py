"""relpath: platform-neutral relative paths.

Paths always use ``/`` as separator regardless of the host platform. Two
representations share one component model:

    RelativePath - borrowed, immutable view over a string
    RelativePathBuf - owned path that grows with push()
    Components - iterator over the non-empty segments of a path

Example:
    from pathlib import Path
    from relpath import RelativePath

    path = RelativePath("foo//bar").join("baz")
    assert path.parts == ("foo", "bar", "baz")
    assert path == "foo/bar/baz"
    native = path.to_native(Path("."))
"""

from __future__ import annotations

from relpath import logging
from relpath._version import __version__
from relpath.components import SEP, Components, compare_components
from relpath.config import SERIALIZATION_CONFIG, SerializationConfig
from relpath.path import (
    RelativePath,
    RelativePathBuf,
    RelativePathLike,
    as_relative_path,
    compare_paths,
)
from relpath.serialization import (
    RelativePathJSONEncoder,
    deserialize,
    from_json,
    from_yaml,
    register_yaml_representers,
    serialize,
    to_json,
    to_yaml,
)

__all__ = [
    # Version
    "__version__",
    # Paths
    "RelativePath",
    "RelativePathBuf",
    "RelativePathLike",
    "as_relative_path",
    "compare_paths",
    # Components
    "SEP",
    "Components",
    "compare_components",
    # Serialization
    "serialize",
    "deserialize",
    "to_json",
    "from_json",
    "to_yaml",
    "from_yaml",
    "RelativePathJSONEncoder",
    "register_yaml_representers",
    # Configuration
    "SerializationConfig",
    "SERIALIZATION_CONFIG",
    # Utilities
    "logging",
]
