"""Plain-string serialization of relative paths.

Paths serialize to their raw stored content, unnormalized, and deserialize by
wrapping a string verbatim into a ``RelativePathBuf``. The only validation is
that the decoded value is a string; errors raised by the ``json`` or PyYAML
parsers propagate unchanged.
"""

from __future__ import annotations

import json
from typing import Any, Optional, Type

import yaml

from relpath.config import SERIALIZATION_CONFIG, SerializationConfig
from relpath.logging import get_logger
from relpath.path import (
    RelativePath,
    RelativePathBuf,
    RelativePathLike,
    as_relative_path,
)

logger = get_logger(__name__)


def serialize(path: RelativePathLike) -> str:
    """Return the raw content of ``path`` as a plain string."""
    return as_relative_path(path).as_str()


def deserialize(value: Any) -> RelativePathBuf:
    """Wrap a decoded value as a ``RelativePathBuf``.

    Args:
        value: Value produced by a data-interchange decoder.

    Returns:
        A buffer holding ``value`` verbatim.

    Raises:
        ValueError: If ``value`` is not a string.
    """
    if not isinstance(value, str):
        raise ValueError(
            f"invalid type: {type(value).__name__}, expected a relative path"
        )
    logger.debug("Deserialized relative path %r", value)
    return RelativePathBuf(value)


def to_json(
    path: RelativePathLike,
    indent: Optional[int] = None,
    config: Optional[SerializationConfig] = None,
) -> str:
    """Encode ``path`` as a JSON string value."""
    cfg = config or SERIALIZATION_CONFIG
    return json.dumps(serialize(path), **cfg.json_options(indent))


def from_json(text: str) -> RelativePathBuf:
    """Decode a JSON document holding a single string into a path.

    Raises:
        json.JSONDecodeError: If ``text`` is not valid JSON.
        ValueError: If the document is not a string.
    """
    return deserialize(json.loads(text))


def to_yaml(
    path: RelativePathLike, config: Optional[SerializationConfig] = None
) -> str:
    """Encode ``path`` as a YAML scalar document."""
    cfg = config or SERIALIZATION_CONFIG
    return yaml.safe_dump(serialize(path), **cfg.yaml_options())


def from_yaml(text: str) -> RelativePathBuf:
    """Decode a YAML scalar document into a path.

    Plain scalars that YAML resolves to other types (``123``, ``true``,
    ``null``) are rejected; quote them to keep them as strings.

    Raises:
        yaml.YAMLError: If ``text`` is not valid YAML.
        ValueError: If the document is not a string.
    """
    return deserialize(yaml.safe_load(text))


class RelativePathJSONEncoder(json.JSONEncoder):
    """JSON encoder that writes nested path values as plain strings.

    Example:
        >>> json.dumps({"src": RelativePath("a/b")}, cls=RelativePathJSONEncoder)
        '{"src": "a/b"}'
    """

    def default(self, o: Any) -> Any:
        if isinstance(o, (RelativePath, RelativePathBuf)):
            return o.as_str()
        return super().default(o)


def _represent_path(dumper: yaml.SafeDumper, data: Any) -> yaml.ScalarNode:
    return dumper.represent_str(data.as_str())


def register_yaml_representers(dumper: Type[Any] = yaml.SafeDumper) -> None:
    """Teach a PyYAML dumper to emit path values as plain strings.

    Args:
        dumper: Dumper class to extend (default: ``yaml.SafeDumper``, used by
            ``yaml.safe_dump``).
    """
    for path_type in (RelativePath, RelativePathBuf):
        dumper.add_representer(path_type, _represent_path)
