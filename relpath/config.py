"""Configuration classes for relpath serialization."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class SerializationConfig:
    """Output options for JSON and YAML serialization of paths."""

    # Indentation for json.dumps; None keeps output on one line
    json_indent: Optional[int] = None

    # Escape non-ASCII characters in JSON output
    ensure_ascii: bool = False

    # Emit non-ASCII characters verbatim in YAML output
    yaml_allow_unicode: bool = True

    # Prefix YAML documents with '---'
    yaml_explicit_start: bool = False

    def json_options(self, indent: Optional[int] = None) -> Dict[str, Any]:
        """Keyword arguments for ``json.dumps``; ``indent`` overrides the default."""
        return {
            "indent": self.json_indent if indent is None else indent,
            "ensure_ascii": self.ensure_ascii,
        }

    def yaml_options(self) -> Dict[str, Any]:
        """Keyword arguments for ``yaml.safe_dump``."""
        return {
            "allow_unicode": self.yaml_allow_unicode,
            "explicit_start": self.yaml_explicit_start,
        }


# Global configuration instance
SERIALIZATION_CONFIG = SerializationConfig()
