"""Configuration classes for HTML tree dumping.

This module provides the immutable parser configuration shared by the API and
the command-line tool. Output formatting is deliberately not configurable; the
settings here only influence how input bytes become a document tree.
"""

import json
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, List, Optional

import webencodings


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


def _check_encoding_label(label: str, field_name: str) -> None:
    if webencodings.lookup(label) is None:
        raise ConfigValidationError(
            f"Unknown encoding label for {field_name}: {label!r}",
            field_name=field_name,
            suggestions=["utf-8", "windows-1252", "iso-8859-2"],
        )


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for turning input into a document tree.

    Thread-safe due to frozen dataclass implementation.

    Attributes:
        encoding: Encoding forced onto byte input. Ignored for text input.
        default_encoding: Encoding used for byte input when sniffing finds
            no declaration. Only consulted when ``sniff_encoding`` is set.
        scripting: Parse ``<noscript>`` as if scripting were enabled.
        collect_diagnostics: Keep parser diagnostics on the result.
        sniff_encoding: Let html5lib pick the encoding of byte input from a
            BOM or ``<meta charset>``, falling back to ``default_encoding``.
            When neither this nor ``encoding`` is set, byte input must be
            valid UTF-8.
    """

    encoding: Optional[str] = None
    default_encoding: str = "utf-8"
    scripting: bool = False
    collect_diagnostics: bool = True
    sniff_encoding: bool = False

    def __post_init__(self) -> None:
        """Validate parser configuration."""
        if self.encoding is not None:
            _check_encoding_label(self.encoding, "encoding")
        _check_encoding_label(self.default_encoding, "default_encoding")

    def override(self, **kwargs: Any) -> "ParserConfig":
        """Create a new configuration with specific overrides.

        Example:
            >>> config = ParserConfig().override(encoding="windows-1252")
            >>> config.encoding
            'windows-1252'
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {', '.join(unknown)}",
                field_name=unknown[0],
                suggestions=sorted(known),
            )
        return replace(self, **kwargs)

    @property
    def strict_utf8(self) -> bool:
        """Whether byte input is decoded as strict UTF-8 before parsing."""
        return self.encoding is None and not self.sniff_encoding

    def html5lib_options(self, binary_input: bool) -> Dict[str, Any]:
        """Keyword arguments for ``html5lib.HTMLParser.parse``.

        html5lib rejects encoding arguments for text input, so those are only
        produced when the input is bytes. chardet detection stays off so dumps
        do not depend on which optional packages are installed.
        """
        options: Dict[str, Any] = {"scripting": self.scripting}
        if binary_input:
            options["default_encoding"] = self.default_encoding
            options["useChardet"] = False
            if self.encoding is not None:
                options["override_encoding"] = self.encoding
        return options

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParserConfig":
        """Create configuration from dictionary.

        Unknown keys are rejected rather than silently ignored.
        """
        if not isinstance(data, dict):
            raise ConfigValidationError("Parser configuration must be a JSON object")
        return cls().override(**data)

    @classmethod
    def from_json(cls, json_str: str) -> "ParserConfig":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid configuration JSON: {e}") from e
        return cls.from_dict(data)
