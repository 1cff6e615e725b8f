"""Configuration classes for SVG serialization and path building.

This module provides configuration objects for the serializer and the
path-data builder, enabling control over output layout and numeric precision.
"""

import json
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

_COMPONENTS = ("serializer", "path")


@dataclass(frozen=True)
class SerializerConfig:
    """Configuration for rendering element trees to text."""

    # None renders compact output, a whitespace string pretty-prints
    indent: Optional[str] = None
    number_precision: Optional[int] = None
    self_close_empty_containers: bool = True

    def __post_init__(self) -> None:
        """Validate serializer configuration."""
        if self.indent is not None and self.indent.strip(" \t"):
            raise ValueError("indent must contain only spaces and tabs")
        if self.number_precision is not None and self.number_precision < 0:
            raise ValueError("number_precision must be >= 0 or None")

    @property
    def pretty(self) -> bool:
        """Check whether output is laid out one element per line."""
        return self.indent is not None


@dataclass(frozen=True)
class PathConfig:
    """Configuration for path-data operand formatting."""

    precision: Optional[int] = 2

    def __post_init__(self) -> None:
        """Validate path configuration."""
        if self.precision is not None and self.precision < 0:
            raise ValueError("precision must be >= 0 or None")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class SVGConfig:
    """Combined configuration for all library components.

    Immutable, so a single instance can be shared between serializers.
    """

    serializer: SerializerConfig = field(default_factory=SerializerConfig)
    path: PathConfig = field(default_factory=PathConfig)

    # Metadata
    name: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the complete configuration."""
        try:
            self.serializer.__post_init__()
            self.path.__post_init__()
        except ValueError as e:
            raise ConfigValidationError(str(e)) from e

    def override(self, **kwargs: Any) -> "SVGConfig":
        """Create a new configuration with specific overrides.

        Args:
            **kwargs: Keyword arguments for configuration fields to override

        Returns:
            New SVGConfig instance with overrides applied

        Example:
            >>> config = SVGConfig()
            >>> new_config = config.override(
            ...     serializer__indent="  ",
            ...     path__precision=None
            ... )
        """
        nested_overrides: Dict[str, Any] = {}
        for key, value in kwargs.items():
            if "__" in key:
                component, field_name = key.split("__", 1)
                if component not in _COMPONENTS:
                    raise ConfigValidationError(
                        f"Unknown configuration component: {component}",
                        field_name=key,
                        suggestions=[f"Use one of {list(_COMPONENTS)}"],
                    )
                nested_overrides.setdefault(component, {})[field_name] = value
            else:
                nested_overrides[key] = value

        new_fields: Dict[str, Any] = {}
        for key, value in nested_overrides.items():
            if key in _COMPONENTS and isinstance(value, dict):
                try:
                    new_fields[key] = replace(getattr(self, key), **value)
                except (TypeError, ValueError) as e:
                    raise ConfigValidationError(str(e), field_name=key) from e
            else:
                new_fields[key] = value

        return replace(self, **new_fields)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        def _dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, "__dataclass_fields__"):
                return {
                    name: _dataclass_to_dict(getattr(obj, name))
                    for name in obj.__dataclass_fields__
                }
            return obj

        result = _dataclass_to_dict(self)
        if not isinstance(result, dict):
            raise ConfigValidationError("Configuration serialization failed")
        return result

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SVGConfig":
        """Create configuration from dictionary.

        Args:
            data: Dictionary containing configuration data

        Returns:
            SVGConfig instance created from dictionary
        """
        try:
            return cls(
                serializer=SerializerConfig(**data.get("serializer", {})),
                path=PathConfig(**data.get("path", {})),
                name=data.get("name"),
                description=data.get("description"),
            )
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(
                f"Failed to deserialize to {cls.__name__}: {e}"
            ) from e

    @classmethod
    def from_json(cls, json_str: str) -> "SVGConfig":
        """Create configuration from JSON string."""
        return cls.from_dict(json.loads(json_str))

    # Preset factory methods
    @classmethod
    def compact(cls) -> "SVGConfig":
        """Create preset producing whitespace-free output."""
        return cls(name="compact", description="Whitespace-free single line output")

    @classmethod
    def pretty(cls, indent: str = "  ") -> "SVGConfig":
        """Create preset producing indented, one element per line output."""
        return cls(
            serializer=SerializerConfig(indent=indent),
            name="pretty",
            description="Indented output with one element per line",
        )
