"""
Configuration base for the wind park.

A park configuration is one YAML or JSON document whose top level is a
mapping. Nested sections merge key by key, and keyed lists such as the
turbine fleet merge entry by entry on their identifier.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional, Union
from pathlib import Path
import json
import logging
from enum import Enum

import yaml

from ..exceptions import ConfigurationError

logger = logging.getLogger("windpark.config")


class ConfigFormat(Enum):
    """Configuration file formats, chosen by file suffix."""
    YAML = "yaml"
    JSON = "json"

    @classmethod
    def from_path(cls, file_path: Path) -> 'ConfigFormat':
        suffix = file_path.suffix.lower()
        if suffix in (".yaml", ".yml"):
            return cls.YAML
        if suffix == ".json":
            return cls.JSON
        raise ConfigurationError(
            f"Unsupported configuration file '{file_path.name}': use .yaml, .yml or .json"
        )


class ValidationLevel(Enum):
    """How a park reacts to an invalid configuration."""
    STRICT = "strict"          # WindPark refuses to start
    WARN = "warn"              # errors are logged and the park starts
    PERMISSIVE = "permissive"  # not validated at all


@dataclass
class ConfigValidationResult:
    """Errors and warnings collected while validating a configuration."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    def extend(self, other: 'ConfigValidationResult', prefix: str = "") -> None:
        """Take over a section's messages, prefixed with the section name."""
        for error in other.errors:
            self.add_error(f"{prefix}{error}")
        for warning in other.warnings:
            self.add_warning(f"{prefix}{warning}")

    def raise_for_errors(self) -> None:
        """Raise ConfigurationError listing every error, if there are any."""
        if self.errors:
            raise ConfigurationError("; ".join(self.errors))


class BaseConfig(ABC):
    """Configuration stored as a single YAML or JSON mapping."""

    # List-valued keys that merge entry by entry on the named field
    merge_keys: ClassVar[Dict[str, str]] = {}

    def __init__(self, validation_level: ValidationLevel = ValidationLevel.STRICT):
        self.validation_level = validation_level

    @abstractmethod
    def validate(self) -> ConfigValidationResult:
        pass

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        pass

    @classmethod
    @abstractmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BaseConfig':
        pass

    def save_to_file(self, file_path: Union[str, Path],
                     format: Optional[ConfigFormat] = None) -> None:
        """Write the configuration, in the format given or implied by the suffix."""
        file_path = Path(file_path)
        format = format or ConfigFormat.from_path(file_path)

        with open(file_path, 'w') as f:
            if format == ConfigFormat.YAML:
                yaml.safe_dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)
            else:
                json.dump(self.to_dict(), f, indent=2)

        logger.debug(f"Saved configuration to {file_path}")

    @classmethod
    def load_from_file(cls, file_path: Union[str, Path]) -> 'BaseConfig':
        """Read a configuration written by ``save_to_file`` or by hand.

        An empty document gives the defaults. Documents that do not parse,
        are not a mapping or hold unusable values raise ConfigurationError.
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        format = ConfigFormat.from_path(file_path)
        text = file_path.read_text()
        try:
            data = yaml.safe_load(text) if format == ConfigFormat.YAML else json.loads(text)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot parse {file_path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration in {file_path} must be a mapping, got {type(data).__name__}"
            )

        try:
            config = cls.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid configuration in {file_path}: {e!r}") from e

        logger.info(f"Loaded configuration from {file_path}")
        return config

    def merge(self, other: 'BaseConfig') -> 'BaseConfig':
        """Overlay ``other`` on this configuration.

        Lists named in ``merge_keys`` keep this configuration's entries; an
        entry of ``other`` replaces the one with the same key or is appended.
        Any other list or scalar is replaced by the value from ``other``.
        """
        merged = self._deep_merge(self.to_dict(), other.to_dict(), self.merge_keys)
        return self.__class__.from_dict(merged)

    @staticmethod
    def _deep_merge(base: Dict[str, Any], override: Dict[str, Any],
                    merge_keys: Dict[str, str]) -> Dict[str, Any]:
        result = dict(base)

        for key, value in override.items():
            current = result.get(key)
            if isinstance(current, dict) and isinstance(value, dict):
                result[key] = BaseConfig._deep_merge(current, value, {})
            elif key in merge_keys and isinstance(current, list) and isinstance(value, list):
                result[key] = BaseConfig._merge_entries(current, value, merge_keys[key])
            else:
                result[key] = value

        return result

    @staticmethod
    def _merge_entries(base: List[Dict[str, Any]], override: List[Dict[str, Any]],
                       key: str) -> List[Dict[str, Any]]:
        entries = {entry[key]: entry for entry in base}
        for entry in override:
            entries[entry[key]] = entry
        return list(entries.values())
