"""
Configuration management for props code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import copy
import json
from pathlib import Path
from typing import Dict, Any, List, Optional, Union
from dataclasses import asdict, dataclass, field

from ..logging_config import get_logger

logger = get_logger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


# Bits available in each supported flag-set storage type
MASK_TYPE_WIDTHS = {
    "uint8_t": 8,
    "uint16_t": 16,
    "uint32_t": 32,
    "uint64_t": 64,
}

DEFAULT_BANNER = [
    "@generated by props-codegen",
    "",
    "This file is generated from a component props schema.",
    "Do not edit it by hand; regenerate it instead.",
]


@dataclass
class GeneratorConfig:
    """Configuration for the props header generator."""

    # Output settings
    output_file: str = "Props.h"

    # Document scaffold
    namespaces: List[str] = field(default_factory=lambda: ["facebook", "react"])
    banner: List[str] = field(default_factory=lambda: list(DEFAULT_BANNER))

    # Declaration settings
    class_suffix: str = "Props"
    mask_type: str = "uint32_t"

    # Custom settings (not interpreted by the generator)
    custom: Dict[str, Any] = field(default_factory=dict)

    @property
    def mask_width(self) -> int:
        """Number of flag bits the configured mask type can hold."""
        if self.mask_type not in MASK_TYPE_WIDTHS:
            raise ConfigError(f"Unsupported mask_type: {self.mask_type}")
        return MASK_TYPE_WIDTHS[self.mask_type]


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._defaults: Dict[str, Any] = asdict(GeneratorConfig())

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration.

        Args:
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration
        """
        base_config = copy.deepcopy(self._defaults)

        if config_file:
            file_config = self._load_config_file(config_file)
            base_config.update(file_config)
            logger.debug("Loaded configuration file %s", config_file)

        if custom_config:
            base_config.update(custom_config)

        config = self._dict_to_config(base_config)

        for warning in self.validate_config(config):
            logger.warning("Configuration: %s", warning)

        if config.mask_type not in MASK_TYPE_WIDTHS:
            raise ConfigError(f"Unsupported mask_type: {config.mask_type}")

        return config

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}")
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}")

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = set(GeneratorConfig.__dataclass_fields__)

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # Unknown keys end up in the custom dict
        if custom_args:
            existing_custom = dict(config_args.get("custom") or {})
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        return GeneratorConfig(**config_args)

    def validate_config(self, config: GeneratorConfig) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        for namespace in config.namespaces:
            if not namespace.isidentifier():
                warnings.append(f"Invalid namespace name: {namespace}")

        if not config.class_suffix.isidentifier():
            warnings.append(f"Invalid class_suffix: {config.class_suffix}")

        if not config.output_file:
            warnings.append("output_file is empty")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    manager = get_config_manager()
    return manager.get_config(custom_config, config_file)
