"""
Configuration manager for loading and validating settings.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, ValidationError

from workday_helper.data.schemas import Config
from workday_helper.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Default config file path
DEFAULT_CONFIG_PATH = Path(__file__).parent / "settings.yaml"


class ConfigManager:
    """Manages configuration loading from YAML files and environment variables."""

    # Mapping of environment variables to config fields
    ENV_MAPPINGS = {
        "WORKDAY_HELPER_WORKING_DAYS": "working_days",
        "WORKDAY_HELPER_OUTPUT_FORMAT": "output_format",
        "WORKDAY_HELPER_CALCULATE_EASTER": "calculate_easter",
        "WORKDAY_HELPER_LANGUAGE": "language",
    }

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the config manager.

        Args:
            config_path: Optional path to config file. If not provided, uses default.
        """
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    def load(self) -> Config:
        """
        Load configuration from YAML file with environment variable overrides.

        Returns:
            Config: Validated configuration object.

        Raises:
            ConfigurationError: If the file or the resulting config is invalid.
        """
        if self.config_path.exists():
            config_dict = self._load_yaml()
            logger.debug(f"Loaded config from: {self.config_path}")
        else:
            config_dict = {}
            logger.debug(f"Config file not found: {self.config_path}, using defaults")

        config_dict = self._apply_env_overrides(config_dict)

        try:
            return Config(**config_dict)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def _load_yaml(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Error parsing YAML config file: {e}") from e

        if raw_config is None:
            return {}
        if not isinstance(raw_config, dict):
            raise ConfigurationError(f"Config file {self.config_path} must contain a mapping")
        return self._flatten_config(raw_config)

    def _flatten_config(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Flatten nested YAML config to match Config model fields.

        Args:
            config: Nested configuration dictionary.

        Returns:
            Flattened configuration dictionary.
        """
        result: Dict[str, Any] = {}

        if "language" in config:
            result["language"] = config["language"]

        # Handle calendar section
        calendar = config.get("calendar") or {}
        if "working_days" in calendar:
            result["working_days"] = calendar["working_days"]
        if "output_format" in calendar:
            result["output_format"] = calendar["output_format"]

        # Handle holidays section
        hol = config.get("holidays") or {}
        if "calculate_easter" in hol:
            result["calculate_easter"] = hol["calculate_easter"]
        if "public" in hol:
            result["public_holidays"] = hol["public"]

        if config.get("closures"):
            result["custom_closures"] = config["closures"]

        return result

    def _apply_env_overrides(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration.

        Environment variables:
        - WORKDAY_HELPER_WORKING_DAYS -> working_days (comma separated, e.g. "0,2,4")
        - WORKDAY_HELPER_OUTPUT_FORMAT -> output_format
        - WORKDAY_HELPER_CALCULATE_EASTER -> calculate_easter
        - WORKDAY_HELPER_LANGUAGE -> language

        Raises:
            ConfigurationError: If an override cannot be parsed.
        """
        for env_var, config_key in self.ENV_MAPPINGS.items():
            value = os.environ.get(env_var)
            if value is None:
                continue
            if config_key == "working_days":
                config_dict[config_key] = self._parse_weekdays(env_var, value)
            elif config_key == "calculate_easter":
                config_dict[config_key] = self._parse_bool(value)
            else:
                config_dict[config_key] = value
            logger.debug(f"Override from env: {env_var} -> {config_key}")

        return config_dict

    def _parse_weekdays(self, env_var: str, value: str) -> List[int]:
        try:
            return [int(part) for part in value.split(",") if part.strip()]
        except ValueError as e:
            raise ConfigurationError(f"{env_var} must be a comma separated list of weekdays: {e}") from e

    def _parse_bool(self, value: str) -> bool:
        """Parse a boolean from string."""
        return value.lower() in ("true", "1", "yes", "on")

    def _entry_to_dict(self, entry: Any) -> Any:
        """Convert rule or closure models to plain mappings for YAML."""
        if isinstance(entry, BaseModel):
            return entry.model_dump(exclude_none=True)
        return entry

    def save(self, config: Config, output_path: Optional[str] = None) -> None:
        """
        Save configuration to YAML file.

        Args:
            config: Configuration object to save.
            output_path: Optional output path. If not provided, uses default.
        """
        save_path = Path(output_path) if output_path else self.config_path

        holidays: Dict[str, Any] = {"calculate_easter": config.calculate_easter}
        if config.public_holidays is not None:
            holidays["public"] = [self._entry_to_dict(rule) for rule in config.public_holidays]

        config_dict = {
            "language": config.language,
            "calendar": {
                "working_days": list(config.working_days),
                "output_format": config.output_format,
            },
            "holidays": holidays,
            "closures": [self._entry_to_dict(closure) for closure in config.custom_closures],
        }

        save_path.parent.mkdir(parents=True, exist_ok=True)

        with open(save_path, "w", encoding="utf-8") as f:
            yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False, allow_unicode=True)

        logger.info(f"Saved configuration to: {save_path}")
