"""
Loading of the dashboard configuration from YAML.

Normal runs are lenient: a broken configuration is reported and the reference
settings are used instead, so the dashboard always starts. Strict loading
(used by ``--validate-config``) raises ConfigurationError instead.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from .models import MonitorConfig


logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised by strict loading when a configuration file cannot be used."""


def describe_validation_error(error: ValidationError) -> str:
    """One ``field: message`` entry per problem, joined with semicolons."""
    problems = []
    for detail in error.errors():
        field = ".".join(str(part) for part in detail["loc"]) or "config"
        problems.append(f"{field}: {detail['msg']}")
    return "; ".join(problems)


class ConfigurationManager:
    """Reads MonitorConfig instances from YAML files or plain mappings."""

    DEFAULT_CONFIG_FILENAME = "config.yaml"

    def get_default_config_path(self) -> str:
        return self.DEFAULT_CONFIG_FILENAME

    def load_config(self, config_path: Optional[str] = None, strict: bool = False) -> MonitorConfig:
        """
        Load the configuration file at ``config_path``.

        Without a path the default file is read when it exists; otherwise the
        reference settings are returned in both modes.

        Args:
            config_path: Path to a YAML configuration file.
            strict: Raise ConfigurationError instead of falling back to defaults.

        Returns:
            The validated configuration.
        """
        if config_path is None:
            config_path = self.get_default_config_path()
            if not Path(config_path).exists():
                logger.info(f"No {config_path} found, using reference settings")
                return MonitorConfig()

        try:
            settings = self._read_settings(Path(config_path))
        except (OSError, yaml.YAMLError, ConfigurationError) as e:
            if strict:
                raise ConfigurationError(f"Cannot read {config_path}: {e}") from e
            logger.warning(f"Cannot read {config_path} ({e}), using reference settings")
            return MonitorConfig()

        return self.validate_config(settings, strict=strict, source=config_path)

    def validate_config(
        self,
        settings: Dict[str, Any],
        strict: bool = False,
        source: str = "configuration",
    ) -> MonitorConfig:
        """
        Build a MonitorConfig from a settings mapping.

        Invalid settings raise ConfigurationError when ``strict`` is set and
        yield the reference settings otherwise.
        """
        try:
            return MonitorConfig.model_validate(settings)
        except ValidationError as e:
            message = f"Invalid {source}: {describe_validation_error(e)}"
            if strict:
                raise ConfigurationError(message) from e
            logger.warning(f"{message}; using reference settings")
            return MonitorConfig()

    def _read_settings(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            raise ConfigurationError("file does not exist")

        with open(path, "r", encoding="utf-8") as file:
            settings = yaml.safe_load(file)

        if settings is None:
            return {}
        if not isinstance(settings, dict):
            raise ConfigurationError(f"expected a mapping, got {type(settings).__name__}")
        return settings
