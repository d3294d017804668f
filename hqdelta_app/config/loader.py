"""Configuration loader with layered parameter precedence."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import (
    DefaultConfig,
    QuoteApiParams,
    ReportColumns,
    ReportParams,
    SelectionCriteria,
    SheetParams,
    get_default_config,
)
from .validation import ConfigValidator

# Environment variable -> (section, key)
ENV_VARIABLES: dict[str, tuple[str, str]] = {
    "XLSX_PATH": ("sheet", "xlsx_path"),
    "HQDELTA_SHEET_NAME": ("sheet", "sheet_name"),
    "IEX_CLOUD_BATCH_API_KEY": ("quotes", "token"),
    "IEX_CLOUD_BASE_URL": ("quotes", "base_url"),
    "HQDELTA_MAX_CONCURRENCY": ("quotes", "max_concurrency"),
}

_SECTION_TYPES = {
    "selection": SelectionCriteria,
    "columns": ReportColumns,
    "sheet": SheetParams,
    "quotes": QuoteApiParams,
    "report": ReportParams,
}


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with layered precedence."""

    config_path: Path
    defaults: DefaultConfig
    environ: Mapping[str, str] = field(default_factory=dict)
    required: bool = False

    @classmethod
    def create(
        cls,
        config_path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None
    ) -> "ConfigLoader":
        """Create a ConfigLoader instance.

        An explicit ``config_path`` must exist; the default path is optional.
        """
        required = config_path is not None
        if config_path is None:
            config_path = Path(__file__).parent.parent.parent / "config" / "hqdelta.yaml"

        return cls(
            config_path=Path(config_path),
            defaults=get_default_config(),
            environ=dict(os.environ if environ is None else environ),
            required=required,
        )

    def load_file_config(self) -> dict[str, Any]:
        """Load overrides from the YAML config file."""
        if not self.config_path.exists():
            if self.required:
                raise ConfigurationError(f"Config file not found: {self.config_path}")
            return {}

        try:
            with open(self.config_path) as f:
                file_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {self.config_path}: {e}") from e

        if file_config is None:
            return {}
        if not isinstance(file_config, dict):
            raise ConfigurationError(f"Config file {self.config_path} must contain a mapping")
        return file_config

    def load_env_config(self) -> dict[str, Any]:
        """Collect overrides from environment variables."""
        config: dict[str, Any] = {}
        for variable, (section, key) in ENV_VARIABLES.items():
            value = self.environ.get(variable)
            if value is None or value == "":
                continue
            if key == "max_concurrency" and value.isdigit():
                value = int(value)
            config.setdefault(section, {})[key] = value
        return config

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with layered precedence.

        Priority order:
        1. Explicit overrides, e.g. command line flags (highest priority)
        2. Environment variables
        3. YAML config file
        4. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)
        config = self._deep_merge(config, self.load_file_config())
        config = self._deep_merge(config, self.load_env_config())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def build_config(
        self,
        overrides: Optional[dict[str, Any]] = None,
        require_inputs: bool = True
    ) -> DefaultConfig:
        """Merge, validate and convert configuration into typed dataclasses."""
        config = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(config, require_inputs=require_inputs)
        if errors:
            details = "; ".join(f"{err.field}: {err.message} (got: {err.value!r})" for err in errors)
            raise ConfigurationError(f"Invalid configuration: {details}", errors=errors)

        return DefaultConfig(**{
            section: section_type(**config[section])
            for section, section_type in _SECTION_TYPES.items()
        })

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
