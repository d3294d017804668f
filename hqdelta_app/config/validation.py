"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from .defaults import (
    QuoteApiParams,
    ReportColumns,
    ReportParams,
    SelectionCriteria,
    SheetParams,
)

# Remote API hard limit on symbols per batch request
MAX_BATCH_SIZE = 100

_KNOWN_KEYS = {
    "selection": {f.name for f in fields(SelectionCriteria)},
    "columns": {f.name for f in fields(ReportColumns)},
    "sheet": {f.name for f in fields(SheetParams)},
    "quotes": {f.name for f in fields(QuoteApiParams)},
    "report": {f.name for f in fields(ReportParams)},
}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _is_non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_structure(config: dict[str, Any]) -> list[ValidationError]:
        """Reject unknown sections and keys."""
        errors = []

        for section, params in config.items():
            if section not in _KNOWN_KEYS:
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=params
                ))
                continue

            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue

            for key in params:
                if key not in _KNOWN_KEYS[section]:
                    errors.append(ValidationError(
                        field=f"{section}.{key}",
                        message="Unknown configuration key",
                        value=params[key]
                    ))

        return errors

    @staticmethod
    def validate_selection_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate row selection criteria."""
        errors = []

        if "min_si_criteria" in params:
            value = params["min_si_criteria"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="min_si_criteria",
                    message="Must be a non-negative number",
                    value=value
                ))

        if "undervalued_flag" in params:
            value = params["undervalued_flag"]
            if not _is_non_empty_str(value):
                errors.append(ValidationError(
                    field="undervalued_flag",
                    message="Must be a non-empty string",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_column_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate header labels."""
        errors = []

        for key, value in params.items():
            if not _is_non_empty_str(value):
                errors.append(ValidationError(
                    field=key,
                    message="Must be a non-empty string",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_sheet_params(params: dict[str, Any], require_inputs: bool = False) -> list[ValidationError]:
        """Validate workbook location parameters."""
        errors = []

        if "sheet_name" in params and not _is_non_empty_str(params["sheet_name"]):
            errors.append(ValidationError(
                field="sheet_name",
                message="Must be a non-empty string",
                value=params["sheet_name"]
            ))

        value = params.get("xlsx_path")
        if value is not None and not _is_non_empty_str(value):
            errors.append(ValidationError(
                field="xlsx_path",
                message="Must be a non-empty string",
                value=value
            ))
        elif value is None and require_inputs:
            errors.append(ValidationError(
                field="xlsx_path",
                message="Workbook path is required (set XLSX_PATH or --xlsx)",
                value=value
            ))

        return errors

    @staticmethod
    def validate_quote_params(params: dict[str, Any], require_inputs: bool = False) -> list[ValidationError]:
        """Validate remote quote API parameters."""
        errors = []

        if "base_url" in params:
            value = params["base_url"]
            if not _is_non_empty_str(value) or not value.startswith(("http://", "https://")):
                errors.append(ValidationError(
                    field="base_url",
                    message="Must be an http(s) URL",
                    value=value
                ))

        value = params.get("token")
        if value is not None and not _is_non_empty_str(value):
            errors.append(ValidationError(
                field="token",
                message="Must be a non-empty string",
                value="<redacted>"
            ))
        elif value is None and require_inputs:
            errors.append(ValidationError(
                field="token",
                message="API token is required (set IEX_CLOUD_BATCH_API_KEY or --token)",
                value=value
            ))

        if "batch_size" in params:
            value = params["batch_size"]
            if not _is_positive_int(value) or value > MAX_BATCH_SIZE:
                errors.append(ValidationError(
                    field="batch_size",
                    message=f"Must be an integer between 1 and {MAX_BATCH_SIZE}",
                    value=value
                ))

        if "max_concurrency" in params:
            value = params["max_concurrency"]
            if not _is_positive_int(value):
                errors.append(ValidationError(
                    field="max_concurrency",
                    message="Must be a positive integer",
                    value=value
                ))

        if "timeout_seconds" in params:
            value = params["timeout_seconds"]
            if value is not None and (not _is_number(value) or value <= 0):
                errors.append(ValidationError(
                    field="timeout_seconds",
                    message="Must be a positive number or null",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any], require_inputs: bool = False) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = ConfigValidator.validate_structure(config)
        if errors:
            return errors

        if "selection" in config:
            errors.extend(ConfigValidator.validate_selection_params(config["selection"]))

        if "columns" in config:
            errors.extend(ConfigValidator.validate_column_params(config["columns"]))

        errors.extend(ConfigValidator.validate_sheet_params(
            config.get("sheet", {}), require_inputs=require_inputs
        ))
        errors.extend(ConfigValidator.validate_quote_params(
            config.get("quotes", {}), require_inputs=require_inputs
        ))

        if "report" in config and not isinstance(config["report"].get("currency", ""), str):
            errors.append(ValidationError(
                field="currency",
                message="Must be a string",
                value=config["report"]["currency"]
            ))

        return errors
