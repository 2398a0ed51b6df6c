"""Configuration schema and loading system for cabinet part generation.

This package provides JSON-based configuration loading and validation for
a single cabinet. It includes Pydantic models for schema validation, a
configuration loader with comprehensive error handling, construction
checks, and an adapter that turns a configuration into a generation
request.

Public API:
    - CabinetPartsConfiguration: Root configuration model
    - MaterialConfig: Material specification model
    - CabinetMaterialsConfig: Material assignment model
    - CabinetParamsConfig: Cabinet parameters model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - ValidationResult: Container for validation results
    - ValidationError: Blocking validation error
    - ValidationWarning: Non-blocking validation warning
    - validate_config: Perform full configuration validation
    - config_to_params: Convert cabinet parameters to domain objects
    - config_to_request: Convert a configuration to a generation request

Example:
    >>> from pathlib import Path
    >>> from cabinet_parts.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("kitchen.json"))
    ...     print(f"Cabinet: {config.params.width}x{config.params.height}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from cabinet_parts.application.config.adapter import (
    config_to_params,
    config_to_request,
)
from cabinet_parts.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from cabinet_parts.application.config.schemas import (
    SUPPORTED_VERSIONS,
    CabinetMaterialsConfig,
    CabinetParamsConfig,
    CabinetPartsConfiguration,
    MaterialConfig,
)
from cabinet_parts.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "CabinetMaterialsConfig",
    "CabinetParamsConfig",
    "CabinetPartsConfiguration",
    "ConfigError",
    "MaterialConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_params",
    "config_to_request",
    "load_config",
    "load_config_from_dict",
    "validate_config",
]
