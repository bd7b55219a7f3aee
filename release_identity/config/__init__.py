"""Configuration package.

The CLI and the metadata loader import from `release_identity.config`.
We re-export the validation API and the defaults here.
"""

from .loader import (
    DEFAULT_CONFIG,
    ConfigValidationError,
    config_with_defaults,
    load_config_file,
    validate_config,
)

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigValidationError",
    "config_with_defaults",
    "load_config_file",
    "validate_config",
]
