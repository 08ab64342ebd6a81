"""Configuration schema and loading for carpet jobs.

Public API:
    - CarpetConfiguration: Root configuration model
    - RoomConfig: One room measurement
    - CarpetOptionsConfig: Steps and slippage options
    - PackingConfigSchema / AnnealingConfigSchema: Packing tunables
    - load_config / load_config_from_dict: Load and validate a job
    - ConfigError: Exception for configuration errors
    - config_to_pieces / config_to_options / config_to_packing: Adapters

Example:
    >>> from pathlib import Path
    >>> from carpets.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("house.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from carpets.application.config.adapter import (
    config_to_options,
    config_to_packing,
    config_to_pieces,
)
from carpets.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from carpets.application.config.schema import (
    SUPPORTED_VERSIONS,
    AnnealingConfigSchema,
    CarpetConfiguration,
    CarpetOptionsConfig,
    PackingConfigSchema,
    RoomConfig,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "AnnealingConfigSchema",
    "CarpetConfiguration",
    "CarpetOptionsConfig",
    "ConfigError",
    "PackingConfigSchema",
    "RoomConfig",
    "config_to_options",
    "config_to_packing",
    "config_to_pieces",
    "load_config",
    "load_config_from_dict",
]
