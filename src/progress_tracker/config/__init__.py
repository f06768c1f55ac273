"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - TrackerConfig: Root configuration object
    - DataSourceConfig: Where the record collection is read from
    - ViewDefaultsConfig: Initial search text, status filter and sort option
    - DisplayConfig: Header text and rendering options

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Support for profiles merged over the base file
"""

from progress_tracker.config.loader import ConfigLoader, load_config
from progress_tracker.config.models import (
    DataSourceConfig,
    DisplayConfig,
    TrackerConfig,
    ViewDefaultsConfig,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "DataSourceConfig",
    "DisplayConfig",
    "TrackerConfig",
    "ViewDefaultsConfig",
]
