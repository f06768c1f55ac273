"""
Configuration Loader - YAML Loading with Validation.

Reads a YAML file, optionally overlays a named profile, and validates the
result as a TrackerConfig. A relative data source location is anchored at
the directory of the config file that named it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from progress_tracker.config.models import TrackerConfig

logger = logging.getLogger(__name__)

PROFILES_DIR = Path("config") / "profiles"


class ConfigLoader:
    """Loads and validates tracker configuration."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Args:
            base_path: Base path for relative config and profile paths
        """
        self._base_path = Path(base_path) if base_path else Path(".")

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
    ) -> TrackerConfig:
        """
        Load configuration from a YAML file.

        Args:
            config_path: Path to YAML config file
            profile: Optional profile name merged over the file

        Returns:
            Validated TrackerConfig object

        Raises:
            FileNotFoundError: If the config file or profile doesn't exist
            ValidationError: If the merged config is invalid
        """
        path = self._resolve_path(config_path)
        raw = self._read_yaml(path)

        if profile:
            raw = self._deep_merge(raw, self._read_profile(profile))

        config = TrackerConfig.model_validate(raw)
        logger.debug(f"Loaded config from {path} (profile={profile or '-'})")
        return self._anchor_data_location(config, path.parent)

    def load_from_dict(self, config_dict: Dict[str, Any]) -> TrackerConfig:
        """Validate an in-memory configuration mapping."""
        return TrackerConfig.model_validate(config_dict)

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        return p if p.is_absolute() else self._base_path / p

    def _read_yaml(self, path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping: {path}")
        return data

    def _read_profile(self, profile: str) -> Dict[str, Any]:
        profile_path = self._base_path / PROFILES_DIR / f"{profile}.yaml"
        if not profile_path.exists():
            raise FileNotFoundError(f"Profile not found: {profile}")
        return self._read_yaml(profile_path)

    def _deep_merge(
        self,
        base: Dict[str, Any],
        overlay: Dict[str, Any],
    ) -> Dict[str, Any]:
        merged = dict(base)
        for key, value in overlay.items():
            current = merged.get(key)
            if isinstance(current, dict) and isinstance(value, dict):
                merged[key] = self._deep_merge(current, value)
            else:
                merged[key] = value
        return merged

    def _anchor_data_location(self, config: TrackerConfig, config_dir: Path) -> TrackerConfig:
        location = config.data_source.location
        if location.startswith(("http://", "https://")) or Path(location).is_absolute():
            return config
        data_source = config.data_source.model_copy(
            update={"location": str(config_dir / location)}
        )
        return config.model_copy(update={"data_source": data_source})


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> TrackerConfig:
    """Convenience wrapper around ConfigLoader.load."""
    return ConfigLoader(base_path=base_path).load(config_path, profile)
