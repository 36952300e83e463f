"""
Configuration management for detfuse

Central configuration system supporting:
- Dataclass-based configs
- YAML file loading
- Environment variable overrides
- Runtime modification

Operations never require a config: thresholds are always explicit
arguments. These dataclasses only supply defaults to FramePostprocessor.
"""

import os
import yaml
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional, Dict, Any

from .constants import (
    DEFAULT_CLEAN_IOU_THRESHOLD,
    DEFAULT_UNION_IOU_THRESHOLD,
    VALID_IOU_THRESHOLD_RANGE,
    ENV_CLEAN_IOU_THRESHOLD,
    ENV_UNION_IOU_THRESHOLD,
)
from .exceptions import ConfigError


def _check_threshold(name: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{name} must be a number, got {value!r}")
    low, high = VALID_IOU_THRESHOLD_RANGE
    if not low <= value <= high:
        raise ConfigError(f"{name} must be between {low} and {high}, got {value}")


@dataclass
class DedupConfig:
    """Configuration for single-frame deduplication"""
    iou_threshold: float = DEFAULT_CLEAN_IOU_THRESHOLD

    def __post_init__(self):
        """Validate configuration"""
        _check_threshold("dedup.iou_threshold", self.iou_threshold)


@dataclass
class UnionConfig:
    """Configuration for two-frame union"""
    iou_threshold: float = DEFAULT_UNION_IOU_THRESHOLD
    clean_after: bool = False  # run dedup on the merged frame

    def __post_init__(self):
        """Validate configuration"""
        _check_threshold("union.iou_threshold", self.iou_threshold)


@dataclass
class PostprocessConfig:
    """Master configuration class combining all subconfigs"""
    dedup: DedupConfig = field(default_factory=DedupConfig)
    union: UnionConfig = field(default_factory=UnionConfig)

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "PostprocessConfig":
        """
        Load configuration from YAML file

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            PostprocessConfig instance

        Raises:
            ConfigError: If the file is missing, malformed or out of range
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise ConfigError(f"Config file not found: {yaml_path}")

        try:
            with open(yaml_path, 'r') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML format in {yaml_path}: {e}")

        if not isinstance(data, dict):
            raise ConfigError(f"Expected a mapping at the top of {yaml_path}")

        dedup_section = _section(data, 'dedup', yaml_path)
        union_section = _section(data, 'union', yaml_path)

        try:
            return cls(
                dedup=DedupConfig(**dedup_section),
                union=UnionConfig(**union_section),
            )
        except TypeError as e:
            raise ConfigError(f"Unknown configuration key in {yaml_path}: {e}")

    @classmethod
    def from_env(cls, base_config: Optional["PostprocessConfig"] = None) -> "PostprocessConfig":
        """
        Create config from environment variables

        Supports:
        - DETFUSE_CLEAN_IOU_THRESHOLD
        - DETFUSE_UNION_IOU_THRESHOLD

        Args:
            base_config: Base configuration to override (default: new config)

        Returns:
            PostprocessConfig instance with environment overrides
        """
        if base_config is None:
            config = cls()
        else:
            config = base_config

        # Validate every override before touching the config
        clean_threshold = union_threshold = None
        if ENV_CLEAN_IOU_THRESHOLD in os.environ:
            clean_threshold = _env_float(ENV_CLEAN_IOU_THRESHOLD)
            _check_threshold("dedup.iou_threshold", clean_threshold)
        if ENV_UNION_IOU_THRESHOLD in os.environ:
            union_threshold = _env_float(ENV_UNION_IOU_THRESHOLD)
            _check_threshold("union.iou_threshold", union_threshold)

        if clean_threshold is not None:
            config.dedup.iou_threshold = clean_threshold
        if union_threshold is not None:
            config.union.iou_threshold = union_threshold

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary"""
        return asdict(self)

    def to_yaml(self, yaml_path: str) -> None:
        """
        Save configuration to YAML file

        Args:
            yaml_path: Path to save YAML configuration
        """
        yaml_path = Path(yaml_path)
        yaml_path.parent.mkdir(parents=True, exist_ok=True)

        with open(yaml_path, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def __str__(self) -> str:
        """String representation of config"""
        return yaml.dump(self.to_dict(), default_flow_style=False, sort_keys=False)


def _section(data: Dict[str, Any], name: str, yaml_path: Path) -> Dict[str, Any]:
    """Sub-mapping for one config section; an empty section means defaults"""
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(
            f"Section '{name}' in {yaml_path} must be a mapping, got {type(section).__name__}"
        )
    return section


def _env_float(var_name: str) -> float:
    raw = os.environ[var_name]
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{var_name} must be a number, got {raw!r}")
