"""Configuration loading utilities."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from jumphash.hashing.jump import validate_key_seed, validate_num_buckets
from jumphash.utils.logger import get_logger

logger = get_logger(__name__)


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Dictionary containing configuration parameters

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML parsing fails
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        config = yaml.safe_load(f)

    if config is None:
        return {}

    if not isinstance(config, dict):
        raise ValueError(
            f"Config file must contain a mapping, got {type(config).__name__}"
        )

    logger.debug("Loaded config from %s: %s", config_path, sorted(config))
    return config


@dataclass(frozen=True)
class JumpConfig:
    """Configuration for jump hashing.

    Attributes:
        num_buckets: Number of buckets (>= 1)
        key_seed: xxHash seed for str/bytes keys (uint64)
    """

    num_buckets: int
    key_seed: int = 0

    def __post_init__(self) -> None:
        """Validate parameters."""
        validate_num_buckets(self.num_buckets)
        validate_key_seed(self.key_seed)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "JumpConfig":
        """Build a config from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        if "num_buckets" not in data:
            raise ValueError("Config is missing required key 'num_buckets'")
        return cls(**data)


def load_jump_config(config_path: Union[str, Path]) -> JumpConfig:
    """Load a JumpConfig from YAML.

    Reads the ``jumphash`` section if present, otherwise the top level.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated JumpConfig
    """
    config = load_config(config_path)
    section = config.get("jumphash", config)
    if not isinstance(section, dict):
        raise ValueError("'jumphash' section must be a mapping")
    return JumpConfig.from_dict(section)
