"""Configuration management for the atomic CSS compiler."""

import os
import yaml
from enum import Enum
from pathlib import Path
from typing import Dict, Any, Optional
from pydantic import BaseModel, Field


class ShorthandStrategyName(str, Enum):
    """Available shorthand handling strategies."""

    KEEP_SHORTHANDS = "keep_shorthands"
    EXPAND_TO_LONGHANDS = "expand_to_longhands"
    REJECT_SHORTHANDS = "reject_shorthands"


class CSSConfig(BaseModel):
    """Configuration for CSS generation."""

    use_css_layers: bool = False
    font_size_px_to_rem: bool = False
    font_size_root_px: float = 16.0
    class_name_prefix: str = "x"
    debug_class_names: bool = False
    autoprefixer: bool = False
    last_media_query_wins: bool = True


class ShorthandConfig(BaseModel):
    """Configuration for shorthand property handling."""

    strategy: ShorthandStrategyName = ShorthandStrategyName.KEEP_SHORTHANDS
    # Extra disallowed shorthands for reject_shorthands, property -> message
    disallowed: Dict[str, Optional[str]] = Field(default_factory=dict)


class ValidationConfig(BaseModel):
    """Configuration for property validation."""

    validate_properties: bool = True
    unknown_property_level: str = "warn"
    vendor_prefix_level: str = "warn"


class PerformanceConfig(BaseModel):
    """Configuration for performance settings."""

    cache_size: int = 1024


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = "INFO"
    format: str = "json"
    file: Optional[str] = None


class AtomicCSSConfig(BaseModel):
    """Main configuration class for the atomic CSS compiler."""

    css: CSSConfig = Field(default_factory=CSSConfig)
    shorthand: ShorthandConfig = Field(default_factory=ShorthandConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    performance: PerformanceConfig = Field(default_factory=PerformanceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Check for config in current directory first
    current_dir = Path.cwd()
    config_files = [
        current_dir / "atomic-css.yaml",
        current_dir / "atomic-css.yml",
        current_dir / "config" / "atomic-css.yaml",
    ]

    for config_file in config_files:
        if config_file.exists():
            return config_file

    # Return default path in config directory
    return current_dir / "config" / "atomic-css.yaml"


def load_config(config_path: Optional[str] = None) -> AtomicCSSConfig:
    """Load configuration from file or environment variables."""
    path: Path
    if config_path is None:
        path = get_default_config_path()
    else:
        path = Path(config_path)

    # Start with default configuration
    config_dict: Dict[str, Any] = {}

    # Load from file if it exists
    if path.exists():
        try:
            with open(path, "r") as f:
                file_config = yaml.safe_load(f)
                if file_config:
                    config_dict.update(file_config)
        except Exception as e:
            raise ValueError(f"Failed to load config from {path}: {e}")

    # Override with environment variables
    env_overrides = _get_env_overrides()
    _deep_update(config_dict, env_overrides)

    # Create and validate configuration
    try:
        return AtomicCSSConfig(**config_dict)
    except Exception as e:
        raise ValueError(f"Invalid configuration: {e}")


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_env_overrides() -> Dict[str, Any]:
    """Get configuration overrides from environment variables."""
    overrides: Dict[str, Any] = {}

    # CSS configuration
    if os.getenv("ATOMIC_CSS_USE_LAYERS"):
        overrides.setdefault("css", {})["use_css_layers"] = _parse_bool(
            os.getenv("ATOMIC_CSS_USE_LAYERS", "")
        )

    if os.getenv("ATOMIC_CSS_CLASS_PREFIX"):
        overrides.setdefault("css", {})["class_name_prefix"] = os.getenv(
            "ATOMIC_CSS_CLASS_PREFIX"
        )

    # Shorthand configuration
    if os.getenv("ATOMIC_CSS_SHORTHAND_STRATEGY"):
        overrides.setdefault("shorthand", {})["strategy"] = os.getenv(
            "ATOMIC_CSS_SHORTHAND_STRATEGY"
        )

    # Validation configuration
    if os.getenv("ATOMIC_CSS_UNKNOWN_PROPERTY_LEVEL"):
        overrides.setdefault("validation", {})["unknown_property_level"] = os.getenv(
            "ATOMIC_CSS_UNKNOWN_PROPERTY_LEVEL"
        )

    # Logging configuration
    if os.getenv("LOG_LEVEL"):
        overrides.setdefault("logging", {})["level"] = os.getenv("LOG_LEVEL")

    if os.getenv("LOG_FILE"):
        overrides.setdefault("logging", {})["file"] = os.getenv("LOG_FILE")

    # Performance configuration
    if os.getenv("CACHE_SIZE"):
        try:
            overrides.setdefault("performance", {})["cache_size"] = int(os.getenv("CACHE_SIZE", ""))
        except ValueError:
            pass

    return overrides


def _deep_update(base_dict: Dict[str, Any], update_dict: Dict[str, Any]) -> None:
    """Deep update a dictionary with another dictionary."""
    for key, value in update_dict.items():
        if key in base_dict and isinstance(base_dict[key], dict) and isinstance(value, dict):
            _deep_update(base_dict[key], value)
        else:
            base_dict[key] = value


def save_config(config: AtomicCSSConfig, config_path: Optional[str] = None) -> None:
    """Save configuration to file."""
    path: Path
    if config_path is None:
        path = get_default_config_path()
    else:
        path = Path(config_path)

    # Ensure directory exists
    path.parent.mkdir(parents=True, exist_ok=True)

    # Convert to dictionary and save
    config_dict = config.model_dump(mode="json")

    with open(path, "w") as f:
        yaml.dump(config_dict, f, default_flow_style=False, indent=2)


# Default configuration instance
DEFAULT_CONFIG = AtomicCSSConfig()
