"""Configuration management for ghdist."""

import logging
import shutil
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

# Central data directory for all ghdist files
DATA_DIR = Path.home() / ".local" / "share" / "ghdist"


class ApiConfig(BaseModel):
    """GitHub REST API access settings."""

    base_url: str = Field(default="https://api.github.com", description="API root URL")
    timeout_seconds: float = Field(default=10, gt=0, description="Per-request timeout")
    per_page: int = Field(default=100, ge=1, le=100, description="Repositories per page")

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class DistributionConfig(BaseModel):
    """Settings for the language and activity distributions."""

    top_n: int = Field(default=5, ge=0, description="Languages kept before folding into Others")
    language_digits: int = Field(default=2, ge=0, description="Floor-rounding digits for languages")
    activity_digits: int = Field(default=3, ge=0, description="Floor-rounding digits for activity")
    window_years: int = Field(default=5, ge=1, description="Number of years in the activity window")
    window_end: int | None = Field(
        default=None, description="Last year of the activity window (defaults to current year)"
    )


class PathsConfig(BaseModel):
    """Configuration for application paths."""

    output: Path = Field(default=Path("users.json"), description="JSON export path")
    log_dir: Path = Field(default=DATA_DIR / "logs", description="Directory for log files")

    @field_validator("output", "log_dir", mode="before")
    @classmethod
    def expand_path(cls, v: Any) -> Path:
        """Expand ~ to user home directory."""
        if isinstance(v, str):
            return Path(v).expanduser()
        if isinstance(v, Path):
            return v.expanduser()
        raise ValueError(f"Invalid path type: {type(v)}")


class GhdistConfig(BaseModel):
    api: ApiConfig = Field(default_factory=ApiConfig)
    distribution: DistributionConfig = Field(default_factory=DistributionConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)


def _get_bundled_config_path() -> Path:
    """Get path to the bundled default config file."""
    return Path(__file__).parent / "conf.yml"


def _get_user_config_path() -> Path:
    """Get path to the user's config file in DATA_DIR."""
    return DATA_DIR / "conf.yml"


def _ensure_user_config() -> Path:
    """
    Ensure user config exists, copying from bundled default if needed.

    Returns:
        Path to the user config file
    """
    user_config = _get_user_config_path()
    bundled_config = _get_bundled_config_path()

    if not user_config.exists():
        if not bundled_config.exists():
            raise FileNotFoundError(
                f"No config found at {user_config} and no bundled default at {bundled_config}"
            )
        DATA_DIR.mkdir(parents=True, exist_ok=True)
        shutil.copy(bundled_config, user_config)
        logger.info(f"Copied default config to {user_config}")

    return user_config


def load_config(config_path: Path | None = None) -> GhdistConfig:
    """
    Load configuration from conf.yml.

    Args:
        config_path: Path to config file. If None, uses user config at
                     ~/.local/share/ghdist/conf.yml (copying bundled default if needed)

    Returns:
        Validated GhdistConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is invalid
    """
    if config_path is None:
        config_path = _ensure_user_config()

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    logger.debug(f"Loading configuration from {config_path}")

    with open(config_path) as f:
        config_data = yaml.safe_load(f) or {}

    return GhdistConfig(**config_data)


# Singleton pattern for config
_config_instance: GhdistConfig | None = None


def get_config(config_path: Path | None = None) -> GhdistConfig:
    """Get or load the configuration singleton.

    Passing an explicit path always reloads and replaces the cached instance.
    """
    global _config_instance
    if _config_instance is None or config_path is not None:
        _config_instance = load_config(config_path)
    return _config_instance
