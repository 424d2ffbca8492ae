"""Scan tables and settings management using Pydantic."""

import os
from pathlib import Path
from typing import Literal, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv


# Common image file extensions, including mobile-specific and RAW formats
IMAGE_EXTENSIONS = frozenset(
    {
        ".jpg",
        ".jpeg",
        ".png",
        ".gif",
        ".bmp",
        ".tiff",
        ".svg",
        ".webp",
        ".heic",  # High Efficiency Image Format (iOS)
        ".heif",
        ".raw",
        ".cr2",  # Canon
        ".nef",  # Nikon
        ".orf",  # Olympus
        ".sr2",  # Sony
        ".arw",  # Sony
        ".dng",  # Adobe Digital Negative
        ".rw2",  # Panasonic
    }
)

# Directories skipped with their whole subtree (matched against the full path)
IGNORE_DIRS = (
    "Windows",
    "Program Files",
    "System Volume Information",
    "$Recycle.Bin",
    "Users",
    "SmartPSS",
    "Python312",
    "ProgramData",
)

# Directories need strictly more image files than this to be reported
MIN_IMAGE_COUNT = 5


class ScanSettings(BaseSettings):
    """Runtime settings for the image scanner."""

    # Environment settings
    environment: str = Field(default="dev", description="Environment: dev, test, prod")

    # Logging settings
    log_level: str = Field(default="INFO", description="Logging level for the log file")
    log_format: str = Field(
        default="%(asctime)s - %(levelname)s - %(message)s",
        description="Log message format",
    )
    log_dir: Optional[Path] = Field(
        default=None, description="Directory for log files (no log file when unset)"
    )

    # Scan behaviour
    ignore_match: Literal["substring", "segment"] = Field(
        default="substring",
        description="Match ignore entries anywhere in the path or as whole path components",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "AUDIT", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {value}")
        return level

    model_config = SettingsConfigDict(
        env_prefix="IMAGESCAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def load_config(project_path: Optional[Path] = None, env: str = "dev") -> ScanSettings:
    """Load settings for a scan run.

    Args:
        project_path: Directory holding the .env files
        env: Environment to load (dev, test, prod)

    Returns:
        Loaded settings instance
    """
    if project_path is None:
        project_path = Path.cwd()

    # Load environment-specific .env file
    env_file = project_path / f".env.{env}"
    if env_file.exists():
        load_dotenv(env_file)
    else:
        # Fallback to default .env file
        default_env = project_path / ".env"
        if default_env.exists():
            load_dotenv(default_env)

    os.environ["ENVIRONMENT"] = env

    return ScanSettings(environment=env)
