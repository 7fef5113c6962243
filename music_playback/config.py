"""
Configuration for the music player.

Reads settings from an optional .env file and environment variables with
sensible defaults.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from .logging_utils import configure_logging
from .models import DeviceKind, StrategyKind, coerce_kind

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = ".env"


def _load_env_file(env_file: Optional[Union[str, Path]] = None) -> None:
    """Load environment variables from a .env file if it exists."""
    env_path = Path(env_file or os.getenv("PLAYER_ENV_FILE", DEFAULT_ENV_FILE))
    if env_path.exists():
        load_dotenv(env_path, override=False)  # Don't override existing env vars
        logger.debug(f"Loaded environment from {env_path}")


def _parse_seed(raw: Optional[str]) -> Optional[int]:
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"PLAYER_RANDOM_SEED must be an integer, got {raw!r}")


@dataclass
class PlayerConfig:
    """Player configuration"""
    default_device: DeviceKind = DeviceKind.HEADPHONES
    default_strategy: StrategyKind = StrategyKind.SEQUENTIAL
    random_seed: Optional[int] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env_file: Optional[Union[str, Path]] = None) -> "PlayerConfig":
        """
        Build configuration from environment variables.

        Environment variables:
            PLAYER_DEFAULT_DEVICE: "bluetooth" | "wired" | "headphones" (default: "headphones")
            PLAYER_DEFAULT_STRATEGY: "sequential" | "random" | "custom_queue" (default: "sequential")
            PLAYER_RANDOM_SEED: Integer seed for random selection (default: unset)
            PLAYER_LOG_LEVEL: Logging level name (default: "INFO")
            PLAYER_ENV_FILE: .env file to load first (default: ".env")

        Args:
            env_file: Explicit .env path; overrides PLAYER_ENV_FILE

        Raises:
            UnsupportedKindError: If a device or strategy name is unknown
            ValueError: If the seed is not an integer
        """
        _load_env_file(env_file)

        config = cls(
            default_device=coerce_kind(os.getenv("PLAYER_DEFAULT_DEVICE", cls.default_device.value), DeviceKind),
            default_strategy=coerce_kind(os.getenv("PLAYER_DEFAULT_STRATEGY", cls.default_strategy.value), StrategyKind),
            random_seed=_parse_seed(os.getenv("PLAYER_RANDOM_SEED")),
            log_level=os.getenv("PLAYER_LOG_LEVEL", cls.log_level).upper(),
        )
        logger.debug(f"Loaded player config: {config}")
        return config

    def apply_logging(self) -> None:
        """Configure root logging at the configured level"""
        configure_logging(self.log_level)
