"""Configuration management for the application."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .errors import InvalidArgument

# Load environment variables from .env file
load_dotenv()


@dataclass
class UnfoldConfig:
    """Application configuration parameters."""

    max_iterations: int = 100
    tolerance: float = 1e-8
    batch_size: int = 1000
    compression: str = "snappy"
    output_file: Optional[Path] = None
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.max_iterations <= 0:
            raise InvalidArgument("max_iterations must be positive")
        if self.tolerance <= 0:
            raise InvalidArgument("tolerance must be positive")
        if self.batch_size <= 0:
            raise InvalidArgument("batch_size must be positive")

    @classmethod
    def from_env(cls) -> "UnfoldConfig":
        """Load configuration from environment variables.

        UNFOLD_OUTPUT_FILE is optional; when unset nothing is exported.
        """
        output_file = os.getenv("UNFOLD_OUTPUT_FILE") or None
        return cls(
            max_iterations=int(os.getenv("UNFOLD_MAX_ITERATIONS", "100")),
            tolerance=float(os.getenv("UNFOLD_TOLERANCE", "1e-8")),
            batch_size=int(os.getenv("UNFOLD_BATCH_SIZE", "1000")),
            compression=os.getenv("UNFOLD_COMPRESSION", "snappy"),
            output_file=Path(output_file) if output_file else None,
            log_level=os.getenv("UNFOLD_LOG_LEVEL", "INFO").upper(),
        )


def get_config() -> UnfoldConfig:
    """Get application configuration."""
    return UnfoldConfig.from_env()
