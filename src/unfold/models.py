"""Data models for tabular export."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .errors import InvalidArgument


@dataclass
class ExportConfig:
    """Settings for turning an unfold into DataFrame batches."""

    batch_size: int = 1000
    compression: str = "snappy"
    columns: Optional[List[str]] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.batch_size <= 0:
            raise InvalidArgument("batch_size must be positive")


@dataclass
class WriteStatistics:
    """Statistics for write operations."""

    total_rows: int = 0
    total_batches: int = 0
    file_size_bytes: int = 0
    elapsed_time: float = 0.0
    output_path: Path = field(default_factory=lambda: Path("unfold.parquet"))
