"""
Parquet output for unfold DataFrame batches.

Needs the ``parquet`` extra (pandas and pyarrow).
"""

import logging
import time
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from .frames import unfold_frames
from .models import ExportConfig, WriteStatistics
from .protocols import LoggerProtocol, T, Transform


class ParquetWriter:
    """
    Streams DataFrame batches into one Parquet file, a row group per batch.

    The file is created when the first non-empty batch arrives, using that
    batch's schema. Usable as a context manager.
    """

    def __init__(
        self,
        output_path: Path,
        compression: str = "snappy",
        logger: Optional[LoggerProtocol] = None,
    ):
        self.output_path = Path(output_path)
        self.compression = compression
        self.stats = WriteStatistics(output_path=self.output_path)
        self._logger = logger or logging.getLogger(__name__)
        self._file: Optional[pq.ParquetWriter] = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def write_frame(self, df: pd.DataFrame) -> bool:
        """
        Append one batch as a row group.

        Returns:
            False if the batch was empty and nothing was written
        """
        if df.empty:
            return False
        table = pa.Table.from_pandas(df, preserve_index=False)
        if self._file is None:
            self._file = pq.ParquetWriter(
                str(self.output_path), table.schema, compression=self.compression
            )
        self._file.write_table(table)
        self.stats.total_rows += table.num_rows
        self.stats.total_batches += 1
        self._logger.debug(
            f"Row group {self.stats.total_batches}: {table.num_rows} rows "
            f"({self.stats.total_rows} so far)"
        )
        return True

    def write(self, dataframes: Iterable[pd.DataFrame]) -> WriteStatistics:
        """
        Write every batch, then close the file.

        Raises:
            RuntimeError: If no batch contained any rows
        """
        started = time.time()
        for df in dataframes:
            self.write_frame(df)
        if self.stats.total_batches == 0:
            raise RuntimeError("No blocks written: the unfold produced no rows")

        self.close()
        self.stats.elapsed_time = time.time() - started
        self.stats.file_size_bytes = self.output_path.stat().st_size
        self._logger.info(
            f"Wrote {self.stats.total_rows} rows in {self.stats.total_batches} "
            f"row groups to {self.output_path}"
        )
        return self.stats

    def close(self):
        """Close the underlying file; safe to call more than once."""
        if self._file is not None:
            self._file.close()
            self._file = None


def export_parquet(
    func: Transform,
    init: T,
    count: int,
    output_path: Path,
    config: Optional[ExportConfig] = None,
    logger: Optional[LoggerProtocol] = None,
) -> WriteStatistics:
    """
    Write the first ``count`` values of an unfold to a Parquet file.

    Args:
        func: Unary transform
        init: First value
        count: Number of values to write
        output_path: Destination file
        config: Batch size, compression and column names
        logger: Logger instance

    Returns:
        WriteStatistics with operation details
    """
    config = config or ExportConfig()
    frames = unfold_frames(func, init, count, config.batch_size, config.columns)
    with ParquetWriter(output_path, config.compression, logger) as writer:
        return writer.write(frames)


def read_metadata(path: Path) -> dict:
    """Return row, column and row group counts of a Parquet file."""
    metadata = pq.ParquetFile(str(path)).metadata
    return {
        "num_rows": metadata.num_rows,
        "num_columns": metadata.num_columns,
        "num_row_groups": metadata.num_row_groups,
    }
