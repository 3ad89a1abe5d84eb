"""
Turn bounded unfold sequences into pandas DataFrames, one batch at a time.

Needs the ``parquet`` extra (pandas and pyarrow).
"""

import logging
from typing import Iterator, List, Optional, Sequence, Tuple

import pandas as pd

from .core import unfold_count
from .errors import InvalidArgument
from .protocols import T, Transform

logger = logging.getLogger(__name__)

STEP_COLUMN = "step"
VALUE_COLUMN = "value"


def batch_steps(
    values: Iterator[T], batch_size: int
) -> Iterator[List[Tuple[int, T]]]:
    """
    Batch values into lists of ``(step, value)`` pairs.

    Args:
        values: Iterator of unfold values
        batch_size: Number of values per batch

    Yields:
        Lists of at most ``batch_size`` pairs, step counted from zero
    """
    if batch_size <= 0:
        raise InvalidArgument("batch_size must be positive")

    batch: List[Tuple[int, T]] = []
    for step, value in enumerate(values):
        batch.append((step, value))
        if len(batch) >= batch_size:
            yield batch
            batch = []

    # Yield remaining values
    if batch:
        yield batch


def _frame_columns(columns: Optional[Sequence[str]]) -> List[str]:
    return [STEP_COLUMN] + (list(columns) if columns else [VALUE_COLUMN])


def _to_frame(batch: List[Tuple[int, T]], columns: Optional[Sequence[str]]) -> pd.DataFrame:
    if not columns:
        rows = [(step, value) for step, value in batch]
    else:
        rows = []
        for step, value in batch:
            if len(value) != len(columns):
                raise InvalidArgument(
                    f"value at step {step} has {len(value)} fields, expected {len(columns)}"
                )
            rows.append((step, *value))
    return pd.DataFrame(rows, columns=_frame_columns(columns))


def unfold_frames(
    func: Transform,
    init: T,
    count: int,
    batch_size: int = 1000,
    columns: Optional[Sequence[str]] = None,
) -> Iterator[pd.DataFrame]:
    """
    Generate DataFrames holding the first ``count`` values of an unfold.

    Only one batch is materialized at a time.

    Args:
        func: Unary transform
        init: First value
        count: Total number of values to produce
        batch_size: Rows per DataFrame
        columns: Column names to unpack tuple values into; scalar values
            go to a single ``value`` column when omitted

    Yields:
        DataFrames with a ``step`` column followed by the value column(s)
    """
    for batch_num, batch in enumerate(batch_steps(unfold_count(func, init, count), batch_size), 1):
        df = _to_frame(batch, columns)
        logger.debug(f"Created DataFrame batch {batch_num} with {len(df)} rows")
        yield df


def unfold_dataframe(
    func: Transform,
    init: T,
    count: int,
    batch_size: int = 1000,
    columns: Optional[Sequence[str]] = None,
) -> pd.DataFrame:
    """Collect ``unfold_frames`` into a single DataFrame."""
    frames = list(unfold_frames(func, init, count, batch_size, columns))
    if not frames:
        return pd.DataFrame(columns=_frame_columns(columns))
    return pd.concat(frames, ignore_index=True)
