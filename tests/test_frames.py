"""Tests for frames module."""

import pytest

from unfold.errors import InvalidArgument
from unfold.frames import batch_steps, unfold_dataframe, unfold_frames


def test_batch_steps():
    """Test batching values with their step numbers."""
    batches = list(batch_steps(iter("abcde"), 2))
    assert batches == [[(0, "a"), (1, "b")], [(2, "c"), (3, "d")], [(4, "e")]]


def test_batch_steps_invalid_size():
    """Test that a non-positive batch size is rejected."""
    with pytest.raises(InvalidArgument, match="batch_size"):
        list(batch_steps(iter([1, 2]), 0))


def test_unfold_frames_batches():
    """Test that frames hold at most batch_size rows each."""
    frames = list(unfold_frames(lambda x: x + 1, 0, 25, batch_size=10))

    assert [len(df) for df in frames] == [10, 10, 5]
    assert list(frames[0].columns) == ["step", "value"]
    assert frames[2]["step"].tolist() == [20, 21, 22, 23, 24]
    assert frames[2]["value"].tolist() == [20, 21, 22, 23, 24]


def test_unfold_dataframe_with_columns():
    """Test unpacking tuple values into named columns."""
    df = unfold_dataframe(lambda ab: (ab[1], ab[0] + ab[1]), (0, 1), 8, columns=["a", "b"])

    assert list(df.columns) == ["step", "a", "b"]
    assert df["a"].tolist() == [0, 1, 1, 2, 3, 5, 8, 13]
    assert df["step"].tolist() == list(range(8))


def test_unfold_dataframe_empty():
    """Test that count 0 gives an empty frame with the expected columns."""
    df = unfold_dataframe(lambda x: x + 1, 0, 0)

    assert df.empty
    assert list(df.columns) == ["step", "value"]


def test_unfold_frames_column_mismatch():
    """Test that tuple width must match the column names."""
    with pytest.raises(InvalidArgument, match="expected 3"):
        unfold_dataframe(lambda ab: (ab[1], ab[0] + ab[1]), (0, 1), 4, columns=["a", "b", "c"])
