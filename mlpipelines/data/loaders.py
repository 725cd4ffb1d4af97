"""
Delimited text dataset loading and train/test splitting.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import NamedTuple

import pandas as pd
from sklearn.model_selection import train_test_split

from ..exceptions import DatasetError
from .records import Column, InputRecord, column_names

LOGGER = logging.getLogger(__name__)

DatasetPath = Path | str

_TRUE_VALUES = {"1", "true", "positive", "yes"}
_FALSE_VALUES = {"0", "false", "negative", "no"}


class TrainTestData(NamedTuple):
    """Train and test partitions of a single dataset."""

    train: pd.DataFrame
    test: pd.DataFrame


def load_frame(
    path: DatasetPath,
    record_type: type[InputRecord],
    *,
    has_header: bool = True,
    separator: str = "\t",
) -> pd.DataFrame:
    """
    Load a delimited text file and bind its columns by position to ``record_type``.

    Header names in the file are ignored; the record's column names are applied
    instead. Extra trailing columns are dropped.
    """

    path = Path(path)
    if not path.exists():
        raise DatasetError(f"Dataset file not found: {path}", context={"path": str(path)})

    LOGGER.info("Loading %s records from %s", record_type.__name__, path)
    try:
        raw = pd.read_csv(
            path,
            sep=separator,
            header=0 if has_header else None,
            dtype=str,
            keep_default_na=False,
            quoting=csv.QUOTE_NONE if separator == "\t" else csv.QUOTE_MINIMAL,
            encoding="utf-8",
        )
    except pd.errors.EmptyDataError as exc:
        raise DatasetError(f"Dataset is empty: {path}", context={"path": str(path)}) from exc

    expected = len(record_type.COLUMNS)
    if raw.shape[1] < expected:
        raise DatasetError(
            f"{path} has {raw.shape[1]} columns, {record_type.__name__} needs {expected}.",
            context={"path": str(path), "columns": raw.shape[1]},
        )
    if raw.empty:
        raise DatasetError(f"Dataset is empty: {path}", context={"path": str(path)})

    frame = raw.iloc[:, :expected].copy()
    frame.columns = column_names(record_type)
    for column in record_type.COLUMNS:
        frame[column.name] = _coerce(frame[column.name], column, path)

    LOGGER.info("Loaded %d rows from %s", len(frame), path)
    return frame


def train_test_split_frame(
    frame: pd.DataFrame, test_fraction: float = 0.2, seed: int | None = 0
) -> TrainTestData:
    """
    Randomly split ``frame`` into train and test partitions.

    The split is not stratified.
    """

    if not 0.0 < test_fraction < 1.0:
        raise ValueError("test_fraction must be within (0.0, 1.0).")

    if len(frame) < 2:
        raise DatasetError(
            "At least two rows are required to split a dataset.",
            context={"rows": len(frame)},
        )

    train, test = train_test_split(frame, test_size=test_fraction, random_state=seed)
    return TrainTestData(train=train.reset_index(drop=True), test=test.reset_index(drop=True))


def _coerce(series: pd.Series, column: Column, path: Path) -> pd.Series:
    if column.kind == "text":
        return series.fillna("").astype(str)

    stripped = series.fillna("").astype(str).str.strip()
    if column.kind == "float":
        values = pd.to_numeric(stripped, errors="coerce")
        bad = values.isna() & stripped.ne("")
        if bad.any():
            raise DatasetError(
                f"Column {column.name} in {path} has non-numeric values.",
                context={"path": str(path), "rows": bad[bad].index.tolist()[:10]},
            )
        return values.fillna(0.0).astype(float)

    normalized = stripped.str.lower()
    unknown = ~normalized.isin(_TRUE_VALUES | _FALSE_VALUES)
    if unknown.any():
        raise DatasetError(
            f"Column {column.name} in {path} has values that are not booleans.",
            context={"path": str(path), "values": sorted(set(stripped[unknown]))[:10]},
        )
    return normalized.isin(_TRUE_VALUES)


__all__ = ["DatasetPath", "TrainTestData", "load_frame", "train_test_split_frame"]
