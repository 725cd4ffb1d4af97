"""
Flat input and prediction records bound to dataset columns by position.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Literal, NamedTuple, TypeVar

import pandas as pd

ColumnKind = Literal["text", "float", "bool"]


class Column(NamedTuple):
    """Binds a dataset column (by position and name) to a record field."""

    position: int
    name: str
    field: str
    kind: ColumnKind


@dataclass(slots=True)
class GitHubIssue:
    """One GitHub issue as read from the issue datasets."""

    COLUMNS: ClassVar[tuple[Column, ...]] = (
        Column(0, "ID", "id", "text"),
        Column(1, "Area", "area", "text"),
        Column(2, "Title", "title", "text"),
        Column(3, "Description", "description", "text"),
    )

    id: str = ""
    area: str = ""
    title: str = ""
    description: str = ""


@dataclass(slots=True)
class IssuePrediction:
    area: str
    scores: dict[str, float] = field(default_factory=dict)


@dataclass(slots=True)
class SentimentData:
    """A short text with its (optional) positive/negative label."""

    COLUMNS: ClassVar[tuple[Column, ...]] = (
        Column(0, "SentimentText", "sentiment_text", "text"),
        Column(1, "Label", "sentiment", "bool"),
    )

    sentiment_text: str = ""
    sentiment: bool = False


@dataclass(slots=True)
class SentimentPrediction:
    sentiment_text: str
    prediction: bool
    probability: float
    score: float

    @property
    def label(self) -> str:
        return "Positive" if self.prediction else "Negative"


@dataclass(slots=True)
class TaxiTrip:
    """A single taxi trip; ``fare_amount`` is the regression target."""

    COLUMNS: ClassVar[tuple[Column, ...]] = (
        Column(0, "VendorId", "vendor_id", "text"),
        Column(1, "RateCode", "rate_code", "text"),
        Column(2, "PassengerCount", "passenger_count", "float"),
        Column(3, "TripTime", "trip_time", "float"),
        Column(4, "TripDistance", "trip_distance", "float"),
        Column(5, "PaymentType", "payment_type", "text"),
        Column(6, "FareAmount", "fare_amount", "float"),
    )

    vendor_id: str = ""
    rate_code: str = ""
    passenger_count: float = 0.0
    trip_time: float = 0.0
    trip_distance: float = 0.0
    payment_type: str = ""
    fare_amount: float = 0.0


@dataclass(slots=True)
class TaxiTripFarePrediction:
    fare_amount: float


InputRecord = GitHubIssue | SentimentData | TaxiTrip
RecordT = TypeVar("RecordT", GitHubIssue, SentimentData, TaxiTrip)


def column_names(record_type: type[InputRecord]) -> list[str]:
    """Return the dataset column names of a record type in positional order."""

    return [column.name for column in sorted(record_type.COLUMNS, key=lambda c: c.position)]


def records_to_frame(
    records: Iterable[InputRecord], record_type: type[InputRecord]
) -> pd.DataFrame:
    """
    Build a DataFrame whose columns carry the dataset names of ``record_type``.
    """

    rows: list[dict[str, Any]] = []
    for record in records:
        if not isinstance(record, record_type):
            raise TypeError(
                f"Expected {record_type.__name__}, got {type(record).__name__}."
            )
        rows.append({column.name: getattr(record, column.field) for column in record_type.COLUMNS})
    return pd.DataFrame(rows, columns=column_names(record_type))


def frame_to_records(frame: pd.DataFrame, record_type: type[RecordT]) -> list[RecordT]:
    """Convert a DataFrame with dataset column names back into records."""

    valid_fields = {f.name for f in fields(record_type)}
    records: list[RecordT] = []
    for row in frame.to_dict(orient="records"):
        kwargs = {
            column.field: row[column.name]
            for column in record_type.COLUMNS
            if column.name in row and column.field in valid_fields
        }
        records.append(record_type(**kwargs))
    return records


__all__ = [
    "Column",
    "ColumnKind",
    "GitHubIssue",
    "InputRecord",
    "IssuePrediction",
    "SentimentData",
    "SentimentPrediction",
    "TaxiTrip",
    "TaxiTripFarePrediction",
    "column_names",
    "frame_to_records",
    "records_to_frame",
]
