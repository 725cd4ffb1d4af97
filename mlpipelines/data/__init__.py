"""
Dataset records and loaders shared by the demos.
"""

from .loaders import DatasetPath, TrainTestData, load_frame, train_test_split_frame
from .records import (
    Column,
    GitHubIssue,
    IssuePrediction,
    SentimentData,
    SentimentPrediction,
    TaxiTrip,
    TaxiTripFarePrediction,
    column_names,
    frame_to_records,
    records_to_frame,
)

__all__ = [
    "Column",
    "DatasetPath",
    "GitHubIssue",
    "IssuePrediction",
    "SentimentData",
    "SentimentPrediction",
    "TaxiTrip",
    "TaxiTripFarePrediction",
    "TrainTestData",
    "column_names",
    "frame_to_records",
    "load_frame",
    "records_to_frame",
    "train_test_split_frame",
]
