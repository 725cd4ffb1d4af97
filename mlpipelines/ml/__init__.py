"""
Machine learning pipelines for the issue, sentiment, and taxi fare demos.
"""

from .base import PredictionEngine, TrainedModel
from .featurizers import make_text_featurizer, normalize_text
from .issues import IssueClassifier
from .metrics import (
    BinaryMetrics,
    MulticlassMetrics,
    RegressionMetrics,
    binary_metrics,
    multiclass_metrics,
    regression_metrics,
)
from .sentiment import SentimentClassifier
from .taxi import TaxiFareRegressor

__all__ = [
    "BinaryMetrics",
    "IssueClassifier",
    "MulticlassMetrics",
    "PredictionEngine",
    "RegressionMetrics",
    "SentimentClassifier",
    "TaxiFareRegressor",
    "TrainedModel",
    "binary_metrics",
    "make_text_featurizer",
    "multiclass_metrics",
    "normalize_text",
    "regression_metrics",
]
