"""
Console report formatting for the demos.

Every function returns text; printing is left to the caller.
"""

from __future__ import annotations

import math

from ..data.records import IssuePrediction, SentimentPrediction, TaxiTripFarePrediction
from ..ml.metrics import BinaryMetrics, MulticlassMetrics, RegressionMetrics

RULE_WIDTH = 100


def banner(title: str) -> str:
    return f"=============== {title} ==============="


def _number(value: float, digits: int = 3) -> str:
    if math.isnan(value):
        return "n/a"
    return f"{value:.{digits}f}"


def _percent(value: float) -> str:
    if math.isnan(value):
        return "n/a"
    return f"{value:.2%}"


def _boxed(title: str, rows: list[tuple[str, str]]) -> str:
    label_width = max(len(label) for label, _ in rows) + 1
    lines = [
        "*" * RULE_WIDTH,
        f"*       {title}",
        "*" + "-" * (RULE_WIDTH - 1),
    ]
    lines.extend(f"*       {label + ':':<{label_width}} {value}" for label, value in rows)
    lines.append("*" * RULE_WIDTH)
    return "\n".join(lines)


def format_multiclass_metrics(metrics: MulticlassMetrics, dataset: str = "Test Data") -> str:
    return _boxed(
        f"Metrics for Multi-class Classification model - {dataset}",
        [
            ("MicroAccuracy", _number(metrics.micro_accuracy)),
            ("MacroAccuracy", _number(metrics.macro_accuracy)),
            ("LogLoss", _number(metrics.log_loss)),
            ("LogLossReduction", _number(metrics.log_loss_reduction)),
        ],
    )


def format_binary_metrics(metrics: BinaryMetrics) -> str:
    lines = [
        "Model quality metrics evaluation",
        "--------------------------------",
        f"Accuracy: {_percent(metrics.accuracy)}",
        f"Auc: {_percent(metrics.area_under_roc_curve)}",
        f"F1Score: {_percent(metrics.f1_score)}",
    ]
    return "\n".join(lines)


def format_regression_metrics(metrics: RegressionMetrics) -> str:
    return _boxed(
        "Model quality metrics evaluation",
        [
            ("RSquared Score", _number(metrics.r_squared, 2)),
            ("Root Mean Squared Error", _number(metrics.root_mean_squared_error, 2)),
            ("Mean Absolute Error", _number(metrics.mean_absolute_error, 2)),
        ],
    )


def format_issue_prediction(prediction: IssuePrediction, heading: str = "Single Prediction") -> str:
    return banner(f"{heading} - Result: {prediction.area}")


def format_sentiment_prediction(prediction: SentimentPrediction) -> str:
    return (
        f"Sentiment: {prediction.sentiment_text} | Prediction: {prediction.label} "
        f"| Probability: {prediction.probability:.4f}"
    )


def format_fare_prediction(
    prediction: TaxiTripFarePrediction, actual: float | None = None
) -> str:
    line = f"Predicted fare: {prediction.fare_amount:.4f}"
    if actual is not None:
        line += f", actual fare: {actual}"
    rule = "*" * 70
    return "\n".join([rule, line, rule])


__all__ = [
    "banner",
    "format_binary_metrics",
    "format_fare_prediction",
    "format_issue_prediction",
    "format_multiclass_metrics",
    "format_regression_metrics",
    "format_sentiment_prediction",
]
