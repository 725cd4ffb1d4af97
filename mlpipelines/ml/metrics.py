"""
Evaluation metric records for the classification and regression demos.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import asdict, dataclass, field
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from sklearn import metrics as skm

LOGGER = logging.getLogger(__name__)

_EPSILON = 1e-15


@dataclass(frozen=True, slots=True)
class MulticlassMetrics:
    micro_accuracy: float
    macro_accuracy: float
    log_loss: float
    log_loss_reduction: float
    labels: tuple[str, ...]
    per_class_log_loss: dict[str, float] = field(default_factory=dict)
    confusion_matrix: tuple[tuple[int, ...], ...] = ()

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class BinaryMetrics:
    accuracy: float
    area_under_roc_curve: float
    f1_score: float
    positive_precision: float
    positive_recall: float
    negative_precision: float
    negative_recall: float
    log_loss: float
    area_under_precision_recall_curve: float

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class RegressionMetrics:
    mean_absolute_error: float
    mean_squared_error: float
    root_mean_squared_error: float
    r_squared: float

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


def multiclass_metrics(
    y_true: Sequence[Any],
    probabilities: NDArray[np.float64],
    classes: Sequence[Any],
) -> MulticlassMetrics:
    """
    Compute multiclass metrics from true labels and a probability matrix.

    ``probabilities`` columns follow ``classes``. Every label in ``y_true`` must
    be one of ``classes``. Macro accuracy is the mean per-class recall over the
    classes present in ``y_true``; log-loss reduction is measured against the
    label prior of ``y_true``.
    """

    truth = np.asarray([str(label) for label in y_true])
    class_names = [str(label) for label in classes]
    if truth.size == 0:
        raise ValueError("Cannot evaluate an empty set of labels.")

    index = {name: position for position, name in enumerate(class_names)}
    true_idx = np.asarray([index[label] for label in truth])
    probs = np.clip(np.asarray(probabilities, dtype=np.float64), _EPSILON, 1.0)
    predicted = np.asarray(class_names)[np.argmax(probs, axis=1)]

    row_losses = -np.log(probs[np.arange(truth.size), true_idx])
    log_loss = float(row_losses.mean())

    priors = np.bincount(true_idx, minlength=len(class_names)) / truth.size
    present = priors > 0
    prior_log_loss = float(-(priors[present] * np.log(priors[present])).sum())
    if prior_log_loss > 0:
        reduction = (prior_log_loss - log_loss) / prior_log_loss
    else:
        reduction = float("nan")

    per_class = {
        name: float(row_losses[true_idx == position].mean())
        for position, name in enumerate(class_names)
        if present[position]
    }
    matrix = skm.confusion_matrix(truth, predicted, labels=class_names)

    return MulticlassMetrics(
        micro_accuracy=float(skm.accuracy_score(truth, predicted)),
        macro_accuracy=float(skm.balanced_accuracy_score(truth, predicted)),
        log_loss=log_loss,
        log_loss_reduction=float(reduction),
        labels=tuple(class_names),
        per_class_log_loss=per_class,
        confusion_matrix=tuple(tuple(int(value) for value in row) for row in matrix),
    )


def binary_metrics(
    y_true: ArrayLike,
    y_pred: ArrayLike,
    probabilities: ArrayLike,
) -> BinaryMetrics:
    """Compute binary metrics; ``probabilities`` are for the positive class."""

    truth = np.asarray(y_true, dtype=bool)
    predicted = np.asarray(y_pred, dtype=bool)
    probs = np.asarray(probabilities, dtype=np.float64)
    if truth.size == 0:
        raise ValueError("Cannot evaluate an empty set of labels.")

    if np.unique(truth).size < 2:
        LOGGER.warning(
            "Evaluation set contains a single class; AUC metrics are undefined."
        )
        auc = float("nan")
        auprc = float("nan")
    else:
        auc = float(skm.roc_auc_score(truth, probs))
        auprc = float(skm.average_precision_score(truth, probs))

    return BinaryMetrics(
        accuracy=float(skm.accuracy_score(truth, predicted)),
        area_under_roc_curve=auc,
        f1_score=float(skm.f1_score(truth, predicted, zero_division=0)),
        positive_precision=float(
            skm.precision_score(truth, predicted, pos_label=True, zero_division=0)
        ),
        positive_recall=float(
            skm.recall_score(truth, predicted, pos_label=True, zero_division=0)
        ),
        negative_precision=float(
            skm.precision_score(truth, predicted, pos_label=False, zero_division=0)
        ),
        negative_recall=float(
            skm.recall_score(truth, predicted, pos_label=False, zero_division=0)
        ),
        log_loss=float(skm.log_loss(truth, probs, labels=[False, True])),
        area_under_precision_recall_curve=auprc,
    )


def regression_metrics(y_true: ArrayLike, y_pred: ArrayLike) -> RegressionMetrics:
    truth = np.asarray(y_true, dtype=np.float64)
    predicted = np.asarray(y_pred, dtype=np.float64)
    if truth.size == 0:
        raise ValueError("Cannot evaluate an empty set of labels.")

    mse = float(skm.mean_squared_error(truth, predicted))
    if truth.size < 2:
        r_squared = float("nan")
    else:
        r_squared = float(skm.r2_score(truth, predicted))
    return RegressionMetrics(
        mean_absolute_error=float(skm.mean_absolute_error(truth, predicted)),
        mean_squared_error=mse,
        root_mean_squared_error=math.sqrt(mse),
        r_squared=r_squared,
    )


__all__ = [
    "BinaryMetrics",
    "MulticlassMetrics",
    "RegressionMetrics",
    "binary_metrics",
    "multiclass_metrics",
    "regression_metrics",
]
