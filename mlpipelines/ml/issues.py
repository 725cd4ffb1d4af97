"""
Multiclass GitHub issue area classifier.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
import pandas as pd
from sklearn.compose import ColumnTransformer
from sklearn.linear_model import LogisticRegression
from sklearn.pipeline import Pipeline

from ..data.records import GitHubIssue, IssuePrediction
from ..exceptions import DatasetError
from .base import TrainedModel
from .featurizers import make_text_featurizer
from .metrics import MulticlassMetrics, multiclass_metrics

LOGGER = logging.getLogger(__name__)


class IssueClassifier(TrainedModel[GitHubIssue, IssuePrediction]):
    """
    Predicts the ``Area`` of a GitHub issue from its title and description.

    Title and description are featurized separately and concatenated before a
    multinomial maximum-entropy (logistic regression) classifier.
    """

    kind = "issues"
    record_type = GitHubIssue
    label_column = "Area"

    def __init__(
        self,
        pipeline: Pipeline | None = None,
        *,
        seed: int | None = 0,
        max_iter: int = 1000,
        max_features: int | None = None,
    ) -> None:
        super().__init__(pipeline, seed=seed)
        self.max_iter = max_iter
        self.max_features = max_features

    @property
    def classes(self) -> list[str]:
        return [str(label) for label in self._ensure_trained().classes_]

    def build_pipeline(self) -> Pipeline:
        features = ColumnTransformer(
            transformers=[
                ("title", make_text_featurizer(self.max_features), "Title"),
                ("description", make_text_featurizer(self.max_features), "Description"),
            ],
            remainder="drop",
        )
        classifier = LogisticRegression(
            solver="saga",
            max_iter=self.max_iter,
            random_state=self.seed,
        )
        return Pipeline(steps=[("features", features), ("classifier", classifier)])

    def evaluate(self, frame: pd.DataFrame) -> MulticlassMetrics:
        """
        Score the model on labelled issues.

        Issues whose area never occurred in training cannot be scored and are
        left out.
        """

        pipeline = self._ensure_trained()
        self._require_columns(frame, [*self.input_columns, self.label_column])

        labels = frame[self.label_column].astype(str)
        known = labels.isin(self.classes)
        if not known.all():
            unseen = sorted(set(labels[~known]))
            LOGGER.warning(
                "Skipping %d test rows with areas unseen in training: %s",
                int((~known).sum()),
                ", ".join(unseen[:10]),
            )
        if not known.any():
            raise DatasetError(
                "No evaluation rows have an area known to the model.",
                context={"rows": len(frame)},
            )

        scored = frame.loc[known]
        probabilities = pipeline.predict_proba(self._features(scored))
        metrics = multiclass_metrics(labels[known].tolist(), probabilities, self.classes)
        LOGGER.info(
            "Issue classifier micro accuracy %.3f, macro accuracy %.3f on %d rows.",
            metrics.micro_accuracy,
            metrics.macro_accuracy,
            len(scored),
        )
        return metrics

    def get_config(self) -> dict[str, Any]:
        return {"seed": self.seed, "max_iter": self.max_iter, "max_features": self.max_features}

    def _labels(self, frame: pd.DataFrame) -> pd.Series:
        return frame[self.label_column].astype(str)

    def _to_predictions(self, pipeline: Pipeline, frame: pd.DataFrame) -> list[IssuePrediction]:
        probabilities = pipeline.predict_proba(self._features(frame))
        classes = [str(label) for label in pipeline.classes_]
        best = np.argmax(probabilities, axis=1)
        return [
            IssuePrediction(
                area=classes[index],
                scores={label: float(score) for label, score in zip(classes, row)},
            )
            for index, row in zip(best, probabilities)
        ]


__all__ = ["IssueClassifier"]
