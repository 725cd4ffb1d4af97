"""
Binary sentiment classifier for short texts.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
import pandas as pd
from sklearn.compose import ColumnTransformer
from sklearn.linear_model import LogisticRegression
from sklearn.pipeline import Pipeline

from ..config import SentimentTrainer
from ..data.records import SentimentData, SentimentPrediction
from ..exceptions import DatasetError
from .base import TrainedModel
from .featurizers import make_text_featurizer
from .metrics import BinaryMetrics, binary_metrics

LOGGER = logging.getLogger(__name__)

_SOLVERS: dict[str, str] = {"sdca": "saga", "lbfgs": "lbfgs"}


class SentimentClassifier(TrainedModel[SentimentData, SentimentPrediction]):
    """Logistic regression over featurized ``SentimentText``."""

    kind = "sentiment"
    record_type = SentimentData
    label_column = "Label"

    def __init__(
        self,
        pipeline: Pipeline | None = None,
        *,
        seed: int | None = 0,
        trainer: SentimentTrainer = "sdca",
        max_iter: int = 1000,
    ) -> None:
        if trainer not in _SOLVERS:
            raise ValueError(f"Unknown trainer {trainer!r}; expected one of {sorted(_SOLVERS)}.")
        super().__init__(pipeline, seed=seed)
        self.trainer = trainer
        self.max_iter = max_iter

    def build_pipeline(self) -> Pipeline:
        features = ColumnTransformer(
            transformers=[("text", make_text_featurizer(), "SentimentText")],
            remainder="drop",
        )
        classifier = LogisticRegression(
            solver=_SOLVERS[self.trainer],
            max_iter=self.max_iter,
            random_state=self.seed,
        )
        return Pipeline(steps=[("features", features), ("classifier", classifier)])

    def fit(self, frame: pd.DataFrame) -> SentimentClassifier:
        if self.label_column in frame.columns and frame[self.label_column].nunique() < 2:
            raise DatasetError(
                "Sentiment training data must contain both positive and negative rows.",
                context={"rows": len(frame)},
            )
        super().fit(frame)
        return self

    def evaluate(self, frame: pd.DataFrame) -> BinaryMetrics:
        pipeline = self._ensure_trained()
        self._require_columns(frame, [*self.input_columns, self.label_column])
        if frame.empty:
            raise DatasetError("Cannot evaluate on an empty dataset.")

        predictions = self._to_predictions(pipeline, frame)
        metrics = binary_metrics(
            self._labels(frame).to_numpy(),
            [prediction.prediction for prediction in predictions],
            [prediction.probability for prediction in predictions],
        )
        LOGGER.info(
            "Sentiment classifier accuracy %.3f, F1 %.3f on %d rows.",
            metrics.accuracy,
            metrics.f1_score,
            len(frame),
        )
        return metrics

    def get_config(self) -> dict[str, Any]:
        return {"seed": self.seed, "trainer": self.trainer, "max_iter": self.max_iter}

    def _labels(self, frame: pd.DataFrame) -> pd.Series:
        return frame[self.label_column].astype(bool)

    def _to_predictions(
        self, pipeline: Pipeline, frame: pd.DataFrame
    ) -> list[SentimentPrediction]:
        features = self._features(frame)
        positive = list(pipeline.classes_).index(True)
        probabilities = pipeline.predict_proba(features)[:, positive]
        scores = np.asarray(pipeline.decision_function(features), dtype=np.float64)
        texts = frame["SentimentText"].astype(str).tolist()
        return [
            SentimentPrediction(
                sentiment_text=text,
                prediction=bool(probability >= 0.5),
                probability=float(probability),
                score=float(score),
            )
            for text, probability, score in zip(texts, probabilities, scores)
        ]


__all__ = ["SentimentClassifier"]
