"""
Gradient boosted regression of taxi fares.
"""

from __future__ import annotations

import logging
from typing import Any

import pandas as pd
from sklearn.compose import ColumnTransformer
from sklearn.ensemble import GradientBoostingRegressor
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import OneHotEncoder

from ..data.records import TaxiTrip, TaxiTripFarePrediction
from ..exceptions import DatasetError
from .base import TrainedModel
from .metrics import RegressionMetrics, regression_metrics

LOGGER = logging.getLogger(__name__)

CATEGORICAL_COLUMNS = ("VendorId", "RateCode", "PaymentType")
NUMERIC_COLUMNS = ("PassengerCount", "TripDistance")


class TaxiFareRegressor(TrainedModel[TaxiTrip, TaxiTripFarePrediction]):
    """
    Predicts ``FareAmount`` from vendor, rate code, payment type, passenger
    count and trip distance. Trip time is read but not used as a feature.
    """

    kind = "taxi"
    record_type = TaxiTrip
    label_column = "FareAmount"

    def __init__(
        self,
        pipeline: Pipeline | None = None,
        *,
        seed: int | None = 0,
        n_estimators: int = 100,
        max_leaf_nodes: int = 20,
        min_samples_leaf: int = 10,
        learning_rate: float = 0.2,
    ) -> None:
        super().__init__(pipeline, seed=seed)
        self.n_estimators = n_estimators
        self.max_leaf_nodes = max_leaf_nodes
        self.min_samples_leaf = min_samples_leaf
        self.learning_rate = learning_rate

    def build_pipeline(self) -> Pipeline:
        features = ColumnTransformer(
            transformers=[
                (
                    "categorical",
                    OneHotEncoder(handle_unknown="ignore"),
                    list(CATEGORICAL_COLUMNS),
                ),
                ("numeric", "passthrough", list(NUMERIC_COLUMNS)),
            ],
            remainder="drop",
        )
        regressor = GradientBoostingRegressor(
            n_estimators=self.n_estimators,
            max_leaf_nodes=self.max_leaf_nodes,
            min_samples_leaf=self.min_samples_leaf,
            learning_rate=self.learning_rate,
            random_state=self.seed,
        )
        return Pipeline(steps=[("features", features), ("regressor", regressor)])

    def evaluate(self, frame: pd.DataFrame) -> RegressionMetrics:
        pipeline = self._ensure_trained()
        self._require_columns(frame, [*self.input_columns, self.label_column])
        if frame.empty:
            raise DatasetError("Cannot evaluate on an empty dataset.")

        predicted = pipeline.predict(self._features(frame))
        metrics = regression_metrics(self._labels(frame).to_numpy(), predicted)
        LOGGER.info(
            "Taxi fare regressor R2 %.3f, RMSE %.3f on %d rows.",
            metrics.r_squared,
            metrics.root_mean_squared_error,
            len(frame),
        )
        return metrics

    def get_config(self) -> dict[str, Any]:
        return {
            "seed": self.seed,
            "n_estimators": self.n_estimators,
            "max_leaf_nodes": self.max_leaf_nodes,
            "min_samples_leaf": self.min_samples_leaf,
            "learning_rate": self.learning_rate,
        }

    def _labels(self, frame: pd.DataFrame) -> pd.Series:
        return frame[self.label_column].astype(float)

    def _to_predictions(
        self, pipeline: Pipeline, frame: pd.DataFrame
    ) -> list[TaxiTripFarePrediction]:
        return [
            TaxiTripFarePrediction(fare_amount=float(value))
            for value in pipeline.predict(self._features(frame))
        ]

    def _features(self, frame: pd.DataFrame) -> pd.DataFrame:
        """Select the input columns with categories as strings and numbers as floats."""

        features = frame[self.input_columns].copy()
        for column in CATEGORICAL_COLUMNS:
            features[column] = features[column].astype(str)
        for column in NUMERIC_COLUMNS:
            features[column] = features[column].astype(float)
        return features


__all__ = ["CATEGORICAL_COLUMNS", "NUMERIC_COLUMNS", "TaxiFareRegressor"]
