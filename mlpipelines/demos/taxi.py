"""
Taxi fare regression demo: train, evaluate, save, reload, predict.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from ..config import Settings
from ..data import TaxiTrip, TaxiTripFarePrediction, load_frame
from ..ml import RegressionMetrics, TaxiFareRegressor
from .reporting import format_fare_prediction, format_regression_metrics

LOGGER = logging.getLogger(__name__)

SAMPLE_TRIP = TaxiTrip(
    vendor_id="VTS",
    rate_code="1",
    passenger_count=1.0,
    trip_time=1140.0,
    trip_distance=3.75,
    payment_type="CRD",
    fare_amount=0.0,
)
SAMPLE_ACTUAL_FARE = 15.5


class TaxiDemoResult(NamedTuple):
    metrics: RegressionMetrics
    prediction: TaxiTripFarePrediction


def run(settings: Settings) -> TaxiDemoResult:
    cfg = settings.taxi

    training_frame = load_frame(
        cfg.train_path, TaxiTrip, has_header=cfg.has_header, separator=cfg.separator
    )
    regressor = TaxiFareRegressor(
        seed=settings.app.seed,
        n_estimators=cfg.n_estimators,
        max_leaf_nodes=cfg.max_leaf_nodes,
        min_samples_leaf=cfg.min_samples_leaf,
        learning_rate=cfg.learning_rate,
    )
    regressor.fit(training_frame)

    test_frame = load_frame(
        cfg.test_path, TaxiTrip, has_header=cfg.has_header, separator=cfg.separator
    )
    metrics = regressor.evaluate(test_frame)
    print()
    print(format_regression_metrics(metrics))

    model_path = regressor.save(cfg.model_path)
    engine = TaxiFareRegressor.load(model_path).create_prediction_engine()
    prediction = engine.predict(SAMPLE_TRIP)
    print(format_fare_prediction(prediction, actual=SAMPLE_ACTUAL_FARE))
    LOGGER.info("Predicted fare %.4f for the sample trip.", prediction.fare_amount)

    return TaxiDemoResult(metrics, prediction)


__all__ = ["SAMPLE_ACTUAL_FARE", "SAMPLE_TRIP", "TaxiDemoResult", "run"]
