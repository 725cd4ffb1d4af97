"""
Unit tests for the taxi fare regressor.
"""

from __future__ import annotations

import pytest

from mlpipelines.data import TaxiTrip, records_to_frame
from mlpipelines.ml import TaxiFareRegressor
from tests.factories import TaxiTripFactory


class TestTaxiFareRegressor:
    def test_evaluate_explains_fares(self, trained_taxi_regressor: TaxiFareRegressor) -> None:
        frame = records_to_frame(TaxiTripFactory.build_batch(40), TaxiTrip)

        metrics = trained_taxi_regressor.evaluate(frame)

        assert metrics.r_squared > 0.8
        assert metrics.root_mean_squared_error == pytest.approx(
            metrics.mean_squared_error**0.5
        )

    def test_longer_trips_cost_more(self, trained_taxi_regressor: TaxiFareRegressor) -> None:
        short, long = (
            TaxiTripFactory.build(
                vendor_id="VTS", rate_code="1", payment_type="CRD", trip_distance=distance
            )
            for distance in (1.0, 9.0)
        )

        assert (
            trained_taxi_regressor.predict(long).fare_amount
            > trained_taxi_regressor.predict(short).fare_amount
        )

    def test_unknown_category_is_ignored(
        self, trained_taxi_regressor: TaxiFareRegressor
    ) -> None:
        trip = TaxiTripFactory.build(vendor_id="NEW", payment_type="UNK")

        prediction = trained_taxi_regressor.predict(trip)

        assert prediction.fare_amount > 0

    def test_trip_time_is_not_a_feature(self, trained_taxi_regressor: TaxiFareRegressor) -> None:
        trip = TaxiTripFactory.build(trip_time=60.0)
        slower = TaxiTripFactory.build(
            vendor_id=trip.vendor_id,
            rate_code=trip.rate_code,
            passenger_count=trip.passenger_count,
            trip_distance=trip.trip_distance,
            payment_type=trip.payment_type,
            trip_time=6000.0,
        )

        assert (
            trained_taxi_regressor.predict(trip).fare_amount
            == trained_taxi_regressor.predict(slower).fare_amount
        )

    def test_evaluate_casts_categories_like_predict(
        self, trained_taxi_regressor: TaxiFareRegressor
    ) -> None:
        trips = TaxiTripFactory.build_batch(20)
        frame = records_to_frame(trips, TaxiTrip)
        numeric_codes = frame.assign(RateCode=frame["RateCode"].astype(int))

        metrics = trained_taxi_regressor.evaluate(frame)

        assert trained_taxi_regressor.evaluate(numeric_codes) == metrics
        assert [p.fare_amount for p in trained_taxi_regressor.predict_frame(numeric_codes)] == [
            p.fare_amount for p in trained_taxi_regressor.predict_batch(trips)
        ]
