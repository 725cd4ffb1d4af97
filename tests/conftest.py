"""
Shared pytest fixtures for settings, on-disk datasets, and trained models.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from mlpipelines.config import (
    AppSettings,
    EnglishIssueDatasetSettings,
    IssuesSettings,
    KoreanIssueDatasetSettings,
    LoggingSettings,
    SentimentSettings,
    Settings,
    TaxiSettings,
)
from mlpipelines.data import GitHubIssue, SentimentData, TaxiTrip, records_to_frame
from mlpipelines.ml import IssueClassifier, SentimentClassifier, TaxiFareRegressor
from tests.factories import (
    GitHubIssueFactory,
    KoreanIssueFactory,
    SentimentDataFactory,
    TaxiTripFactory,
    write_records,
)


@pytest.fixture
def issue_records() -> list[GitHubIssue]:
    return GitHubIssueFactory.build_batch(90)


@pytest.fixture
def sentiment_records() -> list[SentimentData]:
    return SentimentDataFactory.build_batch(120)


@pytest.fixture
def taxi_records() -> list[TaxiTrip]:
    return TaxiTripFactory.build_batch(200)


@pytest.fixture
def trained_issue_classifier(issue_records: list[GitHubIssue]) -> IssueClassifier:
    """Issue classifier fitted on synthetic issues."""

    classifier = IssueClassifier(seed=0, max_iter=500)
    return classifier.fit(records_to_frame(issue_records, GitHubIssue))


@pytest.fixture
def trained_sentiment_classifier(sentiment_records: list[SentimentData]) -> SentimentClassifier:
    classifier = SentimentClassifier(seed=0, max_iter=500)
    return classifier.fit(records_to_frame(sentiment_records, SentimentData))


@pytest.fixture
def trained_taxi_regressor(taxi_records: list[TaxiTrip]) -> TaxiFareRegressor:
    regressor = TaxiFareRegressor(seed=0, n_estimators=50)
    return regressor.fit(records_to_frame(taxi_records, TaxiTrip))


@pytest.fixture
def settings_override(tmp_path: Path) -> Settings:
    """Settings whose every path points inside ``tmp_path``."""

    data_dir = tmp_path / "Data"
    models_dir = tmp_path / "Models"
    return Settings(
        app=AppSettings(seed=0),
        logging=LoggingSettings(directory=tmp_path / "logs"),
        issues=IssuesSettings(
            english=EnglishIssueDatasetSettings(
                train_path=data_dir / "issues_train.csv",
                test_path=data_dir / "issues_test.tsv",
                model_path=models_dir / "issues_model.joblib",
                sample_title="database query crashes",
                sample_description="when I use the entity migration it fails",
            ),
            korean=KoreanIssueDatasetSettings(
                train_path=data_dir / "trainDataKo.csv",
                test_path=data_dir / "testDataKo.tsv",
                model_path=models_dir / "issues_model_ko.joblib",
                sample_title="제중당한약방",
                sample_description="한약방",
            ),
            max_iter=500,
        ),
        sentiment=SentimentSettings(
            data_path=tmp_path / "data" / "trainkorean.txt",
            test_path=tmp_path / "data" / "testData.tsv",
            model_path=models_dir / "sentiment_model.joblib",
            max_iter=500,
        ),
        taxi=TaxiSettings(
            train_path=data_dir / "taxi-fare-train.csv",
            test_path=data_dir / "taxi-fare-test.csv",
            model_path=models_dir / "taxi_model.joblib",
            n_estimators=50,
        ),
    )


@pytest.fixture
def demo_datasets(settings_override: Settings) -> Settings:
    """Write every demo dataset where ``settings_override`` expects it."""

    english = settings_override.issues.english
    write_records(english.train_path, GitHubIssueFactory.build_batch(90), GitHubIssue)
    write_records(english.test_path, GitHubIssueFactory.build_batch(30), GitHubIssue)

    korean = settings_override.issues.korean
    write_records(korean.train_path, KoreanIssueFactory.build_batch(60), GitHubIssue)
    write_records(korean.test_path, KoreanIssueFactory.build_batch(15), GitHubIssue)

    sentiment = settings_override.sentiment
    write_records(
        sentiment.data_path,
        SentimentDataFactory.build_batch(120),
        SentimentData,
        header=False,
    )
    write_records(sentiment.test_path, SentimentDataFactory.build_batch(24), SentimentData)

    taxi = settings_override.taxi
    write_records(taxi.train_path, TaxiTripFactory.build_batch(200), TaxiTrip, separator=",")
    write_records(taxi.test_path, TaxiTripFactory.build_batch(40), TaxiTrip, separator=",")
    return settings_override
