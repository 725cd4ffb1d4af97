"""
GitHub issue classification demo: train, evaluate, save, reload, predict.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NamedTuple

from ..config import IssueProfile, Settings
from ..data import GitHubIssue, IssuePrediction, load_frame
from ..ml import IssueClassifier, MulticlassMetrics
from .reporting import format_issue_prediction, format_multiclass_metrics

LOGGER = logging.getLogger(__name__)

TRAINED_SAMPLE = GitHubIssue(
    title="WebSockets communication is slow in my machine",
    description=(
        "The WebSockets communication used under the covers by SignalR looks like "
        "is going slow in my development machine.."
    ),
)


class IssueDemoResult(NamedTuple):
    trained_prediction: IssuePrediction
    metrics: MulticlassMetrics
    model_path: Path
    reloaded_prediction: IssuePrediction


def run_training(settings: Settings, profile: IssueProfile = "en") -> IssueDemoResult:
    """Run the full issue classification flow for one dataset profile."""

    issues_cfg = settings.issues
    dataset = issues_cfg.profile(profile)

    training_frame = load_frame(
        dataset.train_path,
        GitHubIssue,
        has_header=issues_cfg.has_header,
        separator=issues_cfg.separator,
    )
    classifier = IssueClassifier(seed=settings.app.seed, max_iter=issues_cfg.max_iter)
    classifier.fit(training_frame)

    engine = classifier.create_prediction_engine()
    trained_prediction = engine.predict(TRAINED_SAMPLE)
    print(format_issue_prediction(trained_prediction, "Single Prediction just-trained-model"))

    test_frame = load_frame(
        dataset.test_path,
        GitHubIssue,
        has_header=issues_cfg.has_header,
        separator=issues_cfg.separator,
    )
    metrics = classifier.evaluate(test_frame)
    print(format_multiclass_metrics(metrics))

    model_path = classifier.save(dataset.model_path)
    reloaded_prediction = predict_issue(
        model_path, dataset.sample_title, dataset.sample_description
    )
    return IssueDemoResult(trained_prediction, metrics, model_path, reloaded_prediction)


def predict_issue(model_path: Path, title: str, description: str) -> IssuePrediction:
    """Load a saved classifier and predict the area of a single issue."""

    LOGGER.info("Predicting issue area with model %s", model_path)
    classifier = IssueClassifier.load(model_path)
    engine = classifier.create_prediction_engine()
    prediction = engine.predict(GitHubIssue(title=title, description=description))
    print(format_issue_prediction(prediction))
    return prediction


__all__ = ["IssueDemoResult", "TRAINED_SAMPLE", "predict_issue", "run_training"]
