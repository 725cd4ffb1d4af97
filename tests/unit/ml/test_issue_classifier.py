"""
Unit tests for the GitHub issue area classifier.
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from mlpipelines.data import GitHubIssue, records_to_frame
from mlpipelines.exceptions import DatasetError
from mlpipelines.ml import IssueClassifier
from tests.factories import AREA_VOCABULARY, GitHubIssueFactory


class TestIssueClassifier:
    def test_classes_are_training_areas(self, trained_issue_classifier: IssueClassifier) -> None:
        assert trained_issue_classifier.classes == sorted(AREA_VOCABULARY)

    @pytest.mark.parametrize(
        ("title", "description", "expected"),
        [
            ("websocket latency", "the http connection drops", "area-networking"),
            ("database query crashes", "when I use the entity migration it fails", "area-data"),
            ("button layout", "css theme does not render", "area-ui"),
        ],
    )
    def test_predict_area(
        self,
        trained_issue_classifier: IssueClassifier,
        title: str,
        description: str,
        expected: str,
    ) -> None:
        issue = GitHubIssue(title=title, description=description)

        prediction = trained_issue_classifier.predict(issue)

        assert prediction.area == expected
        assert set(prediction.scores) == set(AREA_VOCABULARY)
        assert sum(prediction.scores.values()) == pytest.approx(1.0)
        assert prediction.scores[expected] == max(prediction.scores.values())

    def test_evaluate_on_held_out_issues(self, trained_issue_classifier: IssueClassifier) -> None:
        test_frame = records_to_frame(GitHubIssueFactory.build_batch(30), GitHubIssue)

        metrics = trained_issue_classifier.evaluate(test_frame)

        assert metrics.micro_accuracy > 0.9
        assert metrics.macro_accuracy > 0.9
        assert metrics.log_loss_reduction > 0
        assert metrics.labels == tuple(sorted(AREA_VOCABULARY))

    def test_unseen_areas_are_skipped(
        self,
        trained_issue_classifier: IssueClassifier,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        known = records_to_frame(GitHubIssueFactory.build_batch(6), GitHubIssue)
        unseen = pd.DataFrame(
            [{"ID": "x", "Area": "area-docs", "Title": "typo", "Description": "readme"}]
        )

        metrics = trained_issue_classifier.evaluate(pd.concat([known, unseen], ignore_index=True))

        assert metrics.micro_accuracy == pytest.approx(1.0)
        assert "area-docs" in caplog.text

    def test_only_unseen_areas_raise(self, trained_issue_classifier: IssueClassifier) -> None:
        unseen = pd.DataFrame(
            [{"ID": "x", "Area": "area-docs", "Title": "typo", "Description": "readme"}]
        )

        with pytest.raises(DatasetError, match="No evaluation rows"):
            trained_issue_classifier.evaluate(unseen)

    def test_config_survives_reload(
        self, tmp_path: Path, trained_issue_classifier: IssueClassifier
    ) -> None:
        path = trained_issue_classifier.save(tmp_path / "issues.joblib")

        loaded = IssueClassifier.load(path)

        assert loaded.max_iter == 500
        assert loaded.classes == trained_issue_classifier.classes
