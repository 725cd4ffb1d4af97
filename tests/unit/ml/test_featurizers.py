"""
Unit tests for text normalization and featurization.
"""

from __future__ import annotations

import numpy as np
import pytest

from mlpipelines.ml.featurizers import make_text_featurizer, normalize_text


class TestNormalizeText:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Héllo, World!!", "hello world"),
            ("  EF   is\tcrashing ", "ef is crashing"),
            ("그건 좋아.", "그건 좋아"),
            ("Version 3.12", "version 3 12"),
            ("", ""),
            (None, ""),
        ],
    )
    def test_normalization(self, raw: str | None, expected: str) -> None:
        assert normalize_text(raw) == expected


class TestTextFeaturizer:
    def test_rows_are_unit_length(self) -> None:
        featurizer = make_text_featurizer()
        matrix = featurizer.fit_transform(["slow websocket", "database crash", "그건 좋아"])

        norms = np.sqrt(np.asarray(matrix.multiply(matrix).sum(axis=1))).ravel()
        assert np.allclose(norms, 1.0)

    def test_unseen_text_transforms(self) -> None:
        featurizer = make_text_featurizer()
        featurizer.fit(["slow websocket", "database crash"])

        matrix = featurizer.transform(["completely new words"])

        assert matrix.shape[0] == 1

    def test_max_features_limits_width(self) -> None:
        featurizer = make_text_featurizer(max_features=5)
        matrix = featurizer.fit_transform(["alpha beta gamma", "delta epsilon zeta"])

        assert matrix.shape[1] <= 10
