"""
Shared persistence and single-record prediction for the demo models.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any, ClassVar, Generic, TypeVar

import joblib
import pandas as pd
from sklearn.pipeline import Pipeline

from ..data.records import InputRecord, column_names, records_to_frame
from ..exceptions import DatasetError, ModelLoadError, ModelNotTrainedError

LOGGER = logging.getLogger(__name__)

ModelPath = Path | str
InputT = TypeVar("InputT")
PredictionT = TypeVar("PredictionT")
ModelT = TypeVar("ModelT", bound="TrainedModel[Any, Any]")


class TrainedModel(Generic[InputT, PredictionT]):
    """
    A scikit-learn pipeline bound to one input record type.

    Subclasses set ``kind``, ``record_type`` and ``label_column`` and implement
    ``build_pipeline``, ``evaluate`` and ``_to_predictions``.
    """

    kind: ClassVar[str] = ""
    record_type: ClassVar[type[InputRecord]]
    label_column: ClassVar[str] = ""

    def __init__(self, pipeline: Pipeline | None = None, *, seed: int | None = 0) -> None:
        self.pipeline = pipeline
        self.seed = seed

    @property
    def is_trained(self) -> bool:
        """Return True if the model has a fitted pipeline in memory."""

        return self.pipeline is not None

    @property
    def input_columns(self) -> list[str]:
        return [name for name in column_names(self.record_type) if name != self.label_column]

    def build_pipeline(self) -> Pipeline:
        raise NotImplementedError

    def fit(self, frame: pd.DataFrame) -> TrainedModel[InputT, PredictionT]:
        """Fit a fresh pipeline on ``frame`` and keep it."""

        self._require_columns(frame, [*self.input_columns, self.label_column])
        if frame.empty:
            raise DatasetError("Cannot train on an empty dataset.")

        pipeline = self.build_pipeline()
        LOGGER.info("Training %s model on %d rows.", self.kind, len(frame))
        pipeline.fit(self._features(frame), self._labels(frame))
        self.pipeline = pipeline
        LOGGER.info("Training of %s model finished.", self.kind)
        return self

    def predict(self, record: InputT) -> PredictionT:
        """Predict a single record."""

        return self.predict_batch([record])[0]

    def predict_batch(self, records: Sequence[InputT]) -> list[PredictionT]:
        """Predict several records with one pipeline call."""

        if not records:
            return []
        frame = records_to_frame(records, self.record_type)  # type: ignore[arg-type]
        return self.predict_frame(frame)

    def predict_frame(self, frame: pd.DataFrame) -> list[PredictionT]:
        pipeline = self._ensure_trained()
        self._require_columns(frame, self.input_columns)
        return self._to_predictions(pipeline, frame)

    def create_prediction_engine(self) -> PredictionEngine[InputT, PredictionT]:
        return PredictionEngine(self)

    def save(self, path: ModelPath) -> Path:
        """Persist the fitted pipeline and its input schema with joblib."""

        pipeline = self._ensure_trained()
        path = Path(path)
        payload = {
            "kind": self.kind,
            "pipeline": pipeline,
            "input_columns": self.input_columns,
            "config": self.get_config(),
        }
        path.parent.mkdir(parents=True, exist_ok=True)
        joblib.dump(payload, path)
        LOGGER.info("Saved %s model to %s", self.kind, path)
        return path

    @classmethod
    def load(cls: type[ModelT], path: ModelPath) -> ModelT:
        """Load a model saved by :meth:`save`, validating its payload."""

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Model file not found: {path}")

        payload = joblib.load(path)
        if not isinstance(payload, dict):
            raise ModelLoadError(
                "Persisted model is invalid or corrupted.", context={"path": str(path)}
            )
        if payload.get("kind") != cls.kind:
            raise ModelLoadError(
                f"Expected a {cls.kind!r} model, found {payload.get('kind')!r}.",
                context={"path": str(path)},
            )
        pipeline = payload.get("pipeline")
        if not isinstance(pipeline, Pipeline):
            raise ModelLoadError("Persisted pipeline is invalid.", context={"path": str(path)})

        model = cls.from_config(payload.get("config") or {})
        model.pipeline = pipeline
        LOGGER.info("Loaded %s model from %s", cls.kind, path)
        return model

    def get_config(self) -> dict[str, Any]:
        return {"seed": self.seed}

    @classmethod
    def from_config(cls: type[ModelT], config: dict[str, Any]) -> ModelT:
        return cls(**config)

    def _features(self, frame: pd.DataFrame) -> pd.DataFrame:
        return frame[self.input_columns]

    def _labels(self, frame: pd.DataFrame) -> pd.Series:
        return frame[self.label_column]

    def _to_predictions(self, pipeline: Pipeline, frame: pd.DataFrame) -> list[PredictionT]:
        raise NotImplementedError

    def _ensure_trained(self) -> Pipeline:
        if self.pipeline is None:
            raise ModelNotTrainedError(
                f"The {self.kind} model is not trained. Call fit() or load() first."
            )
        return self.pipeline

    @staticmethod
    def _require_columns(frame: pd.DataFrame, columns: Sequence[str]) -> None:
        missing = [column for column in columns if column not in frame.columns]
        if missing:
            raise DatasetError(
                f"Dataset is missing required columns: {', '.join(missing)}",
                context={"missing": missing},
            )


class PredictionEngine(Generic[InputT, PredictionT]):
    """
    Applies a trained model to one record at a time.

    The engine keeps a reference to the pipeline that was fitted when it was
    created; refitting or reloading the model does not affect existing engines.
    Engines are not meant to be shared between threads; create one per worker.
    """

    def __init__(self, model: TrainedModel[InputT, PredictionT]) -> None:
        self._pipeline = model._ensure_trained()
        self._model = model

    def predict(self, record: InputT) -> PredictionT:
        frame = records_to_frame([record], self._model.record_type)  # type: ignore[list-item]
        return self._model._to_predictions(self._pipeline, frame)[0]


__all__ = ["ModelPath", "PredictionEngine", "TrainedModel"]
