"""
Custom exception hierarchy for dataset and model handling.
"""

from __future__ import annotations

from typing import Any


class PipelineError(Exception):
    """Base exception for all pipeline-related errors."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = context or {}


class DatasetError(PipelineError):
    """Raised when a dataset is missing, empty, or does not match its schema."""


class ModelNotTrainedError(PipelineError):
    """Raised when a model is used before it has been fitted or loaded."""


class ModelLoadError(PipelineError):
    """Raised when a persisted model artifact is invalid or of the wrong kind."""


__all__ = ["DatasetError", "ModelLoadError", "ModelNotTrainedError", "PipelineError"]
