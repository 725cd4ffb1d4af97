"""
Supervised-learning console demos: issue classification, sentiment analysis,
and taxi fare regression.
"""

from .config import Settings, get_settings
from .exceptions import DatasetError, ModelLoadError, ModelNotTrainedError, PipelineError

__all__ = [
    "DatasetError",
    "ModelLoadError",
    "ModelNotTrainedError",
    "PipelineError",
    "Settings",
    "get_settings",
]
