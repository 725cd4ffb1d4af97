"""
Centralized configuration management powered by pydantic-settings.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Annotated, Literal

from pydantic import AfterValidator, BaseModel, Field, PositiveInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SentimentTrainer = Literal["sdca", "lbfgs"]
IssueProfile = Literal["en", "ko"]


def _validate_separator(value: str) -> str:
    if len(value) != 1:
        raise ValueError("separator must be a single character.")
    return value


Separator = Annotated[str, AfterValidator(_validate_separator)]


class AppSettings(BaseModel):
    """Application metadata and runtime toggles."""

    name: str = Field(default="mlpipelines", description="Human-readable application name.")
    version: str = Field(default="0.1.0", description="Application version.")
    seed: int = Field(default=0, description="Random seed shared by splits and estimators.")


class LoggingSettings(BaseModel):
    """Logging configuration shared across the project."""

    level: str = Field(default="INFO", description="Root logging level.")
    format: str = Field(
        default="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        description="Standard logging format string.",
    )
    directory: Path = Field(default=Path("logs"), description="Directory for log files.")
    file_name: str = Field(default="mlpipelines.log", description="Primary log file name.")
    max_bytes: PositiveInt = Field(
        default=5 * 1024 * 1024, description="Maximum file size before rotating."
    )
    backup_count: PositiveInt = Field(default=5, description="Number of rotated log files to keep.")


class IssueDatasetSettings(BaseModel):
    """Paths and sample inputs for one issue-classification dataset."""

    train_path: Path
    test_path: Path
    model_path: Path
    sample_title: str
    sample_description: str


class EnglishIssueDatasetSettings(IssueDatasetSettings):
    """The English GitHub issues dataset."""

    train_path: Path = Path("Data/issues_train.csv")
    test_path: Path = Path("Data/issues_test.tsv")
    model_path: Path = Path("Models/issues_model.joblib")
    sample_title: str = "Entity Framework crashes"
    sample_description: str = "When connecting to the database, EF is crashing"


class KoreanIssueDatasetSettings(IssueDatasetSettings):
    """The Korean issues dataset."""

    train_path: Path = Path("Data/trainDataKo.csv")
    test_path: Path = Path("Data/testDataKo.tsv")
    model_path: Path = Path("Models/issues_model_ko.joblib")
    sample_title: str = "제중당한약방"
    sample_description: str = "한약방"


class IssuesSettings(BaseModel):
    """GitHub issue classification demo settings."""

    english: EnglishIssueDatasetSettings = EnglishIssueDatasetSettings()
    korean: KoreanIssueDatasetSettings = KoreanIssueDatasetSettings()
    separator: Separator = Field(default="\t", description="Column separator of the issue files.")
    has_header: bool = Field(default=True, description="Whether the issue files have a header row.")
    max_iter: PositiveInt = Field(default=1000, description="Maximum solver iterations.")

    def profile(self, name: IssueProfile) -> IssueDatasetSettings:
        """Return the dataset settings for the given profile name."""

        if name == "en":
            return self.english
        if name == "ko":
            return self.korean
        raise ValueError(f"Unknown issue profile: {name}")


class SentimentSettings(BaseModel):
    """Sentiment analysis demo settings."""

    data_path: Path = Field(
        default=Path("data/trainkorean.txt"),
        description="Headerless training file (text, label).",
    )
    test_path: Path = Field(
        default=Path("data/testData.tsv"),
        description="Separate test file with a header row.",
    )
    model_path: Path = Field(default=Path("Models/sentiment_model.joblib"))
    separator: Separator = Field(default="\t")
    has_header: bool = Field(default=False, description="Whether data_path has a header row.")
    separate_train_has_header: bool = Field(
        default=True,
        description="Whether data_path has a header row when a separate test file is used.",
    )
    test_has_header: bool = Field(default=True, description="Whether test_path has a header row.")
    test_fraction: float = Field(default=0.2, gt=0.0, lt=1.0)
    trainer: SentimentTrainer = Field(default="sdca")
    max_iter: PositiveInt = Field(default=1000)
    sample_text: str = Field(default="그건 좋아.")
    batch_texts: list[str] = Field(default_factory=lambda: ["그건 좋아.", "내건 나빠."])


class TaxiSettings(BaseModel):
    """Taxi fare regression demo settings."""

    train_path: Path = Field(default=Path("Data/taxi-fare-train.csv"))
    test_path: Path = Field(default=Path("Data/taxi-fare-test.csv"))
    model_path: Path = Field(default=Path("Models/taxi_model.joblib"))
    separator: Separator = Field(default=",")
    has_header: bool = Field(default=True)
    n_estimators: PositiveInt = Field(default=100, description="Number of boosted trees.")
    max_leaf_nodes: PositiveInt = Field(default=20, description="Leaves per tree.")
    min_samples_leaf: PositiveInt = Field(default=10, description="Minimum samples per leaf.")
    learning_rate: float = Field(default=0.2, gt=0.0)

    @field_validator("max_leaf_nodes")
    @classmethod
    def _validate_leaves(cls, value: int) -> int:
        if value < 2:
            raise ValueError("max_leaf_nodes must be at least 2.")
        return value


class Settings(BaseSettings):
    """Top-level application settings loaded from the environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MLP_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    app: AppSettings = AppSettings()
    logging: LoggingSettings = LoggingSettings()
    issues: IssuesSettings = IssuesSettings()
    sentiment: SentimentSettings = SentimentSettings()
    taxi: TaxiSettings = TaxiSettings()


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance loaded from the current environment."""

    return Settings()


__all__ = [
    "AppSettings",
    "EnglishIssueDatasetSettings",
    "IssueDatasetSettings",
    "IssueProfile",
    "IssuesSettings",
    "KoreanIssueDatasetSettings",
    "LoggingSettings",
    "SentimentSettings",
    "SentimentTrainer",
    "Settings",
    "TaxiSettings",
    "get_settings",
]
