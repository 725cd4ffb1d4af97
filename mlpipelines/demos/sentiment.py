"""
Sentiment analysis demo: split, train, evaluate, save, reload, predict.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from ..config import Settings
from ..data import (
    SentimentData,
    SentimentPrediction,
    TrainTestData,
    load_frame,
    train_test_split_frame,
)
from ..ml import BinaryMetrics, SentimentClassifier
from .reporting import banner, format_binary_metrics, format_sentiment_prediction

LOGGER = logging.getLogger(__name__)


class SentimentDemoResult(NamedTuple):
    metrics: BinaryMetrics
    single_prediction: SentimentPrediction
    batch_predictions: list[SentimentPrediction]


def load_data(settings: Settings, *, separate_test: bool = False) -> TrainTestData:
    """
    Return train/test partitions, either split from one file or read from two.
    """

    cfg = settings.sentiment
    data = load_frame(
        cfg.data_path,
        SentimentData,
        has_header=cfg.separate_train_has_header if separate_test else cfg.has_header,
        separator=cfg.separator,
    )
    if not separate_test:
        return train_test_split_frame(data, cfg.test_fraction, settings.app.seed)

    test = load_frame(
        cfg.test_path, SentimentData, has_header=cfg.test_has_header, separator=cfg.separator
    )
    return TrainTestData(train=data, test=test)


def run(settings: Settings, *, separate_test: bool = False) -> SentimentDemoResult:
    cfg = settings.sentiment
    split = load_data(settings, separate_test=separate_test)
    trainer = "lbfgs" if separate_test else cfg.trainer
    LOGGER.info(
        "Sentiment data: %d training rows, %d test rows, trainer %s.",
        len(split.train),
        len(split.test),
        trainer,
    )

    print(banner("Create and Train the Model"))
    classifier = SentimentClassifier(seed=settings.app.seed, trainer=trainer, max_iter=cfg.max_iter)
    classifier.fit(split.train)
    print(banner("End of training"))
    print()

    print(banner("Evaluating Model accuracy with Test data"))
    metrics = classifier.evaluate(split.test)
    print()
    print(format_binary_metrics(metrics))
    print(banner("End of model evaluation"))

    model_path = classifier.save(cfg.model_path)
    loaded = SentimentClassifier.load(model_path)

    engine = loaded.create_prediction_engine()
    single = engine.predict(SentimentData(sentiment_text=cfg.sample_text))
    print()
    print(banner("Prediction Test of model with a single sample and test dataset"))
    print()
    print(format_sentiment_prediction(single))
    print(banner("End of Predictions"))
    print()

    batch = loaded.predict_batch([SentimentData(sentiment_text=text) for text in cfg.batch_texts])
    print(banner("Prediction Test of loaded model with multiple samples"))
    for prediction in batch:
        print(format_sentiment_prediction(prediction))
    print(banner("End of predictions"))

    return SentimentDemoResult(metrics, single, batch)


__all__ = ["SentimentDemoResult", "load_data", "run"]
