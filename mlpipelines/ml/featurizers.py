"""
Text featurization built from scikit-learn vectorizers.
"""

from __future__ import annotations

import re
import unicodedata

from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.pipeline import FeatureUnion, Pipeline
from sklearn.preprocessing import Normalizer

_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str | None) -> str:
    """
    Lower-case ``text``, strip diacritics and punctuation, and collapse whitespace.

    Letters and digits of every script are kept; decomposed characters are
    recomposed so that Hangul syllables survive intact.
    """

    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text)
    cleaned_chars: list[str] = []
    for char in decomposed:
        category = unicodedata.category(char)
        if category == "Mn":
            continue
        if category.startswith("L") or category.startswith("N"):
            cleaned_chars.append(char.lower())
        else:
            cleaned_chars.append(" ")
    cleaned = unicodedata.normalize("NFC", "".join(cleaned_chars))
    return _WHITESPACE.sub(" ", cleaned).strip()


def make_text_featurizer(max_features: int | None = None) -> Pipeline:
    """
    Build a featurizer mapping raw strings to a single L2-normalized vector.

    The vector concatenates word unigram/bigram and character 1-3-gram
    TF-IDF features computed on :func:`normalize_text` output.
    """

    words = TfidfVectorizer(
        preprocessor=normalize_text,
        analyzer="word",
        token_pattern=r"(?u)\b\w+\b",
        ngram_range=(1, 2),
        max_features=max_features,
        sublinear_tf=True,
    )
    chars = TfidfVectorizer(
        preprocessor=normalize_text,
        analyzer="char_wb",
        ngram_range=(1, 3),
        max_features=max_features,
        sublinear_tf=True,
    )
    return Pipeline(
        steps=[
            ("ngrams", FeatureUnion([("words", words), ("chars", chars)])),
            ("normalize", Normalizer(norm="l2")),
        ]
    )


__all__ = ["make_text_featurizer", "normalize_text"]
