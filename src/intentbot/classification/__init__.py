"""
Classification package: bag-of-words features and the maxent intent model.

Components:
    - BagOfWordsFeatureExtractor: Lemmas to feature counts
    - TrainingSample / load_corpus: Labeled training data
    - train / classify / evaluate: Maximum-entropy model lifecycle
"""

from intentbot.classification.features import BagOfWordsFeatureExtractor, FeatureVector
from intentbot.classification.corpus import (
    TrainingSample,
    load_corpus,
    parse_record,
    read_samples,
)
from intentbot.classification.maxent import (
    IntentResult,
    MaxentModel,
    TrainingOptions,
    classify,
    evaluate,
    train,
)

__all__ = [
    "BagOfWordsFeatureExtractor",
    "FeatureVector",
    "TrainingSample",
    "load_corpus",
    "parse_record",
    "read_samples",
    "IntentResult",
    "MaxentModel",
    "TrainingOptions",
    "classify",
    "evaluate",
    "train",
]
