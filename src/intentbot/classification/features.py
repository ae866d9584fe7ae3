"""Bag-of-words feature extraction."""

from collections import Counter
from typing import Dict, Iterable

from intentbot.config.constants import FEATURE_PREFIX

FeatureVector = Dict[str, int]


class BagOfWordsFeatureExtractor:
    """
    One feature per distinct lemma, valued by its count in the sentence.

    Example:
        >>> BagOfWordsFeatureExtractor().extract(["price", "the", "Price"])
        {'bow=price': 2, 'bow=the': 1}
    """

    def __init__(self, prefix: str = FEATURE_PREFIX):
        self.prefix = prefix

    def extract(self, lemmas: Iterable[str]) -> FeatureVector:
        counts = Counter(self.prefix + lemma.lower() for lemma in lemmas)
        return dict(counts)
