"""
Per-sentence annotation chain: Tokenizer -> POS Tagger -> Lemmatizer.

Each stage consumes only the previous stage's output.
"""

import logging
from typing import List

from intentbot.annotation.lemmatizer import Lemmatizer
from intentbot.annotation.tagger import PosTagger
from intentbot.annotation.tokenizer import Tokenizer
from intentbot.annotation.types import AnnotatedSentence

logger = logging.getLogger(__name__)


class AnnotationPipeline:
    """Runs the word-level annotators over one sentence."""

    def __init__(
        self,
        tokenizer: Tokenizer,
        tagger: PosTagger,
        lemmatizer: Lemmatizer,
    ):
        self._tokenizer = tokenizer
        self._tagger = tagger
        self._lemmatizer = lemmatizer

    def annotate(self, sentence: str) -> AnnotatedSentence:
        tokens = self._tokenizer.tokenize(sentence)
        tags = [tagged.tag for tagged in self._tagger.tag(tokens)]
        lemmas = self._lemmatizer.lemmatize(tokens, tags)
        return AnnotatedSentence(
            text=sentence,
            tokens=tuple(tokens),
            tags=tuple(tags),
            lemmas=tuple(lemmas),
        )

    def lemmas(self, sentence: str) -> List[str]:
        """Lemmas of a sentence; usable as a corpus tokenizer."""
        return list(self.annotate(sentence).lemmas)
