"""
Tag-driven lemmatization.

Lemmas come from spaCy's rule lemmatizer: the attribute ruler maps each
fine-grained tag to a coarse part of speech and morphology, then the
lemmatizer applies the exception tables and suffix rules for that part of
speech. Tokens the pipeline leaves without a lemma fall back to the
lowercased word. Lemmas are always lowercased.
"""

import logging
from typing import List, Sequence

from spacy.language import Language

from intentbot.annotation.docs import tokens_to_doc
from intentbot.annotation.types import Token
from intentbot.config.constants import LEMMATIZING_PIPES

logger = logging.getLogger(__name__)


class Lemmatizer:
    """
    Maps (token, tag) pairs to base forms.

    Example:
        >>> lemmatizer = Lemmatizer(spacy.load("en_core_web_sm"))
        >>> lemmatizer.lemmatize(tokens, ["NNS", "VBP"])
        ['child', 'play']
    """

    def __init__(self, nlp: Language):
        """
        Initialize the lemmatizer.

        Args:
            nlp: Pipeline providing the attribute ruler and lemmatizer
        """
        self._nlp = nlp
        self._disabled = [name for name in nlp.pipe_names if name not in LEMMATIZING_PIPES]

    def lemmatize(self, tokens: Sequence[Token], tags: Sequence[str]) -> List[str]:
        """
        Lemmatize a tagged sentence.

        Args:
            tokens: Tokens of one sentence
            tags: POS tag per token

        Returns:
            One lemma per token
        """
        if len(tokens) != len(tags):
            raise ValueError(f"Got {len(tokens)} tokens but {len(tags)} tags")
        if not tokens:
            return []
        doc = self._nlp(tokens_to_doc(self._nlp.vocab, tokens, tags), disable=self._disabled)
        lemmas = [(doc[i].lemma_ or token.text).lower() for i, token in enumerate(tokens)]
        logger.debug("Lemmatizer : %s", " | ".join(lemmas))
        return lemmas

    def lemma(self, word: str, tag: str) -> str:
        """Lemma of a single word."""
        return self.lemmatize([Token(word, 0, len(word))], [tag])[0]
