"""
Word tokenization.

Wraps the rule-based tokenizer of a spaCy pipeline: whitespace splitting,
prefix/suffix punctuation, tokenizer exceptions for abbreviations, and
Treebank-style clitics ("don't" -> "do" "n't"). Whitespace tokens are
dropped; every remaining token keeps its offsets into the sentence.
"""

import logging
from typing import List

from spacy.language import Language

from intentbot.annotation.types import Token

logger = logging.getLogger(__name__)


class Tokenizer:
    """
    Tokenizer producing offset-carrying tokens.

    Example:
        >>> tokenizer = Tokenizer(spacy.blank("en"))
        >>> [t.text for t in tokenizer.tokenize("I'm sure, don't worry.")]
        ['I', "'m", 'sure', ',', 'do', "n't", 'worry', '.']
    """

    def __init__(self, nlp: Language):
        """
        Initialize the tokenizer.

        Args:
            nlp: Pipeline whose tokenizer rules apply
        """
        self._tokenizer = nlp.tokenizer

    def tokenize(self, sentence: str) -> List[Token]:
        """
        Split a sentence into tokens.

        Args:
            sentence: One sentence of raw text

        Returns:
            Tokens in order, each with sentence[start:end] == text
        """
        tokens = [
            Token(token.text, token.idx, token.idx + len(token.text))
            for token in self._tokenizer(sentence)
            if not token.is_space
        ]
        logger.debug("Tokenizer : %s", " | ".join(t.text for t in tokens))
        return tokens
