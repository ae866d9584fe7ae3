"""
Annotation types.

Tokens carry their offsets so every later stage can be traced back to the
sentence span it came from.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Token:
    """
    A word or punctuation span of a sentence.

    Attributes:
        text: Surface form, always sentence[start:end]
        start: Offset of the first character
        end: Offset one past the last character
    """
    text: str
    start: int
    end: int

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class TaggedToken:
    """A token with its part-of-speech tag."""
    token: Token
    tag: str

    @property
    def text(self) -> str:
        return self.token.text

    def __str__(self) -> str:
        return f"{self.token.text}/{self.tag}"


@dataclass(frozen=True)
class AnnotatedSentence:
    """
    Output of the per-sentence annotation chain.

    Attributes:
        text: The sentence as segmented
        tokens: Tokenizer output
        tags: One POS tag per token
        lemmas: One lemma per token
    """
    text: str
    tokens: Tuple[Token, ...]
    tags: Tuple[str, ...]
    lemmas: Tuple[str, ...]
