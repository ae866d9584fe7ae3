"""
Conversion between intentbot tokens and spaCy Docs.

Every stage after the tokenizer sees only Token sequences; stages backed by
spaCy rebuild a Doc from those tokens so no stage looks at the raw text.
"""

from typing import List, Optional, Sequence

from spacy.tokens import Doc
from spacy.vocab import Vocab

from intentbot.annotation.types import Token


def token_spaces(tokens: Sequence[Token]) -> List[bool]:
    """Whether each token is followed by whitespace in its sentence."""
    spaces = [current.end < following.start for current, following in zip(tokens, tokens[1:])]
    if tokens:
        spaces.append(False)
    return spaces


def tokens_to_doc(
    vocab: Vocab,
    tokens: Sequence[Token],
    tags: Optional[Sequence[str]] = None,
) -> Doc:
    """
    Build a Doc whose tokens are exactly the given tokens.

    Args:
        vocab: Vocabulary of the pipeline that will process the Doc
        tokens: Tokenizer output for one sentence
        tags: Optional fine-grained tag per token
    """
    return Doc(
        vocab,
        words=[token.text for token in tokens],
        spaces=token_spaces(tokens),
        tags=list(tags) if tags is not None else None,
    )
