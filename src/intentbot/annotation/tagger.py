"""
Part-of-speech tagging.

Fine-grained (Penn Treebank) tags come from the statistical tagger of a
spaCy pipeline, which scores each token from a window of its neighbours.
Any token left without a tag from the tagset, for example because the
pipeline has no tagger, gets a tag from a word-shape and suffix policy.
"""

import logging
from typing import List, Sequence

from spacy.language import Language

from intentbot.annotation.docs import tokens_to_doc
from intentbot.annotation.types import TaggedToken, Token
from intentbot.config.constants import (
    DEFAULT_POS_TAG,
    PENN_TREEBANK_TAGS,
    SUFFIX_TAGS,
    TAGGING_PIPES,
)

logger = logging.getLogger(__name__)


class PosTagger:
    """
    Context-window POS tagger over a spaCy pipeline.

    Attributes:
        tagset: Tags this tagger may emit (the tagger component's labels)
        default_tag: Tag for words no shape rule matches
        fallback_count: Tokens tagged by the shape policy so far

    Example:
        >>> tagger = PosTagger(spacy.load("en_core_web_sm"))
        >>> [t.tag for t in tagger.tag(tokenizer.tokenize("the price"))]
        ['DT', 'NN']
    """

    def __init__(self, nlp: Language, default_tag: str = DEFAULT_POS_TAG):
        self._nlp = nlp
        if nlp.has_pipe("tagger"):
            self.tagset = frozenset(nlp.get_pipe("tagger").labels)
        else:
            logger.warning("Pipeline has no tagger; tags come from word shape only")
            self.tagset = frozenset(PENN_TREEBANK_TAGS)
        if default_tag not in self.tagset:
            raise ValueError(f"Default tag {default_tag!r} is not in the tagset")
        self.default_tag = default_tag
        self.fallback_count = 0
        self._disabled = [name for name in nlp.pipe_names if name not in TAGGING_PIPES]

    def tag(self, tokens: Sequence[Token]) -> List[TaggedToken]:
        """
        Tag every token.

        Args:
            tokens: Tokenizer output for one sentence

        Returns:
            One TaggedToken per input token, same order
        """
        if not tokens:
            return []
        doc = self._nlp(tokens_to_doc(self._nlp.vocab, tokens), disable=self._disabled)
        tags = [
            self._resolve(position, token.text, doc[position].tag_)
            for position, token in enumerate(tokens)
        ]
        logger.debug("POS Tags : %s", " | ".join(tags))
        return [TaggedToken(token, tag) for token, tag in zip(tokens, tags)]

    def _resolve(self, position: int, word: str, predicted: str) -> str:
        if predicted in self.tagset:
            return predicted
        self.fallback_count += 1
        return self._default_tag(position, word)

    def _default_tag(self, position: int, word: str) -> str:
        """Shape and suffix policy for words without a predicted tag."""
        candidates = []
        if word[:1].isdigit():
            candidates.append("CD")
        elif not any(c.isalnum() for c in word):
            candidates.append(word)
            candidates.append("." if word in "?!" else ":")
        elif position > 0 and word[:1].isupper():
            candidates.append("NNP")
        else:
            lower = word.lower()
            for suffix, tag in SUFFIX_TAGS:
                if lower.endswith(suffix) and len(lower) > len(suffix) + 1:
                    if suffix == "s" and lower.endswith("ss"):
                        continue
                    candidates.append(tag)
                    break
        for tag in candidates:
            if tag in self.tagset:
                return tag
        return self.default_tag
