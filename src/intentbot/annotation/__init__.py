"""
Annotation package: turns raw text into lemma sequences.

Components:
    - SentenceSegmenter: Raw text to sentences (spaCy sentencizer)
    - Tokenizer: Sentence to offset-carrying tokens
    - PosTagger: Context-window POS tagging with a shape-based fallback
    - Lemmatizer: (token, tag) to base form
    - AnnotationPipeline: Tokenizer -> Tagger -> Lemmatizer for one sentence
"""

from intentbot.annotation.types import AnnotatedSentence, TaggedToken, Token
from intentbot.annotation.segmenter import SentenceSegmenter
from intentbot.annotation.tokenizer import Tokenizer
from intentbot.annotation.tagger import PosTagger
from intentbot.annotation.lemmatizer import Lemmatizer
from intentbot.annotation.pipeline import AnnotationPipeline

__all__ = [
    "AnnotatedSentence",
    "TaggedToken",
    "Token",
    "SentenceSegmenter",
    "Tokenizer",
    "PosTagger",
    "Lemmatizer",
    "AnnotationPipeline",
]
