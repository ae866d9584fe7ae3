"""
Sentence segmentation.

Runs spaCy's rule-based sentencizer over a blank pipeline: a sentence ends
after a terminal punctuation token once a following token is neither
punctuation nor another terminal mark. Abbreviations such as "Mr." and
"e.g." are single tokens in spaCy's tokenizer exceptions, so their periods
never end a sentence. Sentences are returned stripped of surrounding
whitespace; nothing else is ever removed.
"""

import logging
from typing import Iterable, List, Optional, Tuple

import spacy

from intentbot.config.constants import DEFAULT_LANGUAGE

logger = logging.getLogger(__name__)


class SentenceSegmenter:
    """
    Punctuation-driven sentence detector.

    Example:
        >>> segmenter = SentenceSegmenter()
        >>> segmenter.segment("Hello Mr. Smith. How are you?")
        ['Hello Mr. Smith.', 'How are you?']
    """

    def __init__(self, lang: str = DEFAULT_LANGUAGE, punct_chars: Optional[Iterable[str]] = None):
        """
        Initialize the segmenter.

        Args:
            lang: spaCy language code whose tokenizer rules apply
            punct_chars: Sentence-final tokens (spaCy's defaults if None)
        """
        self._nlp = spacy.blank(lang)
        config = {"punct_chars": list(punct_chars)} if punct_chars is not None else {}
        self._nlp.add_pipe("sentencizer", config=config)

    @property
    def lang(self) -> str:
        return self._nlp.lang

    def segment(self, text: str) -> List[str]:
        """
        Split text into sentences.

        Args:
            text: Raw user input

        Returns:
            Sentences in order; empty list for empty or blank input
        """
        sentences = [text[start:end] for start, end in self.segment_spans(text)]
        logger.debug("Sentence Detection: %s", " | ".join(sentences))
        return sentences

    def segment_spans(self, text: str) -> List[Tuple[int, int]]:
        """Return (start, end) offsets of each sentence in text."""
        doc = self._nlp(text)
        if not len(doc):
            return []
        spans = []
        for sentence in doc.sents:
            span = self._trim(text, sentence.start_char, sentence.end_char)
            if span is not None:
                spans.append(span)
        return spans

    @staticmethod
    def _trim(text: str, start: int, end: int) -> Optional[Tuple[int, int]]:
        while start < end and text[start].isspace():
            start += 1
        while end > start and text[end - 1].isspace():
            end -= 1
        if start == end:
            return None
        return start, end
