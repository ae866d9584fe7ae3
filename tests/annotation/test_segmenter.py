"""
Unit tests for sentence segmentation.

Tests validate:
1. Boundary detection at terminal punctuation
2. Abbreviations and numbers do not split sentences
3. Lossless segmentation (only whitespace is dropped)
"""

import re

import pytest

from intentbot.annotation.segmenter import SentenceSegmenter


def _squash(text: str) -> str:
    return re.sub(r"\s+", "", text)


class TestSegmentBoundaries:
    """Test where sentences are split."""

    def test_empty_input(self, segmenter):
        """Empty or blank input yields no sentences."""
        assert segmenter.segment("") == []
        assert segmenter.segment("   \n\t ") == []

    def test_basic_split(self, segmenter):
        """Periods, question and exclamation marks end sentences."""
        sentences = segmenter.segment("Hello there. How are you? Great!")
        assert sentences == ["Hello there.", "How are you?", "Great!"]

    def test_lowercase_sentences(self, segmenter):
        """A lowercase word after a period still starts a new sentence."""
        assert segmenter.segment("hello. goodbye.") == ["hello.", "goodbye."]

    def test_trailing_text_without_punctuation(self, segmenter):
        """Unterminated text is its own final sentence."""
        sentences = segmenter.segment("Hi. what is the price")
        assert sentences == ["Hi.", "what is the price"]

    def test_single_sentence_without_punctuation(self, segmenter):
        assert segmenter.segment("  hello there  ") == ["hello there"]

    def test_closing_quote_stays_with_sentence(self, segmenter):
        sentences = segmenter.segment('She said "hi." Then she left.')
        assert sentences == ['She said "hi."', "Then she left."]

    def test_repeated_marks(self, segmenter):
        assert segmenter.segment("Really?! Yes.") == ["Really?!", "Yes."]

    def test_decimal_number_not_split(self, segmenter):
        assert segmenter.segment("It costs 3.50 a day. Cheap!") == [
            "It costs 3.50 a day.",
            "Cheap!",
        ]


class TestSegmentExceptions:
    """Test abbreviation handling."""

    def test_abbreviation(self, segmenter):
        """Abbreviations are single tokens and do not end a sentence."""
        assert segmenter.segment("Mr. Smith called. He left.") == [
            "Mr. Smith called.",
            "He left.",
        ]

    def test_dotted_abbreviation(self, segmenter):
        sentences = segmenter.segment("We sell insurance, e.g. auto and life.")
        assert len(sentences) == 1

    def test_custom_punctuation(self):
        """Only the configured marks end sentences."""
        segmenter = SentenceSegmenter(punct_chars=["!"])
        assert segmenter.segment("Hi. Bye! Ok") == ["Hi. Bye!", "Ok"]

    def test_language(self, segmenter):
        assert segmenter.lang == "en"


class TestSegmentLossless:
    """Segmentation must not drop or reorder text."""

    @pytest.mark.parametrize(
        "text",
        [
            "hello. goodbye.",
            "Hello Mr. Smith!  How are you?\nFine... thanks",
            "What is the price?!? Tell me.",
            "   leading and trailing   ",
            "(Really?) Yes.",
        ],
    )
    def test_reconstructs_input(self, segmenter, text):
        """Joined sentences equal the input once whitespace is ignored."""
        assert _squash("".join(segmenter.segment(text))) == _squash(text)

    def test_spans_index_input(self, segmenter):
        text = "  One. Two?  Three  "
        spans = segmenter.segment_spans(text)
        assert [text[s:e] for s, e in spans] == ["One.", "Two?", "Three"]

    def test_deterministic(self, segmenter):
        text = "hello. What products do you sell? bye"
        assert segmenter.segment(text) == segmenter.segment(text)
