"""
Unit tests for the POS tagger.

Tests validate:
1. One tag per token, always from the tagset
2. Context-window tagging by the spaCy pipeline
3. Shape and suffix policy for tokens left without a tag
"""

import pytest

from intentbot.annotation.tagger import PosTagger
from intentbot.annotation.types import Token


def _tokens(*words):
    tokens = []
    offset = 0
    for word in words:
        tokens.append(Token(word, offset, offset + len(word)))
        offset += len(word) + 1
    return tokens


class TestPackagedTagger:
    """Test the tagger of the default pipeline."""

    @pytest.mark.parametrize(
        "sentence",
        [
            "How much does life insurance cost ?",
            "Blorfing zibbles quaxed the frobnicator .",
            "hello",
            "I 'm looking for a cheap plan , please !",
        ],
    )
    def test_length_agreement(self, tagger, sentence):
        """tag() returns exactly one tag per token, in order."""
        tokens = _tokens(*sentence.split())
        tagged = tagger.tag(tokens)

        assert len(tagged) == len(tokens)
        assert [t.token for t in tagged] == tokens

    def test_unknown_words_tagged_from_tagset(self, tagger):
        tokens = _tokens(*"Zorblax 42 snurfed the quibbly wimwams !".split())
        assert all(t.tag in tagger.tagset for t in tagger.tag(tokens))

    def test_empty_sentence(self, tagger):
        assert tagger.tag([]) == []

    def test_closed_class_words(self, tagger):
        tags = [t.tag for t in tagger.tag(_tokens("I", "want", "the", "price", "."))]
        assert tags[0] == "PRP"
        assert tags[2] == "DT"
        assert tags[4] == "."

    def test_deterministic(self, tagger):
        tokens = _tokens(*"what products do you sell ?".split())
        assert tagger.tag(tokens) == tagger.tag(tokens)

    def test_tagset_is_penn_treebank(self, tagger):
        assert {"NN", "NNS", "VB", "DT", "."} <= tagger.tagset


class TestFallbackPolicy:
    """A pipeline without a tagger leaves every token to the shape policy."""

    @pytest.fixture
    def untagged(self, blank_nlp):
        return PosTagger(blank_nlp)

    def test_suffix_rules(self, untagged):
        tags = [t.tag for t in untagged.tag(_tokens("zibbles", "quaxed", "walking", "quickly"))]
        assert tags == ["NNS", "VBD", "VBG", "RB"]

    def test_shape_rules(self, untagged):
        tags = [t.tag for t in untagged.tag(_tokens("table", "42", "Paris", "glass"))]
        assert tags == ["NN", "CD", "NNP", "NN"]

    def test_capitalized_first_word_is_not_proper_noun(self, untagged):
        assert untagged.tag(_tokens("Table"))[0].tag == "NN"

    def test_punctuation(self, untagged):
        tags = [t.tag for t in untagged.tag(_tokens("hi", ",", "you", "?", "--"))]
        assert tags[1] == ","
        assert tags[3] == "."
        assert tags[4] == ":"

    def test_every_fallback_counted(self, untagged):
        untagged.tag(_tokens("a", "b", "c"))
        assert untagged.fallback_count == 3

    def test_trained_tagger_predicts_from_tagset(self, annotators):
        tagger = annotators.tagger
        before = tagger.fallback_count
        tagger.tag(_tokens("the", "price", "is", "high"))
        assert tagger.fallback_count == before

    def test_default_tag_must_be_in_tagset(self, blank_nlp):
        with pytest.raises(ValueError):
            PosTagger(blank_nlp, default_tag="NOT-A-TAG")
