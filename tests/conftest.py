"""
Shared fixtures for intentbot tests.

Segmenter and tokenizer tests run on a blank spaCy pipeline. Tagger,
lemmatizer and container tests need the en_core_web_sm pipeline, which is
loaded once per session.
"""

import pytest
import spacy

from intentbot.annotation.segmenter import SentenceSegmenter
from intentbot.annotation.tokenizer import Tokenizer
from intentbot.config.settings import Settings
from intentbot.container import ChatbotContainer
from intentbot.errors import ResourceLoadFailure
from intentbot.resources.loader import load_annotators


# =============================================================================
# Annotator Fixtures
# =============================================================================

@pytest.fixture(scope="session")
def blank_nlp():
    """Blank English pipeline: tokenizer rules only."""
    return spacy.blank("en")


@pytest.fixture(scope="session")
def annotators():
    """Annotators built on the default spaCy pipeline."""
    try:
        return load_annotators()
    except ResourceLoadFailure as e:
        pytest.skip(f"spaCy pipeline unavailable: {e.message}")


@pytest.fixture(scope="session")
def segmenter():
    return SentenceSegmenter()


@pytest.fixture(scope="session")
def tokenizer(blank_nlp):
    return Tokenizer(blank_nlp)


@pytest.fixture
def tagger(annotators):
    return annotators.tagger


@pytest.fixture
def lemmatizer(annotators):
    return annotators.lemmatizer


# =============================================================================
# Container Fixtures
# =============================================================================

SCENARIO_CORPUS = [
    "greeting hello there",
    "conversation-complete goodbye",
]


@pytest.fixture
def settings():
    """Default settings, independent of any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def scenario_container(annotators, settings):
    """Container trained on the two-line greeting/goodbye corpus."""
    return ChatbotContainer(
        settings=settings,
        corpus_lines=SCENARIO_CORPUS,
        annotators=annotators,
    )


@pytest.fixture(scope="session")
def default_container(annotators):
    """Container trained on the packaged corpus."""
    return ChatbotContainer(settings=Settings(_env_file=None), annotators=annotators)
