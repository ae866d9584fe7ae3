"""
Tests for the ChatbotContainer startup sequence.
"""

import pytest

from intentbot.config.settings import Settings
from intentbot.container import ChatbotContainer
from intentbot.errors import TrainingDataInvalid, UnknownIntentResponse


class TestStartup:
    """Test fatal startup errors."""

    def test_intent_without_response(self, annotators, settings):
        with pytest.raises(UnknownIntentResponse) as excinfo:
            ChatbotContainer(
                settings=settings,
                corpus_lines=["greeting hello", "weather-inquiry is it raining"],
                annotators=annotators,
            )
        assert excinfo.value.missing == ("weather-inquiry",)

    def test_single_intent_corpus(self, annotators, settings):
        with pytest.raises(TrainingDataInvalid):
            ChatbotContainer(
                settings=settings,
                corpus_lines=["greeting hello", "greeting hi"],
                annotators=annotators,
            )

    def test_empty_corpus(self, annotators, settings):
        with pytest.raises(TrainingDataInvalid):
            ChatbotContainer(settings=settings, corpus_lines=["# only a comment"], annotators=annotators)

    def test_corpus_path_setting(self, annotators, tmp_path):
        path = tmp_path / "corpus.txt"
        path.write_text("greeting hello\nconversation-complete goodbye\n", encoding="utf-8")
        settings = Settings(_env_file=None, corpus_path=path)

        container = ChatbotContainer(settings=settings, annotators=annotators)

        assert container.model.labels == ("greeting", "conversation-complete")


class TestContainer:
    """Test the assembled components."""

    def test_default_model(self, default_container):
        assert len(default_container.model.labels) == 6
        assert default_container.model.labels[0] == "greeting"

    def test_corpus_is_lemmatized(self, default_container):
        """Corpus text goes through the same annotators as user input."""
        tokens = {t for s in default_container.samples for t in s.tokens}
        assert "price" in tokens
        assert "prices" not in tokens

    def test_raw_corpus_tokens(self, annotators):
        settings = Settings(_env_file=None, lemmatize_corpus=False)
        container = ChatbotContainer(
            settings=settings,
            corpus_lines=["price-inquiry what are your prices", "greeting hello"],
            annotators=annotators,
        )
        assert container.samples[0].tokens == ("what", "are", "your", "prices")

    def test_lbfgs_setting(self, annotators):
        settings = Settings(_env_file=None, algorithm="lbfgs")
        container = ChatbotContainer(settings=settings, annotators=annotators)
        controller = container.create_controller()

        assert controller.process_turn("What is your phone number?").intents == ("contact-inquiry",)

    def test_controllers_share_model(self, default_container):
        first = default_container.create_controller()
        second = default_container.create_controller()
        assert first is not second
        assert first.state is not second.state
