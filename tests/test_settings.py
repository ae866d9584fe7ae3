"""
Tests for environment-driven settings.
"""

import pytest
from pydantic import ValidationError

from intentbot.classification.maxent import TrainingOptions
from intentbot.config.constants import DEFAULT_CUTOFF, DEFAULT_RESPONSES, TERMINAL_INTENT
from intentbot.config.settings import Settings


class TestSettings:
    """Test defaults, overrides and validation."""

    def test_defaults(self, settings):
        assert settings.cutoff == DEFAULT_CUTOFF
        assert settings.algorithm == "gis"
        assert settings.terminal_intent == TERMINAL_INTENT
        assert settings.responses == DEFAULT_RESPONSES
        assert settings.lemmatize_corpus is True
        assert settings.corpus_path is None
        assert settings.spacy_model == "en_core_web_sm"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("INTENTBOT_CUTOFF", "2")
        monkeypatch.setenv("INTENTBOT_ALGORITHM", "LBFGS")
        monkeypatch.setenv("INTENTBOT_LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.cutoff == 2
        assert settings.algorithm == "lbfgs"
        assert settings.log_level == "DEBUG"

    def test_invalid_algorithm(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, algorithm="perceptron")

    def test_negative_cutoff(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, cutoff=-1)

    def test_training_options(self):
        options = Settings(_env_file=None, cutoff=1, iterations=20).training_options()
        assert options == TrainingOptions(cutoff=1, iterations=20)

    def test_spacy_model_from_environment(self, monkeypatch):
        monkeypatch.setenv("INTENTBOT_SPACY_MODEL", "en_core_web_md")
        assert Settings(_env_file=None).spacy_model == "en_core_web_md"
