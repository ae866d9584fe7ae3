"""
Dependency Injection Container for intentbot.

Performs every startup step in order (annotator loading, corpus loading,
classifier training, response table validation) and hands out conversation
controllers that share the resulting read-only components.
"""

import logging
from typing import Iterable, List, Optional

from intentbot.annotation.pipeline import AnnotationPipeline
from intentbot.classification.corpus import TrainingSample, Tokenize, read_samples
from intentbot.classification.features import BagOfWordsFeatureExtractor
from intentbot.classification.maxent import MaxentModel, TrainingOptions, train
from intentbot.config.settings import Settings
from intentbot.conversation.controller import ConversationController
from intentbot.conversation.responses import ResponseTable
from intentbot.resources.loader import (
    AnnotatorSuite,
    load_annotators,
    load_training_samples,
)

logger = logging.getLogger(__name__)


class ChatbotContainer:
    """
    Dependency injection container for the chatbot.

    Owns the shared singletons (annotators, trained model, response table)
    and creates one ConversationController per conversation.

    No partially initialized container is ever returned: any of
    ResourceLoadFailure, TrainingDataInvalid or UnknownIntentResponse
    propagates out of __init__.

    Example:
        >>> container = ChatbotContainer()
        >>> controller = container.create_controller()
        >>> controller.process_turn("hello").response
        'Hello, my name is Stacy.  How may I help you today?'
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        corpus_lines: Optional[Iterable[str]] = None,
        annotators: Optional[AnnotatorSuite] = None,
    ):
        """
        Bootstrap the chatbot.

        Args:
            settings: Runtime settings (read from the environment if omitted)
            corpus_lines: Training corpus lines, overriding settings.corpus_path
            annotators: Pre-loaded annotators, skipping pipeline loading
        """
        self._settings = settings or Settings()
        self._annotators = annotators or load_annotators(self._settings.spacy_model)
        self._pipeline = AnnotationPipeline(
            self._annotators.tokenizer,
            self._annotators.tagger,
            self._annotators.lemmatizer,
        )
        self._extractor = BagOfWordsFeatureExtractor()
        self._responses = ResponseTable(self._settings.responses)

        self._samples = self._load_samples(corpus_lines)
        self._model = train(self._samples, self.training_options, self._extractor)
        self._responses.validate(self._model.labels)
        logger.info("Chatbot ready with intents: %s", ", ".join(self._model.labels))

    def _load_samples(self, corpus_lines: Optional[Iterable[str]]) -> List[TrainingSample]:
        tokenize: Tokenize = str.split
        if self._settings.lemmatize_corpus:
            tokenize = self._pipeline.lemmas
        if corpus_lines is not None:
            return read_samples(corpus_lines, tokenize)
        return load_training_samples(self._settings.corpus_path, tokenize)

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def training_options(self) -> TrainingOptions:
        return self._settings.training_options()

    @property
    def annotators(self) -> AnnotatorSuite:
        return self._annotators

    @property
    def pipeline(self) -> AnnotationPipeline:
        return self._pipeline

    @property
    def extractor(self) -> BagOfWordsFeatureExtractor:
        return self._extractor

    @property
    def model(self) -> MaxentModel:
        return self._model

    @property
    def responses(self) -> ResponseTable:
        return self._responses

    @property
    def samples(self) -> List[TrainingSample]:
        return list(self._samples)

    def create_controller(self) -> ConversationController:
        """Create a controller with fresh conversation state."""
        return ConversationController(
            segmenter=self._annotators.segmenter,
            pipeline=self._pipeline,
            extractor=self._extractor,
            model=self._model,
            responses=self._responses,
            terminal_intent=self._settings.terminal_intent,
        )
