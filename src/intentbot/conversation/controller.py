"""
Conversation controller orchestrating the annotation and classification
pipeline for each user turn.

The controller is a two-state machine: ACTIVE until a sentence classifies
to the terminal intent, then TERMINATED for good.
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple

from intentbot.annotation.pipeline import AnnotationPipeline
from intentbot.annotation.segmenter import SentenceSegmenter
from intentbot.classification.features import BagOfWordsFeatureExtractor
from intentbot.classification.maxent import IntentResult, MaxentModel, classify
from intentbot.config.constants import RESPONSE_SEPARATOR, TERMINAL_INTENT
from intentbot.conversation.responses import ResponseTable
from intentbot.errors import ConversationTerminated

logger = logging.getLogger(__name__)


@dataclass
class ConversationState:
    """
    Mutable per-conversation state.

    Attributes:
        terminated: Whether the terminal intent has been seen
        answer: Responses accumulated for the current turn
    """
    terminated: bool = False
    answer: str = ""


@dataclass(frozen=True)
class TurnResult:
    """Outcome of one processed turn."""
    response: str
    conversation_ended: bool
    intents: Tuple[str, ...] = ()


class ConversationController:
    """
    Answers user turns sentence by sentence.

    Attributes:
        _segmenter: Splits a turn into sentences
        _pipeline: Tokenizer -> Tagger -> Lemmatizer per sentence
        _extractor: Lemmas to bag-of-words features
        _model: Trained intent model (shared, read-only)
        _responses: Response per intent (shared, read-only)
        _terminal_intent: Intent that ends the conversation
        _state: This conversation's state

    Example:
        >>> controller = container.create_controller()
        >>> controller.process_turn("hello there")
        TurnResult(response='Hello, my name is Stacy. ...', conversation_ended=False, ...)
    """

    def __init__(
        self,
        segmenter: SentenceSegmenter,
        pipeline: AnnotationPipeline,
        extractor: BagOfWordsFeatureExtractor,
        model: MaxentModel,
        responses: ResponseTable,
        terminal_intent: str = TERMINAL_INTENT,
    ):
        """
        Initialize the controller.

        Raises:
            UnknownIntentResponse: If a model intent has no response
        """
        responses.validate(model.labels)
        if terminal_intent not in model.labels:
            logger.warning(
                "Terminal intent %r is not a model intent; the conversation cannot end",
                terminal_intent,
            )
        self._segmenter = segmenter
        self._pipeline = pipeline
        self._extractor = extractor
        self._model = model
        self._responses = responses
        self._terminal_intent = terminal_intent
        self._state = ConversationState()

    @property
    def is_terminated(self) -> bool:
        return self._state.terminated

    @property
    def state(self) -> ConversationState:
        return self._state

    def classify_sentence(self, sentence: str) -> IntentResult:
        """Run one sentence through annotation, features and the model."""
        annotated = self._pipeline.annotate(sentence)
        features = self._extractor.extract(annotated.lemmas)
        return classify(self._model, features)

    def process_turn(self, user_text: str) -> TurnResult:
        """
        Answer one user turn.

        Args:
            user_text: Raw user input, possibly several sentences

        Returns:
            TurnResult with the joined responses and whether the conversation ended

        Raises:
            ConversationTerminated: If the conversation already ended
        """
        if self._state.terminated:
            raise ConversationTerminated()

        self._state.answer = ""
        responses: List[str] = []
        intents: List[str] = []
        ended = False

        for sentence in self._segmenter.segment(user_text):
            result = self.classify_sentence(sentence)
            intents.append(result.intent)
            responses.append(self._responses.respond(result.intent))
            if result.intent == self._terminal_intent:
                ended = True

        self._state.answer = RESPONSE_SEPARATOR.join(responses)
        if ended:
            self._state.terminated = True
            logger.info("Conversation complete")

        return TurnResult(
            response=self._state.answer,
            conversation_ended=ended,
            intents=tuple(intents),
        )
