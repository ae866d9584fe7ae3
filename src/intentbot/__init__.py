"""
intentbot: sentence-level intent classification chatbot.

Each user turn is split into sentences; every sentence is tokenized,
POS-tagged and lemmatized, turned into bag-of-words features and classified
by a maximum-entropy model into one intent with a canned response. The
conversation ends when a sentence is classified as conversation-complete.
"""

__version__ = "0.1.0"

from intentbot.annotation import (
    AnnotationPipeline,
    Lemmatizer,
    PosTagger,
    SentenceSegmenter,
    TaggedToken,
    Token,
    Tokenizer,
)
from intentbot.classification import (
    BagOfWordsFeatureExtractor,
    IntentResult,
    MaxentModel,
    TrainingOptions,
    TrainingSample,
    classify,
    train,
)
from intentbot.conversation import (
    ConversationController,
    ResponseTable,
    TurnResult,
)
from intentbot.container import ChatbotContainer
from intentbot.errors import (
    ConversationTerminated,
    IntentBotError,
    MalformedTrainingRecord,
    ResourceLoadFailure,
    TrainingDataInvalid,
    UnknownIntentResponse,
)

__all__ = [
    # Annotation
    "AnnotationPipeline",
    "Lemmatizer",
    "PosTagger",
    "SentenceSegmenter",
    "TaggedToken",
    "Token",
    "Tokenizer",
    # Classification
    "BagOfWordsFeatureExtractor",
    "IntentResult",
    "MaxentModel",
    "TrainingOptions",
    "TrainingSample",
    "classify",
    "train",
    # Conversation
    "ConversationController",
    "ResponseTable",
    "TurnResult",
    "ChatbotContainer",
    # Errors
    "ConversationTerminated",
    "IntentBotError",
    "MalformedTrainingRecord",
    "ResourceLoadFailure",
    "TrainingDataInvalid",
    "UnknownIntentResponse",
]
