"""
Error types raised while bootstrapping and running the chatbot.

Startup errors (ResourceLoadFailure, TrainingDataInvalid,
UnknownIntentResponse) are fatal: no controller is built when one of them is
raised. MalformedTrainingRecord is recoverable and only ever seen by the
corpus reader, which logs and skips the record.
"""

from typing import Any, Dict, Iterable, Mapping, Optional


class IntentBotError(Exception):
    """Base error for the intentbot package."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize the error.

        Args:
            message: Human-readable error message
            details: Additional structured details
        """
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ResourceLoadFailure(IntentBotError):
    """The annotator pipeline or one of its components could not be loaded."""

    def __init__(self, failures: Mapping[str, str]):
        """
        Initialize with every failed pipeline or component.

        Args:
            failures: Pipeline or component name -> reason it failed to load
        """
        self.failures = dict(failures)
        names = ", ".join(sorted(self.failures))
        super().__init__(
            f"Not all annotator models were loaded: {names}",
            details={"failures": self.failures},
        )


class TrainingDataInvalid(IntentBotError):
    """The training corpus cannot produce a classifier."""


class MalformedTrainingRecord(IntentBotError):
    """A single corpus record is missing its label or its text."""

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        super().__init__(
            f"Malformed training record on line {line_number}: {reason}",
            details={"line_number": line_number, "line": line},
        )


class UnknownIntentResponse(IntentBotError):
    """The classifier can produce intents that have no registered response."""

    def __init__(self, missing: Iterable[str]):
        self.missing = tuple(missing)
        super().__init__(
            f"No response registered for intents: {', '.join(self.missing)}",
            details={"missing": list(self.missing)},
        )


class ConversationTerminated(IntentBotError):
    """A turn was submitted after the conversation ended."""

    def __init__(self):
        super().__init__("Conversation has already ended")
