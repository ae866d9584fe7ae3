"""Intent -> canned response table."""

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from intentbot.errors import UnknownIntentResponse


class ResponseTable(Mapping[str, str]):
    """
    Immutable mapping from intent to response text.

    Example:
        >>> table = ResponseTable({"greeting": "Hello!"})
        >>> table.validate(["greeting", "farewell"])
        Traceback (most recent call last):
        ...
        intentbot.errors.UnknownIntentResponse: No response registered for intents: farewell
    """

    def __init__(self, responses: Mapping[str, str]):
        self._responses = MappingProxyType(dict(responses))

    def __getitem__(self, intent: str) -> str:
        return self._responses[intent]

    def __iter__(self) -> Iterator[str]:
        return iter(self._responses)

    def __len__(self) -> int:
        return len(self._responses)

    def validate(self, intents: Iterable[str]) -> None:
        """
        Check that every intent has a response.

        Raises:
            UnknownIntentResponse: Listing every intent without one
        """
        missing = [intent for intent in intents if intent not in self._responses]
        if missing:
            raise UnknownIntentResponse(missing)

    def respond(self, intent: str) -> str:
        try:
            return self._responses[intent]
        except KeyError:
            raise UnknownIntentResponse([intent]) from None

    def __repr__(self) -> str:
        return f"ResponseTable(intents={list(self._responses)})"
