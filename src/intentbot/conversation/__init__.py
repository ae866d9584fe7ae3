"""
Conversation package: turn handling and canned responses.

Components:
    - ResponseTable: Intent -> response text
    - ConversationController: Per-turn pipeline and end-of-conversation state
"""

from intentbot.conversation.responses import ResponseTable
from intentbot.conversation.controller import (
    ConversationController,
    ConversationState,
    TurnResult,
)

__all__ = [
    "ResponseTable",
    "ConversationController",
    "ConversationState",
    "TurnResult",
]
