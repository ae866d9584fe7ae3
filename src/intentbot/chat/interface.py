"""
Console chat interface.

Reads one line per turn, prints the agent's answer, and stops once the
conversation ends or input is closed.
"""

from typing import Callable

from intentbot.config.constants import AGENT_PREFIX, USER_PROMPT
from intentbot.conversation.controller import ConversationController


class ChatInterface:
    """
    Interactive REPL around a ConversationController.

    Example session:
        ##### You:  hello
        ##### Virtual Agent: Hello, my name is Stacy.  How may I help you today?
        ##### You:  thanks, bye
        ##### Virtual Agent: It was nice chatting with you. Goodbye!
    """

    def __init__(
        self,
        controller: ConversationController,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        """
        Initialize chat interface.

        Args:
            controller: Controller answering each turn
            input_fn: Prompted line reader (input by default)
            output_fn: Line writer (print by default)
        """
        self.controller = controller
        self._input = input_fn
        self._output = output_fn

    def start(self) -> int:
        """
        Run the REPL until the conversation ends.

        Returns:
            Number of turns answered
        """
        turns = 0
        while not self.controller.is_terminated:
            try:
                user_input = self._input(USER_PROMPT)
            except (EOFError, KeyboardInterrupt):
                self._output("")
                break

            result = self.controller.process_turn(user_input)
            self._output(AGENT_PREFIX + result.response)
            turns += 1
        return turns
