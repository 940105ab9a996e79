"""
Input Sources

An input source answers a prompt with the text the user typed. Operations
and the menu await it, so they can be driven by a terminal, a script or a
test without changes.
"""

from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Union
import inspect


class InputSource(ABC):
    """Abstract prompt/response collaborator"""

    @abstractmethod
    async def ask(self, prompt: str) -> str:
        """
        Show prompt and wait for the answer

        Raises:
            EOFError: When no more input is available
        """
        pass


class ConsoleInputSource(InputSource):
    """
    Reads answers from stdin

    The read blocks the event loop for as long as the user takes to answer.
    The menu is the only task on the loop, so nothing else waits on it.
    """

    async def ask(self, prompt: str) -> str:
        # Blocking read lets Ctrl-C interrupt it directly
        return input(prompt)


class CallbackInputSource(InputSource):
    """
    Adapts a plain or async callable taking the prompt and returning text
    """

    def __init__(self, callback: Callable[[str], Union[str, Awaitable[str]]]):
        self.callback = callback

    async def ask(self, prompt: str) -> str:
        answer = self.callback(prompt)
        if inspect.isawaitable(answer):
            answer = await answer
        return answer
