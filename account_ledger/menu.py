"""
Interactive Menu Module

Displays the four-choice menu, reads the user's choice from an input
source and dispatches to the account operations until the user exits.
"""

from enum import Enum
from typing import Callable

from .operations import AccountOperations
from .sources import InputSource
from .logging_config import get_logger


SEPARATOR = "--------------------------------"
MENU_LINES = (
    SEPARATOR,
    "Account Management System",
    "1. View Balance",
    "2. Credit Account",
    "3. Debit Account",
    "4. Exit",
    SEPARATOR,
)
CHOICE_PROMPT = "Enter your choice (1-4): "
INVALID_CHOICE_MESSAGE = "Invalid choice, please select 1-4."
EXIT_MESSAGE = "Exiting the program. Goodbye!"

EXIT_SUCCESS = 0


class MenuChoice(Enum):
    """Menu entries keyed by what the user types"""
    VIEW_BALANCE = "1"
    CREDIT = "2"
    DEBIT = "3"
    EXIT = "4"


class MenuLoop:
    """
    Menu driver

    The same input source answers both the menu prompt and the amount
    prompts of credit and debit.
    """

    def __init__(
        self,
        operations: AccountOperations,
        input_source: InputSource,
        output: Callable[[str], None] = print
    ):
        self.operations = operations
        self.input_source = input_source
        self.output = output
        self.logger = get_logger("account_ledger.menu")

    def render_menu(self) -> None:
        for line in MENU_LINES:
            self.output(line)

    async def handle_choice(self, raw_choice: str) -> bool:
        """
        Run the operation for one choice

        Returns:
            False when the user chose to exit, True otherwise
        """
        try:
            if isinstance(raw_choice, str):
                raw_choice = raw_choice.strip()
            choice = MenuChoice(raw_choice)
        except ValueError:
            self.logger.debug(f"Invalid menu choice: {raw_choice!r}")
            self.output(f"\n{INVALID_CHOICE_MESSAGE}\n")
            return True

        if choice is MenuChoice.VIEW_BALANCE:
            self.operations.inquire()
        elif choice is MenuChoice.CREDIT:
            await self.operations.credit(self.input_source)
        elif choice is MenuChoice.DEBIT:
            await self.operations.debit(self.input_source)
        else:
            return False
        return True

    async def run(self) -> int:
        """
        Loop until the user exits or input runs out

        Returns:
            Process exit status
        """
        keep_running = True
        while keep_running:
            self.render_menu()
            try:
                raw_choice = await self.input_source.ask(CHOICE_PROMPT)
                keep_running = await self.handle_choice(raw_choice)
            except EOFError:
                self.logger.info("Input closed, leaving menu")
                keep_running = False

        self.output(f"\n{EXIT_MESSAGE}")
        return EXIT_SUCCESS
