"""
Application Entry Point

Wires configuration, the balance store and the account operations
together and runs the interactive menu on the console.
"""

import asyncio
import sys
from typing import Callable, Optional

from .config import LedgerConfig, get_config
from .storage import BalanceStoreInterface, InMemoryBalanceStore
from .operations import AccountOperations
from .sources import InputSource, ConsoleInputSource
from .menu import MenuLoop, EXIT_MESSAGE, EXIT_SUCCESS
from .logging_config import setup_logging, get_logger


EXIT_FAILURE = 1


class AccountLedger:
    """Account ledger with all components initialized"""

    def __init__(
        self,
        config: Optional[LedgerConfig] = None,
        store: Optional[BalanceStoreInterface] = None,
        reporter: Optional[Callable[[str], None]] = None
    ):
        self.config = config or get_config()
        self.store = store or InMemoryBalanceStore(self.config.initial_balance)
        self.operations = AccountOperations(
            self.store,
            reporter=reporter,
            currency_symbol=self.config.currency_symbol
        )

    def menu(self, input_source: InputSource,
             output: Callable[[str], None] = print) -> MenuLoop:
        """Create a menu loop bound to this ledger"""
        return MenuLoop(self.operations, input_source, output)


def run_menu(ledger: AccountLedger, input_source: Optional[InputSource] = None) -> int:
    """
    Run the menu to completion

    Returns:
        Exit status: 0 on a normal exit or Ctrl-C, 1 on an unexpected error
    """
    logger = get_logger("account_ledger.app")
    loop = ledger.menu(input_source or ConsoleInputSource())

    try:
        return asyncio.run(loop.run())
    except KeyboardInterrupt:
        print(f"\n{EXIT_MESSAGE}")
        return EXIT_SUCCESS
    except Exception as e:
        logger.exception("Menu loop failed")
        print(f"An error occurred: {e}", file=sys.stderr)
        return EXIT_FAILURE


def main() -> None:
    """Console script entry point"""
    config = get_config()
    setup_logging(
        config.log_level,
        log_format=config.log_format,
        log_file=config.log_file
    )
    sys.exit(run_menu(AccountLedger(config)))
