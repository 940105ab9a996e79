"""
Account Operations Module

Implements the three user-facing operations: balance inquiry, credit and
debit. Amounts are requested from an input source, validated, and applied
to the balance store. Invalid input and insufficient funds are normal
outcomes reported to the user; neither raises out of an operation.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Callable, Optional

from .currency import InvalidAmountError, parse_amount, format_amount
from .storage import BalanceStoreInterface, NegativeBalanceError
from .sources import InputSource
from .logging_config import get_logger, log_action


CREDIT_PROMPT = "Enter credit amount: "
DEBIT_PROMPT = "Enter debit amount: "

INVALID_AMOUNT_MESSAGE = "Invalid amount. Please enter a positive number."
INSUFFICIENT_FUNDS_MESSAGE = "Insufficient funds for this debit."


class OperationOutcome(Enum):
    """How an operation ended"""
    BALANCE = "balance"                        # Inquiry
    CREDITED = "credited"
    DEBITED = "debited"
    INSUFFICIENT_FUNDS = "insufficient_funds"  # Debit denied
    INVALID_AMOUNT = "invalid_amount"          # Input rejected


@dataclass(frozen=True)
class OperationResult:
    """Outcome of one operation, as reported to the user"""
    outcome: OperationOutcome
    message: str
    balance: Decimal

    @property
    def changed_balance(self) -> bool:
        return self.outcome in (OperationOutcome.CREDITED, OperationOutcome.DEBITED)


def console_reporter(message: str) -> None:
    # Input errors print directly under the prompt
    if message == INVALID_AMOUNT_MESSAGE:
        print(message)
    else:
        print(f"\n{message}\n")


class AccountOperations:
    """
    Balance inquiry, credit and debit against a single balance store
    """

    def __init__(
        self,
        store: BalanceStoreInterface,
        reporter: Optional[Callable[[str], None]] = None,
        currency_symbol: str = "$"
    ):
        self.store = store
        self.reporter = reporter or console_reporter
        self.currency_symbol = currency_symbol
        self.logger = get_logger("account_ledger.operations")

    def inquire(self) -> OperationResult:
        """Report the current balance"""
        balance = self.store.read()
        return self._report(
            OperationOutcome.BALANCE,
            f"Current balance: {self._format(balance)}",
            balance
        )

    async def credit(self, amount_source: InputSource) -> OperationResult:
        """
        Add a user-entered amount to the balance

        Args:
            amount_source: Asked once with the credit prompt

        Returns:
            CREDITED with the new balance, or INVALID_AMOUNT with the
            balance unchanged
        """
        amount = await self._request_amount(amount_source, CREDIT_PROMPT, "credit")
        if amount is None:
            return self._report_invalid_amount()

        new_balance = self.store.apply_delta(amount)

        log_action(
            self.logger, "info", "Amount credited",
            action="credit", resource="balance",
            extra={"amount": str(amount), "new_balance": str(new_balance)}
        )
        return self._report(
            OperationOutcome.CREDITED,
            f"Amount credited. New balance: {self._format(new_balance)}",
            new_balance
        )

    async def debit(self, amount_source: InputSource) -> OperationResult:
        """
        Subtract a user-entered amount from the balance

        A debit of exactly the current balance is allowed and leaves zero.
        A debit larger than the balance is denied and changes nothing.

        Args:
            amount_source: Asked once with the debit prompt

        Returns:
            DEBITED, INSUFFICIENT_FUNDS or INVALID_AMOUNT
        """
        amount = await self._request_amount(amount_source, DEBIT_PROMPT, "debit")
        if amount is None:
            return self._report_invalid_amount()

        try:
            new_balance = self.store.apply_delta(-amount)
        except NegativeBalanceError as e:
            log_action(
                self.logger, "warning", "Debit denied: insufficient funds",
                action="debit", resource="balance",
                extra={"amount": str(amount), "balance": str(e.balance)}
            )
            return self._report(
                OperationOutcome.INSUFFICIENT_FUNDS,
                INSUFFICIENT_FUNDS_MESSAGE,
                e.balance
            )

        log_action(
            self.logger, "info", "Amount debited",
            action="debit", resource="balance",
            extra={"amount": str(amount), "new_balance": str(new_balance)}
        )
        return self._report(
            OperationOutcome.DEBITED,
            f"Amount debited. New balance: {self._format(new_balance)}",
            new_balance
        )

    async def _request_amount(self, amount_source: InputSource, prompt: str,
                              action: str) -> Optional[Decimal]:
        """Ask for an amount; None when the answer is not a positive number"""
        raw = await amount_source.ask(prompt)
        try:
            return parse_amount(raw)
        except InvalidAmountError as e:
            log_action(
                self.logger, "warning", f"Rejected {action} amount: {e}",
                action=action, resource="balance",
                extra={"input": raw}
            )
            return None

    def _report_invalid_amount(self) -> OperationResult:
        return self._report(
            OperationOutcome.INVALID_AMOUNT,
            INVALID_AMOUNT_MESSAGE,
            self.store.read()
        )

    def _report(self, outcome: OperationOutcome, message: str,
                balance: Decimal) -> OperationResult:
        self.reporter(message)
        return OperationResult(outcome=outcome, message=message, balance=balance)

    def _format(self, amount: Decimal) -> str:
        return format_amount(amount, self.currency_symbol)
