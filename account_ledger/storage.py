"""
Balance Storage Module

Provides the abstract balance store interface and an in-memory
implementation. The store is the only component that mutates the balance.
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from decimal import Decimal
import threading

from .currency import to_cents, add_amounts


DEFAULT_INITIAL_BALANCE = Decimal('1000.00')


class NegativeBalanceError(ValueError):
    """Raised when applying a delta would leave the balance below zero"""

    def __init__(self, balance: Decimal, delta: Decimal):
        self.balance = balance
        self.delta = delta
        super().__init__(
            f"Applying {delta} to balance {balance} would make it negative"
        )


class BalanceStoreInterface(ABC):
    """Abstract interface for balance stores"""

    @abstractmethod
    def read(self) -> Decimal:
        """Return the current balance"""
        pass

    @abstractmethod
    def write(self, new_balance: Decimal) -> None:
        """
        Replace the stored balance

        No validation is done here; callers that need the non-negative
        invariant enforced use apply_delta.
        """
        pass

    @contextmanager
    def locked(self):
        """Context manager around a read-modify-write (default no-op)"""
        yield

    def apply_delta(self, delta: Decimal) -> Decimal:
        """
        Add delta to the balance in one step

        Args:
            delta: Signed amount; negative for debits

        Returns:
            The new balance

        Raises:
            NegativeBalanceError: If the result would be below zero. The
                stored balance is left untouched.
        """
        delta = to_cents(delta)
        with self.locked():
            current = self.read()
            new_balance = add_amounts(current, delta)
            if new_balance < 0:
                raise NegativeBalanceError(current, delta)
            self.write(new_balance)
            return new_balance


class InMemoryBalanceStore(BalanceStoreInterface):
    """Volatile balance store; lives as long as the owning application"""

    def __init__(self, initial_balance: Decimal = DEFAULT_INITIAL_BALANCE):
        initial_balance = to_cents(initial_balance)
        if initial_balance < 0:
            raise ValueError("Initial balance must not be negative")
        self._balance = initial_balance
        self._lock = threading.RLock()

    def read(self) -> Decimal:
        with self._lock:
            return self._balance

    def write(self, new_balance: Decimal) -> None:
        with self._lock:
            self._balance = to_cents(new_balance)

    @contextmanager
    def locked(self):
        with self._lock:
            yield
