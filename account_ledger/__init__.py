"""
Account Ledger

A single-account balance ledger driven by an interactive text menu.
Balances are held as Decimal values with cent precision and a debit can
never drive the balance below zero.
"""

__version__ = "1.0.0"
