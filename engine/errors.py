'''
    File Name: errors.py
    Version: 1.0.0
    Date: 18/10/2026
    Author: Pablo Bartolomé Molina
    Description: Exceptions raised by the expense engine. None of them is
    fatal: each one is caught at the boundary that owns the recovery.
'''


class ExpenseError(ValueError):
    """Base class for all expense engine errors."""


class InvalidAmountError(ExpenseError):
    """Amount is non-numeric, zero or negative."""


class MalformedExpressionError(ExpenseError):
    """Keypad expression could not be parsed as a +/- sum of integers."""


class InvalidTransactionError(ExpenseError):
    """Unknown category id or unparsable date key."""


class CorruptDataError(ExpenseError):
    """Persisted blob is not a JSON list of transaction records."""
