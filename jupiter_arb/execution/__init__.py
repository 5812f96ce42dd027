"""Transaction submission and confirmation."""

from .confirmation import ConfirmationResult, ConfirmationStatus, confirm_transaction, retry_delay
from .executor import ExecutionPolicy, ExecutionReport, TransactionExecutor

__all__ = [
    "ConfirmationResult", "ConfirmationStatus", "confirm_transaction", "retry_delay",
    "ExecutionPolicy", "ExecutionReport", "TransactionExecutor",
]
