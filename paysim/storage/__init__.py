"""Transaction history storage"""

from .transaction_log import TransactionLog

__all__ = ['TransactionLog']
