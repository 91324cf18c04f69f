"""Diagnostics — необязательный учёт ресурсов движка.

ResourceLedger создаётся и передаётся явно; глобального состояния нет.
"""

from .resource_ledger import LedgerEntry, LedgerStats, ResourceLedger

__all__ = [
    "LedgerEntry",
    "LedgerStats",
    "ResourceLedger",
]
