"""Resource Ledger — диагностический учёт выделений движка.

Явно создаваемый и явно передаваемый объект (не глобальный singleton):
- acquire/release записей с меткой и размером (в цифрах)
- Статистика: активные записи, текущий и пиковый размер, счётчики, доля утечек
- scope(): контекст, освобождающий всё выделенное внутри
- Выход из `with ledger:` с незакрытыми записями логируется как WARNING

На корректность арифметики не влияет.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LedgerEntry:
    """Одна учтённая запись."""

    handle: int
    label: str
    size: int


@dataclass(frozen=True)
class LedgerStats:
    """Снимок статистики ledger."""

    active_entries: int
    current_size: int
    peak_size: int
    acquisitions: int
    releases: int

    @property
    def leak_ratio(self) -> float:
        """Доля неосвобождённых записей от всех выделений [0, 1]."""
        if self.acquisitions == 0:
            return 0.0
        return (self.acquisitions - self.releases) / self.acquisitions


class ResourceLedger:
    """Учёт выделений с детерминированным закрытием.

    Usage:
        with ResourceLedger() as ledger:
            handle = ledger.acquire("operand", 12)
            ...
            ledger.release(handle)
    """

    def __init__(self, name: str = "engine"):
        self.name = name
        self._entries: Dict[int, LedgerEntry] = {}
        self._next_handle = 1
        self._current_size = 0
        self._peak_size = 0
        self._acquisitions = 0
        self._releases = 0

    # -------------------------------------------------------------------------
    # Context management
    # -------------------------------------------------------------------------

    def __enter__(self) -> "ResourceLedger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        leaks = self.check_leaks()
        if leaks:
            logger.warning(
                "ledger %s closed with %d outstanding entries (%d digits)",
                self.name,
                len(leaks),
                sum(entry.size for entry in leaks),
            )

    @contextmanager
    def scope(self) -> Iterator["ResourceLedger"]:
        """Освобождает все записи, выделенные внутри блока."""
        opened = set(self._entries)
        try:
            yield self
        finally:
            for handle in [h for h in self._entries if h not in opened]:
                self.release(handle)

    # -------------------------------------------------------------------------
    # Accounting
    # -------------------------------------------------------------------------

    def acquire(self, label: str, size: int) -> int:
        """
        Учёт нового выделения.

        Args:
            label: метка для отчёта (например, "operand.left")
            size: размер в цифрах, >= 0

        Returns:
            handle для последующего release

        Raises:
            ValueError: если size < 0
        """
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")

        handle = self._next_handle
        self._next_handle += 1

        self._entries[handle] = LedgerEntry(handle=handle, label=label, size=size)
        self._current_size += size
        self._acquisitions += 1
        self._peak_size = max(self._peak_size, self._current_size)
        return handle

    def release(self, handle: int) -> None:
        """
        Освобождение записи.

        Raises:
            KeyError: если handle не выделен или уже освобождён
        """
        entry = self._entries.pop(handle, None)
        if entry is None:
            raise KeyError(f"handle {handle} is not an outstanding entry of ledger {self.name}")

        self._current_size -= entry.size
        self._releases += 1

    # -------------------------------------------------------------------------
    # Reporting
    # -------------------------------------------------------------------------

    def stats(self) -> LedgerStats:
        return LedgerStats(
            active_entries=len(self._entries),
            current_size=self._current_size,
            peak_size=self._peak_size,
            acquisitions=self._acquisitions,
            releases=self._releases,
        )

    def outstanding(self) -> tuple[LedgerEntry, ...]:
        return tuple(self._entries.values())

    def check_leaks(self) -> List[LedgerEntry]:
        """Список незакрытых записей (пустой, если утечек нет)."""
        return list(self._entries.values())

    def find(self, label: str) -> Optional[LedgerEntry]:
        """Первая незакрытая запись с данной меткой."""
        for entry in self._entries.values():
            if entry.label == label:
                return entry
        return None
