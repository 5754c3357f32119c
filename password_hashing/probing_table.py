import logging
from typing import List, Optional

from password_hashing.entry import Entry
from password_hashing.string_hasher import HashVariant, bucket_index

logger = logging.getLogger(__name__)


class CapacityExceededError(RuntimeError):
    """Вставка у повністю заповнену таблицю з лінійним пробуванням."""


class ProbingHashTable:
    """
    Хеш-таблиця з лінійним пробуванням (open addressing).
    Видалень немає, тому порожня комірка під час пошуку доводить відсутність ключа.
    capacity має з запасом перевищувати кількість слів у словнику.
    """

    def __init__(self, capacity: int, variant: HashVariant):
        if capacity <= 0:
            raise ValueError("capacity must be positive")

        self._capacity = capacity
        self._variant = variant
        self.slots: List[Optional[Entry]] = [None] * capacity
        self._size = 0
        self._comparisons = 0
        logger.debug("Created probing table: capacity=%d variant=%s", capacity, variant.value)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def variant(self) -> HashVariant:
        return self._variant

    def insert(self, key: str, rank: int) -> None:
        """
        Кладе запис у першу вільну комірку, починаючи з хеш-індексу.
        Порівняння під час вставки не рахуються.
        """
        if self._size >= self._capacity:
            raise CapacityExceededError(
                f"probing table is full ({self._capacity} slots), cannot insert {key!r}"
            )

        index = bucket_index(key, self._variant, self._capacity)
        while self.slots[index] is not None:
            index = (index + 1) % self._capacity
        self.slots[index] = Entry(key, rank)
        self._size += 1

    def contains(self, key: str) -> bool:
        """
        Йдемо від хеш-індексу вперед (з переходом через кінець),
        доки не натрапимо на порожню комірку.
        Кожна зайнята комірка на шляху це одне порівняння.
        """
        index = bucket_index(key, self._variant, self._capacity)
        # на повній таблиці порожньої комірки немає: обходимо кожну не більше разу
        for _ in range(self._capacity):
            entry = self.slots[index]
            if entry is None:
                return False
            self._comparisons += 1
            if entry.key == key:
                return True
            index = (index + 1) % self._capacity
        return False

    def __contains__(self, key: str) -> bool:
        return self.contains(key)

    def comparison_count(self) -> int:
        return self._comparisons

    def __len__(self) -> int:
        return self._size

    def load_factor(self) -> float:
        return self._size / self._capacity
