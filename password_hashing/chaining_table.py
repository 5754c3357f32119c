import logging
from typing import List

from password_hashing.entry import Entry
from password_hashing.string_hasher import HashVariant, bucket_index

logger = logging.getLogger(__name__)


class ChainingHashTable:
    """
    Хеш-таблиця з ланцюжками (separate chaining).
    capacity: кількість кошиків, фіксована; таблиця ніколи не розширюється,
    тому коефіцієнт заповнення росте разом зі словником.
    """

    def __init__(self, capacity: int, variant: HashVariant):
        if capacity <= 0:
            raise ValueError("capacity must be positive")

        self._capacity = capacity
        self._variant = variant
        self.buckets: List[List[Entry]] = [[] for _ in range(capacity)]
        self._size = 0
        self._comparisons = 0
        logger.debug("Created chaining table: capacity=%d variant=%s", capacity, variant.value)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def variant(self) -> HashVariant:
        return self._variant

    def _index(self, key: str) -> int:
        return bucket_index(key, self._variant, self._capacity)

    def insert(self, key: str, rank: int) -> None:
        """Додає запис у кінець ланцюжка. Дублікати не відкидаються."""
        self.buckets[self._index(key)].append(Entry(key, rank))
        self._size += 1

    def contains(self, key: str) -> bool:
        """
        Шукає ключ у його ланцюжку.
        Кожен переглянутий запис рахується як одне порівняння,
        включно з тим, на якому ключ знайдено.
        """
        for entry in self.buckets[self._index(key)]:
            self._comparisons += 1
            if entry.key == key:
                return True
        return False

    def __contains__(self, key: str) -> bool:
        return self.contains(key)

    def comparison_count(self) -> int:
        return self._comparisons

    def __len__(self) -> int:
        return self._size

    def load_factor(self) -> float:
        return self._size / self._capacity

    def longest_chain(self) -> int:
        return max(len(bucket) for bucket in self.buckets)
