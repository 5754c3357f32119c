from enum import Enum


INT32_MIN = -(1 << 31)
UINT32_RANGE = 1 << 32


class HashVariant(Enum):
    """
    Варіант рядкової хеш-функції.
    LEGACY_SAMPLED: стара схема, множник 37, лише кожен skip-й символ.
    FULL_SEQUENTIAL: сучасна схема, множник 31, всі символи по черзі.
    """

    LEGACY_SAMPLED = "legacy"
    FULL_SEQUENTIAL = "full"

    @property
    def multiplier(self) -> int:
        return 37 if self is HashVariant.LEGACY_SAMPLED else 31


def to_int32(value: int) -> int:
    """Зводить ціле число до 32-бітного знакового (з переповненням, як у машинному слові)."""
    return (value - INT32_MIN) % UINT32_RANGE + INT32_MIN


def _sample_step(key: str, variant: HashVariant) -> int:
    if variant is HashVariant.LEGACY_SAMPLED:
        return max(1, len(key) // 8)
    return 1


def string_hash(key: str, variant: HashVariant) -> int:
    """
    Обчислює 32-бітний знаковий хеш рядка.
    Переповнення навмисне: результат має збігатися біт у біт
    з класичним hashCode для тих самих слів.
    """
    multiplier = variant.multiplier
    step = _sample_step(key, variant)
    h = 0
    for i in range(0, len(key), step):
        h = to_int32(h * multiplier + ord(key[i]))
    return h


def bucket_index(key: str, variant: HashVariant, capacity: int) -> int:
    """
    Індекс у таблиці: abs(h) mod capacity.
    abs(INT32_MIN) у Python не переповнюється, тож індекс завжди в [0, capacity).
    """
    if capacity <= 0:
        raise ValueError("capacity must be positive")
    return abs(string_hash(key, variant)) % capacity
