import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple, Union

from password_hashing.chaining_table import ChainingHashTable
from password_hashing.probing_table import ProbingHashTable
from password_hashing.string_hasher import HashVariant

HashTable = Union[ChainingHashTable, ProbingHashTable]
TableFamily = Dict[str, HashTable]

DIGITS_REGEX = re.compile(r"\d")

# порядок таблиць задає і порядок запитів при лінивій перевірці
VARIANT_ORDER = (HashVariant.LEGACY_SAMPLED, HashVariant.FULL_SEQUENTIAL)


@dataclass
class StrengthReport:
    password: str
    base: str
    too_short: bool
    in_dictionary: bool
    comparisons: Dict[str, int] = field(default_factory=dict)
    spent: Dict[str, int] = field(default_factory=dict)

    @property
    def is_strong(self) -> bool:
        return not self.too_short and not self.in_dictionary


TABLE_KINDS = {
    "chaining": "Separate Chaining",
    "probing": "Linear Probing",
}


def table_label(kind: str, variant: HashVariant) -> str:
    """Підпис таблиці у звіті, напр. "Linear Probing with hash function (x31)"."""
    return f"{TABLE_KINDS[kind]} with hash function (x{variant.multiplier})"


def strip_digits(password: str) -> str:
    """Базова форма пароля: той самий рядок без жодної цифри."""
    return DIGITS_REGEX.sub("", password)


def build_tables(
    words: Iterable[Tuple[str, int]],
    chaining_capacity: int = 1000,
    probing_capacity: int = 20000,
) -> TableFamily:
    """
    Створює чотири таблиці (ланцюжки x37, x31, пробування x37, x31)
    і заповнює кожну всіма парами (слово, ранг) у порядку словника.
    """
    tables: TableFamily = {}
    for variant in VARIANT_ORDER:
        tables[table_label("chaining", variant)] = ChainingHashTable(chaining_capacity, variant)
    for variant in VARIANT_ORDER:
        tables[table_label("probing", variant)] = ProbingHashTable(probing_capacity, variant)

    for word, rank in words:
        for table in tables.values():
            table.insert(word, rank)
    return tables


def _is_in_dictionary(queries: List[str], tables: TableFamily, exhaustive: bool) -> bool:
    found = False
    for table in tables.values():
        for query in queries:
            if table.contains(query):
                found = True
                if not exhaustive:
                    return True
    return found


def check_password_strength(
    password: str,
    tables: TableFamily,
    min_length: int = 8,
    exhaustive: bool = False,
) -> StrengthReport:
    """
    Перевіряє пароль: довжина та входження у словник
    (сам пароль або пароль без цифр, у будь-якій з таблиць).

    exhaustive=False: зупиняємося на першому збігу, тож лічильники
    таблиць, до яких черга не дійшла, не змінюються.
    exhaustive=True: кожна таблиця отримує обидва запити.
    """
    if min_length <= 0:
        raise ValueError("min_length must be positive")

    before = {label: table.comparison_count() for label, table in tables.items()}
    base = strip_digits(password)
    in_dictionary = _is_in_dictionary([password, base], tables, exhaustive)

    comparisons = {label: table.comparison_count() for label, table in tables.items()}
    spent = {label: comparisons[label] - before[label] for label in tables}
    return StrengthReport(
        password=password,
        base=base,
        too_short=len(password) < min_length,
        in_dictionary=in_dictionary,
        comparisons=comparisons,
        spent=spent,
    )
