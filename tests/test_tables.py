import pytest

from password_hashing.chaining_table import ChainingHashTable
from password_hashing.entry import Entry
from password_hashing.probing_table import CapacityExceededError, ProbingHashTable
from password_hashing.string_hasher import HashVariant, bucket_index

FULL = HashVariant.FULL_SEQUENTIAL
LEGACY = HashVariant.LEGACY_SAMPLED

WORDS = ["the", "of", "and", "about", "account", "apple", "banana", "cherry", "Aa", "BB"]


@pytest.mark.parametrize("table_cls", [ChainingHashTable, ProbingHashTable])
@pytest.mark.parametrize("variant", [FULL, LEGACY])
def test_no_false_negatives(table_cls, variant):
    table = table_cls(7, variant) if table_cls is ChainingHashTable else table_cls(50, variant)
    for rank, word in enumerate(WORDS, start=1):
        table.insert(word, rank)
        assert table.contains(word)
    for word in WORDS:
        assert word in table
    assert len(table) == len(WORDS)


@pytest.mark.parametrize("table_cls", [ChainingHashTable, ProbingHashTable])
def test_counter_starts_at_zero_and_never_decreases(table_cls):
    table = table_cls(10, FULL)
    assert table.comparison_count() == 0
    table.insert("about", 1)
    assert table.comparison_count() == 0  # вставка не рахується

    previous = 0
    for query in ["about", "missing", "about", "Aa", ""]:
        table.contains(query)
        assert table.comparison_count() >= previous
        previous = table.comparison_count()


@pytest.mark.parametrize("table_cls", [ChainingHashTable, ProbingHashTable])
def test_first_position_hit_costs_one(table_cls):
    table = table_cls(10, FULL)
    table.insert("about", 1)
    assert table.contains("about")
    assert table.comparison_count() == 1


@pytest.mark.parametrize("table_cls", [ChainingHashTable, ProbingHashTable])
def test_capacity_and_variant_are_read_only(table_cls):
    table = table_cls(10, LEGACY)
    assert table.capacity == 10
    assert table.variant is LEGACY
    with pytest.raises(AttributeError):
        table.capacity = 20


@pytest.mark.parametrize("table_cls", [ChainingHashTable, ProbingHashTable])
def test_rejects_non_positive_capacity(table_cls):
    with pytest.raises(ValueError):
        table_cls(0, FULL)


def test_chaining_collision_chain_costs():
    table = ChainingHashTable(10, FULL)
    table.insert("Aa", 1)
    table.insert("BB", 2)
    assert table.buckets[2] == [Entry("Aa", 1), Entry("BB", 2)]

    assert table.contains("BB")
    assert table.comparison_count() == 2
    assert table.contains("Aa")
    assert table.comparison_count() == 3
    # "C#" потрапляє в той самий кошик, але відсутній: переглядаємо весь ланцюжок
    assert not table.contains("C#")
    assert table.comparison_count() == 5


def test_chaining_keeps_duplicates():
    table = ChainingHashTable(10, FULL)
    table.insert("about", 1)
    table.insert("about", 2)
    index = bucket_index("about", FULL, 10)
    assert [entry.rank for entry in table.buckets[index]] == [1, 2]
    assert table.longest_chain() == 2
    assert table.load_factor() == pytest.approx(0.2)


def test_chaining_end_to_end_scenario():
    table = ChainingHashTable(10, FULL)
    for rank, word in enumerate(["apple", "banana", "cherry"], start=1):
        table.insert(word, rank)

    chain = table.buckets[bucket_index("banana", FULL, 10)]
    position = [entry.key for entry in chain].index("banana") + 1
    assert table.contains("banana")
    assert table.comparison_count() == position

    grape_chain = table.buckets[bucket_index("grape", FULL, 10)]
    assert not table.contains("grape")
    assert table.comparison_count() == position + len(grape_chain)


def test_chaining_absent_key_costs_its_chain_length():
    table = ChainingHashTable(1000, FULL)
    for rank, word in enumerate(WORDS, start=1):
        table.insert(word, rank)
    password = "9a$D#qW7!uX&Lv3zT"
    chain = table.buckets[bucket_index(password, FULL, 1000)]
    assert "about" in table
    before = table.comparison_count()
    assert not table.contains(password)
    assert table.comparison_count() - before == len(chain)


def test_probing_collision_uses_next_slot():
    table = ProbingHashTable(10, FULL)
    table.insert("Aa", 1)
    table.insert("BB", 2)
    assert table.slots[2] == Entry("Aa", 1)
    assert table.slots[3] == Entry("BB", 2)

    assert table.contains("BB")
    assert table.comparison_count() == 2
    # відсутній ключ з тим самим індексом зупиняється на порожній комірці 4
    assert not table.contains("C#")
    assert table.comparison_count() == 4


def test_probing_wraps_around():
    table = ProbingHashTable(10, FULL)
    table.insert("c", 1)  # ord("c") % 10 == 9
    table.insert("m", 2)  # теж 9, переходить на 0
    assert table.slots[9] == Entry("c", 1)
    assert table.slots[0] == Entry("m", 2)
    assert table.contains("m")
    assert table.comparison_count() == 2


def test_probing_empty_table_lookup_costs_nothing():
    table = ProbingHashTable(10, LEGACY)
    assert not table.contains("about")
    assert table.comparison_count() == 0


def test_probing_full_table():
    table = ProbingHashTable(3, FULL)
    for rank, word in enumerate(["a", "b", "c"], start=1):
        table.insert(word, rank)
    assert table.load_factor() == 1.0

    with pytest.raises(CapacityExceededError):
        table.insert("d", 4)

    # пошук відсутнього ключа завершується після обходу всіх комірок
    assert not table.contains("d")
    assert table.comparison_count() == 3


def test_both_tables_store_the_same_entry_type():
    chaining = ChainingHashTable(10, FULL)
    probing = ProbingHashTable(10, FULL)
    chaining.insert("about", 1)
    probing.insert("about", 1)
    index = bucket_index("about", FULL, 10)
    assert chaining.buckets[index][0] == probing.slots[index] == Entry("about", 1)
