from password_hashing.chaining_table import ChainingHashTable
from password_hashing.entry import Entry
from password_hashing.probing_table import CapacityExceededError, ProbingHashTable
from password_hashing.string_hasher import HashVariant, bucket_index, string_hash

__all__ = [
    "CapacityExceededError",
    "ChainingHashTable",
    "Entry",
    "HashVariant",
    "ProbingHashTable",
    "bucket_index",
    "string_hash",
]
