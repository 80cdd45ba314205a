"""vecdump - text renderings of sparse vectors and term dictionary loading."""
from vecdump.core.types import SparseVector
from vecdump.formatters import to_csv, to_json, write_csv
from vecdump.dictionary import DictionaryLoaderFactory, ShardedDictionaryLoader, TextDictionaryLoader

__version__ = "0.1.0"

__all__ = [
    "SparseVector",
    "to_csv",
    "to_json",
    "write_csv",
    "DictionaryLoaderFactory",
    "ShardedDictionaryLoader",
    "TextDictionaryLoader",
]
