"""Term dictionary loaders - flat text files and sharded record stores."""
from vecdump.dictionary.base import BaseDictionaryLoader, Dictionary
from vecdump.dictionary.exceptions import (
    DictionaryError,
    DictionaryFormatError,
    UnsupportedDictionarySourceError,
)
from vecdump.dictionary.factory import (
    DictionaryLoaderFactory,
    register_loader,
    get_registered_loaders,
)
from vecdump.dictionary.records import (
    DictionaryRecord,
    read_shard,
    write_shard,
    iter_shard_records,
)

# Import loaders to trigger registration
# Plain files first, patterns and directories fall through to the sharded loader
from vecdump.dictionary.text_loader import TextDictionaryLoader
from vecdump.dictionary.sharded_loader import ShardedDictionaryLoader, build_dictionary

__all__ = [
    "BaseDictionaryLoader",
    "Dictionary",
    "DictionaryError",
    "DictionaryFormatError",
    "UnsupportedDictionarySourceError",
    "DictionaryLoaderFactory",
    "register_loader",
    "get_registered_loaders",
    "DictionaryRecord",
    "read_shard",
    "write_shard",
    "iter_shard_records",
    "TextDictionaryLoader",
    "ShardedDictionaryLoader",
    "build_dictionary",
]
