"""Loader for dictionaries stored as sharded term/index records."""

import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, Optional, Tuple, Union

from vecdump.dictionary.base import BaseDictionaryLoader, Dictionary
from vecdump.dictionary.exceptions import DictionaryFormatError
from vecdump.dictionary.factory import register_loader
from vecdump.dictionary.records import DictionaryRecord, iter_shard_records

logger = logging.getLogger(__name__)

Record = Union[DictionaryRecord, Tuple[str, int]]
RecordSource = Callable[[str], Iterable[Record]]


def build_dictionary(records: Iterable[Record], max_size: Optional[int] = None) -> Dictionary:
    """
    Build a dictionary from (term, index) records.

    A term seen more than once keeps its last index. The result has
    ``max(index) + 1`` slots; indices nobody claims stay ``None``.

    Raises:
        IndexError: If a record carries a negative index
        DictionaryFormatError: If the result would exceed ``max_size`` slots
    """
    term_to_index: Dict[str, int] = {}
    for record in records:
        if isinstance(record, DictionaryRecord):
            term, index = record.term, record.index
        else:
            term, index = record[0], record[1]
        term_to_index[term] = index

    size = max(term_to_index.values(), default=-1) + 1
    if max_size is not None and size > max_size:
        raise DictionaryFormatError(
            f"Dictionary index {size - 1} exceeds the limit of {max_size} slots"
        )
    dictionary: Dictionary = [None] * max(size, len(term_to_index))
    for term, index in term_to_index.items():
        if index < 0:
            raise IndexError(f"Negative index {index} for term {term!r}")
        dictionary[index] = term

    return dictionary


@register_loader("sharded")
class ShardedDictionaryLoader(BaseDictionaryLoader):
    """
    Load a dictionary from every shard matching a glob pattern.

    Usage:
        loader = ShardedDictionaryLoader()
        dictionary = loader.load("output/dictionary.file-*")

        # Or plug in another record store
        loader = ShardedDictionaryLoader(record_source=my_store.iterate)
    """

    GLOB_CHARS = frozenset("*?[")
    DEFAULT_MAX_SIZE = 1 << 26

    def __init__(
        self,
        record_source: Optional[RecordSource] = None,
        max_size: Optional[int] = DEFAULT_MAX_SIZE,
    ):
        """
        Args:
            record_source: Callable mapping a pattern to an iterable of
                records. Defaults to reading binary shard files.
            max_size: Largest dictionary to allocate (None for no limit)
        """
        self.record_source = record_source or iter_shard_records
        self.max_size = max_size

    def can_load(self, source: Union[str, Path]) -> bool:
        text = str(source)
        if Path(text).is_dir():
            return True
        return bool(self.GLOB_CHARS.intersection(text))

    def load(self, source: Union[str, Path]) -> Dictionary:
        pattern = str(source)
        if Path(pattern).is_dir():
            pattern = str(Path(pattern) / "*")

        dictionary = build_dictionary(self.record_source(pattern), self.max_size)
        assigned = sum(1 for term in dictionary if term is not None)
        logger.info(f"Loaded dictionary: {len(dictionary)} slots ({assigned} terms) from {pattern}")
        return dictionary
