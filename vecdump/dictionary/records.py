"""Binary shard files holding dictionary records.

Shard layout: the magic bytes ``VDS1`` followed by records of

    uint32 (big-endian)  length of the UTF-8 encoded term
    bytes                the term
    int32  (big-endian)  feature index
    int64  (big-endian)  document frequency
"""

import glob
import logging
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Union

from vecdump.dictionary.exceptions import DictionaryFormatError

logger = logging.getLogger(__name__)

MAGIC = b"VDS1"
_LENGTH = struct.Struct(">I")
_TAIL = struct.Struct(">iq")


@dataclass(frozen=True)
class DictionaryRecord:
    """
    One dictionary entry as stored in a shard.

    Attributes:
        term: The feature string
        index: Feature index in the vector space
        doc_frequency: Number of documents containing the term (unused
            when building a dictionary)
    """
    term: str
    index: int
    doc_frequency: int = 0


def write_shard(path: Union[str, Path], records: Iterable[DictionaryRecord]) -> int:
    """
    Write records to a shard file.

    Returns:
        Number of records written
    """
    count = 0
    with open(path, "wb") as f:
        f.write(MAGIC)
        for record in records:
            term = record.term.encode("utf-8")
            f.write(_LENGTH.pack(len(term)))
            f.write(term)
            f.write(_TAIL.pack(record.index, record.doc_frequency))
            count += 1
    logger.debug(f"Wrote {count} records to {path}")
    return count


def read_shard(path: Union[str, Path]) -> Iterator[DictionaryRecord]:
    """
    Yield the records of one shard file in stored order.

    Raises:
        DictionaryFormatError: On a bad header or a truncated record
    """
    count = 0
    with open(path, "rb") as f:
        if f.read(len(MAGIC)) != MAGIC:
            raise DictionaryFormatError(f"Not a dictionary shard: {path}")

        while True:
            head = f.read(_LENGTH.size)
            if not head:
                break
            if len(head) < _LENGTH.size:
                raise DictionaryFormatError(f"Truncated record header in {path}")
            (length,) = _LENGTH.unpack(head)

            body = f.read(length + _TAIL.size)
            if len(body) < length + _TAIL.size:
                raise DictionaryFormatError(f"Truncated record in {path}")
            index, doc_frequency = _TAIL.unpack(body[length:])
            try:
                term = body[:length].decode("utf-8")
            except UnicodeDecodeError as e:
                raise DictionaryFormatError(f"Undecodable term in {path}") from e

            count += 1
            yield DictionaryRecord(term=term, index=index, doc_frequency=doc_frequency)

    logger.debug(f"Read {count} records from {path}")


def iter_shard_records(pattern: Union[str, Path]) -> Iterator[DictionaryRecord]:
    """
    Yield records from every shard matching a glob pattern.

    Shards are visited in sorted path order.

    Raises:
        FileNotFoundError: If no file matches the pattern
    """
    paths = sorted(p for p in glob.glob(str(pattern)) if Path(p).is_file())
    if not paths:
        raise FileNotFoundError(f"No dictionary shards match: {pattern}")

    logger.debug(f"Found {len(paths)} shards for {pattern}")
    for path in paths:
        yield from read_shard(path)
