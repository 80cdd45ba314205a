"""Loader for flat, tab-separated term dictionary files."""

import logging
import re
from pathlib import Path
from typing import List, TextIO, Tuple, Union

from vecdump.dictionary.base import BaseDictionaryLoader, Dictionary
from vecdump.dictionary.exceptions import DictionaryFormatError
from vecdump.dictionary.factory import register_loader

logger = logging.getLogger(__name__)

TAB_PATTERN = re.compile("\t")
# plain decimal integers only: no padding, no underscores
INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def split_fields(line: str) -> List[str]:
    """Split a row on tabs, dropping trailing empty fields."""
    fields = TAB_PATTERN.split(line)
    while fields and not fields[-1]:
        fields.pop()
    return fields


@register_loader("text")
class TextDictionaryLoader(BaseDictionaryLoader):
    """
    Load a dictionary file of the form::

        <entry count>
        <term>\\t<doc freq>\\t<index>
        ...

    Lines starting with ``#`` are comments. Rows with fewer than three
    fields are skipped. A repeated index keeps the term from the later row.
    """

    COMMENT_PREFIX = "#"
    MIN_FIELDS = 3

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def can_load(self, source: Union[str, Path]) -> bool:
        return Path(source).is_file()

    def load(self, source: Union[str, Path]) -> Dictionary:
        path = Path(source)

        with open(path, "r", encoding=self.encoding) as f:
            try:
                result, skipped = self._parse_lines(f, path)
            except UnicodeDecodeError as e:
                raise DictionaryFormatError(f"Undecodable text in {path}: {e.reason}") from e

        logger.info(f"Loaded dictionary: {len(result)} slots from {path} ({skipped} rows skipped)")
        return result

    def _parse_lines(self, f: TextIO, path: Path) -> Tuple[Dictionary, int]:
        lines = (line.rstrip("\r\n") for line in f)

        header = next(lines, None)
        if header is None:
            raise DictionaryFormatError(f"Empty dictionary file: {path}")
        num_entries = self._parse_int(header, path, "entry count")
        if num_entries < 0:
            raise DictionaryFormatError(f"Negative entry count in {path}: {num_entries}")
        result: Dictionary = [None] * num_entries

        skipped = 0
        for line_no, line in enumerate(lines, start=2):
            if line.startswith(self.COMMENT_PREFIX):
                continue
            fields = split_fields(line)
            if len(fields) < self.MIN_FIELDS:
                skipped += 1
                logger.debug(f"Skipping malformed row {line_no} in {path}")
                continue

            # fields[1] is the document frequency
            index = self._parse_int(fields[2], path, f"index on line {line_no}")
            if not 0 <= index < num_entries:
                raise IndexError(
                    f"Index {index} on line {line_no} out of range "
                    f"for {num_entries} entries in {path}"
                )
            result[index] = fields[0]

        return result, skipped

    @staticmethod
    def _parse_int(token: str, path: Path, what: str) -> int:
        if not INT_PATTERN.fullmatch(token):
            raise DictionaryFormatError(f"Invalid {what} in {path}: {token!r}")
        return int(token)
