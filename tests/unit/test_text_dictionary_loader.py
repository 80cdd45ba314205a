"""Tests for the flat text dictionary loader."""

import pytest
from pathlib import Path

from vecdump.dictionary.text_loader import TextDictionaryLoader, split_fields
from vecdump.dictionary.exceptions import DictionaryFormatError


def write_dictionary(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


class TestTextDictionaryLoader:
    """Tests for TextDictionaryLoader."""

    def test_load_well_formed_file(self, tmp_path):
        """Should assign every slot of a well-formed file."""
        # Arrange
        dict_file = write_dictionary(
            tmp_path / "dictionary.txt",
            "3\napple\t10\t0\nbanana\t4\t1\ncherry\t7\t2\n",
        )
        loader = TextDictionaryLoader()

        # Act
        dictionary = loader.load(dict_file)

        # Assert
        assert dictionary == ["apple", "banana", "cherry"]

    def test_reload_gives_equal_result(self, tmp_path):
        """Should produce equal lists on repeated loads."""
        dict_file = write_dictionary(
            tmp_path / "dictionary.txt",
            "3\nc\t1\t2\na\t1\t0\nb\t1\t1\n",
        )
        loader = TextDictionaryLoader()

        assert loader.load(dict_file) == loader.load(dict_file)

    def test_skips_malformed_rows(self, tmp_path):
        """Should skip rows with fewer than three fields."""
        # Arrange
        dict_file = write_dictionary(
            tmp_path / "dictionary.txt",
            "2\napple\t3\t0\nbanana\t1\n",
        )

        # Act
        dictionary = TextDictionaryLoader().load(dict_file)

        # Assert
        assert len(dictionary) == 2
        assert dictionary == ["apple", None]

    def test_skips_comment_rows(self, tmp_path):
        """Should ignore lines starting with '#'."""
        dict_file = write_dictionary(
            tmp_path / "dictionary.txt",
            "2\n#v1\n#a\t1\t1\napple\t3\t0\nbanana\t1\t1\n",
        )

        assert TextDictionaryLoader().load(dict_file) == ["apple", "banana"]

    def test_bad_header_is_fatal(self, tmp_path):
        """Should fail on a non-numeric entry count."""
        dict_file = write_dictionary(tmp_path / "dictionary.txt", "abc\napple\t3\t0\n")

        with pytest.raises(DictionaryFormatError) as exc_info:
            TextDictionaryLoader().load(dict_file)

        assert "entry count" in str(exc_info.value)

    def test_bad_header_is_value_error(self, tmp_path):
        """Should raise an error that is also a ValueError."""
        dict_file = write_dictionary(tmp_path / "dictionary.txt", "abc\n")

        with pytest.raises(ValueError):
            TextDictionaryLoader().load(dict_file)

    def test_empty_file(self, tmp_path):
        """Should fail on a file without a header."""
        dict_file = write_dictionary(tmp_path / "dictionary.txt", "")

        with pytest.raises(DictionaryFormatError):
            TextDictionaryLoader().load(dict_file)

    def test_bad_index_is_fatal(self, tmp_path):
        """Should fail on a non-numeric index field."""
        dict_file = write_dictionary(tmp_path / "dictionary.txt", "1\napple\t3\tzero\n")

        with pytest.raises(DictionaryFormatError):
            TextDictionaryLoader().load(dict_file)

    def test_last_writer_wins(self, tmp_path):
        """Should keep the later term for a repeated index."""
        # Arrange
        dict_file = write_dictionary(
            tmp_path / "dictionary.txt",
            "1\napple\t3\t0\napricot\t2\t0\n",
        )

        # Act
        dictionary = TextDictionaryLoader().load(dict_file)

        # Assert
        assert dictionary == ["apricot"]

    def test_index_out_of_range(self, tmp_path):
        """Should fail when an index exceeds the entry count."""
        dict_file = write_dictionary(tmp_path / "dictionary.txt", "1\napple\t3\t5\n")

        with pytest.raises(IndexError):
            TextDictionaryLoader().load(dict_file)

    def test_negative_index(self, tmp_path):
        """Should fail on a negative index instead of wrapping around."""
        dict_file = write_dictionary(tmp_path / "dictionary.txt", "2\napple\t3\t-1\n")

        with pytest.raises(IndexError):
            TextDictionaryLoader().load(dict_file)

    def test_unassigned_slots_stay_none(self, tmp_path):
        """Should leave never-mentioned indices unset."""
        dict_file = write_dictionary(tmp_path / "dictionary.txt", "3\nb\t1\t1\n")

        assert TextDictionaryLoader().load(dict_file) == [None, "b", None]

    def test_windows_line_endings(self, tmp_path):
        """Should not keep carriage returns in terms or indices."""
        dict_file = tmp_path / "dictionary.txt"
        dict_file.write_bytes(b"1\r\napple\t3\t0\r\n")

        assert TextDictionaryLoader().load(dict_file) == ["apple"]

    def test_terms_may_contain_spaces(self, tmp_path):
        """Should split only on tabs."""
        dict_file = write_dictionary(tmp_path / "dictionary.txt", "1\nnew york\t3\t0\n")

        assert TextDictionaryLoader().load(dict_file) == ["new york"]

    @pytest.mark.parametrize("header", ["1_0", " 2 ", "\t3", "2.0", "+"])
    def test_header_must_be_plain_integer(self, tmp_path, header):
        """Should reject headers int() would otherwise accept or pad."""
        dict_file = write_dictionary(tmp_path / "dictionary.txt", f"{header}\na\t1\t0\n")

        with pytest.raises(DictionaryFormatError):
            TextDictionaryLoader().load(dict_file)

    def test_signed_header_accepted(self, tmp_path):
        """Should accept an explicit plus sign like a decimal integer."""
        dict_file = write_dictionary(tmp_path / "dictionary.txt", "+1\na\t1\t0\n")

        assert TextDictionaryLoader().load(dict_file) == ["a"]

    @pytest.mark.parametrize("index", [" 1 ", "1_0", "١"])
    def test_index_must_be_plain_integer(self, tmp_path, index):
        """Should reject padded, underscored or non-ASCII digit indices."""
        dict_file = write_dictionary(tmp_path / "dictionary.txt", f"2\na\t1\t{index}\n")

        with pytest.raises(DictionaryFormatError):
            TextDictionaryLoader().load(dict_file)

    def test_invalid_utf8(self, tmp_path):
        """Should report undecodable bytes as a format error."""
        # Arrange
        dict_file = tmp_path / "dictionary.txt"
        dict_file.write_bytes(b"1\n\xff\xfe\t1\t0\n")

        # Act & Assert
        with pytest.raises(DictionaryFormatError, match="Undecodable"):
            TextDictionaryLoader().load(dict_file)

    def test_file_not_found(self):
        """Should raise FileNotFoundError for a missing file."""
        with pytest.raises(FileNotFoundError):
            TextDictionaryLoader().load(Path("/nonexistent/dictionary.txt"))

    def test_can_load(self, tmp_path):
        """Should accept existing regular files only."""
        dict_file = write_dictionary(tmp_path / "dictionary.txt", "0\n")
        loader = TextDictionaryLoader()

        assert loader.can_load(dict_file) is True
        assert loader.can_load(tmp_path) is False
        assert loader.can_load(tmp_path / "missing.txt") is False


class TestSplitFields:
    """Tests for tab splitting."""

    def test_drops_trailing_empty_fields(self):
        """Should treat 'a<TAB>1<TAB>' as two fields."""
        assert split_fields("a\t1\t") == ["a", "1"]

    def test_keeps_inner_empty_fields(self):
        """Should keep empty fields before the last one."""
        assert split_fields("a\t\t0") == ["a", "", "0"]

    def test_empty_line(self):
        """Should give no fields for an empty line."""
        assert split_fields("") == []
