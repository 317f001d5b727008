"""Unit tests for word-list reading."""

import io
from pathlib import Path

import pytest

from bofhexcuses.config import DEFAULT_COLUMN_FILES, WORDLISTS_PATH
from bofhexcuses.model.errors import ResourceNotFoundError
from bofhexcuses.model import io as io_module
from bofhexcuses.model.io import WordListIO


class TestParseLines:
    """Test suite for line filtering."""

    def test_filters_and_trims(self) -> None:
        lines = ["# header", "", "   ", "  alpha ", "beta", "\t# indented", "gamma delta\n"]

        assert WordListIO.parse_lines(lines) == ("alpha", "beta", "gamma delta")

    def test_keeps_order_and_duplicates(self) -> None:
        assert WordListIO.parse_lines(["b", "a", "b"]) == ("b", "a", "b")

    def test_comment_marker_only_at_start(self) -> None:
        assert WordListIO.parse_lines(["C# compiler", "#C compiler"]) == ("C# compiler",)

    def test_custom_comment_prefix(self) -> None:
        assert WordListIO.parse_lines(["// note", "# word"], comment_prefix="//") == ("# word",)

    def test_accepts_file_like_readers(self) -> None:
        reader = io.StringIO("one\n\n# two\nthree\n")

        assert WordListIO.parse_lines(reader) == ("one", "three")

    def test_empty_input(self) -> None:
        assert WordListIO.parse_lines([]) == ()


class TestReadColumn:
    """Test suite for resolving and reading sources."""

    def test_reads_file_path(self, word_list_file) -> None:
        assert WordListIO.read_column(word_list_file) == ("Temporary", "Intermittent", "Partial Power")

    def test_reads_string_path(self, word_list_file) -> None:
        assert WordListIO.read_column(str(word_list_file))[0] == "Temporary"

    def test_reads_utf8(self, tmp_path) -> None:
        path = tmp_path / "utf8.txt"
        path.write_text("Überlastung\nDésynchronisation\n", encoding="utf-8")

        assert WordListIO.read_column(path) == ("Überlastung", "Désynchronisation")

    @pytest.mark.parametrize("name", DEFAULT_COLUMN_FILES)
    def test_reads_bundled_word_lists(self, name) -> None:
        words = WordListIO.read_column(name)

        assert len(words) > 10

    def test_missing_source(self) -> None:
        with pytest.raises(ResourceNotFoundError) as exc_info:
            WordListIO.read_column("no-such-column.txt")

        assert exc_info.value.source == "no-such-column.txt"
        assert "no-such-column.txt" in str(exc_info.value)

    def test_undecodable_source(self, tmp_path) -> None:
        path = tmp_path / "binary.txt"
        path.write_bytes(b"\xff\xfe\xfa\x00broken")

        with pytest.raises(ResourceNotFoundError) as exc_info:
            WordListIO.read_column(path)

        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_directory_is_not_a_word_list(self, tmp_path) -> None:
        with pytest.raises(ResourceNotFoundError):
            WordListIO.read_column(tmp_path)


class TestLoadColumns:
    """Test suite for multi-source loading."""

    def test_loads_in_order(self, word_list_file, tmp_path) -> None:
        other = tmp_path / "other.txt"
        other.write_text("x\ny\n", encoding="utf-8")

        columns = WordListIO.load_columns([other, word_list_file])

        assert columns == [("x", "y"), ("Temporary", "Intermittent", "Partial Power")]

    def test_first_failure_propagates(self, word_list_file) -> None:
        with pytest.raises(ResourceNotFoundError) as exc_info:
            WordListIO.load_columns([word_list_file, "missing-1.txt", "missing-2.txt"])

        assert exc_info.value.source == "missing-1.txt"


class TestResolve:
    """Test suite for locating word lists."""

    def test_overlong_name_is_not_found(self) -> None:
        name = "x" * 300 + ".txt"

        with pytest.raises(ResourceNotFoundError) as exc_info:
            WordListIO.resolve(name)

        assert exc_info.value.source == name

    def test_overlong_name_aborts_model_load(self) -> None:
        from bofhexcuses.model.excuse_model import ExcuseModel

        with pytest.raises(ResourceNotFoundError):
            ExcuseModel.load(["x" * 300 + ".txt"])

    def test_stat_failure_becomes_resource_not_found(self, monkeypatch) -> None:
        def refuse(self):
            raise PermissionError(13, "Permission denied")

        monkeypatch.setattr(Path, "is_file", refuse)

        with pytest.raises(ResourceNotFoundError) as exc_info:
            WordListIO.resolve("a.txt")

        assert isinstance(exc_info.value.__cause__, PermissionError)

    def test_bundled_lookup_uses_wordlists_path(self, monkeypatch, tmp_path) -> None:
        (tmp_path / "a.txt").write_text("Frozen\n", encoding="utf-8")
        monkeypatch.setattr(io_module, "WORDLISTS_PATH", str(tmp_path))

        assert WordListIO.resolve("a.txt") == tmp_path / "a.txt"
        assert WordListIO.read_column("a.txt") == ("Frozen",)

    def test_default_bundled_lists_resolve(self) -> None:
        for name in DEFAULT_COLUMN_FILES:
            assert WordListIO.resolve(name) == Path(WORDLISTS_PATH) / name
