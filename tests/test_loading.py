"""Tests for loading text files into a TextBuffer."""

from pathlib import Path
from typing import Callable

import pytest

import zepto
from zepto.errors import IoError


class TestLoad:
    """File-open path."""

    def test_load_lines(self, make_file: Callable[..., Path]) -> None:
        path = make_file(b"foo\nbar\t\n\n")
        buf = zepto.load(path)
        assert buf.row_count() == 3
        assert buf.row_at(0).raw == b"foo"
        assert buf.row_at(1).raw == b"bar\t"
        assert buf.row_at(1).rendered == b"bar     "
        assert buf.row_at(2).raw == b""

    def test_strips_crlf(self, make_file: Callable[..., Path]) -> None:
        buf = zepto.load(make_file(b"dos\r\nline\r\n"))
        assert [row.raw for row in buf] == [b"dos", b"line"]

    def test_last_line_without_newline(self, make_file: Callable[..., Path]) -> None:
        buf = zepto.load(make_file(b"one\ntwo"))
        assert buf.row_count() == 2
        assert buf.row_at(1).raw == b"two"

    def test_empty_file(self, make_file: Callable[..., Path]) -> None:
        buf = zepto.load(make_file(b""))
        assert buf.row_count() == 0

    def test_non_utf8_bytes_kept(self, make_file: Callable[..., Path]) -> None:
        buf = zepto.load(make_file(b"caf\xe9\n"))
        assert buf.row_at(0).raw == b"caf\xe9"

    def test_custom_tab_stop(self, make_file: Callable[..., Path]) -> None:
        buf = zepto.load(make_file(b"a\tb\n"), tab_stop=4)
        assert buf.row_at(0).rendered == b"a   b"

    def test_accepts_str_path(self, make_file: Callable[..., Path]) -> None:
        buf = zepto.load(str(make_file(b"x\n")))
        assert buf.row_count() == 1

    def test_missing_file_raises_io_error(self, tmp_path: Path) -> None:
        missing = tmp_path / "nope.txt"
        with pytest.raises(IoError) as excinfo:
            zepto.load(missing)
        assert excinfo.value.operation == "open"
        assert str(excinfo.value).startswith("open: ")
        assert "nope.txt" in str(excinfo.value)

    def test_directory_raises_io_error(self, tmp_path: Path) -> None:
        with pytest.raises(IoError):
            zepto.load(tmp_path)
