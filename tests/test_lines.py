import io

import pytest

from pacmaze.lines import iter_lines


class _TrickleStream:
    """A text stream that hands out one character per read."""

    def __init__(self, text):
        self._text = text
        self._pos = 0

    def read(self, size=-1):
        piece = self._text[self._pos:self._pos + 1]
        self._pos += len(piece)
        return piece


def test_splits_lines_without_newlines():
    assert list(iter_lines(io.StringIO("111\n1P1\n111"))) == ["111", "1P1", "111"]


def test_trailing_newline_adds_no_line():
    assert list(iter_lines(io.StringIO("111\n1C1\n"))) == ["111", "1C1"]


def test_empty_stream_yields_nothing():
    assert list(iter_lines(io.StringIO(""))) == []


def test_empty_lines_in_middle_are_kept():
    assert list(iter_lines(io.StringIO("ab\n\ncd\n"))) == ["ab", "", "cd"]


def test_binary_stream_yields_bytes():
    assert list(iter_lines(io.BytesIO(b"10\n01\n"))) == [b"10", b"01"]


@pytest.mark.parametrize(
    "text",
    ["", "\n", "a", "a\n", "a\n\n", "\n\nb", "111\n1PC\n", "x" * 10000 + "\ny"],
)
def test_joining_lines_restores_text(text):
    lines = list(iter_lines(io.StringIO(text)))
    restored = "\n".join(lines) + ("\n" if text.endswith("\n") else "")
    assert restored == text


@pytest.mark.parametrize("text", ["ab\ncd", "ab\n\n", "\n", "1111\n1PE1\n1111\n"])
def test_chunking_does_not_change_result(text):
    assert list(iter_lines(_TrickleStream(text))) == list(
        iter_lines(io.StringIO(text))
    )


def test_lines_never_contain_newline():
    lines = list(iter_lines(io.StringIO("a\nbb\n\nccc\n")))
    assert all("\n" not in line for line in lines)
    assert len(lines) == 4