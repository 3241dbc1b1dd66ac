import pytest

from mygl.chardata import CharStream


def test_lines_keep_newlines():
    cs = CharStream("ab\ncd")
    assert cs.line_count() == 2
    assert cs.get_line(0) == "ab\n"
    assert cs.get_line(1) == "cd"


def test_trailing_newline_adds_no_empty_line():
    cs = CharStream("ab\n")
    assert cs.line_count() == 1
    assert cs.get_line(0) == "ab\n"


def test_empty_text_has_no_lines():
    cs = CharStream("")
    assert cs.line_count() == 0
    assert cs.get_line(0) == ""


def test_blank_lines_are_kept():
    cs = CharStream("\n\nx")
    assert list(cs) == ["\n", "\n", "x"]


def test_out_of_range_line_is_empty():
    cs = CharStream("one\ntwo\n")
    assert cs.get_line(2) == ""
    assert cs.get_line(-1) == ""


@pytest.mark.parametrize("text", ["", "a", "a\nb\n", "\n", "x\n\ny", "line one\nline two"])
def test_lines_join_back_to_text(text):
    cs = CharStream(text)
    assert "".join(cs.get_line(i) for i in range(cs.line_count())) == text


def test_size_limits_text():
    cs = CharStream("ab\ncd\nef", 4)
    assert list(cs) == ["ab\n", "c"]


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        CharStream("abc", -1)