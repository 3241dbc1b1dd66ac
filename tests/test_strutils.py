import pytest

from mygl.strutils import (
    Buffer,
    KVParse,
    LineFeed,
    LineInfo,
    Lut,
    Tokenizer,
    equals,
    to_signed,
    to_unsigned,
)


def test_equals_whole_and_prefix():
    assert equals("abc", "abc")
    assert not equals("abc", "abd")
    assert equals("abcdef", "abcxyz", 3)
    assert not equals("abcdef", "abcxyz", 4)


def test_equals_stops_at_nul():
    assert equals("abc\0zzz", "abc")


@pytest.mark.parametrize("n", [0, 7, 42, 1234567, 2**63])
def test_to_unsigned_round_trip(n):
    assert to_unsigned(str(n)) == n


def test_to_unsigned_empty_is_zero():
    assert to_unsigned("") == 0


@pytest.mark.parametrize("text", ["12a", "-3", " 1", "1.5"])
def test_to_unsigned_rejects(text):
    with pytest.raises(ValueError):
        to_unsigned(text)


@pytest.mark.parametrize("n", [0, 5, 987, -1, -4321, 2**62])
def test_to_signed_round_trip(n):
    assert to_signed(str(n)) == n


@pytest.mark.parametrize("text", ["+1", "--2", "3x"])
def test_to_signed_rejects(text):
    with pytest.raises(ValueError):
        to_signed(text)


def test_lut_identity_and_clamp():
    lut = Lut()
    assert all(lut(chr(i)) == chr(i) for i in range(256))
    assert lut[-5] == lut[0]
    assert lut[1000] == lut[255]


def test_lut_upper_lower():
    up = Lut()
    up.upper()
    assert "".join(map(up, "Hello, World")) == "Hello, World".upper()
    down = Lut()
    down.lower()
    assert "".join(map(down, "Hello, World")) == "Hello, World".lower()


def test_lut_delimit_and_copy():
    lut = Lut()
    lut.delimit(",;")
    assert lut(",") == "\0"
    assert lut(";") == "\0"
    assert lut("a") == "a"
    copy = Lut(lut)
    copy.upper()
    assert lut("a") == "a"
    assert copy(",") == "\0"


def test_buffer_truncates_to_capacity():
    b = Buffer("abcdef", size=4)
    assert len(b) == 3
    assert b.text == "abc"


def test_buffer_with_lut():
    lut = Lut()
    lut.upper()
    assert Buffer("mixed Case", lut=lut).text == "mixed Case".upper()


def test_buffer_at_clamps():
    b = Buffer("hello")
    assert b.at(0) == "hello"
    assert b.at(-3) == "hello"
    assert b.at(2) == "llo"
    assert b.at(100) == "o"


def test_buffer_skip_over():
    assert Buffer("   x y").skip_over(0, " ") == "x y"
    assert Buffer("aaa").skip_over(0, "a") is None
    assert Buffer("ab").skip_over(-4, "z") == "ab"


def test_buffer_begins_with_and_index_of():
    b = Buffer("key=value")
    assert b.begins_with("key")
    assert b.begins_with("")
    assert not b.begins_with("key=value!")
    assert b.index_of("=") == "key=value".index("=")
    assert b.index_of("=", 4) == -1
    assert b.index_of("#") == -1


def test_buffer_equals():
    b = Buffer("abcdef")
    assert b.equals("abcdef")
    assert not b.equals("abcxyz")
    assert b.equals("abcxyz", 3)


def test_buffer_clip_suffix():
    b = Buffer("hello.txt")
    b.clip(".txt")
    assert b.text == "hello"
    c = Buffer("a.b")
    c.clip(".")
    assert c.text == "a.b"


def test_buffer_clip_prefix_compare():
    b = Buffer("a.b.c")
    b.clip(".", 1)
    assert b.text == "a"
    assert len(b) == 1


def test_buffer_indexing_wraps():
    b = Buffer("xyz", size=8)
    assert b[0] == "x"
    assert b[8] == "x"
    assert b[5] == "\0"


def test_tokenizer_splits_on_delims():
    t = Tokenizer()
    t.tokenize("  a,b  c ", " ,")
    assert t.to_list() == ["a", "b", "c"]
    assert t.count == 3
    assert t[1] == "b"
    assert t.contains("c") == 2
    assert t.contains("z") == -1


def test_tokenizer_out_of_range_gives_leading_text():
    t = Tokenizer()
    t.tokenize("first second", " ")
    assert t[9] == "first"


def test_tokenizer_clear():
    t = Tokenizer()
    t.tokenize("x y", " ")
    t.clear()
    assert t.count == 0
    assert t.to_list() == []


def test_linefeed_from_string():
    feed = LineFeed("ab\n\ncd")
    infos = list(feed)
    assert [i.no for i in infos] == [0, 1, 2]
    assert [i.buffer.text for i in infos] == ["ab ", " ", "cd"]
    assert feed.get_line() is None
    assert feed.line_count == 3
    assert len(feed.lines) == 3


def test_linefeed_from_callable():
    chars = iter("one\ntwo")

    def get_char(param):
        assert param == "ctx"
        return next(chars, "")

    feed = LineFeed(get_char, "ctx")
    first = feed.get_line()
    assert isinstance(first, LineInfo)
    assert first.buffer.text == "one "
    assert feed.get_line().buffer.text == "two"
    assert feed.get_line() is None


def test_linefeed_empty_and_bad_source():
    assert LineFeed("").get_line() is None
    with pytest.raises(TypeError):
        LineFeed(42)


def test_kvparse_literal_values():
    kv = KVParse(False)
    kv.key_alias("mode")
    kv.support_value("on", True)
    kv.support_value("off", False)
    assert kv.parse_tokens("mode", "on") == (True, True, True)
    assert kv.parse_tokens("mode", "off") == (True, True, False)
    assert kv.parse_tokens("mode", "maybe") == (True, False, False)
    assert kv.parse_tokens("other", "on") == (False, False, False)


def test_kvparse_functions():
    kv = KVParse()
    kv.key_alias(lambda k: k.startswith("size"))
    kv.support_value(lambda v: v.isdigit(), int)
    kv.support_value("bad", lambda v: int(v))
    assert kv.parse_tokens("size_x", "42") == (True, True, 42)
    assert kv.parse_tokens("size_x", "bad") == (True, False, None)
    assert kv.parse_tokens("width", "42") == (False, False, None)