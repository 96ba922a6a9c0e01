"""Width handling for single fields (truncation and padding)."""

from fixedwidth.encoding.compose import get_valid_chunk, rune_length


def test_text_shorter_than_width_is_padded():
    assert get_valid_chunk(b"abc", False, 1, 5) == (b"abc", 2)


def test_text_longer_than_width_is_truncated():
    assert get_valid_chunk(b"abcdef", False, 1, 3) == (b"abc", 0)


def test_text_exact_width():
    assert get_valid_chunk(b"abc", False, 4, 6) == (b"abc", 0)


def test_single_column_field():
    assert get_valid_chunk(b"xyz", False, 3, 3) == (b"x", 0)
    assert get_valid_chunk(b"", False, 3, 3) == (b"", 1)


def test_truncation_counts_characters_not_bytes():
    val = "日本語".encode("utf-8")
    assert get_valid_chunk(val, False, 1, 2) == ("日本".encode("utf-8"), 0)


def test_padding_counts_characters_not_bytes():
    val = "é".encode("utf-8")
    assert get_valid_chunk(val, False, 1, 3) == (val, 2)


def test_four_byte_character_is_never_split():
    val = "😀ab".encode("utf-8")
    chunk, filler = get_valid_chunk(val, False, 1, 1)
    assert chunk == "😀".encode("utf-8")
    assert filler == 0


def test_invalid_utf8_bytes_count_as_one_character_each():
    assert get_valid_chunk(b"\xffab", False, 1, 2) == (b"\xffa", 0)
    assert get_valid_chunk(b"a\xe6\x97", False, 1, 3) == (b"a\xe6\x97", 0)


def test_numeric_is_padded():
    assert get_valid_chunk(b"42", True, 6, 8) == (b"42", 1)


def test_absent_numeric_is_all_padding():
    assert get_valid_chunk(b"", True, 6, 8) == (b"", 3)


def test_numeric_padding_counts_characters():
    # numeric-class content from a marshal_text hook may be non-ASCII
    val = "١٢".encode("utf-8")
    assert get_valid_chunk(val, True, 1, 3) == (val, 1)


def test_numeric_overflow_is_not_truncated():
    # Known risky edge: the negative filler is handed back uncorrected.
    assert get_valid_chunk(b"12345", True, 1, 3) == (b"12345", -2)


def test_unbounded_interval_passes_value_through():
    assert get_valid_chunk(b"hello", False, 5, 2) == (b"hello", 0)
    assert get_valid_chunk(b"12345", True, 5, 2) == (b"12345", 0)


def test_rune_length():
    buf = "aé語😀".encode("utf-8")
    assert rune_length(buf, 0) == 1
    assert rune_length(buf, 1) == 2
    assert rune_length(buf, 3) == 3
    assert rune_length(buf, 6) == 4
    # overlong encoding of "/"
    assert rune_length(b"\xc0\xaf", 0) == 1
    # UTF-16 surrogate encoded as UTF-8
    assert rune_length(b"\xed\xa0\x80", 0) == 1
