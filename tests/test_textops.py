import pytest

from wireframe.textops import (
    compare,
    compare_prefix,
    contains_char,
    equal,
    equal_prefix,
    find,
    find_index,
    find_outside_quotes,
    find_within,
    join,
    prefix_before,
    reverse_digits,
    split_words,
    substring,
    trim,
    word_table,
)


def test_split_words_drops_empty_pieces():
    assert split_words("  10 20   30 ", " ") == ["10", "20", "30"]


def test_split_words_all_separators():
    assert split_words("    ", " ") == []


def test_split_words_color_cell():
    assert split_words("5,0xFF00FF", ",") == ["5", "0xFF00FF"]


def test_split_words_rejects_long_separator():
    with pytest.raises(ValueError):
        split_words("a b", "ab")


def test_split_words_rejoin_invariant():
    text = "a,,b,c,"
    words = split_words(text, ",")
    assert ",".join(words).replace(",", "") == text.replace(",", "")
    assert all(words)


def test_trim_strips_whitespace():
    assert trim(" \t\nhello world\n ") == "hello world"


def test_trim_only_whitespace_is_empty():
    assert trim(" \n\t ") == ""


def test_trim_keeps_other_whitespace():
    assert trim("\rx\r") == "\rx\r"


def test_substring_returns_span():
    assert substring("heightmap", 0, 6) == "height"


def test_substring_past_end_raises():
    with pytest.raises(ValueError):
        substring("abc", 2, 5)


def test_substring_negative_raises():
    with pytest.raises(ValueError):
        substring("abc", -1, 1)


def test_prefix_before_found():
    assert prefix_before("12,0xFF", ",") == "12"


def test_prefix_before_missing():
    assert prefix_before("12", ",") is None


def test_find_within_respects_limit():
    haystack = "abcdef"
    assert find_within(haystack, "cd", len(haystack)) == haystack.find("cd")
    assert find_within(haystack, "cd", 3) is None


def test_find_within_empty_needle():
    assert find_within("abc", "", 0) == 0


def test_find_within_needle_longer_than_haystack():
    assert find_within("ab", "abc", 10) is None


def test_find_locates_needle():
    haystack, needle = "wire frame wire", "frame"
    index = find(haystack, needle)
    assert haystack[index:index + len(needle)] == needle
    assert needle not in haystack[:index]


def test_find_missing():
    assert find("abc", "x") is None


def test_find_empty_needle():
    assert find("abc", "") == 0


def test_compare_equal_is_zero():
    assert compare("same", "same") == 0


def test_compare_sign():
    assert compare("abc", "abd") < 0
    assert compare("abd", "abc") > 0
    assert compare("ab", "abc") < 0


def test_compare_antisymmetric():
    assert compare("apple", "apricot") == -compare("apricot", "apple")


def test_compare_prefix_limits_length():
    assert compare_prefix("abcX", "abcY", 3) == 0
    assert compare_prefix("abcX", "abcY", 4) == compare("abcX", "abcY")
    assert compare_prefix("a", "b", 0) == 0


def test_equal():
    assert equal("map", "map") is True
    assert equal("map", "mop") is False
    assert equal(None, "map") is False


def test_equal_prefix():
    assert equal_prefix("mapfile", "mapdata", 3) is True
    assert equal_prefix("mapfile", "mapdata", 4) is False
    assert equal_prefix("x", None, 1) is False


def test_reverse_digits_keeps_sign():
    assert reverse_digits("-123") == "-321"
    assert reverse_digits("123") == "321"


def test_reverse_digits_is_involution():
    for text in ("", "-", "7", "-98765", "abcde"):
        assert reverse_digits(reverse_digits(text)) == text


def test_join():
    assert join("wire", "frame") == "wireframe"
    assert join(None, "frame") == "frame"
    assert join("wire", None) == "wire"
    assert join(None, None) is None


def test_contains_char():
    assert contains_char("10,0xFF", ",") is True
    assert contains_char("10", ",") is False


def test_word_table_splits_on_spaces_and_tabs():
    assert word_table('  40 40\t2 1 ') == ["40", "40", "2", "1"]


def test_word_table_empty():
    assert word_table(" \t ") == []


def test_find_index():
    text = 'abc "x" def'
    index = find_index(text, '"')
    assert text[index] == '"'
    assert '"' not in text[:index]
    assert find_index(text, "zz") is None


def test_find_index_empty_needle_raises():
    with pytest.raises(ValueError):
        find_index("abc", "")


def test_find_outside_quotes_skips_quoted():
    text = '"a/*b" /* c */'
    index = find_outside_quotes(text, "/*")
    assert text[index:index + 2] == "/*"
    assert index > text.rindex('"')


def test_find_outside_quotes_only_inside():
    assert find_outside_quotes('"//"', "//") is None


def test_find_outside_quotes_unquoted_matches_find_index():
    text = "xx // yy"
    assert find_outside_quotes(text, "//") == find_index(text, "//")


def test_find_outside_quotes_empty_needle_raises():
    with pytest.raises(ValueError):
        find_outside_quotes("abc", "")