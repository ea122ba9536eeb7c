import pytest

from minitalk.strings import (
    atoi,
    itoa,
    strchr,
    strdup,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strrchr,
)


@pytest.mark.parametrize("text", ["", "a", "hello", "Hello there, dude!!"])
def test_strlen_matches_length_without_nul(text):
    assert strlen(text) == len(text)


def test_strlen_stops_at_nul():
    assert strlen("ab\0cd") == strlen("ab")


@pytest.mark.parametrize("char", ["l", "o", "h", "d"])
def test_strchr_finds_first_occurrence(char):
    text = "hello world"
    index = strchr(text, char)
    assert text[index] == char
    assert char not in text[:index]


def test_strchr_missing_returns_none():
    assert strchr("hello", "z") is None


def test_strchr_nul_finds_terminator():
    assert strchr("hello", "\0") == strlen("hello")


def test_strchr_accepts_code():
    assert strchr("abc", ord("b")) == strchr("abc", "b")


def test_strchr_ignores_text_after_nul():
    assert strchr("ab\0c", "c") is None


def test_strchr_rejects_long_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


@pytest.mark.parametrize("char", ["l", "o", "h", "d"])
def test_strrchr_finds_last_occurrence(char):
    text = "hello world"
    index = strrchr(text, char)
    assert text[index] == char
    assert char not in text[index + 1:]


def test_strrchr_missing_and_nul():
    assert strrchr("hello", "z") is None
    assert strrchr("hello", "\0") == len("hello")


def test_strncmp_equal_strings():
    assert strncmp("abc", "abc", 10) == 0


def test_strncmp_zero_count():
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_only_compares_count():
    assert strncmp("abcX", "abcY", 3) == 0
    assert strncmp("abcX", "abcY", 4) == ord("X") - ord("Y")


def test_strncmp_sign_and_antisymmetry():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) == -strncmp("abc", "abd", 3)


def test_strncmp_shorter_string_sorts_first():
    assert strncmp("abc", "ab", 3) == ord("c")
    assert strncmp("ab", "abc", 3) == -ord("c")


def test_strncmp_negative_count():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_empty_needle():
    assert strnstr("hello", "", 0) == 0


def test_strnstr_finds_match():
    haystack = "hello world"
    index = strnstr(haystack, "world", len(haystack))
    assert haystack[index:index + len("world")] == "world"


def test_strnstr_respects_length():
    haystack = "hello world"
    assert strnstr(haystack, "world", len(haystack) - 1) is None
    assert strnstr(haystack, "world", len(haystack)) == haystack.index("world")


def test_strnstr_not_found():
    assert strnstr("hello", "xyz", 5) is None


def test_strlcpy_fits():
    copied, total = strlcpy("hello", 10)
    assert copied == "hello"
    assert total == len("hello")


def test_strlcpy_truncates():
    copied, total = strlcpy("hello", 3)
    assert copied == "hello"[:2]
    assert total == len("hello")


def test_strlcpy_zero_size():
    copied, total = strlcpy("hello", 0)
    assert copied == ""
    assert total == len("hello")


def test_strlcat_fits():
    result, total = strlcat("foo", "bar", 10)
    assert result == "foo" + "bar"
    assert total == len("foo") + len("bar")


def test_strlcat_truncates_to_buffer():
    result, total = strlcat("foo", "barbaz", 6)
    assert len(result) == 6 - 1
    assert result == ("foo" + "barbaz")[: 6 - 1]
    assert total == len("foo") + len("barbaz")


def test_strlcat_dest_fills_buffer():
    result, total = strlcat("foobar", "baz", 4)
    assert result == "foobar"
    assert total == 4 + len("baz")


def test_strlcat_zero_size():
    result, total = strlcat("foo", "bar", 0)
    assert result == "foo"
    assert total == len("bar")


def test_strdup_copies_up_to_nul():
    assert strdup("hello") == "hello"
    assert strdup("he\0llo") == "he"


def test_atoi_plain_number():
    assert atoi("42") == 42


def test_atoi_whitespace_sign_and_trailing_text():
    assert atoi("  \t\n-17abc") == -17
    assert atoi("+8 9") == 8


def test_atoi_only_one_sign():
    assert atoi("+-5") == 0
    assert atoi("--5") == 0


def test_atoi_wraps_overflow():
    assert atoi("2147483648") == -2147483648


@pytest.mark.parametrize("number", [0, 1, -1, 12345, -98765, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(number):
    assert atoi(itoa(number)) == number


def test_itoa_minimum():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2**31)