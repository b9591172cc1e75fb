import pytest

from pipex.textops import (
    split,
    strchr,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_split_skips_repeated_separators():
    assert split("  ls   -l  ", " ") == ["ls", "-l"]


def test_split_path_variable():
    assert split("/usr/bin:/bin::/sbin", ":") == ["/usr/bin", "/bin", "/sbin"]


def test_split_only_separators_is_empty():
    assert split(":::", ":") == []
    assert split("", ":") == []


def test_split_rejects_multi_character_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_split_words_contain_no_separator():
    words = split("grep -v  foo bar", " ")
    assert all(" " not in w and w for w in words)
    assert " ".join(words) == "grep -v foo bar"


def test_strchr_finds_first():
    assert strchr("hello", "l") == 2


def test_strchr_missing():
    assert strchr("hello", "z") is None


def test_strchr_nul_matches_end():
    assert strchr("hello", "\0") == len("hello")


def test_strrchr_finds_last():
    assert strrchr("hello", "l") == 3
    assert strrchr("hello", "z") is None
    assert strrchr("abc", "\0") == len("abc")


def test_strjoin_concatenates():
    assert strjoin("/", "ls") == "/ls"
    assert strjoin("", "") == ""


def test_strlcpy_fits():
    assert strlcpy("hello", 10) == ("hello", len("hello"))


def test_strlcpy_truncates():
    copied, total = strlcpy("hello", 3)
    assert copied == "he"
    assert total == len("hello")


def test_strlcpy_zero_size():
    assert strlcpy("hello", 0) == ("", len("hello"))


def test_strlcat_appends_within_size():
    result, total = strlcat("foo", "bar", 10)
    assert result == "foobar"
    assert total == len("foobar")


def test_strlcat_truncates():
    result, total = strlcat("foo", "bar", 5)
    assert result == "foob"
    assert total == len("foobar")


def test_strlcat_size_not_larger_than_dest():
    assert strlcat("foobar", "xy", 4) == ("foobar", len("xy") + 4)
    assert strlcat("foo", "xy", 0) == ("foo", len("xy"))


def test_strlcat_negative_size():
    with pytest.raises(ValueError):
        strlcat("a", "b", -1)


def test_strmapi_uses_index_and_char():
    assert strmapi("abc", lambda i, c: c.upper() if i % 2 == 0 else c) == "AbC"


def test_strmapi_identity_round_trip():
    text = "pipex"
    assert strmapi(text, lambda i, c: c) == text


def test_striteri_replaces_in_place():
    chars = list("abcd")
    seen = []

    def upper_odd(index, char):
        seen.append(index)
        return char.upper() if index % 2 else None

    striteri(chars, upper_odd)
    assert "".join(chars) == "aBcD"
    assert seen == [0, 1, 2, 3]


def test_strncmp_equal_prefix():
    assert strncmp("PATH=/bin", "PATH=", 5) == 0


def test_strncmp_difference_sign():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "abc", 10) == 0


def test_strnstr_found_within_limit():
    assert strnstr("PATH=/usr/bin", "PATH=", 5) == 0


def test_strnstr_match_crossing_limit():
    assert strnstr("PATH=/usr/bin", "PATH=", 4) is None


def test_strnstr_empty_needle_and_missing():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abcabc", "ca", 6) == 2
    assert strnstr("abc", "x", 3) is None


def test_strtrim_both_ends():
    assert strtrim("xxhixyx", "xy") == "hi"


def test_strtrim_all_trimmed_and_empty_set():
    assert strtrim("aaaa", "a") == ""
    assert strtrim(" a ", "") == " a "


def test_substr_basic():
    assert substr("hello world", 6, 5) == "world"


def test_substr_length_clamped_and_start_past_end():
    assert substr("hello", 3, 100) == "lo"
    assert substr("hello", 10, 2) == ""
    assert substr("hello", 5, 2) == ""


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)