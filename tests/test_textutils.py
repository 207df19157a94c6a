import pytest

from philo.textutils import find_str, index_in, same_str, span_until, split_any


def test_find_str_locates_pattern():
    text = "teshting the limits of the food chain"
    pos = find_str(text, "limits")
    assert text[pos:pos + len("limits")] == "limits"
    assert find_str(text, "the") == text.index("the")


def test_find_str_missing_is_minus_one():
    assert find_str("philo", "sopher") == -1
    assert find_str("ab", "abc") == -1


def test_find_str_none_and_empty():
    assert find_str(None, "a") == -1
    assert find_str("a", None) == -1
    assert find_str("", "") == -1
    assert find_str("abc", "") == 0


def test_same_str():
    assert same_str("philo", "philo") is True
    assert same_str("philo", "phil") is False
    assert same_str("", "") is False
    assert same_str(None, None) is False


def test_index_in():
    digits = "0123456789+-"
    assert index_in("0", digits) == 0
    assert index_in("-", digits) == len(digits) - 1
    assert index_in("x", digits) == -1
    assert index_in("x", None) == -2
    assert index_in("", digits) == -1


def test_index_in_rejects_long_input():
    with pytest.raises(ValueError):
        index_in("ab", "abc")


def test_span_until():
    assert span_until("abc,def", ",") == len("abc")
    assert span_until("abcdef", ",") == len("abcdef")
    assert span_until(None, ",") == 0
    assert span_until("abc", None) == len("abc")
    assert span_until(",abc", ",") == 0


@pytest.mark.parametrize(
    "text, expected",
    [
        ("5 1-2 4 5", ["5", "1-2", "4", "5"]),
        ("3 5 1 wtf", ["3", "5", "1", "wtf"]),
        ("i want ... youuu", ["i", "want", "...", "youuu"]),
        ("", []),
    ],
)
def test_split_any_on_spaces(text, expected):
    assert split_any(text, " ") == expected


def test_split_any_multiple_separators_and_runs():
    words = split_any("  a,,b; c ;", " ,;")
    assert words == ["a", "b", "c"]


def test_split_any_words_have_no_separators():
    seps = " \t\n"
    text = "200 800\t200\n\n200 20"
    words = split_any(text, seps)
    assert all(word and not set(word) & set(seps) for word in words)
    assert "".join(words) == "".join(c for c in text if c not in seps)


def test_split_any_without_separators():
    assert split_any("abc", None) == ["abc"]
    assert split_any("abc", "") == ["abc"]