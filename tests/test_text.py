import pytest

from pushswap import text


def test_split_source_example():
    assert text.split("2 1 3 5 8", " ") == ["2", "1", "3", "5", "8"]


def test_split_drops_empty_pieces():
    pieces = text.split("  0 one  2 3 ", " ")
    assert pieces == ["0", "one", "2", "3"]
    assert all(pieces)


def test_split_only_separators_gives_nothing():
    assert text.split("    ", " ") == []
    assert text.split("", " ") == []


def test_split_rejoin_round_trip():
    source = "2 1 3 5 8"
    assert " ".join(text.split(source, " ")) == source


def test_split_accepts_integer_separator():
    assert text.split("a,b", ord(",")) == text.split("a,b", ",")


def test_strchr_finds_first():
    source = "push_swap"
    index = text.strchr(source, "s")
    assert source[index] == "s"
    assert "s" not in source[:index]


def test_strchr_missing_is_none():
    assert text.strchr("push_swap", "z") is None


def test_strchr_nul_finds_end():
    assert text.strchr("push_swap", "\0") == len("push_swap")
    assert text.strchr("push_swap", 0) == len("push_swap")


def test_strrchr_finds_last():
    source = "push_swap"
    index = text.strrchr(source, "s")
    assert source[index] == "s"
    assert "s" not in source[index + 1 :]


def test_strrchr_missing_and_nul():
    assert text.strrchr("abc", "z") is None
    assert text.strrchr("abc", "\0") == len("abc")


def test_strchr_rejects_long_char():
    with pytest.raises(ValueError):
        text.strchr("abc", "ab")


def test_strdup_copies():
    assert text.strdup("Error\n") == "Error\n"
    assert text.strdup("") == ""


def test_striteri_replaces_and_keeps():
    def upper_even(index, ch):
        return ch.upper() if index % 2 == 0 else None

    result = text.striteri("abcd", upper_even)
    assert result == "AbCd"
    assert len(result) == len("abcd")


def test_striteri_sees_indices_in_order():
    seen = []
    text.striteri("xyz", lambda i, c: seen.append((i, c)))
    assert seen == [(0, "x"), (1, "y"), (2, "z")]


def test_strmapi_applies_function():
    assert text.strmapi("abc", lambda i, c: c.upper()) == "ABC"
    assert text.strmapi("", lambda i, c: c) == ""


def test_strjoin():
    assert text.strjoin("push", "_swap") == "push_swap"
    with pytest.raises(TypeError):
        text.strjoin(None, "x")


def test_strlcpy_truncates_and_reports_length():
    source = "2147483647"
    copied, total = text.strlcpy(source, 5)
    assert copied == source[:4]
    assert total == len(source)


def test_strlcpy_fits_and_zero_size():
    copied, total = text.strlcpy("abc", 10)
    assert (copied, total) == ("abc", 3)
    assert text.strlcpy("abc", 0) == ("", 3)


def test_strlcat_appends_within_size():
    result, total = text.strlcat("push", "_swap", 100)
    assert result == "push_swap"
    assert total == len("push_swap")


def test_strlcat_truncates():
    result, total = text.strlcat("push", "_swap", 6)
    assert len(result) == 5
    assert result.startswith("push")
    assert total == len("push") + len("_swap")


def test_strlcat_full_destination():
    result, total = text.strlcat("push", "_swap", 3)
    assert result == "push"
    assert total == 3 + len("_swap")


def test_strlen():
    assert text.strlen("2147483648") == 10
    assert text.strlen("") == 0


def test_strcmp_equal_and_ordering():
    assert text.strcmp("sa", "sa") == 0
    assert text.strcmp("sa", "sb") == ord("a") - ord("b")
    assert text.strcmp("sb", "sa") > 0


def test_strcmp_prefix_is_smaller():
    assert text.strcmp("rr", "rra") < 0
    assert text.strcmp("rra", "rr") == ord("a")


def test_strncmp_limits_comparison():
    assert text.strncmp("2147483647", "2147483648", 9) == 0
    assert text.strncmp("2147483647", "2147483648", 10) < 0
    assert text.strncmp("abc", "xyz", 0) == 0


def test_strncmp_negative_count():
    with pytest.raises(ValueError):
        text.strncmp("a", "b", -1)


def test_strnstr_found_within_length():
    big = "push_swap"
    index = text.strnstr(big, "swap", len(big))
    assert big[index : index + 4] == "swap"


def test_strnstr_outside_length_is_none():
    assert text.strnstr("push_swap", "swap", 7) is None
    assert text.strnstr("push_swap", "xyz", 9) is None


def test_strnstr_empty_needle():
    assert text.strnstr("push_swap", "", 0) == 0


def test_strtrim():
    assert text.strtrim("  Error\n ", " \n") == "Error"
    assert text.strtrim("xxxx", "x") == ""
    assert text.strtrim(" a ", "") == " a "


def test_substr():
    source = "push_swap"
    assert text.substr(source, 5, 4) == "swap"
    assert text.substr(source, 5, 100) == "swap"
    assert text.substr(source, 9, 3) == ""
    assert text.substr(source, 50, 3) == ""


def test_substr_negative_start():
    with pytest.raises(ValueError):
        text.substr("abc", -1, 2)