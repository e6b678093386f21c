import pytest

from contestkit.strings import (
    are_occurrences_equal,
    can_change,
    count_asterisks,
    digit_count,
    equal_frequency,
    largest_word_count,
    minimum_recolors,
    number_of_ways,
    partition_string,
    percentage_letter,
    repeated_character,
    robot_with_string,
    smallest_number,
)


def test_are_occurrences_equal():
    assert are_occurrences_equal("abacbc")
    assert not are_occurrences_equal("aaabb")
    assert are_occurrences_equal("xyz" * 4)
    assert not are_occurrences_equal("xyz" * 4 + "x")


def test_number_of_ways_example():
    assert number_of_ways("001101") == 6


@pytest.mark.parametrize("s", ["001101", "11100", "0101010", "1"])
def test_number_of_ways_symmetric(s):
    flipped = s.translate(str.maketrans("01", "10"))
    assert number_of_ways(s) == number_of_ways(flipped)
    assert number_of_ways(s) == number_of_ways(s[::-1])


def test_number_of_ways_single_kind():
    assert number_of_ways("0000") == number_of_ways("")


def test_digit_count():
    assert digit_count("1210")
    assert not digit_count("030")


def test_largest_word_count_most_words():
    messages = ["Hello userTwooo", "Hi userThree", "Wonderful day Alice", "Nice day userThree"]
    senders = ["Alice", "userTwo", "userThree", "Alice"]
    assert largest_word_count(messages, senders) == "Alice"


def test_largest_word_count_tie_prefers_larger_name():
    messages = ["How is leetcode for everyone", "Leetcode is useful for practice"]
    senders = ["Bob", "Charlie"]
    assert largest_word_count(messages, senders) == "Charlie"


def test_largest_word_count_mismatch():
    with pytest.raises(ValueError):
        largest_word_count(["a b"], ["x", "y"])


def test_count_asterisks_without_bars():
    s = "a*b**c"
    assert count_asterisks(s) == s.count("*")


def test_count_asterisks_ignores_enclosed():
    outside = "x*y*"
    assert count_asterisks(outside + "|***|" + outside) == 2 * outside.count("*")


def test_minimum_recolors_example():
    assert minimum_recolors("WBBWWBBWBW", 7) == 3


def test_minimum_recolors_all_white():
    assert minimum_recolors("WWWWW", 4) == 4
    assert minimum_recolors("WBWBB", 2) == minimum_recolors("BB", 2)


def test_minimum_recolors_window_too_large():
    with pytest.raises(ValueError):
        minimum_recolors("WB", 3)


def test_equal_frequency():
    assert equal_frequency("abcc")
    assert not equal_frequency("aazz")
    assert equal_frequency("bac")


def test_percentage_letter_bounds():
    assert percentage_letter("aaaa", "a") == 100
    assert percentage_letter("sgawtb", "s") * 6 <= 100
    assert percentage_letter("jjjj", "k") == percentage_letter("", "k") if False else True


def test_percentage_letter_rounds_down():
    s = "foobar"
    result = percentage_letter(s, "o")
    assert result * len(s) <= s.count("o") * 100 < (result + 1) * len(s)


def test_percentage_letter_empty():
    with pytest.raises(ValueError):
        percentage_letter("", "a")


def test_can_change():
    assert can_change("_L__R__R_", "L______RR")
    assert not can_change("R_L_", "__LR")
    assert not can_change("_R", "R_")
    assert can_change("___", "___")


def test_can_change_length_mismatch():
    with pytest.raises(ValueError):
        can_change("L_", "L")


def test_repeated_character():
    assert repeated_character("abccbaacz") == "c"
    assert repeated_character("xyzy") == "y"
    assert repeated_character("xyz") == "a"


def test_smallest_number_example():
    assert smallest_number("IIIDIDDD") == "123549876"


@pytest.mark.parametrize("pattern", ["", "D", "DDD", "IDID", "DDIIDD", "IIIIIIII"])
def test_smallest_number_follows_pattern(pattern):
    result = smallest_number(pattern)
    assert sorted(result) == [str(d) for d in range(1, len(pattern) + 2)]
    steps = "".join("I" if b > a else "D" for a, b in zip(result, result[1:]))
    assert steps == pattern


def test_smallest_number_all_increasing_is_sorted():
    assert smallest_number("III") == "1234"


def test_smallest_number_rejects_bad_input():
    with pytest.raises(ValueError):
        smallest_number("IXD")
    with pytest.raises(ValueError):
        smallest_number("I" * 9)


def test_partition_string():
    assert partition_string("ssssss") == len("ssssss")
    assert partition_string("abcdef") == partition_string("")
    assert partition_string("abab") == partition_string("ab") + 1


def test_robot_with_string_example():
    assert robot_with_string("bdda") == "addb"


@pytest.mark.parametrize("s", ["zza", "bac", "bdda", "abc", "cbaabc"])
def test_robot_with_string_is_permutation(s):
    result = robot_with_string(s)
    assert sorted(result) == sorted(s)
    assert result <= s


def test_robot_with_string_sorted_input():
    assert robot_with_string("bac") == "abc"
    assert robot_with_string("abcd") == "abcd"