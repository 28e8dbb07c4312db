import pytest

from pushswap.parsing import (
    InputError,
    is_valid_int,
    parse_int,
    parse_stack,
    split_arguments,
)


@pytest.mark.parametrize(
    "text",
    ["0", "42", "-7", "+5", "-2147483648", "2147483647", "+999999999", "0000000001"],
)
def test_valid_integers(text):
    assert is_valid_int(text) is True


@pytest.mark.parametrize(
    "text",
    [
        "",
        "-",
        "+",
        "1a",
        " 1",
        "1 ",
        "--1",
        "2147483648",
        "-2147483649",
        "+2147483647",
        "00000000001",
        "99999999999",
        "1.5",
        "\u0663",
    ],
)
def test_invalid_integers(text):
    assert is_valid_int(text) is False


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
        (" \t-42", -42),
        ("+7", 7),
        ("12abc", 12),
        ("abc", 0),
    ],
)
def test_parse_int(text, expected):
    assert parse_int(text) == expected


def test_valid_words_round_trip_through_str():
    for text in ["-15", "0", "2147483647", "-2147483648", "300"]:
        assert str(parse_int(text)) == text


def test_split_single_argument_on_spaces():
    assert split_arguments(["  1 2   3 "]) == ["1", "2", "3"]


def test_split_keeps_several_arguments():
    assert split_arguments(["1", "2 3"]) == ["1", "2 3"]


def test_split_no_arguments():
    assert split_arguments([]) == []


def test_split_blank_argument_is_an_error():
    with pytest.raises(InputError):
        split_arguments(["   "])


def test_split_only_on_spaces():
    assert split_arguments(["1\t2"]) == ["1\t2"]


def test_parse_stack_first_number_on_top():
    stack = parse_stack(["3", "-1", "2"])
    assert list(stack) == [3, -1, 2]
    assert stack.peek() == 3


def test_parse_stack_from_single_argument():
    assert list(parse_stack(["5 4 9"])) == [5, 4, 9]


def test_parse_stack_empty():
    assert len(parse_stack([])) == 0


def test_parse_stack_rejects_duplicates():
    with pytest.raises(InputError):
        parse_stack(["1", "2", "1"])


def test_parse_stack_duplicates_with_different_spelling():
    with pytest.raises(InputError):
        parse_stack(["+4", "04"])


def test_parse_stack_rejects_non_integer():
    with pytest.raises(InputError):
        parse_stack(["1", "two"])


def test_parse_stack_rejects_overflow():
    with pytest.raises(InputError):
        parse_stack(["2147483648"])


def test_parse_stack_rejects_tab_separated():
    with pytest.raises(InputError):
        parse_stack(["1\t2"])


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_stack([""])