import string

import pytest
from hypothesis import given, strategies as st

from algobox.strings import evaluate_postfix, is_palindrome, title_to_number

titles = st.text(alphabet=string.ascii_uppercase, min_size=1, max_size=5)
ascii_text = st.text(alphabet=string.ascii_letters + string.digits + " ,.:!", max_size=20)


def test_two_letter_title():
    assert title_to_number("AB") == 28


@pytest.mark.parametrize("position,letter", list(enumerate(string.ascii_uppercase)))
def test_single_letters_count_from_one(position, letter):
    assert title_to_number(letter) == position + 1


@given(titles)
def test_appending_letter_shifts_base_26(title):
    assert title_to_number(title + "A") == 26 * title_to_number(title) + 1


@given(titles, titles)
def test_longer_titles_have_larger_numbers(first, second):
    if len(first) < len(second):
        assert title_to_number(first) < title_to_number(second)


def test_title_rejects_other_characters():
    with pytest.raises(ValueError):
        title_to_number("ab")
    with pytest.raises(ValueError):
        title_to_number("A1")


def test_sentence_palindrome():
    sentence = "A man, a plan, a canal: Panama"
    assert is_palindrome(sentence) is True
    assert is_palindrome(sentence) == is_palindrome("amanaplanacanalpanama")


@given(ascii_text)
def test_text_followed_by_reverse_is_palindrome(text):
    assert is_palindrome(text + text[::-1]) is True


@given(ascii_text)
def test_case_is_ignored(text):
    assert is_palindrome(text) == is_palindrome(text.swapcase())


@given(ascii_text)
def test_non_alphanumerics_are_ignored(text):
    stripped = "".join(char for char in text if char.isalnum())
    assert is_palindrome(text) == is_palindrome(stripped)


def test_postfix_example():
    assert evaluate_postfix("231*+9-") == -4.0


def test_postfix_division_truncates():
    assert evaluate_postfix("72/") == 3.0


@given(st.integers(0, 9), st.integers(0, 9))
def test_postfix_binary_operations(left, right):
    assert evaluate_postfix(f"{left}{right}+") == left + right
    assert evaluate_postfix(f"{left}{right}-") == left - right
    assert evaluate_postfix(f"{left}{right}*") == left * right
    assert evaluate_postfix(f"{left}{right}^") == float(left**right)


def test_postfix_ignores_spaces():
    assert evaluate_postfix("2 3 + 4 *") == evaluate_postfix("23+4*")


def test_postfix_errors():
    with pytest.raises(ValueError):
        evaluate_postfix("")
    with pytest.raises(ValueError):
        evaluate_postfix("2+")
    with pytest.raises(ZeroDivisionError):
        evaluate_postfix("50/")