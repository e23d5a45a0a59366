import pytest

from tinytools.palindrome import is_palindrome, longest_palindrome, main


@pytest.mark.parametrize("word", ["", "a", "aa", "aba", "racecar"])
def test_is_palindrome_true(word):
    assert is_palindrome(word) is True


@pytest.mark.parametrize("word", ["ab", "abca", "babad"])
def test_is_palindrome_false(word):
    assert is_palindrome(word) is False


def test_longest_palindrome_sample():
    assert longest_palindrome("babad") == "bab"


def test_longest_palindrome_empty():
    assert longest_palindrome("") == ""


def test_whole_palindrome_is_returned():
    assert longest_palindrome("racecar") == "racecar"


@pytest.mark.parametrize("word", ["cbbd", "forgeeksskeegfor", "abcde", "xyzzyx1"])
def test_result_is_longest_palindromic_substring(word):
    result = longest_palindrome(word)
    assert result in word
    assert is_palindrome(result)
    longest = max(
        len(word[i:j]) for i in range(len(word)) for j in range(i + 1, len(word) + 1)
        if is_palindrome(word[i:j])
    )
    assert len(result) == longest


def test_main_output(capsys):
    assert main() == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Hello, world!"
    assert out[-1] == "Longest Palindrome: bab"