"""Find the longest palindromic substring of a string."""

from __future__ import annotations

DEFAULT_WORD = "babad"


def is_palindrome(s: str) -> bool:
    """Return True if ``s`` reads the same backwards."""
    return s == s[::-1]


def longest_palindrome(s: str) -> str:
    """Return the first longest palindromic substring of ``s``."""
    result = ""
    for start in range(len(s)):
        for end in range(len(s), start, -1):
            candidate = s[start:end]
            if len(candidate) > len(result) and is_palindrome(candidate):
                result = candidate
    return result


def main(argv: list[str] | None = None) -> int:
    """Show the longest palindrome of the given word, or of a sample word."""
    word = argv[0] if argv else DEFAULT_WORD
    palindrome = longest_palindrome(word)
    print("Hello, world!")
    print(word)
    print(list(word))
    print(len(word))
    print(f"Longest Palindrome: {palindrome}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())