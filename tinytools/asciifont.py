"""Render the letters a to z as large block glyphs made of asterisks."""

from __future__ import annotations

import sys

PROMPT = "Convert chars (a to z to asc2)* or type 'exit' to quit"
BANNER = "*" * 18

GLYPHS: dict[str, tuple[str, ...]] = {
    "a": ("  *****  ", " *     * ", "*       *", "*********", "*       *", "*       *"),
    "b": ("******  ", "*     * ", "******  ", "*     * ", "*     * ", "******  "),
    "c": (" ***** ", "*      ", "*      ", "*      ", "*      ", " ***** "),
    "d": ("******  ", "*     * ", "*     * ", "*     * ", "*     * ", "******  "),
    "e": ("*******", "*      ", "*****  ", "*      ", "*      ", "*******"),
    "f": ("*******", "*      ", "*****  ", "*      ", "*      ", "*      "),
    "g": (" ***** ", "*      ", "*  ****", "*     *", "*     *", " ***** "),
    "h": ("*     *", "*     *", "*******", "*     *", "*     *", "*     *"),
    "i": ("*******", "   *   ", "   *   ", "   *   ", "   *   ", "*******"),
    "j": ("*******", "    *  ", "    *  ", "    *  ", "*   *  ", " ***   "),
    "k": ("*    * ", "*   *  ", "****   ", "*   *  ", "*    * ", "*     *"),
    "l": ("*      ", "*      ", "*      ", "*      ", "*      ", "*******"),
    "m": ("*     *", "**   **", "* * * *", "*  *  *", "*     *", "*     *"),
    "n": ("*     *", "**    *", "* *   *", "*  *  *", "*   * *", "*    **"),
    "o": (" ***** ", "*     *", "*     *", "*     *", "*     *", " ***** "),
    "p": ("****** ", "*     *", "****** ", "*      ", "*      ", "*      "),
    "q": (" ***** ", "*     *", "*     *", "*   * *", "*    * ", " **** *"),
    "r": ("****** ", "*     *", "****** ", "*   *  ", "*    * ", "*     *"),
    "s": (" ***** ", "*      ", " ***** ", "      *", "*     *", " ***** "),
    "t": ("*******", "   *   ", "   *   ", "   *   ", "   *   ", "   *   "),
    "u": ("*     *", "*     *", "*     *", "*     *", "*     *", " ***** "),
    "v": ("*     *", "*     *", "*     *", " *   * ", "  * *  ", "   *   "),
    "w": ("*     *", "*     *", "*  *  *", "* * * *", "**   **", "*     *"),
    "x": ("*     *", " *   * ", "  ***  ", "  ***  ", " *   * ", "*     *"),
    "y": ("*     *", " *   * ", "  * *  ", "   *   ", "   *   ", "   *   "),
    "z": ("*******", "     * ", "   *   ", " *     ", "*      ", "*******"),
}


def glyph(char: str) -> tuple[str, ...]:
    """Return the rows of the block glyph for an ASCII letter (any case)."""
    try:
        return GLYPHS[char.lower()] if len(char) == 1 and char.isascii() else GLYPHS[""]
    except KeyError:
        raise ValueError(f"no glyph for {char!r}") from None


def render(text: str) -> str:
    """Render every ASCII letter of ``text`` as a blank line followed by its glyph."""
    return "".join(
        "\n" + "\n".join(glyph(c)) + "\n"
        for c in text
        if c.isascii() and c.isalpha()
    )


def main(argv: list[str] | None = None) -> int:
    """Read lines from standard input and print their letters as glyphs until 'exit'."""
    while True:
        print(BANNER)
        print(PROMPT)
        line = sys.stdin.readline()
        if not line:
            break
        text = line.strip()
        if text.lower() == "exit":
            print("Goodbye!")
            break
        sys.stdout.write(render(text))
        print("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())