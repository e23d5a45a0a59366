"""A short interactive self-introduction followed by an Enter-key counter."""

from __future__ import annotations

import sys
from collections.abc import Callable

Reader = Callable[[], str]
Writer = Callable[[str], None]

DIGITS = (5, 4, 3, 2, 1)
AGE = 23

RESUME = (
    "My name is Alex Doe",
    "I am 23 years old",
    "I want to become the greatest 1 million x programmer",
    "This is my resume",
    "I have work in SEO and digital marketing field",
    "I studied computer science and multimedia design ",
    "stop",
)


def _sign(n: int) -> str:
    if n < 0:
        return f"{n} is negative"
    if n > 0:
        return f"{n} is positive"
    return f"{n} is zero"


def run_notes(read: Reader, write: Writer) -> int:
    """Show the notes, pausing after each resume line, then count empty lines.

    Reading stops when ``read`` raises EOFError; the count reached is returned.
    """
    write("this is the 5 digit number")
    write(_sign(DIGITS[0]) + ",".join(str(d) for d in DIGITS))
    write("What is muutable and immutable??")
    write(
        "Object that can be change after creation is called mutable and immutable "
        "is something that cannot be change is called immutable"
    )
    write(f"You will be {AGE + 100} years old in the next 100 yeear")

    exhausted = False
    for line in RESUME:
        write(line)
        if not exhausted:
            try:
                read()
            except EOFError:
                exhausted = True

    write("I am sleeping now for 35 lines of code lol")
    write(
        "today is day 2 i want to do sth lets do sth counter when a user click \n"
        "    enter it will count one two three four five "
    )
    write("Press Enter to count, Ctrl+C to exit")

    counter = 0
    if exhausted:
        return counter
    while True:
        try:
            line = read()
        except EOFError:
            return counter
        if not line.strip():
            counter += 1
            write(f"Count: {counter}")


def _read_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line


def main(argv: list[str] | None = None) -> int:
    """Run the notes on standard input until end of input or Ctrl+C."""
    try:
        run_notes(_read_line, print)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())