"""An interactive learner: a facts page, a type-guessing game and an I/O quiz."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass

Reader = Callable[[], str]
Writer = Callable[[str], None]


@dataclass(frozen=True)
class Question:
    """One quiz question with its expected answer, a hint and a correction text."""

    prompt: str
    answer: str
    hint: str
    correction: str = ""

    def __post_init__(self) -> None:
        if not self.correction:
            object.__setattr__(self, "correction", f"The answer is {self.answer}.")

    def accepts(self, reply: str, case_sensitive: bool = True) -> bool:
        """Return True if ``reply`` (surrounding whitespace ignored) is the answer."""
        given = reply.strip()
        if case_sensitive:
            return given == self.answer
        return given.lower() == self.answer.lower()


def _type_question(value: str, type_name: str, hint: str) -> Question:
    return Question(
        prompt=f"What is the type of `{value}`?",
        answer=type_name,
        hint=hint,
        correction=f"The type of `{value}` is `{type_name}`.",
    )


FACTS: tuple[str, ...] = (
    "Rust was originally designed by Graydon Hoare at Mozilla Research.",
    "Rust has been voted the 'most loved programming language' in Stack Overflow's annual survey since 2016.",
    "Rust's mascot is a cute crab named 'Ferris'.",
    "Rust guarantees memory safety without using a garbage collector.",
    "The name 'Rust' comes from a fungus that is robust, distributed, and parallel.",
    "Rust's package manager and build system is called 'Cargo'.",
    "Rust has a built-in testing framework.",
    "Rust's ownership system prevents data races at compile time.",
    "Rust can be used for WebAssembly development.",
    "Rust is used by companies like Microsoft, Amazon, and Google for system programming.",
)

TYPE_QUESTIONS: tuple[Question, ...] = tuple(
    _type_question(value, type_name, hint)
    for value, type_name, hint in (
        ('"Hello"', "&str", "A string literal is a &str in Rust."),
        ("42", "i32", "Whole numbers without decimals are i32 by default."),
        ("3.14", "f64", "Numbers with decimals are f64 by default."),
        ("'a'", "char", "Single characters in single quotes are char."),
        ("true", "bool", "true or false values are bool."),
        ("[1, 2, 3]", "[i32; 3]", "A fixed-size array of i32 values."),
        ('String::from("test")', "String", "A growable string is a String type."),
        ("vec![1, 2, 3]", "Vec<i32>", "A dynamic array is a Vec<T> in Rust."),
        ('(1, "test")', "(i32, &str)", "A tuple can hold multiple types."),
        ("Some(42)", "Option<i32>", "An optional value uses the Option<T> enum."),
        ('Ok("success")', "Result<&str, E>", "A result type for error handling, where E is an error type."),
        ("{ x: 1, y: 2 }", "struct", "A custom struct with named fields."),
        ("&42", "&i32", "A reference to an i32 value."),
        ("&[1, 2, 3]", "&[i32]", "A slice of i32 values, borrowed from an array or Vec."),
        ("255u8", "u8", "An unsigned 8-bit integer, ranging from 0 to 255."),
        ("|x| x + 1", "fn(i32) -> i32", "A closure or function taking an i32 and returning an i32."),
        ("Box::new(42)", "Box<i32>", "A boxed i32 value, allocated on the heap."),
        ("std::fs::File", "File", "A type representing an open file, from the std::fs module."),
        ('b"hello"', "&[u8; 5]", "A byte string literal, represented as a fixed-size array of u8."),
        ("1_000_000", "i32", "Numeric literals can use underscores for readability, still an i32."),
    )
)

IO_QUESTIONS: tuple[Question, ...] = (
    Question("Which trait must be imported to use stdin()?", "std::io",
             "The std::io module provides I/O functionality"),
    Question("What method is used to read a line from stdin into a String?", "read_line",
             "read_line(&mut String) reads a line from standard input"),
    Question("How do you open a file for reading in Rust?", "File::open",
             "File::open() creates a new File instance for reading"),
    Question("Which method creates or opens a file for writing?", "File::create",
             "File::create() opens a file in write-only mode"),
    Question("What trait is required for reading from a file?", "Read",
             "The Read trait provides basic methods for reading bytes"),
    Question("What trait is required for writing to a file?", "Write",
             "The Write trait provides basic methods for writing bytes"),
    Question("Which method reads the entire contents of a file into a string?", "read_to_string",
             "read_to_string(&mut String) reads all contents into a string"),
    Question("What function can quickly write a string to a file?", "write_all",
             "write_all() writes all bytes to an output"),
    Question("Which type represents a buffered reader?", "BufReader",
             "BufReader<R> adds buffering to any reader"),
    Question("What happens if File::open fails to open a file?", "Result<T, E>",
             "It returns a Result type that must be handled"),
)

TYPE_VERDICTS = (
    "Perfect! You're a Rust type master!",
    "Good job! Keep practicing those Rust types!",
    "You'll get better with practice! Try again!",
)
IO_VERDICTS = (
    "Perfect! You're a Rust I/O expert!",
    "Good job! Keep learning about Rust's I/O operations!",
    "Keep practicing! Rust I/O operations are important!",
)

MENU = (
    "\nMAIN MENU",
    "------------------",
    "a) Learn Rust Facts",
    "b) Learn Rust Types",
    "c) Learn Rust I/O",
    "q) Quit Program",
    "------------------",
    "Enter your choice (a/b/c/q): ",
)

RETURN_PROMPT = "Press Enter to return to main menu..."


def run_quiz(
    questions: Sequence[Question],
    read: Reader,
    write: Writer,
    case_sensitive: bool = True,
) -> int:
    """Ask every question in turn, report on each reply and return the score."""
    score = 0
    for number, question in enumerate(questions, start=1):
        write(f"Question {number}: {question.prompt}")
        if question.accepts(read(), case_sensitive):
            write(f"Correct! {question.hint}")
            score += 1
        else:
            write(f"Incorrect. {question.correction} {question.hint}")
        write("")
    return score


def verdict(score: int, total: int, messages: Sequence[str]) -> str:
    """Pick the perfect, good (at least half) or poor message for a score."""
    perfect, good, poor = messages
    if score == total:
        return perfect
    if score >= total // 2:
        return good
    return poor


def _show_facts(read: Reader, write: Writer) -> None:
    write("\nRUST FACTS")
    write("------------------")
    for number, fact in enumerate(FACTS, start=1):
        write(f"Fact #{number}: {fact}\n")
    write(RETURN_PROMPT)
    read()


def _finish(score: int, total: int, heading: str, messages: Sequence[str],
            read: Reader, write: Writer) -> None:
    write(heading)
    write(f"Your score: {score}/{total}")
    write(verdict(score, total, messages))
    write("\n" + RETURN_PROMPT)
    read()


def _play_type_game(read: Reader, write: Writer) -> None:
    write("Welcome to the Rust Type Learning Game!")
    write("Your goal is to guess the correct Rust type for each value.")
    write("Type your answer and press Enter. Let's begin!\n")
    score = run_quiz(TYPE_QUESTIONS, read, write, case_sensitive=True)
    _finish(score, len(TYPE_QUESTIONS), "Game Over!", TYPE_VERDICTS, read, write)


def _play_io_quiz(read: Reader, write: Writer) -> None:
    write("Welcome to the Rust I/O Learning Quiz!")
    write("Test your knowledge about Rust's input/output operations.\n")
    score = run_quiz(IO_QUESTIONS, read, write, case_sensitive=False)
    _finish(score, len(IO_QUESTIONS), "Quiz Complete!", IO_VERDICTS, read, write)


def _run_menu(read: Reader, write: Writer) -> None:
    actions = {"a": _show_facts, "b": _play_type_game, "c": _play_io_quiz}
    write("Welcome to RustLearner!")
    while True:
        for line in MENU:
            write(line)
        choice = read().strip().lower()
        if choice == "q":
            write("Thank you for using RustLearner! Goodbye!")
            return
        action = actions.get(choice)
        if action is None:
            write("Invalid choice! Please try again.")
        else:
            action(read, write)


def _read_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line


def main(argv: list[str] | None = None) -> int:
    """Run the menu on standard input and output until the user quits."""
    try:
        _run_menu(_read_line, print)
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())