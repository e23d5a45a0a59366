# tinytools

A small collection of command-line learning tools. Each tool is its own command
and its own module in the `tinytools` package.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

### `tinytools-asciifont`

Repeatedly prints a banner and a prompt, reads a line from standard input and
prints every ASCII letter in it as a six-row block of `*` characters, each
preceded by a blank line. Upper- and lower-case letters look the same; anything
that is not an ASCII letter is skipped. Type `exit` (any case) to quit; the
command also stops at end of input.

### `tinytools-mocknumber`

Prints a random six-digit mock number, for example
`Generated mock number: 048213`. Leading zeros are kept.

### `tinytools-palindrome`

Finds the longest palindromic substring of the sample word `babad`. It prints
the word, its characters and its length, then `Longest Palindrome: bab`.

### `tinytools-htmlfile`

Writes `<div>helloworld</div>` to `hello.html` in the current directory,
replacing the file if it exists, and prints a confirmation line.

### `tinytools-imgascii`

```
tinytools-imgascii path/to/picture.png
```

Prints the first 100 hex digits of the image's RGB bytes, the size of the
character grid, and then the image as ASCII art no larger than 150×40
characters. Bright areas use dense characters (`@`, `#`, `S`, …) and dark ones
sparse characters (`,`, `.`). The width is stretched by a factor of two to
allow for terminal characters being taller than they are wide. Without a path
it prints a usage line to standard error and exits with status 1.

### `tinytools-chatserver`

Starts a small HTTP server on `127.0.0.1:8081` that accepts `POST /` with a
JSON body such as `{"message": "hello"}` and answers with
`{"response": "..."}`. Greetings (`hey`, `hello`, `hi`) and farewells
(`goodbye`, `bye`, `see you`, `byebye`), matched without regard to case, get a
random friendly reply; any other message is echoed back with a leading space.
A body that is not a JSON object with a string `message` gets status 400.
Responses carry headers that allow any origin, method and header.

### `tinytools-quiz`

A menu-driven learner with four choices: `a` shows a list of facts, `b` plays a
game about guessing value types (answers must match exactly), `c` runs a quiz
about input and output operations (answers are compared without regard to
case), and `q` quits. Each game prints the score and a verdict: one message for
a perfect score, one for at least half, one for less. The menu also ends at end
of input.

### `tinytools-notes`

Prints a short introduction, then a list of resume lines one at a time, waiting
for Enter after each. After that it counts every empty line entered and prints
the running count, until end of input or Ctrl+C.

## Using the library

```python
import random

from tinytools.asciifont import glyph, render
from tinytools.palindrome import is_palindrome, longest_palindrome
from tinytools.mocknumber import generate_mock_number
from tinytools.chatserver import reply, create_app
from tinytools.quiz import Question, run_quiz, verdict

longest_palindrome("babad")          # "bab"
is_palindrome("level")               # True
print(render("hi"))                  # block letters for h and i
glyph("A")                           # the six rows of the letter a
generate_mock_number(random.Random(1))
reply("Bye", random.Random(0))       # one of the farewell replies
app = create_app()                   # a Flask app serving POST /
```

- `tinytools.asciifont.glyph(char)` raises `ValueError` for anything other than
  a single ASCII letter.
- `tinytools.imgascii` offers `scaled_dimensions(width, height, ...)`,
  `intensity_char(r, g, b)` and `image_to_ascii(image, ...)`, which takes a
  Pillow image and returns the rows of art as strings.
- `tinytools.htmlfile.write_hello(path)` writes the fragment to any path and
  returns it as a `Path`.
- `tinytools.quiz.run_quiz(questions, read, write, case_sensitive)` and
  `tinytools.notes.run_notes(read, write)` take a function that returns the
  next input line and a function that prints a line, so they can be driven
  without a terminal. `run_notes` stops when `read` raises `EOFError` and
  returns the count reached.