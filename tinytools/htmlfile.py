"""Write a tiny HTML fragment to a file."""

from __future__ import annotations

from pathlib import Path

CONTENT = "<div>helloworld</div>"
DEFAULT_PATH = "hello.html"


def write_hello(path: str | Path = DEFAULT_PATH) -> Path:
    """Create or overwrite ``path`` with the hello fragment and return its path."""
    target = Path(path)
    target.write_bytes(CONTENT.encode())
    return target


def main(argv: list[str] | None = None) -> int:
    """Write the fragment to hello.html, or to the path given as the first argument."""
    args = argv or []
    write_hello(args[0] if args else DEFAULT_PATH)
    print("Successfully wrote to hello.txt")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())