"""Generate a six-digit mock number."""

from __future__ import annotations

import random

DIGITS = 6


def generate_mock_number(rng: random.Random | None = None) -> str:
    """Return a string of six random decimal digits."""
    source = rng if rng is not None else random
    return "".join(str(source.randrange(10)) for _ in range(DIGITS))


def main(argv: list[str] | None = None) -> int:
    """Print one generated mock number."""
    print(f"Generated mock number: {generate_mock_number()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())