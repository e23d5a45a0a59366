import random

from tinytools.mocknumber import generate_mock_number, main


def test_number_has_six_digits():
    for _ in range(50):
        number = generate_mock_number()
        assert len(number) == 6
        assert number.isdigit()


def test_same_seed_gives_same_number():
    first = generate_mock_number(random.Random(7))
    assert len(first) == 6
    assert first.isdigit()
    assert generate_mock_number(random.Random(7)) == first


def test_leading_zeros_are_kept():
    numbers = {generate_mock_number(random.Random(seed)) for seed in range(500)}
    assert any(n.startswith("0") for n in numbers)
    assert all(len(n) == 6 for n in numbers)


def test_main_prints_number(capsys):
    assert main() == 0
    out = capsys.readouterr().out.strip()
    prefix = "Generated mock number: "
    assert out.startswith(prefix)
    assert out[len(prefix):].isdigit()
    assert len(out[len(prefix):]) == 6