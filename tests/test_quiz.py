import io
import sys

import pytest

from tinytools.quiz import (
    IO_QUESTIONS,
    IO_VERDICTS,
    TYPE_QUESTIONS,
    TYPE_VERDICTS,
    Question,
    main,
    run_quiz,
    verdict,
)


def _collect():
    lines = []
    return lines, lines.append


def _reader(replies):
    return iter(replies).__next__


def test_question_default_correction_names_answer():
    q = Question("Pick one", "yes", "It is yes")
    assert q.correction == "The answer is yes."


def test_question_accepts_strips_and_respects_case():
    q = Question("Pick", "Read", "hint")
    assert q.accepts("  Read\n")
    assert not q.accepts("read")
    assert q.accepts("read", case_sensitive=False)


def test_run_quiz_scores_and_reports():
    questions = [Question("A?", "a", "ha"), Question("B?", "b", "hb")]
    out, write = _collect()
    score = run_quiz(questions, _reader(["a\n", "x\n"]), write)
    assert score == 1
    assert out[0] == "Question 1: A?"
    assert out[1] == "Correct! ha"
    assert out[2] == ""
    assert out[3] == "Question 2: B?"
    assert out[4] == "Incorrect. The answer is b. hb"


def test_run_quiz_case_insensitive():
    out, write = _collect()
    score = run_quiz(IO_QUESTIONS[:1], _reader(["STD::IO\n"]), write, case_sensitive=False)
    assert score == 1


def test_type_question_wording():
    out, write = _collect()
    score = run_quiz(TYPE_QUESTIONS[:1], _reader(["String\n"]), write)
    assert score == 0
    assert out[0] == 'Question 1: What is the type of `"Hello"`?'
    assert out[1] == (
        'Incorrect. The type of `"Hello"` is `&str`. A string literal is a &str in Rust.'
    )


def test_type_question_correct_answer():
    out, write = _collect()
    score = run_quiz(TYPE_QUESTIONS[:1], _reader(["&str\n"]), write)
    assert score == 1
    assert out[1] == "Correct! A string literal is a &str in Rust."


@pytest.mark.parametrize(
    "score,total,index",
    [(10, 10, 0), (5, 10, 1), (4, 10, 2), (1, 3, 1), (0, 3, 2), (20, 20, 0)],
)
def test_verdict_thresholds(score, total, index):
    assert verdict(score, total, TYPE_VERDICTS) == TYPE_VERDICTS[index]


def _run_main(monkeypatch, capsys, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    code = main([])
    return code, capsys.readouterr().out


def test_main_quit(monkeypatch, capsys):
    code, out = _run_main(monkeypatch, capsys, "q\n")
    assert code == 0
    assert out.startswith("Welcome to RustLearner!")
    assert "Thank you for using RustLearner! Goodbye!" in out


def test_main_invalid_choice(monkeypatch, capsys):
    _, out = _run_main(monkeypatch, capsys, "z\nQ\n")
    assert "Invalid choice! Please try again." in out
    assert out.count("MAIN MENU") == 2


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    code, out = _run_main(monkeypatch, capsys, "")
    assert code == 0
    assert "Goodbye!" not in out


def test_main_facts(monkeypatch, capsys):
    _, out = _run_main(monkeypatch, capsys, "a\n\nq\n")
    assert "Fact #1: Rust was originally designed by Graydon Hoare at Mozilla Research." in out
    assert "Fact #10:" in out


def test_main_type_game_perfect(monkeypatch, capsys):
    answers = "".join(q.answer + "\n" for q in TYPE_QUESTIONS)
    _, out = _run_main(monkeypatch, capsys, "b\n" + answers + "\nq\n")
    assert f"Your score: {len(TYPE_QUESTIONS)}/{len(TYPE_QUESTIONS)}" in out
    assert TYPE_VERDICTS[0] in out
    assert "Game Over!" in out


def test_main_io_quiz_all_wrong(monkeypatch, capsys):
    replies = "nope\n" * len(IO_QUESTIONS)
    _, out = _run_main(monkeypatch, capsys, "c\n" + replies + "\nq\n")
    assert f"Your score: 0/{len(IO_QUESTIONS)}" in out
    assert IO_VERDICTS[2] in out
    assert "Quiz Complete!" in out