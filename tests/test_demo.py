"""Tests for the console game loop (scripted commands, no stdin)."""

import numpy as np

from fractionfoods.demo import play
from fractionfoods.session import new_session


def _first_target(seed):
    return new_session(rng=np.random.RandomState(seed)).active_fraction


def _play(commands, **kwargs):
    lines = []
    result = play(commands=commands, out=lines.append, **kwargs)
    return result, lines


class TestPlay:
    def test_correct_answer(self):
        f = _first_target(0)
        correct, lines = _play([f"{f.numerator}/{f.denominator}", "q"], seed=0)
        assert correct == 1
        assert any(line.startswith("Correct!") for line in lines)
        assert any("Round 2:" in line for line in lines)

    def test_wrong_answer(self):
        f = _first_target(3)
        wrong = f"{f.numerator}/{f.denominator + 1}"
        correct, lines = _play([wrong, "q"], seed=3)
        assert correct == 0
        assert "Not quite, try again." in lines

    def test_adjust_then_submit(self):
        correct, lines = _play(["d+", "n+", "s", "q"], seed=1)
        f = _first_target(1)
        assert correct == int((f.numerator, f.denominator) == (2, 2))

    def test_bad_command(self):
        _, lines = _play(["three eighths", "q"], seed=0)
        assert "Type a fraction like 3/8, n+/n-/d+/d-, s or q." in lines

    def test_commands_run_out(self):
        correct, lines = _play([], seed=0)
        assert correct == 0
        assert lines[-1].endswith("0 correct.")

    def test_question_shown(self):
        _, lines = _play(["q"], seed=2)
        assert any(line.startswith("\nRound 1: What fraction of the") for line in lines)

    def test_preview_saved(self, tmp_path):
        _play(["q"], seed=0, preview_dir=str(tmp_path))
        assert (tmp_path / "round_001.png").exists()
