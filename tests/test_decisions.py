"""Tests for sugar decision sources."""
import pytest

from brewkit.decisions import FixedDecision, PromptDecision, RandomDecision


def test_random_decision_extremes():
    never = RandomDecision(probability=0.0)
    always = RandomDecision(probability=1.0)
    assert not any(never() for _ in range(100))
    assert all(always() for _ in range(100))


def test_random_decision_seed_is_reproducible():
    first = RandomDecision(seed=42)
    second = RandomDecision(seed=42)
    assert [first() for _ in range(30)] == [second() for _ in range(30)]


def test_random_decision_is_roughly_fair():
    decide = RandomDecision(seed=1)
    hits = sum(decide() for _ in range(1000))
    assert 400 < hits < 600


@pytest.mark.parametrize("probability", [-0.1, 1.5])
def test_random_decision_rejects_bad_probability(probability):
    with pytest.raises(ValueError):
        RandomDecision(probability=probability)


def test_fixed_decision():
    assert FixedDecision(True)() is True
    assert FixedDecision(False)() is False
    assert FixedDecision(0)() is False


@pytest.mark.parametrize(
    "answer, expected",
    [("y", True), ("YES", True), ("  yes ", True), ("n", False), ("maybe", False)],
)
def test_prompt_decision_answers(answer, expected):
    decide = PromptDecision(input_func=lambda prompt: answer)
    assert decide() is expected


def test_prompt_decision_empty_answer_uses_default():
    assert PromptDecision(input_func=lambda prompt: "")() is False
    assert PromptDecision(input_func=lambda prompt: "", default=True)() is True


def test_prompt_decision_eof_uses_default():
    def closed(prompt):
        raise EOFError

    assert PromptDecision(input_func=closed, default=True)() is True


def test_prompt_decision_shows_prompt():
    seen = []

    def answer(prompt):
        seen.append(prompt)
        return "y"

    PromptDecision(prompt="Sugar? ", input_func=answer)()
    assert seen == ["Sugar? "]
