"""
Decision sources for the ``customer_wants_sugar`` hook.

Each source is a zero-argument callable returning ``bool``, so any plain
function or lambda works just as well.
"""
from __future__ import annotations

import random
from typing import Callable, Optional

Decision = Callable[[], bool]

YES_ANSWERS = frozenset({"y", "yes"})


class RandomDecision:
    """A Bernoulli draw: ``True`` with the given probability."""

    def __init__(self, probability: float = 0.5, seed: Optional[int] = None) -> None:
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"probability must be within [0, 1], got {probability!r}")
        self.probability = probability
        self._rng = random.Random(seed)

    def __call__(self) -> bool:
        return self._rng.random() < self.probability

    def __repr__(self) -> str:
        return f"RandomDecision(probability={self.probability})"


class FixedDecision:
    def __init__(self, value: bool) -> None:
        self.value = bool(value)

    def __call__(self) -> bool:
        return self.value

    def __repr__(self) -> str:
        return f"FixedDecision({self.value})"


class PromptDecision:
    """
    Ask the customer interactively.

    Args:
        prompt: Text shown before reading the answer.
        input_func: Function used to read the answer, ``input`` by default.
        default: Returned for an empty answer or when input is closed.
    """

    def __init__(
        self,
        prompt: str = "Add sugar? [y/N] ",
        input_func: Callable[[str], str] = input,
        default: bool = False,
    ) -> None:
        self.prompt = prompt
        self.input_func = input_func
        self.default = default

    def __call__(self) -> bool:
        try:
            answer = self.input_func(self.prompt)
        except EOFError:
            return self.default
        answer = answer.strip().lower()
        if not answer:
            return self.default
        return answer in YES_ANSWERS

