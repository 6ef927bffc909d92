from __future__ import annotations

import logging
from typing import Optional

from brewkit.decisions import Decision, RandomDecision
from brewkit.domain.beverage import Beverage
from brewkit.events import BrewStep
from brewkit.sinks import EventSink


class CoffeeWithHook(Beverage):
    """
    Coffee whose sugar decision comes from an injected source.

    Args:
        decide: Zero-argument callable returning ``bool``. Defaults to a
            fair coin; swap in ``PromptDecision`` to ask the customer.
    """

    def __init__(
        self,
        decide: Optional[Decision] = None,
        sink: Optional[EventSink] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        super().__init__(sink=sink, logger=logger)
        self.decide = decide if decide is not None else RandomDecision(0.5)

    def brew(self) -> None:
        self.notify(BrewStep.BREW, "Brewing coffee with boiling water")

    def pour_in_cup(self) -> None:
        self.notify(BrewStep.POUR, "Pouring coffee into the cup")

    def add_sugar(self) -> None:
        self.notify(BrewStep.ADD_SUGAR, "Adding sugar")

    def customer_wants_sugar(self) -> bool:
        return bool(self.decide())
