"""
The beverage template.

``run_template`` fixes the order in which a beverage is made; ``Beverage``
is the abstract base whose subclasses fill in the individual steps and may
replace the ``customer_wants_sugar`` hook. The order itself is never
customizable: subclasses that try to override ``prepare`` or that leave a
mandatory step unimplemented are rejected when the class is defined.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional, Protocol, runtime_checkable

from brewkit.errors import IncompleteBeverageError, TemplateOverrideError
from brewkit.events import BrewEvent, BrewStep, Serving
from brewkit.logging import LOGGER_NAME, get_logger
from brewkit.sinks import EventSink, LoggingSink

REQUIRED_STEPS = ("brew", "pour_in_cup", "add_sugar")
TEMPLATE_METHOD = "prepare"


@runtime_checkable
class BeverageSteps(Protocol):
    def boil_water(self) -> None:
        ...

    def brew(self) -> None:
        ...

    def pour_in_cup(self) -> None:
        ...

    def add_sugar(self) -> None:
        ...

    def customer_wants_sugar(self) -> bool:
        ...


def run_template(steps: BeverageSteps, *, logger: Optional[logging.Logger] = None) -> Serving:
    """
    Run the brewing algorithm on any object providing ``BeverageSteps``.

    The order is boil, brew, pour, then a single evaluation of
    ``customer_wants_sugar``; sugar is added only when it returns ``True``.
    Exceptions raised by a step propagate and the remaining steps do not run.

    Args:
        steps: The beverage whose steps are executed.
        logger: Receives the DEBUG record for the sugar decision.

    Returns:
        A ``Serving`` describing which steps ran.
    """
    if logger is None:
        logger = logging.getLogger(LOGGER_NAME)
    name = type(steps).__name__

    steps.boil_water()
    steps.brew()
    steps.pour_in_cup()
    ran = [BrewStep.BOIL, BrewStep.BREW, BrewStep.POUR, BrewStep.DECIDE]

    wants_sugar = bool(steps.customer_wants_sugar())
    logger.debug(
        "customer_wants_sugar",
        extra={"details": {"beverage": name, "step": BrewStep.DECIDE.value, "decision": wants_sugar}},
    )
    if wants_sugar:
        steps.add_sugar()
        ran.append(BrewStep.ADD_SUGAR)

    return Serving(beverage=name, sugar_added=wants_sugar, steps=ran)


class Beverage(ABC):
    """
    Abstract base for every beverage.

    Subclasses must implement ``brew``, ``pour_in_cup`` and ``add_sugar``.
    ``customer_wants_sugar`` is a hook defaulting to ``True``. Pass
    ``abstract=True`` in the class statement for intermediate bases that
    intentionally leave steps unimplemented.

    Args:
        sink: Receives step notifications. Defaults to a ``LoggingSink``.
        logger: Logger used for the decision record and the default sink.
    """

    def __init_subclass__(cls, abstract: bool = False, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if TEMPLATE_METHOD in cls.__dict__:
            raise TemplateOverrideError(cls.__name__, TEMPLATE_METHOD)
        if abstract:
            return
        missing = [
            name for name in REQUIRED_STEPS
            if getattr(getattr(cls, name, None), "__isabstractmethod__", False)
        ]
        if missing:
            raise IncompleteBeverageError(cls.__name__, missing)

    def __init__(self, sink: Optional[EventSink] = None, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger if logger is not None else get_logger()
        self.sink = sink if sink is not None else LoggingSink(self.logger)

    def notify(self, step: BrewStep, message: str, **details: Any) -> None:
        self.sink.emit(BrewEvent(step=step, message=message, details=details))

    def boil_water(self) -> None:
        self.notify(BrewStep.BOIL, "Boiling water")

    @abstractmethod
    def brew(self) -> None:
        ...

    @abstractmethod
    def pour_in_cup(self) -> None:
        ...

    @abstractmethod
    def add_sugar(self) -> None:
        ...

    def customer_wants_sugar(self) -> bool:
        # Default: add sugar.
        return True

    def prepare(self) -> Serving:
        return run_template(self, logger=self.logger)
