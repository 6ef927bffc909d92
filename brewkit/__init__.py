from brewkit.domain import Beverage, BeverageSteps, CoffeeWithHook, run_template
from brewkit.decisions import FixedDecision, PromptDecision, RandomDecision
from brewkit.errors import BeverageDefinitionError, IncompleteBeverageError, TemplateOverrideError
from brewkit.events import BrewEvent, BrewStep, Serving
from brewkit.sinks import EventSink, LoggingSink, RecordingSink
from brewkit.config import BrewSettings, get_settings
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "Beverage",
    "BeverageSteps",
    "CoffeeWithHook",
    "run_template",
    "FixedDecision",
    "PromptDecision",
    "RandomDecision",
    "BeverageDefinitionError",
    "IncompleteBeverageError",
    "TemplateOverrideError",
    "BrewEvent",
    "BrewStep",
    "Serving",
    "EventSink",
    "LoggingSink",
    "RecordingSink",
    "BrewSettings",
    "get_settings",
]

try:
    __version__ = version("brewkit")
except PackageNotFoundError:
    __version__ = "0.0.0"
