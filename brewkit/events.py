"""
Notification and outcome models emitted while a beverage is prepared.
"""
from __future__ import annotations

import time
from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class BrewStep(str, Enum):
    """Distinguishable events of the brewing algorithm."""
    BOIL = "boil"
    BREW = "brew"
    POUR = "pour"
    DECIDE = "decide"
    ADD_SUGAR = "add_sugar"


class BrewEvent(BaseModel):
    """
    A single human-readable notification.

    Attributes:
        step: Which step produced the notification.
        message: Free-form text; not a stable contract.
        details: Extra structured data attached by the step.
        ts: Creation time as a UNIX timestamp.
    """
    model_config = ConfigDict(frozen=True)

    step: BrewStep
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)
    ts: float = Field(default_factory=time.time)


class Serving(BaseModel):
    """Outcome of one run of the template: which steps ran and whether sugar went in."""

    beverage: str
    sugar_added: bool
    steps: List[BrewStep] = Field(default_factory=list)
