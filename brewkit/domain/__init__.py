"""
Domain models for brewkit: the beverage template and its coffee variant.
"""
from brewkit.domain.beverage import Beverage, BeverageSteps, REQUIRED_STEPS, run_template
from brewkit.domain.coffee import CoffeeWithHook

__all__ = ["Beverage", "BeverageSteps", "CoffeeWithHook", "REQUIRED_STEPS", "run_template"]
