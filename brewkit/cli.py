import argparse
import sys
from typing import Callable, List, Optional

from pydantic import ValidationError

from brewkit.config import BrewSettings, get_settings
from brewkit.decisions import Decision, FixedDecision, PromptDecision, RandomDecision
from brewkit.domain import CoffeeWithHook
from brewkit.logging import LOGGER_NAME, create_logger
from brewkit.sinks import RecordingSink


def build_decision(mode: str, settings: BrewSettings, input_func: Callable[[str], str] = input) -> Decision:
    if mode == "yes":
        return FixedDecision(True)
    if mode == "no":
        return FixedDecision(False)
    if mode == "ask":
        return PromptDecision(input_func=input_func)
    return RandomDecision(probability=settings.sugar_probability, seed=settings.random_seed)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Brew a cup of coffee, step by step.")
    parser.add_argument(
        "--sugar",
        choices=["random", "yes", "no", "ask"],
        default="random",
        help="How the customer's sugar preference is decided.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random sugar decision.")
    parser.add_argument("--probability", type=float, default=None, help="Probability of adding sugar in random mode.")
    parser.add_argument("--log-level", type=str, default=None, help="Log level for the brewkit logger.")
    args = parser.parse_args(argv)

    overrides = {}
    if args.seed is not None:
        overrides["random_seed"] = args.seed
    if args.probability is not None:
        overrides["sugar_probability"] = args.probability
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    try:
        settings = BrewSettings(**{**get_settings().model_dump(), **overrides})
    except ValidationError as exc:
        parser.error(f"invalid settings: {exc}")

    logger = create_logger(LOGGER_NAME, settings.log_ring_size, settings.log_level)
    sink = RecordingSink()
    coffee = CoffeeWithHook(decide=build_decision(args.sugar, settings), sink=sink, logger=logger)
    serving = coffee.prepare()

    for event in sink.events:
        print(f"[{event.step.value}] {event.message}")
    print("Served with sugar." if serving.sugar_added else "Served without sugar.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
