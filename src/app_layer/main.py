"""
Command-line entry point for the store trip simulation.
"""

import argparse
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

from dotenv import load_dotenv

from config import get_settings
from src.app_layer.narrator import ConsoleNarrator
from src.simulation_layer.engine import SimulationEngine
from src.simulation_layer.narration import Narrator
from src.simulation_layer.persona.cognitive_modules.perceive import RandomBinarySource

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="store-trip",
        description="Perceptron agent going to the store and back",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the coin flips for a reproducible trip (default: SIM_SEED or random)",
    )
    parser.add_argument(
        "--starting-money",
        type=float,
        default=None,
        help="Cash in the wallet when leaving home (default: SIM_STARTING_MONEY or 75)",
    )
    parser.add_argument(
        "--save-events",
        action="store_true",
        help="Write the event log as CSV to the output directory",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not narrate the trip, only print the final balance",
    )
    return parser


def save_events(engine: SimulationEngine, output_dir: Path) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / f"store_trip_{datetime.now().strftime('%Y%m%d_%H%M%S')}.csv"
    engine.events_frame().to_csv(path, index=False, encoding="utf-8-sig")
    return path


def main(
    argv: Optional[List[str]] = None,
    read_direction: Callable[[str], str] = input,
) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log.level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    sim_settings = settings.simulation
    overrides = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.starting_money is not None:
        overrides["starting_money"] = args.starting_money
    if overrides:
        sim_settings = sim_settings.model_copy(update=overrides)

    narrator = Narrator() if args.quiet else ConsoleNarrator()
    engine = SimulationEngine(
        source=RandomBinarySource(sim_settings.seed),
        read_direction=read_direction,
        narrator=narrator,
        settings=sim_settings,
    )

    try:
        summary = engine.run()
    except (EOFError, KeyboardInterrupt):
        print("\nInput closed before the shopping was done.")
        return 1

    if args.quiet:
        print(f"Money left: ${summary.final_money:.2f}")

    if args.save_events:
        path = save_events(engine, settings.paths.output_dir)
        print(f"Event log saved: {path}")

    LOGGER.debug("run_complete", extra={"events": len(engine.events)})
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
