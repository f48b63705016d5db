#!/usr/bin/env python3
"""Solar system generator - command-line entry point.

Generates one or more deterministic solar systems and prints a summary line
per system, or the full result as canonical JSON.
"""

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from solargen.engine.batch import generate_batch
from solargen.errors import SolarSystemGenerationError
from solargen.models.enums import SolarSystemClass
from solargen.registry import get_registry
from solargen.schemas import BatchGenerationRequest, GenerationRequest, SystemSummaryResponse
from solargen.utils import DEFAULT_BATCH_WORKERS, RNG_SEED_DEFAULT
from solargen.utils.serialization import result_to_dict


def list_classes() -> None:
    """Print every registered archetype with its real-world example."""
    for definition in get_registry():
        print(f"{definition.system_class.value:<24} {definition.name} ({definition.real_world_example})")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Procedural solar system generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                   # One random system, seed 42
  %(prog)s --class compact_system --seed 7   # TRAPPIST-1-like system
  %(prog)s --count 100 --workers 8           # 100 systems, consecutive seeds
  %(prog)s --class single_star --json        # Full result as JSON
  %(prog)s --list-classes                    # Show all archetypes
        """,
    )
    parser.add_argument(
        "--class",
        dest="system_class",
        choices=[c.value for c in SolarSystemClass],
        metavar="CLASS",
        help="System archetype to generate (default: weighted random)",
    )
    parser.add_argument(
        "--seed", type=int, default=RNG_SEED_DEFAULT, help=f"RNG seed (default: {RNG_SEED_DEFAULT})"
    )
    parser.add_argument(
        "--count", type=int, default=1, help="Number of systems, using consecutive seeds"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=DEFAULT_BATCH_WORKERS,
        help=f"Worker threads for batches (default: {DEFAULT_BATCH_WORKERS})",
    )
    parser.add_argument("--json", action="store_true", help="Print full results as JSON")
    parser.add_argument("--list-classes", action="store_true", help="List archetypes and exit")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    log_level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    if args.list_classes:
        list_classes()
        return

    if args.count < 1:
        print("Error: --count must be at least 1")
        sys.exit(1)

    try:
        batch = BatchGenerationRequest(
            requests=[
                GenerationRequest(system_class=args.system_class, seed=args.seed + i)
                for i in range(args.count)
            ],
            max_workers=args.workers,
        )
    except ValidationError as e:
        print(f"Error: invalid request: {e}")
        sys.exit(1)

    try:
        results = generate_batch(batch.requests, batch.max_workers)
    except SolarSystemGenerationError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if args.json:
        payload = [result_to_dict(r) for r in results]
        print(json.dumps(payload[0] if len(payload) == 1 else payload, indent=2, sort_keys=True))
        return

    for result in results:
        print(SystemSummaryResponse.from_result(result).summary_line())


if __name__ == "__main__":
    main()
