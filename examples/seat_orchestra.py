#!/usr/bin/env python3
"""
Example: Seat a small orchestra.

Walks through joining, moving, rejecting and leaving, printing the
seating chart and validation result at the end.

Usage:
    python examples/seat_orchestra.py
    python examples/seat_orchestra.py --config examples/orchestra.yaml --debug
"""

import argparse
import logging
from pathlib import Path

import yaml

from chuk_orchestra.constants import LOG_FORMAT, SectionType
from chuk_orchestra.models import Bassist, Cellist, OrchestraConfig, Violinist
from chuk_orchestra.orchestra import OrchestraManager, load_config, validate_orchestra


def main() -> None:
    """Seat a few musicians and show the result."""
    parser = argparse.ArgumentParser(description="Orchestra seating demo")
    parser.add_argument("--config", type=Path, help="YAML file with section capacities")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format=LOG_FORMAT,
    )

    config = load_config(args.config) if args.config else OrchestraConfig(
        violin_max=2, cello_max=3, bass_max=3
    )
    orchestra = OrchestraManager.from_config(config)

    print("Orchestra Seating")
    print("=" * 40)
    print(f"Total seats: {orchestra.count_total_seats()}")
    print()

    cellist = Cellist(name="Jacqueline")
    orchestra.join(Bassist(name="Edgar"), SectionType.BASS)
    orchestra.join(Bassist(name="Gary"), SectionType.VIOLIN)  # Not allowed
    orchestra.join(cellist, SectionType.CELLO)
    orchestra.join(cellist, SectionType.BASS)  # Moves
    orchestra.join(Violinist(name="Itzhak"), SectionType.VIOLIN)
    orchestra.join(Bassist(name="Ron"), SectionType.BASS)
    orchestra.join(Bassist(name="Scott"), SectionType.BASS)  # Section full

    print()
    print("Seating chart:")
    print(yaml.safe_dump(orchestra.seating_chart(), default_flow_style=False, sort_keys=False))

    print("Validation:")
    print(validate_orchestra(orchestra))


if __name__ == "__main__":
    main()
