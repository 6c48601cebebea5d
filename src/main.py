"""Entry point kept minimal by delegating to Engine.

Arrow keys move the player, Escape quits. Run with ``--seed`` for a
reproducible obstacle layout.
"""

import argparse

from config import SEED, SHOW_HUD, VERBOSE
from core.engine import Engine
from core.errors import SetupError
from core.scene import Finished


def parse_args(argv=None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Dodge the obstacles drifting in from the right")
    ap.add_argument(
        "--seed", type=int, default=SEED, help="Random seed (int); defaults to random"
    )
    ap.add_argument(
        "--no-hud", dest="show_hud", action="store_false", default=SHOW_HUD,
        help="Hide the running score",
    )
    ap.add_argument(
        "--verbose", action="store_true", default=VERBOSE, help="Log each spawn batch"
    )
    return ap.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        engine = Engine(seed=args.seed, show_hud=args.show_hud, verbose=args.verbose)
    except SetupError as e:
        print(f"[Engine] fatal: {e}")
        return 1
    outcome = engine.run()
    return 1 if outcome is Finished.ERROR else 0


if __name__ == "__main__":
    raise SystemExit(main())
