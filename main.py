"""
Rock Field - seeded asteroid field on a toroidal play area.

Usage:
    python main.py [--seed <int>] [--debug]
"""
import argparse
from game.engine import GameEngine
from game.sim.debug import set_debug


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Rock Field - seeded asteroid field on a toroidal play area"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Simulation seed (default: ROCKFIELD_SEED or 1)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print simulation debug lines"
    )
    return parser.parse_args()


def main():
    """Main entry point."""
    args = parse_args()
    if args.debug:
        set_debug(True)

    print("=" * 50)
    print("  Rock Field")
    print("=" * 50)
    print()
    print("Controls:")
    print("  Click     - Split the rock under the cursor")
    print("  P         - Pause")
    print("  R         - New field (reseed)")
    print("  Esc       - Quit")
    print()

    game = GameEngine(seed=args.seed)
    game.run()


if __name__ == "__main__":
    main()
