"""Command-line entry point: -g1 plays Flappy Bird, -g2 Space Invaders."""

import sys
from typing import Optional, Sequence

from termage.flappy_bird import run_flappy_bird
from termage.space_invaders import run_space_invaders


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game named by the first argument; unknown modes do nothing."""
    args = sys.argv[1:] if argv is None else list(argv)
    game = {"-g1": run_flappy_bird, "-g2": run_space_invaders}.get(args[0] if args else "-g1")
    if game is not None:
        game()
    return 0


if __name__ == "__main__":
    sys.exit(main())