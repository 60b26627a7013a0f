from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from tetrus import stats
from tetrus.ai import TetrisBot
from tetrus.game import GameConfig, Score, TetrisGame


logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tetrus", description="A falling-block puzzle game with an optional bot.")
    p.add_argument("--autoplay", action="store_true", help="Let the bot play")
    p.add_argument("--n-games", type=int, default=1, help="Number of games to play")
    p.add_argument("--speedup", type=int, default=None,
                   help="Speedup rate of the game clock (default: 10 with --autoplay, else 1)")
    p.add_argument("--no-screen", action="store_true",
                   help="Do not open a window; the bot plays without a clock")
    p.add_argument("--max-pieces", type=int, default=None, help="Stop headless games after this many pieces")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--verbose", action="store_true", help="Log every candidate placement the bot scores")
    return p


def play_game(args: argparse.Namespace, seed: Optional[int]) -> Score:
    config = GameConfig(random_seed=seed, max_pieces=args.max_pieces)
    bot = TetrisBot() if args.autoplay else None
    game = TetrisGame(config, bot=bot)
    if args.no_screen:
        return game.play_headless()

    from tetrus.visualization.play import run

    return run(game, speedup=args.speedup)


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.no_screen and not args.autoplay:
        parser.error("--no-screen requires --autoplay")
    if args.n_games < 1:
        parser.error("--n-games must be at least 1")
    if args.speedup is None:
        args.speedup = 10 if args.autoplay else 1
    setup_logging(args.verbose)

    scores: List[Score] = []
    for i in range(args.n_games):
        logger.info("Game %d/%d", i + 1, args.n_games)
        seed = None if args.seed is None else args.seed + i
        scores.append(play_game(args, seed))

    print(f"Summary stats over {args.n_games} games:")
    print(f"Average score: {stats.summarize([s.points for s in scores])}")
    print(f"Average number of lines cleared: {stats.summarize([s.total_lines_cleared for s in scores])}")
    print(f"Average level attained: {stats.summarize([s.level for s in scores])}")


if __name__ == "__main__":  # pragma: no cover
    main()
