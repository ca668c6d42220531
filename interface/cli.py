import argparse
import logging
import time

from negamate.config import CONFIG
from negamate.core.errors import NoMovesError
from negamate.core.evaluator import Evaluator
from negamate.core.search import MATE_SCORE
from negamate.core.utils import print_info, progress_bar
from negamate.main import Engine


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="negamate", description=f"{CONFIG.ui.engine_name} search engine")
    parser.add_argument("--depth", type=int, default=CONFIG.search.depth, help="plies searched below each root move")
    parser.add_argument("--workers", type=int, default=CONFIG.search.workers, help="parallel root-move workers")
    parser.add_argument("--fen", default=None, help="start from this position instead of the initial one")
    parser.add_argument("--play", type=int, default=0, help="let the engine play this many plies against itself")
    parser.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=CONFIG.log_level, format="%(levelname)s %(name)s: %(message)s")

    engine = Engine(depth=args.depth, workers=args.workers)
    if args.fen:
        engine.set_fen(args.fen)
    show_progress = CONFIG.ui.show_progress and not args.no_progress
    evaluator = Evaluator()

    for _ in range(max(1, args.play)):
        engine.print_board()
        print("----------------------------")
        print(f"Heuristic Score: {evaluator.evaluate(engine.board):.2f}")
        start = time.time()
        try:
            result = engine.get_best_move(progress=progress_bar if show_progress else None)
        except NoMovesError as e:
            print(f"Game Over: {e}")
            return 0
        print("Best Move is:")
        print_info(args.depth, result.move, result.score, result.nodes, time.time() - start, MATE_SCORE)
        if not args.play:
            break
        engine.make_move(result.move.uci())
        if engine.board.king_captured():
            engine.print_board()
            print("Game Over: king captured")
            break
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
